# ui_lib/components/chat.py
from __future__ import annotations
import streamlit as st
from ui_lib.clients import arise
from ui_lib.state.session import reset_chat

__all__ = ["render_chat"]

QUICK_PROMPTS = {
    "📝 Resume tips": "How can I make my resume stand out for internship applications?",
    "🎯 Interview prep": "What are the most common internship interview questions and how should I answer them?",
    "🧭 Career paths": "Based on typical student skills, which tech career paths are growing fastest in India?",
}

def _send(text: str):
    history = st.session_state["chat_history"]
    reply = arise.chat(text, history)
    history.append(("user", text))
    history.append(("assistant", reply))

def render_chat():
    """Chat pane; history lives in the Streamlit session only."""
    st.subheader("Career assistant")

    if st.button("🧹 Reset Chat History"):
        reset_chat()
        st.rerun()

    st.caption("💡 Quick prompts")
    cols = st.columns(len(QUICK_PROMPTS))
    for i, (label, msg) in enumerate(QUICK_PROMPTS.items()):
        if cols[i].button(label, key=f"qp_{i}"):
            try:
                _send(msg)
                st.rerun()
            except Exception as ex:
                st.error(f"Failed to send prompt: {ex}")

    for role, msg in st.session_state["chat_history"]:
        with st.chat_message(role):
            st.markdown(msg)

    user_text = st.chat_input("Ask about careers, resumes, interviews…")
    if user_text:
        try:
            _send(user_text)
            st.rerun()
        except Exception as ex:
            st.error(f"Failed to send message: {ex}")
