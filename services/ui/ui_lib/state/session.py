import streamlit as st

DEFAULTS = {
    "user_id": None,
    "assessment": None,
    "recommendations": None,
    "chat_history": [],   # [(role, content)], kept client-side only
}

def ensure():
    for k, v in DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = list(v) if isinstance(v, list) else v

def reset_chat():
    st.session_state["chat_history"] = []
