import streamlit as st
from ui_lib.state.session import ensure
from ui_lib.clients import arise
from ui_lib.components.widgets import role_card

def page():
    ensure()
    st.header("Recommended Internships")

    if st.button("🔄 Refresh recommendations"):
        st.session_state["recommendations"] = None

    if st.session_state["recommendations"] is None:
        with st.spinner("Finding the best roles for you…"):
            try:
                st.session_state["recommendations"] = arise.recommendations()
            except Exception as ex:
                st.error(f"Failed to load recommendations: {ex}")
                st.stop()

    roles = st.session_state["recommendations"] or []
    if not roles:
        st.info("No roles in the catalog yet.")
        st.stop()
    if all(r.get("score") is None for r in roles) and not (st.session_state.get("assessment") or {}).get("skills"):
        st.caption("Showing the latest postings. Complete the assessment for personalised matches.")

    for i, role in enumerate(roles, start=1):
        role_card(role, i)

page()
