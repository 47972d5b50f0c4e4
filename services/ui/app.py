import streamlit as st
from ui_lib.config import ARISE_USER_ID
from ui_lib.state.session import ensure

def _sidebar_status():
    st.header("Your session")
    state = st.session_state
    st.write(f"Student: `{state.get('user_id') or ARISE_USER_ID}`")
    assessment = state.get("assessment") or {}
    st.write(f"Assessment: **{'done' if assessment.get('skills') else 'pending'}**")

def main():
    st.set_page_config(page_title="Arise – Career Guidance", layout="wide")
    ensure()
    st.title("Arise – Internship & Career Guidance")
    st.write("Complete the assessment, then check your recommended internships and chat with the career assistant.")
    with st.sidebar:
        _sidebar_status()
        st.markdown("---")
        st.caption("Switch pages from the left sidebar menu (Streamlit multipage).")

if __name__ == "__main__":
    main()
