import streamlit as st
from ui_lib.state.session import ensure
from ui_lib.clients import arise
from ui_lib.utils import join_csv, split_csv

LOCATIONS = ["Work from Home", "In-office", "Hybrid"]
DURATIONS = ["1 Month", "2 Months", "3 Months", "6 Months"]
STIPENDS = ["Any", "Paid", "10k+", "20k+"]

def page():
    ensure()
    st.header("Skills & Preferences Assessment")

    if st.session_state["assessment"] is None:
        try:
            st.session_state["assessment"] = arise.get_assessment() or {}
        except Exception as ex:
            st.error(f"Failed to load your assessment: {ex}")
            st.session_state["assessment"] = {}
    current = st.session_state["assessment"]

    with st.form("assessment"):
        col1, col2 = st.columns(2)
        with col1:
            skills = st.text_area("Skills (comma separated) *", value=join_csv(current.get("skills")))
            interests = st.text_input("Interests", value=join_csv(current.get("interests")))
            qualification = st.text_input("Qualification", value=current.get("qualification") or "")
            field_of_study = st.text_input("Field of study", value=current.get("field_of_study") or "")
            sectors = st.text_input("Preferred sectors", value=join_csv(current.get("preferred_sectors")))
        with col2:
            location = st.selectbox("Location preference", LOCATIONS,
                                    index=LOCATIONS.index(current.get("location_preference") or "Hybrid"))
            states = st.text_input("Preferred states", value=join_csv(current.get("state_preference")))
            cities = st.text_input("Preferred cities", value=join_csv(current.get("city_preference")))
            duration = st.selectbox("Duration", DURATIONS,
                                    index=DURATIONS.index(current.get("duration_preference") or "3 Months"))
            stipend = st.selectbox("Stipend expectation", STIPENDS,
                                   index=STIPENDS.index(current.get("stipend_expectation") or "Any"))
        submitted = st.form_submit_button("Save assessment")

    if submitted:
        if not split_csv(skills):
            st.warning("Add at least one skill to get personalised recommendations.")
        payload = {
            "skills": split_csv(skills),
            "interests": split_csv(interests),
            "qualification": qualification or None,
            "field_of_study": field_of_study or None,
            "preferred_sectors": split_csv(sectors),
            "location_preference": location,
            "state_preference": split_csv(states),
            "city_preference": split_csv(cities),
            "duration_preference": duration,
            "stipend_expectation": stipend,
        }
        try:
            st.session_state["assessment"] = arise.submit_assessment(payload)
            st.session_state["recommendations"] = None
            st.success("Assessment saved. Open the Recommendations page to see your matches.")
        except Exception as ex:
            st.error(f"Failed to save assessment: {ex}")

page()
