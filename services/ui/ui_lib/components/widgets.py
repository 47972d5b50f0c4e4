# ui_lib/components/widgets.py
from typing import Any, Mapping
import streamlit as st
from ui_lib.clients import arise
from ui_lib.utils import score_label

__all__ = ["role_card", "resource_links"]

@st.cache_data(ttl=300)
def _resource(skill: str) -> dict | None:
    return arise.skill_resource(skill)

def resource_links(skill: str):
    """Learning links for one missing skill (YouTube / docs / practice)."""
    try:
        res = _resource(skill)
    except Exception as ex:
        st.caption(f"{skill}: resources unavailable ({ex})")
        return
    if not res:
        st.markdown(f"- **{skill}** – no resources yet")
        return
    links = [(label, res.get(key)) for label, key in
             (("Video", "youtube_link"), ("Docs", "docs_link"), ("Practice", "practice_link"))]
    parts = " · ".join(f"[{label}]({url})" for label, url in links if url)
    st.markdown(f"- **{skill}** – {parts or 'no links'}")

def role_card(role: Mapping[str, Any], rank: int):
    """One recommended role with optional score and missing-skill hints."""
    with st.container(border=True):
        st.markdown(f"### {rank}. {role.get('title', '')}")
        st.caption(f"{role.get('company', '')} · {role.get('location') or 'Location TBD'} · "
                   f"{role.get('duration') or ''} · {role.get('stipend') or 'Unpaid'}")
        st.markdown(f"**{score_label(role.get('score'))}**")
        if role.get("description"):
            st.write(role["description"])
        skills = role.get("skills_required") or []
        if skills:
            st.markdown("Skills: " + ", ".join(f"`{s}`" for s in skills))
        missing = role.get("missing_skills") or []
        if missing:
            with st.expander(f"Skills to learn ({len(missing)})"):
                for skill in missing:
                    resource_links(skill)
        if role.get("apply_link") and role["apply_link"] != "#":
            st.link_button("Apply", role["apply_link"])
