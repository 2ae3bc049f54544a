"""Streamlit UI: project form, project lists and their wiring."""
