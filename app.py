"""
Project Board — Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so configured bounds and log settings are used
from project_board.utils.config import load_config, app_title, log_level, log_file
load_config()

from project_board.services.project_state import ListenerError
from project_board.ui.board import get_board, render_sidebar
from project_board.ui.project_input import render_project_input
from project_board.utils.logger import setup_logger, get_logger

setup_logger("project_board", level=log_level(), log_file=log_file())
log = get_logger()

st.set_page_config(page_title=app_title(), layout="wide")
st.title(app_title())

# One board (store + lists) per process, shared by every session
board = get_board()

try:
    render_project_input(board.state, board.rules)
except ListenerError as e:
    log.error("Project stored but a view failed to update: %s", e)
    st.warning("Project added, but a list failed to refresh.")

render_sidebar(board)

col1, col2 = st.columns(2)
with col1:
    board.active_list.render()
with col2:
    board.finished_list.render()
