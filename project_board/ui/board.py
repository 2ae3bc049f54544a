"""
Application wiring: one ProjectState, the input rules and the two lists.

Streamlit reruns the whole script on every interaction, so the board is built
once per process through `st.cache_resource` and shared by every session.
Building it inside the script body would register a fresh pair of listeners
on every rerun.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from project_board.domains.projects.ids import IdGenerator, id_generator_from_config
from project_board.services.project_state import ProjectState
from project_board.ui.project_input import InputRules
from project_board.ui.project_list import ProjectList
from project_board.utils.logger import get_logger

logger = get_logger()


@dataclass
class ProjectBoard:
    state: ProjectState
    rules: InputRules
    active_list: ProjectList
    finished_list: ProjectList


def build_board(
    id_generator: Optional[IdGenerator] = None,
    rules: Optional[InputRules] = None,
) -> ProjectBoard:
    state = ProjectState(id_generator=id_generator)
    board = ProjectBoard(
        state=state,
        rules=rules or InputRules(),
        active_list=ProjectList(state, "active"),
        finished_list=ProjectList(state, "finished"),
    )
    logger.info("Project board ready (%d listeners)", state.listener_count)
    return board


@st.cache_resource
def get_board() -> ProjectBoard:
    """The process-wide board. Every call returns the same instance."""
    return build_board(
        id_generator=id_generator_from_config(),
        rules=InputRules.from_config(),
    )


def render_sidebar(board: ProjectBoard, st=st) -> None:
    """Settings and store size. Call after the form so a submit on this run is counted."""
    with st.sidebar:
        st.header("Settings")
        st.caption(
            f"Description: at least **{board.rules.description_min_length}** characters · "
            f"People: **{board.rules.people_min}–{board.rules.people_max}**"
        )
        st.caption(f"Projects stored: **{len(board.state.projects)}**")
