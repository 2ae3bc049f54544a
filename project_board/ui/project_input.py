"""Project input form: builds descriptors from raw fields, validates, submits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from project_board.domains.projects.models import Project
from project_board.domains.validation.validator import (
    NumberInput,
    TextInput,
    check,
    coerce_number,
)
from project_board.services.project_state import ProjectState
from project_board.utils.config import description_min_length, people_max, people_min
from project_board.utils.logger import get_logger

logger = get_logger()

INVALID_INPUT_MESSAGE = "Invalid input, please try again!"


@dataclass(frozen=True)
class InputRules:
    description_min_length: int = 5
    people_min: int = 1
    people_max: int = 5

    @classmethod
    def from_config(cls) -> "InputRules":
        return cls(
            description_min_length=description_min_length(),
            people_min=people_min(),
            people_max=people_max(),
        )


def build_descriptors(
    title: str,
    description: str,
    people_raw: str,
    rules: InputRules,
) -> dict[str, TextInput | NumberInput]:
    """One descriptor per form field, keyed by field name."""
    return {
        "title": TextInput(title, required=True),
        "description": TextInput(
            description,
            required=True,
            min_length=rules.description_min_length,
        ),
        "people": NumberInput(
            coerce_number(people_raw),
            required=True,
            min=rules.people_min,
            max=rules.people_max,
        ),
    }


def gather_user_input(
    title: str,
    description: str,
    people_raw: str,
    rules: Optional[InputRules] = None,
) -> tuple[str, str, int] | None:
    """Return (title, description, people) when every field passes, else None."""
    rules = rules or InputRules()
    descriptors = build_descriptors(title, description, people_raw, rules)
    violations: dict[str, list[str]] = {}
    for field, descriptor in descriptors.items():
        result = check(descriptor)
        if not result:
            violations[field] = sorted(result.violations)
    if violations:
        logger.info("Rejected project input: %s", violations)
        return None
    return title, description, int(descriptors["people"].value)


def submit_project(
    state: ProjectState,
    title: str,
    description: str,
    people_raw: str,
    rules: Optional[InputRules] = None,
) -> Project | None:
    """Validate raw form values and add the project. None when input is rejected."""
    user_input = gather_user_input(title, description, people_raw, rules)
    if user_input is None:
        return None
    return state.add_project(*user_input)


def render_project_input(
    state: ProjectState,
    rules: Optional[InputRules] = None,
    st=st,
) -> Project | None:
    """Render the project form. clear_on_submit empties the fields after each submit."""
    rules = rules or InputRules()
    with st.form("user-input", clear_on_submit=True):
        title = st.text_input("Title", key="title")
        description = st.text_area("Description", key="description")
        people_raw = st.text_input(
            "People",
            key="people",
            help=f"Between {rules.people_min} and {rules.people_max}",
        )
        submitted = st.form_submit_button("ADD PROJECT")

    if not submitted:
        return None
    project = submit_project(state, title, description, people_raw, rules)
    if project is None:
        st.error(INVALID_INPUT_MESSAGE)
    return project
