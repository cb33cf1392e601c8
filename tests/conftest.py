"""Shared fixtures for the vquiz test suite."""

import pytest
from fastapi.testclient import TestClient

from vquiz.config import settings
from vquiz.globals import session_store
from vquiz.models import InputChanged, StartQuiz, Submit
from vquiz.quiz import initial_state, transition


@pytest.fixture
def fresh_state():
    """Quiz sitting on the start screen."""
    return initial_state()


@pytest.fixture
def first_question(fresh_state):
    """Quiz showing question 1 (comer)."""
    state, _ = transition(fresh_state, StartQuiz())
    return state


@pytest.fixture
def first_result(first_question):
    """Quiz showing the result of a correct first answer."""
    state, _ = transition(first_question, InputChanged(text="comer"))
    state, _ = transition(state, Submit())
    return state


@pytest.fixture
def client(tmp_path, monkeypatch):
    """TestClient against a fresh app, logging into a temp dir."""
    from vquiz.app import create_app

    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    session_store.sessions.clear()
    with TestClient(create_app()) as c:
        yield c
    session_store.sessions.clear()
