"""Tests for QuizSession dispatch and the in-memory SessionStore."""

from datetime import datetime, timedelta

from vquiz.config import settings
from vquiz.models import Command, ContinuePressed, InputChanged, Screen, StartQuiz, Submit, TimerTick
from vquiz.session import QuizSession, SessionStore


class TestQuizSession:
    def test_dispatch_replaces_state_and_returns_view(self):
        session = QuizSession()
        snapshot, command = session.dispatch(StartQuiz())
        assert command == Command.FOCUS_INPUT
        assert snapshot.screen == Screen.QUESTION_FORM
        assert session.state.question_number == 1

    def test_focus_handler_receives_input_field_id(self):
        calls = []
        session = QuizSession(focus_handler=calls.append)
        session.dispatch(StartQuiz())
        session.dispatch(InputChanged(text="comer"))
        session.dispatch(Submit())
        assert calls == [settings.INPUT_FIELD_ID]

    def test_focus_failure_is_swallowed(self, caplog):
        def broken_focus(element_id):
            raise LookupError(f"no element {element_id}")

        session = QuizSession(focus_handler=broken_focus)
        snapshot, command = session.dispatch(StartQuiz())

        assert command == Command.FOCUS_INPUT
        assert snapshot.screen == Screen.QUESTION_FORM
        assert session.state.question_number == 1
        assert "Focus request" in caplog.text

    def test_ticks_only_move_result_screen(self):
        session = QuizSession()
        session.dispatch(TimerTick())
        assert session.state.screen == Screen.START
        session.dispatch(StartQuiz())
        session.dispatch(Submit())
        session.dispatch(TimerTick())
        assert session.state.question_number == 2
        session.dispatch(TimerTick())
        assert session.state.question_number == 2

    def test_continue_on_question_form_is_ignored(self):
        session = QuizSession()
        session.dispatch(StartQuiz())
        before = session.state
        session.dispatch(ContinuePressed())
        assert session.state == before


class TestSessionStore:
    def test_create_and_get(self):
        store = SessionStore()
        session_id, session = store.create()
        assert store.get(session_id) is session

    def test_unknown_or_missing_id(self):
        store = SessionStore()
        assert store.get(None) is None
        assert store.get("nope") is None

    def test_expired_session_is_dropped(self):
        store = SessionStore(timeout_minutes=5)
        session_id, session = store.create()
        session.created_at = datetime.now() - timedelta(minutes=6)
        assert store.get(session_id) is None
        assert session_id not in store.sessions

    def test_get_or_create_replaces_missing(self):
        store = SessionStore()
        session_id, session = store.get_or_create("stale-id")
        assert session_id != "stale-id"
        assert store.get_or_create(session_id) == (session_id, session)

    def test_discard(self):
        store = SessionStore()
        session_id, _ = store.create()
        store.discard(session_id)
        store.discard(None)
        assert store.sessions == {}

    def test_create_purges_expired_sessions(self):
        store = SessionStore(timeout_minutes=5)
        stale_ids = [store.create()[0] for _ in range(5)]
        live_id, _ = store.create()
        for stale_id in stale_ids:
            store.sessions[stale_id].created_at = datetime.now() - timedelta(minutes=10)

        new_id, _ = store.create()

        assert set(store.sessions) == {live_id, new_id}
