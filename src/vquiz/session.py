import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional, Tuple

from .config import settings
from .models import Command, Event, QuizState, QuizView
from .quiz import initial_state, transition, view

logger = logging.getLogger(__name__)

FocusHandler = Callable[[str], None]


class QuizSession:
    """
    Single owner of one quiz's state. Each dispatch runs one transition to
    completion before the next event is looked at.
    """

    def __init__(self, focus_handler: Optional[FocusHandler] = None):
        self.state: QuizState = initial_state()
        self.created_at = datetime.now()
        self.focus_handler = focus_handler

    def dispatch(self, event: Event) -> Tuple[QuizView, Command]:
        previous = self.state.screen
        self.state, command = transition(self.state, event)

        if self.state.screen != previous:
            logger.info(
                f"{event.type}: {previous.value} -> {self.state.screen.value} "
                f"[Question: {self.state.question_number}]"
            )
        else:
            logger.debug(f"{event.type} on {previous.value}")

        if command == Command.FOCUS_INPUT:
            self._request_focus()
        return view(self.state), command

    def view(self) -> QuizView:
        return view(self.state)

    def _request_focus(self):
        if self.focus_handler is None:
            return
        try:
            self.focus_handler(settings.INPUT_FIELD_ID)
        except Exception as e:
            logger.warning(f"Focus request for {settings.INPUT_FIELD_ID} failed: {e}")


class SessionStore:
    """In-memory quiz sessions keyed by cookie id, expired after a timeout."""

    def __init__(self, timeout_minutes: int = settings.SESSION_TIMEOUT_MINUTES):
        self.timeout = timedelta(minutes=timeout_minutes)
        self.sessions: Dict[str, QuizSession] = {}

    def create(self) -> Tuple[str, QuizSession]:
        self.purge_expired()
        new_id = str(uuid.uuid4())
        session = QuizSession()
        self.sessions[new_id] = session
        logger.info(f"New session: {new_id}")
        return new_id, session

    def purge_expired(self):
        cutoff = datetime.now() - self.timeout
        expired = [
            sid for sid, session in self.sessions.items() if session.created_at < cutoff
        ]
        for sid in expired:
            del self.sessions[sid]
        if expired:
            logger.info(f"Purged {len(expired)} expired session(s)")

    def get(self, session_id: Optional[str]) -> Optional[QuizSession]:
        if not session_id or session_id not in self.sessions:
            return None
        session = self.sessions[session_id]
        if datetime.now() - session.created_at > self.timeout:
            del self.sessions[session_id]
            logger.info(f"Session expired: {session_id}")
            return None
        return session

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, QuizSession]:
        session = self.get(session_id)
        if session is None:
            return self.create()
        return session_id, session

    def discard(self, session_id: Optional[str]):
        self.sessions.pop(session_id, None)
