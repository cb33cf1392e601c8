import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Cookie, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import ValidationError

from .config import settings
from .globals import session_store, templates
from .models import (
    Command,
    ContinuePressed,
    EnterKeyPressed,
    EventResult,
    InputChanged,
    QuizView,
    RetakePressed,
    StartQuiz,
    Submit,
    event_adapter,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Dependencies ---
def get_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> Optional[str]:
    return session_id


def _set_cookie(response: Response, session_id: str):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        httponly=True,
        samesite="Lax",
    )


def _redirect_home(session_id: str, command: Command) -> RedirectResponse:
    url = "/?focus=1" if command == Command.FOCUS_INPUT else "/"
    redirect = RedirectResponse(url=url, status_code=303)
    _set_cookie(redirect, session_id)
    return redirect


# --- Page routes ---
@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    focus: bool = False,
    session_id: Optional[str] = Depends(get_session_id),
):
    session_id, session = session_store.get_or_create(session_id)
    response = templates.TemplateResponse(
        request,
        "quiz.html",
        {
            "view": session.view(),
            "focus": focus,
            "input_field_id": settings.INPUT_FIELD_ID,
            "tick_ms": settings.TICK_SECONDS * 1000,
        },
    )
    _set_cookie(response, session_id)
    return response


@router.post("/start")
async def start_quiz(session_id: Optional[str] = Depends(get_session_id)):
    session_id, session = session_store.get_or_create(session_id)
    _, command = session.dispatch(StartQuiz())
    return _redirect_home(session_id, command)


@router.post("/submit")
async def submit_answer(
    answer: str = Form(""),
    via: str = Form("button"),
    session_id: Optional[str] = Depends(get_session_id),
):
    """
    The form carries the typed text, so it is replayed as an input change
    before the submit itself. Enter-key submits are flagged by the page script.
    """
    session_id, session = session_store.get_or_create(session_id)
    session.dispatch(InputChanged(text=answer))
    submit_event = EnterKeyPressed() if via == "enter" else Submit()
    _, command = session.dispatch(submit_event)
    return _redirect_home(session_id, command)


@router.post("/continue")
async def continue_quiz(session_id: Optional[str] = Depends(get_session_id)):
    session_id, session = session_store.get_or_create(session_id)
    _, command = session.dispatch(ContinuePressed())
    return _redirect_home(session_id, command)


@router.post("/retake")
async def retake_quiz(session_id: Optional[str] = Depends(get_session_id)):
    session_id, session = session_store.get_or_create(session_id)
    _, command = session.dispatch(RetakePressed())
    return _redirect_home(session_id, command)


# --- API routes ---
@router.get("/api/state", response_model=QuizView)
async def get_state(
    response: Response, session_id: Optional[str] = Depends(get_session_id)
):
    session_id, session = session_store.get_or_create(session_id)
    _set_cookie(response, session_id)
    return session.view()


@router.post("/api/events", response_model=EventResult)
async def post_event(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    session_id: Optional[str] = Depends(get_session_id),
):
    try:
        event = event_adapter.validate_python(payload)
    except ValidationError as e:
        logger.warning(f"Rejected event payload {payload}: {e.error_count()} error(s)")
        return JSONResponse({"error": "Invalid event"}, status_code=422)

    session_id, session = session_store.get_or_create(session_id)
    quiz_view, command = session.dispatch(event)
    _set_cookie(response, session_id)
    return EventResult(view=quiz_view, command=command)


@router.post("/api/reset")
async def reset_session(
    response: Response, session_id: Optional[str] = Depends(get_session_id)
):
    session_store.discard(session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"status": "success"}
