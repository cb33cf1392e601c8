from typing import FrozenSet, List, Tuple

from .models import (
    AnswerRecord,
    Command,
    ContinuePressed,
    Correct,
    EnterKeyPressed,
    Event,
    Incorrect,
    InputChanged,
    QuizState,
    QuizView,
    RetakePressed,
    Scorecard,
    ScorecardRow,
    Screen,
    StartQuiz,
    Submit,
    TimerTick,
    Verb,
)
from .vocabulary import SEED_VERBS

TICK = "tick"


# --- State construction ---
def initial_state() -> QuizState:
    """Fresh quiz: seed verbs queued, nothing answered, start screen."""
    return QuizState(screen=Screen.START, remaining_verbs=SEED_VERBS)


# --- Core Logic Functions ---
def check_answer(submitted_text: str, question_number: int, verb: Verb) -> AnswerRecord:
    """Case-insensitive exact match against the Spanish form."""
    if submitted_text.lower() == verb.in_spanish.lower():
        return Correct(question_number=question_number, verb=verb)
    return Incorrect(
        question_number=question_number, submitted_text=submitted_text, verb=verb
    )


def advance(state: QuizState) -> QuizState:
    """
    Draws the next verb off the queue, or moves to the score card once the
    queue is empty. Shared by the timer and the continue button.
    """
    if not state.remaining_verbs:
        return state.model_copy(
            update={"screen": Screen.SCORE_CARD, "current_verb": None}
        )

    head, *rest = state.remaining_verbs
    return state.model_copy(
        update={
            "screen": Screen.QUESTION_FORM,
            "remaining_verbs": tuple(rest),
            "current_verb": head,
            "question_number": state.question_number + 1,
            "current_input_text": "",
        }
    )


def _score_current(state: QuizState) -> QuizState:
    record = check_answer(
        state.current_input_text, state.question_number, state.current_verb
    )
    return state.model_copy(
        update={
            "screen": Screen.RESULT_SCREEN,
            "answers": (record,) + state.answers,
            "current_input_text": "",
        }
    )


def transition(state: QuizState, event: Event) -> Tuple[QuizState, Command]:
    """
    Pure reducer: consumes one event and returns the next state together with
    the side-effect request for the renderer. Events that do not apply to the
    current screen leave the state untouched.
    """
    screen = state.screen

    if screen == Screen.START:
        if isinstance(event, StartQuiz):
            return advance(state), Command.FOCUS_INPUT

    elif screen == Screen.QUESTION_FORM:
        if isinstance(event, InputChanged):
            return state.model_copy(update={"current_input_text": event.text}), Command.NONE
        if isinstance(event, Submit):
            return _score_current(state), Command.NONE
        if isinstance(event, EnterKeyPressed):
            return _score_current(state), Command.FOCUS_INPUT

    elif screen == Screen.RESULT_SCREEN:
        if isinstance(event, TimerTick):
            return advance(state), Command.NONE
        if isinstance(event, ContinuePressed):
            return advance(state), Command.FOCUS_INPUT

    elif screen == Screen.SCORE_CARD:
        if isinstance(event, RetakePressed):
            return initial_state(), Command.NONE

    return state, Command.NONE


def subscriptions(state: QuizState) -> FrozenSet[str]:
    """What the renderer should be listening to for the given state."""
    if state.screen == Screen.RESULT_SCREEN:
        return frozenset({TICK})
    return frozenset()


# --- Aggregation ---
def scorecard(state: QuizState) -> Scorecard:
    correct_count = sum(1 for a in state.answers if isinstance(a, Correct))
    total_count = len(state.answers)

    rows: List[ScorecardRow] = [
        ScorecardRow(
            question_number=a.question_number,
            submitted_text=a.submitted_text,
            correct_text=a.verb.in_spanish,
        )
        for a in reversed(state.answers)
        if isinstance(a, Incorrect)
    ]
    return Scorecard(
        correct_count=correct_count,
        total_count=total_count,
        all_correct=correct_count == total_count,
        rows=rows,
    )


def view(state: QuizState) -> QuizView:
    """Read-only snapshot handed to the renderer."""
    card = scorecard(state)
    return QuizView(
        screen=state.screen,
        question_number=state.question_number,
        total_questions=len(SEED_VERBS),
        current_verb_english_gloss=(
            state.current_verb.in_english if state.current_verb else ""
        ),
        current_input_text=state.current_input_text,
        most_recent_answer=state.answers[0] if state.answers else None,
        scorecard_rows=card.rows,
        correct_count=card.correct_count,
        total_count=card.total_count,
        subscriptions=sorted(subscriptions(state)),
    )
