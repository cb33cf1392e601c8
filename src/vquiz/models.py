from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# --- Vocabulary ---
class Verb(BaseModel):
    model_config = ConfigDict(frozen=True)

    in_spanish: str
    in_english: str


# --- Answer history ---
class Correct(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["correct"] = "correct"
    question_number: int
    verb: Verb


class Incorrect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["incorrect"] = "incorrect"
    question_number: int
    submitted_text: str
    verb: Verb


AnswerRecord = Annotated[Union[Correct, Incorrect], Field(discriminator="kind")]


# --- Quiz state ---
class Screen(str, Enum):
    START = "start"
    QUESTION_FORM = "question_form"
    RESULT_SCREEN = "result_screen"
    SCORE_CARD = "score_card"


class Command(str, Enum):
    """Side-effect request handed back to the renderer."""

    NONE = "none"
    FOCUS_INPUT = "focus_input"


class QuizState(BaseModel):
    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.START
    remaining_verbs: Tuple[Verb, ...] = ()
    current_verb: Optional[Verb] = None
    answers: Tuple[AnswerRecord, ...] = ()  # newest first
    current_input_text: str = ""
    question_number: int = 0


# --- Events ---
class StartQuiz(BaseModel):
    type: Literal["start_quiz"] = "start_quiz"


class InputChanged(BaseModel):
    type: Literal["input_changed"] = "input_changed"
    text: str


class Submit(BaseModel):
    type: Literal["submit"] = "submit"


class EnterKeyPressed(BaseModel):
    type: Literal["enter_key_pressed"] = "enter_key_pressed"


class TimerTick(BaseModel):
    type: Literal["timer_tick"] = "timer_tick"


class ContinuePressed(BaseModel):
    type: Literal["continue_pressed"] = "continue_pressed"


class RetakePressed(BaseModel):
    type: Literal["retake_pressed"] = "retake_pressed"


Event = Annotated[
    Union[
        StartQuiz,
        InputChanged,
        Submit,
        EnterKeyPressed,
        TimerTick,
        ContinuePressed,
        RetakePressed,
    ],
    Field(discriminator="type"),
]

event_adapter = TypeAdapter(Event)


# --- Renderer snapshot ---
class ScorecardRow(BaseModel):
    question_number: int
    submitted_text: str
    correct_text: str


class Scorecard(BaseModel):
    correct_count: int
    total_count: int
    all_correct: bool
    rows: List[ScorecardRow]


class QuizView(BaseModel):
    screen: Screen
    question_number: int
    total_questions: int
    current_verb_english_gloss: str
    current_input_text: str
    most_recent_answer: Optional[AnswerRecord] = None
    scorecard_rows: List[ScorecardRow]
    correct_count: int
    total_count: int
    subscriptions: List[str]


class EventResult(BaseModel):
    view: QuizView
    command: Command
