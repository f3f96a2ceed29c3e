# frontend/state.py
"""
Session state for the review form.

The form's fields live in one immutable ``ReviewState`` snapshot. Every
change goes through ``reduce(state, action)`` which returns a new snapshot,
so the review / error / busy exclusivity is checked on every transition.

Submissions carry a request id. A response whose id is not the pending one
(the user cleared the form or started a newer request) is dropped.
"""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_LANGUAGE = "javascript"


class ReviewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_text: str = ""
    language: str = DEFAULT_LANGUAGE
    file_name: Optional[str] = None
    review: Optional[str] = None
    error: Optional[str] = None
    is_busy: bool = False
    pending_request: Optional[str] = None

    @model_validator(mode="after")
    def _one_outcome_at_most(self) -> "ReviewState":
        outcomes = [self.review is not None, self.error is not None, self.is_busy]
        if sum(outcomes) > 1:
            raise ValueError("review, error and is_busy are mutually exclusive")
        if self.is_busy != (self.pending_request is not None):
            raise ValueError("pending_request must be set exactly while busy")
        return self


# --------- Actions ----------
class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class FileLoaded(_Action):
    file_name: str
    source_text: str
    language: str


class CodeEdited(_Action):
    source_text: str


class LanguageSelected(_Action):
    language: str


class ValidationFailed(_Action):
    message: str


class SubmitStarted(_Action):
    request_id: str


class SubmitSucceeded(_Action):
    request_id: str
    review: str


class SubmitFailed(_Action):
    request_id: str
    message: str


class Cleared(_Action):
    pass


Action = Union[
    FileLoaded,
    CodeEdited,
    LanguageSelected,
    ValidationFailed,
    SubmitStarted,
    SubmitSucceeded,
    SubmitFailed,
    Cleared,
]

_IDLE = {"review": None, "error": None, "is_busy": False, "pending_request": None}


def _with(state: ReviewState, **changes) -> ReviewState:
    # model_copy skips validation; rebuilding keeps the invariant checked
    return ReviewState(**{**state.model_dump(), **changes})


def reduce(state: ReviewState, action: Action) -> ReviewState:
    if isinstance(action, FileLoaded):
        # A new upload supersedes whatever was shown, including a pending request
        return _with(
            state,
            **_IDLE,
            file_name=action.file_name,
            source_text=action.source_text,
            language=action.language,
        )
    if isinstance(action, CodeEdited):
        return _with(state, source_text=action.source_text)
    if isinstance(action, LanguageSelected):
        return _with(state, language=action.language)
    if isinstance(action, ValidationFailed):
        return _with(state, **{**_IDLE, "error": action.message})
    if isinstance(action, SubmitStarted):
        return _with(state, **{**_IDLE, "is_busy": True, "pending_request": action.request_id})
    if isinstance(action, SubmitSucceeded):
        if action.request_id != state.pending_request:
            return state
        return _with(state, **{**_IDLE, "review": action.review})
    if isinstance(action, SubmitFailed):
        if action.request_id != state.pending_request:
            return state
        return _with(state, **{**_IDLE, "error": action.message})
    if isinstance(action, Cleared):
        return ReviewState(language=state.language)
    raise TypeError(f"unknown action: {action!r}")


# --------- Rendering ----------
class Panel(str, Enum):
    ERROR = "error"
    LOADING = "loading"
    REVIEW = "review"
    EMPTY = "empty"


def panel_for(state: ReviewState) -> Panel:
    """Which result panel the form shows for ``state``."""
    if state.error is not None:
        return Panel.ERROR
    if state.is_busy:
        return Panel.LOADING
    if state.review is not None:
        return Panel.REVIEW
    return Panel.EMPTY
