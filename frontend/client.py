# frontend/client.py
import os
import uuid
from typing import Callable, Optional

import requests

from backend.reviewer import EMPTY_CODE_MESSAGE, FAILED_REVIEW_MESSAGE
from frontend.state import (
    ReviewState,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    ValidationFailed,
    reduce,
)

API = os.getenv("REVIEW_API", "http://127.0.0.1:8000/review")


class ReviewRequestError(Exception):
    """Review could not be obtained; the message is shown to the user as-is."""


def fetch_review(code: str, language: str, file_name: Optional[str] = None) -> str:
    try:
        r = requests.post(API, json={"code": code, "language": language, "file_name": file_name})
    except requests.RequestException as e:
        raise ReviewRequestError(f"Error analyzing code: {e}") from e

    try:
        data = r.json()
    except ValueError:
        data = None

    if r.ok:
        review = data.get("review") if isinstance(data, dict) else None
        if not isinstance(review, str):
            raise ReviewRequestError(FAILED_REVIEW_MESSAGE)
        return review

    detail = data.get("detail") if isinstance(data, dict) else None
    if isinstance(detail, str) and detail:
        raise ReviewRequestError(detail)
    raise ReviewRequestError(f"Request failed: {r.status_code} - {r.text}")


def start_submit(
    get_state: Callable[[], ReviewState],
    set_state: Callable[[ReviewState], None],
) -> Optional[str]:
    """
    Validate the form and mark it busy. Returns the new request id, or None
    when nothing should be sent (blank code, or a request already pending).
    """
    state = get_state()
    if state.is_busy:
        return None
    if not state.source_text.strip():
        set_state(reduce(state, ValidationFailed(message=EMPTY_CODE_MESSAGE)))
        return None

    request_id = uuid.uuid4().hex
    set_state(reduce(state, SubmitStarted(request_id=request_id)))
    return request_id


def finish_submit(
    get_state: Callable[[], ReviewState],
    set_state: Callable[[ReviewState], None],
    fetch: Callable[..., str] = fetch_review,
) -> ReviewState:
    """
    Send the pending request, if any, and record its outcome.

    State is read back through ``get_state`` after the call returns, so a
    clear or a newer submission made meanwhile wins over this response.
    """
    state = get_state()
    request_id = state.pending_request
    if request_id is None:
        return state

    try:
        review = fetch(state.source_text, state.language, state.file_name)
    except ReviewRequestError as e:
        outcome = SubmitFailed(request_id=request_id, message=str(e))
    else:
        outcome = SubmitSucceeded(request_id=request_id, review=review)

    set_state(reduce(get_state(), outcome))
    return get_state()


def submit(
    get_state: Callable[[], ReviewState],
    set_state: Callable[[ReviewState], None],
    fetch: Callable[..., str] = fetch_review,
) -> ReviewState:
    """Run one review round trip for the current form contents."""
    if start_submit(get_state, set_state) is None:
        return get_state()
    return finish_submit(get_state, set_state, fetch)
