# backend/reviewer.py
from typing import Any, Dict, Optional

import requests
import structlog

from backend import config

logger = structlog.get_logger()

EMPTY_CODE_MESSAGE = "Please upload a code file or paste code first"
FAILED_REVIEW_MESSAGE = "Failed to get review from AI"

REVIEW_PROMPT = """You are a code review expert. Analyze the following {language} code for:
1. Code Quality & Readability
2. Best Practices & Standards
3. Potential Bugs & Issues
4. Performance Considerations
5. Security Concerns (if any)

Provide a structured review with:
- Overall Score (out of 10)
- Key Issues (list 3-5 main problems)
- Suggestions (specific improvements)
- Positive Points (what's done well)

Code to review:
```{language}
{code}
```

Format your response as:
**Overall Score:** X/10

**Key Issues:**
- Issue 1
- Issue 2
...

**Suggestions:**
- Suggestion 1
- Suggestion 2
...

**Positive Points:**
- Point 1
- Point 2
..."""


class ReviewFailed(Exception):
    """The model call did not produce a review. ``str(exc)`` is user-facing."""


def build_prompt(code: str, language: str) -> str:
    # str.format does not re-scan substituted values, so braces in code are safe
    return REVIEW_PROMPT.format(language=language, code=code)


def build_payload(code: str, language: str) -> Dict[str, Any]:
    return {
        "model": config.MODEL_NAME,
        "max_tokens": config.MAX_TOKENS,
        "messages": [{"role": "user", "content": build_prompt(code, language)}],
    }


def _headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if config.ANTHROPIC_API_KEY:
        headers["x-api-key"] = config.ANTHROPIC_API_KEY
        headers["anthropic-version"] = config.ANTHROPIC_VERSION
    return headers


def _first_text(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    content = data.get("content")
    if not isinstance(content, list) or not content:
        return None
    first = content[0]
    if not isinstance(first, dict):
        return None
    text = first.get("text")
    return text if isinstance(text, str) else None


def request_review(code: str, language: str) -> str:
    """
    Send one review request to the model and return its first text block.

    The answer is opaque: the section layout in the prompt is a hint to the
    model, nothing here parses it back.
    """
    log = logger.bind(language=language, code_chars=len(code), model=config.MODEL_NAME)
    log.info("review.requested")
    try:
        resp = requests.post(
            config.ANTHROPIC_API_URL,
            headers=_headers(),
            json=build_payload(code, language),
            timeout=config.REQUEST_TIMEOUT,
        )
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        log.warning("review.transport_failed", error=f"{type(e).__name__}: {e}")
        raise ReviewFailed(f"Error analyzing code: {e}") from e

    review = _first_text(data)
    if review is None:
        log.warning("review.unexpected_response", status_code=resp.status_code)
        raise ReviewFailed(FAILED_REVIEW_MESSAGE)

    log.info("review.completed", review_chars=len(review))
    return review
