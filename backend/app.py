# backend/app.py
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from backend import config
from backend.reviewer import EMPTY_CODE_MESSAGE, ReviewFailed, request_review

# --- Logging ---
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ]
)

logger = structlog.get_logger()

# --- FastAPI app ---
app = FastAPI(title="Code Review Assistant")


# --------- Models ----------
class ReviewRequest(BaseModel):
    code: str
    language: str = "javascript"
    file_name: Optional[str] = None

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower() or "javascript"


class ReviewResponse(BaseModel):
    review: str


# --------- Routes ----------
@app.get("/health")
def health():
    return {"ok": True}


@app.post("/review", response_model=ReviewResponse)
def review(req: ReviewRequest):
    """
    Review a single snippet. The code is forwarded verbatim; the answer is
    returned verbatim.
    """
    if not req.code.strip():
        raise HTTPException(status_code=400, detail=EMPTY_CODE_MESSAGE)

    # Blocking call; FastAPI runs sync routes in its threadpool
    try:
        text = request_review(req.code, req.language)
    except ReviewFailed as e:
        logger.warning("review.failed", file_name=req.file_name, detail=str(e))
        raise HTTPException(status_code=502, detail=str(e))

    return ReviewResponse(review=text)


def main() -> None:
    uvicorn.run("backend.app:app", host=config.SERVICE_HOST, port=config.SERVICE_PORT, reload=False)


if __name__ == "__main__":
    main()
