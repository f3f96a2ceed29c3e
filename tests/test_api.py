"""Tests for the FastAPI review endpoint."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from backend.app import EMPTY_CODE_MESSAGE, app
from backend.reviewer import FAILED_REVIEW_MESSAGE, ReviewFailed

client = TestClient(app)


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@patch("backend.app.request_review")
def test_review_returns_model_text(request_review):
    request_review.return_value = "**Overall Score:** 9/10"

    response = client.post(
        "/review", json={"code": "print(1)", "language": "python", "file_name": "main.py"}
    )

    assert response.status_code == 200
    assert response.json() == {"review": "**Overall Score:** 9/10"}
    request_review.assert_called_once_with("print(1)", "python")


@patch("backend.app.request_review")
def test_language_is_normalized(request_review):
    request_review.return_value = "ok"

    client.post("/review", json={"code": "x", "language": "  Python "})

    request_review.assert_called_once_with("x", "python")


@patch("backend.app.request_review")
def test_language_defaults_to_javascript(request_review):
    request_review.return_value = "ok"

    client.post("/review", json={"code": "let a = 1;"})

    request_review.assert_called_once_with("let a = 1;", "javascript")


@pytest.mark.parametrize("code", ["", "   ", "\n\t  \n"])
@patch("backend.app.request_review")
def test_blank_code_is_rejected_without_a_call(request_review, code):
    response = client.post("/review", json={"code": code, "language": "python"})

    assert response.status_code == 400
    assert response.json()["detail"] == EMPTY_CODE_MESSAGE
    request_review.assert_not_called()


@pytest.mark.parametrize(
    "message", [FAILED_REVIEW_MESSAGE, "Error analyzing code: timeout"]
)
@patch("backend.app.request_review")
def test_review_failure_maps_to_502(request_review, message):
    request_review.side_effect = ReviewFailed(message)

    response = client.post("/review", json={"code": "print(1)", "language": "python"})

    assert response.status_code == 502
    assert response.json()["detail"] == message


def test_missing_code_field_is_unprocessable():
    response = client.post("/review", json={"language": "python"})

    assert response.status_code == 422
