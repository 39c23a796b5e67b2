"""
Tests for request schemas and `validate_body`.
"""

from __future__ import annotations

import pytest

from answers import schemas as answer_schemas
from core.errors import InvalidRequest
from core.validation import is_blank, validate_body
from questions import schemas as question_schemas


def test_valid_question_payload():
    payload = validate_body(
        question_schemas.QuestionPayload,
        {"category": "C", "title": "T", "description": "D"},
    )
    assert (payload.title, payload.description, payload.category) == ("T", "D", "C")


def test_unknown_field_rejected_even_with_valid_required_fields():
    with pytest.raises(InvalidRequest) as exc_info:
        validate_body(
            question_schemas.QuestionPayload,
            {"title": "T", "description": "D", "category": "C", "extra": "x"},
        )
    assert exc_info.value.message == "Invalid request data."
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("body", [None, [], "title", 3])
def test_non_object_body_rejected(body):
    with pytest.raises(InvalidRequest):
        validate_body(question_schemas.QuestionPayload, body)


def test_custom_message():
    with pytest.raises(InvalidRequest) as exc_info:
        validate_body(answer_schemas.VotePayload, {"vote": 0}, message="Invalid vote value.")
    assert exc_info.value.message == "Invalid vote value."


def test_error_type_specific_message():
    with pytest.raises(InvalidRequest) as exc_info:
        validate_body(
            answer_schemas.AnswerPayload,
            {"content": "a" * 301},
            messages={"string_too_long": "too long"},
        )
    assert exc_info.value.message == "too long"


def test_error_type_message_falls_back_to_default():
    with pytest.raises(InvalidRequest) as exc_info:
        validate_body(
            answer_schemas.AnswerPayload,
            {"content": ""},
            messages={"string_too_long": "too long"},
        )
    assert exc_info.value.message == "Invalid request data."


def test_answer_length_counts_code_points():
    payload = validate_body(answer_schemas.AnswerPayload, {"content": "\U0001F600" * 300})
    assert len(payload.content) == 300


@pytest.mark.parametrize("vote", [1, -1])
def test_vote_domain_accepts_exact_values(vote):
    assert validate_body(answer_schemas.VotePayload, {"vote": vote}).vote == vote


@pytest.mark.parametrize("vote", [0, 2, -2, "1", "-1", 1.0, True, False, None])
def test_vote_domain_rejects_everything_else(vote):
    with pytest.raises(InvalidRequest):
        validate_body(answer_schemas.VotePayload, {"vote": vote})


@pytest.mark.parametrize(("value", "blank"), [(None, True), ("", True), ("  ", True), (" of ", False), ("math", False)])
def test_is_blank(value, blank):
    assert is_blank(value) is blank
