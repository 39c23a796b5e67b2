"""
Pytest configuration and fixtures.

Repository functions are swapped for an in-memory store so the routers,
services and validators run unchanged without a database.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from answers import repository as answers_repository
from core import db
from questions import repository as questions_repository


class InMemoryStore:
    def __init__(self) -> None:
        self.questions: dict[int, dict[str, Any]] = {}
        self.answers: dict[int, dict[str, Any]] = {}
        self.question_votes: list[dict[str, Any]] = []
        self.answer_votes: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self.failure: Exception | None = None
        self._next_id = 0

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def add_question(self, title: str, description: str = "desc", category: str = "general") -> int:
        question_id = self._new_id()
        self.questions[question_id] = {
            "id": question_id,
            "title": title,
            "description": description,
            "category": category,
        }
        return question_id

    def add_answer(self, question_id: int, content: str) -> int:
        answer_id = self._new_id()
        self.answers[answer_id] = {"id": answer_id, "question_id": question_id, "content": content}
        return answer_id

    # questions.repository

    async def create_question(self, *, title: str, description: str, category: str) -> None:
        self._enter("create_question")
        self.add_question(title, description, category)

    async def list_questions(self) -> list[dict[str, Any]]:
        self._enter("list_questions")
        return [dict(q) for q in self.questions.values()]

    async def get_question(self, question_id: int) -> dict[str, Any] | None:
        self._enter("get_question")
        row = self.questions.get(question_id)
        return dict(row) if row else None

    async def search_questions(self, *, title: str | None = None, category: str | None = None) -> list[dict[str, Any]]:
        self._enter("search_questions")

        def matches(row: dict[str, Any]) -> bool:
            if title is not None and title.lower() not in row["title"].lower():
                return False
            if category is not None and category.lower() not in row["category"].lower():
                return False
            return True

        return [dict(q) for q in self.questions.values() if matches(q)]

    async def update_question(self, question_id: int, *, title: str, description: str, category: str) -> int:
        self._enter("update_question")
        if question_id not in self.questions:
            return 0
        self.questions[question_id].update(title=title, description=description, category=category)
        return 1

    async def delete_question(self, question_id: int) -> int:
        self._enter("delete_question")
        if self.questions.pop(question_id, None) is None:
            return 0
        # Mirrors ON DELETE CASCADE in db/schema.sql.
        doomed = {k for k, a in self.answers.items() if a["question_id"] == question_id}
        for key in doomed:
            del self.answers[key]
        self.question_votes = [v for v in self.question_votes if v["question_id"] != question_id]
        self.answer_votes = [v for v in self.answer_votes if v["answer_id"] not in doomed]
        return 1

    # answers.repository

    async def create_answer(self, question_id: int, *, content: str) -> dict[str, Any] | None:
        self._enter("create_answer")
        if question_id not in self.questions:
            return None
        return {"id": self.add_answer(question_id, content)}

    async def list_answers_for_question(self, question_id: int) -> list[dict[str, Any]] | None:
        self._enter("list_answers_for_question")
        if question_id not in self.questions:
            return None
        return [dict(a) for a in self.answers.values() if a["question_id"] == question_id]

    async def delete_answers_for_question(self, question_id: int) -> int | None:
        self._enter("delete_answers_for_question")
        if question_id not in self.questions:
            return None
        doomed = [k for k, a in self.answers.items() if a["question_id"] == question_id]
        for key in doomed:
            del self.answers[key]
        return len(doomed)

    async def add_question_vote(self, question_id: int, *, vote: int) -> dict[str, Any] | None:
        self._enter("add_question_vote")
        if question_id not in self.questions:
            return None
        self.question_votes.append({"question_id": question_id, "vote": vote})
        return {"id": len(self.question_votes)}

    async def add_answer_vote(self, answer_id: int, *, vote: int) -> dict[str, Any] | None:
        self._enter("add_answer_vote")
        if answer_id not in self.answers:
            return None
        self.answer_votes.append({"answer_id": answer_id, "vote": vote})
        return {"id": len(self.answer_votes)}


QUESTION_REPOSITORY_FUNCTIONS = (
    "create_question",
    "list_questions",
    "get_question",
    "search_questions",
    "update_question",
    "delete_question",
)

ANSWER_REPOSITORY_FUNCTIONS = (
    "create_answer",
    "list_answers_for_question",
    "delete_answers_for_question",
    "add_question_vote",
    "add_answer_vote",
)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> InMemoryStore:
    fake = InMemoryStore()
    for name in QUESTION_REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(questions_repository, name, getattr(fake, name))
    for name in ANSWER_REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(answers_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def failing_store(store: InMemoryStore) -> InMemoryStore:
    store.failure = db.DatabaseError('relation "questions" does not exist')
    return store


@pytest.fixture
def client(store: InMemoryStore) -> TestClient:
    # Not used as a context manager, so the lifespan (DB pool) never starts.
    import main

    return TestClient(main.app)
