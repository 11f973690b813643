"""Shared fixtures: in-memory gateway + FastAPI test client.

The fake answers the exact SQL statements the repositories send, so route
tests exercise router -> service -> repository without a PostgreSQL server.
"""

import itertools
import re
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from answers import repository as answer_repository
from core.db import DatabaseError, get_db
from main import app
from questions import repository as question_repository
from votes import repository as vote_repository


def _now():
    return datetime.now(timezone.utc)


def _unescape_like(pattern):
    return re.sub(r"\\(.)", r"\1", pattern)


class FakeDatabase:
    """Dict-backed stand-in for core.db.Database."""

    def __init__(self):
        self.questions = {}
        self.answers = {}
        self.question_votes = {}
        self.answer_votes = {}
        self.statements = []
        self.fail = False
        self._question_ids = itertools.count(1)
        self._answer_ids = itertools.count(1)

        self._fetch_one = {
            question_repository.INSERT_QUESTION: self._insert_question,
            question_repository.SELECT_QUESTION_BY_ID: self._select_question,
            question_repository.QUESTION_EXISTS: self._question_exists,
            answer_repository.INSERT_ANSWER: self._insert_answer,
            answer_repository.ANSWER_EXISTS: self._answer_exists,
            vote_repository.UPSERT_QUESTION_VOTE: self._upsert_question_vote,
            vote_repository.UPSERT_ANSWER_VOTE: self._upsert_answer_vote,
        }
        self._fetch_all = {
            question_repository.SELECT_QUESTIONS: self._select_questions,
            question_repository.SEARCH_QUESTIONS: self._search_questions,
            answer_repository.SELECT_ANSWERS_BY_QUESTION: self._select_answers,
        }
        self._execute = {
            question_repository.UPDATE_QUESTION: self._update_question,
            question_repository.DELETE_QUESTION: self._delete_question,
            answer_repository.DELETE_ANSWERS_BY_QUESTION: self._delete_answers,
        }

    def _run(self, table, sql, args):
        self.statements.append((sql, args))
        if self.fail:
            raise DatabaseError("connection refused")
        return table[sql](*args)

    async def fetch_one(self, sql, *args):
        return self._run(self._fetch_one, sql, args)

    async def fetch_all(self, sql, *args):
        return self._run(self._fetch_all, sql, args)

    async def execute(self, sql, *args):
        return self._run(self._execute, sql, args)

    # questions

    def _insert_question(self, title, description, category):
        question_id = next(self._question_ids)
        now = _now()
        self.questions[question_id] = {
            "id": question_id,
            "title": title,
            "description": description,
            "category": category,
            "created_at": now,
            "updated_at": now,
        }
        return dict(self.questions[question_id])

    def _select_questions(self):
        return [dict(q) for _, q in sorted(self.questions.items())]

    def _search_questions(self, category, pattern):
        needle = _unescape_like(pattern).casefold() if pattern is not None else None
        rows = []
        for row in self._select_questions():
            if category is not None and row["category"] != category:
                continue
            if needle is not None and needle not in row["title"].casefold() \
                    and needle not in row["description"].casefold():
                continue
            rows.append(row)
        return rows

    def _select_question(self, question_id):
        row = self.questions.get(question_id)
        return dict(row) if row is not None else None

    def _question_exists(self, question_id):
        return {"ok": 1} if question_id in self.questions else None

    def _update_question(self, question_id, title, description, category):
        row = self.questions.get(question_id)
        if row is None:
            return 0
        row.update(title=title, description=description, category=category, updated_at=_now())
        return 1

    def _delete_question(self, question_id):
        if self.questions.pop(question_id, None) is None:
            return 0
        # ON DELETE CASCADE
        self.question_votes.pop(question_id, None)
        for answer_id in [a for a, row in self.answers.items() if row["question_id"] == question_id]:
            self.answers.pop(answer_id)
            self.answer_votes.pop(answer_id, None)
        return 1

    # answers

    def _insert_answer(self, question_id, content):
        answer_id = next(self._answer_ids)
        self.answers[answer_id] = {
            "id": answer_id,
            "question_id": question_id,
            "content": content,
            "created_at": _now(),
        }
        return dict(self.answers[answer_id])

    def _select_answers(self, question_id):
        return [dict(a) for _, a in sorted(self.answers.items()) if a["question_id"] == question_id]

    def _answer_exists(self, answer_id):
        return {"ok": 1} if answer_id in self.answers else None

    def _delete_answers(self, question_id):
        doomed = [a for a, row in self.answers.items() if row["question_id"] == question_id]
        for answer_id in doomed:
            self.answers.pop(answer_id)
            self.answer_votes.pop(answer_id, None)
        return len(doomed)

    # votes

    def _upsert_question_vote(self, question_id, vote):
        self.question_votes[question_id] = vote
        return {"question_id": question_id, "vote": vote, "updated_at": _now()}

    def _upsert_answer_vote(self, answer_id, vote):
        self.answer_votes[answer_id] = vote
        return {"answer_id": answer_id, "vote": vote, "updated_at": _now()}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
async def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def question(client):
    res = await client.post(
        "/questions",
        json={
            "title": "What is the capital of France?",
            "description": "geo question",
            "category": "Geography",
        },
    )
    assert res.status_code == 201
    return res.json()["data"]
