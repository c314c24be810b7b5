"""Shared schemas, stand-ins and fixtures for DTO tests."""

from __future__ import annotations

import itertools
import threading
import time
from datetime import datetime, timezone
from typing import Any

import pytest
from pydantic import BaseModel, EmailStr, Field

from cqrs_ddd_dto import PydanticSchema

# --- Test Models ---


class CreateUser(BaseModel):
    first: str = Field(min_length=2, max_length=100)
    last: str = Field(min_length=2, max_length=100)
    email: EmailStr


class CreateArticle(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    tags: list[str] | None = None


class Address(BaseModel):
    city: str
    lines: list[str]


class Customer(BaseModel):
    name: str
    address: Address
    attributes: dict[str, Any] = Field(default_factory=dict)


# --- Stand-ins ---


class CountingSchema:
    """Wraps another schema and counts validation runs."""

    def __init__(self, inner: Any, delay: float = 0.0) -> None:
        self.inner = inner
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def validate(self, raw: object) -> Any:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return self.inner.validate(raw)


class FixedClock:
    def __init__(self, at: datetime) -> None:
        self.at = at

    def now(self) -> datetime:
        return self.at


class SequentialIDGenerator:
    def __init__(self, prefix: str = "dto") -> None:
        self._counter = itertools.count(1)
        self._prefix = prefix

    def next_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


# --- Fixtures ---


@pytest.fixture
def user_schema() -> PydanticSchema:
    return PydanticSchema(CreateUser)


@pytest.fixture
def counting_user_schema(user_schema: PydanticSchema) -> CountingSchema:
    return CountingSchema(user_schema)


@pytest.fixture
def valid_user() -> dict[str, str]:
    return {"first": "John", "last": "Doe", "email": "john.doe@example.com"}


@pytest.fixture
def invalid_user() -> dict[str, str]:
    return {"first": "A", "last": "B", "email": "invalid-email"}


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def make_counting_schema() -> type[CountingSchema]:
    return CountingSchema


@pytest.fixture
def id_generator() -> SequentialIDGenerator:
    return SequentialIDGenerator()


@pytest.fixture
def article_schema() -> PydanticSchema:
    return PydanticSchema(CreateArticle, exclude_unset=True)


@pytest.fixture
def customer_schema() -> PydanticSchema:
    return PydanticSchema(Customer)
