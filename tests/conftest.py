"""
Shared fixtures for predicate tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypedDict

import pytest

from typical import Matching

# ============================================================================
# Subject Types (diverse class types to validate predicates work with any class)
# ============================================================================


@dataclass(frozen=True)
class Url:
    """Dataclass subject type."""

    host: str
    scheme: str
    path: str


class UserCtx(TypedDict):
    """TypedDict subject type."""

    age: int
    active: bool


TypicalUrl = Matching[Url]


class Counted:
    """
    Wrap a test function and count how often it is called.
    """

    def __init__(self, fn: Callable[[object], bool]):
        self.fn = fn
        self.calls = 0

    def __call__(self, subject: object) -> bool:
        self.calls += 1
        return self.fn(subject)


# ============================================================================
# Subjects
# ============================================================================


@pytest.fixture
def subject() -> Url:
    return Url(host="example.com", scheme="http", path="go/here")


@pytest.fixture
def elsewhere() -> Url:
    return Url(host="example.com", scheme="https", path="go/elsewhere")


# ============================================================================
# Predicates
# ============================================================================


@pytest.fixture
def host_check() -> Matching[Url]:
    return TypicalUrl(lambda url: url.host == "example.com", desc="host is example.com")


@pytest.fixture
def scheme_is_http() -> Matching[Url]:
    return TypicalUrl(lambda url: url.scheme == "http", desc="scheme is http")


@pytest.fixture
def scheme_is_https() -> Matching[Url]:
    return TypicalUrl(lambda url: url.scheme == "https", desc="scheme is https")


@pytest.fixture
def path_is_go_here() -> Matching[Url]:
    return TypicalUrl(lambda url: url.path == "go/here", desc="path is go/here")


@pytest.fixture
def counter() -> Callable[[bool], tuple[Matching, Counted]]:
    """Factory for constant predicates that count their evaluations."""

    def make(result: bool) -> tuple[Matching, Counted]:  # noqa: FBT001
        counted = Counted(lambda _: result)
        return Matching(counted), counted

    return make

