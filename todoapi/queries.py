"""Paging results, query parameters and the to-do repository interface."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from todoapi.models import CreateTodo, Todo

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 25

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass
class ResultPaging(Generic[T]):
    """A page of items together with a total count."""

    total: int
    items: list[T] = field(default_factory=list)

    def map(self, func: Callable[[T], U]) -> ResultPaging[U]:
        """Return a page with every item passed through ``func``."""
        return ResultPaging(total=self.total, items=[func(item) for item in self.items])


def _optional_int(mapping: Mapping[str, Any], key: str) -> int | None:
    raw = mapping.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"invalid value for {key!r}: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw)
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(f"invalid value for {key!r}: {raw!r}")
        value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"value for {key!r} out of range: {raw!r}")
    return value


@dataclass
class QueryParams:
    """Optional paging parameters with defaults."""

    limit: int | None = None
    offset: int | None = None

    def page_limit(self) -> int:
        """The limit to apply, falling back to the default."""
        return self.limit if self.limit is not None else DEFAULT_LIMIT

    def page_offset(self) -> int:
        """The offset to apply, falling back to the default."""
        return self.offset if self.offset is not None else DEFAULT_OFFSET

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> QueryParams:
        """Build parameters from a query-string mapping; unknown keys are ignored."""
        return cls(
            limit=_optional_int(mapping, "limit"),
            offset=_optional_int(mapping, "offset"),
        )


@dataclass
class TodoQueryParams(QueryParams):
    """Paging parameters for listing to-do items, with an optional title."""

    title: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TodoQueryParams:
        """Build parameters from a query-string mapping; unknown keys are ignored."""
        title = mapping.get("title")
        return cls(
            limit=_optional_int(mapping, "limit"),
            offset=_optional_int(mapping, "offset"),
            title=None if title is None else str(title),
        )


class TodoRepository(ABC):
    """Storage for to-do items. Failures raise RepositoryError."""

    @abstractmethod
    def create(self, new_todo: CreateTodo) -> Todo:
        """Store a new item and return it."""

    @abstractmethod
    def list(self, params: TodoQueryParams) -> ResultPaging[Todo]:
        """Return a page of items."""

    @abstractmethod
    def get(self, todo_id: int) -> Todo:
        """Return the item with the given id."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Remove the item with the given id."""