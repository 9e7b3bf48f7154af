"""Wire representations of to-do items."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from todoapi.models import CreateTodo, Todo
from todoapi.queries import ResultPaging


@dataclass(frozen=True)
class CreateTodoDTO:
    """Request body for creating a to-do item."""

    title: str
    description: str

    @classmethod
    def from_json(cls, data: Any) -> CreateTodoDTO:
        """Validate a decoded JSON body; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        values = {}
        for name in ("title", "description"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = value
        return cls(**values)

    @classmethod
    def from_domain(cls, todo: CreateTodo) -> CreateTodoDTO:
        return cls(title=todo.title, description=todo.description)

    def to_domain(self) -> CreateTodo:
        return CreateTodo(title=self.title, description=self.description)


@dataclass(frozen=True)
class TodoDTO:
    """Response body for a to-do item."""

    id: int
    title: str
    description: str
    completed: bool

    @classmethod
    def from_domain(cls, todo: Todo) -> TodoDTO:
        # The completed flag is always reported as false.
        return cls(
            id=todo.id,
            title=todo.title,
            description=todo.description,
            completed=False,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def paging_to_dict(paging: ResultPaging[Todo]) -> dict[str, Any]:
    """Return the JSON-ready form of a page of to-do items."""
    return {
        "total": paging.total,
        "items": [TodoDTO.from_domain(todo).to_dict() for todo in paging.items],
    }