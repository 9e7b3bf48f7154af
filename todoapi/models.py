"""Domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Todo:
    """A stored to-do item."""

    id: int
    title: str
    description: str
    completed: bool


@dataclass(frozen=True)
class CreateTodo:
    """The data needed to create a to-do item."""

    title: str
    description: str


@dataclass(frozen=True)
class ServiceContext:
    """Global service state, such as the maintenance flag."""

    id: int
    maintenance: bool