"""Wiring of repositories and services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from todoapi.database import create_db_engine
from todoapi.repository import TodoSqlRepository
from todoapi.service_context import ServiceContextService, SqlServiceContextService
from todoapi.services import DefaultTodoService, TodoService


@dataclass(frozen=True)
class Container:
    """The services the HTTP application depends on."""

    todo_service: TodoService
    service_context_service: ServiceContextService

    @classmethod
    def from_engine(cls, engine: Engine) -> Container:
        """Build the services on top of one shared engine."""
        repository = TodoSqlRepository(engine)
        return cls(
            todo_service=DefaultTodoService(repository),
            service_context_service=SqlServiceContextService(engine),
        )

    @classmethod
    def from_environment(cls) -> Container:
        """Build the services for the database configured in the environment."""
        return cls.from_engine(create_db_engine())