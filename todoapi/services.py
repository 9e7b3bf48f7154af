"""Application services for to-do items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from todoapi.errors import RepositoryError
from todoapi.models import CreateTodo, Todo
from todoapi.queries import ResultPaging, TodoQueryParams, TodoRepository


class TodoService(ABC):
    """Use cases for to-do items. Failures raise CommonError."""

    @abstractmethod
    def create(self, todo: CreateTodo) -> Todo:
        """Create an item."""

    @abstractmethod
    def list(self, params: TodoQueryParams) -> ResultPaging[Todo]:
        """Return a page of items."""

    @abstractmethod
    def get(self, todo_id: int) -> Todo:
        """Return one item."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Delete one item."""


class DefaultTodoService(TodoService):
    """A to-do service that delegates to a repository."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def create(self, todo: CreateTodo) -> Todo:
        try:
            return self.repository.create(todo)
        except RepositoryError as exc:
            raise exc.to_common() from exc

    def list(self, params: TodoQueryParams) -> ResultPaging[Todo]:
        try:
            return self.repository.list(params)
        except RepositoryError as exc:
            raise exc.to_common() from exc

    def get(self, todo_id: int) -> Todo:
        try:
            return self.repository.get(todo_id)
        except RepositoryError as exc:
            raise exc.to_common() from exc

    def delete(self, todo_id: int) -> None:
        try:
            self.repository.delete(todo_id)
        except RepositoryError as exc:
            raise exc.to_common() from exc