"""SQL-backed storage for to-do items."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from todoapi.database import todos
from todoapi.errors import RepositoryError
from todoapi.models import CreateTodo, Todo
from todoapi.queries import ResultPaging, TodoQueryParams, TodoRepository

NOT_FOUND_MESSAGE = "Record not found"


@contextmanager
def _repository_errors() -> Iterator[None]:
    """Turn database failures into RepositoryError."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise RepositoryError(str(exc)) from exc


def _row_to_todo(row: Any) -> Todo:
    return Todo(
        id=row.id,
        title=row.title,
        description=row.description,
        completed=bool(row.completed),
    )


class TodoSqlRepository(TodoRepository):
    """A to-do repository on top of a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create(self, new_todo: CreateTodo) -> Todo:
        with _repository_errors(), self.engine.begin() as conn:
            result = conn.execute(
                sa.insert(todos).values(
                    title=new_todo.title, description=new_todo.description
                )
            )
            new_id = result.inserted_primary_key[0]
            row = conn.execute(sa.select(todos).where(todos.c.id == new_id)).one()
        return _row_to_todo(row)

    def list(self, params: TodoQueryParams) -> ResultPaging[Todo]:
        query = (
            sa.select(todos)
            .order_by(todos.c.id)
            .limit(params.page_limit())
            .offset(params.page_offset())
        )
        with _repository_errors(), self.engine.connect() as conn:
            rows = conn.execute(query).all()
        # The total count is not computed and is always reported as zero.
        return ResultPaging(total=0, items=[_row_to_todo(row) for row in rows])

    def get(self, todo_id: int) -> Todo:
        with _repository_errors(), self.engine.connect() as conn:
            row = conn.execute(
                sa.select(todos).where(todos.c.id == todo_id).limit(1)
            ).first()
        if row is None:
            raise RepositoryError(NOT_FOUND_MESSAGE)
        return _row_to_todo(row)

    def delete(self, todo_id: int) -> None:
        with _repository_errors(), self.engine.begin() as conn:
            conn.execute(sa.delete(todos).where(todos.c.id == todo_id))