"""Database configuration and table definitions."""

from __future__ import annotations

import os

import sqlalchemy as sa
from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import Engine

POSTGRESQL_DB_URI = "DATABASE_URL"

metadata = sa.MetaData()

service_contexts = sa.Table(
    "service_contexts",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
    sa.Column("maintenance", sa.Boolean, nullable=False),
)

todos = sa.Table(
    "todos",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True),
    sa.Column("title", sa.String, nullable=False),
    sa.Column("description", sa.Text, nullable=False),
    sa.Column(
        "completed",
        sa.Boolean,
        nullable=False,
        default=False,
        server_default=sa.false(),
    ),
)


def database_url() -> str:
    """Return the database URL from the environment or a .env file."""
    load_dotenv(find_dotenv(usecwd=True))
    url = os.environ.get(POSTGRESQL_DB_URI)
    if url is None:
        raise RuntimeError(f"{POSTGRESQL_DB_URI} must be set")
    return url


def create_db_engine(url: str | None = None) -> Engine:
    """Create a pooled engine for ``url``, or for the configured URL."""
    return sa.create_engine(url if url is not None else database_url())


def create_schema(engine: Engine) -> None:
    """Create the tables if they do not exist."""
    metadata.create_all(engine)