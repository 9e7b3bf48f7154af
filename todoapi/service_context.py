"""Access to the global service context, such as the maintenance flag."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from todoapi.database import service_contexts
from todoapi.models import ServiceContext

logger = logging.getLogger(__name__)

SERVICE_CONTEXT_ID = 1


class ServiceContextError(RuntimeError):
    """The service context could not be created or updated."""


class ServiceContextService(ABC):
    """Reads and changes the service context."""

    @abstractmethod
    def get_service_context(self) -> ServiceContext:
        """Return the current service context."""

    @abstractmethod
    def update(self, service_context: ServiceContext) -> ServiceContext:
        """Store new values and return the stored context."""

    @abstractmethod
    def is_maintenance_active(self) -> bool:
        """Whether the service is in maintenance mode."""


def _row_to_context(row: Any) -> ServiceContext:
    return ServiceContext(id=row.id, maintenance=bool(row.maintenance))


class SqlServiceContextService(ServiceContextService):
    """A service context stored as a single row in the database."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def _select(self) -> Any:
        return sa.select(service_contexts).where(
            service_contexts.c.id == SERVICE_CONTEXT_ID
        )

    def get_service_context(self) -> ServiceContext:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(self._select()).first()
        except SQLAlchemyError:
            row = None
        if row is None:
            logger.info("Service context does not exist, creating a service context...")
            return self._create_service_context()
        return _row_to_context(row)

    def _create_service_context(self) -> ServiceContext:
        try:
            with self.engine.begin() as conn:
                conn.execute(
                    sa.insert(service_contexts).values(
                        id=SERVICE_CONTEXT_ID, maintenance=False
                    )
                )
                row = conn.execute(self._select()).one()
        except SQLAlchemyError as exc:
            raise ServiceContextError("Could not create service context") from exc
        return _row_to_context(row)

    def update(self, service_context: ServiceContext) -> ServiceContext:
        # The primary key is never changed; only the other columns are set.
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    sa.update(service_contexts)
                    .where(service_contexts.c.id == SERVICE_CONTEXT_ID)
                    .values(maintenance=service_context.maintenance)
                )
                row = conn.execute(self._select()).first() if result.rowcount else None
        except SQLAlchemyError as exc:
            raise ServiceContextError("Could not update service context") from exc
        if row is None:
            raise ServiceContextError("Could not update service context")
        return _row_to_context(row)

    def is_maintenance_active(self) -> bool:
        return self.get_service_context().maintenance