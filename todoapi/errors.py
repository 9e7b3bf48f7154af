"""Error types shared by the domain, the storage layer and the HTTP layer."""

from __future__ import annotations

from typing import Any

REPOSITORY_ERROR_CODE = 1


class CommonError(Exception):
    """A domain error carrying a human-readable message and a numeric code."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message, code)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"Error: {self.message}, Code: {self.code}"

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the error."""
        return {"message": self.message, "code": self.code}


class ApiError(Exception):
    """An error reported to an HTTP client as a 400 response."""

    status_code = 400

    def __init__(self, error: CommonError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def to_response_body(self) -> dict[str, Any]:
        """Return the JSON body sent with the error response."""
        return self.error.to_dict()


class RepositoryError(Exception):
    """A failure reported by a storage backend."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_common(self) -> CommonError:
        """Convert into a domain error with the repository error code."""
        return CommonError(self.message, REPOSITORY_ERROR_CODE)