"""Error types returned by the API and helpers for choosing which to raise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class ErrorDetail:
    """A single error message and code from an API error response."""

    message: str = ""
    code: int = 0


class APIError(Exception):
    """An error response from the API, holding one or more error details."""

    def __init__(self, errors: Iterable[ErrorDetail] | None = None) -> None:
        self.errors: list[ErrorDetail] = list(errors or [])
        super().__init__(*self.errors)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "APIError":
        """Build an error from a decoded ``{"errors": [...]}`` body."""
        items = (data or {}).get("errors") or []
        return cls(
            ErrorDetail(
                message=item.get("message") or "",
                code=item.get("code") or 0,
            )
            for item in items
        )

    def is_empty(self) -> bool:
        """Return True when no error detail is present."""
        return not self.errors

    def __str__(self) -> str:
        if not self.errors:
            return ""
        first = self.errors[0]
        return f"twitter: {first.code} {first.message}"

    def __repr__(self) -> str:
        return f"APIError({self.errors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash(tuple(self.errors))


def relevant_error(
    http_error: BaseException | None, api_error: APIError
) -> BaseException | None:
    """Return the error worth raising, or None when nothing went wrong.

    A transport error wins over an API error; an empty API error counts as
    no error at all.
    """
    if http_error is not None:
        return http_error
    if api_error.is_empty():
        return None
    return api_error