"""Domain errors raised by the catalog services.

Each error carries the HTTP status it maps to; ``catalog.main`` turns them into
responses so the services never deal with transport concerns.
"""

from fastapi import status
from pydantic.alias_generators import to_pascal


class CatalogError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(CatalogError):
    """Malformed input. ``errors`` maps field names to messages."""

    def __init__(self, errors: dict[str, list[str]], detail: str = "One or more validation errors occurred."):
        super().__init__(detail)
        self.errors = errors


class InvalidReferenceError(CatalogError):
    """A referenced brand, category or parent does not exist."""


class ConflictError(CatalogError):
    """A uniqueness rule would be violated."""


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class PreconditionError(CatalogError):
    """The request is valid but the current state forbids it."""


class CategoryCycleError(CatalogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_map(errors) -> dict[str, list[str]]:
    """Group pydantic/FastAPI error entries by field name.

    Path and query parameter names are PascalCased to match the body keys.
    """
    fields: dict[str, list[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] in ("path", "query"):
            loc = tuple(to_pascal(str(part)) for part in loc[1:])
        loc = [str(part) for part in loc if part != "body"]
        fields.setdefault(".".join(loc) or "body", []).append(error["msg"])
    return fields
