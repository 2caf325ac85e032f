"""Helpers shared by the SurrealDB layer."""

import re
from datetime import datetime, timezone


def camel_to_snake(name: str) -> str:
    """Convert CamelCase or camelCase to snake_case."""
    s1 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    # Acronyms such as HTTPServer -> http_server
    s2 = re.sub(r"([A-Z]+)([A-Z][a-z0-9])", r"\1_\2", s1)
    return s2.lower()


def get_all_subclasses(cls: type) -> list[type]:
    """Get all subclasses of a class, depth first."""

    subclasses = cls.__subclasses__()
    return subclasses + [
        sub for subclass in subclasses for sub in get_all_subclasses(subclass)
    ]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)  # noqa: UP017
