"""Core type definitions.

Records passed into the renderers. Both are immutable and validated on
construction so the renderers can interpolate fields without checks.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date as Date
from typing import NewType

from masteringjs.core.errors import InvalidInputError

# URL path for routing (e.g., "/tutorials/promises/")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)


@dataclass(frozen=True)
class Post:
    """One entry in a post listing.

    Field values are inserted into markup verbatim, so they must already be
    display-ready (escaped) strings.
    """

    url: str
    title: str
    description: str
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _require_text(self.url, "url")
        _require_text(self.title, "title")
        if not isinstance(self.description, str):
            raise InvalidInputError("description", "Post description must be a string")
        if isinstance(self.tags, str) or not isinstance(self.tags, Sequence):
            raise InvalidInputError("tags", "Post tags must be a sequence of strings")
        if not all(isinstance(tag, str) for tag in self.tags):
            raise InvalidInputError("tags", "Post tags must be a sequence of strings")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "tags", tuple(self.tags))


@dataclass(frozen=True)
class PageParams:
    """Input for a single page render."""

    title: str
    content: str
    date: Date | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise InvalidInputError("title", "Page title must be a string")
        if not isinstance(self.content, str):
            raise InvalidInputError("content", "Page content must be a string")
        if self.date is not None and not isinstance(self.date, Date):
            raise InvalidInputError("date", "Page date must be a date or None")


def _require_text(value: object, field: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidInputError(field, f"Post {field} must be a non-empty string")
