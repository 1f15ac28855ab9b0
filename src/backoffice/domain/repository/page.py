"""Result container for paginated repository scans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a filtered scan plus the total number of matches."""

    items: list[T] = field(default_factory=list)
    total: int = 0
