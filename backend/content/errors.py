"""
Failure values returned by the content assemblers.

Assemblers never raise these; they hand them back on an AssemblyResult so a
caller can tell "empty because absent" from "empty because broken".
A missing broadcast is not an error at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ContentError(Exception):
    """Base for assembler failures."""

    kind = "content"

    def __init__(self, part: str, article_id: str, cause: BaseException | None = None) -> None:
        self.part = part
        self.article_id = article_id
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        msg = f"{self.part} for article {self.article_id!r} failed"
        if self.cause is not None:
            msg += f": {self.cause}"
        return msg


class QueryFailure(ContentError):
    """The storage collaborator could not run the query."""

    kind = "query"


class DecodeFailure(ContentError):
    """A row's columns did not match the expected shape."""

    kind = "decode"

    def __init__(
        self,
        part: str,
        article_id: str,
        row_index: int,
        cause: BaseException | None = None,
    ) -> None:
        self.row_index = row_index
        super().__init__(part, article_id, cause)

    def _describe(self) -> str:
        return f"row {self.row_index}: " + super()._describe()


@dataclass(frozen=True)
class AssemblyResult(Generic[T]):
    """An assembled value plus the failure that cut it short, if any."""

    value: T
    error: Optional[ContentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def partial(self) -> bool:
        """True when rows before a decode failure were kept."""
        return isinstance(self.error, DecodeFailure)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
