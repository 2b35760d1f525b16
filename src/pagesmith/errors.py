"""Error taxonomy shared by the stores and the persistence adapters."""

from __future__ import annotations

from dataclasses import dataclass


class PagesmithError(Exception):
    """Base class for every error raised by pagesmith."""


class ValidationFailed(PagesmithError, ValueError):
    """A command was rejected because its input is invalid.

    The store that raised it is left unchanged; correcting the input and
    retrying is always possible.
    """

    def __init__(self, problems: str | list[str]) -> None:
        self.problems = [problems] if isinstance(problems, str) else list(problems)
        super().__init__("; ".join(self.problems))


class NotFound(PagesmithError, KeyError):
    """A page, section template or document does not exist."""

    def __init__(self, category: str, key: str) -> None:
        self.category = category
        self.key = key
        super().__init__(f"{category}/{key}")

    def __str__(self) -> str:
        return f"{self.category}/{self.key} not found"


class PersistenceError(PagesmithError):
    """Reading or writing a document failed.

    Raised instead of the underlying ``OSError`` or decode error so callers
    can tell storage trouble apart from rejected input.
    """


@dataclass(frozen=True)
class DanglingReference:
    """A page references a section template the registry no longer holds."""

    page_id: str
    template_id: str

    def __str__(self) -> str:
        return f"page {self.page_id} references missing section {self.template_id}"
