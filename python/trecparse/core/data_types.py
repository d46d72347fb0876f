"""

Data types produced by the schema drivers.

A `Record` is built only when one envelope parses successfully; every other
outcome is an `Error` value. Errors are never raised by the parsers: callers
inspect `Error.terminal` to decide whether to stop pulling records.

"""

from typing import Callable, ClassVar, TypeVar, Union

from msgspec import Struct
from msgspec.structs import force_setattr
from typing_extensions import TypeAlias

R = TypeVar("R")


class Record(Struct, frozen=True):
    """One document extracted from a `<DOC>...</DOC>` envelope.

    Records are immutable; the `take_*` methods are the only way to change one. They move a
    field out, leaving it empty, so that large content can be released once it is written.
    """

    id: str
    url: str
    content: bytes

    @property
    def content_length(self) -> int:
        return len(self.content)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def take_content(self) -> bytes:
        """Move the content out of the record, leaving it empty."""
        content = self.content
        force_setattr(self, "content", b"")
        return content

    def take_url(self) -> str:
        url = self.url
        force_setattr(self, "url", "")
        return url

    def take_id(self) -> str:
        id_ = self.id
        force_setattr(self, "id", "")
        return id_

    def __str__(self) -> str:
        return f"Record {{\n\t{self.id}\n\t{self.url}\n}}"


class Error(Struct, frozen=True):
    """Base class for parse failures; subclasses describe what went wrong."""

    terminal: ClassVar[bool] = False

    @property
    def message(self) -> str:
        raise NotImplementedError("Abstract property; must be implemented in subclass")

    def __str__(self) -> str:
        return self.message


class MissingTag(Error, frozen=True):
    """An exact tag was required at the current position and not found."""

    expected: str
    context: str = ""

    @property
    def message(self) -> str:
        return f"Could not consume {self.expected} in context: {self.context}"


class UnterminatedBody(Error, frozen=True):
    """Input ran out before the closing tag of a body."""

    expected: str

    @property
    def message(self) -> str:
        return f"Reached end of input before {self.expected}"


class Exhausted(Error, frozen=True):
    """No further envelope can be found; callers must stop."""

    terminal: ClassVar[bool] = True

    @property
    def message(self) -> str:
        return "EOF: no more records"


Result: TypeAlias = Union[Record, Error]


def holds_record(result: Result) -> bool:
    return isinstance(result, Record)


def match(result: Result, on_record: Callable[[Record], R], on_error: Callable[[Error], R]) -> R:
    """Dispatch a result to the handler for its variant."""
    if isinstance(result, Record):
        return on_record(result)
    if isinstance(result, Error):
        return on_error(result)
    raise TypeError(f"Expected Record or Error, got {type(result).__name__}")
