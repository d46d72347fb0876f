from typing import Optional

from ..core.cursor import ByteCursor
from ..core.data_types import Result
from ..core.lexer import DEFAULT_CONTEXT_SIZE
from ..core.resync import read_subsequent_record


class BaseSchema:
    """A tag grammar that maps one `<DOC>...</DOC>` envelope to a `Record`.

    Subclasses implement `read_record` to parse from a cursor. Schemas that can also parse an
    envelope from an in-memory byte range set `buffered = True` and implement `parse`; those
    can be read through a `BufferedWindow`.
    """

    buffered: bool = False

    def __init__(self, context_size: int = DEFAULT_CONTEXT_SIZE) -> None:
        self.context_size = context_size

    def read_record(self, cursor: ByteCursor) -> Result:
        raise NotImplementedError("Abstract method; must be implemented in subclass")

    def read_subsequent_record(self, cursor: ByteCursor) -> Result:
        return read_subsequent_record(cursor, self.read_record)

    def parse(self, data: bytes, start: int = 0, end: Optional[int] = None) -> Result:
        raise NotImplementedError(f"{self.__class__.__name__} does not support parsing from a byte range")
