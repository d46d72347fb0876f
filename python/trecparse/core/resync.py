from typing import Callable

from .cursor import ByteCursor
from .data_types import Exhausted, Result
from .lexer import DOC, RE_LT, consume_exact

__all__ = ["read_subsequent_record"]


def read_subsequent_record(cursor: ByteCursor, read_record: Callable[[ByteCursor], Result]) -> Result:
    """Skip forward to the next `<DOC>` and parse one envelope from there with `read_record`.

    The search is a raw byte search: other tags, and whatever is left of an envelope that
    failed to parse, are discarded. Returns `Exhausted` once no `<DOC>` is left in the input.
    """
    while cursor.skip_until(RE_LT):
        if consume_exact(cursor, DOC):
            cursor.putback(DOC)
            return read_record(cursor)
        cursor.get()
    return Exhausted()
