"""
Driver for the web-header-tagged schema (TREC "trecweb").

    <DOC>
    <DOCNO>GX000-00-0000000</DOCNO>
    <DOCHDR>
    http://sgra.jpl.nasa.gov
    HTTP/1.1 200 OK
    ...
    </DOCHDR>
    <html>...</html>
    </DOC>

The url is the first token of the header block; the rest of the header is
discarded. The content is the body between `</DOCHDR>` and `</DOC>`, with the
whitespace right after `</DOCHDR>` dropped.

Two entry points are provided: `read_record` scans a live `ByteCursor`,
while `parse` works on an envelope that is already in memory and only uses
substring searches.
"""

import re
from typing import Optional

from ..core.cursor import ByteCursor
from ..core.data_types import MissingTag, Record, Result
from ..core.lexer import (
    DEFAULT_CONTEXT_SIZE,
    DOC,
    DOC_END,
    DOCHDR,
    DOCHDR_END,
    DOCNO,
    DOCNO_END,
    RE_LT,
    body_error,
    consume_error,
    consume_exact,
    decode,
    read_body,
    read_token,
)
from ..core.registry import SchemaRegistry
from ..core.resync import read_subsequent_record as _read_subsequent_record
from .base import BaseSchema

__all__ = ["WebSchema", "parse", "read_record", "read_subsequent_record"]

RE_LEADING_TOKEN = re.compile(rb"\s*([^<\s]*)")
RE_LEADING_WHITESPACE = re.compile(rb"\s*")


def read_record(cursor: ByteCursor, context_size: int = DEFAULT_CONTEXT_SIZE) -> Result:
    if not consume_exact(cursor, DOC):
        return consume_error(cursor, DOC, context_size)
    if not consume_exact(cursor, DOCNO):
        return consume_error(cursor, DOCNO, context_size)
    docno = read_token(cursor)
    if not consume_exact(cursor, DOCNO_END):
        return consume_error(cursor, DOCNO_END, context_size)
    if not consume_exact(cursor, DOCHDR):
        return consume_error(cursor, DOCHDR, context_size)

    url = read_token(cursor)

    # header lines after the url are dropped; a stray `<` in the header is skipped over
    while True:
        if not cursor.skip_until(RE_LT):
            return body_error(DOCHDR_END)
        if consume_exact(cursor, DOCHDR_END):
            break
        cursor.get()

    cursor.skip_whitespace()
    if (body := read_body(cursor, DOC_END)) is None:
        return body_error(DOC_END)

    return Record(id=decode(docno), url=decode(url), content=body)


def read_subsequent_record(cursor: ByteCursor, context_size: int = DEFAULT_CONTEXT_SIZE) -> Result:
    return _read_subsequent_record(cursor, lambda c: read_record(c, context_size))


def _slice_error(data: bytes, pos: int, end: int, expected: bytes, context_size: int) -> MissingTag:
    context = data[pos : min(pos + context_size, end)]
    return MissingTag(expected=decode(expected), context=decode(bytes(context)))


def parse(
    data: bytes, start: int = 0, end: Optional[int] = None, context_size: int = DEFAULT_CONTEXT_SIZE
) -> Result:
    """Parse the envelope held in `data[start:end]` without copying anything but the fields.

    `data` can be any object supporting `find` with bounds and `re` matching, such as
    `bytes` or `bytearray`.
    """
    end = len(data) if end is None else end
    pos = start

    if (begin := data.find(DOCNO, pos, end)) < 0:
        return _slice_error(data, pos, end, DOCNO, context_size)
    begin += len(DOCNO)
    if (pos := data.find(DOCNO_END, begin, end)) < 0:
        return _slice_error(data, begin, end, DOCNO_END, context_size)
    docno = RE_LEADING_TOKEN.match(data, begin, pos).group(1)  # pyright: ignore

    if (header := data.find(DOCHDR, pos, end)) < 0:
        return _slice_error(data, pos, end, DOCHDR, context_size)
    pos = header + len(DOCHDR)
    url_match = RE_LEADING_TOKEN.match(data, pos, end)
    url = url_match.group(1)  # pyright: ignore
    pos = url_match.end()  # pyright: ignore

    if (header_end := data.find(DOCHDR_END, pos, end)) < 0:
        return _slice_error(data, pos, end, DOCHDR_END, context_size)
    begin = RE_LEADING_WHITESPACE.match(data, header_end + len(DOCHDR_END), end).end()  # pyright: ignore
    if (pos := data.find(DOC_END, begin, end)) < 0:
        return body_error(DOC_END)

    return Record(id=decode(bytes(docno)), url=decode(bytes(url)), content=bytes(data[begin:pos]))


@SchemaRegistry.add("web", "Web documents with an HTTP header block (trecweb); content is the raw page.")
class WebSchema(BaseSchema):
    buffered = True

    def read_record(self, cursor: ByteCursor) -> Result:
        return read_record(cursor, self.context_size)

    def parse(self, data: bytes, start: int = 0, end: Optional[int] = None) -> Result:
        return parse(data, start, end, self.context_size)
