"""
Driver for the plain-text-tagged schema (TREC "trectext").

    <DOC>
    <DOCNO> id </DOCNO>
    <URL> url </URL>
    <HEADLINE> ... </HEADLINE>
    <TEXT> ... </TEXT>
    </DOC>

Bodies of whitelisted tags are concatenated in document order to form the
content; the body of `<URL>` becomes the url with all whitespace removed; any
other element is read and discarded.
"""

from typing import List

from ..core.cursor import ByteCursor
from ..core.data_types import Record, Result
from ..core.lexer import (
    DEFAULT_CONTEXT_SIZE,
    DOC,
    DOC_END,
    DOCNO,
    DOCNO_END,
    RE_WHITESPACE,
    body_error,
    closing_tag,
    consume_any_tag,
    consume_error,
    consume_exact,
    decode,
    read_body,
    read_token,
)
from ..core.registry import SchemaRegistry
from ..core.resync import read_subsequent_record as _read_subsequent_record
from .base import BaseSchema

__all__ = ["CONTENT_TAGS", "TextSchema", "read_record", "read_subsequent_record"]

CONTENT_TAGS = frozenset(
    (b"TEXT", b"HEADLINE", b"TITLE", b"HL", b"HEAD", b"TTL", b"DD", b"DATE", b"LP", b"LEADPARA")
)
URL_TAG = b"URL"
ANY_TAG = b"any tag"


def read_record(cursor: ByteCursor, context_size: int = DEFAULT_CONTEXT_SIZE) -> Result:
    if not consume_exact(cursor, DOC):
        return consume_error(cursor, DOC, context_size)
    if not consume_exact(cursor, DOCNO):
        return consume_error(cursor, DOCNO, context_size)
    docno = read_token(cursor)
    if not consume_exact(cursor, DOCNO_END):
        return consume_error(cursor, DOCNO_END, context_size)

    url = b""
    content: List[bytes] = []
    while not consume_exact(cursor, DOC_END):
        if (tag := consume_any_tag(cursor)) is None:
            return consume_error(cursor, ANY_TAG, context_size)

        closing = closing_tag(tag)
        if (body := read_body(cursor, closing)) is None:
            return body_error(closing)

        if tag == URL_TAG:
            url += RE_WHITESPACE.sub(b"", body)
        elif tag in CONTENT_TAGS:
            content.append(body)

    return Record(id=decode(docno), url=decode(url), content=b"".join(content))


def read_subsequent_record(cursor: ByteCursor, context_size: int = DEFAULT_CONTEXT_SIZE) -> Result:
    return _read_subsequent_record(cursor, lambda c: read_record(c, context_size))


@SchemaRegistry.add("text", "Plain-text tagged documents (trectext); content from TEXT, HEADLINE, TITLE, etc.")
class TextSchema(BaseSchema):
    def read_record(self, cursor: ByteCursor) -> Result:
        return read_record(cursor, self.context_size)
