"""
Tag-level scanning primitives shared by the schema drivers.

All primitives operate on a `ByteCursor` and skip leading whitespace before
looking at the input. Tags are matched by exact byte sequence; attributes on an
opening tag are dropped when the tag name is read.
"""

import re
from typing import List, Optional

from .cursor import ByteCursor
from .data_types import MissingTag, UnterminatedBody

__all__ = [
    "DOC",
    "DOC_END",
    "DOCNO",
    "DOCNO_END",
    "DOCHDR",
    "DOCHDR_END",
    "URL",
    "URL_END",
    "DEFAULT_CONTEXT_SIZE",
    "body_error",
    "closing_tag",
    "consume_any_tag",
    "consume_error",
    "consume_exact",
    "decode",
    "read_body",
    "read_token",
]

DOC = b"<DOC>"
DOC_END = b"</DOC>"
DOCNO = b"<DOCNO>"
DOCNO_END = b"</DOCNO>"
DOCHDR = b"<DOCHDR>"
DOCHDR_END = b"</DOCHDR>"
URL = b"<URL>"
URL_END = b"</URL>"

DEFAULT_CONTEXT_SIZE = 80

LT = ord("<")
GT = ord(">")

RE_LT = re.compile(rb"<")
RE_GT = re.compile(rb">")
RE_WHITESPACE = re.compile(rb"\s")
RE_TOKEN_END = re.compile(rb"[<\s]")


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def closing_tag(name: bytes) -> bytes:
    return b"</" + name + b">"


def consume_exact(cursor: ByteCursor, tag: bytes) -> bool:
    """Consume `tag` if it is next in the input; otherwise leave the cursor where it was."""
    cursor.skip_whitespace()
    for i, expected in enumerate(tag):
        ch = cursor.get()
        if ch != expected:
            consumed = tag[:i] if ch is None else tag[:i] + bytes((ch,))
            cursor.putback(consumed)
            return False
    return True


def consume_any_tag(cursor: ByteCursor) -> Optional[bytes]:
    """Consume an opening tag and return its name without attributes; None if there is no tag."""
    cursor.skip_whitespace()
    if cursor.peek() != LT:
        return None
    cursor.get()

    tag = cursor.read_until(RE_GT)
    if cursor.get() != GT:
        return None

    if (m := RE_WHITESPACE.search(tag)) is not None:
        tag = tag[: m.start()]
    return tag


def read_token(cursor: ByteCursor) -> bytes:
    cursor.skip_whitespace()
    return cursor.read_until(RE_TOKEN_END)


def read_body(cursor: ByteCursor, closing: bytes) -> Optional[bytes]:
    """Read everything up to `closing`, which is consumed but not returned.

    Any `<` that does not start `closing` is kept as content, so markup embedded in a body
    survives as long as it does not spell the closing tag. Returns None if input runs out first.
    """
    parts: List[bytes] = []
    while True:
        parts.append(cursor.read_until(RE_LT))
        if cursor.at_eof():
            return None
        if consume_exact(cursor, closing):
            return b"".join(parts)
        parts.append(bytes((cursor.get(),)))  # pyright: ignore


def consume_error(cursor: ByteCursor, expected: bytes, context_size: int = DEFAULT_CONTEXT_SIZE) -> MissingTag:
    return MissingTag(expected=decode(expected), context=decode(cursor.peek_line(context_size)))


def body_error(expected: bytes) -> UnterminatedBody:
    return UnterminatedBody(expected=decode(expected))
