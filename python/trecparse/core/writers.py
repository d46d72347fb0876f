from typing import BinaryIO

import msgspec

from .data_types import Record
from .registry import WriterRegistry

__all__ = ["BaseWriter", "JsonlWriter", "RecordSpec", "TsvWriter"]


class RecordSpec(msgspec.Struct):
    id: str
    url: str
    text: str


class BaseWriter:
    """Serializes records to a binary stream, one line per record."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write(self, record: Record) -> None:
        raise NotImplementedError("Abstract method; must be implemented in subclass")


@WriterRegistry.add("tsv", "Tab separated id, url and content; newlines in content are escaped as \\u000A.")
class TsvWriter(BaseWriter):
    NEWLINE_ESCAPE = b"\\u000A"

    def write(self, record: Record) -> None:
        # content can be large: move it out of the record rather than copying it
        content = record.take_content().replace(b"\n", self.NEWLINE_ESCAPE)
        self.stream.write(b"\t".join((record.id.encode("utf-8"), record.url.encode("utf-8"), content)))
        self.stream.write(b"\n")


@WriterRegistry.add("jsonl", "One JSON object per line with id, url and text fields.")
class JsonlWriter(BaseWriter):
    def __init__(self, stream: BinaryIO) -> None:
        super().__init__(stream)
        self.encoder = msgspec.json.Encoder()

    def write(self, record: Record) -> None:
        spec = RecordSpec(id=record.id, url=record.url, text=record.text)
        self.stream.write(self.encoder.encode(spec))
        self.stream.write(b"\n")
