from .core import (
    ByteCursor,
    Error,
    Exhausted,
    MissingTag,
    Record,
    Result,
    SchemaRegistry,
    UnterminatedBody,
    WriterRegistry,
    holds_record,
    match,
)
from .core.reader import TrecReader, iter_records
from .core.window import BufferedWindow
from .core.writers import BaseWriter
from .schemas import BaseSchema, TextSchema, WebSchema
from .version import __version__

__all__ = [
    "__version__",
    "add_schema",
    "add_writer",
    "BaseSchema",
    "BaseWriter",
    "BufferedWindow",
    "ByteCursor",
    "Error",
    "Exhausted",
    "holds_record",
    "iter_records",
    "match",
    "MissingTag",
    "Record",
    "Result",
    "TextSchema",
    "TrecReader",
    "UnterminatedBody",
    "WebSchema",
]

# shortcuts to easily add schemas and writers to the registries
add_schema = SchemaRegistry.add
add_writer = WriterRegistry.add
