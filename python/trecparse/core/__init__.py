from .cursor import ByteCursor
from .data_types import (
    Error,
    Exhausted,
    MissingTag,
    Record,
    Result,
    UnterminatedBody,
    holds_record,
    match,
)
from .registry import SchemaRegistry, WriterRegistry

__all__ = [
    "ByteCursor",
    "Error",
    "Exhausted",
    "MissingTag",
    "Record",
    "Result",
    "SchemaRegistry",
    "UnterminatedBody",
    "WriterRegistry",
    "holds_record",
    "match",
]
