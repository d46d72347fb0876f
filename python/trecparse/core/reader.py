import sys
from typing import BinaryIO, Callable, Generator, Optional, Union

import smart_open

from ..schemas.base import BaseSchema
from .cursor import DEFAULT_CHUNK_SIZE, ByteCursor
from .data_types import Error, Record, Result
from .errors import TrecConfigError, TrecFatalError
from .lexer import DEFAULT_CONTEXT_SIZE
from .loggers import get_logger
from .registry import SchemaRegistry
from .window import DEFAULT_BATCH_SIZE, BufferedWindow

# importing utils registers the zstd handlers with smart_open
from .utils import register_zstd  # noqa: F401

__all__ = ["TrecReader", "iter_records", "make_schema"]

STDIN_PATH = "-"


def make_schema(schema: Union[str, BaseSchema], context_size: int = DEFAULT_CONTEXT_SIZE) -> BaseSchema:
    if isinstance(schema, BaseSchema):
        return schema
    if not SchemaRegistry.has(schema):
        schema_names = ", ".join(SchemaRegistry.names())
        raise TrecConfigError(f"Unknown schema {schema}; available schemas: {schema_names}")
    return SchemaRegistry.get(schema)(context_size=context_size)


class TrecReader:
    """Pulls results out of a TREC file, one envelope at a time.

    Use as a context manager, then iterate:

    ```python
    with TrecReader("corpus.trecweb.gz", schema="web") as reader:
        for result in reader:
            ...
    ```

    Iteration yields records and non-terminal errors in file order and stops at the end of
    input. Schemas that support slice parsing are read through a `BufferedWindow` unless
    `buffered=False`; the others are read byte by byte with resync after every failure.
    """

    def __init__(
        self,
        path: str,
        schema: Union[str, BaseSchema] = "web",
        buffered: Optional[bool] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        context_size: int = DEFAULT_CONTEXT_SIZE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.path = path
        self.schema = make_schema(schema, context_size=context_size)
        if buffered and not self.schema.buffered:
            raise TrecConfigError(f"Schema {self.schema.__class__.__name__} does not support buffered reading")
        self.buffered = self.schema.buffered if buffered is None else buffered
        self.batch_size = batch_size
        self.chunk_size = chunk_size

        self.records = 0
        self.errors = 0

        self._fobj: Optional[BinaryIO] = None
        self._read_fn: Optional[Callable[[], Result]] = None

    def _open(self) -> BinaryIO:
        if self.path == STDIN_PATH:
            return sys.stdin.buffer
        try:
            return smart_open.open(self.path, "rb")
        except OSError as ex:
            raise TrecFatalError(f"Could not open {self.path}: {ex}") from ex

    def __enter__(self) -> "TrecReader":
        self._fobj = self._open()
        if self.buffered:
            self._read_fn = BufferedWindow(self._fobj, batch_size=self.batch_size, schema=self.schema)
        else:
            cursor = ByteCursor(self._fobj, chunk_size=self.chunk_size)
            self._read_fn = lambda: self.schema.read_subsequent_record(cursor)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self._fobj is not None and self._fobj is not sys.stdin.buffer:
            self._fobj.close()
        self._fobj = None
        self._read_fn = None

    def __iter__(self) -> Generator[Result, None, None]:
        if self._read_fn is None:
            raise OSError("File object must be opened before iterating.")

        while True:
            result = self._read_fn()
            if isinstance(result, Error):
                if result.terminal:
                    return
                self.errors += 1
            else:
                self.records += 1
            yield result


def iter_records(path: str, **kwargs) -> Generator[Record, None, None]:
    """Yield the records in `path`, logging malformed envelopes instead of returning them."""
    logger = get_logger("reader")
    with TrecReader(path, **kwargs) as reader:
        for result in reader:
            if isinstance(result, Record):
                yield result
            else:
                logger.warning("Invalid record in %s: %s", path, result.message)
