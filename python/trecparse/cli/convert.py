import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import List, Optional

import smart_open

from trecparse.cli import BaseCli, field, print_config
from trecparse.core.data_types import match
from trecparse.core.errors import TrecConfigError
from trecparse.core.lexer import DEFAULT_CONTEXT_SIZE
from trecparse.core.loggers import get_logger
from trecparse.core.reader import STDIN_PATH, TrecReader
from trecparse.core.registry import SchemaRegistry, WriterRegistry
from trecparse.core.utils import import_modules
from trecparse.core.window import DEFAULT_BATCH_SIZE

# must import writers and schemas to register them
from trecparse.core import writers  # noqa: F401
from trecparse import schemas  # noqa: F401

STDOUT_PATH = "-"


@dataclass
class ConvertConfig:
    input: str = field(help="Path to the TREC file to read; can be local, remote or compressed. Use - for stdin.")
    output: str = field(
        default=STDOUT_PATH,
        help="Path to write records to; compression is inferred from the extension. Use - for stdout.",
    )
    format: str = field(
        default="tsv",
        help=(
            "Name of the output writer; see `trecparse list`. Newlines in tsv content are written as \\u000A "
            "because lines delimit records."
        ),
    )
    text: bool = field(
        default=False,
        help="Use the trectext schema rather than trecweb; shorthand for --schema text.",
    )
    schema: str = field(
        default="web",
        help="Name of the schema used to parse envelopes; see `trecparse list`.",
    )
    buffered: Optional[bool] = field(
        default=None,
        help="Read in batches and parse envelopes from memory; defaults to true for schemas that support it.",
    )
    batch_size: int = field(
        default=DEFAULT_BATCH_SIZE,
        help="Number of bytes read from the input per batch when reading buffered.",
    )
    context_size: int = field(
        default=DEFAULT_CONTEXT_SIZE,
        help="Maximum number of bytes of surrounding input to include in error messages.",
    )
    modules: List[str] = field(
        default=[],
        help="Additional modules to import schemas and writers from; they must be available in $PYTHONPATH.",
    )
    log_level: str = field(
        default="INFO",
        help="Log level; invalid records are logged as warnings.",
    )
    dryrun: bool = field(
        default=False,
        help="If true, only print the configuration and exit without reading the input.",
    )


class ConvertCli(BaseCli):
    CONFIG = ConvertConfig
    DESCRIPTION = "Parse a TREC file and output its records in a selected text format."

    @classmethod
    def run(cls, parsed_config: ConvertConfig):
        logger = get_logger("convert", level=parsed_config.log_level)

        import_modules(parsed_config.modules)

        schema = "text" if parsed_config.text else parsed_config.schema
        if not SchemaRegistry.has(schema):
            raise TrecConfigError(f"Unknown schema {schema}; available: {', '.join(SchemaRegistry.names())}")
        if not WriterRegistry.has(parsed_config.format):
            raise TrecConfigError(
                f"Unknown format {parsed_config.format}; available: {', '.join(WriterRegistry.names())}"
            )

        print_config(parsed_config)
        if parsed_config.dryrun:
            logger.info("Exiting due to dryrun.")
            return

        with ExitStack() as stack:
            reader = stack.enter_context(
                TrecReader(
                    path=parsed_config.input,
                    schema=schema,
                    buffered=parsed_config.buffered,
                    batch_size=parsed_config.batch_size,
                    context_size=parsed_config.context_size,
                )
            )
            if parsed_config.output == STDOUT_PATH:
                output = sys.stdout.buffer
            else:
                output = stack.enter_context(smart_open.open(parsed_config.output, "wb"))
            writer = WriterRegistry.get(parsed_config.format)(output)

            for result in reader:
                match(
                    result,
                    writer.write,
                    lambda error: logger.warning("Invalid record: %s", error.message),
                )
            output.flush()

        source = "stdin" if parsed_config.input == STDIN_PATH else parsed_config.input
        logger.info("Read %d records from %s; skipped %d invalid records.", reader.records, source, reader.errors)
