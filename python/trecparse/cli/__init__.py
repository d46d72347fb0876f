"""
Command line plumbing shared by the trecparse subcommands.

A subcommand declares its options as a flat dataclass whose fields are made with
`field(...)`. `make_parser` adds one option per field to an `ArgumentParser`;
`BaseCli.run_from_args` then layers dataclass defaults, an optional YAML config
and the command line (highest precedence) into an OmegaConf structured config
and hands it to `run`.
"""

from argparse import ArgumentParser, Namespace
from copy import deepcopy
from dataclasses import field as dataclass_field
from dataclasses import fields
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from omegaconf import MISSING, DictConfig
from omegaconf import OmegaConf as om
from omegaconf.errors import OmegaConfBaseException
from rich.console import Console
from rich.syntax import Syntax

from ..core.errors import TrecConfigError

__all__ = ["BaseCli", "field", "make_parser", "namespace_to_omegaconf", "print_config"]

C = TypeVar("C")
P = TypeVar("P", bound=ArgumentParser)


def field(default: Any = MISSING, help: Optional[str] = None) -> Any:
    """Declare a config option; mutable defaults are copied for every config instance."""
    return dataclass_field(default_factory=lambda: deepcopy(default), metadata={"help": help})


def _strip_optional(typ_: Any) -> Any:
    if get_origin(typ_) is Union:
        args = [a for a in get_args(typ_) if a is not type(None)]  # noqa: E721
        if len(args) == 1:
            return args[0]
    return typ_


def make_parser(parser: P, config: Type[Any]) -> P:
    """Add an option for every field of the `config` dataclass.

    Booleans (optional or not) get a `--name` / `--no-name` pair and lists take any number of
    values. Options default to `MISSING` so that only what was typed overrides the config.
    """
    hints = get_type_hints(config)
    for dt_field in fields(config):
        name = dt_field.name
        help_ = dt_field.metadata.get("help")
        typ_ = _strip_optional(hints[name])

        if typ_ is bool:
            parser.add_argument(f"--{name}", dest=name, action="store_true", default=MISSING, help=help_)
            parser.add_argument(f"--no-{name}", dest=name, action="store_false", default=MISSING)
        elif get_origin(typ_) is list:
            parser.add_argument(f"--{name}", dest=name, nargs="*", default=MISSING, help=help_)
        else:
            parser.add_argument(f"--{name}", dest=name, default=MISSING, help=help_)

    return parser


def namespace_to_omegaconf(args: Namespace, structured: Type[C], config: Optional[Dict[str, Any]] = None) -> C:
    """Merge dataclass defaults, then `config` (e.g. read from YAML), then the options in `args`."""
    overrides = {k: v for k, v in vars(args).items() if v is not MISSING}
    try:
        merged = om.merge(om.structured(structured), om.create(config or {}), om.create(overrides))
        om.resolve(merged)
    except OmegaConfBaseException as ex:
        raise TrecConfigError(f"Invalid value for `{ex.full_key}`: {type(ex).__name__}") from ex

    return merged  # pyright: ignore


def print_config(config: Any, console: Optional[Console] = None) -> None:
    """Print `config` as highlighted YAML; goes to stderr because stdout may carry records."""
    if not isinstance(config, DictConfig):
        config = om.create(config)

    console = console or Console(stderr=True)
    console.print(Syntax(om.to_yaml(config, sort_keys=True).strip(), lexer="yaml", theme="ansi_dark"))


class BaseCli(Generic[C]):
    CONFIG: Type[C]
    DESCRIPTION: Optional[str] = None

    @classmethod
    def make_parser(cls, parser: P) -> P:
        return make_parser(parser, cls.CONFIG)

    @classmethod
    def run_from_args(cls, args: Namespace, config: Optional[Dict[str, Any]] = None):
        parsed_config = namespace_to_omegaconf(args, cls.CONFIG, config)
        try:
            return cls.run(parsed_config)
        except OmegaConfBaseException as ex:
            # required options are only checked when `run` first reads them
            raise TrecConfigError(f"Missing or invalid value for `{ex.full_key}`: {type(ex).__name__}") from ex

    @classmethod
    def run(cls, parsed_config: C):
        raise NotImplementedError("Abstract method; must be implemented in subclass")
