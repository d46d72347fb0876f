from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import smart_open
from yaml import safe_load

from .convert import ConvertCli
from .listers import ListerCli
from .version import VersionCli

AVAILABLE_COMMANDS = {
    "convert": ConvertCli,
    "list": ListerCli,
    "version": VersionCli,
}


def read_config(path: Union[None, str, Path]) -> Dict[str, Any]:
    """Read a configuration file if one was given"""
    if path is None:
        return {}

    with smart_open.open(str(path), mode="rt") as f:
        return dict(safe_load(f) or {})


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI"""

    parser = ArgumentParser(
        prog="trecparse",
        usage="trecparse {global options} [command] {command options}",
        description="Extract documents from TREC text and web corpora",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to configuration optional file",
        type=Path,
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    subparsers.choices = AVAILABLE_COMMANDS.keys()  # type: ignore
    for command, cli in AVAILABLE_COMMANDS.items():
        cli.make_parser(subparsers.add_parser(command, help=cli.DESCRIPTION))

    args = parser.parse_args(argv)

    # command and config path are not part of the command config
    command = args.__dict__.pop("command")
    config_path = args.__dict__.pop("config", None) or None

    config = read_config(config_path)

    cli = AVAILABLE_COMMANDS[command]
    return cli.run_from_args(args=args, config=config)


if __name__ == "__main__":
    main()
