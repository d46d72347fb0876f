from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console

from trecparse.cli import BaseCli, field
from trecparse.version import __version__

# libraries whose version decides which inputs can be read
READER_LIBRARIES = ("msgspec", "smart_open", "zstandard")


@dataclass
class VersionConfig:
    verbose: bool = field(default=False, help="Also print the versions of the libraries used to read input.")


class VersionCli(BaseCli):
    CONFIG = VersionConfig
    DESCRIPTION = "Print the version of trecparse."

    @classmethod
    def run(cls, parsed_config: VersionConfig):
        console = Console()
        console.print(f"trecparse {__version__}")
        if not parsed_config.verbose:
            return

        for library in READER_LIBRARIES:
            try:
                console.print(f"  {library} {version(library)}")
            except PackageNotFoundError:
                console.print(f"  {library} not installed")
