from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from trecparse.cli import BaseCli, field
from trecparse.core.registry import BaseRegistry
from trecparse.core.utils import import_modules

# must import writers and schemas to register them
from trecparse.core import writers  # noqa: F401
from trecparse import schemas  # noqa: F401


@dataclass
class ListerConfig:
    modules: List[str] = field(
        default=[],
        help="List of Python modules $PYTHONPATH to import custom schemas and writers from.",
    )
    filter: Optional[str] = field(
        default=None,
        help="Filter which registries to list.",
    )


class ListerCli(BaseCli):
    CONFIG = ListerConfig
    DESCRIPTION = "List all available schemas and output formats."

    @classmethod
    def run(cls, parsed_config: ListerConfig):
        import_modules(parsed_config.modules)

        console = Console()
        for registry_name, registry_cls in BaseRegistry.registries():
            if parsed_config.filter is not None and parsed_config.filter.lower() not in registry_name.lower():
                continue

            table = Table(title=registry_name, style="bold")
            table.add_column("name", justify="left", style="cyan", no_wrap=True, ratio=1)
            table.add_column("class", justify="left", style="magenta", no_wrap=False, ratio=1)
            table.add_column("description", justify="left", style="blue", no_wrap=False, ratio=4)

            for item_name, item_cls, item_desc in registry_cls.items_with_description():
                table.add_row(item_name, f"{item_cls.__module__}.{item_cls.__name__}", item_desc or "")

            console.print(table)
