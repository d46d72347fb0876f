import importlib
import importlib.util
import io
import os
import sys
from typing import List, Optional

import zstandard
from necessary import necessary
from smart_open import register_compressor
from smart_open.compression import get_supported_extensions

from .errors import TrecConfigError
from .loggers import get_logger

__all__ = ["import_modules", "register_zstd"]

ZSTD_EXTENSIONS = (".zst", ".zstd")

logger = get_logger("utils")


def _import_from_path(path: str) -> None:
    path = os.path.abspath(path)
    if os.path.isdir(path):
        location = os.path.join(path, "__init__.py")
        search_locations: Optional[List[str]] = [path]
    else:
        location, search_locations = path, None

    module_name, _ = os.path.splitext(os.path.basename(path))
    if (loaded := sys.modules.get(module_name)) is not None:
        if os.path.abspath(getattr(loaded, "__file__", None) or "") != location:
            raise TrecConfigError(f"Cannot import {path}: another module named {module_name} is already loaded")
        logger.debug("%s already imported", path)
        return

    spec = importlib.util.spec_from_file_location(
        module_name, location, submodule_search_locations=search_locations
    )
    if spec is None or spec.loader is None:
        raise TrecConfigError(f"Cannot import {path}: not a Python module or package")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        del sys.modules[module_name]
        raise


def import_modules(modules: Optional[List[str]]) -> None:
    """Import user modules so that the schemas and writers they define get registered.

    Each entry is either a dotted module name available on `$PYTHONPATH`, or the path of a
    `.py` file or of a package directory.
    """
    for module in modules or []:
        if os.path.exists(module):
            _import_from_path(module)
            continue
        try:
            importlib.import_module(module)
        except ModuleNotFoundError as ex:
            raise TrecConfigError(f"Cannot import {module}: no such module or path") from ex


def _open_zstd(file_obj, mode: str):
    stream = zstandard.open(file_obj, mode=mode)
    if "b" not in mode:
        return stream
    # smart_open proxies expect buffered binary streams
    return io.BufferedWriter(stream) if "w" in mode else io.BufferedReader(stream)


def register_zstd() -> None:
    """Let smart_open read and write `.zst` and `.zstd` files."""
    with necessary(("smart_open", "7.0.4"), soft=True) as has_zstd:
        if has_zstd:
            from smart_open.compression import _handle_zstd as handler
        else:
            handler = _open_zstd

    supported = get_supported_extensions()
    for ext in ZSTD_EXTENSIONS:
        if ext not in supported:
            register_compressor(ext, handler)


register_zstd()
