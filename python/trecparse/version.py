from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("trecparse")
except PackageNotFoundError:
    # source checkout that was never installed
    __version__ = "0.0.0"

__all__ = ["__version__"]
