# must import schemas to register them
from .base import BaseSchema
from .text import TextSchema
from .web import WebSchema

__all__ = ["BaseSchema", "TextSchema", "WebSchema"]
