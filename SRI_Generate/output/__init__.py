# Auto-generated __init__.py

from . import tags
from .tags import generate_tag
from . import writer
from .writer import build_output
from .writer import render_output
from .writer import write_output

__all__ = [
    "tags",
    "writer",
    "build_output",
    "generate_tag",
    "render_output",
    "write_output",
]
