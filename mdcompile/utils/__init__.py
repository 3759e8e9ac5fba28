# mdcompile/utils/__init__.py
from .fs import find_markdown_files, load_ignore_spec
from .ids import CounterIdFactory, random_id
from .text import read_document_lines

__all__ = [
    "find_markdown_files",
    "load_ignore_spec",
    "CounterIdFactory",
    "random_id",
    "read_document_lines",
]
