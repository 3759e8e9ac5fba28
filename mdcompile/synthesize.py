# mdcompile/synthesize.py
"""
Turns one fenced block into a self-contained compilation unit.

The block's lines are placed between two `#line` directives so that the
compiler reports errors in them against the markdown file itself; every
line the tool adds around them is attributed to a fake "Inserted content"
file instead.
"""
from __future__ import annotations

import os
from typing import List, Optional, Sequence

from .extract.fences import get_block_lines
from .models import CodeBlock, SourceUnit
from .utils.ids import IdFactory, random_id

CSHARP = "csharp"


class CSharpSyntax:
    """The C# spelling of every construct the synthesizer emits."""

    language = CSHARP
    namespace_name = "Test"
    class_prefix = "Anonymous_"
    inserted_file = "Inserted content"

    def import_statement(self, name: str) -> str:
        return f"using {name};"

    def open_namespace(self) -> List[str]:
        return [f"namespace {self.namespace_name}", "{"]

    def open_class(self, suffix: str) -> List[str]:
        return [f"class {self.class_prefix}{suffix}", "{"]

    def close_scope(self) -> List[str]:
        return ["}"]

    def line_marker(self, line_number: int, file_name: str) -> str:
        return f'#line {line_number} "{file_name}"'

    def reset_marker(self) -> str:
        return self.line_marker(1, self.inserted_file)

    def default_marker(self) -> str:
        return "#line default"


def synthesize_source(
    lines: Sequence[str],
    block: CodeBlock,
    *,
    document_name: str,
    syntax: Optional[CSharpSyntax] = None,
    class_id_factory: Optional[IdFactory] = None,
    newline: str = os.linesep,
) -> SourceUnit:
    """
    Build the compilation unit for `block`.

    Layout: reset marker, imports, namespace, class, prefix, a marker mapping
    to the block's first document line, the block's lines, reset marker,
    suffix, closing braces (class before namespace), `#line default`.
    """
    syntax = syntax or CSharpSyntax()
    make_id = class_id_factory or random_id
    config = block.metadata

    out: List[str] = [syntax.reset_marker()]
    out.extend(syntax.import_statement(name) for name in config.imports)

    if config.wrap_in_namespace:
        out.extend(syntax.open_namespace())
    if config.wrap_in_class:
        out.extend(syntax.open_class(make_id()))
    if config.prefix:
        out.append(config.prefix)

    out.append(syntax.line_marker(block.start_line_index + 1, document_name))

    # Line numbers below are 1-based positions in the joined text.
    first_content_line = len(out) + 1
    line_map = {
        first_content_line + offset: block.start_line_index + 1 + offset
        for offset in range(block.line_count)
    }
    out.append(newline.join(get_block_lines(lines, block)))

    out.append(syntax.reset_marker())
    if config.suffix:
        out.append(config.suffix)
    if config.wrap_in_class:
        out.extend(syntax.close_scope())
    if config.wrap_in_namespace:
        out.extend(syntax.close_scope())
    out.append(syntax.default_marker())

    return SourceUnit(text=newline.join(out), line_map=line_map)
