# mdcompile/extract/fences.py
from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from ..errors import DirectiveSyntaxError
from ..models import BlockConfig, CodeBlock
from .directive import parse_directive_line

FENCE = "```"


def find_code_blocks(lines: Sequence[str], *, path: Optional[str] = None) -> Iterator[CodeBlock]:
    """
    Scan `lines` once, top to bottom, and yield every fenced block in order.

    Any line whose stripped text starts with ``` toggles between "outside"
    and "inside" a block; nothing else matters to the scan. Text after the
    marker is the language tag on an opening fence and is ignored on a
    closing one. The line directly above an opening fence may carry a
    directive. A block left open at the end of the document runs to the
    last line.

    Raises DirectiveSyntaxError (with the 1-based line number of the
    directive) as soon as a malformed directive is reached.
    """
    open_start: Optional[int] = None
    open_language: Optional[str] = None
    open_config: Optional[BlockConfig] = None

    for i, line in enumerate(lines):
        trimmed = line.strip()
        if not trimmed.startswith(FENCE):
            continue

        if open_start is not None:
            yield CodeBlock(
                start_line_index=open_start,
                line_count=i - open_start,
                language=open_language,
                metadata=open_config,
            )
            open_start = open_language = open_config = None
            continue

        config = None
        if i > 0:
            try:
                config = parse_directive_line(lines[i - 1])
            except DirectiveSyntaxError as e:
                raise e.located(line_number=i, path=path) from e

        rest = trimmed[len(FENCE):].strip()
        open_start = i + 1
        open_language = rest.lower() if rest else None
        open_config = config if config is not None else BlockConfig()

    if open_start is not None:
        yield CodeBlock(
            start_line_index=open_start,
            line_count=len(lines) - open_start,
            language=open_language,
            metadata=open_config,
        )


def get_block_lines(lines: Sequence[str], block: CodeBlock) -> List[str]:
    """The document lines between the block's fences, verbatim."""
    return list(lines[block.start_line_index:block.end_line_index])


def get_block_content(lines: Sequence[str], block: CodeBlock, newline: str = "\n") -> str:
    return newline.join(get_block_lines(lines, block))
