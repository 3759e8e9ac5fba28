from .directive import (
    DIRECTIVE_PREFIX,
    DIRECTIVE_SUFFIX,
    OPTION_TABLE,
    extract_directive_body,
    parse_directive_body,
    parse_directive_line,
)
from .fences import FENCE, find_code_blocks, get_block_content, get_block_lines

__all__ = [
    "DIRECTIVE_PREFIX",
    "DIRECTIVE_SUFFIX",
    "FENCE",
    "OPTION_TABLE",
    "extract_directive_body",
    "parse_directive_body",
    "parse_directive_line",
    "find_code_blocks",
    "get_block_content",
    "get_block_lines",
]
