__version__ = "0.1.0"

from .compile import CompilationResult, CompilerOptions, CSharpCompiler
from .core import check_document, check_file
from .errors import (
    CompilationError,
    CompilerUnavailableError,
    DirectiveSyntaxError,
    LanguageMismatchError,
    MdCompileError,
)
from .extract import find_code_blocks, get_block_content, parse_directive_line
from .group import group_blocks
from .models import BlockConfig, CodeBlock, DocumentReport, Group, GroupOutcome, SourceUnit
from .synthesize import CSharpSyntax, synthesize_source

__all__ = [
    "__version__",
    "check_document",
    "check_file",
    "find_code_blocks",
    "get_block_content",
    "parse_directive_line",
    "group_blocks",
    "synthesize_source",
    "CSharpSyntax",
    "CSharpCompiler",
    "CompilerOptions",
    "CompilationResult",
    "BlockConfig",
    "CodeBlock",
    "Group",
    "GroupOutcome",
    "DocumentReport",
    "SourceUnit",
    "MdCompileError",
    "DirectiveSyntaxError",
    "LanguageMismatchError",
    "CompilationError",
    "CompilerUnavailableError",
]
