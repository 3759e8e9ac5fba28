from .driver import (
    COMPILER_ENV_VAR,
    CompilationResult,
    Compiler,
    CompilerOptions,
    CSharpCompiler,
    parse_compiler_output,
)

__all__ = [
    "COMPILER_ENV_VAR",
    "CompilationResult",
    "Compiler",
    "CompilerOptions",
    "CSharpCompiler",
    "parse_compiler_output",
]
