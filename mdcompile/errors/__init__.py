from .base import MdCompileError
from .compiler import CompilerUnavailableError
from .directive import DirectiveSyntaxError
from .group import CompilationError, LanguageMismatchError

__all__ = [
    "MdCompileError",
    "DirectiveSyntaxError",
    "LanguageMismatchError",
    "CompilationError",
    "CompilerUnavailableError",
]
