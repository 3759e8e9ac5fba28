from typing import Iterable, List, Optional

from .base import MdCompileError


class LanguageMismatchError(MdCompileError):
    """A group mixes languages, or uses one the compiler does not accept."""

    def __init__(self, group_key: str, languages: Iterable[Optional[str]], expected: str):
        self.group_key = group_key
        self.languages = sorted({lang or "<none>" for lang in languages})
        self.expected = expected
        super().__init__(
            f"Found unsupported language in blocks: {', '.join(self.languages)} (expected '{expected}')"
        )


class CompilationError(MdCompileError):
    """The compiler reported errors or warnings for a group."""

    def __init__(self, group_key: str, diagnostics: List[str]):
        self.group_key = group_key
        self.diagnostics = list(diagnostics)
        super().__init__(f"Failed to compile block for '{group_key}' assembly")
