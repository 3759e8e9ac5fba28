from typing import Optional

from .base import MdCompileError


class DirectiveSyntaxError(MdCompileError):
    """
    A `<!-- MdCompile: ... -->` annotation could not be parsed.

    This is fatal for the whole run: the annotation was written by a person
    and a typo in it must be surfaced instead of silently compiling the
    block with the wrong settings.
    """

    def __init__(
        self,
        reason: str,
        line: str,
        line_number: Optional[int] = None,
        path: Optional[str] = None,
    ):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        self.path = path
        super().__init__(self._render())

    def _render(self) -> str:
        where = ""
        if self.path:
            where = self.path
        if self.line_number is not None:
            where = f"{where}({self.line_number})" if where else f"line {self.line_number}"
        prefix = f"{where}: " if where else ""
        return f"{prefix}Bad parameters: {self.line.strip()} ({self.reason})"

    def located(self, *, line_number: Optional[int] = None, path: Optional[str] = None) -> "DirectiveSyntaxError":
        """Return a copy with position information filled in."""
        return DirectiveSyntaxError(
            self.reason,
            self.line,
            line_number=line_number if line_number is not None else self.line_number,
            path=path if path is not None else self.path,
        )
