from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class BlockConfig:
    """Per-block settings taken from the `<!-- MdCompile: ... -->` line above a fence."""

    compile: bool = True
    group_id: Optional[str] = None
    imports: List[str] = field(default_factory=list)
    wrap_in_namespace: bool = True
    wrap_in_class: bool = False
    prefix: Optional[str] = None
    suffix: Optional[str] = None


@dataclass(frozen=True)
class CodeBlock:
    """One fenced region of a document, addressed by document line indexes."""

    start_line_index: int  # 0-based, first line after the opening fence
    line_count: int
    language: Optional[str]
    metadata: BlockConfig

    @property
    def end_line_index(self) -> int:
        """Index one past the last content line."""
        return self.start_line_index + self.line_count
