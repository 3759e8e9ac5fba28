from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..errors import MdCompileError
from .blocks import CodeBlock

ANONYMOUS_GROUP = "<anonymous>"

PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"


@dataclass
class Group:
    """Blocks that compile together, in document order."""

    key: str
    blocks: List[CodeBlock]

    @property
    def group_id(self) -> Optional[str]:
        """The explicit `assembly=` id, or None for a singleton group."""
        if not self.blocks:
            return None
        return self.blocks[0].metadata.group_id or None

    @property
    def display_id(self) -> str:
        return self.group_id or ANONYMOUS_GROUP

    @property
    def start_lines(self) -> List[int]:
        return [b.start_line_index for b in self.blocks]


@dataclass
class SourceUnit:
    """A synthesized compilation unit plus its mapping back to the document."""

    text: str
    line_map: Dict[int, int] = field(default_factory=dict)

    def original_line(self, synthesized_line: int) -> Optional[int]:
        """1-based document line for a 1-based line of `text`, if it came from the document."""
        return self.line_map.get(synthesized_line)


@dataclass
class GroupOutcome:
    group: Group
    status: str
    error: Optional[MdCompileError] = None
    diagnostics: List[str] = field(default_factory=list)
    sources: List[SourceUnit] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status != FAILED


@dataclass
class DocumentReport:
    path: str
    outcomes: List[GroupOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failures(self) -> List[GroupOutcome]:
        return [o for o in self.outcomes if not o.ok]
