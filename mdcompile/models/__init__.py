from .blocks import BlockConfig, CodeBlock
from .report import (
    ANONYMOUS_GROUP,
    FAILED,
    PASSED,
    SKIPPED,
    DocumentReport,
    Group,
    GroupOutcome,
    SourceUnit,
)

__all__ = [
    "BlockConfig",
    "CodeBlock",
    "Group",
    "GroupOutcome",
    "DocumentReport",
    "SourceUnit",
    "ANONYMOUS_GROUP",
    "PASSED",
    "FAILED",
    "SKIPPED",
]
