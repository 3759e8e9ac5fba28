# mdcompile/utils/fs.py
import os
from typing import List, Optional

import pathspec

IGNORE_FILE = ".gitignore"
ALWAYS_IGNORED = [".git/"]
MARKDOWN_PATTERNS = ["*.md", "*.markdown"]


def load_ignore_spec(root: str) -> pathspec.PathSpec:
    """Patterns from `root`/.gitignore, plus `.git/`."""
    patterns = list(ALWAYS_IGNORED)
    ignore_file = os.path.join(root, IGNORE_FILE)
    if os.path.isfile(ignore_file):
        with open(ignore_file, encoding="utf-8", errors="replace") as f:
            patterns.extend(f.read().splitlines())
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


def find_markdown_files(root: str, ignore: Optional[pathspec.PathSpec] = None) -> List[str]:
    """
    Collect markdown documents to check.

    A file path is returned as-is. For a directory, every *.md / *.markdown
    file below it is returned in sorted order, minus whatever the
    directory's own .gitignore excludes.
    """
    if os.path.isfile(root):
        return [root]

    ignore = ignore or load_ignore_spec(root)
    markdown = pathspec.PathSpec.from_lines("gitwildmatch", MARKDOWN_PATTERNS)
    candidates = list(markdown.match_tree_files(root))
    ignored = set(ignore.match_files(candidates))
    return sorted(os.path.join(root, rel) for rel in candidates if rel not in ignored)
