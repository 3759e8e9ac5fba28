import textwrap

import pytest

from mdcompile.errors import DirectiveSyntaxError
from mdcompile.extract.fences import find_code_blocks, get_block_content, get_block_lines
from mdcompile.models import BlockConfig


def _lines(s: str):
    return textwrap.dedent(s).strip("\n").splitlines()


def test_two_blocks_with_same_assembly():
    lines = [
        "text",
        "<!-- MdCompile: assembly=foo -->",
        "```csharp",
        "int x = 1;",
        "```",
        "<!-- MdCompile: assembly=foo -->",
        "```csharp",
        "int y = 2;",
        "```",
    ]
    blocks = list(find_code_blocks(lines))
    assert [(b.start_line_index, b.line_count) for b in blocks] == [(3, 1), (7, 1)]
    assert all(b.language == "csharp" for b in blocks)
    assert all(b.metadata.group_id == "foo" for b in blocks)


def test_language_tag_lowercased_and_optional():
    lines = _lines(
        """
        ```CSharp
        a
        ```
        ```
        b
        ```
        """
    )
    blocks = list(find_code_blocks(lines))
    assert blocks[0].language == "csharp"
    assert blocks[1].language is None


def test_trailing_text_on_closing_fence_is_ignored():
    lines = ["```csharp", "x", "```python", "after"]
    blocks = list(find_code_blocks(lines))
    assert len(blocks) == 1
    assert blocks[0].language == "csharp"
    assert blocks[0].line_count == 1


def test_indented_fences_are_recognized():
    lines = ["1. Step", "    ```csharp", "    var a = 1;", "    ```"]
    (block,) = find_code_blocks(lines)
    assert block.start_line_index == 2
    assert get_block_lines(lines, block) == ["    var a = 1;"]


def test_adjacent_fences_yield_empty_block():
    (block,) = find_code_blocks(["```csharp", "```"])
    assert block.start_line_index == 1
    assert block.line_count == 0


def test_unterminated_fence_runs_to_end_of_document():
    lines = ["intro", "```csharp", "int a;", "int b;"]
    blocks = list(find_code_blocks(lines))
    assert len(blocks) == 1
    assert blocks[0].start_line_index == 2
    assert blocks[0].line_count == 2


def test_unterminated_fence_on_last_line():
    (block,) = find_code_blocks(["text", "```"])
    assert block.start_line_index == 2
    assert block.line_count == 0


def test_directive_only_applies_directly_above_fence():
    lines = _lines(
        """
        <!-- MdCompile: compile=false -->

        ```csharp
        x
        ```
        """
    )
    (block,) = find_code_blocks(lines)
    assert block.metadata == BlockConfig()


def test_directive_is_not_applied_to_closing_fence_or_next_block():
    lines = _lines(
        """
        ```csharp
        <!-- MdCompile: assembly=inside -->
        ```
        ```csharp
        y
        ```
        """
    )
    blocks = list(find_code_blocks(lines))
    assert [b.metadata.group_id for b in blocks] == [None, None]


def test_blocks_without_directive_get_independent_defaults():
    lines = ["```csharp", "a", "```", "```csharp", "b", "```"]
    first, second = find_code_blocks(lines)
    first.metadata.imports.append("System")
    assert second.metadata.imports == []


def test_content_roundtrip_and_ordering():
    lines = _lines(
        """
        # Title
        ```csharp
        class A {}

        class B {}
        ```
        prose
        ```
        plain
        ```
        """
    )
    blocks = list(find_code_blocks(lines))
    assert get_block_lines(lines, blocks[0]) == ["class A {}", "", "class B {}"]
    assert get_block_content(lines, blocks[1]) == "plain"

    previous_end = 0
    for b in blocks:
        assert b.start_line_index >= previous_end
        previous_end = b.end_line_index


def test_scanner_is_restartable():
    lines = ["```csharp", "a", "```"]
    assert list(find_code_blocks(lines)) == list(find_code_blocks(lines))


def test_bad_directive_reports_line_number():
    lines = ["intro", "<!-- MdCompile: nope -->", "```csharp", "x", "```"]
    with pytest.raises(DirectiveSyntaxError) as info:
        list(find_code_blocks(lines, path="guide.md"))
    assert info.value.line_number == 2
    assert info.value.path == "guide.md"
