import logging
import textwrap

import pytest

from mdcompile.core import (
    check_document,
    check_file,
    format_directive_error,
    format_document_failure,
    format_group_error,
)
from mdcompile.errors import CompilationError, DirectiveSyntaxError, LanguageMismatchError
from mdcompile.models import FAILED, PASSED, SKIPPED
from mdcompile.synthesize import CSharpSyntax


def _lines(s: str):
    return textwrap.dedent(s).strip("\n").splitlines()


SAME_ASSEMBLY = [
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


def test_blocks_sharing_an_assembly_compile_as_one_job(compiler, ids):
    report = check_document(SAME_ASSEMBLY, compiler, path="doc.md", group_id_factory=ids)
    assert report.ok
    assert len(report.outcomes) == 1
    outcome = report.outcomes[0]
    assert outcome.status == PASSED
    assert outcome.group.key == "foo"
    assert [(b.start_line_index, b.line_count) for b in outcome.group.blocks] == [(3, 1), (7, 1)]

    assert len(compiler.calls) == 1
    sources = compiler.calls[0]["sources"]
    assert len(sources) == 2
    assert "int x = 1;" in sources[0]
    assert "int y = 2;" in sources[1]


def test_default_compiler_options(compiler):
    check_document(SAME_ASSEMBLY, compiler, path="doc.md", reference_paths=["a.dll", "b.dll"])
    call = compiler.calls[0]
    assert call["references"] == ["a.dll", "b.dll"]
    opts = call["options"]
    assert opts.generate_in_memory is True
    assert opts.treat_warnings_as_errors is True
    assert opts.generate_executable is False


def test_one_disabled_block_skips_the_whole_group(compiler):
    lines = _lines(
        """
        <!-- MdCompile: assembly=demo -->
        ```csharp
        int a = 1;
        ```
        <!-- MdCompile: assembly=demo, compile=false -->
        ```csharp
        this is not code
        ```
        <!-- MdCompile: assembly=demo -->
        ```csharp
        int b = 2;
        ```
        """
    )
    report = check_document(lines, compiler, path="doc.md")
    assert report.ok
    assert [o.status for o in report.outcomes] == [SKIPPED]
    assert compiler.calls == []


def test_mixed_languages_fail_the_group_without_compiling(compiler):
    lines = _lines(
        """
        <!-- MdCompile: assembly=mix -->
        ```csharp
        int a = 1;
        ```
        <!-- MdCompile: assembly=mix -->
        ```python
        a = 1
        ```
        """
    )
    report = check_document(lines, compiler, path="doc.md")
    assert not report.ok
    (outcome,) = report.outcomes
    assert outcome.status == FAILED
    assert isinstance(outcome.error, LanguageMismatchError)
    assert outcome.error.languages == ["csharp", "python"]
    assert compiler.calls == []


def test_language_error_uses_display_id(compiler):
    lines = [
        "<!-- MdCompile: assembly=mix -->",
        "```csharp",
        "int a;",
        "```",
        "<!-- MdCompile: assembly=mix -->",
        "```python",
        "a = 1",
        "```",
        "```python",
        "b = 2",
        "```",
    ]
    report = check_document(lines, compiler, path="doc.md")
    assert report.outcomes[0].error.group_key == "mix"
    assert report.outcomes[1].error.group_key == "<anonymous>"


def test_language_defaults_to_syntax_language(compiler):
    class VbSyntax(CSharpSyntax):
        language = "vb"

    report = check_document(["```vb", "Dim a As Integer", "```"], compiler, path="doc.md", syntax=VbSyntax())
    assert report.ok
    assert len(compiler.calls) == 1

    report = check_document(["```csharp", "int a;", "```"], compiler, path="doc.md", syntax=VbSyntax())
    assert isinstance(report.outcomes[0].error, LanguageMismatchError)


def test_untagged_block_is_a_language_error(compiler):
    report = check_document(["```", "int a;", "```"], compiler, path="doc.md")
    assert isinstance(report.outcomes[0].error, LanguageMismatchError)
    assert compiler.calls == []


def test_language_comparison_is_case_insensitive(compiler):
    report = check_document(["```CSHARP", "int a;", "```"], compiler, path="doc.md", language="CSharp")
    assert report.ok
    assert len(compiler.calls) == 1


def test_failures_do_not_stop_later_groups(failing_compiler):
    lines = _lines(
        """
        ```csharp
        int x = y;
        ```
        ```python
        print(1)
        ```
        ```csharp
        int z = 3;
        ```
        """
    )
    report = check_document(lines, failing_compiler, path="doc.md")
    assert [o.status for o in report.outcomes] == [FAILED, FAILED, PASSED]
    assert len(failing_compiler.calls) == 2
    assert isinstance(report.outcomes[0].error, CompilationError)
    assert report.outcomes[0].diagnostics == ["doc.md(4,1): error CS0103: The name 'y' does not exist"]
    assert not report.ok
    assert len(report.failures) == 2


def test_warnings_fail_the_group(warning_compiler):
    report = check_document(["```csharp", "int e;", "```"], warning_compiler, path="doc.md")
    assert report.outcomes[0].status == FAILED
    assert report.outcomes[0].diagnostics == ["warning CS0168: x"]


def test_directive_error_aborts_before_compiling(compiler):
    lines = _lines(
        """
        ```csharp
        int a = 1;
        ```
        <!-- MdCompile: assembly=x, nonsense -->
        ```csharp
        int b = 2;
        ```
        """
    )
    with pytest.raises(DirectiveSyntaxError) as info:
        check_document(lines, compiler, path="doc.md")
    assert info.value.line_number == 4
    assert compiler.calls == []


def test_document_without_blocks_passes(compiler):
    report = check_document(["# Nothing here"], compiler, path="doc.md")
    assert report.ok
    assert report.outcomes == []


def test_verbose_logging(compiler, caplog):
    with caplog.at_level(logging.DEBUG):
        check_document(SAME_ASSEMBLY, compiler, path="doc.md", log=True)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Compiling code blocks with ID 'foo': lines 3, 7" in m for m in messages)
    assert any("Successfully compiled." in m for m in messages)
    assert any("No failures occurred." in m for m in messages)


def test_check_file_reads_document(tmp_path, compiler):
    doc = tmp_path / "guide.md"
    doc.write_text("\ufeff" + "\n".join(SAME_ASSEMBLY) + "\n", encoding="utf-8")
    report = check_file(str(doc), compiler)
    assert report.ok
    assert report.path == str(doc)
    assert f'#line 4 "{doc}"' in compiler.calls[0]["sources"][0]


def test_error_formatting(failing_compiler):
    lines = ["<!-- MdCompile: assembly=foo -->", "```csharp", "int x = y;", "```", "```python", "x", "```"]
    report = check_document(lines, failing_compiler, path="doc.md")
    compile_lines = format_group_error("doc.md", report.outcomes[0])
    assert compile_lines[0] == "doc.md(3,1) : error MDC0001: Failed to compile block for 'foo' assembly"
    assert compile_lines[1:] == report.outcomes[0].diagnostics

    (lang_line,) = format_group_error("doc.md", report.outcomes[1])
    assert lang_line.startswith("doc.md(6,1) : error MDC0003:")
    assert "'<anonymous>'" in lang_line

    assert format_document_failure("doc.md") == "doc.md : error MDC0002: Failed to compile one or more code blocks"


def test_directive_error_formatting():
    err = DirectiveSyntaxError("unknown option 'x'", "<!-- MdCompile: x -->", line_number=7, path="a.md")
    assert format_directive_error(err) == "a.md(7,1) : error MDC0004: Bad parameters: <!-- MdCompile: x --> (unknown option 'x')"
