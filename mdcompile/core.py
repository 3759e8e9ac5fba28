# mdcompile/core.py
"""
Per-document orchestration: scan, group, synthesize, compile, report.

Groups are handled one at a time in the order they first appear. A bad
directive aborts the run before anything is compiled; every other failure
is recorded on the group's outcome and the remaining groups still run.
"""
import logging
from typing import List, Optional, Sequence

from ._logging import resolve_logger
from .compile.driver import Compiler, CompilerOptions
from .errors import CompilationError, DirectiveSyntaxError, LanguageMismatchError
from .extract.fences import find_code_blocks
from .group import group_blocks
from .models import FAILED, PASSED, SKIPPED, DocumentReport, Group, GroupOutcome
from .synthesize import CSharpSyntax, synthesize_source
from .utils.ids import IdFactory
from .utils.text import read_document_lines

SEPARATOR = "-" * 45


def _lines_str(group: Group) -> str:
    return ", ".join(str(i) for i in group.start_lines)


def check_document(
    lines: Sequence[str],
    compiler: Compiler,
    *,
    path: str,
    reference_paths: Sequence[str] = (),
    language: Optional[str] = None,
    syntax: Optional[CSharpSyntax] = None,
    options: Optional[CompilerOptions] = None,
    group_id_factory: Optional[IdFactory] = None,
    class_id_factory: Optional[IdFactory] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> DocumentReport:
    """
    Compile every block group of one document.

    A group is skipped outright when any of its blocks says `compile=false`.
    Otherwise all of its blocks must be tagged with `language` (by default
    the language of `syntax`), and all of their synthesized units go to
    `compiler` as one job. Errors and warnings both fail the group.

    Raises DirectiveSyntaxError for a malformed annotation anywhere in the
    document; nothing is compiled in that case.
    """
    log_ = resolve_logger(logger=logger, enabled=log, name=__name__)
    syntax = syntax or CSharpSyntax()
    language = language or syntax.language
    options = options or CompilerOptions()
    report = DocumentReport(path=path)

    # Materialize first so a directive error aborts before any compilation.
    blocks = list(find_code_blocks(lines, path=path))
    groups = group_blocks(blocks, id_factory=group_id_factory)
    log_.debug(f"{path}: {len(blocks)} block(s) in {len(groups)} group(s)")

    for group in groups.values():
        log_.info(SEPARATOR)

        if any(not b.metadata.compile for b in group.blocks):
            log_.info(f"Skipping disabled blocks with ID '{group.display_id}': lines {_lines_str(group)}")
            report.outcomes.append(GroupOutcome(group=group, status=SKIPPED))
            continue

        languages = [b.language for b in group.blocks]
        if not all((lang or "").lower() == language.lower() for lang in languages):
            err = LanguageMismatchError(group.display_id, languages, language)
            log_.info(f"Group '{group.display_id}' failed: {err}")
            report.outcomes.append(GroupOutcome(group=group, status=FAILED, error=err))
            continue

        log_.info(f"Compiling code blocks with ID '{group.display_id}': lines {_lines_str(group)}")
        sources = [
            synthesize_source(lines, b, document_name=path, syntax=syntax, class_id_factory=class_id_factory)
            for b in group.blocks
        ]
        for b in group.blocks:
            log_.debug(
                f"Block: start={b.start_line_index}, length={b.line_count}, "
                f"lang={b.language or ''}, compile={b.metadata.compile}"
            )
        for unit in sources:
            log_.debug(unit.text)

        result = compiler.compile([s.text for s in sources], list(reference_paths), options)
        if result.has_errors or result.has_warnings:
            err = CompilationError(group.display_id, result.diagnostics)
            log_.info(f"  Compilation failed with {len(result.diagnostics)} diagnostic(s).")
            report.outcomes.append(
                GroupOutcome(group=group, status=FAILED, error=err, diagnostics=list(result.diagnostics), sources=sources)
            )
            continue

        log_.info("  Successfully compiled.")
        report.outcomes.append(GroupOutcome(group=group, status=PASSED, sources=sources))

    if report.ok:
        log_.info("No failures occurred.")
    return report


def check_file(path: str, compiler: Compiler, **kwargs) -> DocumentReport:
    """Read `path` and run check_document on its lines."""
    lines = read_document_lines(path)
    return check_document(lines, compiler, path=path, **kwargs)


def format_group_error(path: str, outcome: GroupOutcome) -> List[str]:
    """Console lines for a failed group, in `file(line,col) : error CODE: message` form."""
    group = outcome.group
    start_line = group.blocks[0].start_line_index + 1
    where = f"{path}({start_line},1)"

    if isinstance(outcome.error, LanguageMismatchError):
        return [f"{where} : error MDC0003: {outcome.error} in '{group.display_id}'"]

    out = [f"{where} : error MDC0001: Failed to compile block for '{group.display_id}' assembly"]
    out.extend(outcome.diagnostics)
    return out


def format_document_failure(path: str) -> str:
    return f"{path} : error MDC0002: Failed to compile one or more code blocks"


def format_directive_error(err: DirectiveSyntaxError) -> str:
    path = err.path or "<document>"
    where = f"{path}({err.line_number},1)" if err.line_number is not None else path
    return f"{where} : error MDC0004: Bad parameters: {err.line.strip()} ({err.reason})"
