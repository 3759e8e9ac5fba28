# mdcompile/compile/driver.py
"""
The external compiler boundary.

`CSharpCompiler` shells out to `csc` (or Mono's `mcs`) and reduces its
console output to a CompilationResult. Anything with the same `compile`
signature can be handed to `mdcompile.core.check_document` instead.
"""
from __future__ import annotations

import os
import re
import shlex
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .._logging import resolve_logger
from ..errors import CompilerUnavailableError

COMPILER_ENV_VAR = "MDCOMPILE_CSC"
DEFAULT_COMMANDS = ("csc", "mcs")

_DIAGNOSTIC_RE = re.compile(r"\b(?P<kind>error|warning)\s+[A-Z]+\d+\s*:", re.IGNORECASE)


@dataclass
class CompilerOptions:
    generate_in_memory: bool = True
    treat_warnings_as_errors: bool = True
    generate_executable: bool = False
    # Only used when generate_in_memory is False.
    output_path: Optional[str] = None


@dataclass
class CompilationResult:
    has_errors: bool = False
    has_warnings: bool = False
    diagnostics: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.has_errors or self.has_warnings)


class Compiler(Protocol):
    def compile(
        self,
        sources: Sequence[str],
        reference_paths: Sequence[str] = (),
        options: Optional[CompilerOptions] = None,
    ) -> CompilationResult: ...


def parse_compiler_output(output: str, returncode: int = 0) -> CompilationResult:
    """Classify csc/mcs console output into errors and warnings."""
    result = CompilationResult()
    lines = [ln.rstrip() for ln in output.splitlines() if ln.strip()]
    for line in lines:
        m = _DIAGNOSTIC_RE.search(line)
        if not m:
            continue
        if m.group("kind").lower() == "error":
            result.has_errors = True
        else:
            result.has_warnings = True
        result.diagnostics.append(line)

    if returncode != 0 and not result.has_errors:
        result.has_errors = True
        if not result.diagnostics:
            result.diagnostics.extend(lines or [f"compiler exited with status {returncode}"])
    return result


def _which(cmd: str) -> Optional[str]:
    """shutil.which, but honouring an explicit path as-is."""
    if os.path.dirname(cmd):
        return cmd if os.path.isfile(cmd) else None
    return shutil.which(cmd)


class CSharpCompiler:
    """
    Runs the C# command-line compiler on synthesized units.

    Use as a context manager; the scratch directory holding the unit files
    and in-memory outputs is removed on exit, even after failed groups.
    """

    def __init__(
        self,
        command: Optional[str] = None,
        *,
        logger=None,
        log: bool = False,
    ):
        self._command = command
        self._argv: Optional[List[str]] = None
        self._scratch: Optional[str] = None
        self._jobs = 0
        self.log = resolve_logger(logger=logger, enabled=log, name=__name__)

    def __enter__(self) -> "CSharpCompiler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._scratch is not None:
            shutil.rmtree(self._scratch, ignore_errors=True)
            self._scratch = None

    def resolve_command(self) -> List[str]:
        """
        The compiler argv prefix: the explicit command, then $MDCOMPILE_CSC,
        then the first of csc/mcs found on PATH.
        """
        if self._argv is not None:
            return self._argv

        configured = self._command or os.environ.get(COMPILER_ENV_VAR)
        if configured:
            argv = shlex.split(configured, posix=os.name != "nt")
            if not argv:
                raise CompilerUnavailableError("Empty compiler command")
        else:
            found = next((p for p in (_which(c) for c in DEFAULT_COMMANDS) if p), None)
            if found is None:
                raise CompilerUnavailableError(
                    f"No C# compiler found; tried {', '.join(DEFAULT_COMMANDS)}. "
                    f"Pass --compiler or set {COMPILER_ENV_VAR}."
                )
            argv = [found]
        self._argv = argv
        return argv

    def _job_dir(self) -> str:
        if self._scratch is None:
            self._scratch = tempfile.mkdtemp(prefix="mdcompile-")
        self._jobs += 1
        path = os.path.join(self._scratch, f"job{self._jobs}")
        os.makedirs(path)
        return path

    def build_arguments(
        self,
        source_files: Sequence[str],
        reference_paths: Sequence[str],
        options: CompilerOptions,
        output_path: str,
    ) -> List[str]:
        args = list(self.resolve_command())
        args.append("-nologo")
        args.append("-target:exe" if options.generate_executable else "-target:library")
        if options.treat_warnings_as_errors:
            args.append("-warnaserror+")
        args.extend(f"-reference:{ref}" for ref in reference_paths)
        args.append(f"-out:{output_path}")
        args.extend(source_files)
        return args

    def compile(
        self,
        sources: Sequence[str],
        reference_paths: Sequence[str] = (),
        options: Optional[CompilerOptions] = None,
    ) -> CompilationResult:
        options = options or CompilerOptions()
        job = self._job_dir()

        source_files = []
        for i, text in enumerate(sources):
            path = os.path.join(job, f"unit{i}.cs")
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
            source_files.append(path)

        ext = ".exe" if options.generate_executable else ".dll"
        if options.generate_in_memory or not options.output_path:
            output_path = os.path.join(job, f"out{ext}")
        else:
            output_path = options.output_path

        args = self.build_arguments(source_files, reference_paths, options, output_path)
        self.log.debug(f"Running: {' '.join(args)}")
        try:
            proc = subprocess.run(args, capture_output=True, text=True, check=False)
        except OSError as e:
            raise CompilerUnavailableError(f"Could not run compiler '{args[0]}': {e}") from e

        return parse_compiler_output((proc.stdout or "") + "\n" + (proc.stderr or ""), proc.returncode)
