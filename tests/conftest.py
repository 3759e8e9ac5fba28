# conftest.py - shared fixtures
import pytest

from mdcompile.compile import CompilationResult
from mdcompile.utils.ids import CounterIdFactory


class RecordingCompiler:
    """Stands in for the C# compiler: records each job and returns canned results."""

    def __init__(self, results=None):
        self.calls = []
        self._results = list(results or [])

    def compile(self, sources, reference_paths=(), options=None):
        self.calls.append({"sources": list(sources), "references": list(reference_paths), "options": options})
        if self._results:
            return self._results.pop(0)
        return CompilationResult()


@pytest.fixture
def compiler():
    return RecordingCompiler()


@pytest.fixture
def failing_compiler():
    return RecordingCompiler(
        results=[CompilationResult(has_errors=True, diagnostics=["doc.md(4,1): error CS0103: The name 'y' does not exist"])]
    )


@pytest.fixture
def ids():
    return CounterIdFactory("g")


@pytest.fixture
def warning_compiler():
    return RecordingCompiler(results=[CompilationResult(has_warnings=True, diagnostics=["warning CS0168: x"])])
