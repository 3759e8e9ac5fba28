from .base import MdCompileError


class CompilerUnavailableError(MdCompileError):
    """The external compiler could not be found or started."""
