class MdCompileError(Exception):
    """Root of every error raised by mdcompile."""
