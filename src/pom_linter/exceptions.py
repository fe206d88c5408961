class PomLintError(Exception):
    """Base class for errors raised while checking or fixing a manifest."""


class ParseError(PomLintError, ValueError):
    """The manifest is not well-formed enough to locate its dependencies."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class OutOfRangeError(PomLintError, IndexError):
    """A replacement span is outside the buffer or overlaps another span."""
