"""Text buffers and the replacement applier.

`apply` is the only code that mutates a buffer. Replacement spans are computed
once against the original text and applied from the end of the document
towards the start, so an edit never moves the offsets of an edit still to come.
"""

import logging
from contextlib import contextmanager
from typing import ContextManager, Iterable, Iterator, List, Optional, Protocol, Tuple

from .exceptions import OutOfRangeError
from .models import Replacement

logger = logging.getLogger(__name__)

SORT_ACTION_NAME = "Sort Maven dependencies"


class TextBuffer(Protocol):
    """What an editor must provide for fixes to be applied to its document"""

    def get_text(self) -> str: ...

    def replace(self, start: int, end: int, text: str) -> None: ...

    def write_transaction(self, name: str | None = None) -> ContextManager["TextBuffer"]: ...


class StringBuffer:
    """In-memory TextBuffer with all-or-nothing transactions and undo"""

    def __init__(self, text: str = ""):
        self._text = text
        self._in_transaction = False
        self._undo_stack: List[Tuple[Optional[str], str]] = []

    def get_text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def replace(self, start: int, end: int, text: str) -> None:
        if not self._in_transaction:
            raise RuntimeError("replace() must be called inside write_transaction()")
        if not 0 <= start <= end <= len(self._text):
            raise OutOfRangeError(f"Span [{start}, {end}) outside buffer of length {len(self._text)}")
        self._text = self._text[:start] + text + self._text[end:]

    @contextmanager
    def write_transaction(self, name: str | None = None) -> Iterator["StringBuffer"]:
        if self._in_transaction:
            raise RuntimeError("Write transaction already in progress")
        snapshot = self._text
        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self._text = snapshot
            raise
        else:
            if self._text != snapshot:
                self._undo_stack.append((name, snapshot))
        finally:
            self._in_transaction = False

    @property
    def undo_names(self) -> List[Optional[str]]:
        return [name for name, _ in self._undo_stack]

    def undo(self) -> bool:
        """Revert the last committed transaction as a single action."""
        if not self._undo_stack:
            return False
        _, self._text = self._undo_stack.pop()
        return True


def validate(replacements: Iterable[Replacement], length: int) -> List[Replacement]:
    """Check every span against the buffer length and each other.

    Returns the replacements in application order (descending start).
    """
    ordered = sorted(replacements, key=lambda r: (r.span.start, r.span.end), reverse=True)
    for r in ordered:
        if not 0 <= r.span.start <= r.span.end <= length:
            raise OutOfRangeError(
                f"Span [{r.span.start}, {r.span.end}) outside buffer of length {length}"
            )
    for later, earlier in zip(ordered, ordered[1:]):
        if earlier.span.overlaps(later.span) or earlier.span.start == later.span.start:
            raise OutOfRangeError(
                f"Span [{earlier.span.start}, {earlier.span.end}) overlaps "
                f"[{later.span.start}, {later.span.end})"
            )
    return ordered


def apply(buffer: TextBuffer, replacements: Iterable[Replacement], name: str = SORT_ACTION_NAME) -> None:
    """Apply replacements computed against the buffer's current text.

    All spans are validated before the first edit; OutOfRangeError leaves the
    buffer untouched.
    """
    replacements = list(replacements)
    if not replacements:
        return
    ordered = validate(replacements, len(buffer.get_text()))
    with buffer.write_transaction(name):
        for r in ordered:
            buffer.replace(r.span.start, r.span.end, r.text)
    logger.debug("Applied %d replacements", len(ordered))
