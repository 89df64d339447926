"""
Newline-ensuring append.

Appends text to an existing file so that the appended text always starts on
its own line. A single linefeed is written first only when the file is
non-empty and its last byte is not already a linefeed.

Usage:
    outcome = append_with_newline("/var/log/notes.txt", "new entry")
    if outcome.ok:
        print(outcome.bytes_appended)
    else:
        print(outcome.message)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

NEWLINE = b"\n"
ENCODING = "utf-8"


@dataclass(frozen=True)
class AppendSuccess:
    """The content was appended."""

    bytes_appended: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class AppendFailure:
    """A precondition failed; nothing was written."""

    message: str

    @property
    def ok(self) -> bool:
        return False


AppendOutcome = AppendSuccess | AppendFailure


@dataclass(frozen=True)
class AppendRequest:
    """Text to append and the absolute path of the file receiving it."""

    content: str
    path: str

    def execute(self) -> AppendOutcome:
        return append_with_newline(self.path, self.content)


def check_preconditions(path: str) -> AppendFailure | None:
    """Return the first violated precondition for ``path``, or None."""
    if not os.path.isabs(path):
        return AppendFailure(f"Path {path} is not absolute.")
    if not os.path.exists(path):
        return AppendFailure(f"File {path} does not exist.")
    return None


def needs_newline(path: str) -> bool:
    """
    Check whether a separator linefeed must precede appended content.

    Returns True only when the file is non-empty and its last byte is not a
    linefeed. Any error while probing yields False, so a failed probe never
    blocks the append that follows.
    """
    try:
        with open(path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            if size == 0:
                return False
            f.seek(size - 1)
            last = f.read(1)
    except OSError as e:
        logger.debug(f"Newline probe failed for {path}, assuming none needed: {e}")
        return False
    return last != NEWLINE


def _append_bytes(path: str, data: bytes) -> None:
    with open(path, "ab") as f:
        f.write(data)


def append_with_newline(path: str, content: str) -> AppendOutcome:
    """
    Append ``content`` to the file at ``path``, starting on a fresh line.

    The separator and the content are two separate writes. Errors raised by
    either write propagate to the caller.

    Args:
        path: Absolute path of an existing file
        content: Text to append, encoded as UTF-8

    Returns:
        AppendSuccess with the byte length of ``content`` (separator not
        counted), or AppendFailure when a precondition is not met
    """
    failure = check_preconditions(path)
    if failure is not None:
        logger.info(f"Rejected append: {failure.message}")
        return failure

    data = content.encode(ENCODING)
    if needs_newline(path):
        logger.debug(f"Inserting separator newline in {path}")
        _append_bytes(path, NEWLINE)
    _append_bytes(path, data)

    logger.debug(f"Appended {len(data)} bytes to {path}")
    return AppendSuccess(bytes_appended=len(data))


def plan_append(existing: bytes, content: str) -> bytes:
    """Return the bytes a file holding ``existing`` ends up with after an append."""
    data = content.encode(ENCODING)
    if existing and not existing.endswith(NEWLINE):
        return existing + NEWLINE + data
    return existing + data
