"""
Output module for text2wav package.

Owns the output file: creates its directory, and removes it again when a run
fails so no truncated WAV is left behind.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import OutputWriteFailed


def remove_partial(path: Path) -> None:
    """Delete a partially written output file, ignoring failures."""
    try:
        path.unlink()
    except OSError:
        pass


@contextmanager
def open_output(path: Path) -> Iterator[BinaryIO]:
    """
    Open `path` for binary writing, creating parent directories.

    The file is closed on exit. If the block raises, the file is deleted and
    the exception propagates; an OSError is reported as OutputWriteFailed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = path.open("w+b")
    except OSError as e:
        raise OutputWriteFailed(f"cannot open {path} for writing: {e}") from e

    try:
        with handle:
            yield handle
    except OSError as e:
        remove_partial(path)
        raise OutputWriteFailed(f"writing {path} failed: {e}") from e
    except BaseException:
        remove_partial(path)
        raise


def write_output(path: Path, data: bytes) -> None:
    with open_output(path) as out:
        out.write(data)
