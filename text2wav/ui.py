"""
UI module for text2wav package.

Contains the progress display and the console messages of both programs.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


@contextmanager
def progress_context(console: Optional[Console] = None):
    """
    Context manager for a transient Rich progress display.

    Yields:
        Progress instance; tasks without a total render as a spinner only
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TimeElapsedColumn(),
        transient=True,
        console=console or Console(),
    ) as progress:
        yield progress


def print_error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)


def print_voices(voices: Iterable[str]) -> None:
    print("Known voice names (availability may vary by account):")
    for v in voices:
        print(f" - {v}")


def print_saved(out_path: Path, details: str) -> None:
    print(f"\n✔ Saved → {out_path}")
    print(f"   {details}")
