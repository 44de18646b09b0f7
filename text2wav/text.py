"""
Text module for text2wav package.

Reads the narration text and splits it into request-sized chunks.
"""

from pathlib import Path
from typing import Iterator, Union

from .errors import EmptyInput, FileNotFound, InputReadFailed

# Per-request input limit of the OpenAI speech endpoint, with headroom.
CHUNK_LEN = 8000


def load_text(path: Union[str, Path]) -> str:
    """
    Load a UTF-8 text file and trim surrounding whitespace.

    Undecodable bytes become U+FFFD instead of failing the run.

    Args:
        path: Input file path, relative paths resolve against the cwd

    Returns:
        The trimmed, non-empty text

    Raises:
        FileNotFound: the resolved path is not an existing file
        InputReadFailed: the file exists but cannot be read
        EmptyInput: the file holds nothing but whitespace
    """
    abs_path = Path(path).resolve()
    if not abs_path.is_file():
        raise FileNotFound(abs_path)
    try:
        text = abs_path.read_text(encoding="utf-8", errors="replace").strip()
    except OSError as e:
        raise InputReadFailed(abs_path, e) from e
    if not text:
        raise EmptyInput(abs_path)
    return text


class TextChunks:
    """Fixed-width slices of a text. Iterating again starts over."""

    def __init__(self, text: str, size: int = CHUNK_LEN):
        if size <= 0:
            raise ValueError(f"Chunk size must be positive, got {size}")
        self.text = text
        self.size = size

    def __iter__(self) -> Iterator[str]:
        for start in range(0, len(self.text), self.size):
            yield self.text[start:start + self.size]

    def __len__(self) -> int:
        return -(-len(self.text) // self.size)


def chunk_text(text: str, size: int = CHUNK_LEN) -> TextChunks:
    return TextChunks(text, size)
