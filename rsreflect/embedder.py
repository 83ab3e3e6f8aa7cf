"""Embeds a compiled bitcode file as a C++ byte array literal"""

from pathlib import Path
from typing import NamedTuple

CHUNK_SIZE = 16


class EmbeddedBinary(NamedTuple):
    size: int
    lines: list[str]


def embed_binary(path: Path, chunk_size: int = CHUNK_SIZE) -> EmbeddedBinary:
    """Read `path` in chunks and render every byte as a hex literal.

    Each chunk becomes one line of `0x..,` entries. An unreadable file
    raises OSError; callers must not emit any output in that case.
    """
    size = 0
    lines = []
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            size += len(chunk)
            lines.append("".join(f"0x{b:02x}," for b in chunk))
    return EmbeddedBinary(size, lines)
