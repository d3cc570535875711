"""Day 9: compacting an amphipod's disk."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

_DIGITS = "0123456789"


def expand_blocks(text: str) -> list[int | None]:
    """Expand a disk map into blocks: file ids, with ``None`` for free space."""
    blocks: list[int | None] = []
    file_id = 0
    for index, char in enumerate(text):
        if char not in _DIGITS:
            continue
        count = int(char)
        if index % 2 == 0:
            blocks.extend([file_id] * count)
            file_id += 1
        else:
            blocks.extend([None] * count)
    return blocks


def checksum(blocks: Sequence[int | None]) -> int:
    """Sum of position times file id over all occupied blocks."""
    return sum(index * value for index, value in enumerate(blocks) if value is not None)


def part1(text: str) -> int:
    """Checksum after moving blocks one at a time into the leftmost gaps."""
    blocks = expand_blocks(text)
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], blocks[left]
    return checksum(blocks)


def part2(text: str) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost fit."""
    blocks = expand_blocks(text)

    files: dict[int, tuple[int, int]] = {}
    for index, value in enumerate(blocks):
        if value is not None:
            start, size = files.get(value, (index, 0))
            files[value] = (start, size + 1)

    free: list[list[int]] = []
    index = 0
    for is_free, run in groupby(blocks, key=lambda value: value is None):
        length = len(list(run))
        if is_free:
            free.append([index, length])
        index += length

    for file_id in sorted(files, reverse=True):
        if file_id == 0:
            continue
        start, size = files[file_id]
        for span in free:
            if span[0] >= start:
                break
            if span[1] >= size:
                blocks[span[0]:span[0] + size] = [file_id] * size
                blocks[start:start + size] = [None] * size
                span[0] += size
                span[1] -= size
                break
    return checksum(blocks)