"""Solution of the Tower of Hanoi puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def tower_of_hanoi(disks: int, source: str = "A", target: str = "C", auxiliary: str = "B") -> Iterator[Move]:
    """Yield the moves that carry ``disks`` disks from ``source`` to ``target``.

    Disk 1 is the smallest; the number of moves is ``2 ** disks - 1``.
    """
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    if disks == 0:
        return
    yield from tower_of_hanoi(disks - 1, source, auxiliary, target)
    yield Move(disks, source, target)
    yield from tower_of_hanoi(disks - 1, auxiliary, target, source)