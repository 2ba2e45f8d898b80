"""Stable matching by the Gale-Shapley proposal algorithm."""

from __future__ import annotations

from typing import Optional, Sequence


def _check_preferences(preferences: Sequence[Sequence[int]], size: int, side: str) -> None:
    for index, row in enumerate(preferences):
        if sorted(row) != list(range(size)):
            raise ValueError(f"{side} {index} must rank each partner exactly once")


def stable_marriage(
    men_preferences: Sequence[Sequence[int]],
    women_preferences: Sequence[Sequence[int]],
) -> dict[int, int]:
    """Return a stable matching as a mapping from woman to man.

    Men and women are both numbered ``0 .. n - 1``. Each man's list ranks
    the women, each woman's list ranks the men, most preferred first.
    Men propose, lowest-numbered free man first, so the result is the
    man-optimal stable matching.
    """
    size = len(men_preferences)
    if len(women_preferences) != size:
        raise ValueError("there must be as many women as men")
    _check_preferences(men_preferences, size, "man")
    _check_preferences(women_preferences, size, "woman")

    rank = [{man: position for position, man in enumerate(row)} for row in women_preferences]
    husband: list[Optional[int]] = [None] * size
    engaged = [False] * size
    next_choice = [0] * size

    while True:
        man = next((m for m in range(size) if not engaged[m]), None)
        if man is None:
            break
        while not engaged[man]:
            woman = men_preferences[man][next_choice[man]]
            next_choice[man] += 1
            current = husband[woman]
            if current is None:
                husband[woman] = man
                engaged[man] = True
            elif rank[woman][man] < rank[woman][current]:
                husband[woman] = man
                engaged[man] = True
                engaged[current] = False

    return {woman: man for woman, man in enumerate(husband)}