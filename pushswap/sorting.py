"""Sorting strategies that turn stack a into ascending order.

Up to five numbers are sorted with fixed move patterns. Larger inputs use a
binary radix sort on the ranks of the numbers. Every move is written by the
``Stacks`` instance as it is made.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .stacks import Stacks

SHORT_SORT_LIMIT = 5

_Move = Callable[[Stacks], bool]

# Moves that bring the smallest rank to the top, keyed by its distance from it.
_FOUR_MOVES: Dict[int, Tuple[_Move, ...]] = {
    1: (Stacks.ra,),
    2: (Stacks.ra, Stacks.ra),
    3: (Stacks.rra,),
}
_FIVE_MOVES: Dict[int, Tuple[_Move, ...]] = {
    1: (Stacks.ra,),
    2: (Stacks.ra, Stacks.ra),
    3: (Stacks.rra, Stacks.rra),
    4: (Stacks.rra,),
}


def _bring_min_to_top(stacks: Stacks, moves: Dict[int, Tuple[_Move, ...]]) -> None:
    distance = stacks.distance_to_min(stacks.min_index(-1))
    for move in moves.get(distance, ()):
        move(stacks)


def sort_two_nodes(stacks: Stacks) -> None:
    """Swap the top two nodes of a when they are out of order."""
    a = stacks.a
    if len(a) < 2:
        return
    if a[0].value > a[1].value:
        stacks.sa()


def _sort_three_more(stacks: Stacks, smallest: int, second: int) -> None:
    head, below = stacks.a[0], stacks.a[1]
    if head.index == second:
        if below.index == smallest:
            stacks.sa()
        else:
            stacks.rra()
    elif below.index == smallest:
        stacks.ra()
    else:
        stacks.sa()
        stacks.rra()


def sort_three_nodes(stacks: Stacks) -> None:
    """Sort a stack a of three nodes."""
    if stacks.a_sorted():
        return
    smallest = stacks.min_index(-1)
    second = stacks.min_index(smallest)
    head, below = stacks.a[0], stacks.a[1]
    if head.index == smallest and below.index != second:
        stacks.ra()
        stacks.sa()
        stacks.rra()
    else:
        _sort_three_more(stacks, smallest, second)


def sort_four_nodes(stacks: Stacks) -> None:
    """Sort a stack a of four nodes, parking the smallest on b meanwhile."""
    if stacks.a_sorted():
        return
    _bring_min_to_top(stacks, _FOUR_MOVES)
    if stacks.a_sorted():
        return
    stacks.pb()
    sort_three_nodes(stacks)
    stacks.pa()


def sort_five_nodes(stacks: Stacks) -> None:
    """Sort a stack a of five nodes, parking the smallest on b meanwhile."""
    if stacks.a_sorted():
        return
    _bring_min_to_top(stacks, _FIVE_MOVES)
    if stacks.a_sorted():
        return
    stacks.pb()
    sort_four_nodes(stacks)
    stacks.pa()


def short_sort(stacks: Stacks) -> None:
    """Sort a stack a of at most five nodes."""
    size = len(stacks.a)
    if size <= 1 or stacks.a_sorted():
        return
    strategies = {
        2: sort_two_nodes,
        3: sort_three_nodes,
        4: sort_four_nodes,
        5: sort_five_nodes,
    }
    strategy = strategies.get(size)
    if strategy is not None:
        strategy(stacks)


def radix_sort(stacks: Stacks) -> None:
    """Sort stack a by the bits of each node's rank, lowest bit first."""
    size = len(stacks.a)
    bit = 0
    while not stacks.a_sorted():
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            if not stacks.pa():
                break
        bit += 1


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a with the strategy that suits its size."""
    if len(stacks.a) <= SHORT_SORT_LIMIT:
        short_sort(stacks)
    else:
        radix_sort(stacks)