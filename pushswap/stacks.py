"""The two stacks of the puzzle and the instructions that act on them.

Each stack is a list of nodes with the top at position 0. Every instruction
writes its name, one per line, to the output stream given to ``Stacks``
(standard output when none is given). An instruction that cannot act on the
current state writes nothing and returns False; otherwise it returns True.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, List, Optional, TextIO


@dataclass
class Node:
    """One number on a stack, with its rank among all numbers (-1 until ranked)."""

    value: int
    index: int = -1


def index_nodes(nodes: Iterable[Node]) -> None:
    """Rank the nodes that have no index yet by value, starting from 0.

    Of equal values, the one nearer the top gets the lower rank.
    """
    pending = [node for node in nodes if node.index == -1]
    for rank, node in enumerate(sorted(pending, key=lambda node: node.value)):
        node.index = rank


def is_sorted(nodes: List[Node]) -> bool:
    """True when the values never decrease from top to bottom."""
    return all(upper.value <= lower.value for upper, lower in pairwise(nodes))


def _swap(stack: List[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(to: List[Node], source: List[Node]) -> bool:
    if not source:
        return False
    to.insert(0, source.pop(0))
    return True


def _rotate(stack: List[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: List[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


class Stacks:
    """Stack a, filled from ``values`` top first, and an empty stack b."""

    def __init__(self, values: Iterable[int], out: Optional[TextIO] = None) -> None:
        self.a: List[Node] = [Node(int(value)) for value in values]
        self.b: List[Node] = []
        self._out = out
        index_nodes(self.a)

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        print(name, file=stream)

    def sa(self) -> bool:
        """Swap the top two nodes of a."""
        if not _swap(self.a):
            return False
        self._emit("sa")
        return True

    def sb(self) -> bool:
        """Swap the top two nodes of b."""
        if not _swap(self.b):
            return False
        self._emit("sb")
        return True

    def ss(self) -> bool:
        """Swap the tops of both stacks; needs two nodes on each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.sa()
        self.sb()
        self._emit("ss")
        return True

    def pa(self) -> bool:
        """Move the top of b onto a.

        Refused while a is empty. With b empty the name is still written and
        nothing moves.
        """
        if not self.a:
            return False
        _push(self.a, self.b)
        self._emit("pa")
        return True

    def pb(self) -> bool:
        """Move the top of a onto b."""
        if not self.a:
            return False
        _push(self.b, self.a)
        self._emit("pb")
        return True

    def pp(self) -> bool:
        """Push to a and straight back to b; needs two nodes on each stack."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        top_value = self.a[0].value
        self.pa()
        self.pb()
        self.a[0].value = top_value
        return True

    def ra(self) -> bool:
        """Move the top of a to its bottom."""
        if not _rotate(self.a):
            return False
        self._emit("ra")
        return True

    def rb(self) -> bool:
        """Move the top of b to its bottom."""
        if not _rotate(self.b):
            return False
        self._emit("rd")
        return True

    def rr(self) -> bool:
        """Rotate both stacks."""
        self.ra()
        self.rb()
        self._emit("rr")
        return True

    def rra(self) -> bool:
        """Move the bottom of a to its top."""
        if not _reverse_rotate(self.a):
            return False
        self._emit("rra")
        return True

    def rrb(self) -> bool:
        """Move the bottom of b to its top."""
        if not _reverse_rotate(self.b):
            return False
        self._emit("rrb")
        return True

    def rrr(self) -> bool:
        """Reverse-rotate both stacks."""
        self.rra()
        self.rrb()
        self._emit("rrr")
        return True

    def a_sorted(self) -> bool:
        """True when stack a is in ascending order from the top."""
        return is_sorted(self.a)

    def a_values(self) -> List[int]:
        """The values of stack a, top first."""
        return [node.value for node in self.a]

    def distance_to_min(self, index: int) -> int:
        """Position in a of the node with rank ``index``, or the size of a if absent."""
        return next(
            (position for position, node in enumerate(self.a) if node.index == index),
            len(self.a),
        )

    def min_index(self, prev_min: int) -> int:
        """Smallest rank in a, skipping ``prev_min`` below the top node.

        The top node's rank is the starting candidate and is never skipped.
        """
        if not self.a:
            raise ValueError("stack a is empty")
        smallest = self.a[0].index
        for node in self.a[1:]:
            if node.index < smallest and node.index != prev_min:
                smallest = node.index
        return smallest