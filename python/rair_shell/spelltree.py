"""BK-tree keyed on Levenshtein distance, used for command lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

V = TypeVar("V")


def edit_distance(left: str, right: str) -> int:
    """Return the Levenshtein distance between *left* and *right*."""
    if left == right:
        return 0
    if len(left) < len(right):
        left, right = right, left
    if not right:
        return len(left)
    previous = list(range(len(right) + 1))
    for i, lch in enumerate(left, 1):
        current = [i]
        for j, rch in enumerate(right, 1):
            cost = 0 if lch == rch else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


@dataclass
class _Node(Generic[V]):
    key: str
    value: V
    seq: int
    children: Dict[int, "_Node[V]"] = field(default_factory=dict)


class SpellTree(Generic[V]):
    """Metric tree over string keys.

    ``find`` returns the exact match (if any) and every other key within a
    distance bound.  Similar keys are ordered by distance and then by the
    order in which they were inserted, so identical trees always answer
    identical queries the same way.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node[V]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, key: str, value: V) -> bool:
        """Insert *key*; returns False (and changes nothing) if it exists."""
        node = _Node(key, value, self._size)
        if self._root is None:
            self._root = node
            self._size += 1
            return True
        current = self._root
        while True:
            distance = edit_distance(key, current.key)
            if distance == 0:
                return False
            child = current.children.get(distance)
            if child is None:
                current.children[distance] = node
                self._size += 1
                return True
            current = child

    def find(self, key: str, max_distance: int) -> Tuple[List[Tuple[str, V]], List[Tuple[str, V]]]:
        exact: List[Tuple[str, V]] = []
        similar: List[Tuple[int, int, str, V]] = []
        if self._root is None:
            return exact, []
        max_distance = max(0, int(max_distance))
        pending = [self._root]
        while pending:
            node = pending.pop()
            distance = edit_distance(key, node.key)
            if distance == 0:
                exact.append((node.key, node.value))
            elif distance <= max_distance:
                similar.append((distance, node.seq, node.key, node.value))
            low = distance - max_distance
            high = distance + max_distance
            for edge, child in node.children.items():
                if low <= edge <= high:
                    pending.append(child)
        similar.sort(key=lambda item: (item[0], item[1]))
        return exact, [(name, value) for _, _, name, value in similar]

    def items(self) -> Iterator[Tuple[str, V]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        nodes: List[_Node[V]] = []
        pending = [self._root] if self._root else []
        while pending:
            node = pending.pop()
            nodes.append(node)
            pending.extend(node.children.values())
        for node in sorted(nodes, key=lambda n: n.seq):
            yield node.key, node.value


__all__ = ["SpellTree", "edit_distance"]
