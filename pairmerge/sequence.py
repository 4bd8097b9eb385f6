"""
Mutable symbol chain for a single word.

Nodes live in an arena: two parallel lists hold each node's symbol id and the
handle of its successor. A merge rewrites the left node and unlinks the right
one, so it costs O(1) no matter where in the word it happens, and handles of
untouched nodes stay valid while a rewrite scan is in progress.

Unlinked nodes are left in the arena. Words are short and are thrown away
after training, so they are never compacted.
"""

from typing import Iterable, Iterator

NIL = -1


class SymbolSequence:
    def __init__(self, symbols: Iterable[int] = ()):
        self._values: list[int] = list(symbols)
        self._next: list[int] = [i + 1 for i in range(len(self._values))]
        if self._next:
            self._next[-1] = NIL
        self._head = 0 if self._values else NIL
        self._length = len(self._values)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def is_empty(self) -> bool:
        return self._length == 0

    def __iter__(self) -> Iterator[int]:
        for handle in self.handles():
            yield self._values[handle]

    def __repr__(self) -> str:
        return f"SymbolSequence({list(self)})"

    def __eq__(self, other):
        if not isinstance(other, SymbolSequence):
            return NotImplemented
        return list(self) == list(other)

    def handles(self) -> Iterator[int]:
        """Yield the handle of every live node, front to back."""
        handle = self._head
        while handle != NIL:
            yield handle
            handle = self._next[handle]

    def pairs(self) -> Iterator[tuple[int, int]]:
        """Yield every adjacent (left, right) pair of symbol ids."""
        values, nxt = self._values, self._next
        handle = self._head
        while handle != NIL and nxt[handle] != NIL:
            after = nxt[handle]
            yield values[handle], values[after]
            handle = after

    def merge_at(self, handle: int, new_id: int) -> None:
        """
        Collapse the node at `handle` and its successor into one node holding
        `new_id`. The successor is unlinked; no other node moves.
        """
        after = self._next[handle]
        if after == NIL:
            raise IndexError(f"node {handle} has no successor to merge with")

        self._values[handle] = new_id
        self._next[handle] = self._next[after]
        self._next[after] = NIL
        self._length -= 1

    def merge_pair(self, pair: tuple[int, int], new_id: int) -> int:
        """
        Replace every occurrence of `pair` with `new_id`, scanning left to
        right. Returns the number of merges performed.

        For 'a a a' and pair (a, a) this produces 'X a', not 'a X'.
        """
        left, right = pair
        values, nxt = self._values, self._next

        merged = 0
        handle = self._head
        while handle != NIL:
            after = nxt[handle]
            if after == NIL:
                break

            if values[handle] == left and values[after] == right:
                self.merge_at(handle, new_id)
                merged += 1

            # A freshly merged node holds an id newer than both halves of the
            # pair, so it can never start another match.
            handle = nxt[handle]

        return merged
