from typing import Iterable, Iterator


class InvalidReferenceError(LookupError):
    """A definition refers to a symbol id the vocabulary does not hold."""

    def __init__(self, symbol_id: int):
        super().__init__(f"symbol id {symbol_id} is not in the vocabulary")
        self.symbol_id = symbol_id


class Vocabulary:
    """
    Symbol id -> definition, ordered by ascending id.

    Base symbols map to None. Composite symbols map to the (left, right) pair
    they were merged from. Composite ids are handed out above every id seen
    so far, so both parents of a composite are always smaller than it.
    """

    def __init__(self):
        self.definitions: dict[int, tuple[int, int] | None] = {}
        self.max_id = 0

    def __len__(self) -> int:
        return len(self.definitions)

    def __contains__(self, symbol_id: int) -> bool:
        return symbol_id in self.definitions

    def __iter__(self) -> Iterator[int]:
        return iter(self.definitions)

    def seed(self, symbol_ids: Iterable[int]):
        """Add base symbols. Must happen before any merge."""
        if self.merges:
            raise RuntimeError("cannot seed a vocabulary that already has merges")

        ids = set(self.definitions).union(symbol_ids)
        self.definitions = {symbol_id: None for symbol_id in sorted(ids)}
        self.max_id = max(ids, default=0)

    def add_merge(self, pair: tuple[int, int]) -> int:
        """Mint a composite symbol for `pair` and return its id."""
        for parent in pair:
            if parent not in self:
                raise InvalidReferenceError(parent)

        new_id = self.max_id + 1
        self.definitions[new_id] = pair
        self.max_id = new_id
        return new_id

    def definition(self, symbol_id: int) -> tuple[int, int] | None:
        try:
            return self.definitions[symbol_id]
        except KeyError:
            raise InvalidReferenceError(symbol_id) from None

    @property
    def merges(self) -> list[tuple[int, int]]:
        """Merged pairs in order of creation."""
        return [pair for pair in self.definitions.values() if pair is not None]
