"""
BPE (Byte Pair Encoding) vocabulary learning.

Time complexity analysis
------------------------

Let V be the target vocabulary size, B the number of distinct base symbols and
L the corpus size as number of symbols after normalization. The number of
merges is O(V - B) = O(V).

The normalization and seeding phases take O(L) time.

For each merge:
  - Counting pairs takes O(L): the pair table is rebuilt from scratch by
    walking every word.
  - Selecting the pair takes O(P), where P <= L is the number of distinct
    pairs.
  - Rewriting takes O(L): every word is scanned once, and each merge inside a
    word is O(1) because words are linked chains (see `sequence.py`).

So the total complexity is O(VL). Unlike tracking pair positions
incrementally, this keeps no state between merges besides the words
themselves.
"""

import collections
import enum
from typing import Iterable, Iterator

from . import logger
from .decoder import decode_all
from .normalize import normalize
from .sequence import SymbolSequence
from .vocabulary import Vocabulary

DEFAULT_VOCAB_SIZE = 1000
SHARED_VOCAB_SIZE = 37000


class BuilderState(enum.Enum):
    SEEDING = "seeding"
    MERGING = "merging"
    DONE = "done"


def select_pair_to_merge(
    pair_frequencies: dict[tuple[int, int], int],
) -> tuple[int, int] | None:
    """
    Pick the most frequent pair. Ties go to the pair that was counted first,
    i.e. the one appearing earliest in the corpus (sentence, then word, then
    position), because `max` keeps the first maximum of an insertion-ordered
    dict.
    """
    if not pair_frequencies:
        return None
    return max(pair_frequencies, key=pair_frequencies.__getitem__)


class VocabularyBuilder:
    """
    Learns merges over a normalized corpus. The words are rewritten in place
    as merges are accepted, so a builder can only be run once.
    """

    def __init__(self, corpus: list[list[SymbolSequence]]):
        self.corpus = corpus
        self.vocabulary = Vocabulary()
        self.state = BuilderState.SEEDING

    def words(self) -> Iterator[SymbolSequence]:
        for sentence in self.corpus:
            yield from sentence

    def seed(self):
        if self.state is not BuilderState.SEEDING:
            raise RuntimeError(f"cannot seed a builder in state {self.state.value}")

        self.vocabulary.seed(symbol for word in self.words() for symbol in word)
        self.state = BuilderState.MERGING
        logger.info(f"Seeded vocabulary with {len(self.vocabulary)} base symbols")

    def count_pairs(self) -> dict[tuple[int, int], int]:
        pair_frequencies: dict[tuple[int, int], int] = collections.defaultdict(int)
        for word in self.words():
            for pair in word.pairs():
                pair_frequencies[pair] += 1

        return pair_frequencies

    def step(self) -> tuple[int, int] | None:
        """
        Run a single merge. Returns the merged pair, or None once no adjacent
        pairs are left, in which case the builder is done.
        """
        if self.state is BuilderState.SEEDING:
            self.seed()
        if self.state is BuilderState.DONE:
            return None

        pair_frequencies = self.count_pairs()
        selected_pair = select_pair_to_merge(pair_frequencies)
        if selected_pair is None:
            self.state = BuilderState.DONE
            return None

        new_id = self.vocabulary.add_merge(selected_pair)
        merged = 0
        for word in self.words():
            merged += word.merge_pair(selected_pair, new_id)

        logger.debug(
            f"vocab len: {len(self.vocabulary)}, selected pair: {selected_pair} "
            f"-> {new_id}, count: {pair_frequencies[selected_pair]}, merged: {merged}"
        )
        return selected_pair

    def run(self, vocab_size: int) -> Vocabulary:
        if vocab_size < 0:
            raise ValueError(f"vocab_size must be non-negative, got {vocab_size}")

        if self.state is BuilderState.SEEDING:
            self.seed()

        while self.state is BuilderState.MERGING and len(self.vocabulary) < vocab_size:
            if self.step() is None:
                logger.info(
                    f"No pairs left to merge at vocab len {len(self.vocabulary)}"
                )

        self.state = BuilderState.DONE
        logger.info(f"Finished learning vocabulary of {len(self.vocabulary)} symbols")
        return self.vocabulary


def learn_vocabulary(
    sentences: Iterable[str],
    vocab_size: int,
    lowercase: bool = False,
    keep_lone_symbols: bool = False,
) -> Vocabulary:
    """Learn merges over `sentences` and return the id-keyed vocabulary.

    Args:
        sentences (Iterable[str]): Raw sentences. Their order decides ties.
        vocab_size (int): Upper bound on the number of symbols (base symbols
            included). Fewer are learned if the corpus runs out of pairs.
        lowercase (bool): Case-fold letters before learning.
        keep_lone_symbols (bool): Keep words that are a single non-letter
            character instead of dropping them.

    Returns:
        Vocabulary: one entry per symbol id, base symbols first.
    """
    corpus = normalize(sentences, lowercase, keep_lone_symbols)
    logger.info(f"Normalized {len(corpus)} sentences")

    return VocabularyBuilder(corpus).run(vocab_size)


def train_bpe(
    sentences: Iterable[str],
    vocab_size: int,
    lowercase: bool = False,
    keep_lone_symbols: bool = False,
) -> set[str]:
    """Learn a BPE vocabulary and return the text of its tokens.

    Distinct symbols that decode to the same text collapse into one token, so
    the result can hold fewer than `vocab_size` entries even when that many
    symbols were minted. Use `learn_vocabulary` with `decode_all` for a view
    with one entry per symbol.
    """
    vocabulary = learn_vocabulary(sentences, vocab_size, lowercase, keep_lone_symbols)
    return set(decode_all(vocabulary).values())
