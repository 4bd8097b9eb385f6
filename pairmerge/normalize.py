import enum
from typing import Iterable

import regex as re

from .sequence import SymbolSequence

LETTER = re.compile(r"\p{L}")


class CharClass(enum.Enum):
    # Accumulates into the current run of the word.
    LETTER = "letter"
    # Breaks the run and becomes a word of its own.
    STANDALONE = "standalone"


def classify(char: str) -> CharClass:
    if LETTER.fullmatch(char):
        return CharClass.LETTER
    return CharClass.STANDALONE


def normalize_word(
    word: str, lowercase: bool, keep_lone_symbols: bool = False
) -> list[SymbolSequence]:
    """
    Split one space-delimited word into symbol sequences: runs of letters, and
    every other character on its own.

    A word that is a single non-letter character (e.g. a lone "-") produces
    nothing unless `keep_lone_symbols` is set.
    """
    res: list[SymbolSequence] = []
    run: list[int] = []

    for char in word:
        if classify(char) is CharClass.LETTER:
            if lowercase:
                # Lowering can expand a character, e.g. "İ" -> "i" + U+0307.
                run.extend(map(ord, char.lower()))
            else:
                run.append(ord(char))
        elif len(word) > 1 or keep_lone_symbols:
            if run:
                res.append(SymbolSequence(run))
                run = []
            res.append(SymbolSequence([ord(char)]))

    if run:
        res.append(SymbolSequence(run))

    return res


def normalize(
    sentences: Iterable[str], lowercase: bool, keep_lone_symbols: bool = False
) -> list[list[SymbolSequence]]:
    """
    Turn raw sentences into words of base symbols, one list of words per
    sentence. Base symbol ids are the characters' code points.

    Sentences are split on single spaces only, so "a  b" holds an empty word
    between the two spaces, which contributes nothing.
    """
    res: list[list[SymbolSequence]] = []
    for sentence in sentences:
        words: list[SymbolSequence] = []
        for word in sentence.split(" "):
            words.extend(normalize_word(word, lowercase, keep_lone_symbols))
        res.append(words)

    return res
