import sys

import pytest

from pairmerge.bpe import learn_vocabulary
from pairmerge.decoder import decode, decode_all
from pairmerge.vocabulary import InvalidReferenceError, Vocabulary


def make_vocabulary():
    vocabulary = Vocabulary()
    vocabulary.seed([ord("b"), ord("a")])
    ab = vocabulary.add_merge((ord("a"), ord("b")))
    vocabulary.add_merge((ab, ord("a")))
    return vocabulary


def test_seed_orders_ids():
    vocabulary = make_vocabulary()
    assert list(vocabulary) == [ord("a"), ord("b"), ord("b") + 1, ord("b") + 2]
    assert vocabulary.max_id == ord("b") + 2
    assert vocabulary.merges == [(ord("a"), ord("b")), (ord("b") + 1, ord("a"))]


def test_decode():
    vocabulary = make_vocabulary()
    assert decode(vocabulary, ord("a")) == "a"
    assert decode(vocabulary, ord("b") + 1) == "ab"
    assert decode(vocabulary, ord("b") + 2) == "aba"


def test_decode_all():
    vocabulary = make_vocabulary()
    assert decode_all(vocabulary) == {
        ord("a"): "a",
        ord("b"): "b",
        ord("b") + 1: "ab",
        ord("b") + 2: "aba",
    }


def test_decode_all_keeps_duplicate_text():
    vocabulary = Vocabulary()
    vocabulary.seed([ord("a")])
    aa = vocabulary.add_merge((ord("a"), ord("a")))
    vocabulary.add_merge((aa, ord("a")))
    vocabulary.add_merge((ord("a"), aa))

    tokens = decode_all(vocabulary)
    assert len(tokens) == 4
    assert set(tokens.values()) == {"a", "aa", "aaa"}


def test_decode_missing_id():
    vocabulary = make_vocabulary()
    with pytest.raises(InvalidReferenceError) as excinfo:
        decode(vocabulary, 1000)
    assert excinfo.value.symbol_id == 1000


def test_decode_broken_definition():
    vocabulary = make_vocabulary()
    vocabulary.definitions[500] = (ord("a"), 404)
    with pytest.raises(InvalidReferenceError):
        decode(vocabulary, 500)
    with pytest.raises(InvalidReferenceError):
        decode_all(vocabulary)


def test_decode_all_rejects_forward_reference():
    vocabulary = Vocabulary()
    vocabulary.definitions = {97: None, 98: (97, 99), 99: None}
    with pytest.raises(InvalidReferenceError):
        decode_all(vocabulary)


def test_add_merge_with_unknown_parent():
    vocabulary = make_vocabulary()
    with pytest.raises(InvalidReferenceError):
        vocabulary.add_merge((ord("a"), ord("z")))
    assert len(vocabulary) == 4


def test_seed_after_merge_fails():
    vocabulary = make_vocabulary()
    with pytest.raises(RuntimeError):
        vocabulary.seed([ord("z")])


def test_empty_vocabulary():
    vocabulary = Vocabulary()
    vocabulary.seed([])
    assert len(vocabulary) == 0
    assert decode_all(vocabulary) == {}


def test_decode_chain_deeper_than_recursion_limit():
    # Every character is distinct, so each merge extends the previous one.
    depth = sys.getrecursionlimit() + 500
    word = "".join(chr(0x4E00 + i) for i in range(depth))
    vocabulary = learn_vocabulary([word], 10**6)
    assert len(vocabulary.merges) == depth - 1

    assert decode(vocabulary, vocabulary.max_id) == word
    assert decode_all(vocabulary)[vocabulary.max_id] == word
