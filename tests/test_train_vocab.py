import pytest

from experiments.train_vocab import main, select_sentences
from pairmerge.reader import read_translations

from .common import FIXTURES_PATH

TRANSLATIONS = FIXTURES_PATH / "translations.csv"


def test_select_sentences():
    translations = read_translations(TRANSLATIONS)
    assert select_sentences(translations, "en")[0] == "This is a test."
    assert select_sentences(translations, "de")[0] == "Das ist ein Test."
    assert len(select_sentences(translations, "shared")) == 6


def test_train_command(capsys):
    main(["train", str(TRANSLATIONS), "--column", "en", "--vocab-size", "30"])
    out = capsys.readouterr().out
    assert "Vocab size: 30" in out
    assert "Lowercase: True" in out
    assert "Tokens: " in out


def test_train_command_german_defaults(capsys):
    main(["train", str(TRANSLATIONS), "--column", "de", "--show-tokens"])
    out = capsys.readouterr().out
    assert "Vocab size: 1000" in out
    assert "Lowercase: False" in out
    assert "'D'" in out


def test_stats_command(capsys):
    main(["stats", str(TRANSLATIONS)])
    out = capsys.readouterr().out
    assert "Records: 3" in out


def test_no_command():
    with pytest.raises(SystemExit):
        main([])
