import argparse
import cProfile
import logging
import pathlib
import sys

from pairmerge import logger
from pairmerge.bpe import DEFAULT_VOCAB_SIZE, SHARED_VOCAB_SIZE, train_bpe
from pairmerge.normalize import normalize
from pairmerge.reader import read_translations

# Run this with
# $ uv run -m experiments.train_vocab

# Per column: default vocab size and whether letters are lowercased.
COLUMN_DEFAULTS = {
    "en": (DEFAULT_VOCAB_SIZE, True),
    "de": (DEFAULT_VOCAB_SIZE, False),
    "shared": (SHARED_VOCAB_SIZE, True),
}


def select_sentences(translations, column: str) -> list[str]:
    if column == "en":
        return [t.english for t in translations]
    if column == "de":
        return [t.german for t in translations]

    # Shared vocabulary: both languages in one corpus.
    return [t.english for t in translations] + [t.german for t in translations]


def command_stats(args):
    """Show how many records and base symbols the corpus has."""
    path = pathlib.Path(args.input_file)
    translations = read_translations(path)
    print(f"Records: {len(translations)}")

    for column in ("en", "de"):
        corpus = normalize(select_sentences(translations, column), lowercase=False)
        symbols = {s for sentence in corpus for word in sentence for s in word}
        print(f"{column}: {len(symbols)} distinct base symbols")


def command_train(args):
    """Learn a vocabulary and print a summary of it."""
    path = pathlib.Path(args.input_file)
    default_size, default_lowercase = COLUMN_DEFAULTS[args.column]
    vocab_size = args.vocab_size if args.vocab_size is not None else default_size
    lowercase = args.lowercase if args.lowercase is not None else default_lowercase

    print(f"Training vocabulary using {path}")
    print(f"Column: {args.column}")
    print(f"Vocab size: {vocab_size}")
    print(f"Lowercase: {lowercase}")

    translations = read_translations(path)
    sentences = select_sentences(translations, args.column)
    tokens = train_bpe(
        sentences,
        vocab_size,
        lowercase,
        keep_lone_symbols=args.keep_lone_symbols,
    )

    print(f"Tokens: {len(tokens)}")
    longest_token = max(tokens, key=len, default="")
    print(f"Longest token: {longest_token!r}. Length: {len(longest_token)}")

    if args.show_tokens:
        for token in sorted(tokens):
            print(repr(token))


def build_parser():
    parser = argparse.ArgumentParser(
        description="BPE Vocabulary Learning Tool",
        prog="python -m experiments.train_vocab",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run with cProfile for performance analysis",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every merge",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Stats command
    stats_parser = subparsers.add_parser(
        "stats", help="Show record and base symbol counts of a translation CSV"
    )
    stats_parser.add_argument("input_file", type=str, help="Translation CSV path")
    stats_parser.set_defaults(func=command_stats)

    # Train command
    train_parser = subparsers.add_parser(
        "train", help="Learn a BPE vocabulary from a translation CSV"
    )
    train_parser.add_argument("input_file", type=str, help="Translation CSV path")
    train_parser.add_argument(
        "--column",
        choices=sorted(COLUMN_DEFAULTS),
        default="en",
        help="Language column to learn from, or 'shared' for both (default: en)",
    )
    train_parser.add_argument(
        "--vocab-size",
        type=int,
        help=f"Vocabulary size (default: {DEFAULT_VOCAB_SIZE}, "
        f"{SHARED_VOCAB_SIZE} for shared)",
    )
    train_parser.add_argument(
        "--lowercase",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Lowercase letters (default: on for en and shared, off for de)",
    )
    train_parser.add_argument(
        "--keep-lone-symbols",
        action="store_true",
        help="Keep words made of a single non-letter character",
    )
    train_parser.add_argument(
        "--show-tokens",
        action="store_true",
        help="Print every learned token",
    )
    train_parser.set_defaults(func=command_train)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.configure(logging.DEBUG if args.verbose else logging.INFO)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Execute command
    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        args.func(args)
        profiler.disable()
        profiler.print_stats(sort="tottime")
    else:
        args.func(args)


if __name__ == "__main__":
    main()
