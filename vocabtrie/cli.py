"""Command-line search over a dictionary file."""

from __future__ import annotations

import argparse
import logging

from vocabtrie.constants import LOG_FORMAT, LOGGER_NAME
from vocabtrie.errors import MissingArgument, VocabError
from vocabtrie.vocab import Vocab
from vocabtrie.wordlist import load_vocab

log = logging.getLogger(LOGGER_NAME)


def run_cli(vocab: Vocab, search_term: str) -> int | None:
    """Look up ``search_term`` and report the result on stdout."""
    print(f"Searching for word: {search_term}")

    index = vocab.lookup(search_term)
    if index is not None:
        print(f"Found word at index {index}!")
    else:
        print("Word not found")
    return index


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocab-search",
        description="Look up a word's position in a newline-separated dictionary file",
    )
    parser.add_argument("dictionary", nargs="?",
                        help="Path to the word list, one word per line")
    parser.add_argument("search_term", nargs="?",
                        help="Word to look up")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    args, extras = build_parser().parse_known_args(argv)
    # Unknown tokens such as "-ish" fill empty positionals.
    leftover = iter(extras)
    if args.dictionary is None:
        args.dictionary = next(leftover, None)
    if args.search_term is None:
        args.search_term = next(leftover, None)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.dictionary is None:
            raise MissingArgument("dictionary for 1st arg")
        if args.search_term is None:
            raise MissingArgument("search term for 2nd arg")
        vocab = load_vocab(args.dictionary)
    except VocabError as exc:
        log.error("%s", exc)
        return 1

    run_cli(vocab, args.search_term)
    return 0
