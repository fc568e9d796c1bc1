"""Reading newline-separated word lists from disk."""

from __future__ import annotations

import logging

from vocabtrie.constants import DEFAULT_ENCODING, LOGGER_NAME
from vocabtrie.errors import FileReadFailure
from vocabtrie.vocab import Vocab

log = logging.getLogger(LOGGER_NAME)


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, one word per line.

    Only ``\\n`` separates lines; a ``\\r`` directly before it is dropped.
    Blank lines in the middle are kept as empty words; a final newline does
    not add an empty entry.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def read_word_list(path: str, encoding: str = DEFAULT_ENCODING) -> list[str]:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadFailure(path, str(exc)) from exc
    return split_lines(text)


def load_vocab(path: str, encoding: str = DEFAULT_ENCODING) -> Vocab:
    words = read_word_list(path, encoding)
    vocab = Vocab(words)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return vocab
