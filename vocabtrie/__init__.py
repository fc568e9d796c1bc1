"""Vocabtrie -- trie-backed word to position vocabulary."""

from vocabtrie.errors import FileReadFailure, MissingArgument, VocabError
from vocabtrie.trie import Node
from vocabtrie.vocab import Vocab, construct, extend, lookup
from vocabtrie.wordlist import load_vocab, read_word_list, split_lines

__all__ = [
    "FileReadFailure",
    "MissingArgument",
    "Node",
    "Vocab",
    "VocabError",
    "construct",
    "extend",
    "load_vocab",
    "lookup",
    "read_word_list",
    "split_lines",
]
