#!/usr/bin/env python3
"""
Vocab Search

Loads a newline-separated dictionary file into a trie-backed vocabulary
and reports the position of a single search term.

Usage:
    python vocab_search.py words.txt dictionary
"""

from __future__ import annotations

import sys

from vocabtrie.cli import main

if __name__ == "__main__":
    sys.exit(main())
