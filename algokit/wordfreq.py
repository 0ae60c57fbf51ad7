"""Count word frequencies in a text file with two symbol tables."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Sequence
from typing import Any, Optional, Protocol

from algokit.bst import BinarySearchTree
from algokit.sequence_table import SequenceTable
from algokit.wordfile import read_words


class _Table(Protocol):
    def insert(self, key: Any, value: Any) -> None: ...

    def search(self, key: Any) -> Any: ...

    def contains(self, key: Any) -> bool: ...


def count_frequencies(table: _Table, words: Iterable[str]) -> _Table:
    """Add one to table's count for every word; return the table."""
    for word in words:
        current = table.search(word)
        table.insert(word, 1 if current is None else current + 1)
    return table


def _run(label: str, table: _Table, words: Iterable[str], word: str, filename: str) -> None:
    start = time.perf_counter()
    count_frequencies(table, words)
    if table.contains(word):
        print(f"'{word}' : {table.search(word)}")
    else:
        print(f"No word '{word}' in {filename}")
    elapsed = time.perf_counter() - start
    print(f"{label} , time: {elapsed} s.")
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Count word frequencies in a text file.")
    parser.add_argument("filename", nargs="?", default="communist.txt", help="text file")
    parser.add_argument("--word", default="unite", help="word whose count is shown")
    args = parser.parse_args(argv)

    try:
        words = read_words(args.filename)
    except OSError:
        print(f"Can not open {args.filename} !!!")
        return 1

    print(f"There are totally {len(words)} words in {args.filename}")
    print()

    _run("BST", BinarySearchTree(), words, args.word, args.filename)
    _run("SST", SequenceTable(), words, args.word, args.filename)
    _run("BST2", BinarySearchTree(), sorted(words), args.word, args.filename)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())