import os
import sys

import pytest

# Add src to path so tests can run without installing package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

DICTIONARY = [
    "apple",
    "banana",
    "cherry",
    "grape",
    "lemon",
    "mango",
    "orange",
    "peach",
    "pear",
    "plum",
]


@pytest.fixture
def dictionary():
    return list(DICTIONARY)


@pytest.fixture
def wordlist_file(tmp_path, dictionary):
    """A small newline-terminated word list on disk."""
    path = tmp_path / "wordlist.txt"
    path.write_text("\n".join(dictionary) + "\n", encoding="utf-8")
    return path
