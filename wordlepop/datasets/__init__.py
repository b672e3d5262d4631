from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .wordlist import DEFAULT_WORDLIST, clean_words, unique_preserve_order
from .corpus import Corpus, letter_popularity, load_corpus

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "write_lines",
    "DEFAULT_WORDLIST", "clean_words", "unique_preserve_order",
    "Corpus", "letter_popularity", "load_corpus",
]
