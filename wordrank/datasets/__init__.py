from .dictionary import DictionaryIndex, build_index, load_index, clean_words, DEFAULT_WORDS
from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_blacklist, write_lines

__all__ = [
    "DictionaryIndex", "build_index", "load_index", "clean_words", "DEFAULT_WORDS",
    "validate_wordlist", "pretty_summary",
    "read_lines", "read_blacklist", "write_lines",
]
