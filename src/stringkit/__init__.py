"""STRINGKIT

Multi-pattern literal string replacement built on an Aho-Corasick automaton.
A replacer compiles its pattern map once and then rewrites any number of texts
in a bounded number of passes, always preferring the longest match at a
given position.
"""

from stringkit.adapters.replacer import new_replacer
from stringkit.domain.value_objects import MatchSpan
from stringkit.interfaces.replacer import Replacer

__all__ = ["MatchSpan", "Replacer", "__version__", "new_replacer"]
__version__ = "0.1.0"
