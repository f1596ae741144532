"""suffix-complete: Inline suffix autocompletion for text inputs.

Given the text typed so far and an ordered list of candidate suffixes
(such as e-mail domains), this library finds the first candidate whose
head overlaps the tail of the input and produces the completed text:
- Pure matching functions with no hidden state
- Immutable completion results and text-change events
- A small facade holding candidates and case sensitivity
"""

from suffix_complete.completer import SuffixCompleter
from suffix_complete.matcher import find_match, iter_matches, match
from suffix_complete.types import Completion, CompletionList, TextChanged

__version__ = "0.1.0"
__all__ = [
    "Completion",
    "CompletionList",
    "SuffixCompleter",
    "TextChanged",
    "find_match",
    "iter_matches",
    "match",
]
