"""
Lexical classification: complex words and academic vocabulary.
"""

import re
from typing import Iterable, Union

from wordwise.models.readability import TargetLevel
from .text_stats import count_syllables

HIGH_SCHOOL_ACADEMIC_VOCABULARY = frozenset([
    "analyze", "synthesize", "evaluate", "demonstrate", "establish", "investigate",
    "examine", "illustrate", "interpret", "justify", "compare", "contrast",
    "furthermore", "moreover", "consequently", "therefore", "nevertheless", "however",
    "significant", "substantial", "comprehensive", "extensive", "crucial", "essential",
])

COLLEGE_ACADEMIC_VOCABULARY = frozenset([
    "paradigm", "methodology", "hypothesis", "theoretical", "empirical", "substantiate",
    "corroborate", "extrapolate", "juxtapose", "dichotomy", "synthesis", "discourse",
    "epistemology", "ontology", "phenomenology", "hermeneutics", "dialectical",
])

# Multi-syllable suffixes on a stem of at least three characters
COMPLEX_WORD_PATTERNS = [
    re.compile(r"\w{3,}tion$"), re.compile(r"\w{3,}sion$"),
    re.compile(r"\w{3,}ment$"), re.compile(r"\w{3,}ness$"),
    re.compile(r"\w{3,}able$"), re.compile(r"\w{3,}ible$"),
    re.compile(r"\w{3,}ical$"), re.compile(r"\w{3,}ous$"),
]


def is_complex_word(word: str) -> bool:
    """A word is complex if it has 3+ syllables or a long derivational suffix."""
    if len(word) < 3:
        return False

    if count_syllables(word) >= 3:
        return True

    lower_word = word.lower()
    return any(pattern.search(lower_word) for pattern in COMPLEX_WORD_PATTERNS)


def is_academic_vocabulary(word: str, level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL) -> bool:
    """Check a word against the academic lists for the target level."""
    level = TargetLevel(level)
    lower_word = word.lower()
    if lower_word in HIGH_SCHOOL_ACADEMIC_VOCABULARY:
        return True
    return level.includes_college_vocabulary and lower_word in COLLEGE_ACADEMIC_VOCABULARY


def count_complex_words(words: Iterable[str]) -> int:
    return sum(1 for word in words if is_complex_word(word))


def count_academic_words(words: Iterable[str], level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL) -> int:
    level = TargetLevel(level)
    return sum(1 for word in words if is_academic_vocabulary(word, level))
