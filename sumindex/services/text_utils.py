import re
from collections import Counter
from typing import AbstractSet, Dict, FrozenSet, Iterable, List

# Letters/digits with optional internal apostrophes ("don't", "o'clock")
TOKEN_REGEX = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")
APOSTROPHE_REGEX = re.compile(r"['’]")

EN_STOP = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "also", "am", "an", "and", "any",
    "are", "as", "at", "be", "because", "been", "before", "being", "below", "between", "both",
    "but", "by", "can", "cannot", "could", "did", "do", "does", "doing", "dont", "down", "during",
    "each", "few", "for", "from", "further", "had", "has", "have", "having", "he", "her", "here",
    "hers", "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is", "it", "its",
    "itself", "just", "me", "more", "most", "my", "myself", "no", "nor", "not", "now", "of", "off",
    "on", "once", "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own", "same",
    "she", "should", "so", "some", "such", "than", "that", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those", "through", "to", "too",
    "under", "until", "up", "very", "was", "we", "were", "what", "when", "where", "which", "while",
    "who", "whom", "why", "will", "with", "would", "you", "your", "yours", "yourself",
    "yourselves",
})

# (suffix, replacement, minimum resulting stem length), first match wins
_SUFFIX_RULES = (
    ("sses", "ss", 2),
    ("ies", "y", 2),
    ("ing", "", 3),
    ("edly", "", 3),
    ("ed", "", 3),
    ("ly", "", 3),
    ("s", "", 3),
)


def light_stem(term: str) -> str:
    """Strip one common English suffix; short words are returned unchanged."""
    if term.endswith("ss"):
        return term
    for suffix, repl, min_len in _SUFFIX_RULES:
        if term.endswith(suffix):
            stem = term[: len(term) - len(suffix)]
            if len(stem) >= min_len:
                return stem + repl
            return term
    return term


def tokenize(text: str, stopwords: AbstractSet[str] = EN_STOP, stem: bool = False) -> List[str]:
    if not text:
        return []
    tokens = [APOSTROPHE_REGEX.sub("", t) for t in TOKEN_REGEX.findall(text.casefold())]
    terms = [t for t in tokens if t and t not in stopwords]
    if stem:
        terms = [light_stem(t) for t in terms]
    return terms


class TermStatistics:
    """Document-wide term counts plus the distinct significant terms of each sentence."""

    def __init__(self, frequencies: Dict[str, int], sentence_terms: List[FrozenSet[str]]) -> None:
        self._frequencies = dict(frequencies)
        self._sentence_terms = tuple(sentence_terms)
        self._total = sum(self._frequencies.values())

    @classmethod
    def from_sentences(
        cls,
        sentences: Iterable[str],
        stopwords: AbstractSet[str] = EN_STOP,
        stem: bool = False,
    ) -> "TermStatistics":
        freq: Counter = Counter()
        per_sentence: List[FrozenSet[str]] = []
        for s in sentences:
            terms = tokenize(s, stopwords, stem)
            freq.update(terms)
            per_sentence.append(frozenset(terms))
        return cls(freq, per_sentence)

    @property
    def total(self) -> int:
        return self._total

    @property
    def sentence_terms(self) -> tuple:
        return self._sentence_terms

    def frequency(self, term: str) -> int:
        return self._frequencies.get(term, 0)

    def most_common(self, n: int = 10) -> List[tuple]:
        # ties broken alphabetically so output does not depend on insertion order
        return sorted(self._frequencies.items(), key=lambda kv: (-kv[1], kv[0]))[:n]

    def __len__(self) -> int:
        return len(self._sentence_terms)
