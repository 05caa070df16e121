import re
from typing import AbstractSet, List, Tuple

# Form feed and U+2029 act as explicit paragraph breaks
PARAGRAPH_MARKER_REGEX = re.compile(r"[\f\u2029]")
PARAGRAPH_SPLIT_REGEX = re.compile(r"\n[^\S\n]*(?:\n[^\S\n]*)+")

# Terminal punctuation run, optional closing quotes/brackets, then whitespace or end
SENT_BOUNDARY_REGEX = re.compile(r"[.!?]+[\"'”’)\]]*(?=\s|$)")
LAST_WORD_REGEX = re.compile(r"(\S+)$")
# Single letters ("J") and short dotted runs ("U.S", "Ph.D", "e.g")
INITIALISM_REGEX = re.compile(r"^(?:[^\W\d_]{1,2}\.)+[^\W\d_]{1,2}$|^[^\W\d_]$")

ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt", "ft", "rev", "gen", "gov", "sen",
    "rep", "lt", "col", "capt", "sgt", "vs", "etc", "e.g", "i.e", "cf", "al", "approx", "inc",
    "ltd", "co", "corp", "dept", "est", "fig", "vol", "jan", "feb", "mar", "apr", "jun",
    "jul", "aug", "sep", "sept", "oct", "nov", "dec",
})


def split_paragraphs(text: str) -> List[str]:
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    text = PARAGRAPH_MARKER_REGEX.sub("\n\n", text)
    return [p.strip() for p in PARAGRAPH_SPLIT_REGEX.split(text) if p.strip()]


def _is_abbreviation(before: str, abbreviations: AbstractSet[str]) -> bool:
    m = LAST_WORD_REGEX.search(before)
    if not m:
        return False
    word = m.group(1).lstrip("\"'“‘([")
    if not word:
        return False
    return bool(INITIALISM_REGEX.match(word)) or word.casefold() in abbreviations


def split_sentences(paragraph: str, abbreviations: AbstractSet[str] = ABBREVIATIONS) -> List[str]:
    """Split one paragraph into sentences.

    A lone period after an initial ("J."), a dotted initialism ("U.S.") or a
    known abbreviation does not end a sentence. Whatever follows the last
    boundary becomes the final sentence, so text with no terminal
    punctuation comes back as a single sentence.
    """
    paragraph = (paragraph or "").strip()
    if not paragraph:
        return []
    sentences: List[str] = []
    start = 0
    for m in SENT_BOUNDARY_REGEX.finditer(paragraph):
        if m.group().rstrip("\"'”’)]") == "." and _is_abbreviation(paragraph[start:m.start()], abbreviations):
            continue
        piece = paragraph[start:m.end()].strip()
        if piece:
            sentences.append(piece)
        start = m.end()
    tail = paragraph[start:].strip()
    if tail:
        sentences.append(tail)
    return sentences


def segment(text: str, abbreviations: AbstractSet[str] = ABBREVIATIONS) -> List[Tuple[str, List[str]]]:
    """Return ``(paragraph_text, sentences)`` pairs in document order."""
    out: List[Tuple[str, List[str]]] = []
    for para in split_paragraphs(text):
        sents = split_sentences(para, abbreviations)
        if sents:
            out.append((para, sents))
    return out
