import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from ..api.schemas import Paragraph, Sentence
from ..config import SummarizerSettings
from .ranker import rank
from .scorer import paragraph_scores, sentence_scores
from .segmenter import segment
from .text_utils import TermStatistics

logger = logging.getLogger(__name__)

# Request every sentence/paragraph, in reading order
ALL = -1

_T = TypeVar("_T", Sentence, Paragraph)


def _select(items: Sequence[_T], limit: Optional[int]) -> List[_T]:
    if limit is None or limit <= 0 or limit >= len(items):
        return list(items)
    return sorted(items, key=lambda x: x.rank)[:limit]


class SummaryIndex:
    """Read-only ranked view of a segmented document.

    Entities are stored in document order. Queries for fewer entities than
    exist return the top-ranked ones (rank 1 first); anything else returns
    everything in document order.
    """

    def __init__(self, paragraphs: Sequence[Paragraph]) -> None:
        self._paragraphs: Tuple[Paragraph, ...] = tuple(paragraphs)
        self._sentences: Tuple[Sentence, ...] = tuple(s for p in self._paragraphs for s in p.sentences)

    @property
    def paragraphs(self) -> Tuple[Paragraph, ...]:
        return self._paragraphs

    @property
    def sentences(self) -> Tuple[Sentence, ...]:
        return self._sentences

    def paragraph_count(self) -> int:
        return len(self._paragraphs)

    def sentence_count(self) -> int:
        return len(self._sentences)

    def sentence_summary(self, max_sentences: Optional[int] = ALL) -> List[Sentence]:
        """Top ``max_sentences`` sentences by rank, or all of them in document order."""
        return _select(self._sentences, max_sentences)

    def paragraph_summary(self, max_paragraphs: Optional[int] = ALL) -> List[Paragraph]:
        """Top ``max_paragraphs`` paragraphs by rank, or all of them in document order."""
        return _select(self._paragraphs, max_paragraphs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(paragraphs={self.paragraph_count()}, sentences={self.sentence_count()})"


class SummaryEngine(SummaryIndex):
    """Segment, score and rank ``text`` once, at construction.

    Without ``settings`` the environment is read here, so results follow
    whatever ``SUMMARIZER_*`` values are set at that moment. Pass
    ``settings`` explicitly when engines built at different times must
    agree.
    """

    def __init__(self, text: Optional[str], settings: Optional[SummarizerSettings] = None) -> None:
        if settings is None:
            settings = SummarizerSettings.from_env()
        text = text or ""

        segments = segment(text, settings.abbreviations)
        flat: List[str] = [s for _, sents in segments for s in sents]
        owners: List[int] = [p for p, (_, sents) in enumerate(segments) for _ in sents]

        stats = TermStatistics.from_sentences(flat, settings.stopwords, settings.stem)
        s_scores = sentence_scores(stats, settings.min_term_frequency)
        p_scores = paragraph_scores(s_scores, [len(sents) for _, sents in segments])

        s_ranks = rank(s_scores, [(owners[i], i) for i in range(len(flat))])
        p_ranks = rank(p_scores, list(range(len(segments))))

        sentences = [
            Sentence(text=t, rank=s_ranks[i], sentence_order=i, paragraph_order=owners[i], score=s_scores[i])
            for i, t in enumerate(flat)
        ]
        paragraphs: List[Paragraph] = []
        pos = 0
        for p, (para_text, sents) in enumerate(segments):
            paragraphs.append(Paragraph(
                text=para_text,
                rank=p_ranks[p],
                paragraph_order=p,
                score=p_scores[p],
                sentences=tuple(sentences[pos: pos + len(sents)]),
            ))
            pos += len(sents)
        super().__init__(paragraphs)
        logger.debug(
            "Summarized %d chars: %d paragraphs, %d sentences, %d significant terms",
            len(text), len(paragraphs), len(sentences), stats.total,
        )


def summarize(
    text: Optional[str],
    max_sentences: int = 3,
    strategy: str = "frequency",
    settings: Optional[SummarizerSettings] = None,
) -> List[str]:
    """Return summary sentence texts in reading order.

    ``frequency`` keeps the highest-ranked sentences, ``lead`` the first ones.
    """
    if strategy not in ("frequency", "lead"):
        raise ValueError(f"unknown strategy: {strategy!r}")
    engine = SummaryEngine(text, settings)
    if not engine.sentence_count():
        return []
    if strategy == "lead":
        picked = list(engine.sentences[:max_sentences] if max_sentences > 0 else engine.sentences)
    else:
        picked = sorted(engine.sentence_summary(max_sentences), key=lambda s: s.sentence_order)
    return [s.text for s in picked]
