import logging
import os
from typing import FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .services.segmenter import ABBREVIATIONS
from .services.text_utils import EN_STOP

logger = logging.getLogger(__name__)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _str_to_bool(name: str, v: Optional[str], default: bool = False) -> bool:
    if v is None or not str(v).strip():
        return default
    s = str(v).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    logger.warning("Ignoring %s=%r: not a boolean, using %s", name, v, default)
    return default


def _clean_words(words, strip_period: bool = False) -> FrozenSet[str]:
    out = set()
    for w in words:
        w = w.strip().casefold()
        if strip_period:
            # "Blvd." and "blvd" name the same abbreviation
            w = w.rstrip(".")
        if w:
            out.add(w)
    return frozenset(out)


def _parse_words(s: Optional[str], strip_period: bool = False) -> FrozenSet[str]:
    # "foo, bar,baz" -> {"foo", "bar", "baz"}
    if not s:
        return frozenset()
    return _clean_words(s.split(","), strip_period)


def _parse_int(name: str, s: Optional[str], default: int) -> int:
    if s is None or not s.strip():
        return default
    try:
        return int(s.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, s, default)
        return default


def _normalise(v, strip_period: bool):
    if isinstance(v, str):
        return _parse_words(v, strip_period)
    if isinstance(v, (set, frozenset, list, tuple)) and all(isinstance(w, str) for w in v):
        return _clean_words(v, strip_period)
    # anything else is left for FrozenSet[str] validation to reject
    return v


class SummarizerSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    stem: bool = Field(False, description="Apply light suffix stemming to terms")
    extra_stopwords: FrozenSet[str] = Field(default_factory=frozenset, description="Words ignored in addition to the built-in stopword list")
    extra_abbreviations: FrozenSet[str] = Field(default_factory=frozenset, description="Words whose trailing period never ends a sentence")
    min_term_frequency: int = Field(1, ge=1, description="Terms seen fewer times than this do not add to a sentence score")

    @field_validator("extra_stopwords", mode="before")
    @classmethod
    def _normalise_stopwords(cls, v):
        return _normalise(v, strip_period=False)

    @field_validator("extra_abbreviations", mode="before")
    @classmethod
    def _normalise_abbreviations(cls, v):
        return _normalise(v, strip_period=True)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return EN_STOP | self.extra_stopwords

    @property
    def abbreviations(self) -> FrozenSet[str]:
        return ABBREVIATIONS | self.extra_abbreviations

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SummarizerSettings":
        env = os.environ if environ is None else environ
        min_freq = _parse_int("SUMMARIZER_MIN_TERM_FREQUENCY", env.get("SUMMARIZER_MIN_TERM_FREQUENCY"), 1)
        if min_freq < 1:
            logger.warning("Ignoring SUMMARIZER_MIN_TERM_FREQUENCY=%d: must be >= 1", min_freq)
            min_freq = 1
        return cls(
            stem=_str_to_bool("SUMMARIZER_STEM", env.get("SUMMARIZER_STEM"), False),
            extra_stopwords=_parse_words(env.get("SUMMARIZER_EXTRA_STOPWORDS")),
            extra_abbreviations=_parse_words(env.get("SUMMARIZER_EXTRA_ABBREVIATIONS"), strip_period=True),
            min_term_frequency=min_freq,
        )
