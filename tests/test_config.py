import logging

import pytest
from pydantic import ValidationError

from sumindex.config import SummarizerSettings
from sumindex.services.summarizer import SummaryEngine


def test_defaults():
    s = SummarizerSettings.from_env({})
    assert s.stem is False
    assert s.extra_stopwords == frozenset()
    assert s.min_term_frequency == 1
    assert "the" in s.stopwords
    assert "mr" in s.abbreviations


def test_from_env_values():
    s = SummarizerSettings.from_env({
        "SUMMARIZER_STEM": "yes",
        "SUMMARIZER_EXTRA_STOPWORDS": "Foo, bar,,",
        "SUMMARIZER_EXTRA_ABBREVIATIONS": "blvd",
        "SUMMARIZER_MIN_TERM_FREQUENCY": "2",
    })
    assert s.stem is True
    assert s.extra_stopwords == frozenset({"foo", "bar"})
    assert {"foo", "bar", "the"} <= s.stopwords
    assert "blvd" in s.abbreviations
    assert s.min_term_frequency == 2


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_bad_min_term_frequency_falls_back(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="sumindex.config"):
        s = SummarizerSettings.from_env({"SUMMARIZER_MIN_TERM_FREQUENCY": raw})
    assert s.min_term_frequency == 1
    assert "SUMMARIZER_MIN_TERM_FREQUENCY" in caplog.text


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SUMMARIZER_STEM", "on")
    assert SummarizerSettings.from_env().stem is True
    monkeypatch.setenv("SUMMARIZER_STEM", "off")
    assert SummarizerSettings.from_env().stem is False


def test_explicit_invalid_values_raise():
    with pytest.raises(ValidationError):
        SummarizerSettings(min_term_frequency=0)


def test_settings_are_frozen():
    s = SummarizerSettings()
    with pytest.raises(ValidationError):
        s.stem = True


def test_extra_abbreviations_reach_segmenter():
    text = "Meet at Elm Blvd. Bring food."
    assert SummaryEngine(text, SummarizerSettings()).sentence_count() == 2
    assert SummaryEngine(text, SummarizerSettings(extra_abbreviations={"Blvd"})).sentence_count() == 1


@pytest.mark.parametrize("value", [None, 5, [1, 2]])
def test_explicit_invalid_word_sets_raise(value):
    with pytest.raises(ValidationError):
        SummarizerSettings(extra_stopwords=value)
    with pytest.raises(ValidationError):
        SummarizerSettings(extra_abbreviations=value)


@pytest.mark.parametrize("raw, expected", [("1", True), ("ON", True), ("0", False), ("off", False), ("no", False)])
def test_stem_flag_values(raw, expected, caplog):
    with caplog.at_level(logging.WARNING, logger="sumindex.config"):
        s = SummarizerSettings.from_env({"SUMMARIZER_STEM": raw})
    assert s.stem is expected
    assert caplog.text == ""


def test_bad_stem_flag_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="sumindex.config"):
        s = SummarizerSettings.from_env({"SUMMARIZER_STEM": "maybe"})
    assert s.stem is False
    assert "SUMMARIZER_STEM" in caplog.text


def test_abbreviations_with_trailing_period():
    text = "Meet at Elm Blvd. Bring food."
    s = SummarizerSettings(extra_abbreviations={"Blvd.", "e.g."})
    assert {"blvd", "e.g"} <= s.abbreviations
    assert SummaryEngine(text, s).sentence_count() == 1
    env = SummarizerSettings.from_env({"SUMMARIZER_EXTRA_ABBREVIATIONS": "Blvd."})
    assert SummaryEngine(text, env).sentence_count() == 1
