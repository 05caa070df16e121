from sumindex.services.text_utils import EN_STOP, TermStatistics, light_stem, tokenize


def test_tokenize_casefolds_and_drops_stopwords():
    assert tokenize("The Cats, the DOGS!") == ["cats", "dogs"]
    assert tokenize("") == []


def test_tokenize_apostrophes():
    assert tokenize("Don't stop") == ["stop"]
    assert tokenize("O'Brien's boat") == ["obriens", "boat"]


def test_tokenize_custom_stopwords():
    assert tokenize("the red fox", stopwords={"red"}) == ["the", "fox"]
    assert tokenize("the red fox", stopwords=EN_STOP | {"red"}) == ["fox"]


def test_light_stem():
    assert light_stem("cats") == "cat"
    assert light_stem("flies") == "fly"
    assert light_stem("walked") == "walk"
    assert light_stem("class") == "class"
    assert light_stem("bus") == "bus"
    assert tokenize("Cats and dogs", stem=True) == ["cat", "dog"]


def test_term_statistics():
    stats = TermStatistics.from_sentences(["Cats are great.", "Dogs are great too.", "Birds fly."])
    assert len(stats) == 3
    assert stats.total == 6
    assert stats.frequency("great") == 2
    assert stats.frequency("are") == 0
    assert stats.sentence_terms[0] == frozenset({"cats", "great"})
    assert stats.most_common(2) == [("great", 2), ("birds", 1)]


def test_term_statistics_repeated_term_in_one_sentence():
    stats = TermStatistics.from_sentences(["great great idea"])
    assert stats.frequency("great") == 2
    assert stats.total == 3
    assert stats.sentence_terms[0] == frozenset({"great", "idea"})
