"""Tests for the fallback combinatorial search."""

from fretpick.config import ScoreWeights, SearchConfig
from fretpick.fretboard import Fretboard
from fretpick.parser import parse_chord
from fretpick.scoring import fret_span
from fretpick.search import FallbackSearch, generate_candidates

FRETBOARD = Fretboard()
SEARCH = FallbackSearch(FRETBOARD, SearchConfig(), ScoreWeights())


def test_generate_candidates() -> None:
    chord = parse_chord("G")
    candidates = generate_candidates(chord, FRETBOARD, 1000)
    # G, B and D spread over distinct strings within frets 0-7
    assert len(candidates) == 48
    assert candidates[0].tab() == "320xxx"
    for fingering in candidates:
        assert sorted(n.value for n in fingering.note_names()) == sorted(
            t.value for t in chord.tones
        )
    assert len({f.tab() for f in candidates}) == len(candidates)


def test_generate_candidates_cap() -> None:
    chord = parse_chord("G")
    capped = generate_candidates(chord, FRETBOARD, 10)
    assert len(capped) == 10
    assert [f.tab() for f in capped] == [
        f.tab() for f in generate_candidates(chord, FRETBOARD, 1000)[:10]
    ]
    assert generate_candidates(chord, FRETBOARD, 0) == []


def test_search_ranks_best_first() -> None:
    result = SEARCH.search(parse_chord("G"))
    assert result.found
    assert result.total_candidates == 48
    assert len(result.ranked) == 3
    assert result.best is not None
    assert result.best.fingering.tab() == "xx000x"
    assert result.best.score == 5.5
    assert result.has_good_fingering
    scores = [c.score for c in result.ranked]
    assert scores == sorted(scores, reverse=True)
    assert result.alternatives == result.ranked[1:]


def test_search_respects_span() -> None:
    chord = parse_chord("Bbm")
    result = SEARCH.search(chord)
    assert result.best is not None
    assert 0 < result.valid_candidates <= result.total_candidates <= 50
    for candidate in result.ranked:
        assert fret_span(candidate.fingering) <= 4
        assert set(candidate.fingering.note_names()) == set(chord.tones)


def test_search_keeps_wide_candidates_when_nothing_fits() -> None:
    strict = FallbackSearch(FRETBOARD, SearchConfig(max_fret_span=-1), ScoreWeights())
    result = strict.search(parse_chord("G"))
    assert result.valid_candidates == 0
    assert result.found


def test_search_threshold() -> None:
    picky = FallbackSearch(FRETBOARD, SearchConfig(score_threshold=10.0), ScoreWeights())
    result = picky.search(parse_chord("G"))
    assert result.found
    assert not result.has_good_fingering


def test_search_without_candidates() -> None:
    open_only = FallbackSearch(Fretboard(max_fret=0), SearchConfig(), ScoreWeights())
    result = open_only.search(parse_chord("Gm"))
    assert not result.found
    assert result.best is None
    assert result.total_candidates == 0
    assert not result.has_good_fingering
