"""Tests for aspect detection."""

from ephemeris.aspects import AspectMatch, best_aspect, classify_intensity, compute_aspects
from ephemeris.bodies import ASPECTS


def test_exact_square():
    aspects = compute_aspects({"A": 0.0, "B": 90.0}, 4.0)
    assert aspects == [
        AspectMatch(a="A", b="B", aspect="Square", separation=90.0, orb=0.0, intensity="tight")
    ]


def test_sextile_within_orb():
    aspects = compute_aspects({"A": 0.0, "B": 61.0}, 4.0)
    assert len(aspects) == 1
    assert aspects[0].aspect == "Sextile"
    assert aspects[0].separation == 61.0
    assert aspects[0].orb == 1.0
    # 1 <= 4 * 0.33
    assert aspects[0].intensity == "tight"


def test_intensity_bands():
    assert compute_aspects({"A": 0.0, "B": 62.0}, 4.0)[0].intensity == "medium"
    assert compute_aspects({"A": 0.0, "B": 63.5}, 4.0)[0].intensity == "wide"


def test_no_aspect_outside_orb():
    assert compute_aspects({"A": 0.0, "B": 70.0}, 4.0) == []


def test_opposition_across_zero():
    aspects = compute_aspects({"A": 350.0, "B": 172.0}, 4.0)
    assert len(aspects) == 1
    assert aspects[0].aspect == "Opposition"
    assert aspects[0].separation == 178.0
    assert aspects[0].orb == 2.0


def test_results_sorted_by_orb():
    longitudes = {"A": 0.0, "B": 3.0, "C": 200.0, "D": 200.5, "E": 238.8}
    aspects = compute_aspects(longitudes, 4.0)
    assert [(m.a, m.b, m.orb) for m in aspects] == [
        ("C", "D", 0.5),
        ("A", "E", 1.2),
        ("A", "B", 3.0),
    ]


def test_equal_orbs_keep_pair_order():
    longitudes = {"A": 0.0, "B": 90.5, "C": 180.0}
    aspects = compute_aspects(longitudes, 4.0)
    # A-C opposition (0.0), then A-B and B-C squares (0.5 each) in pair order
    assert [(m.a, m.b) for m in aspects] == [("A", "C"), ("A", "B"), ("B", "C")]


def test_every_pair_is_checked():
    longitudes = {f"P{i}": 0.0 for i in range(10)}
    aspects = compute_aspects(longitudes, 4.0)
    assert len(aspects) == 45
    assert all(m.aspect == "Conjunction" for m in aspects)


def test_rounding_is_presentation_only():
    aspects = compute_aspects({"A": 0.0, "B": 90.004}, 4.0)
    assert aspects[0].separation == 90.0
    assert aspects[0].orb == 0.0


def test_best_aspect_prefers_closest():
    aspect, orb = best_aspect(118.0, 10.0)
    assert aspect.name == "Trine"
    assert orb == 2.0


def test_best_aspect_tie_prefers_earlier_catalog_entry():
    aspect, orb = best_aspect(30.0, 30.0)
    assert aspect.name == "Conjunction"
    assert orb == 30.0

    aspect, orb = best_aspect(75.0, 15.0)
    assert aspect.name == "Sextile"


def test_best_aspect_none_outside_orb():
    assert best_aspect(45.0, 4.0) is None


def test_classify_intensity_boundaries_inclusive():
    assert classify_intensity(0.0, 4.0) == "tight"
    assert classify_intensity(1.32, 4.0) == "tight"
    assert classify_intensity(1.33, 4.0) == "medium"
    assert classify_intensity(2.64, 4.0) == "medium"
    assert classify_intensity(2.65, 4.0) == "wide"
    assert classify_intensity(4.0, 4.0) == "wide"


def test_aspect_catalog_is_ordered():
    assert [a.name for a in ASPECTS] == ["Conjunction", "Sextile", "Square", "Trine", "Opposition"]
    assert [a.angle for a in ASPECTS] == [0.0, 60.0, 90.0, 120.0, 180.0]
