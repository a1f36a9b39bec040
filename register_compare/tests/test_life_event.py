import pytest

from register_compare.life_event import LifeEvent


def test_life_event_empty():
    e = LifeEvent(what="birth")
    assert e.is_empty()
    assert not e.is_valid()
    assert str(e) == "<Empty>"


@pytest.mark.parametrize(
    "date,place,expected",
    [
        ("1850-03-01", None, "Normal 01.03.1850"),
        (None, "Boston", "Boston"),
        ("1850-03-01", " Boston ", "Normal 01.03.1850 Boston"),
    ]
)
def test_life_event_str(date, place, expected):
    assert str(LifeEvent(date, place)) == expected


def test_life_event_place_only_is_valid():
    e = LifeEvent(place="Boston")
    assert e.is_valid()
    assert not e.has_exact_date()


def test_life_event_differences():
    e = LifeEvent("1850-03-01", "Boston")
    assert e.differences(LifeEvent("1850-03-01", "boston")) == (False, False)
    assert e.differences(LifeEvent("1850-03-02", "Boston")) == (True, False)
    assert e.differences(LifeEvent("1850-03-01", "Salem")) == (False, True)
    assert e.differences(LifeEvent()) == (True, True)


def test_life_event_fill_place():
    e = LifeEvent("1850-03-01")
    assert e.fill_place("Boston")
    assert e.place == "Boston"
    # already has a place
    assert not e.fill_place("Salem")


@pytest.mark.parametrize("date", ["ABT 1850-03-01", "BET 1850-01-01 AND 1850-12-31", None])
def test_life_event_fill_place_needs_exact_date(date):
    e = LifeEvent(date)
    assert not e.fill_place("Boston")
    assert e.place == ""
