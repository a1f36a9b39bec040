import pytest

from register_compare.name import PersonName


def test_person_name_str_and_formats():
    n = PersonName(" John ", "Smith")
    assert str(n) == "John Smith"
    assert n.genealogical_format() == "Smith, John"
    assert n.initials() == "JS"
    assert str(PersonName(surname="Smith")) == "Smith"
    assert PersonName().is_empty()


@pytest.mark.parametrize(
    "first,second,expected",
    [
        (("John", "Smith"), ("john", "SMITH"), True),
        (("Anna  Maria", "Weber"), ("Anna Maria", "Weber"), True),
        (("John", "Smith"), ("Jon", "Smith"), False),
        (("", ""), ("", ""), False),
    ]
)
def test_person_name_exact_match(first, second, expected):
    assert PersonName(*first).exact_match(PersonName(*second)) == expected


@pytest.mark.parametrize(
    "first,second",
    [
        (("Mary", "Smith"), ("Marie", "Smith")),
        (("John", "Doe"), ("Jon", "Doe")),
        (("Johann", "Schmidt"), ("Johan", "Schmitt")),
        (("John", "Smith"), ("John", "Smith")),
        (("Catherine", "Williams"), ("Katherine", "Williams")),
        (("John", "Smith"), ("John", "Smyth")),
    ]
)
def test_person_name_similar_match(first, second):
    assert PersonName(*first).similar_match(PersonName(*second))


@pytest.mark.parametrize(
    "first,second",
    [
        (("Kurt", "Schulz"), ("Kurt", "Wagner")),
        (("Mary", "Smith"), ("Anna", "Smith")),
        (("John", "Smith"), ("Mary", "Johnson")),
        (("Mary", "Smith"), ("Mary", "")),
        (("", ""), ("", "")),
    ]
)
def test_person_name_not_similar(first, second):
    assert not PersonName(*first).similar_match(PersonName(*second))


def test_person_name_similar_threshold():
    first = PersonName("Johann", "Schmidt")
    second = PersonName("Jochen", "Schmidt")
    # different Soundex for the given name, so only the ratio can match them
    assert not first.similar_match(second, threshold=100)
    assert first.similar_match(second, threshold=0)
