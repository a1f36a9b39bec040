"""
Tests for comparison.comparer module.
"""
from __future__ import annotations

import pytest

from register_compare.comparison.comparer import ComparisonReport, PageComparer
from register_compare.comparison.config import ComparisonConfig
from register_compare.comparison.model import MatchType


class RecordingHooks:
    """Collects report_step calls (not a test class, so doesn't start with "Test")."""

    def __init__(self):
        self.calls = []

    def report_step(self, info="", target=None, reset_counter=False, plus_step=1):
        self.calls.append((info, target, reset_counter, plus_step))


class TestPageComparer:
    """Tests for PageComparer on a trusted and an extracted page."""

    def test_rejects_non_page(self, reference_page):
        """Test that both arguments must be pages."""
        with pytest.raises(TypeError):
            PageComparer(reference_page, {'E1': None})

    def test_compare_entries(self, reference_page, extracted_page):
        """Test splitting entry ids."""
        entries = PageComparer(reference_page, extracted_page).compare_entries()

        assert entries.common == ['E1', 'E2']
        assert entries.only_in_first == ['E3']
        assert entries.only_in_second == ['E4']

    def test_compare_people(self, reference_page, extracted_page):
        """Test match counts per type."""
        people = PageComparer(reference_page, extracted_page).compare_people()

        assert people.entries_compared == 2
        assert people.total_matches == 6
        assert people.count(MatchType.EXACT_NAME) == 4
        assert people.count(MatchType.RELATIONSHIP_SIMILAR) == 2
        assert people.count(MatchType.EVENT_REFERENCE) == 0
        assert people.count(MatchType.SIMILAR_NAME) == 0
        assert (people.unmatched_in_first, people.unmatched_in_second) == (0, 1)
        assert people.precision_rate == pytest.approx(66.6667, abs=1e-3)

    def test_people_pairs(self, reference_page, extracted_page):
        """Test which people were paired in the first entry."""
        people = PageComparer(reference_page, extracted_page).compare_people()
        detail = people.details[0]

        assert detail.entry_id == 'E1'
        assert [(m.person1_id, m.person2_id) for m in detail.result.matches] == [(1, 10), (3, 12), (2, 11), (4, 13)]
        assert [p.name for p in people.details[1].result.unmatched_second] == ['Robert Baker']

    def test_compare_references(self, reference_page, extracted_page):
        """Test that an extra reference is a precision error only."""
        references = PageComparer(reference_page, extracted_page).compare_references()

        assert references.total_matches == 6
        assert (references.recall_errors, references.precision_errors) == (0, 1)
        error = references.details[1].precision_errors[0]
        assert error.different_references2 == ['P1 L5']

    def test_compare_relationships(self, reference_page, extracted_page):
        """Test that the lost family of E2 gives one relationship error."""
        relationships = PageComparer(reference_page, extracted_page).compare_relationships()

        assert relationships.recall_errors == 1
        error = relationships.details[1].recall_errors[0]
        assert (error.person1_name, error.letters1, error.letters2) == ('Sarah Brown', 'W', '')

    def test_compare_events(self, reference_page, extracted_page):
        """Test event recall and precision errors."""
        events = PageComparer(reference_page, extracted_page).compare_events()

        assert (events.recall_errors, events.precision_errors) == (3, 1)
        assert events.recall_error_rate == pytest.approx(50.0)
        recall = events.details[0].recall_errors
        assert sorted((e.person1_id, e.event_type) for e in recall) == [(1, 'marriage'), (2, 'birth'), (2, 'marriage')]
        precision = events.details[0].precision_errors[0]
        assert (precision.person1_id, precision.event_type, precision.dates_differ) == (3, 'birth', True)

    def test_get_summary(self, reference_page, extracted_page):
        """Test summary categories and values."""
        summary = PageComparer(reference_page, extracted_page).get_summary()

        assert summary.get_category('page1') == {
            'total_entries': 3, 'total_people': 7, 'total_families': 2, 'location': 'St Mary, Boston',
        }
        assert summary.get_value('page2', 'total_people') == 8
        assert summary.get_value('page2', 'location') == 'Unknown'
        assert summary.get_category('entries') == {'common': 2, 'only_in_first': 1, 'only_in_second': 1}
        assert summary.get_value('people', 'exact_name') == 4
        assert summary.get_value('references', 'precision_errors') == 1
        assert summary.get_value('relationships', 'recall_errors') == 1
        assert summary.get_value('events', 'recall_errors') == 3
        assert summary.get_value('events', 'details') is None
        assert summary.get_value('quality', 'verdict') == 'Good'

    def test_quality(self, reference_page, extracted_page):
        """Test quality scores of the scenario."""
        quality = PageComparer(reference_page, extracted_page).quality()

        assert quality.categories['entries'].f1 == 100.0
        assert quality.categories['people'].f1 == pytest.approx(66.6667, abs=1e-3)
        assert quality.categories['references'].f1 == pytest.approx(90.9091, abs=1e-3)
        assert quality.categories['relationships'].f1 == pytest.approx(90.9091, abs=1e-3)
        assert quality.categories['events'].f1 == pytest.approx(62.5)
        assert quality.average_f1 == pytest.approx(82.197, abs=1e-3)
        assert quality.verdict == 'Good'

    def test_compare_all(self, reference_page, extracted_page):
        """Test running everything at once."""
        report = PageComparer(reference_page, extracted_page).compare_all()

        assert isinstance(report, ComparisonReport)
        assert report.people.total_matches == 6
        assert report.events.recall_errors == 3
        data = report.to_dict()
        assert data['entries']['only_in_second'] == ['E4']
        assert data['quality']['verdict'] == 'Good'
        assert data['summary']['page1']['total_entries'] == 3

    def test_results_are_cached(self, reference_page, extracted_page):
        """Test that facets run once per comparer."""
        comparer = PageComparer(reference_page, extracted_page)

        assert comparer.compare_events() is comparer.compare_events()

    def test_disabled_facet(self, reference_page, extracted_page):
        """Test that a disabled facet is left out of compare_all and the summary."""
        config = ComparisonConfig.from_dict({'facets': {'events': False}})
        comparer = PageComparer(reference_page, extracted_page, config=config)

        report = comparer.compare_all()

        assert report.events is None
        assert report.people is not None
        assert 'events' not in report.summary.categories
        assert report.quality.categories['events'].f1 == 100.0
        # still available on request
        assert comparer.compare_events().recall_errors == 3

    def test_config_file(self, reference_page, extracted_page, tmp_path):
        """Test loading the configuration from a file."""
        config_file = tmp_path / "compare.yaml"
        config_file.write_text("comparison:\n  facets:\n    references: false\n", encoding="utf-8")

        summary = PageComparer(reference_page, extracted_page, config_file=config_file).get_summary()

        assert 'references' not in summary.categories
        assert 'people' in summary.categories

    def test_unknown_facet(self, reference_page, extracted_page):
        """Test that asking for an unknown facet raises."""
        with pytest.raises(ValueError):
            PageComparer(reference_page, extracted_page)._run_facet('places')

    def test_app_hooks(self, reference_page, extracted_page):
        """Test progress reporting through app hooks."""
        hooks = RecordingHooks()

        PageComparer(reference_page, extracted_page, app_hooks=hooks).compare_all()

        assert hooks.calls[0] == ("Comparing pages", 6, True, 0)
        assert len(hooks.calls) == 7
        assert sum(call[3] for call in hooks.calls) == 6

    def test_pages_not_modified(self, reference_page, extracted_page):
        """Test that comparing leaves the caller's pages untouched."""
        before = (repr(reference_page.entries['E1'].people), repr(extracted_page.entries['E1'].people))
        comparer = PageComparer(reference_page, extracted_page)
        comparer.compare_all()
        comparer.page1.entries['E1'].people[1].name.given = 'Changed'

        assert reference_page.entries['E1'].people[1].name.given == 'John'
        assert (repr(reference_page.entries['E1'].people), repr(extracted_page.entries['E1'].people)) == before

    def test_swapping_pages(self, reference_page, extracted_page):
        """Test that swapping the pages keeps the symmetric counts."""
        forward = PageComparer(reference_page, extracted_page)
        backward = PageComparer(extracted_page, reference_page)

        assert forward.compare_people().total_matches == backward.compare_people().total_matches
        for name in ('exact_name', 'relationship_similar'):
            assert forward.compare_people().to_dict()[name] == backward.compare_people().to_dict()[name]
        assert forward.compare_relationships().recall_errors == backward.compare_relationships().recall_errors
        assert forward.compare_events().recall_errors == backward.compare_events().recall_errors
        assert forward.compare_events().precision_errors == backward.compare_events().precision_errors
        assert forward.compare_references().precision_errors == backward.compare_references().precision_errors
        assert (backward.compare_entries().only_in_first, backward.compare_entries().only_in_second) == (['E4'], ['E3'])


class TestNoMatches:
    """Tests for comparisons where nobody can be matched."""

    def test_zero_rates(self, make_page):
        """Test that rates are zero without matches."""
        page1 = make_page({'E1': ({1: {'given': 'Kurt', 'surname': 'Schulz'}}, [])})
        page2 = make_page({'E1': ({1: {'given': 'Hans', 'surname': 'Wagner'}}, [])})
        comparer = PageComparer(page1, page2)

        people = comparer.compare_people()
        events = comparer.compare_events()

        assert people.total_matches == 0
        assert people.precision_rate == 0.0
        assert (events.recall_error_rate, events.precision_error_rate) == (0.0, 0.0)
        assert comparer.quality().categories['people'].f1 == 0.0

    def test_no_common_entries(self, make_page):
        """Test comparing pages without shared entries."""
        page1 = make_page({'E1': ({1: {'given': 'Kurt', 'surname': 'Schulz'}}, [])})
        page2 = make_page({'E2': ({1: {'given': 'Kurt', 'surname': 'Schulz'}}, [])})

        report = PageComparer(page1, page2).compare_all()

        assert report.entries.common == []
        assert report.people.entries_compared == 0
        assert report.quality.average_f1 == 100.0
        assert report.quality.verdict == 'Excellent'
