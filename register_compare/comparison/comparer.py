"""
Page comparison: runs entry matching and every enabled facet over two pages.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from register_compare.app_hooks import AppHooks
from register_compare.page import Page
from register_compare.relationship import compute_relationships

from .base import ComparisonFacet, EntryContext, get_facet_registry
from .config import ComparisonConfig
from .matcher import EntityMatcher
from .model import EntryComparison, FacetResult, PeopleResult, Summary
from .quality import QualityReport, assess_quality

logger = logging.getLogger(__name__)


@dataclass
class ComparisonReport:
    """
    Fully materialised result of one page comparison.

    Facets disabled in the configuration are left as None.
    """
    entries: EntryComparison
    summary: Summary
    quality: QualityReport
    people: Optional[PeopleResult] = None
    references: Optional[FacetResult] = None
    relationships: Optional[FacetResult] = None
    events: Optional[FacetResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'entries': self.entries.to_dict(),
            'people': self.people.to_dict() if self.people else None,
            'references': self.references.to_dict() if self.references else None,
            'relationships': self.relationships.to_dict() if self.relationships else None,
            'events': self.events.to_dict() if self.events else None,
            'summary': self.summary.to_dict(),
            'quality': self.quality.to_dict(),
        }


class PageComparer:
    """
    Compares a trusted page (first) with an extracted page (second).

    Both pages are cloned on construction, so the caller's pages are never
    modified. People of each entry present on both pages are matched once and
    the correspondence is shared by all facets.

    Example:
        comparer = PageComparer(reference_page, extracted_page)
        entries = comparer.compare_entries()
        people = comparer.compare_people()
        ...
        summary = comparer.get_summary()

        # or everything at once
        report = PageComparer(reference_page, extracted_page).compare_all()
    """

    def __init__(
        self,
        page1: Page,
        page2: Page,
        config: Optional[ComparisonConfig] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize a comparison.

        Args:
            page1: The trusted reference page
            page2: The page to assess
            config: Comparison configuration (defaults from config.yaml)
            config_file: Path to a YAML config file, used when config is not given
            app_hooks: Optional application hooks for progress reporting
        """
        for page in (page1, page2):
            if not isinstance(page, Page):
                raise TypeError(f"Expected Page, got {type(page).__name__}")
        self.page1 = page1.clone()
        self.page2 = page2.clone()
        self.app_hooks = app_hooks

        if config is not None:
            self.config = config
        elif config_file:
            self.config = ComparisonConfig.from_yaml(config_file)
        else:
            self.config = ComparisonConfig()

        self.matcher = EntityMatcher(self.config)
        self.facets: Dict[str, ComparisonFacet] = {
            facet_id: facet_cls(enabled=self.config.is_enabled(facet_id), config=self.config)
            for facet_id, facet_cls in get_facet_registry().items()
        }
        self._contexts: Optional[List[EntryContext]] = None
        self._results: Dict[str, Any] = {}

    def compare_entries(self) -> EntryComparison:
        """
        Split entry ids into common ones and ones present on one page only.

        Returns:
            EntryComparison with sorted id lists
        """
        ids1 = set(self.page1.entries)
        ids2 = set(self.page2.entries)
        return EntryComparison(
            common=sorted(ids1 & ids2),
            only_in_first=sorted(ids1 - ids2),
            only_in_second=sorted(ids2 - ids1),
        )

    def _entry_contexts(self) -> List[EntryContext]:
        """Match the people of every common entry, once per comparison."""
        if self._contexts is None:
            contexts = []
            for entry_id in self.compare_entries().common:
                entry1 = self.page1.entries[entry_id]
                entry2 = self.page2.entries[entry_id]
                codes1 = compute_relationships(entry1)
                codes2 = compute_relationships(entry2)
                match_result = self.matcher.match(entry1.people, entry2.people, codes1, codes2)
                logger.debug(f"Entry {entry_id}: {match_result.total} matches, "
                             f"{len(match_result.unmatched_first)}/{len(match_result.unmatched_second)} unmatched")
                contexts.append(EntryContext(
                    entry_id=entry_id,
                    entry1=entry1,
                    entry2=entry2,
                    codes1=codes1,
                    codes2=codes2,
                    match_result=match_result,
                ))
            self._contexts = contexts
        return self._contexts

    def _run_facet(self, facet_id: str) -> Any:
        if facet_id not in self._results:
            facet = self.facets.get(facet_id)
            if facet is None:
                raise ValueError(f"Unknown comparison facet '{facet_id}'")
            self._results[facet_id] = facet.analyze(self._entry_contexts())
        return self._results[facet_id]

    def compare_people(self) -> PeopleResult:
        """Match counts per type, unmatched people and precision rate."""
        return self._run_facet('people')

    def compare_references(self) -> FacetResult:
        """Cross-reference recall and precision errors of matched people."""
        return self._run_facet('references')

    def compare_relationships(self) -> FacetResult:
        """Relationship code mismatches of matched people."""
        return self._run_facet('relationships')

    def compare_events(self) -> FacetResult:
        """Life event recall and precision errors of matched people."""
        return self._run_facet('events')

    def _enabled_results(self) -> Dict[str, Any]:
        return {
            facet_id: self._run_facet(facet_id)
            for facet_id, facet in self.facets.items()
            if facet.enabled
        }

    def quality(self) -> QualityReport:
        """Precision, recall and F1 per category with an overall verdict."""
        results = self._enabled_results()
        return assess_quality(
            people=results.get('people'),
            references=results.get('references'),
            relationships=results.get('relationships'),
            events=results.get('events'),
            config=self.config,
        )

    def _page_summary(self, summary: Summary, category: str, page: Page) -> None:
        summary.add_value(category, 'total_entries', page.entry_count())
        summary.add_value(category, 'total_people', page.people_count())
        summary.add_value(category, 'total_families', page.family_count())
        summary.add_value(category, 'location', page.location or 'Unknown')

    def get_summary(self) -> Summary:
        """
        Aggregate page totals, entry overlap and the totals of every enabled facet.

        Returns:
            Summary with categories 'page1', 'page2', 'entries', one per enabled
            facet, and 'quality'
        """
        summary = Summary()
        self._page_summary(summary, 'page1', self.page1)
        self._page_summary(summary, 'page2', self.page2)

        entries = self.compare_entries()
        summary.add_value('entries', 'common', len(entries.common))
        summary.add_value('entries', 'only_in_first', len(entries.only_in_first))
        summary.add_value('entries', 'only_in_second', len(entries.only_in_second))

        for facet_id, result in self._enabled_results().items():
            for name, value in result.to_dict().items():
                if name not in ('facet_id', 'details'):
                    summary.add_value(facet_id, name, value)

        quality = self.quality()
        summary.add_value('quality', 'average_f1', quality.average_f1)
        summary.add_value('quality', 'verdict', quality.verdict)
        return summary

    def compare_all(self) -> ComparisonReport:
        """
        Run compare_entries, every enabled facet and get_summary, in that order.

        Returns:
            ComparisonReport
        """
        enabled = [facet for facet in self.facets.values() if facet.enabled]
        logger.info(f"Comparing pages: {self.page1.entry_count()} vs {self.page2.entry_count()} entries, "
                    f"{len(enabled)} facets")
        self._report_step(info="Comparing pages", target=len(enabled) + 2, reset_counter=True, plus_step=0)

        entries = self.compare_entries()
        self._report_step(info="Entries compared", plus_step=1)

        results: Dict[str, Any] = {}
        for facet in enabled:
            results[facet.facet_id] = self._run_facet(facet.facet_id)
            self._report_step(info=f"Facet {facet.facet_id} compared", plus_step=1)

        summary = self.get_summary()
        self._report_step(info="Summary complete", plus_step=1)

        report = ComparisonReport(
            entries=entries,
            summary=summary,
            quality=self.quality(),
            people=results.get('people'),
            references=results.get('references'),
            relationships=results.get('relationships'),
            events=results.get('events'),
        )
        logger.info(f"Comparison complete: {len(entries.common)} common entries, "
                    f"average F1 {report.quality.average_f1:.1f}% ({report.quality.verdict})")
        return report

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)
