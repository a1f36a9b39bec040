"""
Events facet.

Compares the life events of matched people. An event recorded on one page
only is a recall error; an event recorded on both pages with a different date
and/or place is a precision error. Marriages are counted over the families a
person heads: different counts are a recall error, equal counts are compared
pairwise in family id order.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional

from register_compare.comparison.base import ComparisonFacet, EntryContext, register_facet
from register_compare.comparison.model import (
    EntryDetail, EventPrecisionError, EventRecallError, FacetResult, MatchRecord
)
from register_compare.entry import Entry
from register_compare.life_event import LifeEvent

logger = logging.getLogger(__name__)

MARRIAGE = 'marriage'


def _marriages(entry: Entry, person_id: int) -> List[LifeEvent]:
    """Recorded marriage events of the families in which the person is a parent."""
    return [
        entry.families[family_id].marriage
        for family_id in sorted(entry.families)
        if person_id in entry.families[family_id].parents()
        and entry.families[family_id].has_marriage()
    ]


@register_facet
@dataclass
class EventsFacet(ComparisonFacet):
    """Life event recall and precision per matched pair."""
    facet_id: str = "events"

    def analyze(self, contexts: List[EntryContext]) -> FacetResult:
        result = FacetResult(facet_id=self.facet_id, entries_compared=len(contexts))
        for context in contexts:
            detail = EntryDetail(entry_id=context.entry_id, matches=list(context.matches))
            for match in context.matches:
                self._compare_person_events(context, match, detail)
                if self.config.compare_marriages:
                    self._compare_marriages(context, match, detail)
            result.total_matches += len(context.matches)
            result.details.append(detail)
        logger.debug(f"Events facet: {result.recall_errors} recall, {result.precision_errors} precision errors")
        return result

    def _compare_person_events(self, context: EntryContext, match: MatchRecord, detail: EntryDetail) -> None:
        person1, person2 = context.pair(match)
        for event_type in self.config.event_types:
            event1 = person1.get_event(event_type)
            event2 = person2.get_event(event_type)
            self._compare_events(event_type, event1, event2, match, detail)

    def _compare_events(self, event_type: str, event1: LifeEvent, event2: LifeEvent,
                        match: MatchRecord, detail: EntryDetail, family_index: Optional[int] = None) -> None:
        present1 = not event1.is_empty()
        present2 = not event2.is_empty()
        if present1 != present2:
            detail.recall_errors.append(EventRecallError(
                person1_id=match.person1_id,
                person2_id=match.person2_id,
                person1_name=match.person1_name,
                person2_name=match.person2_name,
                event_type=event_type,
                missing_in='second' if present1 else 'first',
                event1=str(event1) if present1 else None,
                event2=str(event2) if present2 else None,
            ))
        elif present1:
            dates_differ, places_differ = event1.differences(event2)
            if dates_differ or places_differ:
                detail.precision_errors.append(EventPrecisionError(
                    person1_id=match.person1_id,
                    person2_id=match.person2_id,
                    person1_name=match.person1_name,
                    person2_name=match.person2_name,
                    event_type=event_type,
                    event1=str(event1),
                    event2=str(event2),
                    dates_differ=dates_differ,
                    places_differ=places_differ,
                    family_index=family_index,
                ))

    def _compare_marriages(self, context: EntryContext, match: MatchRecord, detail: EntryDetail) -> None:
        marriages1 = _marriages(context.entry1, match.person1_id)
        marriages2 = _marriages(context.entry2, match.person2_id)
        if len(marriages1) != len(marriages2):
            detail.recall_errors.append(EventRecallError(
                person1_id=match.person1_id,
                person2_id=match.person2_id,
                person1_name=match.person1_name,
                person2_name=match.person2_name,
                event_type=MARRIAGE,
                missing_in='second' if len(marriages1) > len(marriages2) else 'first',
                families1_count=len(marriages1),
                families2_count=len(marriages2),
            ))
            return
        for index, (marriage1, marriage2) in enumerate(zip(marriages1, marriages2)):
            self._compare_events(MARRIAGE, marriage1, marriage2, match, detail, family_index=index)
