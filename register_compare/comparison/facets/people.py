"""
People facet.

Reports how the people of each common entry were matched: counts per match
type, the matched pairs and the people left unmatched on either side.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

from register_compare.comparison.base import ComparisonFacet, EntryContext, register_facet
from register_compare.comparison.model import PeopleEntryDetail, PeopleResult

logger = logging.getLogger(__name__)


@register_facet
@dataclass
class PeopleFacet(ComparisonFacet):
    """Match quality per entry; unmatched people are this facet's errors."""
    facet_id: str = "people"

    def analyze(self, contexts: List[EntryContext]) -> PeopleResult:
        result = PeopleResult(facet_id=self.facet_id, entries_compared=len(contexts))
        for context in contexts:
            result.details.append(PeopleEntryDetail(
                entry_id=context.entry_id,
                people1_count=len(context.entry1.people),
                people2_count=len(context.entry2.people),
                result=context.match_result,
            ))
        logger.debug(f"People facet: {result.total_matches} matches, precision rate {result.precision_rate:.1f}%")
        return result
