"""
Relationships facet.

Compares the relationship codes of matched people. Tree numbers are arbitrary
on each page, so only the letters after the number have to agree.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

from register_compare.comparison.base import ComparisonFacet, EntryContext, register_facet
from register_compare.comparison.model import EntryDetail, FacetResult, RelationshipError
from register_compare.relationship import relationship_letters

logger = logging.getLogger(__name__)


@register_facet
@dataclass
class RelationshipsFacet(ComparisonFacet):
    """Relationship code agreement per matched pair."""
    facet_id: str = "relationships"

    def analyze(self, contexts: List[EntryContext]) -> FacetResult:
        result = FacetResult(facet_id=self.facet_id, entries_compared=len(contexts))
        for context in contexts:
            detail = EntryDetail(entry_id=context.entry_id, matches=list(context.matches))
            for match in context.matches:
                code1 = context.codes1.get(match.person1_id, '')
                code2 = context.codes2.get(match.person2_id, '')
                letters1 = relationship_letters(code1)
                letters2 = relationship_letters(code2)
                if letters1 != letters2:
                    detail.recall_errors.append(RelationshipError(
                        person1_id=match.person1_id,
                        person2_id=match.person2_id,
                        person1_name=match.person1_name,
                        person2_name=match.person2_name,
                        relationship1=code1,
                        relationship2=code2,
                        letters1=letters1,
                        letters2=letters2,
                        match_type=match.match_type,
                    ))
            result.total_matches += len(context.matches)
            result.details.append(detail)
        logger.debug(f"Relationships facet: {result.recall_errors} mismatches in {result.total_matches} matches")
        return result
