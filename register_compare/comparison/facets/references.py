"""
References facet.

Compares the cross-reference strings of matched people, treated as sets.
A pair has a recall error when the first page lists more references than the
second, and a precision error whenever either side has references the other
lacks.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

from register_compare.comparison.base import ComparisonFacet, EntryContext, register_facet
from register_compare.comparison.model import (
    EntryDetail, FacetResult, ReferencePrecisionError, ReferenceRecallError
)

logger = logging.getLogger(__name__)


def _difference(first: List[str], second: List[str]) -> List[str]:
    """Elements of first missing from second, in first's order without duplicates."""
    seen = set(second)
    result = []
    for item in first:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


@register_facet
@dataclass
class ReferencesFacet(ComparisonFacet):
    """Cross-reference recall and precision per matched pair."""
    facet_id: str = "references"

    def analyze(self, contexts: List[EntryContext]) -> FacetResult:
        result = FacetResult(facet_id=self.facet_id, entries_compared=len(contexts))
        for context in contexts:
            detail = EntryDetail(entry_id=context.entry_id, matches=list(context.matches))
            for match in context.matches:
                person1, person2 = context.pair(match)
                refs1 = list(dict.fromkeys(person1.references))
                refs2 = list(dict.fromkeys(person2.references))
                only1 = _difference(refs1, refs2)
                only2 = _difference(refs2, refs1)

                if len(refs1) > len(refs2):
                    detail.recall_errors.append(ReferenceRecallError(
                        person1_id=match.person1_id,
                        person2_id=match.person2_id,
                        person1_name=match.person1_name,
                        person2_name=match.person2_name,
                        person1_references=refs1,
                        person2_references=refs2,
                        missing_references=only1,
                        expected_count=len(refs1),
                        actual_count=len(refs2),
                    ))
                if only1 or only2:
                    detail.precision_errors.append(ReferencePrecisionError(
                        person1_id=match.person1_id,
                        person2_id=match.person2_id,
                        person1_name=match.person1_name,
                        person2_name=match.person2_name,
                        person1_references=refs1,
                        person2_references=refs2,
                        different_references1=only1,
                        different_references2=only2,
                    ))
            result.total_matches += len(context.matches)
            result.details.append(detail)
        logger.debug(f"References facet: {result.recall_errors} recall, {result.precision_errors} precision errors")
        return result
