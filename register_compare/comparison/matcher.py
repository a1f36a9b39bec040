"""
Entity matcher: pairs up the people of one entry as read from two pages.

Person ids of the two pages are unrelated, so people are paired purely by
content. Four passes run in order of decreasing confidence; each pass walks
the unmatched people of the first page in ascending id and pairs each one with
the first compatible unmatched person of the second page (ascending id):

    1. exact_name            names equal (case-insensitive)
    2. event_reference       a shared reference, or an equal birth/death event
    3. relationship_similar  same relationship code and similar names
    4. similar_name          similar names

Matching is greedy and 1:1: a matched person is never reconsidered.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from register_compare.entry import Entry
from register_compare.person import Person
from register_compare.relationship import compute_relationships

from .config import ComparisonConfig
from .model import MatchRecord, MatchResult, MatchType, PersonRef

logger = logging.getLogger(__name__)

PairTest = Callable[[int, Person, int, Person], bool]


class EntityMatcher:
    """
    Greedy cascade matcher for the people of one entry.

    Attributes:
        config: Comparison configuration (name threshold, corroborating events)
    """

    def __init__(self, config: Optional[ComparisonConfig] = None):
        self.config = config if config is not None else ComparisonConfig()

    def match(self, people1: Mapping[int, Person], people2: Mapping[int, Person],
              codes1: Optional[Mapping[int, str]] = None,
              codes2: Optional[Mapping[int, str]] = None) -> MatchResult:
        """
        Match two sets of people.

        Args:
            people1: person id -> Person for the first page
            people2: person id -> Person for the second page
            codes1: person id -> relationship code for the first page
            codes2: person id -> relationship code for the second page

        Returns:
            MatchResult with the matches and the unmatched people of both sides
        """
        for people in (people1, people2):
            for person in people.values():
                if not isinstance(person, Person):
                    raise TypeError(f"Expected Person, got {type(person).__name__}")
        codes1 = codes1 or {}
        codes2 = codes2 or {}
        threshold = self.config.name_variation_threshold
        event_types = self.config.corroborating_events

        def exact_name(id1, p1, id2, p2):
            return p1.name.exact_match(p2.name)

        def event_reference(id1, p1, id2, p2):
            if set(p1.references) & set(p2.references):
                return True
            return p1.event_match(p2, event_types)

        def relationship_similar(id1, p1, id2, p2):
            code1 = codes1.get(id1, '')
            return bool(code1) and code1 == codes2.get(id2, '') and p1.name.similar_match(p2.name, threshold)

        def similar_name(id1, p1, id2, p2):
            return p1.name.similar_match(p2.name, threshold)

        passes: List[Tuple[MatchType, PairTest]] = [
            (MatchType.EXACT_NAME, exact_name),
            (MatchType.EVENT_REFERENCE, event_reference),
            (MatchType.RELATIONSHIP_SIMILAR, relationship_similar),
            (MatchType.SIMILAR_NAME, similar_name),
        ]

        remaining1: Dict[int, Person] = {pid: people1[pid] for pid in sorted(people1)}
        remaining2: Dict[int, Person] = {pid: people2[pid] for pid in sorted(people2)}
        result = MatchResult()

        for match_type, test in passes:
            if not remaining1 or not remaining2:
                break
            found = self._run_pass(match_type, test, remaining1, remaining2, result)
            logger.debug(f"Pass {match_type.value}: {found} matches")

        result.unmatched_first = [PersonRef(pid, str(p.name)) for pid, p in remaining1.items()]
        result.unmatched_second = [PersonRef(pid, str(p.name)) for pid, p in remaining2.items()]
        return result

    @staticmethod
    def _run_pass(match_type: MatchType, test: PairTest,
                  remaining1: Dict[int, Person], remaining2: Dict[int, Person],
                  result: MatchResult) -> int:
        found = 0
        for id1 in list(remaining1):
            person1 = remaining1[id1]
            for id2, person2 in remaining2.items():
                if test(id1, person1, id2, person2):
                    result.matches.append(MatchRecord(
                        person1_id=id1,
                        person2_id=id2,
                        person1_name=str(person1.name),
                        person2_name=str(person2.name),
                        match_type=match_type,
                    ))
                    del remaining1[id1]
                    del remaining2[id2]
                    found += 1
                    break
            if not remaining2:
                break
        return found

    def match_entries(self, entry1: Entry, entry2: Entry) -> MatchResult:
        """
        Match the people of the same entry read from two pages.

        Relationship codes are computed here for the relationship_similar pass.
        """
        return self.match(entry1.people, entry2.people,
                          compute_relationships(entry1), compute_relationships(entry2))


def match_people(people1: Mapping[int, Person], people2: Mapping[int, Person],
                 codes1: Optional[Mapping[int, str]] = None,
                 codes2: Optional[Mapping[int, str]] = None,
                 config: Optional[ComparisonConfig] = None) -> MatchResult:
    """Convenience wrapper around EntityMatcher.match()."""
    return EntityMatcher(config).match(people1, people2, codes1, codes2)
