"""
relationship.py - Relationship codes for people within an entry.

A relationship code describes where a person sits in an entry's family forest.
Each connected group of people is numbered 0, 1, 2, ... in order of its
smallest person id; that person is the trunk and gets the bare number. Every
other person gets the trunk number followed by one letter per step of the
shortest path from the trunk:

    W  wife of a father        H  husband of a mother
    C  child of a parent       S  sibling of a child
    F  father of a child       M  mother of a child

So a father is '0', his wife '0W', their children '0C', the wife's father '0WF'.
The letters do not depend on how people are numbered, which makes them usable
as a structural fingerprint when comparing independently parsed entries.

Module: register_compare.relationship
Last updated: 2026-10-18
"""

__all__ = ['compute_relationships', 'relationship', 'relationship_letters']

from collections import defaultdict, deque
import logging
import re
from typing import TYPE_CHECKING, Dict, List, Optional

from .family import CHILD, FATHER, MOTHER

if TYPE_CHECKING:
    from .entry import Entry

logger = logging.getLogger(__name__)

LEADING_DIGITS_RE = re.compile(r'^\d+')


def _memberships(entry: "Entry") -> Dict[int, List[int]]:
    """
    Map each person id to the ids of the families they belong to, in ascending family id.
    """
    memberships: Dict[int, List[int]] = defaultdict(list)
    for family_id in sorted(entry.families):
        family = entry.families[family_id]
        for person_id in family.members():
            if person_id in entry.people:
                memberships[person_id].append(family_id)
            else:
                logger.debug(f"Entry {entry.id}: family {family_id} refers to unknown person {person_id}")
    return memberships


def compute_relationships(entry: "Entry") -> Dict[int, str]:
    """
    Compute the relationship code of every person in an entry.

    Pure function of the entry's people and families: call it again after
    changing the entry to get updated codes.

    Args:
        entry (Entry): The entry to analyze.

    Returns:
        Dict[int, str]: person id -> relationship code.
    """
    memberships = _memberships(entry)
    codes: Dict[int, str] = {}
    tree_number = 0

    for trunk_id in sorted(entry.people):
        if trunk_id in codes:
            continue
        codes[trunk_id] = str(tree_number)
        queue = deque([trunk_id])
        while queue:
            current_id = queue.popleft()
            current_code = codes[current_id]
            for family_id in memberships.get(current_id, []):
                family = entry.families[family_id]
                for relative_id, letter in _family_steps(family, current_id):
                    if relative_id in entry.people and relative_id not in codes:
                        codes[relative_id] = current_code + letter
                        queue.append(relative_id)
        tree_number += 1

    logger.debug(f"Entry {entry.id}: {len(codes)} relationship codes in {tree_number} trees")
    return codes


def _family_steps(family, person_id: int):
    """
    Yield (relative id, letter) for the family members reachable from person_id.
    """
    role = family.role_of(person_id)
    if role == FATHER:
        if family.mother is not None:
            yield family.mother, 'W'
        for child_id in family.children:
            yield child_id, 'C'
    elif role == MOTHER:
        if family.father is not None:
            yield family.father, 'H'
        for child_id in family.children:
            yield child_id, 'C'
    elif role == CHILD:
        if family.father is not None:
            yield family.father, 'F'
        if family.mother is not None:
            yield family.mother, 'M'
        for sibling_id in family.children:
            if sibling_id != person_id:
                yield sibling_id, 'S'


def relationship(entry: "Entry", person_id: Optional[int]) -> str:
    """
    Return the relationship code for one person of an entry.

    Args:
        entry (Entry): The entry containing the person.
        person_id (int): The person's id.

    Returns:
        str: The code, or '' if the id is not an integer or not in the entry.
    """
    if not isinstance(person_id, int) or isinstance(person_id, bool) or person_id not in entry.people:
        return ''
    return compute_relationships(entry).get(person_id, '')


def relationship_letters(code: Optional[str]) -> str:
    """
    Strip the numeric tree prefix from a relationship code ('3WC' -> 'WC').
    """
    if not code:
        return ''
    return LEADING_DIGITS_RE.sub('', code)
