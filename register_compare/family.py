"""
family.py - Family modeling: two parent slots, ordered children and a marriage event.

Module: register_compare.family
Last updated: 2026-10-18
"""

from typing import Iterable, List, Optional

from .life_event import LifeEvent

FATHER = 'father'
MOTHER = 'mother'
CHILD = 'child'


class Family:
    """Represents a family unit within an entry.

    Attributes:
        father (Optional[int]): Person id of the father (husband), or None.
        mother (Optional[int]): Person id of the mother (wife), or None.
        children (List[int]): Ordered person ids of the children.
        marriage (LifeEvent): The marriage event (may be empty).
    """

    __slots__ = ['father', 'mother', 'children', 'marriage']

    def __init__(self, father: Optional[int] = None, mother: Optional[int] = None,
                 children: Optional[Iterable[int]] = None, marriage: Optional[LifeEvent] = None):
        """Initializes a Family instance.

        Args:
            father (Optional[int]): Father's person id.
            mother (Optional[int]): Mother's person id.
            children (Optional[Iterable[int]]): Children's person ids, duplicates are dropped.
            marriage (Optional[LifeEvent]): Marriage event. Defaults to an empty event.
        """
        self.father : Optional[int] = father
        self.mother : Optional[int] = mother
        self.children : List[int] = []
        for child_id in children or []:
            self.add_child(child_id)
        self.marriage : LifeEvent = marriage if marriage is not None else LifeEvent(what='marriage')

    def __str__(self) -> str:
        """Returns a string summary of the family.

        Returns:
            str: e.g. 'Father: 1, Mother: 2, Children: 2 (3, 4)'.
        """
        parts = []
        if self.father is not None:
            parts.append(f"Father: {self.father}")
        if self.mother is not None:
            parts.append(f"Mother: {self.mother}")
        if self.children:
            parts.append(f"Children: {len(self.children)} ({', '.join(str(c) for c in self.children)})")
        if self.marriage.is_valid():
            parts.append(f"Married: {self.marriage}")
        return ', '.join(parts) if parts else '<Empty Family>'

    def __repr__(self) -> str:
        return f'Family(father={self.father}, mother={self.mother}, children={self.children}, marriage={self.marriage!r})'

    def is_empty(self) -> bool:
        return self.father is None and self.mother is None and not self.children and self.marriage.is_empty()

    def is_valid(self) -> bool:
        return not self.is_empty()

    def has_marriage(self) -> bool:
        """Returns True if a marriage event is recorded."""
        return not self.marriage.is_empty()

    def add_child(self, child_id: int) -> None:
        if child_id not in self.children:
            self.children.append(child_id)

    def remove_child(self, child_id: int) -> None:
        if child_id in self.children:
            self.children.remove(child_id)

    def parents(self) -> List[int]:
        return [p for p in (self.father, self.mother) if p is not None]

    def members(self) -> List[int]:
        """Return the parents followed by the children.

        Returns:
            List[int]: Person ids of all members of the family.
        """
        return self.parents() + [c for c in self.children if c not in (self.father, self.mother)]

    def role_of(self, person_id: int) -> Optional[str]:
        """Return the role of a person in this family.

        Args:
            person_id (int): The person to look up.

        Returns:
            Optional[str]: 'father', 'mother', 'child' or None if not a member.
        """
        if person_id is None:
            return None
        if person_id == self.father:
            return FATHER
        if person_id == self.mother:
            return MOTHER
        if person_id in self.children:
            return CHILD
        return None

    def remap(self, id_map: dict) -> None:
        """Rewrite member ids using an old id -> new id mapping."""
        if self.father is not None:
            self.father = id_map.get(self.father, self.father)
        if self.mother is not None:
            self.mother = id_map.get(self.mother, self.mother)
        self.children = [id_map.get(child_id, child_id) for child_id in self.children]

    def fill_marriage(self, place: str) -> bool:
        """Fill the marriage place if the marriage has an exact date but no place.

        Returns:
            bool: True if the place was filled in.
        """
        return self.marriage.fill_place(place)
