"""Person value object and its mutable PersonBuilder.

``PersonBuilder.build()`` hands the new ``Person`` its own copy of the
friends list.  The builder can keep changing afterwards; already-built
people never see it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from viewguard.core.readonly_view import ReadOnlyList

logger = logging.getLogger(__name__)


class Person(BaseModel):
    """An immutable person with a name and a fixed list of friends.

    ``friends`` is stored as a tuple copied at construction time, so a list
    passed in by the caller can be mutated freely without affecting the
    person.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    friends: tuple[str, ...] = ()

    @field_validator("friends", mode="before")
    @classmethod
    def _copy_friends(cls, value: Any) -> Any:
        if isinstance(value, str) or not isinstance(value, Iterable):
            return value
        return tuple(value)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Person:
        """Copy the person, re-validating any updated fields.

        Updates go through the same defensive copy as the constructor.
        """
        if update:
            return type(self).model_validate({**self.model_dump(), **update})
        return super().model_copy(deep=deep)

    @classmethod
    def builder(cls) -> PersonBuilder:
        """Start a new, empty builder."""
        return PersonBuilder()

    def __str__(self) -> str:
        return f"Person(name={self.name}, friends=[{', '.join(self.friends)}])"


class PersonBuilder:
    """Mutable accumulator for ``Person`` state.

    Every setter returns the builder so calls can be chained::

        person = PersonBuilder().set_name("Ada").add_friend("Charles").build()
    """

    def __init__(self) -> None:
        self._name = ""
        self._friends: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def friends(self) -> ReadOnlyList:
        """Live read-only view of the friends added so far."""
        return ReadOnlyList(self._friends)

    def set_name(self, name: str) -> PersonBuilder:
        self._name = name
        return self

    def add_friend(self, friend: str) -> PersonBuilder:
        self._friends.append(friend)
        return self

    def add_friends(self, *friends: str) -> PersonBuilder:
        self._friends.extend(friends)
        return self

    def build(self) -> Person:
        """Build a ``Person`` from a snapshot of the current state."""
        person = Person(name=self._name, friends=tuple(self._friends))
        logger.debug("Built %s with %d friends", person.name or "<unnamed>", len(person.friends))
        return person

    def __repr__(self) -> str:
        return f"PersonBuilder(name={self._name!r}, friends={self._friends!r})"
