"""Name based identity shared by companies, exchanges and operators."""
from __future__ import annotations

from functools import total_ordering

from .exceptions import InvalidArgumentError


def validate_name(name: object, kind: str) -> str:
    """Return ``name`` unchanged if it can identify an entity of ``kind``."""

    if name is None:
        raise TypeError(f"The {kind} name cannot be None")
    if not isinstance(name, str):
        raise TypeError(f"The {kind} name must be a string, got {type(name).__name__}")
    if not name.strip():
        raise InvalidArgumentError(f"The {kind} name cannot be blank")
    return name


@total_ordering
class NamedEntity:
    """Entity identified by an immutable, non-blank name.

    Two entities are equal when they are of the same kind and carry the same
    name; entities of one kind are ordered lexicographically by name.
    """

    kind = "entity"

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = validate_name(name, self.kind)

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedEntity) or other.kind != self.kind:
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NamedEntity) or other.kind != self.kind:
            return NotImplemented
        return self._name < other._name

    def __hash__(self) -> int:
        return hash((self.kind, self._name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
