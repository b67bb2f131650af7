"""
tagparse Models
===============

Result types of a parse: ``Tag`` and its ``Attributes``.

The container backing ``Attributes`` comes from a mapping strategy, a
zero-argument factory returning a mutable mapping. Strategies only change
how keys are stored; two ``Attributes`` with the same pairs are equal
whatever strategy built them.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    Tuple,
)

MappingFactory = Callable[[], MutableMapping[str, str]]

MAPPING_STRATEGIES: Dict[str, MappingFactory] = {
    "dict": dict,
    "ordered": OrderedDict,
}


def get_mapping_strategy(name: str) -> MappingFactory:
    """
    Look up a mapping strategy by name.

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        return MAPPING_STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(MAPPING_STRATEGIES))
        raise ValueError(
            f"Unknown mapping strategy {name!r} (expected one of: {known})"
        ) from None


class Attributes(Mapping[str, str]):
    """
    Read-only mapping of attribute keys to values.

    Later pairs overwrite earlier pairs with the same key. Iteration order
    is not part of the contract.
    """

    __slots__ = ("_kvs",)

    def __init__(
        self,
        pairs: Iterable[Tuple[str, str]] = (),
        mapping_factory: MappingFactory = dict,
    ) -> None:
        kvs = mapping_factory()
        for key, value in pairs:
            kvs[key] = value
        self._kvs = kvs

    def __getitem__(self, key: str) -> str:
        return self._kvs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._kvs)

    def __len__(self) -> int:
        return len(self._kvs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self._kvs.items()) == dict(other.items())

    def __hash__(self) -> int:
        return hash(frozenset(self._kvs.items()))

    def __repr__(self) -> str:
        return f"Attributes({dict(self._kvs)!r})"

    def to_dict(self) -> Dict[str, str]:
        """Copy into a plain dict."""
        return dict(self._kvs)


@dataclass(frozen=True)
class Tag:
    """
    A parsed open tag, like ``<a href="example.com" >``.

    ``line`` and ``column`` locate the opening '<' and are not compared.
    """
    name: str
    attributes: Attributes = field(default_factory=Attributes)
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def render(self) -> str:
        """Write the tag back out in the accepted syntax."""
        pairs = ", ".join(f'{k}="{v}"' for k, v in self.attributes.items())
        return f"<{self.name} {pairs}>"

    def to_dict(self) -> Dict[str, Any]:
        """Convert tag to dictionary representation."""
        return {
            "name": self.name,
            "attributes": self.attributes.to_dict(),
            "line": self.line,
            "column": self.column,
        }
