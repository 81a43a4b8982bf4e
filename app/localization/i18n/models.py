"""Translation models for the i18n system.

Decoded documents are converted into a closed recursive value type
(``TextNode`` or ``MapNode``) before being flattened into the
per-language catalogs of a ``TranslationTable``.
"""

import datetime
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple, Union


@dataclass(frozen=True)
class TextNode:
    """A leaf value, already converted to its display text."""

    text: str


@dataclass(frozen=True)
class MapNode:
    """A nested mapping of key to value.

    Attributes:
        children: Child values by key, in document order.
    """

    children: Mapping[str, "Value"] = field(default_factory=dict)


Value = Union[TextNode, MapNode]


def format_scalar(value: Any) -> str:
    """Convert a scalar to the text stored in (or substituted into) a message.

    Rules:
        - str is returned unchanged
        - bool becomes "true" / "false"
        - None becomes ""
        - dates and times use ISO 8601
        - anything else goes through str()
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def to_value(raw: Any, _path: Optional[Set[int]] = None) -> Value:
    """Convert a decoded JSON/YAML/TOML tree into a ``Value``.

    Mappings become ``MapNode`` with stringified keys. Lists and tuples
    become ``MapNode`` keyed by element index ("0", "1", ...). Every other
    value becomes a ``TextNode`` via ``format_scalar``.

    Raises:
        ValueError: If a container contains itself (YAML self-referencing
            aliases).
    """
    if not isinstance(raw, (Mapping, list, tuple)):
        return TextNode(text=format_scalar(raw))

    path = set() if _path is None else _path
    if id(raw) in path:
        raise ValueError("document contains a cyclic reference")
    path.add(id(raw))
    try:
        if isinstance(raw, Mapping):
            items = ((format_scalar(k), v) for k, v in raw.items())
        else:
            items = ((str(i), v) for i, v in enumerate(raw))
        return MapNode(children={key: to_value(v, path) for key, v in items})
    finally:
        path.discard(id(raw))


def join_key(prefix: str, key: str) -> str:
    """Join a dotted prefix and a key segment."""
    return f"{prefix}.{key}" if prefix else key


def flatten(value: Value, prefix: str = "") -> Iterator[Tuple[str, str]]:
    """Yield ``(dotted_key, text)`` for every leaf under ``value``.

    Every ``TextNode`` yields exactly one entry. ``MapNode`` values are
    descended into and never yielded themselves, so an empty map yields
    nothing. Walks with an explicit stack, in document order.
    """
    if isinstance(value, TextNode):
        yield prefix, value.text
        return
    stack = [(prefix, iter(value.children.items()))]
    while stack:
        base, children = stack[-1]
        for key, child in children:
            dotted = join_key(base, key)
            if isinstance(child, TextNode):
                yield dotted, child.text
            else:
                stack.append((dotted, iter(child.children.items())))
                break
        else:
            stack.pop()


@dataclass(frozen=True)
class TranslationTable:
    """Read-only mapping of language code to its flat catalog.

    Attributes:
        catalogs: {language: {dotted_key: text}}, both levels read-only.
    """

    catalogs: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dict(cls, catalogs: Dict[str, Dict[str, str]]) -> "TranslationTable":
        """Freeze a freshly built dict of catalogs.

        The dictionaries are copied, so later changes to ``catalogs`` do not
        leak into the table.
        """
        frozen = {
            language: MappingProxyType(dict(messages))
            for language, messages in catalogs.items()
        }
        return cls(catalogs=MappingProxyType(frozen))

    @classmethod
    def empty(cls) -> "TranslationTable":
        return cls()

    def get_message(self, language: str, key: str) -> Optional[str]:
        """Return the stored text for ``key`` in ``language``, or None."""
        catalog = self.catalogs.get(language)
        if catalog is None:
            return None
        return catalog.get(key)

    def get_catalog(self, language: str) -> Optional[Mapping[str, str]]:
        return self.catalogs.get(language)

    @property
    def languages(self) -> List[str]:
        """Sorted language codes present in the table."""
        return sorted(self.catalogs)

    @property
    def message_count(self) -> int:
        """Total number of entries across all languages."""
        return sum(len(messages) for messages in self.catalogs.values())
