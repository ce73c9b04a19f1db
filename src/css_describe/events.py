"""Selector events: one frozen dataclass per SelectorGenerator call.

Events let a walk over a selector be stored, serialized and replayed into any
generator. Each event's ``kind`` is also the name of the generator method it
dispatches to.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable

from css_describe.config import DescriberConfig
from css_describe.describer import HumanReadableDescriber
from css_describe.errors import EventScriptError
from css_describe.generator import SelectorGenerator

__all__ = [
    "EVENT_TYPES",
    "SelectorEvent",
    "Init",
    "OnSelector",
    "Close",
    "Type",
    "Universal",
    "Id",
    "ClassName",
    "AttributeExists",
    "AttributeExact",
    "AttributeIncludes",
    "AttributeDashMatch",
    "AttributePrefixMatch",
    "AttributeSuffixMatch",
    "AttributeSubstring",
    "FirstChild",
    "LastChild",
    "NthChild",
    "OnlyChild",
    "Empty",
    "Child",
    "Descendant",
    "Adjacent",
    "describe",
    "event_from_dict",
    "replay",
]


@dataclass(frozen=True)
class SelectorEvent:
    """Base class for all selector events."""

    kind: ClassVar[str] = ""

    def args(self) -> tuple[Any, ...]:
        """Positional arguments for the generator method, in field order."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    def apply(self, generator: SelectorGenerator) -> None:
        """Invoke the matching method on *generator*."""
        getattr(generator, self.kind)(*self.args())

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **dataclasses.asdict(self)}


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Init(SelectorEvent):
    kind: ClassVar[str] = "init"


@dataclass(frozen=True)
class OnSelector(SelectorEvent):
    kind: ClassVar[str] = "on_selector"


@dataclass(frozen=True)
class Close(SelectorEvent):
    kind: ClassVar[str] = "close"


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Type(SelectorEvent):
    kind: ClassVar[str] = "type"
    name: str


@dataclass(frozen=True)
class Universal(SelectorEvent):
    kind: ClassVar[str] = "universal"


@dataclass(frozen=True)
class Id(SelectorEvent):
    kind: ClassVar[str] = "id"
    value: str


@dataclass(frozen=True)
class ClassName(SelectorEvent):
    kind: ClassVar[str] = "class_name"
    value: str


# ---------------------------------------------------------------------------
# Attribute selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AttributeExists(SelectorEvent):
    kind: ClassVar[str] = "attribute_exists"
    name: str


@dataclass(frozen=True)
class AttributeExact(SelectorEvent):
    kind: ClassVar[str] = "attribute_exact"
    name: str
    value: str


@dataclass(frozen=True)
class AttributeIncludes(SelectorEvent):
    kind: ClassVar[str] = "attribute_includes"
    name: str
    value: str


@dataclass(frozen=True)
class AttributeDashMatch(SelectorEvent):
    kind: ClassVar[str] = "attribute_dash_match"
    name: str
    value: str


@dataclass(frozen=True)
class AttributePrefixMatch(SelectorEvent):
    kind: ClassVar[str] = "attribute_prefix_match"
    name: str
    value: str


@dataclass(frozen=True)
class AttributeSuffixMatch(SelectorEvent):
    kind: ClassVar[str] = "attribute_suffix_match"
    name: str
    value: str


@dataclass(frozen=True)
class AttributeSubstring(SelectorEvent):
    kind: ClassVar[str] = "attribute_substring"
    name: str
    value: str


# ---------------------------------------------------------------------------
# Pseudo-classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FirstChild(SelectorEvent):
    kind: ClassVar[str] = "first_child"


@dataclass(frozen=True)
class LastChild(SelectorEvent):
    kind: ClassVar[str] = "last_child"


@dataclass(frozen=True)
class NthChild(SelectorEvent):
    kind: ClassVar[str] = "nth_child"
    position: int


@dataclass(frozen=True)
class OnlyChild(SelectorEvent):
    kind: ClassVar[str] = "only_child"


@dataclass(frozen=True)
class Empty(SelectorEvent):
    kind: ClassVar[str] = "empty"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Child(SelectorEvent):
    kind: ClassVar[str] = "child"


@dataclass(frozen=True)
class Descendant(SelectorEvent):
    kind: ClassVar[str] = "descendant"


@dataclass(frozen=True)
class Adjacent(SelectorEvent):
    kind: ClassVar[str] = "adjacent"


EVENT_TYPES: dict[str, type[SelectorEvent]] = {
    cls.kind: cls
    for cls in (
        Init, OnSelector, Close,
        Type, Universal, Id, ClassName,
        AttributeExists, AttributeExact, AttributeIncludes, AttributeDashMatch,
        AttributePrefixMatch, AttributeSuffixMatch, AttributeSubstring,
        FirstChild, LastChild, NthChild, OnlyChild, Empty,
        Child, Descendant, Adjacent,
    )
}


def _check_arg(kind: str, name: str, expected: type, value: object, index: int | None) -> None:
    # bool is an int subclass; reject it for nth_child positions.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise EventScriptError(
            f"{kind}.{name} must be {expected.__name__}, got {type(value).__name__}",
            index=index,
        )


def event_from_dict(data: dict[str, Any], index: int | None = None) -> SelectorEvent:
    """Build an event from ``{"kind": ..., <args>}``."""
    if not isinstance(data, dict):
        raise EventScriptError(f"expected an object, got {type(data).__name__}", index=index)
    kind = data.get("kind")
    cls = EVENT_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise EventScriptError(f"unknown event kind {kind!r}", index=index)

    fields = {f.name: f.type for f in dataclasses.fields(cls)}
    given = {k: v for k, v in data.items() if k != "kind"}
    missing = sorted(set(fields) - set(given))
    extra = sorted(set(given) - set(fields))
    if missing:
        raise EventScriptError(f"{kind} is missing {', '.join(missing)}", index=index)
    if extra:
        raise EventScriptError(f"{kind} does not take {', '.join(extra)}", index=index)
    for name, annotation in fields.items():
        # Annotations are strings under postponed evaluation.
        _check_arg(kind, name, int if annotation == "int" else str, given[name], index)
    return cls(**given)


def replay(
    events: Iterable[SelectorEvent],
    generator: SelectorGenerator,
    logger: logging.Logger | None = None,
) -> SelectorGenerator:
    """Dispatch *events* to *generator* in order and return the generator.

    Logs to *logger*, or to the default ``DescriberConfig.logger_name``.
    """
    log = logger or logging.getLogger(DescriberConfig.logger_name)
    for event in events:
        log.debug("dispatch %s%r", event.kind, event.args())
        event.apply(generator)
    return generator


def describe(events: Iterable[SelectorEvent], config: DescriberConfig | None = None) -> str:
    """Describe a sequence of events with a fresh HumanReadableDescriber.

    ``init`` and ``close`` are supplied when the sequence does not start or
    end with them, so ``describe([OnSelector(), Type("a")])`` is enough.
    """
    config = config or DescriberConfig()
    events = list(events)
    describer = HumanReadableDescriber(config)
    if not events or not isinstance(events[0], Init):
        describer.init()
    replay(events, describer, logging.getLogger(config.logger_name))
    if not events or not isinstance(events[-1], Close):
        describer.close()
    return describer.text
