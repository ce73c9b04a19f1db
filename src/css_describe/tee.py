"""Generators that wrap other generators: broadcasting and recording."""

from __future__ import annotations

from css_describe import events as ev
from css_describe.generator import SelectorGenerator


class _EventForwarder:
    """Turns each SelectorGenerator call into an event passed to _forward."""

    def _forward(self, event: ev.SelectorEvent) -> None:
        raise NotImplementedError

    def init(self) -> None:
        self._forward(ev.Init())

    def on_selector(self) -> None:
        self._forward(ev.OnSelector())

    def close(self) -> None:
        self._forward(ev.Close())

    def type(self, name: str) -> None:
        self._forward(ev.Type(name))

    def universal(self) -> None:
        self._forward(ev.Universal())

    def id(self, value: str) -> None:
        self._forward(ev.Id(value))

    def class_name(self, value: str) -> None:
        self._forward(ev.ClassName(value))

    def attribute_exists(self, name: str) -> None:
        self._forward(ev.AttributeExists(name))

    def attribute_exact(self, name: str, value: str) -> None:
        self._forward(ev.AttributeExact(name, value))

    def attribute_includes(self, name: str, value: str) -> None:
        self._forward(ev.AttributeIncludes(name, value))

    def attribute_dash_match(self, name: str, value: str) -> None:
        self._forward(ev.AttributeDashMatch(name, value))

    def attribute_prefix_match(self, name: str, value: str) -> None:
        self._forward(ev.AttributePrefixMatch(name, value))

    def attribute_suffix_match(self, name: str, value: str) -> None:
        self._forward(ev.AttributeSuffixMatch(name, value))

    def attribute_substring(self, name: str, value: str) -> None:
        self._forward(ev.AttributeSubstring(name, value))

    def first_child(self) -> None:
        self._forward(ev.FirstChild())

    def last_child(self) -> None:
        self._forward(ev.LastChild())

    def nth_child(self, position: int) -> None:
        self._forward(ev.NthChild(position))

    def only_child(self) -> None:
        self._forward(ev.OnlyChild())

    def empty(self) -> None:
        self._forward(ev.Empty())

    def child(self) -> None:
        self._forward(ev.Child())

    def descendant(self) -> None:
        self._forward(ev.Descendant())

    def adjacent(self) -> None:
        self._forward(ev.Adjacent())


class SelectorGeneratorTee(_EventForwarder):
    """Forward every call to two generators, primary first.

    Lets one walk over a selector feed, for example, a matcher compiler and a
    HumanReadableDescriber at the same time.
    """

    def __init__(self, primary: SelectorGenerator, secondary: SelectorGenerator) -> None:
        if primary is None:
            raise TypeError("primary generator is required")
        if secondary is None:
            raise TypeError("secondary generator is required")
        self.primary = primary
        self.secondary = secondary

    def _forward(self, event: ev.SelectorEvent) -> None:
        event.apply(self.primary)
        event.apply(self.secondary)


class RecordingGenerator(_EventForwarder):
    """Generator that records every call as a SelectorEvent.

    Wraps an optional inner generator; each call is forwarded to the inner
    generator, if any, and recorded once it returns.
    """

    def __init__(self, inner: SelectorGenerator | None = None) -> None:
        self._inner = inner
        self._records: list[ev.SelectorEvent] = []

    def _forward(self, event: ev.SelectorEvent) -> None:
        if self._inner is not None:
            event.apply(self._inner)
        self._records.append(event)

    @property
    def events(self) -> list[ev.SelectorEvent]:
        return self._records

    def transcript(self) -> list[ev.SelectorEvent]:
        """Return a copy of all recorded events."""
        return list(self._records)

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
