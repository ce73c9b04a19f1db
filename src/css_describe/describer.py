"""HumanReadableDescriber: turns selector grammar events into an English sentence."""

from __future__ import annotations

from css_describe.config import DescriberConfig
from css_describe.errors import InvalidFragmentError

__all__ = ["HumanReadableDescriber"]

_DASH_MATCH_TEMPLATE = " which have a {0} attribute with a hyphen separated value matching '{1}'"


def _require_name(value: str | None, field: str) -> str:
    if not value:
        raise InvalidFragmentError(field)
    return value


def _require_value(value: str | None, field: str) -> str:
    # Attribute values may be empty ([lang=""]) but must be present.
    if value is None:
        raise InvalidFragmentError(field, f"{field} must not be None")
    return value


class HumanReadableDescriber:
    """SelectorGenerator that accumulates a human-readable selector description.

    Usage::

        d = HumanReadableDescriber()
        d.init()
        d.on_selector()
        d.type("div")
        d.id("x")
        d.close()
        d.text  # "Select all nodes with the <div> tag with an id of 'x'."

    The instance is reusable: ``init()`` clears the text and the descendant
    chain counter. Call order is not checked; a caller that skips ``init`` or
    calls ``close`` twice gets a malformed description, not an error.
    """

    def __init__(self, config: DescriberConfig | None = None) -> None:
        self.config = config or DescriberConfig()
        self._text = ""
        self._chain_count = 0

    @property
    def text(self) -> str:
        """The description so far; final once ``close()`` has been called."""
        return self._text

    def add(self, fragment: str | None) -> None:
        """Append *fragment* to the description."""
        if fragment is None:
            raise InvalidFragmentError("fragment", "fragment must not be None")
        self._text += fragment

    # --- lifecycle -------------------------------------------------------------

    def init(self) -> None:
        self._text = ""
        self._chain_count = 0

    def on_selector(self) -> None:
        if not self._text:
            self._text = "Select all nodes"
        else:
            self.add(", then combined with previous, select all nodes")

    def close(self) -> None:
        self._text = self._text.strip() + "."

    # --- simple selectors ------------------------------------------------------

    def type(self, name: str) -> None:
        self.add(f" with the <{_require_name(name, 'name')}> tag")

    def universal(self) -> None:
        self.add("")

    def id(self, value: str) -> None:
        self.add(f" with an id of '{_require_name(value, 'id')}'")

    def class_name(self, value: str) -> None:
        self.add(" with class name " + _require_name(value, "class_name"))

    # --- attribute selectors ---------------------------------------------------

    def attribute_exists(self, name: str) -> None:
        self.add(f" which have a {_require_name(name, 'name')} attribute")

    def attribute_exact(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        self.add(f" which have a {name} attribute with a value of '{value}'")

    def attribute_includes(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        self.add(f" which have a {name} attribute which includes the value '{value}'")

    def attribute_dash_match(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        if self.config.legacy_dash_match:
            self.add(_DASH_MATCH_TEMPLATE)
        else:
            self.add(_DASH_MATCH_TEMPLATE.format(name, value))

    def attribute_prefix_match(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        self.add(f" which have a {name} attribute whose value begins with '{value}'")

    def attribute_suffix_match(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        self.add(f" which have a {name} attribute whose value ends with '{value}'")

    def attribute_substring(self, name: str, value: str) -> None:
        name, value = _require_name(name, "name"), _require_value(value, "value")
        self.add(f" which have a {name} attribute whose value contains '{value}'")

    # --- pseudo-classes --------------------------------------------------------

    def first_child(self) -> None:
        self.add(" where the node is the first child")

    def last_child(self) -> None:
        self.add(" where the node is the last child")

    def nth_child(self, position: int) -> None:
        # No ordinal suffix correction: 1th, 2th, 3th.
        self.add(f" where the node is the {position}th child")

    def only_child(self) -> None:
        self.add(" where the node is the only child")

    def empty(self) -> None:
        self.add(" where the node is empty")

    # --- combinators -----------------------------------------------------------

    def child(self) -> None:
        self.add(" child of")

    def descendant(self) -> None:
        if self._chain_count > 0:
            self.add(", which in turn have descendants")
        else:
            self.add(" which have descendants")
            self._chain_count += 1

    def adjacent(self) -> None:
        self.add(" which is immediately preceeded by a sibling node")
