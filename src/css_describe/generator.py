"""SelectorGenerator protocol: the callback contract driven by a selector walker.

A walker over a parsed CSS3 selector group calls ``init`` once, then for each
comma-separated selector ``on_selector`` followed by one call per simple
selector, attribute selector, pseudo-class and combinator, and finally
``close``. See https://www.w3.org/TR/css3-selectors/ for the constructs.
"""

from __future__ import annotations

from typing import Protocol


class SelectorGenerator(Protocol):
    """Receives selector grammar events in traversal order."""

    # --- lifecycle -------------------------------------------------------------

    def init(self) -> None: ...

    def on_selector(self) -> None: ...

    def close(self) -> None: ...

    # --- simple selectors ------------------------------------------------------

    def type(self, name: str) -> None: ...

    def universal(self) -> None: ...

    def id(self, value: str) -> None: ...

    def class_name(self, value: str) -> None: ...

    # --- attribute selectors ---------------------------------------------------

    def attribute_exists(self, name: str) -> None: ...

    def attribute_exact(self, name: str, value: str) -> None: ...

    def attribute_includes(self, name: str, value: str) -> None: ...

    def attribute_dash_match(self, name: str, value: str) -> None: ...

    def attribute_prefix_match(self, name: str, value: str) -> None: ...

    def attribute_suffix_match(self, name: str, value: str) -> None: ...

    def attribute_substring(self, name: str, value: str) -> None: ...

    # --- pseudo-classes --------------------------------------------------------

    def first_child(self) -> None: ...

    def last_child(self) -> None: ...

    def nth_child(self, position: int) -> None: ...

    def only_child(self) -> None: ...

    def empty(self) -> None: ...

    # --- combinators -----------------------------------------------------------

    def child(self) -> None: ...

    def descendant(self) -> None: ...

    def adjacent(self) -> None: ...
