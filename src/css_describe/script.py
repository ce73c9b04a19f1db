"""Event scripts: JSON documents holding a recorded selector walk.

Two shapes are accepted::

    [{"kind": "on_selector"}, {"kind": "type", "name": "div"}]

    {"events": [{"kind": "on_selector"}, {"kind": "id", "value": "main"}]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from css_describe.errors import EventScriptError
from css_describe.events import SelectorEvent, event_from_dict

__all__ = ["dump_script", "load_script", "parse_script"]


def parse_script(source: str) -> list[SelectorEvent]:
    """Parse an event script from a JSON string."""
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise EventScriptError(f"invalid JSON: {exc}") from exc

    if isinstance(data, dict):
        if "events" not in data:
            raise EventScriptError("script object has no 'events' list")
        data = data["events"]
    if not isinstance(data, list):
        raise EventScriptError(f"expected a list of events, got {type(data).__name__}")

    return [event_from_dict(item, index=i) for i, item in enumerate(data)]


def load_script(path: str | Path) -> list[SelectorEvent]:
    """Read and parse an event script file."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EventScriptError(f"cannot read {path}: {exc}") from exc
    return parse_script(source)


def dump_script(events: Iterable[SelectorEvent]) -> str:
    """Serialize events to the list form of an event script."""
    return json.dumps([e.to_dict() for e in events], indent=2)
