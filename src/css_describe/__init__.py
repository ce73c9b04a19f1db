"""css_describe: human-readable English descriptions of CSS selectors."""
from __future__ import annotations

__version__ = "0.1.0"

from css_describe.config import DescriberConfig
from css_describe.describer import HumanReadableDescriber
from css_describe.errors import DescribeError, EventScriptError, InvalidFragmentError
from css_describe.events import SelectorEvent, describe, event_from_dict, replay
from css_describe.generator import SelectorGenerator
from css_describe.script import load_script, parse_script
from css_describe.tee import RecordingGenerator, SelectorGeneratorTee

__all__ = [
    "DescribeError",
    "DescriberConfig",
    "EventScriptError",
    "HumanReadableDescriber",
    "InvalidFragmentError",
    "RecordingGenerator",
    "SelectorEvent",
    "SelectorGenerator",
    "SelectorGeneratorTee",
    "describe",
    "event_from_dict",
    "load_script",
    "parse_script",
    "replay",
]
