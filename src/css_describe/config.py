"""Describer configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DescriberConfig:
    """Options for HumanReadableDescriber and describe().

    ``logger_name`` names the logger describe() dispatches through; callers
    of replay() pass their own logger or get the default name.
    """

    legacy_dash_match: bool = False  # append the |= template uninterpolated
    logger_name: str = "css_describe"
