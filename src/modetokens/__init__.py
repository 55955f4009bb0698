"""
modetokens - Figma color variables to shadcn/Tailwind v4 OKLCH stylesheets.

Finds the "Mode" collection of a design file, resolves every ``base/``
color variable for its Light and Dark modes (following aliases across
collections) and renders the result as a ``globals.css``.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import ConfigurationError, HostQueryError, ModeTokensError, NoDataError
from .core.exporter import export_stylesheet, export_variables
from .core.oklch import hex_to_oklch

__version__ = get_version()

__all__ = [
    "__version__",
    "ModeTokensError",
    "ConfigurationError",
    "NoDataError",
    "HostQueryError",
    "export_stylesheet",
    "export_variables",
    "hex_to_oklch",
]
