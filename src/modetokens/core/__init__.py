"""
Core export engine: color conversion, alias resolution, selection and rendering.
"""

from .config import ExportConfig, FigmaConfig, load_config
from .errors import ConfigurationError, HostQueryError, ModeTokensError, NoDataError
from .events import EventCollector, EventKind, EventSink, ExportEvent, logging_sink
from .exporter import export_stylesheet, export_variables
from .host import HostStore, SnapshotStore
from .ir import (
    AliasValue,
    Collection,
    ExportResult,
    HexValue,
    Mode,
    ResolvedVariable,
    RGBValue,
    UnrecognizedValue,
    Variable,
    parse_color_value,
)
from .messages import PluginSession, run_export
from .oklch import hex_to_oklch
from .resolver import AliasResolver
from .stylesheet import render_stylesheet

__all__ = [
    # Configuration
    "ExportConfig",
    "FigmaConfig",
    "load_config",
    # Errors
    "ModeTokensError",
    "ConfigurationError",
    "NoDataError",
    "HostQueryError",
    # Events
    "EventCollector",
    "EventKind",
    "EventSink",
    "ExportEvent",
    "logging_sink",
    # IR
    "AliasValue",
    "Collection",
    "ExportResult",
    "HexValue",
    "Mode",
    "ResolvedVariable",
    "RGBValue",
    "UnrecognizedValue",
    "Variable",
    "parse_color_value",
    # Pipeline
    "AliasResolver",
    "HostStore",
    "SnapshotStore",
    "export_stylesheet",
    "export_variables",
    "hex_to_oklch",
    "render_stylesheet",
    "run_export",
    "PluginSession",
]
