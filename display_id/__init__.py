"""
Deterministic display ids for structured values.

Derives a stable, human-readable id (log tag, cache key, fixture name) from
a value's canonical JSON serialization:
- transform: ``render`` and the ``clean`` step
- serialization: canonical form and compact rendering through pydantic
- variants: externally tagged union variants
- display: ``deterministic_display`` class decorator
"""

from display_id.casing import RENAME_RULES, apply_rename_rule
from display_id.display import deterministic_display
from display_id.errors import FormatError, SerializationFailed
from display_id.serialization import to_canonical, to_compact
from display_id.settings import Config, config, configure_logging
from display_id.transform import clean, render
from display_id.variants import ValueVariant, Variant

__version__ = "0.1.0"
__all__ = [
    "render",
    "clean",
    "to_canonical",
    "to_compact",
    "deterministic_display",
    "Variant",
    "ValueVariant",
    "RENAME_RULES",
    "apply_rename_rule",
    "FormatError",
    "SerializationFailed",
    "Config",
    "config",
    "configure_logging",
]
