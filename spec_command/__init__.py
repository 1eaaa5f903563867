"""spec-command - reference symbols and snippets for the spec command language.

This package provides the registry behind editor completion, hover and the
reference manual: built-in API symbols, motor/counter mnemonics and
snippet templates, kept current as configuration changes.
"""

__version__ = "0.1.0"

from spec_command.config import SpecCommandSettings, get_settings, set_settings
from spec_command.models import ReferenceItem, ReferenceItemKind
from spec_command.registry import ReferenceStorage, SystemRegistry

__all__ = [
    "SpecCommandSettings",
    "get_settings",
    "set_settings",
    "ReferenceItem",
    "ReferenceItemKind",
    "ReferenceStorage",
    "SystemRegistry",
]
