"""Data models for the reference registry.

This module exports the kind enumeration and the ReferenceItem model used by
every source (built-in database, mnemonics, snippets, active document).
"""

from spec_command.models.kinds import (
    KIND_METADATA,
    ReferenceItemKind,
    from_completion_item_kind,
    icon,
    kind_from_label,
    label,
    to_completion_item_kind,
    to_symbol_kind,
)
from spec_command.models.reference import (
    Overload,
    ReferenceItem,
    ReferenceMap,
    ReferencePartition,
    SourcePosition,
    SourceRange,
)

__all__ = [
    "KIND_METADATA",
    "ReferenceItemKind",
    "from_completion_item_kind",
    "icon",
    "kind_from_label",
    "label",
    "to_completion_item_kind",
    "to_symbol_kind",
    "Overload",
    "ReferenceItem",
    "ReferenceMap",
    "ReferencePartition",
    "SourcePosition",
    "SourceRange",
]
