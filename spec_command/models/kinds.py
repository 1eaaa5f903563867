"""Reference item kinds and their mapping onto LSP completion/symbol kinds."""

from enum import IntEnum
from typing import Dict, NamedTuple, Optional

from lsprotocol.types import CompletionItemKind, SymbolKind


class ReferenceItemKind(IntEnum):
    """Category of a reference item.

    The value order matches the order in which kinds are grouped in the
    reference manual, with UNDEFINED as the fallback for anything unknown.
    """

    UNDEFINED = 0
    CONSTANT = 1
    VARIABLE = 2
    MACRO = 3
    FUNCTION = 4
    KEYWORD = 5
    SNIPPET = 6
    ENUM = 7


class KindMetadata(NamedTuple):
    """Display metadata for a kind."""

    label: str
    icon: str


KIND_METADATA: Dict[ReferenceItemKind, KindMetadata] = {
    ReferenceItemKind.UNDEFINED: KindMetadata("symbol", "symbol-misc"),
    ReferenceItemKind.CONSTANT: KindMetadata("constant", "symbol-constant"),
    ReferenceItemKind.VARIABLE: KindMetadata("variable", "symbol-variable"),
    ReferenceItemKind.MACRO: KindMetadata("macro", "symbol-function"),
    ReferenceItemKind.FUNCTION: KindMetadata("function", "symbol-method"),
    ReferenceItemKind.KEYWORD: KindMetadata("keyword", "symbol-keyword"),
    ReferenceItemKind.SNIPPET: KindMetadata("snippet", "symbol-snippet"),
    ReferenceItemKind.ENUM: KindMetadata("member", "symbol-enum-member"),
}

# Macros are user-level commands and show up as functions in the editor;
# built-in functions show up as methods.
_COMPLETION_ITEM_KINDS: Dict[ReferenceItemKind, CompletionItemKind] = {
    ReferenceItemKind.CONSTANT: CompletionItemKind.Constant,
    ReferenceItemKind.VARIABLE: CompletionItemKind.Variable,
    ReferenceItemKind.MACRO: CompletionItemKind.Function,
    ReferenceItemKind.FUNCTION: CompletionItemKind.Method,
    ReferenceItemKind.KEYWORD: CompletionItemKind.Keyword,
    ReferenceItemKind.SNIPPET: CompletionItemKind.Snippet,
    ReferenceItemKind.ENUM: CompletionItemKind.EnumMember,
}

_REFERENCE_ITEM_KINDS: Dict[CompletionItemKind, ReferenceItemKind] = {
    v: k for k, v in _COMPLETION_ITEM_KINDS.items()
}

# Keywords and snippets have no outline representation and collapse to Null.
_SYMBOL_KINDS: Dict[ReferenceItemKind, SymbolKind] = {
    ReferenceItemKind.CONSTANT: SymbolKind.Constant,
    ReferenceItemKind.VARIABLE: SymbolKind.Variable,
    ReferenceItemKind.MACRO: SymbolKind.Function,
    ReferenceItemKind.FUNCTION: SymbolKind.Method,
    ReferenceItemKind.ENUM: SymbolKind.EnumMember,
}

_KINDS_BY_LABEL: Dict[str, ReferenceItemKind] = {
    meta.label: kind for kind, meta in KIND_METADATA.items()
}


def to_completion_item_kind(kind: ReferenceItemKind) -> Optional[CompletionItemKind]:
    """Get the completion item kind for a reference item kind.

    Returns None for UNDEFINED.
    """
    return _COMPLETION_ITEM_KINDS.get(kind)


def from_completion_item_kind(
    completion_item_kind: Optional[CompletionItemKind],
) -> ReferenceItemKind:
    """Get the reference item kind for a completion item kind.

    Absent or unmapped completion kinds resolve to UNDEFINED.
    """
    if completion_item_kind is None:
        return ReferenceItemKind.UNDEFINED
    return _REFERENCE_ITEM_KINDS.get(completion_item_kind, ReferenceItemKind.UNDEFINED)


def to_symbol_kind(kind: ReferenceItemKind) -> SymbolKind:
    """Get the document-symbol kind used in outlines."""
    return _SYMBOL_KINDS.get(kind, SymbolKind.Null)


def label(kind: ReferenceItemKind) -> str:
    """Lowercase noun used for manual headings and query filtering."""
    return KIND_METADATA[kind].label


def icon(kind: ReferenceItemKind) -> str:
    """Editor icon identifier for a kind."""
    return KIND_METADATA[kind].icon


def kind_from_label(text: str) -> Optional[ReferenceItemKind]:
    """Reverse of `label`. Returns None for unknown labels."""
    return _KINDS_BY_LABEL.get(text)
