"""Conversion of stored reference items into LSP structures."""

from typing import List

from lsprotocol.types import (
    CompletionItem,
    DocumentSymbol,
    InsertTextFormat,
    MarkupContent,
    MarkupKind,
)

from spec_command.models.kinds import to_completion_item_kind, to_symbol_kind
from spec_command.models.reference import ReferencePartition


def to_completion_items(partition: ReferencePartition) -> List[CompletionItem]:
    """Build completion items for every item of a partition.

    Items with a snippet body insert it as an LSP snippet; others insert
    their name.
    """
    completion_items = []
    for kind, ref_map in partition.items():
        completion_item_kind = to_completion_item_kind(kind)
        for name, item in ref_map.items():
            completion_items.append(
                CompletionItem(
                    label=name,
                    kind=completion_item_kind,
                    detail=item.signature,
                    documentation=(
                        MarkupContent(kind=MarkupKind.Markdown, value=item.description)
                        if item.description
                        else None
                    ),
                    insert_text=item.snippet,
                    insert_text_format=(
                        InsertTextFormat.Snippet if item.snippet else None
                    ),
                )
            )
    return completion_items


def to_document_symbols(partition: ReferencePartition) -> List[DocumentSymbol]:
    """Build outline symbols for the items that carry a source location."""
    symbols = []
    for kind, ref_map in partition.items():
        for name, item in ref_map.items():
            if item.location is None:
                continue
            lsp_range = item.location.to_lsp()
            symbols.append(
                DocumentSymbol(
                    name=name,
                    detail=item.description,
                    kind=to_symbol_kind(kind),
                    range=lsp_range,
                    selection_range=lsp_range,
                )
            )
    return symbols
