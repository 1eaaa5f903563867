"""Markdown rendering of a source partition (the reference manual)."""

from typing import List, Optional

from spec_command.models.kinds import label
from spec_command.models.reference import ReferencePartition

MANUAL_HEADER = "# __spec__ Reference Manual\n\n"
MANUAL_CITATION = (
    "The contents of this page are cited from the _Reference Manual_ section in "
    "[PDF version](https://www.certif.com/downloads/css_docs/spec_man.pdf) of the "
    "_User manual and Tutorials_, written by "
    "[Certified Scientific Software](https://www.certif.com/), "
    "except where otherwise noted.\n\n"
)

EM_DASH = "—"


def _signature_line(signature: str, description: Optional[str]) -> str:
    if description:
        return f"`{signature}` {EM_DASH} {description}\n\n"
    return f"`{signature}`\n\n"


def render_reference_manual(
    partition: ReferencePartition, query: Optional[str] = None
) -> str:
    """Render a partition as Markdown.

    Args:
        partition: Kind -> items map of one source
        query: Kind label to restrict the output to; None renders all kinds

    Returns:
        Markdown text with one '##' section per kind and one '###' section
        per item
    """
    parts: List[str] = [MANUAL_HEADER, MANUAL_CITATION]

    for kind, ref_map in partition.items():
        kind_label = label(kind)
        if query and query != kind_label:
            continue

        parts.append(f"## {kind_label}\n\n")

        for name, item in ref_map.items():
            parts.append(f"### {name}\n\n")
            parts.append(_signature_line(item.signature, item.description))
            if item.comments:
                parts.append(f"{item.comments}\n\n")

            for overload in item.overloads or []:
                parts.append(_signature_line(overload.signature, overload.description))

    return "".join(parts)
