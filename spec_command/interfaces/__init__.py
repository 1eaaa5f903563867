"""Protocols for collaborators outside the registry."""

from spec_command.interfaces.editor import CancellationToken, EditorWindow, QuickPickItem

__all__ = [
    "CancellationToken",
    "EditorWindow",
    "QuickPickItem",
]
