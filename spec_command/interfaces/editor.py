"""Editor interface for the reference registry.

The registry never paints anything itself. Interactive features (the
reference manual command, error reporting) go through this protocol so any
editor front end, or a test double, can be wired in.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class QuickPickItem:
    """An entry offered in a quick pick.

    `key` is the value the registry acts on, `label` is what the user sees.
    """

    key: str
    label: str


class CancellationToken(Protocol):
    """Cancellation flag passed along with content requests."""

    @property
    def is_cancellation_requested(self) -> bool:
        ...


class EditorWindow(Protocol):
    """Window operations the registry needs from the editor.

    Example usage:
        ```python
        from spec_command.registry import SystemRegistry

        registry = SystemRegistry(settings=settings, window=window)
        await registry.startup()
        await registry.open_reference_manual()
        ```
    """

    async def show_quick_pick(
        self, items: Sequence[QuickPickItem]
    ) -> Optional[QuickPickItem]:
        """Let the user pick one item.

        Returns:
            The picked item, or None if the pick was dismissed
        """
        ...

    async def show_text_document(self, uri: str, preview: bool = False) -> None:
        """Open the (virtual) document at `uri` in an editor."""
        ...

    async def execute_command(self, command: str) -> None:
        """Run an editor command by identifier, e.g. 'markdown.showPreview'."""
        ...

    def show_error_message(self, message: str) -> None:
        """Show an error notification to the user."""
        ...
