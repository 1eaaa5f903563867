"""System registry: the reference storage plus the events that keep it current.

The SystemRegistry owns:
- The built-in partition, loaded once (asynchronously) from the API
  reference database
- Motor and counter mnemonic partitions, rebuilt from configuration
- The snippet partition, derived from templates and the mnemonic sets
- The 'open reference manual' command and the virtual document content

All rebuilds are synchronous and run to completion before returning, so a
rebuild never interleaves with another event on the same loop.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from spec_command.config import (
    API_REFERENCE_SECTION,
    CODE_SNIPPETS_SECTION,
    COUNTERS_SECTION,
    MOTORS_SECTION,
    ConfigurationChangeEvent,
    SpecCommandSettings,
    get_settings,
)
from spec_command.interfaces.editor import CancellationToken, EditorWindow, QuickPickItem
from spec_command.manual import render_reference_manual
from spec_command.models.kinds import ReferenceItemKind, icon, label
from spec_command.models.reference import ReferencePartition
from spec_command.registry.exceptions import MalformedDatabase, ReferenceTimeout
from spec_command.registry.loader import read_api_reference
from spec_command.registry.mnemonics import ingest_mnemonics
from spec_command.registry.snippets import SNIPPET_TEMPLATES, compile_snippets
from spec_command.registry.storage import ReferenceStorage
from spec_command.uris import (
    ACTIVE_FILE_URI,
    BUILTIN_URI,
    COUNTER_URI,
    MOTOR_URI,
    SCHEME,
    SNIPPET_URI,
    split_document_uri,
    with_query,
)

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Timeout. The API reference database is not loaded at the moment."

StaleListener = Callable[[str], None]


class SystemRegistry:
    """
    Registry of symbols managed by the spec system.

    Usage:
        ```python
        from spec_command.registry import SystemRegistry

        registry = SystemRegistry(settings=settings, window=window)
        registry.add_stale_listener(completion_cache.invalidate)

        # Schedule the built-in database load
        await registry.startup()

        # Configuration changed in the editor
        registry.apply_settings(new_settings)

        # Query
        motors = registry.get_partition(MOTOR_URI)
        ```
    """

    def __init__(
        self,
        settings: Optional[SpecCommandSettings] = None,
        window: Optional[EditorWindow] = None,
    ):
        """
        Initialize the registry and build the mnemonic and snippet partitions.

        Args:
            settings: Configuration; the global settings if omitted
            window: Editor window used by interactive commands
        """
        self.settings = settings or get_settings()
        self.window = window
        self.storage = ReferenceStorage()
        self._stale_listeners: List[StaleListener] = []
        self._load_task: Optional[asyncio.Task] = None

        self.storage.register(MOTOR_URI, [ReferenceItemKind.ENUM])
        self.storage.register(COUNTER_URI, [ReferenceItemKind.ENUM])
        self.storage.register(SNIPPET_URI, [ReferenceItemKind.SNIPPET])
        self.update_mnemonic_storage(MOTOR_URI, self.settings.mnemonic_motors)
        self.update_mnemonic_storage(COUNTER_URI, self.settings.mnemonic_counters)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def startup(self) -> None:
        """Schedule loading of the built-in database.

        Returns immediately; until the load completes, the built-in source
        is absent from the storage.
        """
        self._schedule_builtin_load()

    async def shutdown(self) -> None:
        """Cancel a pending built-in load, if any."""
        if self._load_task and not self._load_task.done():
            self._load_task.cancel()
            try:
                await self._load_task
            except asyncio.CancelledError:
                pass
        self._load_task = None

    @property
    def load_task(self) -> Optional[asyncio.Task]:
        """The background load scheduled by `startup`, if any."""
        return self._load_task

    def _schedule_builtin_load(self) -> None:
        if self._load_task and not self._load_task.done():
            self._load_task.cancel()
        self._load_task = asyncio.create_task(self._load_builtin_in_background())

    async def _load_builtin_in_background(self) -> None:
        try:
            await self.load_builtin()
        except MalformedDatabase as e:
            logger.error(f"Failed to load API reference database: {e}")
            self._show_error(f"Failed to load the API reference database: {e}")

    async def load_builtin(self, path: Union[str, Path, None] = None) -> ReferencePartition:
        """
        Load the API reference database and install it as the built-in source.

        The partition is fully built before it replaces the previous one, so
        readers see either the old or the new database, never a mix.

        Args:
            path: Database file; the configured path if omitted

        Returns:
            The installed partition

        Raises:
            MalformedDatabase: If the file cannot be read or parsed. The
                previous partition, if any, is kept.
        """
        path = Path(path) if path else self.settings.api_reference_path
        partition = await read_api_reference(path)
        self.storage.install(BUILTIN_URI, partition)
        logger.info(
            f"Installed built-in reference: {sum(len(m) for m in partition.values())} "
            f"items from {path}"
        )
        self._notify_stale(BUILTIN_URI)
        return partition

    # =========================================================================
    # Stale notifications
    # =========================================================================

    def add_stale_listener(self, listener: StaleListener) -> None:
        """Register a callback invoked with a source URI whenever it changes."""
        self._stale_listeners.append(listener)

    def remove_stale_listener(self, listener: StaleListener) -> None:
        """Unregister a callback added with `add_stale_listener`."""
        if listener in self._stale_listeners:
            self._stale_listeners.remove(listener)

    def _notify_stale(self, uri: str) -> None:
        for listener in list(self._stale_listeners):
            try:
                listener(uri)
            except Exception as e:
                logger.exception(f"Stale listener failed for {uri}: {e}")

    # =========================================================================
    # Rebuilds
    # =========================================================================

    def update_mnemonic_storage(self, uri: str, texts: List[str]) -> None:
        """
        Rebuild a motor or counter mnemonic partition, then the snippets.

        Args:
            uri: MOTOR_URI or COUNTER_URI
            texts: Mnemonic strings from configuration
        """
        enum_map = self.storage.get_map(uri, ReferenceItemKind.ENUM)
        if enum_map is None:
            return

        count = ingest_mnemonics(texts, enum_map)
        logger.info(f"Rebuilt {uri}: {count} of {len(texts)} mnemonics")
        self._notify_stale(uri)

        # snippet choice lists embed the mnemonic names
        self.update_snippet_storage()

    def update_snippet_storage(self) -> None:
        """Recompile built-in and user snippet templates into the snippet partition."""
        snippet_map = self.storage.get_map(SNIPPET_URI, ReferenceItemKind.SNIPPET)
        if snippet_map is None:
            return

        templates = SNIPPET_TEMPLATES + list(self.settings.editor_code_snippets)
        count = compile_snippets(
            templates,
            motors=self.storage.names(MOTOR_URI, ReferenceItemKind.ENUM),
            counters=self.storage.names(COUNTER_URI, ReferenceItemKind.ENUM),
            target=snippet_map,
        )
        logger.debug(f"Rebuilt {SNIPPET_URI}: {count} snippets")
        self._notify_stale(SNIPPET_URI)

    def set_active_document(self, partition: ReferencePartition) -> None:
        """Install the symbols of the currently active document."""
        self.storage.install(ACTIVE_FILE_URI, partition)
        self._notify_stale(ACTIVE_FILE_URI)

    # =========================================================================
    # Configuration
    # =========================================================================

    def apply_settings(self, settings: SpecCommandSettings) -> ConfigurationChangeEvent:
        """Replace the settings and rebuild whatever they affect.

        Must be called on the event loop when the database path changes;
        the reload is scheduled as a task.

        Returns:
            The change event that was dispatched
        """
        event = ConfigurationChangeEvent.between(self.settings, settings)
        self.on_configuration_changed(event, settings)
        return event

    def on_configuration_changed(
        self,
        event: ConfigurationChangeEvent,
        settings: Optional[SpecCommandSettings] = None,
    ) -> None:
        """
        React to a configuration change.

        Args:
            event: Which sections changed
            settings: The new settings; the current ones are kept if omitted

        Raises:
            RuntimeError: If the database path changed and no event loop is
                running. Nothing is applied in that case.
        """
        reload_builtin = event.affects_configuration(API_REFERENCE_SECTION)
        if reload_builtin:
            try:
                asyncio.get_running_loop()
            except RuntimeError as e:
                raise RuntimeError(
                    "Changing the API reference database path requires a running event loop"
                ) from e

        if settings is not None:
            self.settings = settings

        snippets_rebuilt = False
        if event.affects_configuration(MOTORS_SECTION):
            self.update_mnemonic_storage(MOTOR_URI, self.settings.mnemonic_motors)
            snippets_rebuilt = True
        if event.affects_configuration(COUNTERS_SECTION):
            self.update_mnemonic_storage(COUNTER_URI, self.settings.mnemonic_counters)
            snippets_rebuilt = True
        if event.affects_configuration(CODE_SNIPPETS_SECTION) and not snippets_rebuilt:
            self.update_snippet_storage()
        if reload_builtin:
            self._schedule_builtin_load()

    # =========================================================================
    # Queries
    # =========================================================================

    def get_partition(self, uri: str) -> Optional[ReferencePartition]:
        """Get a source partition; None if it is not available (yet)."""
        return self.storage.get(uri)

    async def wait_for_partition(
        self,
        uri: str,
        attempts: Optional[int] = None,
        interval: Optional[float] = None,
    ) -> ReferencePartition:
        """
        Wait a bounded time for a source partition to become available.

        Checks once immediately and then up to `attempts` more times,
        `interval` seconds apart. Cancelling the awaiting task stops the wait.

        Raises:
            ReferenceTimeout: If the partition is still absent after the
                last attempt
        """
        if attempts is None:
            attempts = self.settings.reference_wait_attempts
        if interval is None:
            interval = self.settings.reference_wait_interval_seconds

        for attempt in range(attempts + 1):
            partition = self.storage.get(uri)
            if partition is not None:
                return partition
            if attempt < attempts:
                await asyncio.sleep(interval)
        raise ReferenceTimeout(uri, attempts + 1)

    # =========================================================================
    # Reference manual
    # =========================================================================

    async def open_reference_manual(self) -> Optional[str]:
        """
        Let the user pick a kind and open the built-in reference manual.

        Returns:
            The URI that was opened, or None if the pick was dismissed or the
            database did not load in time
        """
        window = self._require_window()
        try:
            partition = await self.wait_for_partition(BUILTIN_URI)
        except ReferenceTimeout:
            logger.warning("Reference manual requested before the database loaded")
            window.show_error_message(TIMEOUT_MESSAGE)
            return None

        items = [QuickPickItem(key="all", label="$(references) all")]
        for kind in partition:
            items.append(QuickPickItem(key=label(kind), label=f"$({icon(kind)}) {label(kind)}"))

        picked = await window.show_quick_pick(items)
        if picked is None:
            return None

        uri = BUILTIN_URI if picked.key == "all" else with_query(BUILTIN_URI, picked.key)
        await window.show_text_document(uri, preview=False)
        if self.settings.show_reference_manual_in_preview:
            await window.execute_command("markdown.showPreview")
        return uri

    def provide_text_document_content(
        self, uri: str, token: Optional[CancellationToken] = None
    ) -> Optional[str]:
        """
        Render the virtual document for a `spec://system/...` URI.

        Returns:
            Markdown text, or None if cancelled, the URI is not served, or
            its source is not loaded
        """
        if token is not None and token.is_cancellation_requested:
            return None

        source, authority, query = split_document_uri(uri)
        if not source.startswith(f"{SCHEME}://") or authority != "system":
            return None

        partition = self.storage.get(source)
        if partition is None:
            return None
        return render_reference_manual(partition, query)

    def _require_window(self) -> EditorWindow:
        if self.window is None:
            raise RuntimeError("No editor window attached to the registry")
        return self.window

    def _show_error(self, message: str) -> None:
        if self.window is not None:
            self.window.show_error_message(message)
