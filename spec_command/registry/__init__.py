"""Registry module for spec reference symbols.

This module provides the reference storage, the loaders and compilers that
populate it (API reference database, mnemonics, snippet templates), and the
SystemRegistry that keeps them current as configuration changes.
"""

from spec_command.registry.exceptions import (
    MalformedConfigEntry,
    MalformedDatabase,
    ReferenceTimeout,
    RegistryError,
)
from spec_command.registry.loader import (
    APIReference,
    load_api_reference,
    read_api_reference,
)
from spec_command.registry.mnemonics import ingest_mnemonics
from spec_command.registry.parsing import (
    ParsedMnemonic,
    ParsedTemplate,
    Unmatched,
    parse_mnemonic,
    parse_snippet_template,
)
from spec_command.registry.registry import SystemRegistry
from spec_command.registry.snippets import (
    SNIPPET_TEMPLATES,
    compile_snippets,
    render_signature,
    render_snippet,
)
from spec_command.registry.storage import ReferenceStorage

__all__ = [
    "SystemRegistry",
    "ReferenceStorage",
    "APIReference",
    "load_api_reference",
    "read_api_reference",
    "ingest_mnemonics",
    "SNIPPET_TEMPLATES",
    "compile_snippets",
    "render_signature",
    "render_snippet",
    "ParsedMnemonic",
    "ParsedTemplate",
    "Unmatched",
    "parse_mnemonic",
    "parse_snippet_template",
    "RegistryError",
    "MalformedDatabase",
    "MalformedConfigEntry",
    "ReferenceTimeout",
]
