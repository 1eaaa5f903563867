"""Mnemonic ingestion: configuration strings -> enum-member reference items."""

import logging
from typing import Iterable

from spec_command.models.reference import ReferenceItem, ReferenceMap
from spec_command.registry.exceptions import MalformedConfigEntry
from spec_command.registry.parsing import ParsedMnemonic, parse_mnemonic

logger = logging.getLogger(__name__)


def ingest_mnemonics(texts: Iterable[str], target: ReferenceMap) -> int:
    """Rebuild `target` from mnemonic configuration strings.

    The map is cleared first and then repopulated from the full input;
    there is no incremental add/remove. Lines that do not match the
    mnemonic grammar are skipped. A name that appears twice keeps the
    last occurrence.

    Args:
        texts: Raw 'name # description' strings, in configuration order
        target: Enum-kind map of a mnemonic partition

    Returns:
        Number of distinct mnemonics installed
    """
    target.clear()

    for text in texts:
        result = parse_mnemonic(text)
        if isinstance(result, ParsedMnemonic):
            target[result.name] = ReferenceItem(
                signature=result.name, description=result.description
            )
        else:
            logger.debug(f"Skipped: {MalformedConfigEntry(result.text, 'mnemonic')}")

    return len(target)
