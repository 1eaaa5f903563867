"""Loading the built-in API reference database."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ValidationError

from spec_command.models.kinds import ReferenceItemKind
from spec_command.models.reference import ReferenceItem, ReferencePartition
from spec_command.registry.exceptions import MalformedDatabase

logger = logging.getLogger(__name__)


class APIReference(BaseModel):
    """Shape of the API reference database document."""

    constants: Dict[str, ReferenceItem]
    variables: Dict[str, ReferenceItem]
    functions: Dict[str, ReferenceItem]
    macros: Dict[str, ReferenceItem]
    keywords: Dict[str, ReferenceItem]

    def to_partition(self) -> ReferencePartition:
        """Group the document by kind, in manual order."""
        return {
            ReferenceItemKind.CONSTANT: dict(self.constants),
            ReferenceItemKind.VARIABLE: dict(self.variables),
            ReferenceItemKind.MACRO: dict(self.macros),
            ReferenceItemKind.FUNCTION: dict(self.functions),
            ReferenceItemKind.KEYWORD: dict(self.keywords),
        }


def load_api_reference(
    document: Union[str, bytes, Mapping[str, Any]], source: str = ""
) -> ReferencePartition:
    """Deserialize an API reference document into a new partition.

    Args:
        document: JSON text or an already decoded mapping
        source: Description of where the document came from, for errors

    Returns:
        Freshly built partition; nothing shared with previous loads

    Raises:
        MalformedDatabase: If the document is not valid JSON or does not
            have the expected shape
    """
    try:
        if isinstance(document, (str, bytes)):
            api_reference = APIReference.model_validate_json(document)
        else:
            api_reference = APIReference.model_validate(document)
    except ValidationError as e:
        raise MalformedDatabase(
            f"API reference database has an unexpected shape: {e.error_count()} error(s)",
            source=source,
        ) from e

    partition = api_reference.to_partition()
    logger.debug(
        "Loaded API reference: "
        + ", ".join(f"{kind.name.lower()}={len(m)}" for kind, m in partition.items())
    )
    return partition


async def read_api_reference(path: Union[str, Path]) -> ReferencePartition:
    """Read and deserialize the API reference database file.

    The file read runs in a worker thread so the event loop stays free.

    Raises:
        MalformedDatabase: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise MalformedDatabase(
            f"Cannot read API reference database: {e}", source=str(path)
        ) from e
    return load_api_reference(data, source=str(path))
