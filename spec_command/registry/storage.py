"""In-memory storage of reference items, keyed by source and kind."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from spec_command.models.kinds import ReferenceItemKind
from spec_command.models.reference import ReferenceItem, ReferenceMap, ReferencePartition


@dataclass
class ReferenceStorage:
    """Nested container: source identity -> kind -> name -> ReferenceItem.

    Each (source, kind) pair owns its own map, so clearing one never touches
    another. Partitions that are replaced wholesale (the built-in database)
    go through `install`, which swaps in a fully built partition in one step.
    """

    partitions: Dict[str, ReferencePartition] = field(default_factory=dict)

    def register(self, uri: str, kinds: Iterable[ReferenceItemKind]) -> ReferencePartition:
        """Create empty maps for `kinds` under `uri` if they do not exist yet."""
        partition = self.partitions.setdefault(uri, {})
        for kind in kinds:
            partition.setdefault(kind, {})
        return partition

    def install(self, uri: str, partition: ReferencePartition) -> None:
        """Replace the partition for `uri` with an already populated one."""
        self.partitions[uri] = partition

    def remove(self, uri: str) -> bool:
        """Drop the partition for `uri`. Returns False if it was absent."""
        return self.partitions.pop(uri, None) is not None

    def get(self, uri: str) -> Optional[ReferencePartition]:
        """Get the partition for `uri`, or None if it is not loaded yet."""
        return self.partitions.get(uri)

    def get_map(self, uri: str, kind: ReferenceItemKind) -> Optional[ReferenceMap]:
        """Get the map for one (source, kind) pair."""
        partition = self.partitions.get(uri)
        if partition is None:
            return None
        return partition.get(kind)

    def get_item(
        self, uri: str, kind: ReferenceItemKind, name: str
    ) -> Optional[ReferenceItem]:
        """Look up a single item. Names are case-sensitive."""
        ref_map = self.get_map(uri, kind)
        if ref_map is None:
            return None
        return ref_map.get(name)

    def clear(self, uri: str, kind: ReferenceItemKind) -> None:
        """Empty one (source, kind) map in place."""
        ref_map = self.get_map(uri, kind)
        if ref_map is not None:
            ref_map.clear()

    def names(self, uri: str, kind: ReferenceItemKind) -> List[str]:
        """Item names of one (source, kind) pair, in insertion order."""
        ref_map = self.get_map(uri, kind)
        return list(ref_map) if ref_map else []

    def find(self, name: str) -> List[Tuple[str, ReferenceItemKind, ReferenceItem]]:
        """Find every item called `name` across all sources."""
        return [
            (uri, kind, item)
            for uri, kind, item_name, item in self.iter_items()
            if item_name == name
        ]

    def iter_items(self) -> Iterator[Tuple[str, ReferenceItemKind, str, ReferenceItem]]:
        """Iterate (uri, kind, name, item) over every stored item."""
        for uri, partition in self.partitions.items():
            for kind, ref_map in partition.items():
                for name, item in ref_map.items():
                    yield uri, kind, name, item

    def __contains__(self, uri: object) -> bool:
        return uri in self.partitions
