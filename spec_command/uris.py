"""Source identities.

Every partition of the reference storage is keyed by one of these URIs.
The `system` authority is served as a virtual Markdown document; the query
string of a document URI selects a single kind label.
"""

from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

SCHEME = "spec"

BUILTIN_URI = "spec://system/built-in.md"
MOTOR_URI = "spec://system/mnemonic-motor.md"
COUNTER_URI = "spec://system/mnemonic-counter.md"
SNIPPET_URI = "spec://system/code-snippet.md"
ACTIVE_FILE_URI = "spec://user/active-document.md"

# Short names accepted by the CLI.
SOURCE_NAMES = {
    "built-in": BUILTIN_URI,
    "motor": MOTOR_URI,
    "counter": COUNTER_URI,
    "snippet": SNIPPET_URI,
    "active-document": ACTIVE_FILE_URI,
}


def split_document_uri(uri: str) -> Tuple[str, str, Optional[str]]:
    """Split a document URI into (source identity, authority, query).

    The query is None when absent or empty.
    """
    parts = urlsplit(uri)
    source = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return source, parts.netloc, parts.query or None


def with_query(uri: str, query: Optional[str]) -> str:
    """Return `uri` with its query replaced."""
    parts = urlsplit(uri)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query or "", ""))
