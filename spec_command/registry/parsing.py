"""Parsers for mnemonic and snippet template configuration lines.

Both parsers return a tagged result instead of raising: configuration is
free text edited by hand, so a line that does not match is an expected
outcome and the caller simply skips it.

Mnemonic grammar::

    name [ "#" description ]        e.g. 'tth # two theta'

Snippet template grammar::

    leadingWord body... [ "#" comment ]
                                    e.g. 'mv ${1%MOT} ${2:pos} # motor move'
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

# spec identifiers are limited to seven characters
MNEMONIC_PATTERN = re.compile(r"^([A-Za-z_][A-Za-z0-9_]{0,6})\s*(?:#\s*(.*))?$")
TEMPLATE_PATTERN = re.compile(r"^(([A-Za-z_][A-Za-z0-9_]*)\s+[^#]+?)\s*(?:#\s*(.*))?$")


@dataclass(frozen=True)
class ParsedMnemonic:
    """A mnemonic line that matched the grammar."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ParsedTemplate:
    """A snippet template line that matched the grammar.

    `key` is the leading word, `body` the invocation including the key.
    """

    key: str
    body: str
    comment: Optional[str] = None


@dataclass(frozen=True)
class Unmatched:
    """A line that matched neither grammar."""

    text: str


MnemonicResult = Union[ParsedMnemonic, Unmatched]
TemplateResult = Union[ParsedTemplate, Unmatched]


def _optional_text(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def parse_mnemonic(text: str) -> MnemonicResult:
    """Parse a 'name # description' mnemonic line.

    Args:
        text: Raw configuration string

    Returns:
        ParsedMnemonic with the description stripped (None if absent or
        empty), or Unmatched.
    """
    match = MNEMONIC_PATTERN.match(text.strip())
    if not match:
        return Unmatched(text)
    return ParsedMnemonic(name=match.group(1), description=_optional_text(match.group(2)))


def parse_snippet_template(text: str) -> TemplateResult:
    """Parse a snippet template line.

    Args:
        text: Raw template string

    Returns:
        ParsedTemplate keyed by the leading word, or Unmatched when there is
        no body after the leading word.
    """
    match = TEMPLATE_PATTERN.match(text.strip())
    if not match:
        return Unmatched(text)
    return ParsedTemplate(
        key=match.group(2),
        body=match.group(1),
        comment=_optional_text(match.group(3)),
    )
