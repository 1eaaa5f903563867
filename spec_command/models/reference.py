"""ReferenceItem model - one documented symbol."""

from typing import Dict, List, Optional

from lsprotocol.types import Position, Range
from pydantic import BaseModel, Field, field_validator

from spec_command.models.kinds import ReferenceItemKind


class SourcePosition(BaseModel):
    """A position as emitted by the grammar description (1-based)."""

    offset: int = Field(default=0, description="Character offset from the file start")
    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=1, description="1-based column number")

    def to_lsp(self) -> Position:
        """Convert to a 0-based LSP position."""
        return Position(line=self.line - 1, character=self.column - 1)


class SourceRange(BaseModel):
    """Half-open span in the grammar description."""

    start: SourcePosition
    end: SourcePosition

    def to_lsp(self) -> Range:
        """Convert to a 0-based LSP range."""
        return Range(start=self.start.to_lsp(), end=self.end.to_lsp())


class Overload(BaseModel):
    """Alternate call form of a built-in macro or function."""

    signature: str = Field(..., min_length=1)
    description: Optional[str] = None


class ReferenceItem(BaseModel):
    """A symbol known to the editor.

    Built-in items come from the API reference database and may carry
    `location` and `overloads`. Mnemonics only have a signature and a
    description. Snippets additionally carry the insertable `snippet` body.
    """

    signature: str = Field(
        ..., min_length=1, description="Canonical invocation form, e.g. 'mv motor pos'"
    )
    description: Optional[str] = Field(default=None, description="One-line prose")
    comments: Optional[str] = Field(
        default=None, description="Additional prose rendered below the signature"
    )
    snippet: Optional[str] = Field(
        default=None, description="Template body with editor placeholders"
    )
    location: Optional[SourceRange] = Field(
        default=None, description="Where the grammar description defines the symbol"
    )
    overloads: Optional[List[Overload]] = Field(
        default=None, description="Alternate call forms"
    )

    @field_validator("signature")
    @classmethod
    def validate_signature(cls, v: str) -> str:
        """Reject whitespace-only signatures."""
        if not v.strip():
            raise ValueError("signature must not be blank")
        return v


ReferenceMap = Dict[str, ReferenceItem]
ReferencePartition = Dict[ReferenceItemKind, ReferenceMap]
