"""Tests for ReferenceItem and source positions."""

import pytest
from lsprotocol.types import Position, Range
from pydantic import ValidationError

from spec_command.models.reference import Overload, ReferenceItem, SourceRange


class TestReferenceItem:
    """Test ReferenceItem model."""

    def test_minimal_instantiation(self):
        """Test creating ReferenceItem with the signature only."""
        item = ReferenceItem(signature="PI")
        assert item.signature == "PI"
        assert item.description is None
        assert item.snippet is None
        assert item.location is None
        assert item.overloads is None

    def test_full_instantiation(self):
        """Test creating ReferenceItem with all fields."""
        item = ReferenceItem.model_validate(
            {
                "signature": "date()",
                "description": "current date",
                "comments": "See also time().",
                "snippet": "date(${1:fmt})",
                "location": {
                    "start": {"offset": 4, "line": 2, "column": 3},
                    "end": {"offset": 9, "line": 2, "column": 8},
                },
                "overloads": [{"signature": "date(fmt)"}],
            }
        )
        assert item.comments == "See also time()."
        assert item.overloads == [Overload(signature="date(fmt)")]
        assert item.location.start.line == 2

    def test_empty_signature_rejected(self):
        """Test that an empty signature raises ValidationError."""
        with pytest.raises(ValidationError):
            ReferenceItem(signature="")

    def test_blank_signature_rejected(self):
        """Test that a whitespace-only signature raises ValidationError."""
        with pytest.raises(ValidationError, match="must not be blank"):
            ReferenceItem(signature="   ")


class TestSourceRange:
    """Test conversion of 1-based grammar positions."""

    def test_to_lsp_is_zero_based(self):
        """Test line and column are shifted by one."""
        source_range = SourceRange.model_validate(
            {
                "start": {"offset": 0, "line": 1, "column": 1},
                "end": {"offset": 12, "line": 3, "column": 7},
            }
        )
        assert source_range.to_lsp() == Range(
            start=Position(line=0, character=0),
            end=Position(line=2, character=6),
        )

    def test_offset_defaults_to_zero(self):
        """Test the offset is optional."""
        source_range = SourceRange.model_validate(
            {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 2}}
        )
        assert source_range.start.offset == 0

    def test_zero_line_rejected(self):
        """Test positions must be 1-based."""
        with pytest.raises(ValidationError):
            SourceRange.model_validate(
                {"start": {"line": 0, "column": 1}, "end": {"line": 1, "column": 1}}
            )
