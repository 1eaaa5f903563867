"""Tests for mnemonic and snippet template parsers."""

import pytest

from spec_command.registry.parsing import (
    ParsedMnemonic,
    ParsedTemplate,
    Unmatched,
    parse_mnemonic,
    parse_snippet_template,
)


class TestParseMnemonic:
    """Test suite for parse_mnemonic."""

    @pytest.mark.parametrize(
        "text,name,description",
        [
            ("tth # two theta", "tth", "two theta"),
            ("tth#two theta", "tth", "two theta"),
            ("  th   #   theta  ", "th", "theta"),
            ("_m1", "_m1", None),
            ("chi", "chi", None),
            ("abcdefg # seven", "abcdefg", "seven"),
            ("det #", "det", None),
            ("mon # a # b", "mon", "a # b"),
        ],
    )
    def test_valid(self, text, name, description):
        """Test lines matching the grammar."""
        assert parse_mnemonic(text) == ParsedMnemonic(name=name, description=description)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "abcdefgh",
            "abcdefgh # eight characters",
            "1th",
            "9 # digit",
            "th tth",
            "t-h",
            "# description only",
        ],
    )
    def test_invalid(self, text):
        """Test lines that are dropped."""
        assert parse_mnemonic(text) == Unmatched(text)

    def test_case_sensitive(self):
        """Test names keep their case."""
        assert parse_mnemonic("TTH").name == "TTH"


class TestParseSnippetTemplate:
    """Test suite for parse_snippet_template."""

    def test_with_comment(self):
        """Test the leading word, body and comment are split."""
        result = parse_snippet_template("mv ${1%MOT} ${2:pos} # absolute-position motor move")
        assert result == ParsedTemplate(
            key="mv",
            body="mv ${1%MOT} ${2:pos}",
            comment="absolute-position motor move",
        )

    def test_without_comment(self):
        """Test a template with no comment."""
        result = parse_snippet_template("ct ${1:sec}")
        assert isinstance(result, ParsedTemplate)
        assert result.key == "ct"
        assert result.body == "ct ${1:sec}"
        assert result.comment is None

    def test_surrounding_whitespace(self):
        """Test surrounding whitespace is ignored."""
        result = parse_snippet_template("  umv ${1%MOT} ${2:pos}   #  live  ")
        assert result.body == "umv ${1%MOT} ${2:pos}"
        assert result.comment == "live"

    def test_choice_placeholder(self):
        """Test choice placeholders are kept in the body."""
        result = parse_snippet_template("set_sim ${1|0,1|} # simulation mode")
        assert result.body == "set_sim ${1|0,1|}"

    @pytest.mark.parametrize(
        "text",
        ["", "mv", "mv   ", "mv # comment only", "1mv ${1:pos}", "# comment"],
    )
    def test_invalid(self, text):
        """Test templates without an invocation body are unmatched."""
        assert isinstance(parse_snippet_template(text), Unmatched)
