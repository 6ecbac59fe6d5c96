"""
Test translation of single descendant steps into CSS selectors.
"""
import re

import pytest

from data_extractor.exceptions import SelectorGrammarError
from data_extractor.parsers import Descendant


class TestToCss:
    """Test the CSS form of a step."""

    @pytest.mark.parametrize(
        "step, expected",
        [
            ("//div/span[@attr='test']/@attr", 'div > span[attr="test"]'),
            ("//table[@id='eplist']/tbody/tr", 'table[id="eplist"] > tbody > tr'),
            ("//div/following-sibling::td/text()", "div ~ td"),
            ("//span[contains(@class,'tag')]/@data-id", 'span[class*="tag"]'),
            ("//td[contains(text(), 'Episodes')]", 'td:-soup-contains-own("Episodes")'),
            ("//li[2]", "li:nth-child(3)"),
            ("//a[@title]/@href", "a[title]"),
            ("//h3/../a/text()", "h3 > .. > a"),
            ("text()", "text()"),
            ("@href", "@href"),
        ],
    )
    def test_to_css(self, step, expected):
        assert Descendant(step).to_css() == expected

    def test_literal_with_slash_is_preserved(self):
        """A '/' inside a string literal survives the translation unchanged."""
        literal = "https://example.org/a/b"
        css = Descendant(f"a[@href='{literal}']/text()").to_css()

        match = re.search(r'\[href="(?P<value>.*)"\]', css)
        assert match is not None
        assert match["value"] == literal

    def test_unsupported_filter(self):
        with pytest.raises(SelectorGrammarError):
            Descendant("//a[starts-with(@href,'x')]")


class TestTerminatingChild:
    """Test detection of the value accessor at the end of a step."""

    @pytest.mark.parametrize(
        "step, terminating_child",
        [
            ("//td/text()", "text()"),
            ("//script/node()", "node()"),
            ("//div/span/@class", "@class"),
            ("//ul/li", "li"),
            ("//td", ""),
        ],
    )
    def test_terminating_child(self, step, terminating_child):
        assert Descendant(step).terminating_child == terminating_child

    def test_has_terminating_child(self):
        assert Descendant("//td/text()").has_terminating_child()
        assert not Descendant("//ul/li").has_terminating_child()
        assert not Descendant("text()").has_terminating_child()

    def test_is_terminating_child(self):
        assert Descendant("text()").is_terminating_child()
        assert Descendant("@href").is_terminating_child()
        assert not Descendant("//td/text()").is_terminating_child()


class TestParts:
    """Test splitting of a step at parent markers."""

    def test_parts_with_parent(self):
        parts = Descendant("div[contains(text(), 'Season')]/../a/text()").parts()
        assert parts == ['div:-soup-contains-own("Season")', "..", " > a"]
        assert Descendant("div/../a").has_parent()

    def test_parts_without_parent(self):
        assert Descendant("ul/li").parts() == ["ul > li"]
        assert not Descendant("ul/li").has_parent()

    def test_sibling_after_parent(self):
        assert Descendant("td/../following-sibling::tr").parts() == ["td", "..", " ~ tr"]
