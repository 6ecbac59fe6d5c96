"""
Test splitting and tokenizing of XPath-like selectors.

This test covers:
1. Splitting selectors into descendant steps
2. Splitting steps into segments, keeping string literals intact
3. Typed segments and filters
4. Grammar errors for unsupported syntax
"""
import pytest

from data_extractor.exceptions import SelectorGrammarError
from data_extractor.models.selector import Axis, FilterKind
from data_extractor.parsers import split_segments, split_steps, tokenize_selector, tokenize_step
from data_extractor.parsers.filters import parse_filter, quote_css_value, transform_filter


class TestSplitSteps:
    """Test splitting at '//'."""

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("//div[@id='title']/text()", ["div[@id='title']/text()"]),
            ("//ul//li", ["ul", "li"]),
            ("ul/li", ["ul/li"]),
            ("//table[@id='eplist']/tbody/tr//td/text()", ["table[@id='eplist']/tbody/tr", "td/text()"]),
            ("//a[@href='http://example.org']//span", ["a[@href='http://example.org']", "span"]),
            ("", []),
        ],
    )
    def test_split_steps(self, selector, expected):
        assert split_steps(selector) == expected

    def test_double_slash_inside_literal_is_kept(self):
        """A '//' inside quotes is not a step boundary."""
        steps = split_steps("//a[@href='https://example.org/a/b']/text()")
        assert steps == ["a[@href='https://example.org/a/b']/text()"]


class TestSplitSegments:
    """Test splitting a step at '/'."""

    def test_child_separator(self):
        assert split_segments("table/tbody/tr") == ["table", "tbody", "tr"]

    def test_slash_inside_literal(self):
        assert split_segments("span[@a='x/y']/text()") == ["span[@a='x/y']", "text()"]

    def test_parent_marker(self):
        assert split_segments("h3/../a/@href") == ["h3", "..", "a", "@href"]


class TestTokenizeStep:
    """Test typed segments."""

    def test_segment_names(self):
        segments = tokenize_step("div[@class='a/b']/following-sibling::*/text()")
        assert [s.name for s in segments] == ["div", "*", "text()"]

    def test_axis(self):
        segments = tokenize_step("td/following-sibling::td")
        assert segments[0].axis is Axis.CHILD
        assert segments[1].axis is Axis.FOLLOWING_SIBLING

    def test_filters(self):
        (segment,) = tokenize_step("span[@itemprop='genre'][1]")
        assert segment.name == "span"
        assert [f.kind for f in segment.filters] == [FilterKind.ATTRIBUTE_EQUALS, FilterKind.INDEX]
        assert segment.filters[0].attribute == "itemprop"
        assert segment.filters[0].value == "genre"
        assert segment.filters[1].index == 1

    def test_terminal_and_parent(self):
        segments = tokenize_step("h3/../@href")
        assert not segments[0].is_terminal
        assert segments[1].is_parent
        assert segments[2].is_terminal

    def test_tokenize_selector(self):
        steps = tokenize_selector("//table[@id='eplist']/tbody//td/text()")
        assert [[s.name for s in step] for step in steps] == [["table", "tbody"], ["td", "text()"]]

    def test_tokenize_selector_rejects_any_step(self):
        with pytest.raises(SelectorGrammarError):
            tokenize_selector("//ul//li[last()]")

    def test_unclosed_filter(self):
        with pytest.raises(SelectorGrammarError):
            tokenize_step("div[@id='title'")

    def test_text_after_filter(self):
        with pytest.raises(SelectorGrammarError):
            tokenize_step("div[1]span")


class TestFilters:
    """Test classification of bracket filters and their CSS form."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("[@class='title']", '[class="title"]'),
            ("[@data-id = '7']", '[data-id="7"]'),
            ("[contains(@class, 'tag')]", '[class*="tag"]'),
            ("[contains(@class,'tag')]", '[class*="tag"]'),
            ("[contains(text(), 'Season')]", ':-soup-contains-own("Season")'),
            ("[0]", ":nth-child(1)"),
            ("[2]", ":nth-child(3)"),
            ("[@href]", "[href]"),
        ],
    )
    def test_transform_filter(self, raw, expected):
        assert transform_filter(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "[starts-with(@a,'x')]",
            "[last()]",
            "[@a!='x']",
            "[position()>1]",
        ],
    )
    def test_unsupported_filter_raises(self, raw):
        with pytest.raises(SelectorGrammarError) as error:
            parse_filter(raw)
        assert raw in str(error.value)

    def test_quote_css_value_escapes(self):
        assert quote_css_value('say "hi"') == '"say \\"hi\\""'
        assert quote_css_value("a\\b") == '"a\\\\b"'
