"""Unit tests for the markdown normalizer.

WHY: Everything downstream reads the normalizer's plain text. A rule
applied in the wrong order (e.g. stripping brackets before wiki links are
captured) silently loses cross-references; a rule that throws on a
half-written note breaks the whole reader.

HOW: One test class per rule, plus heading scanning and malformed input.

RULES:
- Malformed input must never raise
- Heading offsets are checked against the original text
"""

from rsvp_reader.core.markup import normalize, parse_headings


class TestWikiLinks:
    """[[target]] and [[target|display]] are captured before stripping."""

    def test_display_text_replaces_link(self):
        result = normalize("[[Note A|显示文字]]")
        assert result.cross_references == ["Note A"]
        assert "显示文字" in result.plain_text
        assert "Note A" not in result.plain_text

    def test_bare_link_keeps_target(self):
        result = normalize("See [[Python]] now")
        assert result.cross_references == ["Python"]
        assert result.plain_text == "See Python now"

    def test_duplicates_collapsed_in_first_seen_order(self):
        result = normalize("[[B]] [[A|x]] [[B]] [[A]]")
        assert result.cross_references == ["B", "A"]
        assert result.plain_text == "B x B A"

    def test_empty_target_not_recorded(self):
        result = normalize("[[|shown]] text")
        assert result.cross_references == []
        assert result.plain_text == "shown text"


class TestCodeRemoval:
    def test_fenced_block_removed(self):
        result = normalize("before\n```python\nsecret = 1\n```\nafter")
        assert "secret" not in result.plain_text
        assert "before" in result.plain_text
        assert "after" in result.plain_text

    def test_inline_code_removed(self):
        result = normalize("use `rm -rf` carefully")
        assert result.plain_text == "use  carefully"


class TestLinksAndTags:
    def test_image_removed(self):
        result = normalize("![alt text](img.png) caption")
        assert result.plain_text == " caption"

    def test_link_keeps_text(self):
        result = normalize("[OpenAI](https://example.com) site")
        assert result.plain_text == "OpenAI site"

    def test_html_tags_stripped(self):
        result = normalize("<b>bold</b> text<br/>")
        assert result.plain_text == "bold text"


class TestEmphasis:
    def test_bold_and_italic_unwrapped(self):
        result = normalize("**strong** and *em* and __u__ and _i_")
        assert result.plain_text == "strong and em and u and i"


class TestStructure:
    def test_horizontal_rule_becomes_blank_line(self):
        result = normalize("above\n---\nbelow")
        assert "---" not in result.plain_text
        assert result.plain_text == "above\n\n\nbelow"

    def test_heading_lines_unwrapped(self):
        result = normalize("# Title\n## Sub\ntext")
        assert result.plain_text == "Title\n\nSub\n\ntext"

    def test_crlf_normalized(self):
        result = normalize("a\r\n\r\nb")
        assert result.plain_text == "a\n\nb"


class TestHeadings:
    """Headings are scanned from the original markdown."""

    def test_levels_titles_and_offsets(self):
        markdown = "# Title\n## Sub\ntext\n###   Deep  \n"
        headings = parse_headings(markdown)
        assert [(h.level, h.title) for h in headings] == [
            (1, "Title"), (2, "Sub"), (3, "Deep"),
        ]
        assert headings[0].source_offset == 0
        assert headings[1].source_offset == markdown.index("## Sub")
        assert headings[2].source_offset == markdown.index("###")

    def test_seven_hashes_is_not_a_heading(self):
        assert parse_headings("####### too deep") == []

    def test_hash_without_space_is_not_a_heading(self):
        assert parse_headings("#hashtag") == []

    def test_normalize_exposes_headings(self):
        result = normalize("intro\n\n## Part\nbody")
        assert len(result.headings) == 1
        assert result.headings[0].level == 2
        assert result.headings[0].source_offset == 7


class TestMalformedMarkup:
    """Unterminated syntax passes through as literal text."""

    def test_unterminated_fence(self):
        result = normalize("```unterminated\ncode")
        assert "unterminated" in result.plain_text
        assert "code" in result.plain_text

    def test_unclosed_wiki_link(self):
        result = normalize("[[broken link")
        assert result.plain_text == "[[broken link"
        assert result.cross_references == []

    def test_unclosed_link(self):
        result = normalize("[text](no close")
        assert result.plain_text == "[text](no close"

    def test_empty_input(self):
        result = normalize("")
        assert result.plain_text == ""
        assert result.cross_references == []
        assert result.headings == []
