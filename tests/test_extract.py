"""Unit tests for the extraction modules."""

from __future__ import annotations

import re

import pydantic
import pytest

from markdown_for_agents import ExtractOptions, extract_content, extract_metadata, parse_html

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _extract(html: str, options=None):
    document = parse_html(html)
    extract_content(document, options)
    return document


def _text(html: str, options=None) -> str:
    return _extract(html, options).get_text(" ", strip=True)


# ---------------------------------------------------------------------------
# Default strip criteria
# ---------------------------------------------------------------------------

class TestDefaultStripping:
    def test_structural_tags(self):
        html = (
            "<header>Site</header><nav>Menu</nav><main><p>Body</p></main>"
            "<aside>Side</aside><footer>Foot</footer>"
            "<script>var x;</script><style>p{}</style><form>Search</form>"
        )
        assert _text(html) == "Body"

    def test_by_role(self):
        html = '<div role="navigation">Links</div><div role="main"><p>Body</p></div>'
        assert _text(html) == "Body"

    def test_by_class(self):
        assert _text('<div class="sidebar">Side</div><p>Body</p>') == "Body"

    def test_class_match_is_case_insensitive(self):
        assert _text('<div class="Cookie-Notice">Accept</div><p>Body</p>') == "Body"

    def test_by_default_id(self):
        assert _text('<div id="sidebar">Side</div><p>Body</p>') == "Body"

    @pytest.mark.parametrize(
        "class_name",
        ["cta", "author-bio", "avatar", "pagination", "prev-next", "newsletter-signup", "ad"],
    )
    def test_chrome_classes(self, class_name):
        assert _text(f'<div class="{class_name}">Chrome</div><p>Body</p>') == "Body"

    def test_content_classes_kept(self):
        assert _text('<div class="article-body"><p>Body</p></div>') == "Body"

    def test_descendants_of_kept_elements_searched(self):
        html = '<main><div><p>Body</p><div class="share-links">Share</div></div></main>'
        assert _text(html) == "Body"

    def test_full_page(self, article_html):
        document = _extract(article_html)
        text = document.get_text(" ", strip=True)
        assert "Static sites are" in text
        assert "Popular posts" not in text
        assert "Copyright" not in text
        assert "cookies" not in text
        assert "Jane writes" not in text
        assert document.find("nav") is None

    def test_none_options_same_as_defaults(self, article_html):
        a = _extract(article_html)
        b = _extract(article_html, ExtractOptions())
        assert str(a) == str(b)


# ---------------------------------------------------------------------------
# keep_* flags and custom additions
# ---------------------------------------------------------------------------

class TestExtractOptions:
    def test_keep_header(self):
        html = "<header><h1>Title</h1></header><p>Body</p>"
        assert _text(html, ExtractOptions(keep_header=True)) == "Title Body"

    def test_keep_footer(self):
        html = "<p>Body</p><footer>Foot</footer>"
        assert _text(html, ExtractOptions(keep_footer=True)) == "Body Foot"

    def test_keep_nav(self):
        html = "<nav>Menu</nav><p>Body</p>"
        assert _text(html, ExtractOptions(keep_nav=True)) == "Menu Body"

    def test_custom_strip_tags(self):
        assert _text("<section>Gone</section><p>Body</p>", ExtractOptions(strip_tags=["section"])) == "Body"

    def test_custom_strip_roles(self):
        html = '<div role="alert">Alert</div><p>Body</p>'
        assert _text(html, ExtractOptions(strip_roles=["alert"])) == "Body"

    def test_custom_class_substring(self):
        html = '<div class="promo-box">Buy</div><p>Body</p>'
        assert _text(html, ExtractOptions(strip_classes=["promo"])) == "Body"

    def test_custom_class_regex(self):
        html = '<div class="PROMO">Buy</div><p>Body</p>'
        assert _text(html, ExtractOptions(strip_classes=[re.compile(r"^promo$", re.I)])) == "Body"

    def test_custom_ids(self):
        html = '<div id="promo-top">Buy</div><p>Body</p>'
        assert _text(html, ExtractOptions(strip_ids=["promo"])) == "Body"

    def test_mapping_options(self):
        html = "<section>Gone</section><p>Body</p>"
        assert _text(html, {"strip_tags": ["section"]}) == "Body"

    def test_single_pattern_coerced(self):
        assert ExtractOptions(strip_classes="promo").strip_classes == ("promo",)

    def test_invalid_pattern_type(self):
        with pytest.raises((TypeError, pydantic.ValidationError)):
            ExtractOptions(strip_classes=[42])

    def test_unknown_field(self):
        with pytest.raises(pydantic.ValidationError):
            ExtractOptions(strip_everything=True)

    def test_additions_never_remove_defaults(self):
        html = '<aside>Side</aside><div class="promo">Buy</div><p>Body</p>'
        assert _text(html, ExtractOptions(strip_classes=["promo"])) == "Body"


# ---------------------------------------------------------------------------
# Metadata extraction
# ---------------------------------------------------------------------------

class TestMetadata:
    def test_all_fields(self, article_html):
        assert extract_metadata(parse_html(article_html)) == {
            "title": "Building a Static Site Generator",
            "description": "A walkthrough of a tiny static site generator.",
            "image": "https://example.com/img/cover.png",
        }

    def test_title_only(self):
        assert extract_metadata(parse_html("<title>Hello</title><p>x</p>")) == {"title": "Hello"}

    def test_no_head(self):
        assert extract_metadata(parse_html("<p>x</p>")) == {}

    def test_empty_values_skipped(self):
        html = '<head><title>  </title><meta name="description" content=""></head>'
        assert extract_metadata(parse_html(html)) == {}

    def test_case_insensitive_names(self):
        html = (
            '<head><meta name="Description" content="Desc">'
            '<meta property="OG:Image" content="/i.png"></head>'
        )
        assert extract_metadata(parse_html(html)) == {"description": "Desc", "image": "/i.png"}

    def test_unrelated_meta_ignored(self):
        html = '<head><meta name="keywords" content="a, b"></head>'
        assert extract_metadata(parse_html(html)) == {}
