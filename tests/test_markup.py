"""Unit tests for the sanitizing renderer."""

from unittest.mock import patch

import pytest

from qapress.render import render, sanitize

ADVERSARIAL = [
    "<script>alert(1)</script>",
    "hello <script src='https://evil.example/x.js'></script> world",
    '<img src="x" onerror="alert(1)">',
    '<a href="javascript:alert(1)">click</a>',
    "[click](javascript:alert(1))",
    '<iframe src="https://evil.example"></iframe>',
    '<p onclick="steal()">text</p>',
    "<svg onload=alert(1)><circle/></svg>",
    "<<script>script>alert(1)<</script>/script>",
    '<div style="background:url(javascript:alert(1))">x</div>',
    "<object data='x.swf'></object><embed src='x.swf'>",
]


class TestRenderMarkdown:
    """Lightweight markup becomes HTML."""

    def test_heading(self):
        assert "<h1>Title</h1>" in render("# Title")

    def test_emphasis(self):
        out = render("some *em* and **strong**")
        assert "<em>em</em>" in out
        assert "<strong>strong</strong>" in out

    def test_link(self):
        out = render("[site](https://example.com)")
        assert '<a href="https://example.com">site</a>' in out

    def test_list(self):
        out = render("- one\n- two\n")
        assert "<ul>" in out
        assert "<li>one</li>" in out

    def test_code_span(self):
        assert "<code>x = 1</code>" in render("use `x = 1` here")

    def test_plain_body(self):
        assert render("Bible and evolution discussion.") == "<p>Bible and evolution discussion.</p>"

    def test_empty_body(self):
        assert render("") == ""


class TestRenderSafety:
    """Script-capable constructs never survive."""

    @pytest.mark.parametrize("body", ADVERSARIAL)
    def test_no_script_or_handlers(self, body):
        out = render(body).lower()
        assert "<script" not in out
        assert "onerror" not in out
        assert "onclick" not in out
        assert "onload" not in out
        assert "href=\"javascript" not in out
        assert "src=\"javascript" not in out
        assert "<iframe" not in out
        assert "<object" not in out
        assert "<embed" not in out

    def test_formatting_kept_around_stripped_content(self):
        out = render("**bold** <script>alert(1)</script>")
        assert "<strong>bold</strong>" in out
        assert "<script" not in out

    def test_malformed_markup_does_not_raise(self):
        out = render("<p><b>unclosed <i>tags</p> & < > [link](")
        assert isinstance(out, str)

    def test_conversion_failure_falls_back_to_escaped_text(self):
        with patch("qapress.render.markup.markdown.markdown", side_effect=RuntimeError("bad")):
            out = render("<b>x</b> & y")
        assert out == "<p>&lt;b&gt;x&lt;/b&gt; &amp; y</p>"


class TestIdempotence:
    """Sanitizing or rendering safe HTML again changes nothing."""

    BODIES = [
        "# Title\n\nSome *text* with a [link](https://example.com).",
        "- a\n- b\n\n`code` and **bold**",
        "Ampersands & <angle> brackets",
        *ADVERSARIAL,
        "<div>raw</div>\n\n*x*",
        "<section>intro</section>\n\n# Head\n\ntext",
        "<article>stripped block</article>\n\nafter",
        "<script>alert(1)</script>\n\n**bold**",
        "```python\nx = 1\n```\n\n> quoted *text*",
    ]

    @pytest.mark.parametrize("body", BODIES)
    def test_sanitize_is_idempotent_on_rendered_output(self, body):
        once = render(body)
        assert sanitize(once) == once
        assert sanitize(sanitize(once)) == once

    @pytest.mark.parametrize("body", BODIES)
    def test_render_is_idempotent(self, body):
        once = render(body)
        assert render(once) == once

    def test_rerender_of_simple_output_is_stable(self):
        once = render("Plain paragraph.")
        assert render(once) == once

    def test_structural_block_kept(self):
        out = render("<div>raw</div>\n\n*x*")
        assert "<div>raw</div>" in out
        assert "<p><em>x</em></p>" in out

    def test_bare_text_from_stripped_block_is_wrapped(self):
        out = render("<article>stripped block</article>\n\nafter")
        assert "<article" not in out
        assert "<p>stripped block" in out
