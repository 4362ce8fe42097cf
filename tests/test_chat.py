"""Tests for chat rendering of text with fenced code blocks."""

from beautify.chat import format_for_chat


class TestText:
    def test_single_paragraph(self):
        assert format_for_chat("hello") == "<p>hello</p>"

    def test_line_breaks(self):
        assert format_for_chat("a\nb") == "<p>a<br>b</p>"

    def test_blank_line_splits_paragraphs(self):
        assert format_for_chat("a\n\nb") == "<p>a</p><p>b</p>"

    def test_markup_escaped(self):
        assert format_for_chat("<b> & </b>") == "<p>&lt;b&gt; &amp; &lt;/b&gt;</p>"

    def test_empty(self):
        assert format_for_chat("") == ""


class TestCodeBlocks:
    def test_code_block_between_text(self):
        out = format_for_chat("see\n```python\nx = 1\n```\ndone")
        assert out.startswith("<p>see</p><pre")
        assert out.endswith("</code></pre><p>done</p>")
        assert out.count("<pre") == 1

    def test_code_is_escaped(self):
        out = format_for_chat("```html\n<b>bold</b>\n```")
        assert "&lt;" in out
        assert "<b>" not in out

    def test_text_after_block_is_not_code(self):
        out = format_for_chat("```\nx\n```\nafter\n```js\ny\n```\nend")
        assert out.count("<pre") == 2
        assert "<p>after</p>" in out
        assert out.endswith("<p>end</p>")

    def test_unterminated_block_renders_as_code(self):
        out = format_for_chat("intro\n```json\n{\"a\": 1}")
        assert out.startswith("<p>intro</p><pre")
        assert out.endswith("</code></pre>")
