from mdblog.services.markdown_renderer import DEFAULT_EXTENSIONS, MarkdownRenderer


def test_render_converts_markdown_to_html():
    html = MarkdownRenderer().render("# Title\n\nSome *emphasis* here.")

    assert "<h1" in html and "Title</h1>" in html
    assert "<em>emphasis</em>" in html


def test_render_supports_fenced_code_by_default():
    html = MarkdownRenderer().render("```\nprint('hi')\n```")

    assert "<pre><code>" in html
    assert "<p>```" not in html


def test_render_uses_configured_extensions():
    renderer = MarkdownRenderer(extensions=[])

    assert renderer.extensions == []
    assert MarkdownRenderer().extensions == list(DEFAULT_EXTENSIONS)
    assert renderer.render("plain") == "<p>plain</p>"
