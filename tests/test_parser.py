"""Tests for app.services.parser."""

from app.services.parser import all_text, attr, build_tree, select, select_first, text


class TestBuildTree:
    def test_malformed_markup_does_not_raise(self):
        tree = build_tree("<html><body><div><p>Unclosed <b>bold</div></span><h1>Title")
        assert text(select_first(tree, "h1")) == "Title"

    def test_empty_document(self):
        tree = build_tree("")
        assert select(tree, "p") == []

    def test_fragment_without_html_wrapper(self):
        tree = build_tree("<h1>Only a heading</h1>")
        assert [text(h) for h in select(tree, "h1")] == ["Only a heading"]


class TestSelect:
    def test_returns_elements_in_document_order(self):
        tree = build_tree("<p>one</p><div><p>two</p></div><p>three</p>")
        assert [text(p) for p in select(tree, "p")] == ["one", "two", "three"]

    def test_attribute_equals_selector(self):
        tree = build_tree(
            '<meta name="keywords" content="a,b">'
            '<meta name="description" content="Desc">'
        )
        assert attr(select_first(tree, 'meta[name="description"]'), "content") == "Desc"

    def test_attribute_presence_selector(self):
        tree = build_tree('<a>no href</a><a href="/x">x</a>')
        anchors = select(tree, "a[href]")
        assert len(anchors) == 1
        assert attr(anchors[0], "href") == "/x"

    def test_select_first_returns_none_when_absent(self):
        assert select_first(build_tree("<p>x</p>"), "title") is None


class TestAttr:
    def test_missing_attribute(self):
        img = select_first(build_tree("<img src='/a.png'>"), "img")
        assert attr(img, "alt") is None

    def test_missing_element(self):
        assert attr(None, "href") is None

    def test_multi_valued_attribute_is_joined(self):
        link = select_first(build_tree('<link rel="canonical nofollow" href="/c">'), "link")
        assert attr(link, "rel") == "canonical nofollow"

    def test_empty_attribute_is_empty_string(self):
        img = select_first(build_tree('<img src="/a.png" alt="">'), "img")
        assert attr(img, "alt") == ""


class TestText:
    def test_text_is_trimmed_and_includes_subtree(self):
        h1 = select_first(build_tree("<h1>\n  Hello <em>there</em>  \n</h1>"), "h1")
        assert text(h1) == "Hello there"

    def test_missing_element_is_empty(self):
        assert text(None) == ""


class TestAllText:
    def test_includes_script_and_style_bodies(self):
        body = select_first(
            build_tree("<body><p>Hi</p><script>run()</script><style>p{}</style></body>"), "body"
        )
        assert all_text(body) == "Hirun()p{}"

    def test_excludes_comments(self):
        body = select_first(build_tree("<body>a<!-- note -->b</body>"), "body")
        assert all_text(body) == "ab"

    def test_get_text_differs_on_scripts(self):
        body = select_first(build_tree("<body><p>Hi</p><script>run()</script></body>"), "body")
        assert text(body) == "Hi"
        assert all_text(body) == "Hirun()"

    def test_missing_element_is_empty(self):
        assert all_text(None) == ""
