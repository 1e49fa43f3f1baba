import pytest

from tinydom import (
    CommentTerminatorError,
    DocumentType,
    Element,
    Text,
    TextPreservingViolationError,
    UnsupportedNodeError,
    ViolationKind,
    comment,
    element,
    fragment,
    raw_html,
    serialize_document,
    serialize_fragment,
    serialize_node,
    text,
)
from tinydom.serializer import TEXT_PRESERVING_ELEMENTS, VOID_ELEMENTS, escape_attribute, escape_text


@pytest.mark.parametrize("value", ["", "plain", "Hello, world!", "tabs\tand\nnewlines", "ünïcødé"])
def test_safe_text_is_unchanged(value):
    assert serialize_fragment(element("a", value)) == f"<a>{value}</a>"


def test_simple_element():
    assert serialize_fragment(element("a")) == "<a></a>"


def test_simple_attributes():
    assert serialize_fragment(element("a", {"id": "test"})) == '<a id="test"></a>'


def test_attributes_in_insertion_order():
    built = element("a", {"href": "/", "class": "x"}, id="y")

    assert serialize_fragment(built) == '<a href="/" class="x" id="y"></a>'


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("&", "&amp;"),
        ("\xa0", "&nbsp;"),
        ('"', "&quot;"),
        ('&""&amp;', "&amp;&quot;&quot;&amp;amp;"),
        ("<>", "<>"),
    ],
)
def test_attribute_escaping(value, expected):
    assert escape_attribute(value) == expected
    assert serialize_fragment(element("a", {"id": value})) == f'<a id="{expected}"></a>'


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("&", "&amp;"),
        ("\xa0", "&nbsp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ("&<<>>&amp;", "&amp;&lt;&lt;&gt;&gt;&amp;amp;"),
        ('"', '"'),
    ],
)
def test_text_escaping(value, expected):
    assert escape_text(value) == expected
    assert serialize_fragment(element("a", text(value))) == f"<a>{expected}</a>"


@pytest.mark.parametrize("name", sorted(VOID_ELEMENTS))
def test_void_elements_drop_children(name):
    assert serialize_fragment(element(name, "test", element("b"))) == f"<{name}>"


def test_void_elements_keep_attributes():
    assert serialize_fragment(element("img", src="a.png", alt="")) == '<img src="a.png" alt="">'


def test_void_element_node_serializes_to_opening_tag():
    assert serialize_node(element("br", "test")) == "<br>"


def test_comments():
    assert serialize_fragment(element("a", comment("test"))) == "<a><!--test--></a>"


def test_comment_terminator_is_rejected():
    with pytest.raises(CommentTerminatorError, match="Comment containing -->"):
        serialize_fragment(comment("-->"))

    with pytest.raises(CommentTerminatorError):
        serialize_fragment(element("div", comment("a --> b")))


def test_raw_html_is_not_escaped():
    assert serialize_fragment(element("div", raw_html("<b>&nbsp;</b>"))) == "<div><b>&nbsp;</b></div>"


def test_doctype():
    assert serialize_node(DocumentType("html")) == "<!DOCTYPE html>"


def test_comment_opener_in_normal_element():
    assert serialize_fragment(element("p", "<!--")) == "<p>&lt;!--</p>"


def test_text_preserving_element_is_not_escaped():
    assert serialize_fragment(element("script", "test")) == "<script>test</script>"
    assert serialize_fragment(element("style", "a > b { x: '&' }")) == "<style>a > b { x: '&' }</style>"


@pytest.mark.parametrize(
    ("name", "value", "kind"),
    [
        ("script", "<!--", ViolationKind.COMMENT_OPENER),
        ("script", "<script", ViolationKind.OPENING_TAG),
        ("script", "</script", ViolationKind.CLOSING_TAG),
        ("style", "a</style>", ViolationKind.CLOSING_TAG),
        ("iframe", "<iframe src=x>", ViolationKind.OPENING_TAG),
    ],
)
def test_text_preserving_violations(name, value, kind):
    with pytest.raises(TextPreservingViolationError) as info:
        serialize_fragment(element(name, value))

    assert info.value.kind is kind
    assert info.value.element == name
    assert str(info.value).startswith(kind.value)


def test_text_preserving_checks_are_case_sensitive():
    assert serialize_fragment(element("script", "</SCRIPT")) == "<script></SCRIPT</script>"


def test_text_preserving_checks_only_use_own_tag_name():
    assert serialize_fragment(element("style", "</script>")) == "<style></script></style>"


def test_text_preserving_checks_are_per_text_node():
    # Adjacent text nodes are not merged before checking.
    assert serialize_fragment(element("script", "<", "!--")) == "<script><!--</script>"


def test_text_preserving_only_applies_to_direct_children():
    assert serialize_fragment(element("script", element("b", "<"))) == "<script><b>&lt;</b></script>"


def test_text_preserving_element_list():
    assert frozenset(
        {"style", "script", "xmp", "iframe", "noembed", "noframes", "plaintext"},
    ) == TEXT_PRESERVING_ELEMENTS


def test_unsupported_child_node():
    bad = Element("a", {}, (0,))  # type: ignore[arg-type]

    with pytest.raises(UnsupportedNodeError, match="unsupported node 0") as info:
        serialize_node(bad)

    assert info.value.node == 0


def test_unsupported_root_node():
    with pytest.raises(UnsupportedNodeError):
        serialize_node(object())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "node",
    [
        Text(1),  # type: ignore[arg-type]
        Element("a", {"x": 1}),  # type: ignore[dict-item]
        Element(None),  # type: ignore[arg-type]
        DocumentType(None),  # type: ignore[arg-type]
        Element("div", {}, (Text(b"x"),)),  # type: ignore[arg-type]
    ],
)
def test_nodes_with_non_string_payloads(node):
    with pytest.raises(UnsupportedNodeError):
        serialize_fragment(node)


def test_fragment_with_text_and_comment():
    assert serialize_fragment(text("Test")) == "Test"
    assert serialize_fragment(comment("Test")) == "<!--Test-->"
    assert serialize_fragment("a & b") == "a &amp; b"


def test_fragment_with_multiple_nodes():
    assert serialize_fragment(comment("Test"), text("spam"), element("a")) == "<!--Test-->spam<a></a>"


def test_fragment_node():
    assert serialize_node(fragment("a", element("b"))) == "a<b></b>"


def test_empty_document():
    assert serialize_document() == "<!DOCTYPE html>"


def test_simple_document():
    assert serialize_document(element("title", "Test")) == "<!DOCTYPE html><title>Test</title>"
    assert serialize_document(comment("Test")) == "<!DOCTYPE html><!--Test-->"


def test_complete_document():
    doc = serialize_document(
        element(
            "html",
            element("head", element("title", "Test")),
            element("body", element("h1", "Hello world")),
        ),
    )

    assert doc == (
        "<!DOCTYPE html><html><head><title>Test</title></head>"
        "<body><h1>Hello world</h1></body></html>"
    )


def test_node_html_property():
    built = element("p", {"class": "x"}, "a < b")

    assert built.html == '<p class="x">a &lt; b</p>'
    assert str(built) == built.html
    assert Text("&").html == "&amp;"
