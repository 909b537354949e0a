from urllib.parse import unquote

from markupsafe import Markup

from link_helpers.encoding import confirm_to_javascript, hex_encode_address, javascript_escape
from link_helpers.tags import content_tag, html_escape, tag, tag_options


def test_html_escape_escapes_plain_text_only():
    assert html_escape("<b>&") == "&lt;b&gt;&amp;"
    assert html_escape(Markup("<b>")) == "<b>"
    assert html_escape(None) == ""


def test_tag_options_order_and_special_values():
    rendered = tag_options({"id": "x", "hidden": True, "title": None, "disabled": False, "data-q": 'a"b'})
    assert rendered == ' id="x" hidden="hidden" data-q="a&quot;b"'


def test_tag_and_content_tag():
    img = tag("img", {"src": "/a.png", "alt": "A"})
    assert img == '<img src="/a.png" alt="A" />'
    assert isinstance(img, Markup)
    assert content_tag("a", img, {"href": "/"}) == '<a href="/"><img src="/a.png" alt="A" /></a>'
    assert content_tag("p", "1 < 2") == "<p>1 &lt; 2</p>"


def test_confirm_guard_escapes_single_quotes():
    assert confirm_to_javascript("Sure?") == "return confirm('Sure?');"
    assert confirm_to_javascript("Don't") == "return confirm('Don\\'t');"


def test_hex_encode_address_keeps_non_word_characters():
    encoded = hex_encode_address("me@x.com")
    assert encoded == "%6d%65@%78.%63%6f%6d"
    assert unquote(encoded) == "me@x.com"


def test_hex_encode_address_leaves_non_ascii_literal():
    assert hex_encode_address("a_b+é@x.fr") == "%61%5f%62+é@%78.%66%72"


def test_javascript_escape():
    assert javascript_escape("a '") == "%61%20%27"
    assert javascript_escape("é€") == "%e9%u20ac"
    assert javascript_escape("\U0001F600") == "%ud83d%ude00"


def test_attribute_values_keep_single_quotes():
    assert tag_options({"onclick": "return confirm('Sure?');"}) == " onclick=\"return confirm('Sure?');\""
    assert tag_options({"title": "a<b>&c"}) == ' title="a&lt;b&gt;&amp;c"'
