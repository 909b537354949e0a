import pytest
from flask import Flask, render_template_string
from werkzeug.routing import BuildError

from link_helpers.app import create_app
from link_helpers.errors import LinkHelperError, MissingRequestContextError
from link_helpers.extension import current_link_helper
from link_helpers.helpers import LinkHelper
from link_helpers.urls import current_request_uri

app = create_app(DEMO_CONTACT_EMAIL="me@x.com")


@app.route("/pages/<int:page_id>")
def show_page(page_id):
    return render_template_string("{{ link_unless_current_page('Page', {'page_id': 1}) }}")


@app.route("/tags/<name>")
def show_tag(name):
    return render_template_string("{{ link_unless_current_page('Tag', {'name': name}) }}", name=name)


def test_demo_nav_skips_current_page():
    client = app.test_client()
    resp = client.get("/about")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert '<a href="/">Home</a>' in html
    assert '<a href="/contact">Contact</a>' in html
    assert '<a href="/about">About</a>' not in html
    assert "About |" in html


def test_demo_contact_page_hex_encodes_address():
    client = app.test_client()
    html = client.get("/contact").get_data(as_text=True)
    assert '<a class="mail" href="mailto:%6d%65@%78.%63%6f%6d">us</a>' in html


def test_route_query_without_endpoint_reuses_current_view():
    client = app.test_client()
    assert client.get("/pages/1").get_data(as_text=True) == "Page"
    assert client.get("/pages/2").get_data(as_text=True) == '<a href="/pages/1">Page</a>'


def test_is_current_page_compares_query_string():
    with app.test_request_context("/pages/3?tab=info"):
        helper = current_link_helper()
        assert helper.is_current_page({"endpoint": "show_page", "page_id": 3, "tab": "info"})
        assert not helper.is_current_page({"endpoint": "show_page", "page_id": 3})
        assert not helper.is_current_page({"endpoint": "demo.about"})


def test_request_uri_includes_script_root():
    with app.test_request_context("/about", base_url="http://localhost/site"):
        assert current_request_uri() == "/site/about"
        assert current_link_helper().is_current_page({"endpoint": "demo.about"})


def test_only_path_false_builds_external_url():
    with app.test_request_context("/"):
        helper = current_link_helper()
        assert helper.resolve_url({"endpoint": "demo.about", "only_path": False}) == "http://localhost/about"
        assert helper.resolve_url({"endpoint": "demo.about"}) == "/about"


def test_unknown_endpoint_propagates_build_error():
    with app.test_request_context("/"):
        with pytest.raises(BuildError):
            current_link_helper().render_link("Nope", {"endpoint": "missing"})


def test_template_globals_are_registered():
    with app.test_request_context("/"):
        assert render_template_string('{{ link_to("Docs", "http://docs") }}') == '<a href="http://docs">Docs</a>'
        assert render_template_string('{{ link_to_image("logo", "/") }}') == (
            '<a href="/"><img src="/images/logo.png" alt="Logo" /></a>'
        )
        assert render_template_string('{{ mail_to("me@x.com") }}') == '<a href="mailto:me@x.com">me@x.com</a>'
        assert render_template_string('{{ current_page("/") }}') == "True"
        assert render_template_string('{{ link_helper.images_path }}') == "/images"


def test_config_controls_image_directory():
    custom = create_app(LINK_HELPERS_IMAGES_PATH="/static/img")
    with custom.test_request_context("/"):
        assert 'src="/static/img/logo.png"' in current_link_helper().render_image_link("logo", "/")


def test_current_page_outside_request_raises():
    helper = LinkHelper()
    with pytest.raises(MissingRequestContextError):
        helper.is_current_page("/")
    with app.app_context():
        with pytest.raises(MissingRequestContextError):
            helper.resolve_url({"id": 1})


def test_current_link_helper_requires_extension():
    bare = Flask("bare")
    with bare.app_context():
        with pytest.raises(LinkHelperError):
            current_link_helper()


def test_current_page_matches_percent_encoded_paths():
    client = app.test_client()
    assert client.get("/tags/a%20b").get_data(as_text=True) == "Tag"
    assert client.get("/tags/caf%C3%A9").get_data(as_text=True) == "Tag"
    with app.test_request_context("/tags/a%20b"):
        assert current_request_uri() == "/tags/a%20b"
        helper = current_link_helper()
        assert helper.is_current_page({"endpoint": "show_tag", "name": "a b"})
        assert not helper.is_current_page({"endpoint": "show_tag", "name": "a"})
