"""
Blueprint with a few pages that use the link helpers from templates.

Routes:
    - GET /: home page
    - GET /about: about page
    - GET /contact: contact page with an obfuscated mailto link

Each page renders the same navigation bar; the entry for the page being
viewed is rendered as plain text instead of a link.
"""

from flask import Blueprint, current_app, render_template_string


# =============================================================================
# BLUEPRINT DEFINITION
# =============================================================================

demo_bp = Blueprint('demo', __name__)

PAGE_TEMPLATE = """<!doctype html>
<html>
<head><title>{{ title }}</title></head>
<body>
<nav>
{{ link_unless_current_page("Home", {"endpoint": "demo.index"}) }} |
{{ link_unless_current_page("About", {"endpoint": "demo.about"}) }} |
{{ link_unless_current_page("Contact", {"endpoint": "demo.contact"}) }}
</nav>
<h1>{{ title }}</h1>
{% if contact_email %}
<p>Write to {{ render_mail_link(contact_email, "us", {"encode": "hex", "class": "mail"}) }}.</p>
{% endif %}
</body>
</html>
"""


# =============================================================================
# ROUTES
# =============================================================================

@demo_bp.route("/")
def index():
    """Home page."""
    return render_template_string(PAGE_TEMPLATE, title="Home")


@demo_bp.route("/about")
def about():
    """About page."""
    return render_template_string(PAGE_TEMPLATE, title="About")


@demo_bp.route("/contact")
def contact():
    """Contact page, showing ``DEMO_CONTACT_EMAIL`` hex-encoded."""
    return render_template_string(
        PAGE_TEMPLATE,
        title="Contact",
        contact_email=current_app.config.get("DEMO_CONTACT_EMAIL", "contact@example.com"),
    )
