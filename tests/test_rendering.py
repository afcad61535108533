import pytest

from core.rendering import environment, safe_url


@pytest.mark.parametrize("url", [
    "https://guestify.test/app/",
    "http://guestify.test/",
    "mailto:help@guestify.test",
    "/app/pipeline/",
    "?panel=billing",
    "#",
])
def test_safe_url_keeps_web_and_relative_urls(url):
    assert safe_url(url) == url


@pytest.mark.parametrize("url", [
    "javascript:alert(1)",
    "JavaScript:alert(1)",
    " javascript:alert(1)",
    "java\tscript:alert(1)",
    "data:text/html;base64,PHNjcmlwdD4=",
    "vbscript:msgbox(1)",
    "http://[::1",
])
def test_safe_url_blanks_other_schemes(url):
    assert safe_url(url) == ""


def test_safe_url_empty_values():
    assert safe_url(None) == ""
    assert safe_url("") == ""


def test_safe_url_filter_is_registered():
    template = environment.from_string('<a href="{{ url|safe_url }}">x</a>')
    assert template.render(url="javascript:alert(1)") == '<a href="">x</a>'
    assert template.render(url="/app/") == '<a href="/app/">x</a>'
