"""
Pytest configuration and fixtures for headmeta tests
"""

import pytest
from lxml import html as lxml_html

from headmeta import HeadMeta


@pytest.fixture
def head_meta():
    """Fresh registry with default state"""
    return HeadMeta()


@pytest.fixture
def populated_head_meta():
    """Registry with at least one entry in every category"""
    meta = HeadMeta()
    meta.add_custom("<!--a-->")
    meta.set_link("a.css", {"rel": "stylesheet"})
    meta.set_property("og:title", "Home")
    meta.set_itemprop("image", "/a.png")
    meta.set_http_equiv("refresh", "5")
    meta.set_name("viewport", "width=device-width")
    return meta


@pytest.fixture
def parse_head():
    """Factory fixture parsing a rendered fragment as the content of <head>.

    Usage:
        def test_example(parse_head):
            elements = parse_head('<meta charset="UTF-8">')
            # elements[0].tag == "meta"
    """

    def _parse(fragment: str) -> list:
        document = lxml_html.document_fromstring(
            f"<html><head>{fragment}</head><body></body></html>".encode("utf-8")
        )
        return [elem for elem in document.head if isinstance(elem.tag, str)]

    return _parse


@pytest.fixture
def sample_document_yaml():
    """Head meta document covering every category"""
    return """
charset: UTF-8
description: Calculate your healthcare allowance.
name:
  viewport: width=device-width, initial-scale=1
  robots:
    content: index, follow
    data-source: cms
http-equiv:
  refresh: 30
itemprop:
  image: /static/logo.png
property:
  og:title: Zorgtoeslag
link:
  /static/site.css:
    rel: stylesheet
  /favicon.ico:
    rel: icon
custom:
  - <!-- analytics -->
"""
