"""Shared fixtures."""
import pytest

SAMPLE_XML = """<?xml version='1.0' encoding='utf-8'?>
<bookstore>
  <book category="C">
    <isbn>111</isbn>
    <title>A</title>
    <author>X</author>
    <year>2000</year>
    <price>9.99</price>
  </book>
  <book category="web">
    <isbn>222</isbn>
    <title>Learning XML</title>
    <author>Erik T. Ray</author>
    <author>Jane Doe</author>
    <year>2003</year>
    <price>39.95</price>
  </book>
</bookstore>
"""


@pytest.fixture
def catalog_file(tmp_path):
    """XML document with two books."""
    path = tmp_path / "books.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path
