"""
HTML to XML converter.

htmltoxml turns HTML, including the malformed HTML found in real documents,
into well-formed XML in a single pass. Omitted end tags are inserted, stray
end tags are dropped, void elements are self-closed, attribute values are
quoted, named character references become numeric references and the content
of script and style elements is protected with a CDATA section.

Example usage::

    import htmltoxml
    with open("my_document.html", "rb") as f:
        xml = htmltoxml.convert(f.read())

To inspect the repairs that were made, use a converter instance::

    converter = htmltoxml.HTMLToXMLConverter()
    xml = converter.convert("<p>One<p>Two</div>")
    converter.errors  # [(12, 'unexpected-end-tag', {'name': 'div'})]
"""

from .converter import HTMLToXMLConverter, convert
from ._inputstream import TextBuffer, TextCursor, BufferCursor
from ._entities import resolveEntities
from .policies import getPolicy

__all__ = ["HTMLToXMLConverter", "convert", "TextBuffer", "TextCursor",
           "BufferCursor", "resolveEntities", "getPolicy"]

# this has to be at the top level, see how setup.py parses this
__version__ = "1.0"
