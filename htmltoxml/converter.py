import webencodings

from .constants import markupCharacters, rawtextElements, spaceCharacters
from .constants import voidElements, cdataStart, cdataEnd, cdataSplit
from ._inputstream import TextBuffer, TextCursor
from ._entities import convertEntity
from ._tokenizer import TagParser
from ._stack import OpenElements
from .policies import getPolicy, evaluate, CONTINUE, CLOSE_AND_STOP


def convert(source, encoding=None):
    """Convert an HTML document or fragment to well-formed XML

    :arg source: the HTML, either text or bytes

    :arg encoding: for bytes, the label of their encoding; defaults to utf-8.
        A byte order mark takes precedence over it.

    :returns: the XML text; empty input, and input without any of '<', '>'
        or '&', is returned unchanged

    Example:

    >>> from htmltoxml import convert
    >>> convert('<p>Tom &amp; Jerry<br>')
    '<p>Tom &amp; Jerry<br/></p>'

    """
    return HTMLToXMLConverter().convert(source, encoding=encoding)


def decodeSource(data, encoding=None):
    """Decode bytes using a WHATWG encoding label.

    Returns (text, encodingName).
    """
    fallback = webencodings.lookup(encoding or "utf-8")
    if fallback is None:
        raise LookupError("Unknown encoding label: %r" % encoding)
    text, documentEncoding = webencodings.decode(data, fallback)
    return text, documentEncoding.name


def isShieldedRawText(text):
    """Return True if text is already a single comment-shielded CDATA section,
    as written by a previous conversion."""
    if len(text) < len(cdataStart) + len(cdataEnd):
        return False
    if not (text.startswith(cdataStart) and text.endswith(cdataEnd)):
        return False
    inner = text[len(cdataStart):len(text) - len(cdataEnd)]
    return "]]>" not in inner.replace(cdataSplit, "")


class HTMLToXMLConverter(object):
    """Single pass HTML to XML converter.

    Malformed markup is repaired as it is read: end tags the HTML left out
    are inserted, stray end tags are dropped, void elements are written
    self-closing, attribute values are quoted, and character references are
    normalized to numeric form. Each repair made during the last conversion
    is recorded in self.errors as (position, errorcode, datavars).

    An instance converts one document at a time; use one instance per thread.
    """

    def __init__(self):
        self.errors = []
        self.documentEncoding = None
        self.openElements = OpenElements()
        self.cursor = None
        self.output = None
        self.tagParser = None

    def reset(self, cursor=None, output=None):
        self.errors = []
        self.openElements = OpenElements()
        self.cursor = cursor
        self.output = output
        self.tagParser = TagParser(cursor) if cursor is not None else None

    def convert(self, source, encoding=None):
        """Convert source, a str or bytes, and return the XML as a str"""
        self.documentEncoding = None
        if isinstance(source, bytes):
            source, self.documentEncoding = decodeSource(source, encoding)
        elif encoding is not None:
            raise TypeError("Cannot explicitly set an encoding with a unicode string")

        self.reset()
        if not source:
            return source
        if not isinstance(source, str):
            raise TypeError("Expected str or bytes, got %s" % type(source).__name__)
        if not any(c in source for c in markupCharacters):
            return source

        output = TextBuffer()
        self.convertStream(TextCursor(source), output)
        return output.getvalue()

    def convertStream(self, cursor, output):
        """Convert everything from cursor's position onwards, appending the
        XML to output, a TextBuffer."""
        if getattr(cursor, "buffer", None) is output:
            raise ValueError("cursor must not read from the output buffer")

        self.reset(cursor, output)
        while not cursor.atEnd:
            c = cursor.peek()
            if c == "<":
                self.processMarkup()
            elif c == ">":
                # Never part of a tag once we get here
                output.append("&gt;")
                cursor.advance()
            elif c == "&":
                convertEntity(cursor, output, self.parseError)
            else:
                output.append(cursor.charsUntil(markupCharacters))

        self.closeOpenElements(len(self.openElements))

    def parseError(self, errorcode, datavars=None, position=None):
        if position is None:
            position = self.cursor.position
        self.errors.append((position, errorcode, datavars or {}))

    def processMarkup(self):
        cursor = self.cursor
        start = cursor.position
        if cursor.startsWith("<!--"):
            if not self.tagParser.skipComment():
                self.parseError("eof-in-comment", position=start)
            return

        if cursor.peek(1) == "!":
            if not self.tagParser.skipDeclaration():
                self.parseError("eof-in-declaration", position=start)
            return

        tag = self.tagParser.parseTag()
        if tag is None:
            self.parseError("unparsable-tag", position=start)
            self.output.append("&lt;")
        elif tag.isEndTag:
            self.processEndTag(tag, start)
        else:
            self.processStartTag(tag, start)

    def processStartTag(self, tag, start):
        output = self.output
        self.closeImpliedElements(tag.name)

        output.append("<")
        output.append(tag.name)
        output.append(tag.attributes)
        if tag.isSelfClosing:
            if output.lastChar() == " ":
                output.trimLast()
            output.append("/>")
            return

        self.openElements.push(tag.name)
        output.append(">")
        if tag.name in rawtextElements:
            self.processRawText(tag.name, start)

    def processEndTag(self, tag, start):
        if tag.isSelfClosing:
            if tag.name in voidElements:
                self.parseError("unexpected-end-tag", {"name": tag.name}, start)
            else:
                self.parseError("self-closing-end-tag", {"name": tag.name}, start)
            return

        index = self.openElements.indexOf(tag.name)
        if index == -1:
            self.parseError("unexpected-end-tag", {"name": tag.name}, start)
            return
        self.closeOpenElements(len(self.openElements) - index)

    def processRawText(self, name, start):
        """Copy script or style content through untouched.

        The content is wrapped in a CDATA section hidden inside comments so
        that it is inert both to an XML parser and to a script or style
        engine. Empty content is left alone, and so is content that is already
        shielded this way.
        """
        cursor = self.cursor
        content = []
        while True:
            content.append(cursor.charsUntil("<"))
            if cursor.atEnd:
                self.parseError("eof-in-raw-text", {"name": name}, start)
                break
            if self.atRawTextEnd(name):
                break
            content.append("<")
            cursor.advance()

        text = "".join(content)
        if isShieldedRawText(text):
            self.output.append(text)
        elif text:
            self.output.append(cdataStart)
            self.output.append(text.replace("]]>", cdataSplit))
            self.output.append(cdataEnd)

    def atRawTextEnd(self, name):
        cursor = self.cursor
        if not cursor.startsWith("</" + name, ignoreCase=True):
            return False
        c = cursor.peek(len(name) + 2)
        return c == ">" or c in spaceCharacters

    def closeImpliedElements(self, childName):
        """Close the open elements that the start of childName ends."""
        openElements = self.openElements
        index = len(openElements) - 1
        while index >= 0:
            policy = getPolicy(openElements[index])
            if policy is not None:
                result = evaluate(policy, openElements, index, childName)
                if result != CONTINUE:
                    self.closeOpenElements(len(openElements) - index)
                    if result == CLOSE_AND_STOP:
                        break
            index -= 1

    def closeOpenElements(self, count):
        """Pop count elements, innermost first, writing their end tags."""
        for _ in range(count):
            name = self.openElements.pop()
            self.output.append("</")
            self.output.append(name)
            self.output.append(">")
