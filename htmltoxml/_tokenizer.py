from .constants import asciiLetters, nameCharacters, spaceCharacters
from .constants import newlineCharacters, voidElements
from ._entities import resolveEntities

doubleQuoteReference = "&#34;"

attributeSpecialCharacters = frozenset(("<", ">", "/", "=", '"'))
unquotedValueStopCharacters = spaceCharacters | frozenset(("<", ">", "/", '"'))


class Tag(object):
    """A start or end tag read from the input.

    attributes holds the normalized text between the element name and the
    closing '>': values quoted with '"', stray quotes and references escaped.
    """

    def __init__(self, name, isEndTag=False, isSelfClosing=False, attributes=""):
        self.name = name
        self.isEndTag = isEndTag
        self.isSelfClosing = isSelfClosing
        self.attributes = attributes

    def __repr__(self):
        return "<Tag %s%s%s%s>" % ("/" if self.isEndTag else "", self.name,
                                   self.attributes,
                                   "/" if self.isSelfClosing else "")

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (self.name, self.isEndTag, self.isSelfClosing, self.attributes) == \
            (other.name, other.isEndTag, other.isSelfClosing, other.attributes)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class TagParser(object):
    """Reads markup that starts with '<' from a cursor.

    * parseTag() returns a Tag, or None if the text is not a tag. In the
      latter case the cursor is left just past the '<' so the caller can
      emit it as text and carry on.
    * skipComment() and skipDeclaration() consume "<!--...-->" and
      "<!...>" without producing anything.
    """

    def __init__(self, cursor):
        self.cursor = cursor

    def parseTag(self):
        start = self.cursor.position
        tag = self._parseTag()
        if tag is None:
            self.cursor.seek(start + 1)
        return tag

    def _parseTag(self):
        cursor = self.cursor
        assert cursor.peek() == "<"
        cursor.advance()

        isEndTag = False
        if cursor.peek() == "/":
            isEndTag = True
            cursor.advance()

        name = self.parseName()
        if name is None:
            return None

        # Void elements are written self-closing however the tag was written
        tag = Tag(name, isEndTag, name in voidElements)
        if not self.parseAttributes(tag):
            return None
        return tag

    def parseName(self):
        """Consume and return the lowercased element name, or None.

        A name is an ASCII letter followed by letters, digits and ':', ended
        by whitespace, '/' or '>'. A trailing ':' is rejected so that text
        such as "<http://example.com>" is not mistaken for a tag.
        """
        cursor = self.cursor
        if cursor.peek() not in asciiLetters:
            return None

        offset = 1
        while cursor.peek(offset) in nameCharacters:
            offset += 1

        c = cursor.peek(offset)
        if c not in (">", "/") and c not in spaceCharacters:
            return None
        if cursor.peek(offset - 1) == ":":
            return None

        name = cursor.substring(cursor.position, offset).lower()
        cursor.advance(offset)
        return name

    def parseAttributes(self, tag):
        """Consume everything up to and including the closing '>'.

        Returns False if the tag is never closed.
        """
        cursor = self.cursor
        attributes = []
        while True:
            if cursor.atEnd:
                return False
            c = cursor.peek()
            if c == ">":
                break
            elif c == "<":
                return False
            elif c == "/":
                if cursor.peek(1) == ">":
                    tag.isSelfClosing = True
                # A solidus anywhere else outside a value is dropped
                cursor.advance()
            elif c == "=":
                attributes.append(c)
                cursor.advance()
                attributes.append(cursor.charsUntil(spaceCharacters, True))
                if not self.parseAttributeValue(attributes):
                    return False
            elif c == '"':
                attributes.append(doubleQuoteReference)
                cursor.advance()
            else:
                attributes.append(cursor.charsUntil(attributeSpecialCharacters))
        cursor.advance()

        text = "".join(attributes)
        if "&" in text:
            text = resolveEntities(text)
        tag.attributes = text
        return True

    def parseAttributeValue(self, attributes):
        """Consume one attribute value and append it, double quoted."""
        cursor = self.cursor
        quote = cursor.peek()
        attributes.append('"')
        if quote in ('"', "'"):
            cursor.advance()
            stopCharacters = frozenset((quote, '"', "<", ">"))
            while True:
                attributes.append(cursor.charsUntil(stopCharacters))
                if cursor.atEnd:
                    # Unterminated value
                    return False
                c = cursor.peek()
                if c == quote:
                    cursor.advance()
                    break
                elif c == ">":
                    attributes.append("&gt;")
                elif c == '"':
                    attributes.append(doubleQuoteReference)
                else:
                    attributes.append("&lt;")
                cursor.advance()
        else:
            while True:
                attributes.append(cursor.charsUntil(unquotedValueStopCharacters))
                c = cursor.peek()
                if c == '"':
                    attributes.append(doubleQuoteReference)
                    cursor.advance()
                elif c == "/" and cursor.peek(1) != ">":
                    attributes.append(c)
                    cursor.advance()
                else:
                    break
        attributes.append('"')
        return True

    def skipComment(self):
        """Skip "<!--" up to and including the next "-->".

        Returns False if the input ended first; everything to the end of the
        input is then skipped.
        """
        cursor = self.cursor
        assert cursor.startsWith("<!--")
        cursor.advance(4)
        while not cursor.atEnd:
            cursor.charsUntil("-")
            if cursor.startsWith("-->"):
                cursor.advance(3)
                return True
            cursor.advance()
        return False

    def skipDeclaration(self):
        """Skip "<!" up to and including the next ">", along with any line
        breaks directly after it.

        Returns False if the input ended first.
        """
        cursor = self.cursor
        assert cursor.startsWith("<!")
        cursor.advance(2)
        cursor.charsUntil(">")
        if cursor.atEnd:
            return False
        cursor.advance()
        cursor.charsUntil(newlineCharacters, True)
        return True
