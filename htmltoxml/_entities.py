"""Conversion of HTML character references to XML-safe output.

Numeric references are kept, named references are replaced by decimal
numeric references, and any other '&' is escaped.
"""

from .constants import asciiLetters, asciiAlphanumeric, digits, hexDigits
from .constants import entities, isXMLCharacter
from ._inputstream import TextBuffer, TextCursor

replacementReference = "&#65533;"

# Digits needed to spell the highest code point, U+10FFFF, once leading
# zeros are dropped
maxReferenceDigits = {10: 7, 16: 6}


def lookupEntity(name):
    """Return the numeric reference for a named entity, or None.

    The exact name is tried first, then its lowercase form, so that
    "&MDASH;" still resolves.
    """
    value = entities.get(name)
    if value is None:
        value = entities.get(name.lower())
    return value


def _numericReferenceLength(cursor):
    """Return the length of a well formed numeric reference at the cursor,
    including the leading '&' and trailing ';', or 0."""
    if cursor.peek(1) != "#":
        return 0
    offset = 2
    allowed = digits
    if cursor.peek(offset) in ("x", "X"):
        offset += 1
        allowed = hexDigits
    start = offset
    while cursor.peek(offset) in allowed:
        offset += 1
    if offset == start or cursor.peek(offset) != ";":
        return 0
    return offset + 1


def _namedReferenceLength(cursor):
    """Return the length of the entity name following the '&' if it is
    terminated by ';', or 0."""
    if cursor.peek(1) not in asciiLetters:
        return 0
    offset = 2
    while cursor.peek(offset) in asciiAlphanumeric:
        offset += 1
    if cursor.peek(offset) != ";":
        return 0
    return offset - 1


def convertEntity(cursor, output, parseError=None):
    """Consume the reference starting at the '&' under the cursor.

    The XML form of the reference is appended to output and the cursor is
    left on the first character that was not consumed. parseError, if given,
    is called as parseError(errorcode, datavars) for each recovery.
    """
    assert cursor.peek() == "&"

    length = _numericReferenceLength(cursor)
    if length:
        reference = cursor.substring(cursor.position, length)
        isHex = reference[2] in ("x", "X")
        if isHex:
            radix, number = 16, reference[3:-1]
        else:
            radix, number = 10, reference[2:-1]
        number = number.lstrip("0") or "0"
        if len(number) > maxReferenceDigits[radix]:
            # Out of range; int() also refuses very long decimal strings
            charAsInt = 0x110000
        else:
            charAsInt = int(number, radix)
        if isXMLCharacter(charAsInt):
            output.append(reference)
        else:
            if parseError is not None:
                parseError("illegal-codepoint-for-numeric-entity",
                           {"charAsInt": charAsInt})
            output.append(replacementReference)
        cursor.advance(length)
        return

    length = _namedReferenceLength(cursor)
    if length:
        name = cursor.substring(cursor.position + 1, length)
        value = lookupEntity(name)
        if value is not None:
            output.append(value)
        else:
            if parseError is not None:
                parseError("unknown-named-entity", {"name": name})
            output.append("&amp;")
            output.append(name)
            output.append(";")
        cursor.advance(length + 2)
        return

    # Not a reference; escape the '&' and leave the rest for the caller
    output.append("&amp;")
    cursor.advance()


def resolveEntities(text, parseError=None):
    """Run every '&' in text through convertEntity, copying everything else."""
    if "&" not in text:
        return text
    cursor = TextCursor(text)
    output = TextBuffer()
    while not cursor.atEnd:
        if cursor.peek() == "&":
            convertEntity(cursor, output, parseError)
        else:
            output.append(cursor.charsUntil("&"))
    return output.getvalue()
