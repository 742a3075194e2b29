import string
from html.entities import html5 as _html5Entities

# Returned by cursors when reading past the end of the text
EOF = "\u0000"

E = {
    "unparsable-tag":
        "Markup start could not be parsed as a tag; '<' escaped as text.",
    "unexpected-end-tag":
        "Unexpected end tag (%(name)s) with no matching start tag. Ignored.",
    "self-closing-end-tag":
        "Self-closing end tag (%(name)s). Ignored.",
    "unknown-named-entity":
        "Unknown named entity (&%(name)s;); '&' escaped as text.",
    "illegal-codepoint-for-numeric-entity":
        "Numeric entity represents an illegal codepoint: "
        "U+%(charAsInt)08x.",
    "eof-in-comment":
        "Unexpected end of file in comment.",
    "eof-in-declaration":
        "Unexpected end of file in markup declaration.",
    "eof-in-raw-text":
        "Unexpected end of file in %(name)s content; element closed.",
}

spaceCharacters = frozenset((
    "\t",
    "\n",
    "\u000C",
    " ",
    "\r"
))

newlineCharacters = frozenset(("\n", "\r"))

asciiLetters = frozenset(string.ascii_letters)
digits = frozenset(string.digits)
hexDigits = frozenset(string.hexdigits)
asciiAlphanumeric = asciiLetters | digits

nameCharacters = asciiAlphanumeric | frozenset(":")

# Characters that send the converter down its slow path
markupCharacters = frozenset(("<", ">", "&"))

voidElements = frozenset((
    "area",
    "base",
    "br",
    "col",
    "command",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr"
))

# Elements that do not end an open paragraph. Names carrying a namespace
# prefix are treated the same way, see isInlineElement().
inlineElements = frozenset((
    "a",
    "abbr",
    "acronym",
    "b",
    "bdo",
    "big",
    "br",
    "button",
    "cite",
    "code",
    "dfn",
    "em",
    "i",
    "img",
    "input",
    "kbd",
    "label",
    "map",
    "object",
    "q",
    "samp",
    "script",
    "select",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "textarea",
    "tt",
    "var"
))

rawtextElements = frozenset(("script", "style"))

cdataStart = "/*<![CDATA[*/"
cdataEnd = "/*]]>*/"
# Replaces "]]>" inside captured text so the section cannot end early
cdataSplit = "]]]]><![CDATA[>"

# XML's predefined entities are already valid output and are kept by name.
xmlEntities = {
    "amp": "&amp;",
    "lt": "&lt;",
    "gt": "&gt;",
    "quot": "&quot;",
    "apos": "&apos;",
}


def _numericReference(value):
    return "".join("&#%d;" % ord(c) for c in value)


# Named character references mapped to decimal numeric references,
# e.g. "mdash" -> "&#8212;". Only the semicolon-terminated forms are used.
entities = dict((name[:-1], _numericReference(value))
                for name, value in _html5Entities.items()
                if name.endswith(";"))
entities.update(xmlEntities)


def isInlineElement(name):
    """Return True if name does not end an open paragraph.

    Element names that include ':' are foreign, namespaced elements (for
    instance the o:p markup some word processors emit inside paragraphs) and
    are always treated as inline.
    """
    if ":" in name:
        return True
    return name.lower() in inlineElements


def isXMLCharacter(charAsInt):
    return (charAsInt in (0x09, 0x0A, 0x0D) or
            0x20 <= charAsInt <= 0xD7FF or
            0xE000 <= charAsInt <= 0xFFFD or
            0x10000 <= charAsInt <= 0x10FFFF)
