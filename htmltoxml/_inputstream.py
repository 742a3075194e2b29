import re

from .constants import EOF

# Cache for charsUntil()
charsUntilRegEx = {}


def _charsUntilRegEx(characters, opposite):
    try:
        return charsUntilRegEx[(characters, opposite)]
    except KeyError:
        regex = "".join([re.escape(c) for c in sorted(characters)])
        if not opposite:
            regex = "^%s" % regex
        chars = charsUntilRegEx[(characters, opposite)] = re.compile("[%s]+" % regex)
        return chars


class TextBuffer(object):
    """An append-only character buffer that can also be read back.

    The converter writes its XML here. Because the buffer supports random
    access it can also be wrapped in a BufferCursor and used as the input of
    a further conversion.
    """

    def __init__(self, text=""):
        self._chars = list(text)

    def __len__(self):
        return len(self._chars)

    def __str__(self):
        return self.getvalue()

    def __repr__(self):
        return "<TextBuffer %r>" % self.getvalue()

    def append(self, text):
        self._chars.extend(text)

    def charAt(self, index):
        if 0 <= index < len(self._chars):
            return self._chars[index]
        return EOF

    def lastChar(self):
        if self._chars:
            return self._chars[-1]
        return EOF

    def trimLast(self):
        """Drop the last character written."""
        if not self._chars:
            raise IndexError("trimLast() on an empty TextBuffer")
        del self._chars[-1]

    def substring(self, start, length=None):
        if length is None:
            return "".join(self._chars[start:])
        return "".join(self._chars[start:start + length])

    def getvalue(self):
        return "".join(self._chars)


class Cursor(object):
    """Position-tracking view over some text.

    Reading past either end of the text returns EOF rather than raising, so
    lookahead code can compare characters without bounds checks.
    """

    def __init__(self):
        self._position = 0

    @property
    def position(self):
        return self._position

    @property
    def length(self):
        raise NotImplementedError

    @property
    def atEnd(self):
        return self._position >= self.length

    @property
    def remaining(self):
        return max(self.length - self._position, 0)

    def charAt(self, index):
        raise NotImplementedError

    def substring(self, start, length=None):
        raise NotImplementedError

    def peek(self, ahead=0):
        return self.charAt(self._position + ahead)

    def advance(self, count=1):
        self._position = min(self._position + count, self.length)

    def seek(self, position):
        if not 0 <= position <= self.length:
            raise ValueError("position %d outside of text (length %d)" %
                             (position, self.length))
        self._position = position

    def startsWith(self, text, ignoreCase=False):
        candidate = self.substring(self._position, len(text))
        if ignoreCase:
            return candidate.lower() == text.lower()
        return candidate == text

    def charsUntil(self, characters, opposite=False):
        """Returns a string of characters from the stream up to but not
        including any character in 'characters' or EOF. 'characters' must be
        a container that supports the 'in' method and iteration over its
        characters.
        """
        start = self._position
        length = self.length
        position = start
        if opposite:
            while position < length and self.charAt(position) in characters:
                position += 1
        else:
            while position < length and self.charAt(position) not in characters:
                position += 1
        self._position = position
        return self.substring(start, position - start)


class TextCursor(Cursor):
    """Cursor over an immutable string."""

    def __init__(self, text):
        super(TextCursor, self).__init__()
        self.text = text or ""

    def __repr__(self):
        return "<TextCursor at %d of %d>" % (self._position, len(self.text))

    @property
    def length(self):
        return len(self.text)

    def charAt(self, index):
        if 0 <= index < len(self.text):
            return self.text[index]
        return EOF

    def peek(self, ahead=0):
        index = self._position + ahead
        if 0 <= index < len(self.text):
            return self.text[index]
        return EOF

    def substring(self, start, length=None):
        if length is None:
            return self.text[start:]
        return self.text[start:start + length]

    def charsUntil(self, characters, opposite=False):
        if not isinstance(characters, frozenset):
            characters = frozenset(characters)
        m = _charsUntilRegEx(characters, opposite).match(self.text, self._position)
        if m is None:
            return ""
        self._position = m.end()
        return m.group()


class BufferCursor(Cursor):
    """Cursor over a TextBuffer, which may keep growing while it is read."""

    def __init__(self, buffer):
        super(BufferCursor, self).__init__()
        self.buffer = buffer

    def __repr__(self):
        return "<BufferCursor at %d of %d>" % (self._position, len(self.buffer))

    @property
    def length(self):
        return len(self.buffer)

    def charAt(self, index):
        return self.buffer.charAt(index)

    def substring(self, start, length=None):
        return self.buffer.substring(start, length)
