"""Character sets and private-use placeholder code points.

Private-use layout (placeholders never survive into a Document):

    U+E000  escape open marker
    U+E001  escape close marker
    U+E002  code span open marker
    U+E003  code span close marker
    U+E010+ escape index (one per escapable punctuation character)
    U+E100+ code span index (one per code span in a block)

"""

# Punctuation that a backslash makes literal. Order is the stable index.
ESCAPABLE = "\\`*_{}[]()>#+-.!/&"

ESCAPE_OPEN = "\ue000"
ESCAPE_CLOSE = "\ue001"
ESCAPE_BASE = 0xE010

CODE_OPEN = "\ue002"
CODE_CLOSE = "\ue003"
CODE_BASE = 0xE100

PRIVATE_USE_FIRST = 0xE000
PRIVATE_USE_LAST = 0xF8FF

# Stand-in text of an image run.
OBJECT_REPLACEMENT = "\ufffc"

# Block and item separators in a Document's plain text.
PARAGRAPH_SEPARATOR = "\u2029"
LINE_SEPARATOR = "\u2028"

# Trailing characters left outside a raw URL by default.
RAW_LINK_TRAILING_PUNCTUATION = ".,;:!?"


def is_private_use(char: str) -> bool:
    return PRIVATE_USE_FIRST <= ord(char) <= PRIVATE_USE_LAST
