"""Text helpers for subtitle lines: word segmentation, regex escaping, newlines."""

import re
from typing import List


HAN = r'\u4e00-\u9fff'
LATIN1 = r'\x00-\xff'

# Zero-width split points inside a single line:
#   non-Han -> Han, after a space, Han -> Latin-1 or Han.
WORD_BOUNDARY = re.compile(
    rf'(?<=[^{HAN}])(?=[{HAN}])'
    r'|(?<= )'
    rf'|(?<=[{HAN}])(?=[{LATIN1}{HAN}])'
)

NEWLINE = re.compile(r'(\n)')

REGEX_SPECIAL = re.compile(r'[\\^$.*+?()\[\]{}|]')


def split_printing_words(text: str) -> List[str]:
    """
    Split text into printing words for word-level highlighting and timing.

    Newlines come out as their own fragments, a space stays on the word before
    it, and Han characters (U+4E00-U+9FFF) are cut one per fragment. A Han
    character followed by something outside Latin-1 (e.g. "。") keeps it.
    Joining the result gives back the input.

    Examples:
        "hello world" -> ["hello ", "world"]
        "你好world" -> ["你", "好", "world"]
        "line1\\nline2" -> ["line1", "\\n", "line2"]
    """
    words = []
    for line in NEWLINE.split(text):
        if line == '\n':
            words.append(line)
            continue
        words.extend(word for word in WORD_BOUNDARY.split(line) if word)
    return words


def escape_regexp(text: str) -> str:
    """Backslash-escape \\ ^ $ . * + ? ( ) [ ] { } | so text matches literally."""
    return REGEX_SPECIAL.sub(r'\\\g<0>', text)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')
