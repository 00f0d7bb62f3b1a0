"""
Lexical primitives used by the CREATE TABLE parser.

Every recognizer takes the remaining input and returns a pair
`(value, remaining_input)`. When the input does not match, `SQLParseError`
is raised with the residual input, and the caller's cursor is left untouched
(callers only advance by rebinding the returned remainder).

Recognizers
-----------
- `tag`: Exact, case-sensitive literal
- `keyword`: Case-insensitive literal
- `whitespace`: Non-empty run of space, tab, CR and LF
- `identifier`: Positional identifier running up to the next space

Combinators
-----------
- `optional`: Zero or one occurrence of a production
- `alternative`: First matching production out of an ordered list
- `separated_list`: Zero or more productions separated by a literal
- `bracketed`: Production enclosed in a pair of literals

Examples
--------
>>> tag("(", "(a Date)")
('(', 'a Date)')
>>> keyword("create table ", "create table t ()")
('create table ', 't ()')
>>> identifier("my_table (a Date)")
('my_table', ' (a Date)')
"""
import re
from typing import Callable, Final, Optional, Sequence, TypeVar

from ._core import SQLParseError



T = TypeVar("T")

Parser = Callable[[str], tuple[T, str]]
"""Recognizer signature: input -> (value, remaining input)"""

WHITESPACE_CHARS: Final = " \t\r\n"
"""Characters accepted between a column name and its type"""

_WHITESPACE_RUN: Final = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")


#
# Recognizers
#

def tag(literal:str, text:str) -> tuple[str, str]:
    """Recognize `literal` exactly (case-sensitive).

    Raises
    ------
    SQLParseError
        If `text` does not start with `literal`
    """
    if not text.startswith(literal):
        raise SQLParseError(repr(literal), text)
    return literal, text[len(literal):]

def keyword(word:str, text:str) -> tuple[str, str]:
    """Recognize `word` ignoring case.

    The returned value is the matched slice of `text`, as written
    in the source.

    Raises
    ------
    SQLParseError
        If `text` does not start with `word` (compared case-insensitively)
    """
    head = text[:len(word)]
    if head.lower() != word.lower():
        raise SQLParseError(f"keyword {word.strip()!r}", text)
    return head, text[len(word):]

def whitespace(text:str) -> tuple[str, str]:
    """Recognize a non-empty run of whitespace (space, tab, CR, LF).

    Raises
    ------
    SQLParseError
        If `text` does not start with one of the whitespace characters
    """
    if (match := _WHITESPACE_RUN.match(text)) is None:
        raise SQLParseError("whitespace", text)
    return match.group(), text[match.end():]

def identifier(text:str) -> tuple[str, str]:
    """Recognize an identifier, i.e. everything up to the next space.

    No character class is enforced, but the identifier must be non-empty
    and must not contain tabs or line breaks.

    Raises
    ------
    SQLParseError
        If there is no space left in `text`, if the identifier is empty,
        or if it contains whitespace
    """
    end = text.find(" ")
    if end <= 0:
        raise SQLParseError("identifier", text)

    name = text[:end]
    if any(c in WHITESPACE_CHARS for c in name):
        raise SQLParseError("identifier without whitespace", text)
    return name, text[end:]


#
# Combinators
#

def optional(parser:Parser[T], text:str) -> tuple[Optional[T], str]:
    """Apply `parser`, returning `(None, text)` if it does not match."""
    try:
        return parser(text)
    except SQLParseError:
        return None, text

def alternative(parsers:Sequence[Parser[T]], text:str, expected:str) -> tuple[T, str]:
    """Apply each parser in order and return the first match.

    Parameters
    ----------
    parsers : Sequence[Parser]
        Alternatives, tried in the given order
    text : str
        Input
    expected : str
        Description used in the error raised when nothing matches

    Raises
    ------
    SQLParseError
        If none of the alternatives match
    """
    for parser in parsers:
        try:
            return parser(text)
        except SQLParseError:
            continue
    raise SQLParseError(expected, text)

def separated_list(separator:str, parser:Parser[T], text:str) -> tuple[list[T], str]:
    """Recognize zero or more `parser` productions separated by `separator`.

    A separator that is not followed by a valid production is not consumed.

    Examples
    --------
    >>> separated_list(", ", identifier, "a b, c d")
    (['a'], ' b, c d')
    """
    items: list[T] = []
    try:
        item, text = parser(text)
    except SQLParseError:
        return items, text
    items.append(item)

    while True:
        try:
            _, after_separator = tag(separator, text)
            item, after_item = parser(after_separator)
        except SQLParseError:
            return items, text
        items.append(item)
        text = after_item

def bracketed(opening:str, parser:Parser[T], closing:str, text:str) -> tuple[T, str]:
    """Recognize `opening`, then `parser`, then `closing`.

    Raises
    ------
    SQLParseError
        If any of the three parts does not match
    """
    _, text = tag(opening, text)
    value, text = parser(text)
    _, text = tag(closing, text)
    return value, text
