"""Small string predicates and slicing helpers."""

from __future__ import annotations

from collections.abc import Sequence

CMD_STR_SIZE = 256
DEFAULT_PAGE_SIZE = 4096
INT_PAGE_SIZE = DEFAULT_PAGE_SIZE // 8

_ALPHABET = frozenset("etaoinsrhdlucmfywgpbvkxqjzETAOINSRHDLUCMFYWGPBVKXQJZ")
_LOWER_ALPHA = frozenset("qwertyuiopasdfghjklzxcvbnm")
_DIGITS = frozenset("0123456789")
# Tab is deliberately not treated as whitespace here.
_WHITESPACE = frozenset(" \n\r")


def eq(yin: str, yang: str) -> bool:
    """Return True when both strings are identical."""
    return yin == yang


def is_word(text: str) -> bool:
    """Return True when text is non-empty and made only of ASCII letters."""
    return bool(text) and all(ch in _ALPHABET for ch in text)


def balanced_parens(text: str) -> bool:
    """Return True when text has as many '(' as ')'."""
    return text.count("(") == text.count(")")


def postfix(text: str, post: str) -> bool:
    """Return True when text ends with post."""
    return text.endswith(post)


def prefix(text: str, pre: str) -> bool:
    """Return True when text starts with pre."""
    return text.startswith(pre)


def prefixs(text: str, pre: str) -> int:
    """Return the position where the match of pre against text ends.

    A pattern starting with '*' scans forward from position 1 to the first
    place where the rest of the pattern is a prefix; otherwise the length of
    the common prefix of text and pre is returned.
    """
    if pre.startswith("*"):
        rest = pre[1:]
        i = 1
        while i < len(text) and not text.startswith(rest, i):
            i += 1
        return i
    i = 0
    for a, b in zip(text, pre):
        if a != b:
            break
        i += 1
    return i


def substr_naive(text: str, sub: str) -> int:
    """Return the index of the first occurrence of sub in text, or -1."""
    return text.find(sub)


def substr_naive_likely(text: str, sub: str) -> int:
    """Like substr_naive, but checks for a match at the start first."""
    if text.startswith(sub):
        return 0
    return text.find(sub)


def get_between(
    src: str, left: str, right: str, limit: int = CMD_STR_SIZE
) -> str | None:
    """Return the text between the first left and first right delimiters.

    Returns None when right does not come after left, or when the slice
    plus a terminator would not fit in a buffer of size limit.
    """
    left_pos = substr_naive_likely(src, left) + len(left)
    right_pos = substr_naive_likely(src, right)
    if left_pos >= right_pos:
        return None
    size = right_pos - left_pos
    if size > limit or size + 1 >= limit:
        return None
    return src[left_pos:right_pos]


def chomp(text: str) -> str:
    """Strip trailing newline and carriage-return characters."""
    return text.rstrip("\r\n")


def super_chomp(text: str) -> str:
    """Strip trailing newlines, carriage returns, spaces and tabs."""
    return text.rstrip("\r\n \t")


def is_whitespace(c: str) -> bool:
    """Return True for a space, newline or carriage return."""
    return c in _WHITESPACE


def skip_spaces(src: str, offset: int) -> int:
    """Return the first offset at or after offset that is not whitespace."""
    while offset < len(src) and is_whitespace(src[offset]):
        offset += 1
    return offset


def char_is_digit(c: str) -> bool:
    """Return True for a decimal digit character."""
    return c in _DIGITS


def copy_range_prefixs(src: str, length: int, offset: int) -> str:
    """Return src from offset up to length, bounded by the length of src.

    An empty string is returned when offset is not below length.
    """
    if offset >= length:
        return ""
    count = min(length - offset, len(src))
    return src[offset:offset + count]


def digit_sequence_prefix(text: str) -> int:
    """Return the number of leading digit characters."""
    count = 0
    for ch in text:
        if not char_is_digit(ch):
            break
        count += 1
    return count


def char_is_alpha(c: str) -> bool:
    """Return True for a lowercase ASCII letter."""
    return c in _LOWER_ALPHA


def word_sequence_prefix(text: str) -> int:
    """Return the number of leading lowercase letters."""
    count = 0
    for ch in text:
        if not char_is_alpha(ch):
            break
        count += 1
    return count


def column(text: str, col: int) -> str:
    """Return the zero-indexed space-separated column of a line."""
    pos = 0
    spaces = 0
    while pos < len(text) and spaces < col:
        if text[pos] == " ":
            spaces += 1
        pos += 1
    end = pos
    while end < len(text) and text[end] not in " \r\n":
        end += 1
    return text[pos:end]


def binsearch(data: Sequence[str], item: str, upper_bound: int) -> int:
    """Binary search a sorted table of strings.

    Returns the index of item, or -1. The search narrows by halving the
    span between the bounds and stops once the span drops below two.
    """
    if not data:
        return -1
    if data[0] == item:
        return 0
    lower = 0
    span = 2
    while span > 1:
        span = (upper_bound - lower) // 2
        probe = data[lower + span]
        if probe < item:
            lower += span
        elif probe > item:
            upper_bound -= span
        else:
            return lower + span
    return -1