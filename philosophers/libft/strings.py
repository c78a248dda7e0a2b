"""Length, bounded copy, concatenation, search and comparison of strings."""

from __future__ import annotations

NUL = "\0"


def _char(c: int | str) -> str:
    """Normalise a character given as a code or a one-character str.

    Integer codes are reduced to a byte, as a conversion to ``char`` would.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must be non-negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``; a total of at least ``size`` means the copy was cut short.
    """
    _check_size(size)
    total = strlen(src)
    if size == 0:
        return "", total
    return src[: size - 1], total


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` leaves no room past ``dst``, ``dst`` comes back unchanged and
    the returned length is ``len(src) + size``.
    """
    _check_size(size)
    dlen = strlen(dst)
    slen = strlen(src)
    if size <= dlen:
        return dst, slen + size
    return dst + src[: size - dlen - 1], dlen + slen


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator yields the index just past the end.
    """
    ch = _char(c)
    if ch == NUL:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator yields the index just past the end.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they agree, otherwise the difference of the codes of the
    first differing characters, the end of a string counting as code 0.
    """
    _check_size(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first occurs wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return "".join(s)