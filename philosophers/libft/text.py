"""Number conversion and string building: atoi, itoa, substrings, joins,
trimming, splitting and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_WHITESPACE = " \t\f\r\n\v"
_UINT_MOD = 1 << 32
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping like a C cast."""
    value %= _UINT_MOD
    return value - _UINT_MOD if value > _INT_MAX else value


def _require_str(s: object, name: str = "s") -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    return s


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"separator must be an int or a character, got {type(sep).__name__}")
    return chr(sep & 0xFF)


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Strings without digits give 0. The value
    wraps around as a 32-bit integer would.
    """
    text = _require_str(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    num = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        num = (num * 10 + ord(ch) - ord("0")) % _UINT_MOD
    return _to_int32(sign * num)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    text = _require_str(s)
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _require_str(s)
    chars = _require_str(charset, "charset")
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    text = _require_str(s)
    return [word for word in text.split(_separator(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character of ``s``."""
    text = _require_str(s)
    return "".join(f(index, ch) for index, ch in enumerate(text))


def striteri(
    s: str | MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]
) -> str:
    """Call ``f(index, chars)`` for each position, letting ``f`` alter ``chars[index]``.

    A list of characters is modified in place; a str is copied into one first.
    The resulting text is returned either way.
    """
    chars: MutableSequence[str] = list(s) if isinstance(s, str) else s
    for index in range(len(chars)):
        f(index, chars)
    return "".join(chars)