import pytest

from philosophers.libft.strings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("a,b", [("", ""), ("abc", ""), ("hello", " world")])
def test_strlen_is_additive(a, b):
    assert strlen(a + b) == strlen(a) + strlen(b)


def test_strlen_empty():
    assert strlen("") == 0


def test_strlen_rejects_non_string():
    with pytest.raises(TypeError):
        strlen(None)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 6, 20])
def test_strlcpy_truncates_to_size_minus_one(size):
    src = "hello"
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert copied == src[: size - 1]
    assert len(copied) <= size - 1


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strlcpy("hello", 0)
    assert copied == ""
    assert total == len("hello")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)


def test_strlcat_fits():
    dst, src = "foo", "bar"
    result, total = strlcat(dst, src, len(dst) + len(src) + 1)
    assert result == dst + src
    assert total == len(dst) + len(src)


def test_strlcat_truncates():
    dst, src = "foo", "barbaz"
    size = len(dst) + 3
    result, total = strlcat(dst, src, size)
    assert result == (dst + src)[: size - 1]
    assert len(result) == size - 1
    assert total == len(dst) + len(src)


@pytest.mark.parametrize("size", [0, 1, 3])
def test_strlcat_no_room_leaves_dst(size):
    dst, src = "foo", "bar"
    result, total = strlcat(dst, src, size)
    assert result == dst
    assert total == len(src) + size


def test_strchr_finds_first():
    s = "hello"
    assert strchr(s, "l") == s.index("l")
    assert strchr(s, ord("o")) == s.index("o")


def test_strchr_missing_and_terminator():
    s = "hello"
    assert strchr(s, "z") is None
    assert strchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_int_reduced_to_byte():
    s = "hello"
    assert strchr(s, ord("e") + 256) == strchr(s, "e")


def test_strchr_bad_char():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last():
    s = "hello"
    assert strrchr(s, "l") == s.rindex("l")
    assert strrchr(s, "h") == s.rindex("h")


def test_strrchr_missing_and_terminator():
    s = "hello"
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strncmp_equal_and_zero_n():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign_and_antisymmetry():
    a, b = "abc", "abd"
    assert strncmp(a, b, 3) < 0
    assert strncmp(b, a, 3) > 0
    assert strncmp(a, b, 3) == -strncmp(b, a, 3)
    assert strncmp(a, b, 3) == ord("c") - ord("d")


def test_strncmp_prefix():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 10) == ord("c")


def test_strncmp_stops_at_terminator():
    assert strncmp("ab\0x", "ab\0y", 4) == 0


def test_strnstr_found():
    hay, needle = "lorem ipsum dolor", "ipsum"
    assert strnstr(hay, needle, len(hay)) == hay.index(needle)


def test_strnstr_needs_whole_needle_within_length():
    hay, needle = "lorem ipsum dolor", "ipsum"
    end = hay.index(needle) + len(needle)
    assert strnstr(hay, needle, end) == hay.index(needle)
    assert strnstr(hay, needle, end - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None
    assert strnstr("abc", "abc", 100) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strdup_round_trip():
    s = "hello world"
    assert strdup(s) == s
    assert strdup("") == ""


def test_strdup_rejects_non_string():
    with pytest.raises(TypeError):
        strdup(None)