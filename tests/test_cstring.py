import pytest

from structsalad.cstring import (
    strcat,
    strchr,
    strchri,
    strcmp,
    strcpy,
    strdup,
    strend,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

SAMPLE = "TEST1 ABCDEF"


def _content(buffer):
    return bytes(buffer[: buffer.index(0)])


@pytest.mark.parametrize("text", ["", "a", SAMPLE, b"bytes", bytearray(b"xyz")])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == strlen("ab")
    assert strlen(b"abc\0") == strlen(b"abc")


def test_strchr_returns_suffix():
    result = strchr(SAMPLE, "1")
    assert result == SAMPLE[SAMPLE.index("1"):]
    assert result.startswith("1")


def test_strchr_with_int_char():
    assert strchr(SAMPLE, ord("A")) == SAMPLE[SAMPLE.index("A"):]


def test_strchr_missing_and_none():
    assert strchr(SAMPLE, "z") is None
    assert strchr(None, "a") is None


def test_strchr_nul_gives_empty_end():
    assert strchr(SAMPLE, 0) == ""
    assert strchr(b"abc", 0) == b""


def test_strchr_bytes():
    assert strchr(b"hello", "l") == b"hello"[2:]


def test_strchri_index():
    assert strchri(SAMPLE, "1") == SAMPLE.index("1")
    assert strchri(SAMPLE, "q") == -1
    assert strchri(None, "a") == -1
    assert strchri(SAMPLE, "\0") == len(SAMPLE)


def test_strrchr_last_occurrence():
    text = "a/b/c"
    assert strrchr(text, "/") == text[text.rindex("/"):]
    assert strrchr(text, "x") is None
    assert strrchr(text, 0) == ""


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr(SAMPLE, "AB")


def test_strcmp_equal():
    assert strcmp("same", "same") == 0
    assert strcmp("", "") == 0


@pytest.mark.parametrize("a, b", [("abc", "abd"), ("ab", "abc"), ("", "a"), ("A", "a")])
def test_strcmp_order(a, b):
    assert strcmp(a, b) < 0
    assert strcmp(b, a) > 0
    assert strcmp(a, b) == -strcmp(b, a)


def test_strcmp_is_byte_difference():
    assert strcmp("a", "b") == ord("a") - ord("b")


def test_strcmp_unsigned_bytes():
    assert strcmp(b"\xff", b"\x01") > 0


def test_strncmp_limits():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_shorter_first():
    assert strncmp("", "AAAAAA", 6) == -ord("A")


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found():
    assert strnstr("aaxx", "xx", 4) == "aaxx"[2:]


def test_strnstr_must_fit_in_length():
    assert strnstr("aaxx", "xx", 3) is None


def test_strnstr_empty_needle():
    assert strnstr("haystack", "", 0) == "haystack"


def test_strnstr_not_present():
    assert strnstr("haystack", "needle", 100) is None


def test_strnstr_first_match():
    text = "abcabc"
    assert strnstr(text, "bc", len(text)) == text[1:]


def test_strend():
    assert strend("file.txt", ".txt") is True
    assert strend("file.txt", ".md") is False
    assert strend("a", "longer") is False
    assert strend("abc", "") is True
    assert strend(None, "x") is False


def test_strcpy_round_trip():
    buffer = bytearray(16)
    assert strcpy(buffer, "hello") is buffer
    assert _content(buffer) == b"hello"


def test_strcpy_overflow():
    with pytest.raises(ValueError):
        strcpy(bytearray(5), "hello")


def test_strcpy_needs_bytearray():
    with pytest.raises(TypeError):
        strcpy(b"immutable", "x")


def test_strcat_appends():
    buffer = bytearray(20)
    strcpy(buffer, "Yo")
    strcat(buffer, "la team")
    assert _content(buffer) == b"Yo" + b"la team"


def test_strcat_overflow_and_unterminated():
    buffer = bytearray(4)
    strcpy(buffer, "ab")
    with pytest.raises(ValueError):
        strcat(buffer, "cd")
    with pytest.raises(ValueError):
        strcat(bytearray(b"full"), "x")


def test_strlcpy_truncates():
    buffer = bytearray(10)
    src = "abcdefgh"
    assert strlcpy(buffer, src, 4) == len(src)
    assert _content(buffer) == src[:3].encode()


def test_strlcpy_size_zero_writes_nothing():
    buffer = bytearray(b"keep\0")
    assert strlcpy(buffer, "abc", 0) == 3
    assert buffer == bytearray(b"keep\0")


def test_strlcpy_full_copy():
    buffer = bytearray(10)
    assert strlcpy(buffer, "abc", 10) == 3
    assert _content(buffer) == b"abc"


def test_strlcat_truncates():
    buffer = bytearray(200)
    strcpy(buffer, "Yo")
    result = strlcat(buffer, "la team", 9)
    assert result == len("Yo") + len("la team")
    assert _content(buffer) == (b"Yo" + b"la team")[:8]


def test_strlcat_size_not_larger_than_dest():
    buffer = bytearray(20)
    strcpy(buffer, "Yo")
    assert strlcat(buffer, "la team", 1) == len("la team") + 1
    assert _content(buffer) == b"Yo"


def test_strdup_copies():
    original = bytearray(b"data\0tail")
    copy = strdup(original)
    assert copy == bytearray(b"data")
    copy[0] = ord("X")
    assert original[0] == ord("d")
    assert strdup("text\0more") == "text"