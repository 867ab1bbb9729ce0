import pytest

from cubkit.strings import (
    count_words,
    find_char,
    memchr,
    memcmp,
    rfind_char,
    split,
    strcmp,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "c"), ("xyz", "x")])
def test_find_char_first_occurrence(s, c):
    pos = find_char(s, c)
    assert s[pos] == c
    assert c not in s[:pos]


def test_find_char_missing_and_nul():
    assert find_char("hello", "z") is None
    assert find_char("hello", 0) == len("hello")


def test_find_char_accepts_code():
    assert find_char("hello", ord("e")) == find_char("hello", "e")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a")])
def test_rfind_char_last_occurrence(s, c):
    pos = rfind_char(s, c)
    assert s[pos] == c
    assert c not in s[pos + 1:]


def test_rfind_char_missing_and_nul():
    assert rfind_char("abc", "q") is None
    assert rfind_char("abc", "\0") == len("abc")


def test_find_char_rejects_long_string():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 5) < 0


def test_strcmp():
    assert strcmp("same", "same") == 0
    assert strcmp("b", "a") > 0
    assert strcmp("", "x") == -ord("x")


def test_strcmp_antisymmetric():
    assert strcmp("apple", "apricot") == -strcmp("apricot", "apple")


def test_strnstr_found_within_limit():
    big = "foo bar baz"
    pos = strnstr(big, "bar", len(big))
    assert big[pos:pos + 3] == "bar"


def test_strnstr_limit_cuts_match():
    big = "foo bar baz"
    assert strnstr(big, "bar", big.index("bar") + 2) is None


def test_strnstr_empty_little():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_not_present():
    assert strnstr("abc", "d", 3) is None


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_count_words_matches_split():
    text = "a,,b,c,,"
    assert count_words(text, ",") == len(split(text, ","))
    assert count_words("one", " ") == 1


def test_split_join_round_trip():
    words = ["north", "south", "east"]
    assert split(" ".join(words), " ") == words


def test_strtrim():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("  pad  ", None) == "  pad  "
    assert strtrim("aaa", "a") == ""
    assert strtrim("inner x kept", "x") == "inner x kept"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) == ""


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("abc", None) == "abc"
    indexes = []
    strmapi("xyz", lambda i, ch: indexes.append(i) or ch)
    assert indexes == [0, 1, 2]


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_no_function():
    chars = list("abc")
    striteri(chars, None)
    assert chars == ["a", "b", "c"]


def test_memchr():
    data = b"\x01\x02\xff\x02"
    assert memchr(data, 2, len(data)) == 1
    assert memchr(data, -1, len(data)) == 2
    assert memchr(data, 0xFF, 2) is None


def test_memchr_bad_length():
    with pytest.raises(ValueError):
        memchr(b"ab", 1, 3)


def test_memcmp():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"\x00", b"\xff", 1) == -0xFF
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_bad_length():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)