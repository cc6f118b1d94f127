import pytest

from pipex import text


# split

def test_split_command_line():
    assert text.split("  ls  -la ", " ") == ["ls", "-la"]


@pytest.mark.parametrize("s", ["/usr/bin:/bin::/sbin:", "::", "", "a", ":a:b:"])
def test_split_invariants(s):
    parts = text.split(s, ":")
    assert all(parts)
    assert all(":" not in p for p in parts)
    assert "".join(parts) == s.replace(":", "")


def test_split_only_separators_gives_empty_list():
    assert text.split("::::", ":") == []


def test_split_accepts_character_code():
    assert text.split("x,y", ord(",")) == text.split("x,y", ",")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        text.split("a b", "ab")


# strchr / strrchr

def test_strchr_first_occurrence():
    s = "hello world"
    assert text.strchr(s, "o") == s.index("o")


def test_strchr_missing():
    assert text.strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert text.strchr("hello", "\0") == len("hello")
    assert text.strchr("hello", 0) == len("hello")


def test_strrchr_last_occurrence():
    s = "a/b/c/d"
    i = text.strrchr(s, "/")
    assert s[i] == "/"
    assert "/" not in s[i + 1:]


def test_strrchr_missing_and_nul():
    assert text.strrchr("abc", "x") is None
    assert text.strrchr("abc", "\0") == 3


# strdup / strlen / strjoin

def test_strdup_equal():
    assert text.strdup("pipex") == "pipex"
    assert text.strdup("") == ""


def test_strlen():
    assert text.strlen("") == 0
    assert text.strlen("abc") == 3


def test_strjoin_path():
    assert text.strjoin("/usr/bin", "/") == "/usr/bin/"
    joined = text.strjoin("/usr/bin/", "ls")
    assert joined.startswith("/usr/bin/")
    assert joined.endswith("ls")
    assert len(joined) == len("/usr/bin/") + len("ls")


# striteri / strmapi

def test_striteri_replaces_in_place():
    buf = list("abc")
    text.striteri(buf, lambda i, ch: ch.upper())
    assert "".join(buf) == "ABC"


def test_striteri_none_leaves_items():
    buf = list("xyz")
    seen = []
    text.striteri(buf, lambda i, ch: seen.append(i))
    assert buf == list("xyz")
    assert seen == [0, 1, 2]


def test_strmapi_passes_indices():
    result = text.strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_preserves_length():
    s = "some text"
    assert len(text.strmapi(s, lambda i, ch: "*")) == len(s)


# strlcpy / strlcat

def test_strlcpy_fits():
    assert text.strlcpy("hello", 10) == ("hello", 5)


def test_strlcpy_truncates():
    copied, total = text.strlcpy("hello", 3)
    assert copied == "he"
    assert total == 5
    assert total >= 3


def test_strlcpy_zero_size():
    assert text.strlcpy("hello", 0) == ("", 5)


def test_strlcat_fits():
    assert text.strlcat("foo", "bar", 10) == ("foobar", 6)


def test_strlcat_truncates():
    result, total = text.strlcat("foo", "bar", 5)
    assert len(result) == 4
    assert result.startswith("foo")
    assert total == 6


def test_strlcat_full_destination():
    assert text.strlcat("foobar", "xyz", 3) == ("foobar", 3 + 3)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        text.strlcpy("a", -1)
    with pytest.raises(ValueError):
        text.strlcat("a", "b", -1)


# strncmp

def test_strncmp_equal():
    assert text.strncmp("PATH=/bin", "PATH", 4) == 0


def test_strncmp_sign():
    assert text.strncmp("abc", "abd", 3) < 0
    assert text.strncmp("abd", "abc", 3) > 0
    assert text.strncmp("a", "b", 1) == ord("a") - ord("b")


def test_strncmp_shorter_string():
    assert text.strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_zero_length():
    assert text.strncmp("x", "y", 0) == 0


# strnstr

def test_strnstr_finds_path_entry():
    env = "PATH=/usr/bin"
    assert text.strnstr(env, "PATH", 4) == 0


def test_strnstr_respects_length():
    big = "Foo Bar Baz"
    assert text.strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert text.strnstr(big, "Bar", 6) is None


def test_strnstr_empty_needle():
    assert text.strnstr("anything", "", 0) == 0


def test_strnstr_missing():
    assert text.strnstr("HOME=/root", "PATH", 4) is None


# strtrim

def test_strtrim_both_ends():
    assert text.strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert text.strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert text.strtrim("  hi  ", "") == "  hi  "


# substr

def test_substr_inside():
    s = "PATH=/bin"
    assert text.substr(s, 5, 100) == "/bin"


def test_substr_past_end():
    assert text.substr("abc", 3, 2) == ""
    assert text.substr("abc", 10, 2) == ""


def test_substr_length_bound():
    s = "abcdef"
    part = text.substr(s, 1, 3)
    assert len(part) == 3
    assert s[1:].startswith(part)


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        text.substr("abc", -1, 2)
    with pytest.raises(ValueError):
        text.substr("abc", 0, -2)