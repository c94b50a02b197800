import pytest

from sigtalk import text

INTS = [0, 7, -7, 42, 100, -2147483648, 2147483647, 4194304]


@pytest.mark.parametrize("n", INTS)
def test_atoi_itoa_round_trip(n):
    assert text.atoi(text.itoa(n)) == n


@pytest.mark.parametrize("n", INTS)
@pytest.mark.parametrize("prefix", ["", " ", "\t\n\v\f\r "])
def test_atoi_skips_whitespace_and_stops_at_junk(n, prefix):
    assert text.atoi(f"{prefix}{n}abc 99") == n


@pytest.mark.parametrize("n", [0, 5, 123])
def test_atoi_plus_sign(n):
    assert text.atoi(f"+{n}") == n


@pytest.mark.parametrize("raw", ["", "abc", "+-5", "--5", "x12", "- 3"])
def test_atoi_without_digits_is_zero(raw):
    assert text.atoi(raw) == 0


def test_itoa_zero_and_minimum():
    assert text.itoa(0) == "0"
    assert text.itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", INTS)
def test_itoa_matches_builtin(n):
    assert text.itoa(n) == str(n)


def test_split_drops_empty_pieces():
    assert text.split("  hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize(
    "raw,sep",
    [("a,b,,c", ","), (",,,x,,", ","), ("one two", " "), ("abc", "z")],
)
def test_split_invariants(raw, sep):
    pieces = text.split(raw, sep)
    assert all(piece and sep not in piece for piece in pieces)
    assert "".join(pieces) == raw.replace(sep, "")


@pytest.mark.parametrize("raw", ["", ";;;;"])
def test_split_nothing_left(raw):
    assert text.split(raw, ";") == []


def test_split_nul_separator_keeps_whole_text():
    assert text.split("abc", "\0") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        text.split("a b", "ab")


def test_strtrim_example():
    assert text.strtrim("xxabcxx", "x") == "abc"


@pytest.mark.parametrize(
    "raw,chars",
    [("  hi there ", " "), ("-+-core+-", "+-"), ("aaaa", "a"), ("keep", "")],
)
def test_strtrim_invariants(raw, chars):
    result = text.strtrim(raw, chars)
    assert result in raw
    if result:
        assert result[0] not in chars
        assert result[-1] not in chars


def test_strtrim_none_copies():
    assert text.strtrim(" x ", None) == " x "


def test_substr_past_end_is_empty():
    assert text.substr("abc", 3, 5) == ""
    assert text.substr("abc", 10, 1) == ""


@pytest.mark.parametrize("start", [0, 1, 4])
def test_substr_long_length_takes_tail(start):
    raw = "minitalk"
    result = text.substr(raw, start, 100)
    assert raw.endswith(result)
    assert len(result) == len(raw) - start


@pytest.mark.parametrize("length", [0, 1, 3])
def test_substr_length_bound(length):
    result = text.substr("signals", 2, length)
    assert len(result) == length
    assert result in "signals"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        text.substr("abc", -1, 2)


def test_strnstr_empty_needle():
    assert text.strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    hay = "lorem ipsum dolor"
    idx = text.strnstr(hay, "ipsum", len(hay))
    assert hay[idx:].startswith("ipsum")
    assert "ipsum" not in hay[:idx]


def test_strnstr_cut_by_length():
    hay = "lorem ipsum dolor"
    start = hay.index("ipsum")
    assert text.strnstr(hay, "ipsum", start + len("ipsum") - 1) is None
    assert text.strnstr(hay, "ipsum", start + len("ipsum")) == start


def test_strnstr_missing():
    assert text.strnstr("abc", "zz", 3) is None


def test_strncmp_equal_and_zero_length():
    assert text.strncmp("abc", "abc", 10) == 0
    assert text.strncmp("abc", "xyz", 0) == 0
    assert text.strncmp("abc", "abd", 2) == 0


def test_strncmp_ordering():
    assert text.strncmp("abc", "abd", 3) < 0
    assert text.strncmp("abd", "abc", 3) > 0
    assert text.strncmp("abc", "ab", 3) == ord("c")
    assert text.strncmp("ab", "abc", 3) == -ord("c")


@pytest.mark.parametrize("a,b", [("hello", "help"), ("x", "y"), ("", "q")])
def test_strncmp_antisymmetric(a, b):
    assert text.strncmp(a, b, 5) == -text.strncmp(b, a, 5)


def test_strchr_first_occurrence():
    raw = "banana"
    idx = text.strchr(raw, "a")
    assert raw[idx] == "a"
    assert "a" not in raw[:idx]


def test_strchr_nul_and_missing():
    assert text.strchr("banana", "\0") == len("banana")
    assert text.strchr("banana", "z") is None


def test_strrchr_last_occurrence():
    raw = "banana"
    idx = text.strrchr(raw, "n")
    assert raw[idx] == "n"
    assert "n" not in raw[idx + 1:]


def test_strrchr_nul_and_missing():
    assert text.strrchr("abc", "\0") == len("abc")
    assert text.strrchr("abc", "q") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        text.strchr("abc", "ab")


def test_strmapi_identity_and_indices():
    raw = "signal"
    assert text.strmapi(raw, lambda i, c: c) == raw
    seen = []
    text.strmapi(raw, lambda i, c: seen.append(i) or c)
    assert seen == list(range(len(raw)))


def test_strmapi_upper():
    assert text.strmapi("abc", lambda i, c: text.toupper(c)) == "ABC"


CODES = range(-1, 257)


def test_classifiers_agree_with_ascii_builtins():
    for code in CODES:
        ch = chr(code) if 0 <= code < 128 else None
        if ch is None:
            assert not text.isalpha(code)
            assert not text.isdigit(code)
            continue
        assert text.isalpha(code) == ch.isalpha()
        assert text.isdigit(code) == ch.isdigit()
        assert text.isalnum(code) == ch.isalnum()
        assert text.isprint(code) == (ch.isprintable() and code != 127)


def test_isascii_bounds():
    assert text.isascii(0) and text.isascii(127)
    assert not text.isascii(128)
    assert not text.isascii(-1)


def test_isprint_bounds():
    assert text.isprint(" ") and text.isprint("~")
    assert not text.isprint(31) and not text.isprint(127)


def test_classifiers_accept_strings():
    assert text.isalpha("q")
    assert text.isdigit("7")
    assert not text.isalnum("_")


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        text.isalpha("ab")


def test_case_conversion_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        upper = text.toupper(code)
        assert text.isalpha(upper) and upper != code
        assert text.tolower(upper) == code


def test_case_conversion_keeps_type_and_non_letters():
    assert text.toupper("a") == "A"
    assert text.tolower("Z") == "z"
    assert text.toupper("5") == "5"
    assert text.tolower(200) == 200