import pytest

from cubscene.textscan import find, find_unquoted, split_words, strip_comments


@pytest.mark.parametrize(
    "text, needle",
    [("hello world", "world"), ("abcabc", "bc"), ('"x"', '"'), ("aaa", "aaa")],
)
def test_find_locates_first_match(text, needle):
    pos = find(text, needle)
    assert text[pos:pos + len(needle)] == needle
    assert needle not in text[:pos + len(needle) - 1]


@pytest.mark.parametrize("text, needle", [("abc", "d"), ("ab", "abc"), ("", "a")])
def test_find_missing_gives_minus_one(text, needle):
    assert find(text, needle) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "")


def test_find_unquoted_skips_quoted_match():
    text = '"/*" /* x */'
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_matches_outside_quotes():
    text = 'abc /* "q" */'
    assert find_unquoted(text, "/*") == text.index("/*")


def test_find_unquoted_only_quoted_gives_minus_one():
    assert find_unquoted('"a // b"', "//") == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\t b  c\t") == ["a", "b", "c"]
    assert split_words("16 16 2 1") == ["16", "16", "2", "1"]


def test_split_words_blank_text():
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment():
    comment = "/* XPM */"
    body = 'static char *x[] = {"a"};'
    text = comment + "\n" + body
    assert strip_comments(text) == " " * len(comment) + "\n" + body


def test_strip_line_comment_including_newline():
    comment = "// note\n"
    body = '"ab"'
    assert strip_comments(comment + body) == " " * len(comment) + body


def test_strip_keeps_quoted_comment_markers():
    text = '"/* not a comment */", "// nor this"'
    assert strip_comments(text) == text


def test_strip_preserves_length():
    text = 'a /* b */ c // d\n"e" /* f'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert "//" not in result
    assert '"e"' in result