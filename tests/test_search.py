from textedit_engine.buffer import MatchSpan
from textedit_engine.search import SearchIndex, compile_query, find_matches, replace_all


def test_find_returns_ordered_non_overlapping_spans() -> None:
    assert find_matches(["abcabc"], "abc") == [
        MatchSpan(line=0, start=0, end=3),
        MatchSpan(line=0, start=3, end=6),
    ]


def test_find_is_case_insensitive_and_per_line() -> None:
    spans = find_matches(["Foo bar", "", "xFOOx"], "foo")

    assert spans == [MatchSpan(0, 0, 3), MatchSpan(2, 1, 4)]


def test_find_escapes_special_characters() -> None:
    assert find_matches(["axb"], "a.b") == []
    assert find_matches(["a.b axb"], "a.b") == [MatchSpan(0, 0, 3)]


def test_find_handles_every_regex_metacharacter_literally() -> None:
    query = r".*+?^${}()|[]\\"
    line = f"before {query} after"

    spans = find_matches([line], query)

    assert spans == [MatchSpan(0, 7, 7 + len(query))]


def test_overlapping_occurrences_are_not_double_counted() -> None:
    assert find_matches(["aaaa"], "aa") == [MatchSpan(0, 0, 2), MatchSpan(0, 2, 4)]


def test_empty_query_means_inactive_search() -> None:
    assert compile_query("") is None
    assert find_matches(["anything"], "") == []


def test_search_index_recomputes_on_update() -> None:
    index = SearchIndex()
    index.update(["one two one"], query="one")
    assert index.count == 2

    index.update(["one"])

    assert index.matches == (MatchSpan(0, 0, 3),)
    assert index.is_highlighted(0, 2)
    assert not index.is_highlighted(0, 3)


def test_search_index_clearing_query_drops_highlights() -> None:
    index = SearchIndex()
    index.update(["abc"], query="b")

    index.update(["abc"], query="")

    assert index.matches == ()
    assert index.active is False
    assert not index.is_highlighted(0, 1)


def test_replace_all_substitutes_every_match() -> None:
    outcome = replace_all("foo bar foo", "foo", "baz")

    assert outcome.content == "baz bar baz"
    assert outcome.count == 2
    assert outcome.status == "replaced"


def test_replace_all_without_match_leaves_content_identical() -> None:
    content = "alpha\nbeta"

    outcome = replace_all(content, "gamma", "delta")

    assert outcome.content is content
    assert outcome.count == 0
    assert outcome.status == "no_matches"


def test_replace_all_is_case_insensitive() -> None:
    assert replace_all("Foo FOO foo", "foo", "x").content == "x x x"


def test_replace_all_inserts_replacement_verbatim() -> None:
    outcome = replace_all("a.b", "a.b", r"\g<0>$&\1")

    assert outcome.content == r"\g<0>$&\1"


def test_replace_count_uses_original_content() -> None:
    outcome = replace_all("ab ab", "ab", "abab")

    assert outcome.content == "abab abab"
    assert outcome.count == 2


def test_replace_all_spans_lines() -> None:
    outcome = replace_all("cat\nCat\ndog", "cat", "cow")

    assert outcome.content == "cow\ncow\ndog"
    assert outcome.count == 2


def test_replace_all_with_empty_query_is_noop() -> None:
    outcome = replace_all("text", "", "x")

    assert outcome.content == "text"
    assert outcome.count == 0
