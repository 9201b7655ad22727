import pytest

from dadops.wordcount import word_count


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I am learning Go!", {"I": 1, "am": 1, "learning": 1, "Go!": 1}),
        (
            "The quick brown fox jumped over the lazy dog.",
            {
                "The": 1,
                "quick": 1,
                "brown": 1,
                "fox": 1,
                "jumped": 1,
                "over": 1,
                "the": 1,
                "lazy": 1,
                "dog.": 1,
            },
        ),
        (
            "I ate a donut. Then I ate another donut.",
            {"I": 2, "ate": 2, "a": 1, "donut.": 2, "Then": 1, "another": 1},
        ),
        (
            "A man a plan a canal panama.",
            {"A": 1, "man": 1, "a": 2, "plan": 1, "canal": 1, "panama.": 1},
        ),
    ],
)
def test_word_count_cases(text, expected):
    assert word_count(text) == expected


def test_empty_text_has_no_words():
    assert word_count("") == {}


def test_any_whitespace_separates_words():
    assert word_count("  x\ty\nx  ") == {"x": 2, "y": 1}


def test_counts_add_up_to_number_of_words():
    text = "test this test ok ok ok ok ok "
    counts = word_count(text)
    assert sum(counts.values()) == len(text.split())
    assert set(counts) == {"test", "this", "ok"}