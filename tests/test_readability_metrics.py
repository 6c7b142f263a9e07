import pytest

from wordwise.models.readability import ReadingLevel, TargetLevel
from wordwise.readability.analyzer import ReadabilityAnalyzer, analyze_text
from wordwise.readability.metrics import calculate_readability_metrics, get_reading_level

from .conftest import ACADEMIC_TEXT, COMPLEX_TEXT, SHORT_SENTENCES_TEXT, SIMPLE_TEXT

NUMERIC_FIELDS = [
    "word_count", "sentence_count", "syllable_count", "character_count", "paragraph_count",
    "flesch_reading_ease", "flesch_kincaid_grade_level", "coleman_liau_index",
    "automated_readability_index", "gunning_fog_index", "average_words_per_sentence",
    "average_syllables_per_word", "complex_word_percentage", "academic_vocabulary_percentage",
    "recommended_grade_level",
]


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t", "... !!!"])
def test_empty_input_is_all_zero(text):
    metrics = calculate_readability_metrics(text)

    for field in NUMERIC_FIELDS:
        assert getattr(metrics, field) == 0, field
    assert metrics.appropriate_for_level is False
    assert metrics.reading_level is ReadingLevel.ELEMENTARY


def test_simple_text():
    metrics = calculate_readability_metrics(SIMPLE_TEXT)

    assert metrics.word_count == 11
    assert metrics.sentence_count == 2
    assert metrics.average_words_per_sentence == 5.5
    assert metrics.average_syllables_per_word == 1.09
    assert metrics.flesch_reading_ease == 100.0
    assert metrics.flesch_kincaid_grade_level == -0.6
    assert metrics.coleman_liau_index == 1.8
    assert metrics.automated_readability_index == -0.3
    assert metrics.gunning_fog_index == 2.2
    assert metrics.complex_word_percentage == 0.0
    assert metrics.recommended_grade_level == 1
    assert metrics.reading_level is ReadingLevel.ELEMENTARY
    assert metrics.appropriate_for_level is False


def test_hello():
    metrics = calculate_readability_metrics("Hello.")

    assert metrics.word_count == 1
    assert metrics.sentence_count == 1
    assert metrics.syllable_count == 2


def test_academic_vocabulary_percentage():
    metrics = calculate_readability_metrics(ACADEMIC_TEXT, "high-school")
    assert metrics.academic_vocabulary_percentage > 20


def test_college_list_only_counts_for_college():
    text = "The paradigm shifted."
    assert calculate_readability_metrics(text, "high-school").academic_vocabulary_percentage == 0.0
    assert calculate_readability_metrics(text, "college").academic_vocabulary_percentage == pytest.approx(33.3)


@pytest.mark.parametrize("text,low,high", [
    ("cat dog run big", None, 1.5),
    ("water paper music happy", 1.5, 2.5),
    ("elephant beautiful computer", 2.5, None),
])
def test_syllable_tiers(text, low, high):
    average = calculate_readability_metrics(text).average_syllables_per_word
    if low is not None:
        assert average > low
    if high is not None:
        assert average < high


def test_overly_complex_text():
    metrics = calculate_readability_metrics(COMPLEX_TEXT, TargetLevel.HIGH_SCHOOL)

    assert metrics.recommended_grade_level == 16
    assert metrics.reading_level is ReadingLevel.ADULT
    assert metrics.flesch_reading_ease == 0.0
    assert metrics.appropriate_for_level is False
    assert calculate_readability_metrics(COMPLEX_TEXT, TargetLevel.COLLEGE).appropriate_for_level is True


@pytest.mark.parametrize("text", [
    SIMPLE_TEXT,
    SHORT_SENTENCES_TEXT,
    ACADEMIC_TEXT,
    COMPLEX_TEXT,
    "no punctuation at all",
    "One.\n\nTwo.\n\nThree.",
])
def test_non_empty_invariants(text):
    metrics = calculate_readability_metrics(text)

    assert metrics.sentence_count >= 1
    assert metrics.paragraph_count >= 1
    assert isinstance(metrics.recommended_grade_level, int)
    assert 1 <= metrics.recommended_grade_level <= 16
    assert 0 <= metrics.flesch_reading_ease <= 100


def test_repeated_calls_are_identical():
    assert calculate_readability_metrics(ACADEMIC_TEXT) == calculate_readability_metrics(ACADEMIC_TEXT)


def test_invalid_target_level():
    with pytest.raises(ValueError):
        calculate_readability_metrics(SIMPLE_TEXT, "graduate")


@pytest.mark.parametrize("grade,level", [
    (1, ReadingLevel.ELEMENTARY),
    (5, ReadingLevel.ELEMENTARY),
    (6, ReadingLevel.MIDDLE_SCHOOL),
    (8, ReadingLevel.MIDDLE_SCHOOL),
    (9, ReadingLevel.HIGH_SCHOOL),
    (12, ReadingLevel.HIGH_SCHOOL),
    (13, ReadingLevel.ADULT),
    (16, ReadingLevel.ADULT),
])
def test_reading_level_bands(grade, level):
    assert get_reading_level(grade) is level


def test_serializes_with_camel_case_aliases():
    data = calculate_readability_metrics(SIMPLE_TEXT).model_dump(by_alias=True, mode="json")

    assert data["wordCount"] == 11
    assert data["fleschReadingEase"] == 100.0
    assert data["readingLevel"] == "elementary"
    assert data["appropriateForLevel"] is False


class TestHtmlInput:
    def test_block_elements_become_paragraphs(self):
        html = "<p>First paragraph with enough words here.</p><p>Second paragraph with more words.</p>"
        metrics = analyze_text(html, is_html=True)

        assert metrics.paragraph_count == 2
        assert metrics.word_count == 11

    def test_scripts_and_styles_are_dropped(self):
        html = "<style>p { color: red; }</style><p>Visible text.</p><script>var hidden = 1;</script>"
        assert ReadabilityAnalyzer().clean_html_content(html) == "Visible text."

    def test_line_breaks_are_kept(self):
        cleaned = ReadabilityAnalyzer().clean_html_content("one<br>two")
        assert cleaned == "one\ntwo"
