import pytest

from wordwise.models.readability import ReadabilityAssessment, ReadabilityMetrics, ReadingLevel
from wordwise.readability.analyzer import ReadabilityAnalyzer, analyzer
from wordwise.readability.assessment import assess_readability, build_assessment, interpret_readability_score

from .conftest import COMPLEX_TEXT, SHORT_SENTENCES_TEXT, SIMPLE_TEXT


def test_empty_text():
    assessment = assess_readability("   ")

    assert assessment.feedback == ["No text to analyze"]
    assert assessment.recommendations == ["Add content to receive readability feedback"]
    assert assessment.strengths == []
    assert assessment.improvement_areas == []
    assert assessment.metrics.word_count == 0


def test_below_target_level():
    assessment = assess_readability(SHORT_SENTENCES_TEXT, "high-school")

    assert assessment.feedback[0].startswith("📈 Your writing is below high school level (Grade 1).")
    assert "Increase vocabulary sophistication" in assessment.improvement_areas
    assert "Use more complex sentence structures" in assessment.improvement_areas
    assert "Sentence length too short" in assessment.improvement_areas
    assert "Limited academic vocabulary" in assessment.improvement_areas
    assert "Incorporate more academic vocabulary and transition words" in assessment.recommendations
    assert "Clear, accessible vocabulary" in assessment.strengths
    assert "Very readable and accessible" in assessment.strengths


def test_above_target_level():
    assessment = assess_readability(COMPLEX_TEXT, "high-school")

    assert assessment.feedback[0].startswith("📉 Your writing is above typical high school level (Grade 16).")
    assert "Simplify overly complex sentences" in assessment.improvement_areas
    assert "May be overly complex" in assessment.improvement_areas
    assert "Text may be difficult to read" in assessment.improvement_areas
    assert "Break down long sentences into shorter, clearer ones" in assessment.recommendations


def test_appropriate_level():
    assessment = assess_readability(COMPLEX_TEXT, "college")

    assert assessment.feedback[0] == "✅ Your writing is at an appropriate college level (Grade 16)."
    assert assessment.strengths[0] == "Appropriate complexity for college audience"


def test_easy_text_for_college():
    assessment = assess_readability(SIMPLE_TEXT, "college")

    assert "💡 Consider adding more complexity for college-level writing" in assessment.feedback
    assert "Vocabulary could be more sophisticated" in assessment.improvement_areas
    assert "Very readable and accessible" not in assessment.strengths


def test_short_paragraphs():
    assessment = assess_readability(SIMPLE_TEXT)
    assert "Consider developing paragraphs with more detail and examples" in assessment.recommendations


def test_analyzer_assess_text_accepts_html():
    assessment = analyzer.assess_text("<p>The cat is big.</p><p>The dog is small.</p>", is_html=True)

    assert assessment.metrics.paragraph_count == 2
    assert assessment.metrics.word_count == 8


def test_serializes_improvement_areas_alias():
    data = assess_readability(SHORT_SENTENCES_TEXT).model_dump(by_alias=True, mode="json")
    assert "improvementAreas" in data
    assert data["metrics"]["wordCount"] == 11


@pytest.mark.parametrize("score,label", [
    (95, "Very Easy (5th grade)"),
    (85, "Easy (6th grade)"),
    (75, "Fairly Easy (7th grade)"),
    (65, "Standard (8th-9th grade)"),
    (55, "Fairly Difficult (10th-12th grade)"),
    (40, "Difficult (College level)"),
    (10, "Very Difficult (Graduate level)"),
])
def test_interpret_flesch(score, label):
    assert interpret_readability_score(score, "flesch") == label


@pytest.mark.parametrize("score,label", [
    (3, "Elementary School"),
    (6, "Elementary School"),
    (7, "Middle School"),
    (12, "High School"),
    (16, "College"),
    (17, "Graduate School"),
])
def test_interpret_grade_level(score, label):
    assert interpret_readability_score(score, "grade-level") == label


def test_interpret_unknown_metric():
    with pytest.raises(ValueError):
        interpret_readability_score(50, "smog")


def make_metrics(**overrides):
    """Mid-band high-school metrics; every rule lands in its neutral branch."""
    values = dict(
        word_count=100,
        sentence_count=7,
        syllable_count=150,
        character_count=550,
        paragraph_count=1,
        flesch_reading_ease=60.0,
        flesch_kincaid_grade_level=10.0,
        coleman_liau_index=10.0,
        automated_readability_index=10.0,
        gunning_fog_index=10.0,
        average_words_per_sentence=15.0,
        average_syllables_per_word=1.5,
        complex_word_percentage=15.0,
        academic_vocabulary_percentage=10.0,
        recommended_grade_level=10,
        reading_level=ReadingLevel.HIGH_SCHOOL,
        appropriate_for_level=True,
    )
    values.update(overrides)
    return ReadabilityMetrics(**values)


def test_neutral_bands_are_strengths():
    assessment = build_assessment(make_metrics(), "high-school")

    assert assessment.strengths == [
        "Appropriate complexity for high school audience",
        "Good sentence length variety",
        "Good balance of academic vocabulary",
        "Good balance of vocabulary complexity",
        "Good readability for academic writing",
        "Good paragraph length and organization",
    ]
    assert assessment.improvement_areas == []
    assert assessment.recommendations == []


@pytest.mark.parametrize("overrides,improvement,recommendation", [
    (
        {"average_words_per_sentence": 30.0},
        "Sentences too long",
        "Break up long sentences for better readability",
    ),
    (
        {"complex_word_percentage": 25.0},
        "May be overly complex",
        "Balance complex terms with simpler explanations",
    ),
    (
        {"flesch_reading_ease": 40.0},
        "Text may be difficult to read",
        "Simplify sentence structure and word choice",
    ),
    (
        {"academic_vocabulary_percentage": 2.0},
        "Limited academic vocabulary",
        "Incorporate more academic terms and formal language",
    ),
])
def test_improvement_bands(overrides, improvement, recommendation):
    assessment = build_assessment(make_metrics(**overrides), "high-school")

    assert improvement in assessment.improvement_areas
    assert recommendation in assessment.recommendations


def test_strong_academic_vocabulary():
    assessment = build_assessment(make_metrics(academic_vocabulary_percentage=20.0), "high-school")

    assert "Strong use of academic vocabulary" in assessment.strengths
    assert "Good balance of academic vocabulary" not in assessment.strengths


def test_long_paragraphs():
    assessment = build_assessment(make_metrics(word_count=500, paragraph_count=2), "high-school")

    assert "Break up long paragraphs for better organization" in assessment.recommendations
    assert "Good paragraph length and organization" not in assessment.strengths


def test_assess_text_return_annotation():
    assert ReadabilityAnalyzer.assess_text.__annotations__["return"] is ReadabilityAssessment
    assert isinstance(analyzer.assess_text("The cat is big."), ReadabilityAssessment)
