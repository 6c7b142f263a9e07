from .conftest import COMPLEX_TEXT, INFORMAL_TEXT, SIMPLE_TEXT


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


class TestReadabilityEndpoint:
    def test_assessment(self, client):
        response = client.post("/api/analysis/readability", json={"text": SIMPLE_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert data["metrics"]["wordCount"] == 11
        assert data["metrics"]["readingLevel"] == "elementary"
        assert "improvementAreas" in data
        assert data["feedback"]
        assert data["metadata"]["targetLevel"] == "high-school"
        assert data["metadata"]["textLength"] == len(SIMPLE_TEXT)
        assert "analysisTime" in data["metadata"]
        assert "timestamp" in data["metadata"]

    def test_metrics_only(self, client):
        response = client.post(
            "/api/analysis/readability",
            json={"text": COMPLEX_TEXT, "targetLevel": "college", "includeMetrics": True},
        )

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"metrics", "metadata"}
        assert data["metrics"]["recommendedGradeLevel"] == 16
        assert data["metrics"]["appropriateForLevel"] is True

    def test_html(self, client):
        response = client.post(
            "/api/analysis/readability",
            json={
                "text": "<p>First paragraph with enough words here.</p><p>Second paragraph with more words.</p>",
                "isHtml": True,
                "includeMetrics": True,
            },
        )

        assert response.status_code == 200
        assert response.json()["metrics"]["paragraphCount"] == 2

    def test_missing_text(self, client):
        response = client.post("/api/analysis/readability", json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "Text field is required and must be a string"

    def test_text_must_be_a_string(self, client):
        response = client.post("/api/analysis/readability", json={"text": 123})
        assert response.status_code == 400

    def test_text_too_long(self, client):
        response = client.post("/api/analysis/readability", json={"text": "word " * 2001})

        assert response.status_code == 400
        assert response.json()["detail"] == "Text must be less than 10,000 characters"

    def test_invalid_target_level(self, client):
        response = client.post(
            "/api/analysis/readability",
            json={"text": SIMPLE_TEXT, "targetLevel": "graduate"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == 'Target level must be either "high-school" or "college"'


class TestInterpretEndpoint:
    def test_flesch(self, client):
        response = client.get("/api/analysis/interpret", params={"score": 95, "metric": "flesch"})

        assert response.status_code == 200
        assert "Very Easy" in response.json()["label"]

    def test_grade_level(self, client):
        response = client.get("/api/analysis/interpret", params={"score": 7, "metric": "grade-level"})
        assert response.json()["label"] == "Middle School"

    def test_unknown_metric(self, client):
        response = client.get("/api/analysis/interpret", params={"score": 7, "metric": "smog"})
        assert response.status_code == 400


class TestVocabularyEndpoint:
    def test_full(self, client):
        response = client.post("/api/analysis/vocabulary", json={"text": INFORMAL_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert data["overallScore"] == 20
        assert data["analysis"]["informalWords"] == 6
        assert data["metadata"]["analysisType"] == "full"

    def test_analysis_only(self, client):
        response = client.post(
            "/api/analysis/vocabulary",
            json={"text": INFORMAL_TEXT, "analysisType": "analysis-only"},
        )

        data = response.json()
        assert data["analysis"]["totalWords"] == 14
        assert "overallScore" not in data

    def test_suggestions_only(self, client):
        response = client.post(
            "/api/analysis/vocabulary",
            json={"text": INFORMAL_TEXT, "analysisType": "suggestions-only"},
        )

        data = response.json()
        assert len(data["suggestions"]) == 10
        assert data["suggestions"][0]["originalWord"] == "really"
        assert data["totalWords"] == 14
        assert data["informalWords"] == 6

    def test_invalid_analysis_type(self, client):
        response = client.post(
            "/api/analysis/vocabulary",
            json={"text": INFORMAL_TEXT, "analysisType": "everything"},
        )
        assert response.status_code == 400

    def test_transition_lookup_takes_precedence(self, client):
        response = client.post("/api/analysis/vocabulary", json={"transitionContext": "cause"})

        assert response.status_code == 200
        data = response.json()
        assert data["context"] == "cause"
        assert "therefore" in data["transitionWords"]

    def test_invalid_transition_context(self, client):
        response = client.post("/api/analysis/vocabulary", json={"transitionContext": "summary"})
        assert response.status_code == 400

    def test_academic_lookup(self, client):
        response = client.post("/api/analysis/vocabulary", json={"academicLevel": "college"})
        assert len(response.json()["academicWords"]) == 17

    def test_get_description(self, client):
        response = client.get("/api/analysis/vocabulary")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Vocabulary Analysis API"
        assert "addition" in data["contexts"]
        assert "college" in data["levels"]

    def test_get_transition_words(self, client):
        response = client.get(
            "/api/analysis/vocabulary",
            params={"action": "transition-words", "context": "contrast"},
        )
        assert response.json()["transitionWords"][0] == "however"

    def test_get_academic_words_requires_level(self, client):
        response = client.get("/api/analysis/vocabulary", params={"action": "academic-words"})
        assert response.status_code == 400


class TestAIFeedbackEndpoint:
    def test_local_fallback(self, client):
        response = client.post(
            "/api/analysis/ai-feedback",
            json={"text": SIMPLE_TEXT, "targetLevel": "college"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["metadata"]["aiGenerated"] is False
        assert data["metadata"]["analysisType"] == "comprehensive"
        assert 40 <= data["analysis"]["overallScore"] <= 85
        assert data["analysis"]["metrics"]["wordCount"] == 11

    def test_missing_text(self, client):
        response = client.post("/api/analysis/ai-feedback", json={"targetLevel": "college"})
        assert response.status_code == 400

    def test_unsupported_analysis_type(self, client):
        response = client.post(
            "/api/analysis/ai-feedback",
            json={"text": SIMPLE_TEXT, "analysisType": "poetry"},
        )
        assert response.status_code == 400
