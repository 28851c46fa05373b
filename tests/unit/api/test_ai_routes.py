"""Unit tests for the /api/ai endpoints."""

import json

from fastapi.testclient import TestClient

from lfdigital.catalog import InMemoryCatalogStore
from lfdigital.providers.llm import MockProviderClient, ProviderError

UNAVAILABLE = json.dumps({"message": "AI service is temporarily unavailable."})

ROI_BODY = {
    "industry": "Retail",
    "annualRevenue": "1M-5M",
    "businessGoal": "automate fulfilment",
    "teamSize": 12,
    "automationLevel": "Very Low",
    "implementationTimeline": "ASAP",
}


def assert_ai_unavailable(response) -> None:
    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "AI service temporarily unavailable"
    assert data["error"]["code"] == "AI_SERVICE_UNAVAILABLE"


class TestServiceRecommendation:
    """Tests for POST /api/ai/service-recommendation."""

    def test_returns_suggestions(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        suggestions = [{"id": 1, "name": "Custom Software Development"}]
        primary.queue(json.dumps({"serviceSuggestions": suggestions}))

        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "Orders are tracked by hand"},
        )

        assert response.status_code == 200
        assert response.json() == {"serviceSuggestions": suggestions}

    def test_falls_back_to_next_provider(
        self,
        client: TestClient,
        primary: MockProviderClient,
        fallback: MockProviderClient,
    ) -> None:
        """A soft failure from the first provider moves on to the second."""
        primary.queue(UNAVAILABLE)
        fallback.queue('```json\n{"serviceSuggestions": []}\n```')

        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "Orders are tracked by hand"},
        )

        assert response.status_code == 200
        assert response.json() == {"serviceSuggestions": []}
        assert fallback.complete_calls == 1

    def test_all_providers_failing_returns_500(
        self,
        client: TestClient,
        primary: MockProviderClient,
        fallback: MockProviderClient,
        last_resort: MockProviderClient,
    ) -> None:
        primary.queue(ProviderError("connection reset"))
        fallback.queue(UNAVAILABLE)
        last_resort.queue("not json at all")

        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "0123456789"},
        )

        assert_ai_unavailable(response)
        assert "serviceSuggestions" not in response.json()

    def test_short_challenge_rejected(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "abcd"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"
        assert primary.complete_calls == 0

    def test_minimum_length_reaches_providers(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        primary.queue(json.dumps({"serviceSuggestions": []}))

        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "abcde"},
        )

        assert response.status_code == 200
        assert primary.complete_calls == 1

    def test_long_challenge_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/ai/service-recommendation",
            json={"businessChallenge": "x" * 501},
        )

        assert response.status_code == 400

    def test_missing_field_reports_details(self, client: TestClient) -> None:
        response = client.post("/api/ai/service-recommendation", json={})

        assert response.status_code == 400
        details = response.json()["error"]["details"]
        assert any("businessChallenge" in detail["field"] for detail in details)


class TestGenerateCaseStudy:
    """Tests for POST /api/ai/generate-case-study."""

    def test_generated_case_study_is_listed(
        self,
        client: TestClient,
        primary: MockProviderClient,
        store: InMemoryCatalogStore,
    ) -> None:
        case_study = {
            "title": "Route Optimisation",
            "industry": "Logistics",
            "challenge": "Late deliveries",
            "solution": "Predictive routing",
            "results": "20% fewer late deliveries",
            "metrics": {"onTime": "+20%"},
        }
        primary.queue(json.dumps({"caseStudy": case_study}))

        response = client.post(
            "/api/ai/generate-case-study",
            json={"query": "logistics delivery delays"},
        )

        assert response.status_code == 200
        generated = response.json()["caseStudy"]
        listed = client.get("/api/case-studies/industry/Logistics").json()
        assert [c["id"] for c in listed] == [generated["id"]]
        assert listed[0]["isGenerated"] is True

    def test_all_providers_failing_returns_500(self, client: TestClient) -> None:
        response = client.post(
            "/api/ai/generate-case-study",
            json={"query": "logistics delivery delays"},
        )

        assert_ai_unavailable(response)

    def test_short_query_rejected(self, client: TestClient) -> None:
        response = client.post("/api/ai/generate-case-study", json={"query": "abc"})

        assert response.status_code == 400


class TestROICalculator:
    """Tests for POST /api/ai/roi-calculator."""

    def test_returns_ai_projection(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        primary.queue(json.dumps({"estimatedROI": "280%", "timelineMonths": 4}))

        response = client.post("/api/ai/roi-calculator", json=ROI_BODY)

        assert response.status_code == 200
        assert response.json() == {"estimatedROI": "280%", "timelineMonths": 4}

    def test_falls_back_to_local_estimate(self, client: TestClient) -> None:
        """Chain exhaustion still answers 200 with the deterministic estimate."""
        response = client.post("/api/ai/roi-calculator", json=ROI_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["estimatedROI"] == "360%"
        assert data["costReduction"] == "$540,000/year"
        assert data["timelineMonths"] == 3
        assert len(data["implementationStages"]) == 4

    def test_unparseable_completion_falls_back(
        self, client: TestClient, primary: MockProviderClient
    ) -> None:
        primary.queue("[" * 1500 + "]" * 1500)

        response = client.post("/api/ai/roi-calculator", json=ROI_BODY)

        assert response.status_code == 200
        assert response.json()["estimatedROI"] == "360%"

    def test_string_team_size_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/ai/roi-calculator", json={**ROI_BODY, "teamSize": "12"}
        )

        assert response.status_code == 400
