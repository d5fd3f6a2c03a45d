"""API tests for partner recommendations and pair alignment."""

from __future__ import annotations


class TestRecommendations:
    """Tests for GET /api/matches/recommendations."""

    def test_recommendations_for_org(self, client, seeded_repository):
        response = client.get("/api/matches/recommendations", params={"org_id": "org-001"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 9
        assert len(data["organizations"]) == 9
        top = data["organizations"][0]
        assert top["id"] == "org-005"
        assert top["alignment_score"] == 70
        assert top["match_reason"] == "Same region, Both verified"
        assert "org-001" not in [o["id"] for o in data["organizations"]]

    def test_limit_and_offset(self, client, seeded_repository):
        full = client.get("/api/matches/recommendations", params={"org_id": "org-001"}).json()
        page = client.get(
            "/api/matches/recommendations",
            params={"org_id": "org-001", "limit": 3, "offset": 1},
        ).json()
        assert page["total"] == 9
        assert [o["id"] for o in page["organizations"]] == [o["id"] for o in full["organizations"][1:4]]

    def test_default_limit_from_settings(self, client, seeded_repository, app):
        app.state.settings = app.state.settings.model_copy(update={"recommendation_default_limit": 2})
        data = client.get("/api/matches/recommendations", params={"org_id": "org-001"}).json()
        assert len(data["organizations"]) == 2
        assert data["total"] == 9

    def test_limit_capped_at_maximum(self, client, seeded_repository, app):
        app.state.settings = app.state.settings.model_copy(update={"recommendation_max_limit": 4})
        data = client.get("/api/matches/recommendations", params={"org_id": "org-001", "limit": 50}).json()
        assert len(data["organizations"]) == 4

    def test_missing_org_id(self, client):
        response = client.get("/api/matches/recommendations")
        assert response.status_code == 422

    def test_invalid_limit(self, client, seeded_repository):
        response = client.get("/api/matches/recommendations", params={"org_id": "org-001", "limit": 0})
        assert response.status_code == 422

    def test_unknown_org(self, client):
        response = client.get("/api/matches/recommendations", params={"org_id": "org-999"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Organization 'org-999' not found"


class TestPairAlignment:
    """Tests for GET /api/matches/{a}/{b}."""

    def test_pair_alignment(self, client, repository, org_a, org_b):
        repository.upsert(org_a)
        repository.upsert(org_b)
        response = client.get("/api/matches/org-a/org-b")
        assert response.status_code == 200
        assert response.json() == {
            "org_a_id": "org-a",
            "org_b_id": "org-b",
            "score": 80,
            "reason": "1 focus area match, Same region, Both verified",
        }

    def test_pair_with_unknown_org(self, client, repository, org_a):
        repository.upsert(org_a)
        response = client.get("/api/matches/org-a/org-zzz")
        assert response.status_code == 404
        assert response.json()["detail"] == "Organization 'org-zzz' not found"


class TestExcludeMatch:
    """Tests for POST /api/matches/{a}/{b}/exclude."""

    def test_exclude_removes_from_recommendations(self, client, seeded_repository):
        response = client.post("/api/matches/org-001/org-005/exclude")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Organization excluded from recommendations",
        }
        data = client.get("/api/matches/recommendations", params={"org_id": "org-001"}).json()
        assert data["total"] == 8
        assert "org-005" not in [o["id"] for o in data["organizations"]]

    def test_exclusion_is_one_directional(self, client, seeded_repository):
        client.post("/api/matches/org-001/org-005/exclude")
        data = client.get("/api/matches/recommendations", params={"org_id": "org-005"}).json()
        assert "org-001" in [o["id"] for o in data["organizations"]]

    def test_exclude_is_idempotent(self, client, seeded_repository):
        client.post("/api/matches/org-001/org-005/exclude")
        response = client.post("/api/matches/org-001/org-005/exclude")
        assert response.status_code == 200
        assert seeded_repository.excluded_ids("org-001") == {"org-005"}

    def test_exclude_unknown_org(self, client, seeded_repository):
        response = client.post("/api/matches/org-001/org-999/exclude")
        assert response.status_code == 404
