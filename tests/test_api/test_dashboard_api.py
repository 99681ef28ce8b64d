"""Tests for dashboard, calculator and nutrition profile endpoints."""

import pytest


class TestDashboardEndpoint:
    """Test suite for GET /api/dashboard."""

    def test_empty_dashboard(self, test_client):
        """Test the summary over empty collections."""
        response = test_client.get("/api/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["finances"]["balance"] == 0
        assert body["pendingTasks"] == 0
        assert body["studyProgress"] == 0

    def test_dashboard_reflects_records(self, test_client, sample_finance, sample_study):
        """Test the summary after some writes."""
        test_client.post("/api/finances", json=sample_finance)
        test_client.post(
            "/api/finances", json={**sample_finance, "amount": "200", "kind": "expense"}
        )
        test_client.post(
            "/api/finances", json={**sample_finance, "amount": "50", "kind": "expense"}
        )
        for progress in (20, 60, 100):
            test_client.post("/api/studies", json={**sample_study, "progress": progress})

        body = test_client.get("/api/dashboard").json()

        assert body["finances"]["income"] == 500
        assert body["finances"]["expense"] == 250
        assert body["finances"]["balance"] == 250
        assert body["studyProgress"] == 60
        assert body["counts"]["studies"] == 3


class TestTdeeEndpoint:
    """Test suite for POST /api/calculators/tdee."""

    def test_calculation(self, test_client, sample_profile):
        """Test the reference calculation."""
        response = test_client.post("/api/calculators/tdee", json=sample_profile)

        assert response.status_code == 200
        assert response.json() == {
            "bmr": 1674,
            "tdee": 2594,
            "targetCalories": 2594,
            "protein": 195,
            "carbs": 259,
            "fat": 86,
        }

    def test_incomplete_input(self, test_client, sample_profile):
        """Test missing inputs produce no result."""
        del sample_profile["goal"]
        response = test_client.post("/api/calculators/tdee", json=sample_profile)

        assert response.status_code == 400
        assert response.json() == {"error": "Dados inválidos"}


    @pytest.mark.parametrize("field", ["age", "weight", "height"])
    def test_numbers_beyond_float_range(self, test_client, sample_profile, field):
        """Test huge integers give 400 instead of a server error."""
        sample_profile[field] = 10**400
        response = test_client.post("/api/calculators/tdee", json=sample_profile)

        assert response.status_code == 400
        assert response.json() == {"error": "Dados inválidos"}

    def test_overflowing_result(self, test_client, sample_profile):
        """Test inputs whose energy total overflows give no result."""
        sample_profile["weight"] = 1e308
        assert test_client.post("/api/calculators/tdee", json=sample_profile).status_code == 400


class TestNutritionProfileEndpoint:
    """Test suite for /api/nutrition-profile."""

    def test_profile_not_found(self, test_client):
        """Test 404 before any profile is saved."""
        response = test_client.get("/api/nutrition-profile")

        assert response.status_code == 404
        assert response.json() == {"error": "Perfil não encontrado"}

    def test_save_and_read_profile(self, test_client, sample_profile):
        """Test saving computes targets and stores the profile."""
        saved = test_client.put(
            "/api/nutrition-profile", json={**sample_profile, "goal": "weight_loss"}
        )

        assert saved.status_code == 200
        body = saved.json()
        assert body["activityLevel"] == "moderate"
        assert body["targetCalories"] == 2094
        assert body["targetProtein"] == 157
        assert body["targetCarbs"] == 209
        assert body["targetFat"] == 70
        assert test_client.get("/api/nutrition-profile").json() == body

    def test_invalid_profile(self, test_client, sample_profile):
        """Test invalid biometrics are rejected."""
        sample_profile["sex"] = "X"
        assert test_client.put("/api/nutrition-profile", json=sample_profile).status_code == 400

    @pytest.mark.parametrize("weight", [10**400, 1e308])
    def test_profile_with_out_of_range_weight(self, test_client, sample_profile, weight):
        """Test out-of-range biometrics are rejected and nothing is saved."""
        sample_profile["weight"] = weight
        response = test_client.put("/api/nutrition-profile", json=sample_profile)

        assert response.status_code == 400
        assert test_client.get("/api/nutrition-profile").status_code == 404
