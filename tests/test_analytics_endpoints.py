"""Tests for analytics endpoints."""

from datetime import date
from uuid import UUID

from fastapi.testclient import TestClient

from calorie_vita.api.app import create_app
from calorie_vita.domain.models import Gender, UserProfile
from calorie_vita.domain.nutrition import MacroBreakdown
from calorie_vita.domain.stats import DailySummary
from tests.conftest import (
    InMemoryDailySummaryRepository,
    InMemoryGoalsRepository,
    InMemoryProfileRepository,
)

HEADERS = {"X-Api-Token": "api-token"}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token(container, user_id: UUID) -> None:
    client = TestClient(create_app(container))

    missing = client.get(f"/users/{user_id}/bmi")
    wrong = client.get(f"/users/{user_id}/bmi", headers={"X-Api-Token": "nope"})

    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_bmi_endpoint(
    container, profile_repository: InMemoryProfileRepository, user_id: UUID
) -> None:
    profile_repository.profiles[user_id] = UserProfile(
        user_id=user_id,
        height_m=1.75,
        weight_kg=70,
        gender=Gender.FEMALE,
        age_years=28,
    )
    client = TestClient(create_app(container))

    response = client.get(f"/users/{user_id}/bmi", headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["bmi"] == 22.9
    assert data["category"] == "Normal"
    assert data["severity"] == "ok"
    assert "(Female, 28 years old)" in data["recommendation"]


def test_bmi_endpoint_incomplete_profile(container, user_id: UUID) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/users/{user_id}/bmi", headers=HEADERS)

    assert response.status_code == 404
    assert response.json()["missing"] == "profile"


def test_goals_then_weight_progress(
    container,
    profile_repository: InMemoryProfileRepository,
    goals_repository: InMemoryGoalsRepository,
    user_id: UUID,
) -> None:
    profile_repository.profiles[user_id] = UserProfile(
        user_id=user_id, height_m=1.8, weight_kg=80
    )
    client = TestClient(create_app(container))

    saved = client.put(
        f"/users/{user_id}/goals",
        headers=HEADERS,
        json={"weight_goal_kg": 75, "fitness_goal": "Weight_Loss"},
    )
    response = client.get(f"/users/{user_id}/weight-progress", headers=HEADERS)

    assert saved.status_code == 200
    assert saved.json()["fitness_goal"] == "weight loss"
    assert goals_repository.goals[user_id].weight_goal_kg == 75
    data = response.json()
    assert data["status"] == "Above Goal"
    assert data["achieved"] is False
    assert data["goal_set"] is True
    assert round(data["progress_percent"], 1) == 77.8


def test_goals_rejects_negative_weight(container, user_id: UUID) -> None:
    client = TestClient(create_app(container))

    response = client.put(
        f"/users/{user_id}/goals", headers=HEADERS, json={"weight_goal_kg": -3}
    )

    assert response.status_code == 422


def test_macros_endpoint(
    container, summary_repository: InMemoryDailySummaryRepository, user_id: UUID
) -> None:
    summary_repository.summaries[user_id] = [
        DailySummary(
            day=date(2026, 2, 1),
            calories_consumed=2000,
            calories_burned=0,
            steps=0,
            macros=MacroBreakdown(carbs_g=160, protein_g=20, fat_g=20),
        )
    ]
    client = TestClient(create_app(container))

    response = client.get(
        f"/users/{user_id}/macros", headers=HEADERS, params={"day": "2026-02-01"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["balance"] == "Needs Adjustment"
    assert data["percentages"]["carbs"] == 80
    assert data["adherence"]["goal_set"] is False


def test_period_changes_defaults_to_weekly(container, user_id: UUID) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/users/{user_id}/period-changes", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {
        "period_days": 7,
        "calories": "0%",
        "steps": "0%",
        "workouts": "0",
    }


def test_streaks_endpoint(container, user_id: UUID) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/users/{user_id}/streaks", headers=HEADERS)

    assert response.status_code == 200
    streaks = response.json()["streaks"]
    assert streaks["calorie_goal"]["current_streak"] == 0
    assert set(streaks) == {
        "calorie_goal",
        "steps",
        "exercise",
        "water_intake",
        "weight_tracking",
    }


def test_calorie_targets_endpoint(
    container,
    summary_repository: InMemoryDailySummaryRepository,
    goals_repository: InMemoryGoalsRepository,
    user_id: UUID,
) -> None:
    summary_repository.summaries[user_id] = [
        DailySummary(
            day=date(2026, 2, 1),
            calories_consumed=1700,
            calories_burned=250,
            steps=6000,
        )
    ]
    client = TestClient(create_app(container))
    client.put(
        f"/users/{user_id}/goals",
        headers=HEADERS,
        json={"calorie_goal": 2500, "fitness_goal": "muscle_building"},
    )

    response = client.get(
        f"/users/{user_id}/calorie-targets",
        headers=HEADERS,
        params={"day": "2026-02-01"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["remaining"] == 800
    assert data["guidance"] == "Eat 800 more calories to fuel muscle growth"
    assert data["fitness_goal"] == "muscle building"
    assert data["active_calories"] is None
    assert goals_repository.goals[user_id].calorie_goal == 2500
