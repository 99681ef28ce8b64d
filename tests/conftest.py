"""Pytest configuration and fixtures for Life Dashboard tests."""

import os

import pytest
from fastapi.testclient import TestClient

# Set test environment
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"

from app.domain.repositories import Repository  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def repository():
    """Fresh in-memory repository for each test."""
    return Repository()


@pytest.fixture
def app(repository):
    """FastAPI app wired to the test repository."""
    return create_app(repository=repository)


@pytest.fixture
def test_client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as client:
        yield client


# ==================== SAMPLE PAYLOADS ====================


@pytest.fixture
def sample_finance():
    """Sample finance payload."""
    return {
        "description": "Salário",
        "amount": "500",
        "category": "Trabalho",
        "kind": "income",
        "date": "2024-03-01",
    }


@pytest.fixture
def sample_workout():
    """Sample workout payload."""
    return {
        "exercise": "Supino reto",
        "sets": 4,
        "reps": 10,
        "weight": "60",
        "date": "2024-11-28",
        "notes": "Boa sessão",
    }


@pytest.fixture
def sample_meal():
    """Sample meal payload."""
    return {
        "name": "Frango com arroz",
        "calories": 650,
        "protein": "45",
        "carbs": "70",
        "fat": "15",
        "date": "2024-11-28",
        "mealSlot": "lunch",
        "notes": "",
    }


@pytest.fixture
def sample_task():
    """Sample task payload."""
    return {
        "title": "Pagar contas",
        "description": "Luz e internet",
        "date": "2024-12-01",
        "time": "09:00",
        "completed": False,
        "priority": "high",
    }


@pytest.fixture
def sample_study():
    """Sample study payload."""
    return {
        "title": "Curso de Python",
        "description": "FastAPI e pydantic",
        "category": "Programação",
        "progress": 40,
        "startDate": "2024-10-01",
        "endDate": "",
        "notes": "",
    }


@pytest.fixture
def sample_profile():
    """Sample nutrition profile payload."""
    return {
        "age": 25,
        "sex": "M",
        "weight": 70,
        "height": 175,
        "activityLevel": "moderate",
        "goal": "maintenance",
    }
