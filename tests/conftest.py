"""Shared test fixtures for the Drivya Match test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from drivya.app import create_app
from drivya.config import Settings
from drivya.schemas.organization import Organization
from drivya.store import InMemoryOrganizationRepository


def _test_settings(**overrides) -> Settings:
    """Return settings suitable for testing."""
    values = dict(
        environment="development",
        debug=True,
        log_format="console",
        rate_limit_default="1000/minute",
        allowed_origins="http://localhost:3000,http://localhost:5015",
        storage_backend="memory",
        seed_demo_data=False,
    )
    values.update(overrides)
    return Settings(**values)


def _make_org(org_id: str = "org-x", **fields) -> Organization:
    """Build an organization with neutral defaults."""
    data = {
        "id": org_id,
        "name": f"Organization {org_id}",
        "type": "NGO",
        "region": "",
        "focus_areas": [],
        "mission": "",
        "description": "",
        "verification_status": "unverified",
        "confidence": 80,
    }
    data.update(fields)
    return Organization.model_validate(data)


@pytest.fixture
def settings():
    """Test settings."""
    return _test_settings()


@pytest.fixture
def repository():
    """Empty in-memory directory."""
    return InMemoryOrganizationRepository()


@pytest.fixture
def app(settings, repository):
    """Create a fresh FastAPI app for testing."""
    return create_app(settings, repository=repository)


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture
def org_a():
    """Verified NGO in Northern India working on education and livelihood."""
    return _make_org(
        "org-a",
        name="Future Educators Foundation",
        type="NGO",
        region="Northern India",
        focus_areas=["Education", "Livelihood"],
        mission="Quality education for rural communities",
        verification_status="verified",
        funding_type="recipient",
        confidence=92,
    )


@pytest.fixture
def org_b():
    """Verified foundation in Northern India working on education."""
    return _make_org(
        "org-b",
        name="Bright Minds Foundation",
        type="Foundation",
        region="Northern India",
        focus_areas=["Education"],
        mission="Funding classrooms",
        verification_status="verified",
        funding_type="provider",
        confidence=88,
    )


@pytest.fixture
def seeded_repository(repository):
    """Repository holding the demo directory."""
    from drivya.data.organizations import SEED_ORGANIZATIONS

    for org in SEED_ORGANIZATIONS:
        repository.upsert(org)
    return repository


@pytest.fixture
def make_org():
    """Factory for organizations with neutral defaults."""
    return _make_org
