"""Pytest configuration and fixtures."""

from datetime import date
from pathlib import Path

import pytest

from alliance.data_loading import generate_sample_partners
from alliance.matching import BrandProfile
from alliance.projects import Collaboration, Task, Milestone
from alliance.storage import AppStore, StorageConfig

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def config_path():
    return PROJECT_ROOT / "configs" / "config.yaml"


@pytest.fixture
def brand():
    """A fully specified technology brand."""
    return BrandProfile(
        id="brand",
        brand_name="Nimbus",
        industry="technology",
        company_size="large",
        geographic_focus="global",
        values=["innovation", "quality"],
        objectives=["product", "innovation"],
    )


@pytest.fixture
def partner_pool():
    return generate_sample_partners()


@pytest.fixture
def collaboration():
    """Thirty-day collaboration in January 2025 with no tasks or milestones."""
    return Collaboration(
        id="collab",
        name="Launch",
        partner_name="SportsFit",
        start_date="2025-01-01",
        end_date="2025-01-31",
        created_at="2025-01-01T00:00:00.000Z",
        updated_at="2025-01-01T00:00:00.000Z",
    )


@pytest.fixture
def mixed_tasks():
    return [
        Task(id="t1", title="Kick-off", status="completed"),
        Task(id="t2", title="Plan", status="in-progress"),
        Task(id="t3", title="Review", status="pending"),
    ]


@pytest.fixture
def milestones():
    return [
        Milestone(id="m1", title="Initiation", status="completed", due_date=date(2025, 1, 15).isoformat()),
        Milestone(id="m2", title="Launch", status="pending"),
    ]


@pytest.fixture
def store(tmp_path):
    """Empty store backed by a temporary file."""
    return AppStore(StorageConfig(path=str(tmp_path / "store.json")))
