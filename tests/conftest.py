"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tests.test_constants import TEST_INTERNAL_JOB_TOKEN

# In-memory SQLite for every test; don't inherit DATABASE_URL from .env
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["INTERNAL_JOB_TOKEN"] = TEST_INTERNAL_JOB_TOKEN
os.environ.pop("SCORING_RULES_PATH", None)


@pytest.fixture(autouse=True)
def _clear_caches() -> Generator[None, None, None]:
    """Clear settings and scoring rules caches before and after each test."""
    from leadintel.config import get_settings
    from leadintel.scoring_rules.loader import clear_scoring_rules_cache

    get_settings.cache_clear()
    clear_scoring_rules_cache()
    yield
    get_settings.cache_clear()
    clear_scoring_rules_cache()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Fresh database per test: schema created from model metadata."""
    import leadintel.models  # noqa: F401
    from leadintel.db.session import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
    )()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client_with_db(db: Session) -> Generator[TestClient, None, None]:
    """TestClient with get_db overridden to use the test db session."""
    from leadintel.db.session import get_db
    from leadintel.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_db, None)


# ── Record factories ────────────────────────────────────────────────


@pytest.fixture
def make_client(db: Session) -> Callable:
    from leadintel.models import Client

    def _make(name: str = "Acme Holdings"):
        client = Client(name=name)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    return _make


@pytest.fixture
def make_project(db: Session, make_client: Callable) -> Callable:
    from leadintel.models import Project

    def _make(client=None, **fields):
        client = client or make_client()
        fields.setdefault("name", "Campaign")
        fields.setdefault("status", "active")
        project = Project(client_id=client.id, **fields)
        db.add(project)
        db.commit()
        db.refresh(project)
        return project

    return _make


@pytest.fixture
def make_company(db: Session, make_client: Callable) -> Callable:
    from leadintel.models import Company

    def _make(client=None, project=None, **fields):
        if client is None:
            client = project.client if project is not None else make_client()
        fields.setdefault("name", "Example KK")
        company = Company(
            client_id=client.id,
            project_id=project.id if project is not None else None,
            **fields,
        )
        db.add(company)
        db.commit()
        db.refresh(company)
        return company

    return _make


@pytest.fixture
def add_calls(db: Session) -> Callable:
    """Add call logs with strictly increasing called_at."""
    from leadintel.models import CallLog

    def _add(company, result: str, count: int = 1, *, project_id=None, notes=None):
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        existing = db.query(CallLog).count()
        calls = [
            CallLog(
                company_id=company.id,
                project_id=project_id if project_id is not None else company.project_id,
                result=result,
                notes=notes,
                called_at=base + timedelta(minutes=existing + i),
            )
            for i in range(count)
        ]
        db.add_all(calls)
        db.commit()
        return calls

    return _add


@pytest.fixture
def make_product(db: Session, make_client: Callable) -> Callable:
    from leadintel.models import Product

    def _make(client=None, **fields):
        client = client or make_client()
        fields.setdefault("name", "SalesBoost")
        product = Product(client_id=client.id, **fields)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def make_intent(db: Session) -> Callable:
    """Store an IntentProfile directly, bypassing the analyzer."""
    from leadintel.models import IntentProfile

    def _make(company, score: int, level: str, stage: str = "unknown", summary: str | None = None):
        profile = IntentProfile(
            company_id=company.id,
            intent_score=score,
            intent_level=level,
            buying_stage=stage,
            signals=[],
            summary=summary,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    return _make
