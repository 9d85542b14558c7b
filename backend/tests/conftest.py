"""Pytest fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient
from backend.main import app
from backend.dependencies import get_job_manager, get_analysis_service
from backend.utils.job_manager import JobManager
from backend.services.analysis_service import AnalysisService
from FD2NF.utils.engine_config import EngineConfig


@pytest.fixture
def job_manager():
    """Fresh JobManager instance for testing."""
    return JobManager()


@pytest.fixture
def engine_config():
    """Attribute limits small enough to exercise the guard."""
    return EngineConfig(max_attributes=6, warn_attributes=5)


@pytest.fixture
def analysis_service(engine_config):
    """AnalysisService with its own thread pool."""
    service = AnalysisService(max_workers=2, config=engine_config)
    yield service
    service.executor.shutdown(wait=True)


@pytest.fixture
def client(job_manager, analysis_service):
    """Test client for FastAPI app with per-test singletons."""
    app.dependency_overrides[get_job_manager] = lambda: job_manager
    app.dependency_overrides[get_analysis_service] = lambda: analysis_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def three_key_text():
    """a -> bcd, bc -> ad, d -> b: three candidate keys, 3NF but not BCNF."""
    return "{a}->{b,c,d}, {b,c}->{a,d}, {d}->{b}"


@pytest.fixture
def partial_dependency_text():
    """{a,d} -> {b,c} plus d -> b: b depends on part of the key."""
    return "{a,d}->{b,c}, {d}->{b}"
