"""FastAPI dependencies - process-wide singletons."""

from functools import lru_cache
from backend.config import settings
from backend.utils.job_manager import JobManager
from backend.services.analysis_service import AnalysisService


# Process-wide singletons (single process, no DB)
@lru_cache(maxsize=1)
def get_job_manager() -> JobManager:
    """Singleton JobManager - shared across all requests."""
    return JobManager()


@lru_cache(maxsize=1)
def get_analysis_service() -> AnalysisService:
    """Singleton AnalysisService with its thread pool."""
    return AnalysisService(max_workers=settings.max_workers)
