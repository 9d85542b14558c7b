"""Response models for API endpoints."""

from pydantic import BaseModel


class JobStartResponse(BaseModel):
    """Response when queueing an analysis job."""
    job_id: str
    status: str
    created_at: str


class JobStatusResponse(BaseModel):
    """Response for job status."""
    job_id: str
    session_id: str
    status: str
