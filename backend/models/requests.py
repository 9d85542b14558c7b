"""Request models for API endpoints."""

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request to analyze a list of functional dependencies."""
    text: str = Field(..., min_length=1, description="Dependencies such as '{a,b}->{c}, {c}->{d}'")


class JobStartRequest(BaseModel):
    """Request to queue an analysis job."""
    text: str = Field(..., min_length=1, description="Dependencies such as '{a,b}->{c}, {c}->{d}'")
    session_id: str = Field("default", min_length=1, max_length=128, description="Logical client session")
