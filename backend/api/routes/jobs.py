"""Background analysis jobs, at most one pending per session."""

import logging
from fastapi import APIRouter, Depends, HTTPException, BackgroundTasks
from uuid import uuid4
from datetime import datetime, UTC

from FD2NF.ir.models.analysis import WorkerResponse
from backend.models.requests import JobStartRequest
from backend.models.responses import JobStartResponse, JobStatusResponse
from backend.dependencies import get_job_manager, get_analysis_service
from backend.utils.job_manager import JobManager
from backend.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("/start", response_model=JobStartResponse)
async def start_job(
    request: JobStartRequest,
    background_tasks: BackgroundTasks,
    job_manager: JobManager = Depends(get_job_manager),
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """
    Queue an analysis and return its job_id immediately.

    A session may only have one pending job; a second request answers 409.
    """
    if job_manager.has_pending(request.session_id):
        logger.warning(f"Session {request.session_id} already has a pending analysis")
        raise HTTPException(status_code=409, detail="An analysis is already pending for this session")

    job_id = str(uuid4())
    job_manager.create_job(
        job_id=job_id,
        text=request.text,
        session_id=request.session_id,
        status="pending"
    )
    logger.info(f"Job {job_id} registered for session {request.session_id}")

    background_tasks.add_task(
        analysis_service.run_job,
        job_id=job_id,
        job_manager=job_manager,
    )

    return JobStartResponse(
        job_id=job_id,
        status="started",
        created_at=datetime.now(UTC).isoformat()
    )


@router.get("/status/{job_id}", response_model=JobStatusResponse)
async def get_status(
    job_id: str,
    job_manager: JobManager = Depends(get_job_manager)
):
    """Get current status of an analysis job."""
    job = job_manager.get_job(job_id)
    if not job:
        logger.warning(f"Job {job_id} not found")
        raise HTTPException(status_code=404, detail="Job not found")

    return JobStatusResponse(
        job_id=job_id,
        session_id=job["session_id"],
        status=job["status"],
    )


@router.get("/result/{job_id}", response_model=WorkerResponse, response_model_by_alias=True)
async def get_result(
    job_id: str,
    job_manager: JobManager = Depends(get_job_manager)
):
    """The single response of a finished job."""
    job = job_manager.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    if job["result"] is None:
        raise HTTPException(status_code=409, detail=f"Job is {job['status']}")

    return WorkerResponse.model_validate(job["result"])
