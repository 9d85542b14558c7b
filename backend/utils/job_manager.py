"""Job state and lifecycle management."""

from typing import Dict, Any, Optional
from datetime import datetime, UTC


PENDING_STATUSES = ("pending", "running")


class JobManager:
    """Manages analysis jobs and their results."""

    def __init__(self):
        self.jobs: Dict[str, Dict[str, Any]] = {}

    def create_job(
        self,
        job_id: str,
        text: str,
        session_id: str,
        status: str = "pending"
    ):
        """Create a new job."""
        self.jobs[job_id] = {
            "job_id": job_id,
            "session_id": session_id,
            "text": text,
            "status": status,
            "created_at": datetime.now(UTC).isoformat(),
            "result": None,
        }

    def get_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        """Get job by ID."""
        return self.jobs.get(job_id)

    def update_job(
        self,
        job_id: str,
        status: Optional[str] = None,
        result: Optional[Dict[str, Any]] = None,
    ):
        """Update job fields."""
        if job_id not in self.jobs:
            return

        if status:
            self.jobs[job_id]["status"] = status
        if result is not None:
            self.jobs[job_id]["result"] = result
            self.jobs[job_id]["finished_at"] = datetime.now(UTC).isoformat()

    def has_pending(self, session_id: str) -> bool:
        """True while the session has a job that has not finished."""
        return any(
            job["session_id"] == session_id and job["status"] in PENDING_STATUSES
            for job in self.jobs.values()
        )
