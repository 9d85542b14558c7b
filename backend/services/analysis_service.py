"""Analysis service: runs the FD2NF worker boundary for API requests."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional

from FD2NF.ir.models.analysis import WorkerResponse
from FD2NF.pipeline import AnalysisInFlightError, AnalysisWorker, handle_request
from FD2NF.utils.engine_config import EngineConfig, get_engine_config

from backend.utils.job_manager import JobManager

logger = logging.getLogger(__name__)


class AnalysisService:
    """Executes analyses off the event loop, one worker per session."""

    def __init__(self, max_workers: int = 2, config: Optional[EngineConfig] = None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fd2nf")
        self.config = config or get_engine_config()
        self.workers: Dict[str, AnalysisWorker] = {}

    def worker_for(self, session_id: str) -> AnalysisWorker:
        worker = self.workers.get(session_id)
        if worker is None:
            worker = AnalysisWorker(executor=self.executor, config=self.config)
            self.workers[session_id] = worker
        return worker

    def release_worker(self, session_id: str, worker: AnalysisWorker) -> None:
        """Forget an idle worker so finished sessions do not accumulate."""
        if not worker.busy and self.workers.get(session_id) is worker:
            del self.workers[session_id]

    async def analyze_text(self, text: str) -> WorkerResponse:
        """One-shot analysis; the computation runs on the thread pool."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, handle_request, text, self.config)

    async def run_job(self, job_id: str, job_manager: JobManager) -> None:
        """Background task: analyze a queued job and store its single response."""
        job = job_manager.get_job(job_id)
        if not job:
            logger.warning(f"Job {job_id} disappeared before it could run")
            return

        session_id = job["session_id"]
        job_manager.update_job(job_id, status="running")
        logger.info(f"Job {job_id}: analysis started for session {session_id}")

        worker = self.worker_for(session_id)
        try:
            response = await worker.submit(job["text"])
        except AnalysisInFlightError as e:
            logger.warning(f"Job {job_id}: {e}")
            response = WorkerResponse(successful=False, message=str(e))
        finally:
            self.release_worker(session_id, worker)

        status = "completed" if response.successful else "failed"
        job_manager.update_job(
            job_id,
            status=status,
            result=response.model_dump(mode="json", by_alias=True),
        )
        logger.info(f"Job {job_id}: {status}")
