"""Tests for AnalysisService."""

import asyncio

import pytest


@pytest.mark.asyncio
async def test_analyze_text(analysis_service, three_key_text):
    """One-shot analysis returns a successful worker response."""
    response = await analysis_service.analyze_text(three_key_text)

    assert response.successful is True
    assert response.data.is_third_nf is True
    assert response.data.is_bcnf is False


@pytest.mark.asyncio
async def test_analyze_text_failure(analysis_service):
    """Malformed text never raises out of the service."""
    response = await analysis_service.analyze_text("{a}->{b} {c}->{d}")

    assert response.successful is False
    assert response.error.kind == "unexpected_character"


@pytest.mark.asyncio
async def test_run_job_stores_result(analysis_service, job_manager, partial_dependency_text):
    """run_job moves the job to completed and stores the serialized response."""
    job_manager.create_job("job-1", partial_dependency_text, session_id="s1")

    await analysis_service.run_job("job-1", job_manager)

    job = job_manager.get_job("job-1")
    assert job["status"] == "completed"
    assert job["result"]["successful"] is True
    assert job["result"]["data"]["isSecondNF"] is False
    assert job_manager.has_pending("s1") is False


@pytest.mark.asyncio
async def test_run_job_unknown(analysis_service, job_manager):
    """A missing job is skipped without error."""
    await analysis_service.run_job("missing", job_manager)
    assert job_manager.get_job("missing") is None


def test_one_worker_per_session(analysis_service):
    """Sessions get their own worker, reused across jobs."""
    first = analysis_service.worker_for("s1")
    assert analysis_service.worker_for("s1") is first
    assert analysis_service.worker_for("s2") is not first


@pytest.mark.asyncio
async def test_idle_workers_are_released(analysis_service, job_manager, three_key_text):
    """Finished sessions do not keep a worker around."""
    for i in range(3):
        job_manager.create_job(f"job-{i}", three_key_text, session_id=f"session-{i}")
        await analysis_service.run_job(f"job-{i}", job_manager)

    assert analysis_service.workers == {}


@pytest.mark.asyncio
async def test_busy_worker_is_kept(analysis_service, job_manager, three_key_text):
    """A worker still computing is not released."""
    job_manager.create_job("job-1", three_key_text, session_id="s1")
    task = asyncio.create_task(analysis_service.run_job("job-1", job_manager))
    await asyncio.sleep(0)

    worker = analysis_service.workers["s1"]
    assert worker.busy
    analysis_service.release_worker("s1", worker)
    assert analysis_service.workers["s1"] is worker

    await task
    assert analysis_service.workers == {}
    assert job_manager.get_job("job-1")["status"] == "completed"
