"""Tests for background analysis job endpoints."""


def test_start_job(client, partial_dependency_text):
    """Starting a job returns its id; TestClient runs the background task before returning."""
    response = client.post("/api/jobs/start", json={"text": partial_dependency_text, "session_id": "s1"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "started"
    assert len(data["job_id"]) > 0
    assert "created_at" in data


def test_job_status_and_result(client, partial_dependency_text):
    """A finished job exposes its single worker response."""
    job_id = client.post("/api/jobs/start", json={"text": partial_dependency_text}).json()["job_id"]

    status = client.get(f"/api/jobs/status/{job_id}")
    assert status.status_code == 200
    assert status.json()["status"] == "completed"
    assert status.json()["session_id"] == "default"

    result = client.get(f"/api/jobs/result/{job_id}").json()
    assert result["successful"] is True
    assert result["data"]["isSecondNF"] is False


def test_failed_job_keeps_message(client):
    """A job with malformed text finishes as failed with the parser message."""
    job_id = client.post("/api/jobs/start", json={"text": "{a}->{}"}).json()["job_id"]

    assert client.get(f"/api/jobs/status/{job_id}").json()["status"] == "failed"
    result = client.get(f"/api/jobs/result/{job_id}").json()
    assert result["successful"] is False
    assert result["error"]["kind"] == "empty_segment"


def test_second_job_rejected_while_pending(client, job_manager, partial_dependency_text):
    """Only one pending analysis per session."""
    job_manager.create_job("queued-job", partial_dependency_text, session_id="busy", status="pending")

    response = client.post("/api/jobs/start", json={"text": partial_dependency_text, "session_id": "busy"})
    assert response.status_code == 409

    other = client.post("/api/jobs/start", json={"text": partial_dependency_text, "session_id": "idle"})
    assert other.status_code == 200


def test_result_of_unfinished_job(client, job_manager):
    """Results are not available until the job has finished."""
    job_manager.create_job("queued-job", "{a}->{b}", session_id="s", status="pending")

    response = client.get("/api/jobs/result/queued-job")
    assert response.status_code == 409


def test_unknown_job(client):
    """Unknown job ids answer 404."""
    assert client.get("/api/jobs/status/nonexistent-job-id").status_code == 404
    assert client.get("/api/jobs/result/nonexistent-job-id").status_code == 404
