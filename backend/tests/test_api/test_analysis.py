"""Tests for the one-shot analysis endpoint."""


def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_analyze_three_key_schema(client, three_key_text):
    """Successful analysis returns the output contract with camelCase keys."""
    response = client.post("/api/analyze", json={"text": three_key_text})

    assert response.status_code == 200
    body = response.json()
    assert body["successful"] is True
    data = body["data"]
    assert data["isSecondNF"] is True
    assert data["isThirdNF"] is True
    assert data["isBCNF"] is False
    assert sorted(data["candidateKeys"]) == [["a"], ["b", "c"], ["c", "d"]]
    assert len(data["attributeClosures"]) == 16
    assert all(len(item["rhs"]) == 1 for item in data["minimalCover"])


def test_analyze_flags_bcnf_violations(client, three_key_text):
    """When the schema is in 3NF, F+ members are flagged against BCNF."""
    response = client.post("/api/analyze", json={"text": three_key_text})
    closure = response.json()["data"]["dependencyClosure"]

    flagged = {(tuple(item["lhs"]), tuple(item["rhs"])) for item in closure if item["violation"] == "BCNF"}
    assert (("d",), ("b",)) in flagged
    assert all(item["violation"] is None for item in closure if item["trivial"])


def test_analyze_malformed_text(client):
    """Parse failures are answered with successful=false and the error kind."""
    response = client.post("/api/analyze", json={"text": "{a}=>{b}"})

    assert response.status_code == 200
    body = response.json()
    assert body["successful"] is False
    assert body["data"] is None
    assert "arrow" in body["message"]
    assert body["error"]["kind"] == "missing_arrow"
    assert body["error"]["position"] == 3


def test_analyze_too_many_attributes(client):
    """Schemas above the configured attribute limit are refused, not computed."""
    text = "{a,b,c,d}->{e,f,g}"
    response = client.post("/api/analyze", json={"text": text})

    body = response.json()
    assert body["successful"] is False
    assert body["error"]["type"] == "AttributeLimitExceeded"
    assert "7 attributes" in body["message"]


def test_analyze_empty_text(client):
    """Empty text is rejected by request validation."""
    response = client.post("/api/analyze", json={"text": ""})
    assert response.status_code == 422
