from fastapi.testclient import TestClient

from api import create_app
from specscan.analyze import ProjectAnalyzer
from specscan.cache import AnalysisCache


def _client():
	return TestClient(create_app(ProjectAnalyzer(cache=AnalysisCache(ttl=300))))


def test_analyze_endpoint(tmp_path):
	(tmp_path / "user.api").write_text("service user-api {\n\t@handler Get\n\tget /u\n}\n")
	client = _client()

	resp = client.post("/analyze", json={"project_path": str(tmp_path)})
	assert resp.status_code == 200
	body = resp.json()
	assert body["from_cache"] is False
	assert body["analysis"]["summary"]["api_services"] == 1
	assert body["analysis"]["services"][0]["kind"] == "http-service"
	assert "Total Services: 1" in body["report"]

	again = client.post("/analyze", json={"project_path": str(tmp_path)})
	assert again.json()["from_cache"] is True


def test_analyze_missing_path(tmp_path):
	resp = _client().post("/analyze", json={"project_path": str(tmp_path / "missing")})
	assert resp.status_code == 404


def test_analyze_file_path(tmp_path):
	f = tmp_path / "go.mod"
	f.write_text("module x\n")
	resp = _client().post("/analyze", json={"project_path": str(f)})
	assert resp.status_code == 400


def test_schema_endpoint():
	client = _client()
	resp = client.post("/schema", json={"ddl": "CREATE TABLE `t` (\n `id` int PRIMARY KEY\n)"})
	assert resp.status_code == 200
	assert resp.json()["primary_key"] == "id"

	bad = client.post("/schema", json={"ddl": "nothing here"})
	assert bad.status_code == 422
