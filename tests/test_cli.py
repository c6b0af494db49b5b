import json

from cli import main


def test_analyze_text(tmp_path, capsys):
	(tmp_path / "greet.proto").write_text("service Greeter {\n rpc Hi(Req) returns (Resp);\n}\n")
	assert main(["analyze", str(tmp_path)]) == 0
	out = capsys.readouterr().out
	assert "RPC Services: 1" in out
	assert "Hi(Req) returns Resp" in out


def test_analyze_json(tmp_path, capsys):
	(tmp_path / "go.mod").write_text("module m\n\nrequire github.com/zeromicro/go-zero v1.6.0\n")
	assert main(["analyze", "--json", str(tmp_path)]) == 0
	payload = json.loads(capsys.readouterr().out)
	assert payload["summary"]["framework_version"] == "1.6.0"
	assert payload["analysis"]["dependencies"][0]["type"] == "direct"


def test_analyze_missing_path(tmp_path, capsys):
	assert main(["analyze", str(tmp_path / "missing")]) == 1
	assert "does not exist" in capsys.readouterr().err


def test_schema(tmp_path, capsys):
	ddl = tmp_path / "user.sql"
	ddl.write_text("CREATE TABLE `user` (\n `id` bigint NOT NULL PRIMARY KEY,\n `name` varchar(32)\n)")
	assert main(["schema", str(ddl)]) == 0
	payload = json.loads(capsys.readouterr().out)
	assert payload["table_name"] == "user"
	assert [f["name"] for f in payload["fields"]] == ["id", "name"]
