import json

import pytest
from click.testing import CliRunner

from json_schema_to_ts.json_schema_to_ts import json_schema_to_ts, parse_type_mapping

USER_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "Long"},
        "created": {"type": "Date"},
    },
    "required": ["id"],
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "user-info.json"
    path.write_text(json.dumps(USER_SCHEMA), encoding="utf-8")
    return path


class TestSchemaMode:
    def test_default_name_comes_from_the_file_name(self, runner, schema_file):
        result = runner.invoke(json_schema_to_ts, [str(schema_file)])
        assert result.exit_code == 0, result.output
        assert "export interface UserInfo {" in result.output
        assert "id: number;" in result.output

    def test_name_option(self, runner, schema_file):
        result = runner.invoke(json_schema_to_ts, ["--name", "Account", str(schema_file)])
        assert result.exit_code == 0, result.output
        assert "export interface Account {" in result.output

    def test_type_mapping_option(self, runner, schema_file):
        result = runner.invoke(json_schema_to_ts, ["-m", "Date=string", str(schema_file)])
        assert result.exit_code == 0, result.output
        assert "created?: string;" in result.output

    def test_unmapped_type_is_unknown(self, runner, schema_file):
        result = runner.invoke(json_schema_to_ts, [str(schema_file)])
        assert "created?: unknown;" in result.output

    def test_bad_type_mapping(self, runner, schema_file):
        result = runner.invoke(json_schema_to_ts, ["-m", "Date", str(schema_file)])
        assert result.exit_code != 0
        assert "SOURCE=TARGET" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(json_schema_to_ts, [str(path)])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_config_file(self, runner, schema_file, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps({"custom_type_mapping": {"date": "string"}, "add_generation_comment": True}),
            encoding="utf-8",
        )
        result = runner.invoke(json_schema_to_ts, ["-c", str(config), str(schema_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("// Generated by json_schema_to_ts")
        assert "created?: string;" in result.output


class TestOutputFile:
    def test_writes_output(self, runner, schema_file, tmp_path):
        output = tmp_path / "out" / "user.d.ts"
        result = runner.invoke(json_schema_to_ts, [str(schema_file), str(output)])
        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert content.startswith("export interface UserInfo {")
        assert content.endswith("}\n")

    def test_existing_output_needs_force(self, runner, schema_file, tmp_path):
        output = tmp_path / "user.d.ts"
        output.write_text("// old\n", encoding="utf-8")

        result = runner.invoke(json_schema_to_ts, [str(schema_file), str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text(encoding="utf-8") == "// old\n"

        result = runner.invoke(json_schema_to_ts, ["--force", str(schema_file), str(output)])
        assert result.exit_code == 0, result.output
        assert "export interface UserInfo" in output.read_text(encoding="utf-8")


class TestInterfaceMode:
    def write_payload(self, tmp_path, payload):
        path = tmp_path / "interface.json"
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    def test_request_and_response(self, runner, tmp_path):
        payload = {
            "errcode": 0,
            "data": {
                "path": "/api/user/get",
                "title": "Get user",
                "req_body_other": json.dumps({"type": "object", "properties": {"id": {"type": "int"}}}),
                "res_body": json.dumps({"type": "object", "properties": {"name": {"type": "string"}}}),
            },
        }
        result = runner.invoke(json_schema_to_ts, ["--interface", str(self.write_payload(tmp_path, payload))])
        assert result.exit_code == 0, result.output
        assert "export interface ApiUserGetRequest {\n  id?: number;\n}" in result.output
        assert "export interface ApiUserGetResponse {\n  name?: string;\n}" in result.output

    def test_failure_reports_errmsg(self, runner, tmp_path):
        payload = {"errcode": 40011, "errmsg": "请登录...", "data": None}
        result = runner.invoke(json_schema_to_ts, ["--interface", str(self.write_payload(tmp_path, payload))])
        assert result.exit_code == 1
        assert "请登录..." in result.output


def test_parse_type_mapping():
    assert parse_type_mapping(["Date=string", " Money = number "]) == {"Date": "string", "Money": "number"}
