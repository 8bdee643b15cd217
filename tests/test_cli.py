"""Tests for the command line interface"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ghana_legal_docs.cli.main import app
from ghana_legal_docs.db import get_draft_repository
from ghana_legal_docs.utils.config import get_settings

runner = CliRunner()


@pytest.fixture
def tenancy_file(tmp_path, tenancy_record):
    path = tmp_path / "tenancy.json"
    path.write_text(json.dumps(tenancy_record.to_snapshot()), encoding="utf-8")
    return path


def test_clauses_lists_library():
    result = runner.invoke(app, ["clauses"])
    assert result.exit_code == 0
    assert "Restrictions & Rules:1" in result.output


def test_preview(tenancy_file):
    result = runner.invoke(app, ["preview", "tenancy", "--data", str(tenancy_file)])
    assert result.exit_code == 0
    assert "TENANCY AGREEMENT" in result.output
    assert "PROPERTY DESCRIPTION" in result.output


def test_export_docx_with_clause(tenancy_file, tmp_path):
    result = runner.invoke(app, [
        "export", "tenancy", "--data", str(tenancy_file), "--format", "docx",
        "--clause", "Restrictions & Rules:1", "--output", str(tmp_path / "docs"),
    ])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "docs" / "Tenancy_Agreement_Ama Owusu.docx").exists()


def test_export_bad_clause(tenancy_file):
    result = runner.invoke(app, ["export", "tenancy", "--data", str(tenancy_file), "--clause", "Nope:1"])
    assert result.exit_code == 1


def test_export_invalid_data(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["export", "vehicle-transfer", "--data", str(path)])
    assert result.exit_code == 1


def test_export_without_data_uses_blank_form():
    result = runner.invoke(app, ["export", "vehicle-transfer", "--format", "pdf"])
    assert result.exit_code == 0, result.output
    assert "PDF Generated!" in result.output


def test_draft_commands(tenancy_file):
    result = runner.invoke(app, ["draft", "save", "tenancy", "--data", str(tenancy_file)])
    assert result.exit_code == 0, result.output
    assert get_draft_repository().load("tenancy").tenant_name == "Ama Owusu"

    result = runner.invoke(app, ["draft", "show", "tenancy"])
    assert result.exit_code == 0
    assert json.loads(result.output)["tenantName"] == "Ama Owusu"

    result = runner.invoke(app, ["export", "tenancy", "--format", "print"])
    assert result.exit_code == 0, result.output
    assert (Path(get_settings().output_dir) / "Tenancy_Agreement_Ama Owusu.html").exists()

    result = runner.invoke(app, ["draft", "clear", "tenancy"])
    assert result.exit_code == 0
    assert get_draft_repository().load("tenancy") is None


def test_draft_show_missing():
    result = runner.invoke(app, ["draft", "show", "vehicle-transfer"])
    assert result.exit_code == 1
