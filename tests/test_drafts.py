"""Tests for draft repositories"""

import json
import sqlite3

import pytest

from ghana_legal_docs.db import (
    MemoryDraftRepository,
    SQLiteDraftRepository,
    get_draft_repository,
    storage_key,
)
from ghana_legal_docs.exceptions import DraftStorageError
from ghana_legal_docs.models.records import DocumentType, TenancyRecord, VehicleTransferRecord


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, tmp_path):
    if request.param == "memory":
        return MemoryDraftRepository()
    return SQLiteDraftRepository(tmp_path / "drafts.db")


def test_storage_key():
    assert storage_key("tenancy") == "legal_doc_draft_tenancy"
    assert storage_key(DocumentType.VEHICLE_TRANSFER) == "legal_doc_draft_vehicle-transfer"


def test_load_missing(repo):
    assert repo.load("tenancy") is None
    assert not repo.has_draft("tenancy")


def test_save_and_load(repo, tenancy_record, vehicle_record):
    repo.save(DocumentType.TENANCY, tenancy_record)
    repo.save(DocumentType.VEHICLE_TRANSFER, vehicle_record)

    assert repo.load("tenancy") == tenancy_record
    loaded = repo.load("vehicle-transfer")
    assert isinstance(loaded, VehicleTransferRecord)
    assert loaded.outstanding_balance == 35000


def test_save_overwrites(repo, tenancy_record):
    repo.save("tenancy", tenancy_record)
    repo.save("tenancy", tenancy_record.model_copy(update={"tenant_name": "Esi"}))
    assert repo.load("tenancy").tenant_name == "Esi"


def test_clear(repo, tenancy_record):
    repo.save("tenancy", tenancy_record)
    repo.clear("tenancy")
    assert repo.load("tenancy") is None
    repo.clear("tenancy")


def test_snapshot_uses_camel_case(tenancy_record):
    snapshot = tenancy_record.to_snapshot()
    assert snapshot["tenantName"] == "Ama Owusu"
    assert snapshot["witness1Name"] == "Yaw Boateng"
    assert snapshot["durationUnit"] == "Years"
    assert TenancyRecord.model_validate(snapshot) == tenancy_record


def test_corrupt_snapshot_loads_as_none(tmp_path):
    repo = SQLiteDraftRepository(tmp_path / "drafts.db")
    repo.init_db()
    with repo.get_connection() as conn:
        conn.execute("INSERT INTO drafts (key, snapshot) VALUES (?, ?)",
                     ("legal_doc_draft_tenancy", json.dumps({"durationValue": -3})))
    assert repo.load("tenancy") is None


def test_save_failure_raises_storage_error(tmp_path, monkeypatch, tenancy_record):
    repo = SQLiteDraftRepository(tmp_path / "drafts.db")

    def locked(*args, **kwargs):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(sqlite3, "connect", locked)
    with pytest.raises(DraftStorageError):
        repo.save("tenancy", tenancy_record)
    assert tenancy_record.tenant_name == "Ama Owusu"


def test_get_draft_repository_uses_settings(tmp_path):
    repo = get_draft_repository()
    assert isinstance(repo, SQLiteDraftRepository)
    assert repo.db_path == tmp_path / "drafts.db"
