from datetime import date

import pytest
from bson import ObjectId

from backend.app import models
from backend.app.services.identifiers import (
    InvalidIdentifierError,
    NativeId,
    OpaqueId,
    resolve_identifier,
)
from backend.app.services.repository import (
    DuplicateRecordError,
    InvalidPayloadError,
    RecordNotFoundError,
    Repository,
)


def _payload(**extra):
    payload = {
        "project_id": "proj-1",
        "record_date": date(2025, 2, 1),
        "record_type": models.RecordType.INCOME,
        "amount": 250.0,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def records(db_session):
    return Repository(db_session, models.FinancialRecord)


def test_resolve_identifier_classifies_forms():
    hex_id = str(ObjectId())

    assert isinstance(resolve_identifier(hex_id), NativeId)
    assert isinstance(resolve_identifier(ObjectId(hex_id)), NativeId)
    assert resolve_identifier("rec-001") == OpaqueId("rec-001")
    assert isinstance(resolve_identifier("1234"), OpaqueId)


@pytest.mark.parametrize("raw", [None, "", "   ", "bad id!"])
def test_resolve_identifier_rejects_invalid_values(raw):
    with pytest.raises(InvalidIdentifierError):
        resolve_identifier(raw)


def test_create_defaults_application_id_to_native_id(records):
    record = records.create(_payload())

    assert record.id == record.object_id
    assert ObjectId.is_valid(record.object_id)
    assert record.archived is False
    assert records.get(record.object_id) is record


def test_record_is_reachable_by_either_identifier(records):
    record = records.create(_payload(id="rec-001"))

    assert record.id == "rec-001"
    assert records.get("rec-001") is record
    assert records.get(record.object_id) is record


def test_native_identifier_never_falls_back_to_application_id(db_session, records):
    native, application = str(ObjectId()), str(ObjectId())
    db_session.add(
        models.FinancialRecord(
            object_id=native,
            id=application,
            project_id="proj-1",
            record_date=date(2025, 1, 1),
            record_type=models.RecordType.INCOME,
            amount=1,
        )
    )
    db_session.commit()

    assert records.get(native) is not None
    assert records.get(application) is None


def test_update_strips_protected_fields_and_refreshes_timestamp(records):
    record = records.create(_payload(id="rec-002"))
    created_at = record.created_at
    original_updated_at = record.updated_at

    updated = records.update(
        "rec-002",
        {
            "_id": str(ObjectId()),
            "id": "hijacked",
            "created_at": "2000-01-01T00:00:00",
            "archived": True,
            "amount": 300.0,
        },
    )

    assert updated.id == "rec-002"
    assert updated.amount == 300.0
    assert updated.archived is False
    assert updated.created_at == created_at
    assert updated.updated_at >= original_updated_at


def test_update_rejects_unknown_fields(records):
    records.create(_payload(id="rec-003"))

    with pytest.raises(InvalidPayloadError):
        records.update("rec-003", {"colour": "blue"})


def test_update_reports_matched_and_modified_counts(records):
    records.create(_payload(id="rec-004"))

    unchanged = records.update_one("rec-004", {"amount": 250.0})
    changed = records.update_one("rec-004", {"amount": 10.0})
    missing = records.update_one("rec-missing", {"amount": 10.0})

    assert (unchanged.matched_count, unchanged.modified_count) == (1, 0)
    assert (changed.matched_count, changed.modified_count) == (1, 1)
    assert (missing.matched_count, missing.modified_count) == (0, 0)


def test_update_with_null_required_column_is_invalid_payload(records):
    records.create(_payload(id="rec-005"))

    with pytest.raises(InvalidPayloadError):
        records.update("rec-005", {"project_id": None})

    assert records.require("rec-005").project_id == "proj-1"
    assert records.update("rec-005", {"amount": 5.0}).amount == 5.0


@pytest.mark.parametrize("missing_id", ["rec-missing", str(ObjectId())])
def test_lifecycle_operations_raise_not_found(records, missing_id):
    with pytest.raises(RecordNotFoundError):
        records.update(missing_id, {"amount": 1.0})
    with pytest.raises(RecordNotFoundError):
        records.archive(missing_id)
    with pytest.raises(RecordNotFoundError):
        records.restore(missing_id)


def test_archive_hides_from_default_listing_and_restore_brings_back(records):
    kept = records.create(_payload(id="rec-keep"))
    archived = records.create(_payload(id="rec-archive"))

    records.archive("rec-archive")

    active, total = records.list()
    assert total == 1
    assert [item.id for item in active] == [kept.id]
    hidden, hidden_total = records.list_archived()
    assert hidden_total == 1
    assert hidden[0].id == archived.id
    assert hidden[0].archived_at is not None
    assert records.get("rec-archive").archived is True

    records.restore("rec-archive")

    restored = records.get("rec-archive")
    assert restored.archived is False
    assert restored.archived_at is None
    assert records.list()[1] == 2
    assert records.list_archived()[1] == 0


def test_duplicate_application_id_is_rejected(records):
    records.create(_payload(id="rec-dup"))

    with pytest.raises(DuplicateRecordError):
        records.create(_payload(id="rec-dup"))


def test_caller_supplied_native_id_becomes_both_identifiers(records):
    native = str(ObjectId())

    record = records.create(_payload(id=native))

    assert record.object_id == native
    assert record.id == native


def test_association_archive_updates_status(db_session, association):
    repository = Repository(db_session, models.Association)

    archived = repository.archive(association.id)
    assert archived.archived is True
    assert archived.status == models.AssociationStatus.ARCHIVED

    restored = repository.restore(association.object_id)
    assert restored.archived is False
    assert restored.status == models.AssociationStatus.ACTIVE


def test_monitoring_records_use_their_own_archive_flag(db_session):
    repository = Repository(db_session, models.MonitoringRecord)
    record = repository.create({"association_id": "a", "visit_date": date(2025, 3, 3)})

    repository.archive(record.id)

    assert repository.get(record.id).is_archived is True
    assert repository.list()[1] == 0
    assert repository.list_archived()[1] == 1
