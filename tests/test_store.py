"""Tests for the document store."""

import json

import pytest

from alliance.projects import generate_sample_collaboration, update_collaboration
from alliance.storage import (
    AppStore,
    DataImportError,
    StorageConfig,
    create_store_from_config,
    default_document,
    validate_imported_data,
)


class TestPersistence:
    def test_new_store_has_defaults(self, store):
        assert store.data == default_document()
        assert store.initialized is False
        assert store.load() is False

    def test_saved_state_reloads(self, store, brand):
        store.ensure_initialized()
        store.set_profile(brand)

        reloaded = AppStore(store.config)
        assert reloaded.load() is True
        assert reloaded.initialized is True
        assert reloaded.get_profile().brand_name == "Nimbus"
        assert reloaded.data == store.data

    def test_other_keys_in_file_survive(self, tmp_path):
        path = tmp_path / "shared.json"
        path.write_text(json.dumps({"otherApp": {"x": 1}}))

        store = AppStore(StorageConfig(path=str(path)))
        store.save()

        contents = json.loads(path.read_text())
        assert contents["otherApp"] == {"x": 1}
        assert "strategicAllianceBuilder" in contents

    def test_ensure_initialized_runs_once(self, store):
        assert store.ensure_initialized() is True
        assert store.ensure_initialized() is False

    def test_clear(self, store, brand):
        store.set_profile(brand)
        store.clear()
        assert store.data == default_document()

    def test_factory_loads(self, tmp_path):
        config = {"storage": {"path": str(tmp_path / "store.json")}}
        first = create_store_from_config(config)
        first.update_settings(theme="dark")

        second = create_store_from_config(config)
        assert second.data["settings"]["theme"] == "dark"


class TestExportImport:
    def test_round_trip(self, store, brand, partner_pool, tmp_path):
        store.ensure_initialized()
        store.set_profile(brand)
        store.set_partners(partner_pool)
        store.upsert_collaboration(generate_sample_collaboration())
        store.add_custom_metric({"name": "Leads", "type": "number", "frequency": "monthly"})

        restored = AppStore(StorageConfig(path=str(tmp_path / "restored.json")))
        restored.import_json(store.export_json())

        assert restored.data == store.data
        assert restored.initialized is True

    def test_import_does_not_alias_input(self, store):
        exported = json.loads(store.export_json())
        store.import_json(json.dumps(exported))
        store.add_activity("after import")
        assert exported["data"]["activities"] == []

    def test_invalid_json(self, store):
        with pytest.raises(DataImportError, match="Invalid JSON"):
            store.import_json("{not json")

    def test_missing_keys(self, store):
        with pytest.raises(DataImportError, match="initialized"):
            store.import_json(json.dumps({"data": {}}))

    def test_failed_import_keeps_data(self, store, brand):
        store.set_profile(brand)
        before = json.loads(store.export_json())
        with pytest.raises(DataImportError):
            store.import_json("[]")
        assert json.loads(store.export_json()) == before

    def test_bare_document_import(self, store, brand):
        document = {"profile": brand.to_dict(), "partners": [], "collaborations": []}
        store.import_json(json.dumps(document))

        assert store.initialized is True
        assert store.get_profile().brand_name == "Nimbus"
        assert store.data["settings"] == default_document()["settings"]

    def test_bare_document_is_validated(self, store):
        with pytest.raises(DataImportError, match="profile"):
            store.import_json(json.dumps({"profile": "oops", "partners": []}))

    def test_object_without_document_sections_is_rejected(self, store):
        with pytest.raises(DataImportError, match="Missing required key"):
            store.import_json(json.dumps({"theme": "dark"}))

    def test_bytes_import(self, store, brand):
        store.set_profile(brand)
        restored = AppStore(StorageConfig(path=str(store.path.parent / "restored.json")))
        restored.import_json(store.export_json().encode("utf-8"))
        assert restored.data == store.data

    def test_non_utf8_bytes(self, store):
        with pytest.raises(DataImportError, match="UTF-8"):
            store.import_json(b"\xff\xfe{}")

    @pytest.mark.parametrize("data", [
        {"profile": "oops"},
        {"collaborations": ["x"]},
        {"partners": [1]},
    ])
    def test_malformed_sections_are_not_saved(self, store, data):
        with pytest.raises(DataImportError):
            store.import_json(json.dumps({"initialized": True, "data": data}))

        reloaded = AppStore(store.config)
        reloaded.load()
        assert reloaded.get_profile() is None
        assert reloaded.get_collaborations() == []


@pytest.mark.parametrize("envelope, n_issues", [
    ({"initialized": True, "data": {}}, 0),
    ({"initialized": True}, 1),
    ({}, 2),
    ({"initialized": True, "data": []}, 1),
    ({"initialized": True, "data": {"partners": {}}}, 1),
    ({"initialized": True, "data": {"settings": []}}, 1),
    ({"initialized": True, "data": {"profile": None}}, 0),
    ({"initialized": True, "data": {"profile": "oops"}}, 1),
    ({"initialized": True, "data": {"collaborations": ["x"], "activities": [{}]}}, 1),
    ("text", 1),
])
def test_validate_imported_data(envelope, n_issues):
    assert len(validate_imported_data(envelope)) == n_issues


class TestActivities:
    def test_newest_first_and_capped(self, store):
        for i in range(12):
            store.add_activity(f"event {i}")

        descriptions = [a["description"] for a in store.data["activities"]]
        assert len(descriptions) == 10
        assert descriptions[0] == "event 11"
        assert descriptions[-1] == "event 2"

    def test_profile_update_logs_activity(self, store, brand):
        profile = store.set_profile(brand)

        assert profile.created_at is not None
        assert store.data["activities"][0]["description"] == "Updated brand profile"

    def test_set_profile_leaves_argument_untouched(self, store, brand):
        stored = store.set_profile(brand)

        assert brand.created_at is None
        assert brand.updated_at is None
        assert stored is not brand
        assert stored.updated_at is not None

    def test_profile_keeps_creation_time(self, store, brand):
        first = store.set_profile(brand).created_at
        second = store.set_profile(store.get_profile().to_dict() | {"createdAt": None}).created_at
        assert second == first


class TestCustomMetrics:
    def test_add_and_delete(self, store):
        metric = store.add_custom_metric({"name": "Leads", "description": "Qualified leads"})

        assert store.data["customMetrics"] == [metric]
        assert store.data["activities"][0]["description"] == "Added custom metric: Leads"
        assert store.delete_custom_metric(metric["id"]) is True
        assert store.data["customMetrics"] == []

    def test_delete_unknown(self, store):
        assert store.delete_custom_metric("missing") is False


def test_update_settings_ignores_unknown_keys(store):
    settings = store.update_settings(theme="dark", compactView=True, language="fr")

    assert settings == {"theme": "dark", "fontSize": "medium", "compactView": True}
    assert store.data["settings"] == settings


class TestCollaborations:
    def test_upsert_and_remove(self, store):
        collaboration = generate_sample_collaboration(name="Summer")
        store.upsert_collaboration(collaboration)
        store.upsert_collaboration(update_collaboration(collaboration, {"name": "Winter"}))

        stored = store.get_collaborations()
        assert len(stored) == 1
        assert store.get_collaboration(collaboration.id).name == "Winter"
        assert len(store.get_collaboration(collaboration.id).tasks) == 3

        assert store.remove_collaboration(collaboration.id) is True
        assert store.remove_collaboration(collaboration.id) is False
        assert store.get_collaboration(collaboration.id) is None
