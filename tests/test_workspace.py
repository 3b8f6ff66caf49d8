"""Tests for collaboration workspace operations."""

from datetime import date

from alliance.projects import (
    create_collaboration,
    update_collaboration,
    add_task,
    update_task,
    delete_task,
    add_milestone,
    update_milestone,
    delete_milestone,
    add_document,
    update_document,
    delete_document,
    add_note,
    update_note,
    delete_note,
    generate_sample_collaboration,
    calculate_progress,
)


class TestCreateCollaboration:
    def test_defaults(self):
        collaboration = create_collaboration({})

        assert collaboration.name == "Unnamed Collaboration"
        assert collaboration.partner_name == "Unknown Partner"
        assert collaboration.type == "other"
        assert collaboration.status == "active"
        assert collaboration.start_date
        assert collaboration.id
        assert collaboration.created_at == collaboration.updated_at

    def test_fields_and_children(self):
        collaboration = create_collaboration({
            "name": "Summer Campaign",
            "partnerName": "SportsFit",
            "type": "co-branding",
            "startDate": "2025-06-01",
            "endDate": "2025-09-01",
            "tasks": [{"title": "Brief", "status": "completed"}],
        })

        assert collaboration.name == "Summer Campaign"
        assert collaboration.end_date == "2025-09-01"
        assert len(collaboration.tasks) == 1
        assert collaboration.tasks[0].status == "completed"
        assert collaboration.tasks[0].id

    def test_missing_fields(self):
        assert create_collaboration(None) is None


class TestUpdateCollaboration:
    def test_patch_protects_identity(self, collaboration):
        updated = update_collaboration(collaboration, {
            "name": "Renamed",
            "id": "other",
            "createdAt": "2030-01-01",
            "tasks": [],
            "unknown": True,
        })

        assert updated.name == "Renamed"
        assert updated.id == collaboration.id
        assert updated.created_at == collaboration.created_at
        assert updated.updated_at != collaboration.updated_at
        assert collaboration.name == "Launch"

    def test_empty_updates_return_input(self, collaboration):
        assert update_collaboration(collaboration, {}) is collaboration


class TestTasks:
    def test_add_task_applies_defaults(self, collaboration):
        updated = add_task(collaboration, {"title": "Brief", "assignedTo": ""})
        task = updated.tasks[0]

        assert task.title == "Brief"
        assert task.status == "pending"
        assert task.priority == "medium"
        assert task.assigned_to == ""
        assert collaboration.tasks == []
        assert updated.updated_at != collaboration.updated_at

    def test_update_task(self, collaboration):
        collaboration = add_task(collaboration, {"title": "Brief"})
        task = collaboration.tasks[0]
        updated = update_task(collaboration, task.id, {"status": "completed", "id": "x", "createdAt": "x"})

        assert updated.tasks[0].status == "completed"
        assert updated.tasks[0].id == task.id
        assert updated.tasks[0].created_at == task.created_at

    def test_update_unknown_task_returns_unchanged(self, collaboration):
        collaboration = add_task(collaboration, {"title": "Brief"})
        assert update_task(collaboration, "missing", {"status": "completed"}) is collaboration

    def test_delete_task(self, collaboration):
        collaboration = add_task(add_task(collaboration, {"title": "A"}), {"title": "B"})
        updated = delete_task(collaboration, collaboration.tasks[0].id)
        assert [t.title for t in updated.tasks] == ["B"]

    def test_invalid_add(self, collaboration):
        assert add_task(collaboration, None) is collaboration
        assert add_task(None, {"title": "A"}) is None


class TestOtherChildren:
    def test_milestones(self, collaboration):
        collaboration = add_milestone(collaboration, {"title": "Launch", "dueDate": "2025-01-20"})
        milestone = collaboration.milestones[0]
        assert milestone.status == "pending"

        collaboration = update_milestone(collaboration, milestone.id, {"status": "completed"})
        assert collaboration.milestones[0].status == "completed"
        assert delete_milestone(collaboration, milestone.id).milestones == []

    def test_documents(self, collaboration):
        collaboration = add_document(collaboration, {"title": "Contract", "url": "https://example.com/c.pdf"})
        document = collaboration.documents[0]
        assert document.version == "1.0"

        collaboration = update_document(collaboration, document.id, {"version": "2.0", "createdBy": "x"})
        assert collaboration.documents[0].version == "2.0"
        assert collaboration.documents[0].created_by == ""
        assert delete_document(collaboration, document.id).documents == []

    def test_notes(self, collaboration):
        collaboration = add_note(collaboration, {"content": "Call went well"})
        note = collaboration.notes[0]
        assert note.title == "Untitled Note"

        collaboration = update_note(collaboration, note.id, {"title": "Call"})
        assert collaboration.notes[0].title == "Call"
        assert delete_note(collaboration, note.id).notes == []


class TestSampleCollaboration:
    def test_structure(self):
        sample = generate_sample_collaboration(start=date(2025, 1, 10))

        assert sample.start_date == "2025-01-10"
        assert sample.end_date == "2025-07-10"
        assert [t.status for t in sample.tasks] == ["completed", "in-progress", "pending"]
        assert [m.due_date for m in sample.milestones] == ["2025-01-24", "2025-03-11", "2025-04-10"]

    def test_end_date_clamps_to_month_end(self):
        sample = generate_sample_collaboration(start=date(2025, 8, 31))
        assert sample.end_date == "2026-02-28"

    def test_progress(self):
        sample = generate_sample_collaboration(start=date(2025, 1, 10))
        report = calculate_progress(sample)

        # tasks 50 %, milestones 0 %
        assert report.overall_progress == 30
