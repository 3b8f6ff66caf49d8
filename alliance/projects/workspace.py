"""
Collaboration workspace operations.

Every function returns a new Collaboration and leaves its input untouched.
Updates are allow-listed patches (see ``apply_patch``): ``id`` and
``createdAt`` are never changed, unknown keys are ignored, and ``updatedAt``
is refreshed on both the child record and the collaboration.
"""

import calendar
import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Callable, Dict, Optional

from ..common import apply_patch, generate_id, utc_now_iso, today_iso
from .schema import Collaboration, Task, Milestone, Document, Note

logger = logging.getLogger(__name__)

_CHILD_TYPES = {
    "tasks": Task,
    "milestones": Milestone,
    "documents": Document,
    "notes": Note,
}


def create_collaboration(fields: Optional[Dict[str, Any]]) -> Optional[Collaboration]:
    """
    Create a collaboration from form fields, filling defaults.

    Args:
        fields: camelCase fields (name, partnerName, type, startDate, ...)

    Returns:
        New Collaboration, or None if no fields were given
    """
    if fields is None:
        logger.error("Invalid collaboration data")
        return None

    now = utc_now_iso()
    collaboration = Collaboration.from_dict({
        "id": fields.get("id") or generate_id(),
        "name": fields.get("name") or "Unnamed Collaboration",
        "partnerName": fields.get("partnerName") or "Unknown Partner",
        "type": fields.get("type") or "other",
        "description": fields.get("description") or "",
        "startDate": fields.get("startDate") or today_iso(),
        "endDate": fields.get("endDate") or None,
        "objectives": fields.get("objectives") or [],
        "status": fields.get("status") or "active",
        "createdAt": fields.get("createdAt") or now,
        "updatedAt": now,
    })
    # Child records go through the same defaulting as add_* calls
    for attr, record_type in _CHILD_TYPES.items():
        children = [_new_child(record_type, child, now) for child in fields.get(attr) or []]
        collaboration = replace(collaboration, **{attr: children})
    return collaboration


def update_collaboration(
    collaboration: Collaboration,
    updates: Optional[Dict[str, Any]]
) -> Collaboration:
    """Patch the collaboration's own fields (not its child lists)."""
    if collaboration is None or not updates:
        logger.error("Invalid data for collaboration update")
        return collaboration
    return apply_patch(collaboration, updates, Collaboration.MUTABLE_FIELDS)


def _new_child(record_type: Callable, fields: Dict[str, Any], now: str):
    data = dict(fields)
    data["id"] = data.get("id") or generate_id()
    data["createdAt"] = data.get("createdAt") or now
    data["updatedAt"] = now
    # Empty form values fall back to the record defaults
    for key in [k for k, v in data.items() if v in ("", None)]:
        del data[key]
    return record_type.from_dict(data)


def _add_child(collaboration: Collaboration, attr: str, fields: Optional[Dict[str, Any]]) -> Collaboration:
    label = attr[:-1]
    if collaboration is None or not fields:
        logger.error(f"Invalid data for adding {label}")
        return collaboration

    now = utc_now_iso()
    child = _new_child(_CHILD_TYPES[attr], fields, now)
    children = list(getattr(collaboration, attr)) + [child]
    return replace(collaboration, **{attr: children, "updated_at": now})


def _update_child(
    collaboration: Collaboration,
    attr: str,
    child_id: str,
    updates: Optional[Dict[str, Any]]
) -> Collaboration:
    label = attr[:-1]
    if collaboration is None or not child_id or not updates:
        logger.error(f"Invalid data for updating {label}")
        return collaboration

    children = list(getattr(collaboration, attr))
    index = next((i for i, c in enumerate(children) if c.id == child_id), None)
    if index is None:
        logger.error(f"{label.capitalize()} not found: {child_id}")
        return collaboration

    children[index] = apply_patch(children[index], updates, _CHILD_TYPES[attr].MUTABLE_FIELDS)
    return replace(collaboration, **{attr: children, "updated_at": utc_now_iso()})


def _delete_child(collaboration: Collaboration, attr: str, child_id: str) -> Collaboration:
    label = attr[:-1]
    if collaboration is None or not child_id:
        logger.error(f"Invalid data for deleting {label}")
        return collaboration

    children = [c for c in getattr(collaboration, attr) if c.id != child_id]
    return replace(collaboration, **{attr: children, "updated_at": utc_now_iso()})


def add_task(collaboration: Collaboration, task: Dict[str, Any]) -> Collaboration:
    """Append a task (defaults: pending, medium priority)."""
    return _add_child(collaboration, "tasks", task)


def update_task(collaboration: Collaboration, task_id: str, updates: Dict[str, Any]) -> Collaboration:
    return _update_child(collaboration, "tasks", task_id, updates)


def delete_task(collaboration: Collaboration, task_id: str) -> Collaboration:
    return _delete_child(collaboration, "tasks", task_id)


def add_milestone(collaboration: Collaboration, milestone: Dict[str, Any]) -> Collaboration:
    """Append a milestone (default status: pending)."""
    return _add_child(collaboration, "milestones", milestone)


def update_milestone(collaboration: Collaboration, milestone_id: str, updates: Dict[str, Any]) -> Collaboration:
    return _update_child(collaboration, "milestones", milestone_id, updates)


def delete_milestone(collaboration: Collaboration, milestone_id: str) -> Collaboration:
    return _delete_child(collaboration, "milestones", milestone_id)


def add_document(collaboration: Collaboration, document: Dict[str, Any]) -> Collaboration:
    return _add_child(collaboration, "documents", document)


def update_document(collaboration: Collaboration, document_id: str, updates: Dict[str, Any]) -> Collaboration:
    return _update_child(collaboration, "documents", document_id, updates)


def delete_document(collaboration: Collaboration, document_id: str) -> Collaboration:
    return _delete_child(collaboration, "documents", document_id)


def add_note(collaboration: Collaboration, note: Dict[str, Any]) -> Collaboration:
    return _add_child(collaboration, "notes", note)


def update_note(collaboration: Collaboration, note_id: str, updates: Dict[str, Any]) -> Collaboration:
    return _update_child(collaboration, "notes", note_id, updates)


def delete_note(collaboration: Collaboration, note_id: str) -> Collaboration:
    return _delete_child(collaboration, "notes", note_id)


def generate_sample_collaboration(
    name: Optional[str] = None,
    partner_name: Optional[str] = None,
    start: Optional[date] = None
) -> Collaboration:
    """
    Build a demonstration collaboration running six months from ``start``.

    Contains three tasks (completed, in-progress, pending) and three pending
    milestones at +14, +60 and +90 days.
    """
    start = start or date.fromisoformat(today_iso())
    month = start.month - 1 + 6
    year = start.year + month // 12
    month = month % 12 + 1
    # Aug 31 + 6 months clamps to the last day of February
    end = date(year, month, min(start.day, calendar.monthrange(year, month)[1]))

    stamp = f"{start.isoformat()}T00:00:00.000Z"

    def day(offset: int) -> str:
        return (start + timedelta(days=offset)).isoformat()

    return Collaboration(
        id=generate_id(),
        name=name or "Sample Collaboration",
        partner_name=partner_name or "Sample Partner",
        type="co-branding",
        description="This is a sample collaboration for demonstration purposes.",
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        objectives=["audience", "content", "credibility"],
        tasks=[
            Task(id=generate_id(), title="Kick-off Meeting",
                 description="Initial project kick-off meeting with all stakeholders.",
                 assigned_to="Project Manager", due_date=day(0), status="completed",
                 priority="high", created_at=stamp, updated_at=stamp),
            Task(id=generate_id(), title="Project Plan Development",
                 description="Create detailed project plan with milestones and deliverables.",
                 assigned_to="Project Manager", due_date=day(7), status="in-progress",
                 priority="high", created_at=stamp, updated_at=stamp),
            Task(id=generate_id(), title="Brand Guidelines Review",
                 description="Review and align on brand guidelines for the collaboration.",
                 assigned_to="Marketing Team", due_date=day(14), status="pending",
                 priority="medium", created_at=stamp, updated_at=stamp),
        ],
        milestones=[
            Milestone(id=generate_id(), title="Project Initiation",
                      description="Completion of all project initiation activities.",
                      due_date=day(14), created_at=stamp, updated_at=stamp),
            Milestone(id=generate_id(), title="Content Development",
                      description="Completion of all collaborative content development.",
                      due_date=day(60), created_at=stamp, updated_at=stamp),
            Milestone(id=generate_id(), title="Campaign Launch",
                      description="Official launch of the collaborative campaign.",
                      due_date=day(90), created_at=stamp, updated_at=stamp),
        ],
        status="active",
        created_at=stamp,
        updated_at=stamp,
    )
