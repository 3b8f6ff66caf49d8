"""
Collaboration workspace records.

A collaboration owns ordered lists of tasks, milestones, documents and notes.
Each record type declares ``MUTABLE_FIELDS``, the allow-list of fields a patch
update may change; ``id`` and ``created_at`` are never patchable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List


class TaskStatus(Enum):
    """Task lifecycle states."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MilestoneStatus(Enum):
    """Milestone states."""
    PENDING = "pending"
    COMPLETED = "completed"
    MISSED = "missed"


class TaskPriority(Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Task:
    """A unit of work inside a collaboration."""
    id: str
    title: str = "Untitled Task"
    description: str = ""
    assigned_to: str = ""
    due_date: Optional[str] = None
    status: str = TaskStatus.PENDING.value
    priority: str = TaskPriority.MEDIUM.value
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    MUTABLE_FIELDS = ("title", "description", "assigned_to", "due_date", "status", "priority")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "assignedTo": self.assigned_to,
            "dueDate": self.due_date,
            "status": self.status,
            "priority": self.priority,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=data.get("id"),
            title=data.get("title", "Untitled Task"),
            description=data.get("description", ""),
            assigned_to=data.get("assignedTo", ""),
            due_date=data.get("dueDate"),
            status=data.get("status", TaskStatus.PENDING.value),
            priority=data.get("priority", TaskPriority.MEDIUM.value),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class Milestone:
    """A dated checkpoint inside a collaboration."""
    id: str
    title: str = "Untitled Milestone"
    description: str = ""
    due_date: Optional[str] = None
    status: str = MilestoneStatus.PENDING.value
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    MUTABLE_FIELDS = ("title", "description", "due_date", "status")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Milestone":
        return cls(
            id=data.get("id"),
            title=data.get("title", "Untitled Milestone"),
            description=data.get("description", ""),
            due_date=data.get("dueDate"),
            status=data.get("status", MilestoneStatus.PENDING.value),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class Document:
    """A document reference shared in a collaboration."""
    id: str
    title: str = "Untitled Document"
    description: str = ""
    file_type: str = "other"
    url: str = ""
    version: str = "1.0"
    created_by: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    MUTABLE_FIELDS = ("title", "description", "file_type", "url", "version")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "fileType": self.file_type,
            "url": self.url,
            "version": self.version,
            "createdBy": self.created_by,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        return cls(
            id=data.get("id"),
            title=data.get("title", "Untitled Document"),
            description=data.get("description", ""),
            file_type=data.get("fileType", "other"),
            url=data.get("url", ""),
            version=data.get("version", "1.0"),
            created_by=data.get("createdBy", ""),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class Note:
    """A free-text note in a collaboration."""
    id: str
    title: str = "Untitled Note"
    content: str = ""
    created_by: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    MUTABLE_FIELDS = ("title", "content")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdBy": self.created_by,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        return cls(
            id=data.get("id"),
            title=data.get("title", "Untitled Note"),
            content=data.get("content", ""),
            created_by=data.get("createdBy", ""),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class Collaboration:
    """
    A collaboration workspace with a partner.

    Attributes:
        id: Workspace identifier
        name: Workspace name
        partner_name: Partner brand name
        type: Partnership type (co-branding, product, content, ...)
        description: Free-text description
        start_date: Start date (YYYY-MM-DD)
        end_date: Planned end date (YYYY-MM-DD), optional
        objectives: Partnership objectives
        tasks: Ordered tasks
        milestones: Ordered milestones
        documents: Shared documents
        notes: Notes
        status: Workspace status (active, completed, ...)
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    id: str
    name: str = "Unnamed Collaboration"
    partner_name: str = "Unknown Partner"
    type: str = "other"
    description: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    objectives: List[str] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    milestones: List[Milestone] = field(default_factory=list)
    documents: List[Document] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    status: str = "active"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    MUTABLE_FIELDS = (
        "name", "partner_name", "type", "description",
        "start_date", "end_date", "objectives", "status",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted camelCase dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "partnerName": self.partner_name,
            "type": self.type,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "objectives": list(self.objectives),
            "tasks": [t.to_dict() for t in self.tasks],
            "milestones": [m.to_dict() for m in self.milestones],
            "documents": [d.to_dict() for d in self.documents],
            "notes": [n.to_dict() for n in self.notes],
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Collaboration":
        """Create from a persisted dictionary."""
        return cls(
            id=data.get("id"),
            name=data.get("name", "Unnamed Collaboration"),
            partner_name=data.get("partnerName", "Unknown Partner"),
            type=data.get("type", "other"),
            description=data.get("description", ""),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            objectives=list(data.get("objectives") or []),
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
            milestones=[Milestone.from_dict(m) for m in data.get("milestones") or []],
            documents=[Document.from_dict(d) for d in data.get("documents") or []],
            notes=[Note.from_dict(n) for n in data.get("notes") or []],
            status=data.get("status", "active"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
