"""
Collaboration workspace module.

This module manages collaboration records (tasks, milestones, documents,
notes) and computes collaboration progress.
"""

from .schema import Collaboration, Task, Milestone, Document, Note, TaskStatus, MilestoneStatus, TaskPriority
from .workspace import (
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
)
from .progress import (
    ProgressConfig,
    ProgressReport,
    TaskStats,
    MilestoneStats,
    calculate_progress,
    calculate_task_progress,
    calculate_milestone_progress,
    schedule_status,
)

__all__ = [
    "Collaboration",
    "Task",
    "Milestone",
    "Document",
    "Note",
    "TaskStatus",
    "MilestoneStatus",
    "TaskPriority",
    "create_collaboration",
    "update_collaboration",
    "add_task",
    "update_task",
    "delete_task",
    "add_milestone",
    "update_milestone",
    "delete_milestone",
    "add_document",
    "update_document",
    "delete_document",
    "add_note",
    "update_note",
    "delete_note",
    "generate_sample_collaboration",
    "ProgressConfig",
    "ProgressReport",
    "TaskStats",
    "MilestoneStats",
    "calculate_progress",
    "calculate_task_progress",
    "calculate_milestone_progress",
    "schedule_status",
]
