"""
Collaboration progress and schedule status.

    taskProgress      = round(100 * (completed + 0.5 * inProgress) / totalTasks)
    milestoneProgress = round(100 * completedMilestones / totalMilestones)
    overallProgress   = round(0.6 * taskProgress + 0.4 * milestoneProgress)

Schedule status compares overall progress with the share of the planned
duration already elapsed (``expected``). The thresholds are mutually
exclusive and the stricter one wins:

    overall < expected - 20  ->  "At Risk"
    overall < expected - 10  ->  "Behind Schedule"
    otherwise                ->  "On Track"
"""

import logging
import math
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Union

from ..common import parse_date, round_half_up
from .schema import Collaboration, TaskStatus, MilestoneStatus

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

ON_TRACK = "On Track"
BEHIND_SCHEDULE = "Behind Schedule"
AT_RISK = "At Risk"


@dataclass
class ProgressConfig:
    """
    Configuration for progress calculation.

    Attributes:
        task_weight: Share of overall progress from tasks
        milestone_weight: Share of overall progress from milestones
        behind_schedule_margin: Points below expected that count as behind schedule
        at_risk_margin: Points below expected that count as at risk
    """
    task_weight: float = 0.6
    milestone_weight: float = 0.4
    behind_schedule_margin: int = 10
    at_risk_margin: int = 20

    def validate(self) -> None:
        """Validate configuration values."""
        if abs(self.task_weight + self.milestone_weight - 1.0) > 1e-6:
            raise ValueError(
                f"Progress weights must sum to 1, got {self.task_weight} + {self.milestone_weight}"
            )
        if self.at_risk_margin <= self.behind_schedule_margin:
            raise ValueError(
                f"at_risk_margin ({self.at_risk_margin}) must exceed "
                f"behind_schedule_margin ({self.behind_schedule_margin})"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProgressConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ProgressConfig":
        """Create from main config dictionary."""
        projects_config = config.get("projects", {})
        return cls(
            task_weight=projects_config.get("task_weight", 0.6),
            milestone_weight=projects_config.get("milestone_weight", 0.4),
            behind_schedule_margin=projects_config.get("behind_schedule_margin", 10),
            at_risk_margin=projects_config.get("at_risk_margin", 20),
        )


@dataclass
class TaskStats:
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    pending: int = 0
    progress_percentage: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "completed": self.completed,
            "inProgress": self.in_progress,
            "pending": self.pending,
            "progressPercentage": self.progress_percentage,
        }


@dataclass
class MilestoneStats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    missed: int = 0
    progress_percentage: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "completed": self.completed,
            "pending": self.pending,
            "missed": self.missed,
            "progressPercentage": self.progress_percentage,
        }


@dataclass
class ProgressReport:
    """Progress of one collaboration."""
    overall_progress: int
    status: str
    days_remaining: Optional[int]
    task_stats: TaskStats
    milestone_stats: MilestoneStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallProgress": self.overall_progress,
            "status": self.status,
            "daysRemaining": self.days_remaining,
            "taskStats": self.task_stats.to_dict(),
            "milestoneStats": self.milestone_stats.to_dict(),
        }


def _status_of(item: Any) -> Optional[str]:
    if isinstance(item, dict):
        return item.get("status")
    return getattr(item, "status", None)


def calculate_task_progress(tasks: Optional[Iterable[Any]]) -> TaskStats:
    """
    Count tasks by status and compute progress; in-progress tasks count half.

    Cancelled tasks count towards the total but not towards progress.
    """
    if tasks is None:
        return TaskStats()

    statuses = [_status_of(t) for t in tasks]
    total = len(statuses)
    completed = statuses.count(TaskStatus.COMPLETED.value)
    in_progress = statuses.count(TaskStatus.IN_PROGRESS.value)
    pending = statuses.count(TaskStatus.PENDING.value)

    percentage = round_half_up((completed + in_progress * 0.5) / total * 100) if total else 0
    return TaskStats(
        total=total,
        completed=completed,
        in_progress=in_progress,
        pending=pending,
        progress_percentage=percentage,
    )


def calculate_milestone_progress(milestones: Optional[Iterable[Any]]) -> MilestoneStats:
    """Count milestones by status; progress is the completed share."""
    if milestones is None:
        return MilestoneStats()

    statuses = [_status_of(m) for m in milestones]
    total = len(statuses)
    completed = statuses.count(MilestoneStatus.COMPLETED.value)

    return MilestoneStats(
        total=total,
        completed=completed,
        pending=statuses.count(MilestoneStatus.PENDING.value),
        missed=statuses.count(MilestoneStatus.MISSED.value),
        progress_percentage=round_half_up(completed / total * 100) if total else 0,
    )


def schedule_status(
    overall_progress: int,
    expected_progress: int,
    config: Optional[ProgressConfig] = None
) -> str:
    """Classify progress against the expected progress."""
    config = config or ProgressConfig()
    if overall_progress < expected_progress - config.at_risk_margin:
        return AT_RISK
    if overall_progress < expected_progress - config.behind_schedule_margin:
        return BEHIND_SCHEDULE
    return ON_TRACK


def calculate_progress(
    collaboration: Optional[Union[Collaboration, Dict[str, Any]]],
    now: Optional[datetime] = None,
    config: Optional[ProgressConfig] = None
) -> Optional[ProgressReport]:
    """
    Compute progress statistics and schedule status for a collaboration.

    Args:
        collaboration: Collaboration or its persisted dictionary
        now: Reference time (defaults to the current UTC time)
        config: ProgressConfig (defaults if omitted)

    Returns:
        ProgressReport, or None if the collaboration is missing
    """
    if collaboration is None:
        logger.error("Invalid collaboration for progress calculation")
        return None
    if isinstance(collaboration, dict):
        collaboration = Collaboration.from_dict(collaboration)

    config = config or ProgressConfig()
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    task_stats = calculate_task_progress(collaboration.tasks)
    milestone_stats = calculate_milestone_progress(collaboration.milestones)
    overall = round_half_up(
        task_stats.progress_percentage * config.task_weight
        + milestone_stats.progress_percentage * config.milestone_weight
    )

    days_remaining = None
    status = ON_TRACK
    end = parse_date(collaboration.end_date)
    if end is not None:
        days_remaining = math.ceil((end - now).total_seconds() / SECONDS_PER_DAY)

        start = parse_date(collaboration.start_date)
        total_days = (end - start).total_seconds() / SECONDS_PER_DAY if start else 0
        if total_days > 0:
            elapsed_days = total_days - days_remaining
            expected = round_half_up(elapsed_days / total_days * 100)
            status = schedule_status(overall, expected, config)
        else:
            logger.debug(f"No usable schedule for collaboration {collaboration.id}; status left On Track")

    return ProgressReport(
        overall_progress=overall,
        status=status,
        days_remaining=days_remaining,
        task_stats=task_stats,
        milestone_stats=milestone_stats,
    )
