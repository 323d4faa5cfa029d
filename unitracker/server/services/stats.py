"""
Dashboard statistics.

All numbers are derived from the user's study sessions, tasks and subjects.
Calendar days are taken in the configured timezone so that "today" matches
the user's wall clock rather than UTC.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date, datetime, timedelta, tzinfo
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from unitracker.core.database.entities.study_sessions import StudySession
from unitracker.core.database.entities.subjects import Subject
from unitracker.core.database.entities.tasks import Task
from unitracker.core.database.repositories import SqlRepoBundle
from unitracker.core.logging_config import get_logger
from unitracker.core.models.domain.enums import TaskStatus
from unitracker.core.models.io.stats import DailyStudyTime, SubjectProgress, UserStats
from unitracker.core.time_utils import as_aware_utc, utc_now
from unitracker.server.core.config import settings

logger = get_logger(__name__)

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
FOCUS_WINDOW_DAYS = 7


def _local_date(value: datetime, tz: tzinfo) -> date:
    return as_aware_utc(value).astimezone(tz).date()


def _hours(minutes: int) -> float:
    return round(minutes / 60, 1)


def _current_streak(minutes_by_day: Dict[date, int], today: date) -> int:
    day = today if minutes_by_day.get(today, 0) > 0 else today - timedelta(days=1)
    streak = 0
    while minutes_by_day.get(day, 0) > 0:
        streak += 1
        day -= timedelta(days=1)
    return streak


def _focus_score(sessions: List[StudySession], today: date, tz: tzinfo) -> int:
    window_start = today - timedelta(days=FOCUS_WINDOW_DAYS - 1)
    recent = [s for s in sessions if window_start <= _local_date(s.start_time, tz) <= today]
    if not recent:
        return 0
    completed = sum(1 for s in recent if s.completed)
    return round(100 * completed / len(recent))


def _subject_progress(
    sessions: List[StudySession], tasks: Iterable[Task], subjects: Iterable[Subject]
) -> List[SubjectProgress]:
    minutes_by_subject: Dict[str, int] = defaultdict(int)
    for study_session in sessions:
        if study_session.subject:
            minutes_by_subject[study_session.subject] += study_session.duration

    done_by_subject = Counter(t.subject for t in tasks if t.subject and t.status == TaskStatus.done)

    names = {subject.name for subject in subjects} | set(minutes_by_subject)
    ordered = sorted(names, key=lambda name: (-minutes_by_subject.get(name, 0), name))
    return [
        SubjectProgress(
            subject=name,
            hours=_hours(minutes_by_subject.get(name, 0)),
            tasks_completed=done_by_subject.get(name, 0),
        )
        for name in ordered
    ]


def compute_user_stats(
    *,
    sessions: Iterable[StudySession],
    tasks: Iterable[Task],
    subjects: Iterable[Subject],
    now: datetime,
    tz: tzinfo,
) -> UserStats:
    """Aggregate dashboard numbers.

    Args:
        sessions: All of the user's study sessions
        tasks: All of the user's tasks
        subjects: All of the user's subjects
        now: Current instant (naive UTC or aware)
        tz: Timezone whose calendar days are used

    Returns:
        UserStats for the day containing ``now``
    """
    sessions = list(sessions)
    tasks = list(tasks)
    today = _local_date(now, tz)

    minutes_by_day: Dict[date, int] = defaultdict(int)
    for study_session in sessions:
        minutes_by_day[_local_date(study_session.start_time, tz)] += study_session.duration

    tasks_today = [t for t in tasks if _local_date(t.created_at, tz) == today]

    monday = today - timedelta(days=today.weekday())
    weekly = [
        DailyStudyTime(day=label, hours=_hours(minutes_by_day.get(monday + timedelta(days=offset), 0)))
        for offset, label in enumerate(WEEKDAY_LABELS)
    ]

    return UserStats(
        today_study_time=minutes_by_day.get(today, 0),
        completed_tasks_today=sum(1 for t in tasks_today if t.status == TaskStatus.done),
        total_tasks_today=len(tasks_today),
        current_streak=_current_streak(minutes_by_day, today),
        focus_score=_focus_score(sessions, today, tz),
        weekly_study_time=weekly,
        subject_progress=_subject_progress(sessions, tasks, subjects),
    )


async def get_user_stats(repos: SqlRepoBundle, user_id: str, now: Optional[datetime] = None) -> UserStats:
    """Load the user's rows and aggregate them for the dashboard."""
    sessions = await repos.study_sessions.list_for_user(user_id)
    tasks = await repos.tasks.list_for_user(user_id)
    subjects = await repos.subjects.list_for_user(user_id)
    logger.debug(
        f"Computing stats for user {user_id}: {len(sessions)} sessions, {len(tasks)} tasks, {len(subjects)} subjects"
    )
    return compute_user_stats(
        sessions=sessions,
        tasks=tasks,
        subjects=subjects,
        now=now or utc_now(),
        tz=ZoneInfo(settings.timezone),
    )
