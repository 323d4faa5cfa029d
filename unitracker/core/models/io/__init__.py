"""
I/O models for API requests and responses.

These Pydantic models define the camelCase wire format of the HTTP API and
are kept apart from the SQLModel table entities.
"""

from .base import ApiModel, InputDatetime, MessageResponse, PartialUpdate, UtcDatetime
from .notes import NoteCreate, NoteRead, NoteUpdate
from .preferences import PreferencesRead, PreferencesUpsert
from .stats import DailyStudyTime, SubjectProgress, UserStats
from .study_sessions import StudySessionCreate, StudySessionRead, StudySessionUpdate
from .subjects import SubjectCreate, SubjectRead, SubjectUpdate
from .tasks import TaskCreate, TaskRead, TaskUpdate
from .timers import PomodoroPhaseRead
from .users import ProfileUpdate, UserRead

__all__ = [
    "ApiModel",
    "InputDatetime",
    "MessageResponse",
    "PartialUpdate",
    "UtcDatetime",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "PreferencesRead",
    "PreferencesUpsert",
    "DailyStudyTime",
    "SubjectProgress",
    "UserStats",
    "StudySessionCreate",
    "StudySessionRead",
    "StudySessionUpdate",
    "SubjectCreate",
    "SubjectRead",
    "SubjectUpdate",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "PomodoroPhaseRead",
    "ProfileUpdate",
    "UserRead",
]
