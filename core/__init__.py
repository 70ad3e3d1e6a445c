from .task_record import TaskRecord
from .editor_mode import Browsing, Selecting, Editing, Mode, mode_name

__all__ = [
    "TaskRecord",
    "Browsing",
    "Selecting",
    "Editing",
    "Mode",
    "mode_name",
]
