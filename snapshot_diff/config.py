"""
Diff configuration.

The defaults reproduce the fixed boundary constants: time-like metadata values
are rendered at UTC+2, and a metadata key is time-like when its name contains
"Time".
"""

from dataclasses import dataclass
from datetime import timedelta, timezone

DEFAULT_OFFSET_HOURS = 2
DEFAULT_TIME_FIELD_MARKER = "Time"


@dataclass(frozen=True)
class DiffConfig:
    """
    Settings for a diff run.

    Attributes:
        target_offset_hours: UTC offset that time-like values are rendered in
        time_field_marker: Substring marking a metadata key as time-like
    """
    target_offset_hours: int = DEFAULT_OFFSET_HOURS
    time_field_marker: str = DEFAULT_TIME_FIELD_MARKER

    def __post_init__(self):
        if not -18 <= self.target_offset_hours <= 18:
            raise ValueError(
                f"target_offset_hours must be within -18..18, got {self.target_offset_hours}"
            )
        if not self.time_field_marker:
            raise ValueError("time_field_marker must not be empty")

    @property
    def target_timezone(self) -> timezone:
        return timezone(timedelta(hours=self.target_offset_hours))


DEFAULT_CONFIG = DiffConfig()
