"""Horse-show rider schedule builder.

Fetches a show's roster, matches configured rider names, and consolidates
each matched rider's rides into one schedule.
"""

from src.rider_schedule.assembler import ScheduleAssembler, build_schedule
from src.rider_schedule.config import ShowConfig, load_show_config
from src.rider_schedule.models import MatchedRider, ScheduleRow

__all__ = [
    "ScheduleAssembler",
    "build_schedule",
    "ShowConfig",
    "load_show_config",
    "MatchedRider",
    "ScheduleRow",
]
