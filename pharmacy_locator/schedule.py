import logging
from collections import namedtuple
from datetime import time

from pharmacy_locator.constants import DAYS_OF_WEEK
from pharmacy_locator.exceptions import (
    EmptyScheduleGroup, InvalidTimeFormat, ScheduleDataError, UnknownWeekday
)
from pharmacy_locator.schemas import DayInterval, DrugstoreSchedule, WorkScheduleGroup

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Weekdays sharing the same opening and closing time for one drugstore
ScheduleGroup = namedtuple('ScheduleGroup', ['weekdays', 'open_time', 'close_time'])


def index_of(weekday: str) -> int:
    """Position of a weekday name in the week, MONDAY being 0."""
    try:
        return DAYS_OF_WEEK.index(weekday)
    except ValueError:
        raise UnknownWeekday(weekday)


def parse_time(value) -> time:
    """Parse a time of day given as HH:MM, HH:MM:SS or a time object."""
    if isinstance(value, time):
        return value

    if not isinstance(value, str) or len(value.strip()) < 5:
        raise InvalidTimeFormat(value)

    try:
        return time.fromisoformat(value.strip())
    except ValueError:
        raise InvalidTimeFormat(value)


def normalize_time(value) -> str:
    """Render a stored time value as HH:MM, dropping seconds and offset."""
    return parse_time(value).strftime('%H:%M')


def compress_weekdays(weekdays: list) -> list:
    """
    Collapse a group's weekdays into runs of consecutive days.

    Runs are not merged across the end of the week, so SUNDAY and MONDAY
    always belong to different intervals.
    """
    if not weekdays:
        raise EmptyScheduleGroup()

    days_index = sorted({index_of(weekday) for weekday in weekdays})

    intervals = []
    start = days_index[0]
    for previous, current in zip(days_index, days_index[1:]):
        if current - previous != 1:
            intervals.append(DayInterval(start=DAYS_OF_WEEK[start], end=DAYS_OF_WEEK[previous]))
            start = current
    intervals.append(DayInterval(start=DAYS_OF_WEEK[start], end=DAYS_OF_WEEK[days_index[-1]]))

    return intervals


def derive_closed_days(groups: list) -> list:
    """Weekdays on which none of the groups is open, in weekly order."""
    open_days = set()
    for group in groups:
        open_days.update(DAYS_OF_WEEK[index_of(weekday)] for weekday in group.weekdays)

    return [day for day in DAYS_OF_WEEK if day not in open_days]


def assemble_schedule(groups: list) -> DrugstoreSchedule:
    """Build the schedule view of one drugstore from its schedule groups."""
    work_schedule = []
    for group in groups:
        day_intervals = compress_weekdays(group.weekdays)
        weekdays = sorted(set(group.weekdays), key=index_of)
        work_schedule.append(WorkScheduleGroup(
            open_time=normalize_time(group.open_time),
            close_time=normalize_time(group.close_time),
            weekdays=weekdays,
            day_intervals=day_intervals
        ))

    return DrugstoreSchedule(work_schedule=work_schedule, closed_days=derive_closed_days(groups))


def assemble_schedules(groups_by_drugstore: dict) -> dict:
    """
    Build schedule views for a batch of drugstores.

    A drugstore whose schedule data is broken is left out of the result and
    logged, the rest of the batch is returned as usual.
    """
    schedules = {}
    for drugstore_id, groups in groups_by_drugstore.items():
        try:
            schedules[drugstore_id] = assemble_schedule(groups)
        except ScheduleDataError as e:
            logger.warning(f"Skipping drugstore {drugstore_id}, invalid work schedule: {e.message}")

    return schedules
