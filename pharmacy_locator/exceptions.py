class ScheduleDataError(ValueError):
    """A persisted work schedule row cannot be turned into a schedule view."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownWeekday(ScheduleDataError):
    def __init__(self, weekday):
        super().__init__(f"Unknown weekday: {weekday!r}")
        self.weekday = weekday


class InvalidTimeFormat(ScheduleDataError):
    def __init__(self, value):
        super().__init__(f"Invalid time value: {value!r}. Expected HH:MM.")
        self.value = value


class EmptyScheduleGroup(ScheduleDataError):
    def __init__(self):
        super().__init__("Schedule group has no weekdays.")
