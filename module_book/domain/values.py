from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from .enums import RecurrenceType, WorkloadLevel
from .exceptions import InvalidRecurrenceType, InvalidValue

DEADLINE_FORMAT = "%Y-%m-%d %H:%M"

_MODULE_RE = re.compile(r"[A-Za-z]{2,3}\d{4}[A-Za-z]?")
_TAG_RE = re.compile(r"[^\W_]+")


@dataclass(frozen=True)
class Name:
    MESSAGE_CONSTRAINTS = "Names can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise InvalidValue("Name", self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(raw: str) -> bool:
        return isinstance(raw, str) and bool(raw) and not raw[0].isspace()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Module:
    MESSAGE_CONSTRAINTS = (
        "Module codes should be 2-3 letters followed by 4 digits and an optional letter, e.g. CS2103T"
    )

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise InvalidValue("Module", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.upper())

    @staticmethod
    def is_valid(raw: str) -> bool:
        return isinstance(raw, str) and _MODULE_RE.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Description:
    MESSAGE_CONSTRAINTS = "Descriptions can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise InvalidValue("Description", self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(raw: str) -> bool:
        return isinstance(raw, str) and bool(raw) and not raw[0].isspace()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Workload:
    MESSAGE_CONSTRAINTS = "Workload should be an integer from 1 to 3 inclusive"

    level: WorkloadLevel

    def __init__(self, raw: str | int) -> None:
        if not self.is_valid(raw):
            raise InvalidValue("Workload", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "level", WorkloadLevel(int(raw)))

    @staticmethod
    def is_valid(raw: str | int) -> bool:
        if isinstance(raw, bool):
            return False
        if isinstance(raw, str):
            raw = raw.strip()
            if not raw.isdigit():
                return False
        try:
            return int(raw) in {level.value for level in WorkloadLevel}
        except (TypeError, ValueError):
            return False

    @property
    def value(self) -> str:
        return str(int(self.level))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Deadline:
    """A local, zone-less point in time at minute resolution."""

    MESSAGE_CONSTRAINTS = "Deadlines should be of the format YYYY-MM-DD HH:MM, e.g. 2021-01-30 12:00"

    time: datetime
    value: str = field(compare=False)

    def __init__(self, raw: str) -> None:
        if not self.is_valid(raw):
            raise InvalidValue("Deadline", self.MESSAGE_CONSTRAINTS)
        parsed = datetime.strptime(raw.strip(), DEADLINE_FORMAT)
        object.__setattr__(self, "time", parsed)
        object.__setattr__(self, "value", _render(parsed))

    @staticmethod
    def is_valid(raw: str) -> bool:
        if not isinstance(raw, str):
            return False
        try:
            datetime.strptime(raw.strip(), DEADLINE_FORMAT)
        except ValueError:
            return False
        return True

    @classmethod
    def of(cls, time: datetime) -> Deadline:
        return cls(_render(time))

    def with_time(self, time: datetime) -> Deadline:
        return Deadline.of(time)

    def __str__(self) -> str:
        return self.value


def _render(time: datetime) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return f"{time.year:04d}-{time.month:02d}-{time.day:02d} {time.hour:02d}:{time.minute:02d}"


@dataclass(frozen=True)
class DoneStatus:
    MESSAGE_CONSTRAINTS = "Done status should be either true or false"

    is_done: bool

    def __init__(self, raw: bool | str = False) -> None:
        if not self.is_valid(raw):
            raise InvalidValue("DoneStatus", self.MESSAGE_CONSTRAINTS)
        if isinstance(raw, str):
            raw = raw.strip().lower() == "true"
        object.__setattr__(self, "is_done", raw)

    @staticmethod
    def is_valid(raw: bool | str) -> bool:
        if isinstance(raw, bool):
            return True
        return isinstance(raw, str) and raw.strip().lower() in {"true", "false"}

    @property
    def value(self) -> str:
        return "true" if self.is_done else "false"

    def __str__(self) -> str:
        return "Done" if self.is_done else "Not done"


@dataclass(frozen=True)
class Recurrence:
    MESSAGE_CONSTRAINTS = "recurrence can only be daily, weekly or monthly"

    rule: RecurrenceType

    def __init__(self, raw: str | RecurrenceType) -> None:
        if not self.is_valid(raw):
            raise InvalidRecurrenceType(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "rule", RecurrenceType(raw.strip().lower()))

    @staticmethod
    def is_valid(raw: str) -> bool:
        return isinstance(raw, str) and raw.strip().lower() in {t.value for t in RecurrenceType}

    @property
    def value(self) -> str:
        return self.rule.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    name: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.name):
            raise InvalidValue("Tag", self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(raw: str) -> bool:
        return isinstance(raw, str) and _TAG_RE.fullmatch(raw) is not None

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Index:
    """Position in the displayed task list, stored zero-based."""

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise InvalidValue("Index", "Index should be a positive integer")

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        return cls(one_based - 1)
