from __future__ import annotations


class ModuleBookError(Exception):
    """Base class for errors raised by the module book."""


class InvalidValue(ModuleBookError, ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidRecurrenceType(InvalidValue):
    MESSAGE = "Recurrence type invalid. Task can only recur daily, weekly or monthly"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__("Recurrence", message)


class MissingField(ModuleBookError, ValueError):
    MESSAGE_FORMAT = "Task's {} field is missing!"

    def __init__(self, field: str) -> None:
        super().__init__(self.MESSAGE_FORMAT.format(field))
        self.field = field


class DuplicateTask(ModuleBookError):
    MESSAGE = "This task with this name and module exists in the module book"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class DuplicateRecurrence(ModuleBookError):
    def __init__(self, recurrence: object) -> None:
        super().__init__(f"This task is already recurring: {recurrence}")
        self.recurrence = recurrence


class InvalidTaskIndex(ModuleBookError):
    MESSAGE = "The task index provided is invalid"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class DataConversionError(ModuleBookError):
    """Stored data could not be read back into a module book."""
