"""Exceptions raised by the answer sheet helpers."""


class AnswerSheetError(Exception):
    """Base class for answer sheet errors."""
    pass


class RecordNotFoundError(AnswerSheetError, LookupError):
    """Raised when a record that must exist is missing from the record store."""

    def __init__(self, table: str, conditions: dict):
        self.table = table
        self.conditions = conditions
        super().__init__(f"Can't find data record in database table {table}: {conditions}")


class UnknownEventTypeError(AnswerSheetError, ValueError):
    """Raised when an event type outside the closed set is requested."""
    pass


class HiddenFieldError(AnswerSheetError, AttributeError):
    """Raised when a hidden field does not exist on the inspected object."""
    pass


class StringNotFoundError(AnswerSheetError, KeyError):
    """Raised when a string key is missing from every loaded string table."""

    def __init__(self, identifier: str, component: str):
        self.identifier = identifier
        self.component = component
        super().__init__(f"Invalid get_string() identifier: '{identifier}' or component '{component}'")


class EventAlreadyTriggeredError(AnswerSheetError, RuntimeError):
    """Raised when the same event object is triggered twice."""
    pass
