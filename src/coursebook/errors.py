"""Error hierarchy for the class calendar engine.

Only configuration problems are fatal. Absence conditions (no lesson plan,
no attendance roster for an occurrence) are ordinary values, not errors.

Example usage:
    try:
        templates = load_templates_file(config.templates_path)
    except ConfigurationError as exc:
        log.error("schedule_unavailable", error=str(exc))
        raise
"""


class CoursebookError(Exception):
    """Base exception for all coursebook errors."""

    pass


class ConfigurationError(CoursebookError):
    """Weekly template configuration could not be loaded.

    Examples: unparsable start time, weekday outside 0-6, unreadable
    template file. Raised at load time, before any occurrence is generated.
    """

    pass


class InvalidFilterInput(CoursebookError):
    """A filter bound could not be parsed as a civil date.

    The Filter Engine catches this and drops the offending bound, so it
    never reaches callers of filter_occurrences().
    """

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid {field}: {value!r} (expected YYYY-MM-DD)")
        self.field = field
        self.value = value
