"""Template Store: loading and validating the weekly class template.

The template is static configuration. It is validated once, up front, so a
bad entry stops the program before any occurrence is generated instead of
surfacing halfway through a course period.

File format (JSON array), keys in either spelling:
    [{"day": 2, "time": "08:00", "name": "Teclado A", "teacher": "Helicleiton"},
     {"dayOfWeek": 4, "startTime": "14:00 - 15:00", "name": "Violão B", ...}]
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.coursebook.errors import ConfigurationError
from src.coursebook.logging import get_logger
from src.coursebook.models import WeeklyClassTemplate

log = get_logger(__name__)


def load_templates(
    raw_items: Iterable[Mapping[str, Any] | WeeklyClassTemplate],
) -> tuple[WeeklyClassTemplate, ...]:
    """Validate raw template entries.

    Args:
        raw_items: Mappings as read from configuration, or already-built templates.

    Returns:
        The templates, in input order.

    Raises:
        ConfigurationError: If any entry has an out-of-range weekday, an
            unparsable time, or is otherwise malformed.
    """
    if raw_items is None or isinstance(raw_items, (str, bytes, Mapping)):
        raise ConfigurationError("Weekly template must be a list of entries")

    templates: list[WeeklyClassTemplate] = []
    for index, item in enumerate(raw_items):
        if isinstance(item, WeeklyClassTemplate):
            templates.append(item)
            continue
        if not isinstance(item, Mapping):
            raise ConfigurationError(
                f"Template #{index} must be an object, got {type(item).__name__}"
            )
        try:
            templates.append(WeeklyClassTemplate.model_validate(item))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'entry'}: {err['msg']}"
                for err in e.errors()
            )
            log.error("template_invalid", index=index, errors=problems)
            raise ConfigurationError(f"Template #{index} is invalid: {problems}") from e

    _warn_duplicates(templates)
    log.info("templates_loaded", count=len(templates))
    return tuple(templates)


def load_templates_file(path: str | Path) -> tuple[WeeklyClassTemplate, ...]:
    """Read and validate a weekly template JSON file.

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, or
            holds an invalid entry.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read weekly template {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Weekly template {path} is not valid JSON: {e}") from e

    log.debug("template_file_read", path=str(path))
    return load_templates(data)


def _warn_duplicates(templates: list[WeeklyClassTemplate]) -> None:
    """Log templates colliding on (day, start, name).

    They are kept: the generator emits one occurrence per template, so a
    collision yields two occurrences with the same id.
    """
    seen: set[tuple[int, str, str]] = set()
    for template in templates:
        key = (template.day_of_week, template.starts_at.strftime("%H:%M"), template.name)
        if key in seen:
            log.warning(
                "duplicate_template",
                day_of_week=key[0],
                start_time=key[1],
                name=key[2],
            )
        seen.add(key)
