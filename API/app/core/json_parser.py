import json
import re
from dataclasses import dataclass

from pydantic import ValidationError

from app.schemas.curriculum import StageRoadmap
from app.schemas.roadmap import Schedule

# Bare non-JSON literals the generator emits in value position.
_NON_JSON_LITERAL = re.compile(r":\s*(?:NaN|undefined|-Infinity|Infinity)\b")


def sanitize_llm_json(text: str) -> str:
    """Replace ``NaN``/``undefined``/``Infinity``/``-Infinity`` values with ``null``."""
    if not text:
        return ""
    return _NON_JSON_LITERAL.sub(": null", text)


def _null_constant(_token: str) -> None:
    return None


def parse_llm_json(text: str):
    if not text:
        return {}
    candidate = sanitize_llm_json(text.strip())
    try:
        return json.loads(candidate, parse_constant=_null_constant)
    except ValueError:
        pass

    # Extract first JSON object/array if model wrapped content in prose.
    match = re.search(r"(\{.*\}|\[.*\])", candidate, re.DOTALL)
    if not match:
        return {}
    snippet = match.group(1)
    try:
        return json.loads(snippet, parse_constant=_null_constant)
    except ValueError:
        return {}


@dataclass(frozen=True)
class ValidSchedule:
    schedule: Schedule


@dataclass(frozen=True)
class MalformedJSON:
    reason: str


@dataclass(frozen=True)
class ShapeMismatch:
    reason: str


ScheduleParseResult = ValidSchedule | MalformedJSON | ShapeMismatch


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    return f"{location}: {error.get('msg', 'invalid')}"


def parse_schedule_response(text: str) -> ScheduleParseResult:
    """Classify raw generator output as a validated weekly schedule or a failure."""
    data = parse_llm_json(text)
    if not data:
        return MalformedJSON("response did not contain a JSON object")
    if not isinstance(data, dict):
        return ShapeMismatch(f"expected a JSON object, got {type(data).__name__}")
    weekly_plan = data.get("weeklyPlan", data.get("weekly_plan"))
    if not isinstance(weekly_plan, list) or not weekly_plan:
        return ShapeMismatch("weeklyPlan must be a non-empty array")
    try:
        schedule = Schedule.model_validate({**data, "source": "ai"})
    except ValidationError as exc:
        return ShapeMismatch(_first_error(exc))
    return ValidSchedule(schedule)


def parse_roadmap_response(text: str) -> StageRoadmap | None:
    data = parse_llm_json(text)
    if not isinstance(data, dict) or not data:
        return None
    try:
        return StageRoadmap.model_validate(data)
    except ValidationError:
        return None
