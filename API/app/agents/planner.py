"""
Roadmap Planner Agent: asks the generative service for a weekly schedule or a stage
roadmap and falls back to the deterministic local planners whenever the call fails or
the response does not validate.

Retries on timeouts, network failures and 5xx responses happen inside the provider;
anything that still fails here is logged and absorbed, never raised to the caller.
"""
import json

from app.agents.base import BaseAgent
from app.core.json_parser import ValidSchedule, parse_roadmap_response, parse_schedule_response
from app.core.llm_provider import BaseLLMProvider, LLMError, get_llm_provider
from app.core.logging import DOMAIN_PLANNING, get_domain_logger
from app.core.settings import settings
from app.planning.curriculum import convert_roadmap
from app.planning.packer import WEEKEND_DAYS, build_weekly_plan, daily_study_hours
from app.schemas.curriculum import Curriculum
from app.schemas.roadmap import Schedule
from app.schemas.student import StudentProfile, WeeklyPreferences

logger = get_domain_logger(__name__, DOMAIN_PLANNING)

SCHEDULE_TEMPERATURE = 0.5
ROADMAP_TEMPERATURE = 0.7

SCHEDULE_SYSTEM_PROMPT = (
    "You are an expert educational planner. Generate personalized study schedules that optimize "
    "learning based on student profiles and curriculum requirements. Always respond with valid JSON."
)
ROADMAP_SYSTEM_PROMPT = (
    "You are an expert learning path designer. Create comprehensive, structured learning roadmaps "
    "in JSON format."
)


def build_schedule_prompt(
    student: StudentProfile,
    curriculum: Curriculum,
    total_days: int,
    preferences: WeeklyPreferences,
) -> str:
    hours = daily_study_hours(curriculum, total_days)
    weekly_days = preferences.weekly_study_days or 5
    break_days = [] if preferences.study_on_weekends else WEEKEND_DAYS
    subjects = ", ".join(subject.name for subject in curriculum.subjects)
    example = {
        "weeklyPlan": [
            {
                "day": "Monday",
                "sessions": [
                    {
                        "subject": "subject_name",
                        "unit": "unit_title",
                        "topics": ["topic1", "topic2"],
                        "duration": 120,
                        "startTime": "09:00",
                        "endTime": "11:00",
                        "type": "learning",
                    }
                ],
            }
        ],
        "dailyStudyHours": hours,
        "weeklyStudyDays": weekly_days,
        "breakDays": break_days,
    }
    return (
        f"Generate a personalized weekly study schedule for a {student.student_type or 'general'} student.\n\n"
        f"Student Profile:\n"
        f"- Age: {student.age}\n"
        f"- Learning Style: {student.learning_style.model_dump_json()}\n"
        f"- Preferred Subjects: {', '.join(student.preferred_subjects) or 'Not specified'}\n"
        f"- Difficulty Preference: {student.difficulty_preference}/10\n\n"
        f"Curriculum:\n{curriculum.model_dump_json(indent=2)}\n\n"
        f"Requirements:\n"
        f"- Duration: {total_days} days\n"
        f"- Daily Study Hours: {hours}\n"
        f"- Weekly Study Days: {weekly_days}\n"
        f"- Subjects: {subjects}\n\n"
        f"Generate a JSON schedule with this structure:\n{json.dumps(example, indent=2)}\n\n"
        f"Consider the student's learning style and preferences for optimal scheduling."
    )


def build_roadmap_prompt(roadmap_type: str, total_days: int) -> str:
    example = {
        "title": "Roadmap Title",
        "description": "Roadmap description",
        "stages": [
            {
                "name": "Stage Name",
                "topics": [{"name": "Topic Name", "description": "Topic description", "duration": 20}],
            }
        ],
    }
    return (
        f"Create a structured learning roadmap for '{roadmap_type}' that can be completed in "
        f"{total_days} days.\n"
        f"Split it into sequential stages; each stage lists topics with an estimated duration in hours.\n\n"
        f"Respond with JSON only, using this structure:\n{json.dumps(example, indent=2)}"
    )


class RoadmapPlannerAgent(BaseAgent):
    name = "planner"

    def __init__(self, provider: BaseLLMProvider | None = None):
        self.provider = provider or get_llm_provider()

    async def generate_schedule(
        self,
        student: StudentProfile,
        curriculum: Curriculum,
        total_days: int,
        preferences: WeeklyPreferences | None = None,
    ) -> Schedule:
        """Weekly schedule from the generative service, or the local weekly plan on any failure."""
        preferences = preferences or WeeklyPreferences()
        # Invalid durations fail here, before any outbound call.
        daily_study_hours(curriculum, total_days)
        messages = [
            {"role": "system", "content": SCHEDULE_SYSTEM_PROMPT},
            {"role": "user", "content": build_schedule_prompt(student, curriculum, total_days, preferences)},
        ]
        log = logger.bind(learner=student.learner_id, days=total_days)
        try:
            text = await self.provider.chat(messages, temperature=SCHEDULE_TEMPERATURE)
        except LLMError as exc:
            log.warning("AI schedule unavailable (%s: %s); using local weekly plan", type(exc).__name__, exc)
            return build_weekly_plan(curriculum, total_days, preferences)

        result = parse_schedule_response(text)
        if isinstance(result, ValidSchedule):
            log.info("AI schedule accepted with %d weekly entries", len(result.schedule.weekly_plan))
            return result.schedule
        log.warning("AI schedule rejected (%s: %s); using local weekly plan", type(result).__name__, result.reason)
        return build_weekly_plan(curriculum, total_days, preferences)

    async def generate_roadmap_curriculum(self, roadmap_type: str, total_days: int) -> Curriculum | None:
        """Curriculum from an AI-designed stage roadmap, or None so the static tables apply."""
        if not settings.ai_roadmaps_enabled:
            return None
        messages = [
            {"role": "system", "content": ROADMAP_SYSTEM_PROMPT},
            {"role": "user", "content": build_roadmap_prompt(roadmap_type, total_days)},
        ]
        try:
            text = await self.provider.chat(messages, temperature=ROADMAP_TEMPERATURE)
        except LLMError as exc:
            logger.warning("AI roadmap unavailable for '%s' (%s: %s)", roadmap_type, type(exc).__name__, exc)
            return None

        roadmap = parse_roadmap_response(text)
        if roadmap is None:
            logger.warning("AI roadmap for '%s' failed validation; using static roadmap", roadmap_type)
            return None
        logger.info("AI roadmap accepted for '%s' stages=%d", roadmap_type, len(roadmap.stages))
        return convert_roadmap(roadmap, total_days, roadmap_type=roadmap_type, source="AI-generated")

    async def run(self, input_data: dict) -> dict:
        student = StudentProfile.model_validate(input_data["student"])
        curriculum = Curriculum.model_validate(input_data["curriculum"])
        total_days = int(input_data.get("total_days", curriculum.total_duration))
        preferences = WeeklyPreferences.model_validate(input_data.get("preferences") or {})

        schedule = await self.generate_schedule(student, curriculum, total_days, preferences)
        return {
            "schedule": schedule.model_dump(),
            "generated_by": "AI" if schedule.source == "ai" else "Fallback",
            "agent": self.name,
            "decision_type": "schedule_generated",
        }
