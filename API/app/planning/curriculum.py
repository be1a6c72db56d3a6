"""
Curriculum normalizer: turns a plan request into a canonical subject -> unit -> topic tree.

Resolution order: explicit subjects, roadmap.sh stage roadmap, named syllabus preset,
student-type defaults, generic two-subject fallback. The result always carries at least
one topic so the packers have something to walk.
"""
from __future__ import annotations

from app.core.errors import PlanningError
from app.core.logging import DOMAIN_CURRICULUM, get_domain_logger
from app.data.curriculum_presets import (
    GENERIC_FALLBACK_SUBJECTS,
    ROADMAP_STAGES,
    STUDENT_TYPE_DEFAULTS,
    SYLLABUS_PRESETS,
    TECHNOLOGY_PRESET_KEYS,
)
from app.planning.rounding import round_half_up
from app.schemas.curriculum import DEFAULT_TOPIC_HOURS, Curriculum, StageRoadmap, Subject, Topic, Unit
from app.schemas.learning_plan import PlanRequest, SubjectRequest, UnitRequest
from app.schemas.student import StudentProfile

logger = get_domain_logger(__name__, DOMAIN_CURRICULUM)

# (name, description, difficulty, objective) templates for the topics generated per stage topic.
_STAGE_TOPIC_TEMPLATES = [
    ("Introduction to {name}", "Learn the basics of {name}", 1, "Understand {name} fundamentals"),
    ("Core Concepts", "Master core concepts of {name}", 2, "Apply {name} core concepts"),
    ("Practical Applications", "Apply {name} in real scenarios", 3, "Build practical {name} applications"),
    ("Advanced Features", "Explore advanced {name} features", 4, "Master advanced {name} features"),
    ("Best Practices", "Learn {name} best practices", 3, "Implement {name} best practices"),
]


def default_units(subject_name: str) -> list[UnitRequest]:
    """Two generic units for a subject supplied without any."""
    return [
        UnitRequest(
            title=f"Introduction to {subject_name}",
            description=f"Basic concepts and fundamentals of {subject_name}",
            topics=[f"Fundamentals of {subject_name}", "Core Concepts", "Basic Applications", "Problem Solving"],
            estimated_duration=20,
            order=1,
        ),
        UnitRequest(
            title=f"Advanced {subject_name}",
            description=f"Advanced topics and applications in {subject_name}",
            topics=["Advanced Concepts", "Complex Applications", "Real-world Problems", "Project Work"],
            estimated_duration=25,
            order=2,
        ),
    ]


def _build_topics(raw_topics: list, unit_hours: float | None) -> list[Topic]:
    names_only = [topic for topic in raw_topics if isinstance(topic, str)]
    # Plain topic names share the unit's duration evenly.
    share = unit_hours / len(names_only) if unit_hours and names_only else DEFAULT_TOPIC_HOURS
    topics = []
    for topic in raw_topics:
        if isinstance(topic, Topic):
            topics.append(topic)
        elif str(topic).strip():
            topics.append(Topic(name=str(topic).strip(), estimated_hours=share))
    return topics


def _build_unit(raw: UnitRequest, position: int) -> Unit:
    topics = _build_topics(list(raw.topics), raw.estimated_duration)
    duration = raw.estimated_duration
    if duration is None:
        duration = sum(topic.estimated_hours for topic in topics)
    return Unit(
        title=raw.title,
        description=raw.description or "",
        topics=topics,
        estimated_duration=duration,
        order=raw.order if raw.order is not None else position + 1,
    )


def _build_subject(raw: SubjectRequest, subject_count: int) -> Subject:
    unit_requests = raw.units or default_units(raw.name)
    units = [_build_unit(unit, position) for position, unit in enumerate(unit_requests)]
    orders = [unit.order for unit in units]
    if len(orders) != len(set(orders)):
        raise PlanningError(f"Duplicate unit order values in subject '{raw.name}'")
    total_hours = raw.total_hours
    if total_hours is None:
        total_hours = sum(unit.estimated_duration for unit in units)
    weightage = raw.weightage
    if weightage is None:
        weightage = round_half_up(100 / subject_count)
    return Subject(
        name=raw.name,
        description=raw.description or f"Study of {raw.name}",
        weightage=weightage,
        units=units,
        total_hours=total_hours,
    )


def _build_subjects(raw_subjects: list) -> list[Subject]:
    requests = [SubjectRequest.model_validate(raw) for raw in raw_subjects]
    return [_build_subject(raw, len(requests)) for raw in requests]


def _has_topics(subjects: list[Subject]) -> bool:
    return any(unit.topics for subject in subjects for unit in subject.units)


def resolve_preset_key(student: StudentProfile | None, plan_type: str | None) -> str | None:
    """Map a plan type plus the student's school or college details to a syllabus preset."""
    if not plan_type:
        return None
    if plan_type == "syllabus-based":
        class_level = student.school_details.class_level if student and student.school_details else "9"
        key = f"cbse-{class_level}"
        return key if key in SYLLABUS_PRESETS else None
    if plan_type == "exam-preparation":
        if student and student.school_details and student.school_details.exam_preparation.neet:
            return "neet"
        return None
    if plan_type == "technology-roadmap":
        technologies = student.college_details.technologies if student and student.college_details else []
        for tech in technologies:
            key = TECHNOLOGY_PRESET_KEYS.get(tech.strip().lower())
            if key:
                return key
        return "mern-stack"
    return None


def convert_roadmap(
    roadmap: StageRoadmap,
    duration: int,
    *,
    roadmap_type: str | None = None,
    source: str = "roadmap.sh",
) -> Curriculum:
    """Each stage becomes a subject and each stage topic a unit of five generated topics."""
    stage_count = len(roadmap.stages)
    subjects = []
    for stage in roadmap.stages:
        units = []
        for position, stage_topic in enumerate(stage.topics):
            hours = stage_topic.duration if stage_topic.duration else DEFAULT_TOPIC_HOURS
            topics = []
            previous = None
            for name_tpl, description_tpl, difficulty, objective_tpl in _STAGE_TOPIC_TEMPLATES:
                name = name_tpl.format(name=stage_topic.name)
                topics.append(
                    Topic(
                        name=name,
                        description=description_tpl.format(name=stage_topic.name),
                        difficulty=difficulty,
                        estimated_hours=hours / len(_STAGE_TOPIC_TEMPLATES),
                        prerequisites=[previous] if previous else [],
                        learning_objectives=[objective_tpl.format(name=stage_topic.name)],
                    )
                )
                previous = name
            units.append(
                Unit(
                    title=stage_topic.name,
                    description=stage_topic.description,
                    topics=topics,
                    estimated_duration=hours,
                    order=position + 1,
                )
            )
        subjects.append(
            Subject(
                name=stage.name,
                description=f"Comprehensive study of {stage.name}",
                weightage=round_half_up(100 / stage_count),
                units=units,
                total_hours=sum(unit.estimated_duration for unit in units),
            )
        )
    return Curriculum(subjects=subjects, total_duration=duration, roadmap_type=roadmap_type, source=source)


def normalize(request: PlanRequest, student: StudentProfile | None = None) -> Curriculum:
    duration = request.duration
    roadmap_type = request.roadmap_type

    if request.subjects:
        subjects = _build_subjects(request.subjects)
        if _has_topics(subjects):
            logger.info("Curriculum from %d explicit subjects", len(subjects))
            return Curriculum(subjects=subjects, total_duration=duration, roadmap_type=roadmap_type, source="explicit")
        logger.warning("Explicit subjects carry no topics; using defaults")

    if roadmap_type in ROADMAP_STAGES:
        logger.info("Curriculum from static stage roadmap '%s'", roadmap_type)
        return convert_roadmap(StageRoadmap.model_validate(ROADMAP_STAGES[roadmap_type]), duration, roadmap_type=roadmap_type)

    preset_key = roadmap_type if roadmap_type in SYLLABUS_PRESETS else resolve_preset_key(student, request.plan_type)
    if preset_key:
        logger.info("Curriculum from preset '%s'", preset_key)
        subjects = _build_subjects(SYLLABUS_PRESETS[preset_key]["subjects"])
        return Curriculum(subjects=subjects, total_duration=duration, roadmap_type=roadmap_type, source="preset")

    if student and student.student_type in STUDENT_TYPE_DEFAULTS:
        logger.info("Curriculum from %s defaults", student.student_type)
        subjects = _build_subjects(STUDENT_TYPE_DEFAULTS[student.student_type])
        return Curriculum(subjects=subjects, total_duration=duration, roadmap_type=roadmap_type, source="default")

    logger.info("Curriculum from generic fallback subjects")
    subjects = _build_subjects(GENERIC_FALLBACK_SUBJECTS)
    return Curriculum(subjects=subjects, total_duration=duration, roadmap_type=roadmap_type, source="fallback")
