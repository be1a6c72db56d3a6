import math

from app.core.errors import InvalidDurationError
from app.planning.rounding import round_half_up
from app.schemas.roadmap import WeeklyMilestone

DAYS_PER_WEEK = 7
SESSION_TARGET_RATIO = 0.8


def weekly_milestones(total_days: int) -> list[WeeklyMilestone]:
    """One milestone per 7-day window; the last window always targets 100% progress."""
    if total_days <= 0:
        raise InvalidDurationError(f"Plan duration must be at least one day, got {total_days}")

    total_weeks = math.ceil(total_days / DAYS_PER_WEEK)
    milestones = []
    for week in range(1, total_weeks + 1):
        week_start = (week - 1) * DAYS_PER_WEEK + 1
        week_end = min(week * DAYS_PER_WEEK, total_days)
        days_in_week = week_end - week_start + 1
        milestones.append(
            WeeklyMilestone(
                week_number=week,
                title=f"Week {week} Milestone",
                description=f"Complete all learning objectives for days {week_start}-{week_end}",
                goals=[
                    f"Complete {math.ceil(days_in_week * SESSION_TARGET_RATIO)} out of {days_in_week} daily sessions",
                    "Maintain consistent study schedule",
                    "Review and reflect on learning progress",
                ],
                target_progress=round_half_up(week / total_weeks * 100),
            )
        )
    return milestones
