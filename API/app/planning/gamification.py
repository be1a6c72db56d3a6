from app.planning.rounding import round_half_up
from app.schemas.curriculum import Curriculum
from app.schemas.learning_plan import Challenge, Gamification, ProgressMilestone

PROGRESS_STEPS = (25, 50, 75, 100)


def _progress_milestones(curriculum: Curriculum) -> list[ProgressMilestone]:
    milestones = [
        ProgressMilestone(
            title=f"{step}% Complete",
            description=f"Complete {step}% of your learning plan",
            target_progress=step,
            reward=f"{step * 10} points",
        )
        for step in PROGRESS_STEPS
    ]
    subject_count = len(curriculum.subjects)
    for index, subject in enumerate(curriculum.subjects):
        milestones.append(
            ProgressMilestone(
                title=f"{subject.name} Master",
                description=f"Complete all {subject.name} topics",
                target_progress=round_half_up((index + 1) / subject_count * 100),
                reward="Achievement Badge",
            )
        )
    return milestones


def build_gamification(curriculum: Curriculum) -> Gamification:
    """Unachieved milestones and challenges created alongside a new plan."""
    return Gamification(
        milestones=_progress_milestones(curriculum),
        challenges=[
            Challenge(title="7-Day Streak", description="Study for 7 consecutive days", type="streak",
                      target=7, reward="100 points"),
            Challenge(title="Perfect Score", description="Get 100% on any assessment", type="score",
                      target=100, reward="50 points"),
            Challenge(title="Quick Learner", description="Complete 5 sessions in one day", type="completion",
                      target=5, reward="Achievement Badge"),
        ],
        daily_challenges=[
            Challenge(title="Early Bird", description="Start studying before 9 AM", type="timing",
                      target=1, reward="50 points"),
            Challenge(title="Perfect Score", description="Score 100% on today's assessment", type="score",
                      target=100, reward="100 points"),
            Challenge(title="Study Streak", description="Maintain a 3-day study streak", type="streak",
                      target=3, reward="Achievement Badge"),
        ],
    )
