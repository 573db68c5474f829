"""Blueprint generation on top of the allocation engine."""

from typing import List

from ..models.blueprint import Blueprint, BlueprintRequest, DifficultyPreset, DifficultySpec
from ..utils.exceptions import InvalidDifficultyDistribution
from ..utils.logger import get_logger
from .allocation import allocate

logger = get_logger(__name__)

PRESETS: List[DifficultyPreset] = [
    DifficultyPreset(name="Balanced", distribution=DifficultySpec(easy=33, medium=34, hard=33)),
    DifficultyPreset(name="Easy Focus", distribution=DifficultySpec(easy=60, medium=30, hard=10)),
    DifficultyPreset(name="Hard Focus", distribution=DifficultySpec(easy=10, medium=30, hard=60)),
]


def generate_blueprint(request: BlueprintRequest) -> Blueprint:
    """
    Build a blueprint for the requested topic.

    Raises InvalidDifficultyDistribution unless the percentages total 100.
    """
    spec = request.difficulty_distribution
    if spec.total != 100:
        raise InvalidDifficultyDistribution()

    distribution = allocate(request.question_count, spec)
    logger.info(
        "Blueprint generated",
        topic=request.topic_name,
        question_count=request.question_count,
        counts=[entry.count for entry in distribution],
    )
    return Blueprint(
        topic_name=request.topic_name,
        question_count=request.question_count,
        experience_level=request.experience_level,
        difficulty_breakdown=spec,
        question_distribution=distribution,
    )
