"""Blueprint data models"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


class DifficultyLabel(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class DifficultySpec(BaseModel):
    """Percentages per difficulty; callers make them sum to 100"""

    easy: Union[NonNegativeInt, NonNegativeFloat] = 33
    medium: Union[NonNegativeInt, NonNegativeFloat] = 34
    hard: Union[NonNegativeInt, NonNegativeFloat] = 33

    @property
    def total(self) -> float:
        return self.easy + self.medium + self.hard


class AllocationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: DifficultyLabel
    count: int


class BlueprintRequest(BaseModel):
    topic_name: str = Field(min_length=1)
    question_count: int = Field(default=10, ge=1, le=100)
    experience_level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    difficulty_distribution: DifficultySpec = Field(default_factory=DifficultySpec)


class Blueprint(BaseModel):
    topic_name: str
    question_count: int
    experience_level: ExperienceLevel
    difficulty_breakdown: DifficultySpec
    question_distribution: List[AllocationEntry]


class DifficultyPreset(BaseModel):
    name: str
    distribution: DifficultySpec
