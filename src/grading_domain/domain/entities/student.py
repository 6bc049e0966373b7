"""Student entity and grading scale."""

from dataclasses import dataclass

from src.common.entities.keyed_entity import KeyedEntity, require_non_empty_str
from src.common.exceptions.custom_exceptions import InvalidValueError

# (lowest, highest, letter), inclusive bounds
GRADE_BANDS: tuple[tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"


def letter_grade(score: int) -> str:
    """
    Maps a score to a letter grade.

    Scores outside 0-100 are not rejected; they fall through every band and
    grade as F, the same as any score below 50.
    """
    for lowest, highest, letter in GRADE_BANDS:
        if lowest <= score <= highest:
            return letter
    return FAILING_GRADE


@dataclass
class Student(KeyedEntity):
    full_name: str
    score: int

    def __post_init__(self) -> None:
        super().__post_init__()
        require_non_empty_str("full_name", self.full_name)
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise InvalidValueError("score", self.score, f"Score must be an integer. Provided value: {self.score!r}")

    @property
    def grade(self) -> str:
        return letter_grade(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
