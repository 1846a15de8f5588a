"""Season schedule generation and validation."""

from courtside.core.schedule.relationships import (
    Relationship,
    RelationshipKind,
    ScheduleError,
    classify_relationships,
    three_game_opponents,
)
from courtside.core.schedule.generator import (
    Matchup,
    ScheduleConfig,
    ScheduledGame,
    generate_matchups,
    generate_preseason,
    generate_schedule,
)
from courtside.core.schedule.validation import (
    InsertionValidation,
    ScheduleValidation,
    ScheduleValidationError,
    TeamGameCount,
    assert_valid_schedule,
    validate_schedule,
    validate_schedule_insertion,
)

__all__ = [
    "Relationship",
    "RelationshipKind",
    "ScheduleError",
    "classify_relationships",
    "three_game_opponents",
    "Matchup",
    "ScheduleConfig",
    "ScheduledGame",
    "generate_matchups",
    "generate_preseason",
    "generate_schedule",
    "InsertionValidation",
    "ScheduleValidation",
    "ScheduleValidationError",
    "TeamGameCount",
    "assert_valid_schedule",
    "validate_schedule",
    "validate_schedule_insertion",
]
