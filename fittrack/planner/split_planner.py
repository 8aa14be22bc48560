"""
Split planner — weekly split topology.

Maps ``(days_per_week, has_focus_areas, cardio_flag)`` to an ordered list
of day templates.  Every combination is an entry of :data:`SPLIT_TABLE`,
so the topology is a data lookup and can be inspected or tested without
running any exercise selection.

Day emphasis is expressed with :data:`DayTag`, a small tagged union:

- :class:`NamedTag` — a named training group (``push``, ``legs``, ``biceps`` ...),
- :class:`CardioTag` — the cardio block,
- :class:`CompositeTag` — a dedicated focus day over several muscle groups.

Focus areas are not stored in the table; templates carry a ``with_focus``
flag (focus areas appended as extra tags) or a ``focus_day`` flag (one
composite tag over all focus muscles) and are expanded by :func:`plan_split`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Literal, NamedTuple, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from fittrack.catalog.exercise_definition import MuscleGroup
from fittrack.schemas.plan import FocusArea, PlanGoal, TrainingPreferences

logger = logging.getLogger(__name__)


# ======================================================================
# Day tags
# ======================================================================


class TrainingGroup(str, Enum):
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    FULLBODY = "fullbody"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ARMS = "arms"
    CORE = "core"
    GLUTES = "glutes"


class NamedTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    group: TrainingGroup


class CardioTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["cardio"] = "cardio"


class CompositeTag(BaseModel):
    """Dedicated focus day over the union of several muscle groups."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    muscles: tuple[MuscleGroup, ...]


DayTag = Annotated[Union[NamedTag, CardioTag, CompositeTag], Field(discriminator="kind")]


# Muscle groups each named tag selects from (matched against primary muscles).
TARGET_MUSCLES: dict[TrainingGroup, frozenset[MuscleGroup]] = {
    TrainingGroup.PUSH: frozenset({MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS}),
    TrainingGroup.PULL: frozenset({MuscleGroup.BACK, MuscleGroup.BICEPS}),
    TrainingGroup.LEGS: frozenset({MuscleGroup.LEGS, MuscleGroup.GLUTES}),
    TrainingGroup.UPPER: frozenset({MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS,
                                    MuscleGroup.BICEPS, MuscleGroup.TRICEPS}),
    TrainingGroup.LOWER: frozenset({MuscleGroup.LEGS, MuscleGroup.GLUTES}),
    TrainingGroup.FULLBODY: frozenset({MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.LEGS,
                                       MuscleGroup.SHOULDERS, MuscleGroup.CORE}),
    TrainingGroup.CHEST: frozenset({MuscleGroup.CHEST}),
    TrainingGroup.BACK: frozenset({MuscleGroup.BACK}),
    TrainingGroup.SHOULDERS: frozenset({MuscleGroup.SHOULDERS}),
    TrainingGroup.BICEPS: frozenset({MuscleGroup.BICEPS}),
    TrainingGroup.TRICEPS: frozenset({MuscleGroup.TRICEPS}),
    TrainingGroup.ARMS: frozenset({MuscleGroup.BICEPS, MuscleGroup.TRICEPS}),
    TrainingGroup.CORE: frozenset({MuscleGroup.CORE}),
    TrainingGroup.GLUTES: frozenset({MuscleGroup.GLUTES}),
}

# Max exercises a single tag contributes to a day.
TAG_LIMITS: dict[TrainingGroup, int] = {
    TrainingGroup.PUSH: 5,
    TrainingGroup.PULL: 5,
    TrainingGroup.LEGS: 6,
    TrainingGroup.UPPER: 6,
    TrainingGroup.LOWER: 5,
    TrainingGroup.FULLBODY: 6,
    TrainingGroup.CHEST: 3,
    TrainingGroup.BACK: 3,
    TrainingGroup.SHOULDERS: 2,
    TrainingGroup.BICEPS: 2,
    TrainingGroup.TRICEPS: 2,
    TrainingGroup.ARMS: 3,
    TrainingGroup.CORE: 2,
    TrainingGroup.GLUTES: 2,
}
COMPOSITE_TAG_LIMIT = 5
CARDIO_TAG_LIMIT = 3

# A focus area maps onto a named tag (appended to days) and onto muscles
# (for the composite focus day).
FOCUS_AREA_GROUPS: dict[FocusArea, TrainingGroup] = {
    FocusArea.CHEST: TrainingGroup.CHEST,
    FocusArea.BACK: TrainingGroup.BACK,
    FocusArea.SHOULDERS: TrainingGroup.SHOULDERS,
    FocusArea.ARMS: TrainingGroup.ARMS,
    FocusArea.LEGS: TrainingGroup.LEGS,
    FocusArea.CORE: TrainingGroup.CORE,
    FocusArea.GLUTES: TrainingGroup.GLUTES,
}


def focus_area_muscles(area: FocusArea) -> frozenset[MuscleGroup]:
    return TARGET_MUSCLES[FOCUS_AREA_GROUPS[area]]


def tag_limit(tag: NamedTag | CardioTag | CompositeTag) -> int:
    if isinstance(tag, CardioTag):
        return CARDIO_TAG_LIMIT
    if isinstance(tag, CompositeTag):
        return COMPOSITE_TAG_LIMIT
    return TAG_LIMITS[tag.group]


def tag_muscles(tag: NamedTag | CardioTag | CompositeTag) -> frozenset[MuscleGroup]:
    """Target muscles of a tag; empty for cardio."""
    if isinstance(tag, CardioTag):
        return frozenset()
    if isinstance(tag, CompositeTag):
        return frozenset(tag.muscles)
    return TARGET_MUSCLES[tag.group]


# ======================================================================
# Split table
# ======================================================================


class DayTemplate(NamedTuple):
    name: str
    groups: tuple[TrainingGroup, ...]
    cardio: bool = False
    with_focus: bool = False
    focus_day: bool = False


class SplitDay(BaseModel):
    """One day of the weekly split: a label and its ordered tags."""

    model_config = ConfigDict(frozen=True)

    name: str
    tags: tuple[DayTag, ...]


G = TrainingGroup

_FULLBODY_A = DayTemplate("Fullkropp A", (G.FULLBODY,))
_FULLBODY_B = DayTemplate("Fullkropp B", (G.FULLBODY,))
_PUSH = DayTemplate("Push dag", (G.PUSH,))
_PULL = DayTemplate("Pull dag", (G.PULL,))
_LEGS = DayTemplate("Bein dag", (G.LEGS,))
_UPPER = DayTemplate("Overkropp", (G.UPPER,))
_LOWER = DayTemplate("Underkropp", (G.LOWER,))
_FULLBODY = DayTemplate("Fullkropp", (G.FULLBODY,))
_FOCUS_DAY = DayTemplate("Fokusdag", (), focus_day=True)
_CHEST_SHOULDERS = DayTemplate("Bryst og skuldre", (G.CHEST, G.SHOULDERS))
_BACK_ARMS = DayTemplate("Rygg og armer", (G.BACK, G.ARMS))
_LEGS_GLUTES = DayTemplate("Bein og rumpe", (G.LEGS, G.GLUTES))


def _with_cardio(template: DayTemplate) -> DayTemplate:
    return template._replace(name=f"{template.name} + kondisjon", cardio=True)


def _build_split_table() -> dict[tuple[int, bool, bool], tuple[DayTemplate, ...]]:
    table: dict[tuple[int, bool, bool], tuple[DayTemplate, ...]] = {}
    for has_focus in (False, True):
        for cardio in (False, True):
            # 2 days: full body twice, no refinement.
            table[(2, has_focus, cardio)] = (_FULLBODY_A, _FULLBODY_B)

            # 3 days: push/pull/legs, focus areas appended to every day.
            ppl = (_PUSH, _PULL, _LEGS)
            if has_focus:
                ppl = tuple(day._replace(with_focus=True) for day in ppl)
            table[(3, has_focus, cardio)] = ppl

            # 4 days: upper/lower/push/pull, cardio on push and pull.
            if cardio:
                table[(4, has_focus, cardio)] = (_UPPER, _LOWER, _with_cardio(_PUSH), _with_cardio(_PULL))
            else:
                table[(4, has_focus, cardio)] = (_UPPER, _LOWER, _PUSH, _PULL)

            # 5 days: push/pull/legs/upper + focus day or full body, cardio on days 4-5.
            fifth = _FOCUS_DAY if has_focus else _FULLBODY
            if cardio:
                table[(5, has_focus, cardio)] = (_PUSH, _PULL, _LEGS, _with_cardio(_UPPER), _with_cardio(fifth))
            else:
                table[(5, has_focus, cardio)] = (_PUSH, _PULL, _LEGS, _UPPER, fifth)

            # 6 days: PPL twice with cardio on leg days, else a body-part split.
            if cardio:
                table[(6, has_focus, cardio)] = (_PUSH, _PULL, _with_cardio(_LEGS)) * 2
            else:
                table[(6, has_focus, cardio)] = (_CHEST_SHOULDERS, _BACK_ARMS, _LEGS_GLUTES) * 2
    return table


SPLIT_TABLE: dict[tuple[int, bool, bool], tuple[DayTemplate, ...]] = _build_split_table()


def cardio_flag(days_per_week: int, preferences: TrainingPreferences, goal: PlanGoal) -> bool:
    """Whether the split for *days_per_week* carries cardio blocks.

    The trigger differs per day count; 2 and 3 day splits never do.
    """
    if days_per_week == 4:
        return preferences.prefer_cardio or goal == PlanGoal.WEIGHTLOSS
    if days_per_week == 5:
        return preferences.prefer_cardio or goal == PlanGoal.FITNESS
    if days_per_week == 6:
        return goal == PlanGoal.WEIGHTLOSS or preferences.prefer_hiit
    return False


def _expand(template: DayTemplate, focus_areas: Sequence[FocusArea]) -> SplitDay:
    tags: list[NamedTag | CardioTag | CompositeTag] = [NamedTag(group=group) for group in template.groups]
    name = template.name
    if template.with_focus:
        present = set(template.groups)
        for area in focus_areas:
            group = FOCUS_AREA_GROUPS[area]
            if group not in present:
                tags.append(NamedTag(group=group))
                present.add(group)
    if template.focus_day:
        muscles: list[MuscleGroup] = []
        for area in focus_areas:
            muscles.extend(m for m in sorted(focus_area_muscles(area), key=lambda m: m.value) if m not in muscles)
        tags.append(CompositeTag(muscles=tuple(muscles)))
        name = "Fokus: " + " + ".join(area.value for area in focus_areas)
    if template.cardio:
        tags.append(CardioTag())
    return SplitDay(name=name, tags=tuple(tags))


def plan_split(days_per_week: int, focus_areas: Sequence[FocusArea], preferences: TrainingPreferences,
               goal: PlanGoal, ) -> list[SplitDay]:
    """Return the ordered split days for a resolved configuration.

    ``days_per_week`` is expected in [2, 6] (see
    :func:`~fittrack.planner.config.resolve_plan_config`).
    """
    key = (days_per_week, bool(focus_areas), cardio_flag(days_per_week, preferences, goal))
    templates = SPLIT_TABLE[key]
    logger.debug("Split for %s: %s", key, [t.name for t in templates])
    return [_expand(template, focus_areas) for template in templates]
