"""
Built-in exercise catalog.

Each entry is an :class:`~fittrack.catalog.exercise_definition.ExerciseDefinition`.
The catalog is an immutable value: build it once (``default_catalog()``
for the built-in table, or ``ExerciseCatalog([...])`` for a custom one in
tests) and pass it to the plan generator.  No component mutates it, so a
single instance is safely shared between requests.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Optional

from fittrack.catalog.exercise_definition import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    ExerciseDefinition,
    MuscleGroup,
)


# ======================================================================
# Catalog value
# ======================================================================

class ExerciseCatalog:
    """Read-only, name-indexed collection of exercise definitions."""

    def __init__(self, exercises: Iterable[ExerciseDefinition]):
        by_name: dict[str, ExerciseDefinition] = {}
        for exercise in exercises:
            if exercise.name in by_name:
                raise ValueError(f"Duplicate exercise name in catalog: '{exercise.name}'")
            by_name[exercise.name] = exercise
        self._by_name = MappingProxyType(by_name)
        self._exercises = tuple(by_name.values())

    def __iter__(self) -> Iterator[ExerciseDefinition]:
        return iter(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ExerciseCatalog({len(self)} exercises)"

    def get(self, name: str) -> Optional[ExerciseDefinition]:
        """Look up an exercise by its name.  Returns ``None`` if not found."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)

    def by_category(self, category: ExerciseCategory) -> tuple[ExerciseDefinition, ...]:
        return tuple(e for e in self._exercises if e.category == category)

    def filter(self, predicate: Callable[[ExerciseDefinition], bool]) -> tuple[ExerciseDefinition, ...]:
        """Return the entries for which *predicate* is true, in catalog order."""
        return tuple(e for e in self._exercises if predicate(e))


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
C = ExerciseCategory.COMPOUND
I = ExerciseCategory.ISOLATION
K = ExerciseCategory.CARDIO

GYM = Equipment.GYM
HB = Equipment.HOME_BASIC
HF = Equipment.HOME_FULL
BW = Equipment.BODYWEIGHT
ANY = frozenset({GYM, HB, HF, BW})
RACK = frozenset({GYM, HF})
DUMBBELLS = frozenset({GYM, HB, HF})

CH = MuscleGroup.CHEST
BA = MuscleGroup.BACK
SH = MuscleGroup.SHOULDERS
BI = MuscleGroup.BICEPS
TR = MuscleGroup.TRICEPS
LE = MuscleGroup.LEGS
CO = MuscleGroup.CORE
GL = MuscleGroup.GLUTES

BEG = Difficulty.BEGINNER
INT = Difficulty.INTERMEDIATE
ADV = Difficulty.ADVANCED

KNEE = "Kneproblemer"
SHOULDER = "Skulderproblemer"
LOWER_BACK = "Ryggproblemer"
WRIST = "Håndleddsproblemer"

INJURY_TAGS: tuple[str, ...] = (KNEE, SHOULDER, LOWER_BACK, WRIST)


def _ex(name: str, category: ExerciseCategory, equipment: Iterable[Equipment],
        primary: Iterable[MuscleGroup], secondary: Iterable[MuscleGroup] = (),
        difficulty: Difficulty = BEG, avoid: Iterable[str] = ()) -> ExerciseDefinition:
    return ExerciseDefinition(name=name, category=category, equipment=frozenset(equipment),
                              primary_muscles=frozenset(primary), secondary_muscles=frozenset(secondary),
                              difficulty=difficulty, avoid_with_injuries=frozenset(avoid), )


# ======================================================================
# Built-in exercises
# ======================================================================

BUILTIN_EXERCISES: tuple[ExerciseDefinition, ...] = (
    # ── Chest ─────────────────────────────────────────────────────
    _ex("Benkpress", C, RACK, [CH], [TR, SH], INT, [SHOULDER]),
    _ex("Skråbenkpress med manualer", C, RACK, [CH], [SH, TR]),
    _ex("Manualpress", C, DUMBBELLS, [CH], [TR, SH]),
    _ex("Push-ups", C, ANY, [CH], [TR, SH, CO], BEG, [WRIST]),
    _ex("Dips", C, RACK, [TR, CH], [SH], INT, [SHOULDER]),
    _ex("Flyes med manualer", I, DUMBBELLS, [CH], [SH]),
    _ex("Cable crossover", I, [GYM], [CH], [], INT),
    _ex("Diamond push-ups", C, ANY, [TR, CH], [SH], INT, [WRIST]),

    # ── Back ──────────────────────────────────────────────────────
    _ex("Markløft", C, RACK, [BA, LE, GL], [CO], INT, [LOWER_BACK]),
    _ex("Pull-ups", C, RACK, [BA], [BI], INT),
    _ex("Nedtrekk", C, [GYM], [BA], [BI]),
    _ex("Stangroing", C, RACK, [BA], [BI, SH], INT, [LOWER_BACK]),
    _ex("Manualroing", C, DUMBBELLS, [BA], [BI]),
    _ex("Sittende kabelroing", C, [GYM], [BA], [BI]),
    _ex("Inverted rows", C, [GYM, HF, BW], [BA], [BI, CO]),
    _ex("Face pulls", I, [GYM], [SH, BA]),
    _ex("Superman", I, ANY, [BA], [GL]),

    # ── Shoulders ─────────────────────────────────────────────────
    _ex("Skulderpress med stang", C, RACK, [SH], [TR], INT, [SHOULDER]),
    _ex("Skulderpress med manualer", C, DUMBBELLS, [SH], [TR], BEG, [SHOULDER]),
    _ex("Sidehev", I, DUMBBELLS, [SH]),
    _ex("Pike push-ups", C, ANY, [SH], [TR], INT, [SHOULDER, WRIST]),
    _ex("Handstand push-ups", C, ANY, [SH, TR], [CO], ADV, [SHOULDER, WRIST]),

    # ── Arms ──────────────────────────────────────────────────────
    _ex("Bicepscurl", I, DUMBBELLS, [BI]),
    _ex("Hammercurl", I, DUMBBELLS, [BI]),
    _ex("Chin-ups", C, RACK, [BI, BA], [], INT),
    _ex("Triceps pushdown", I, [GYM], [TR]),
    _ex("Fransk press", I, DUMBBELLS, [TR], [], INT),
    _ex("Benk-dips", I, ANY, [TR], [SH], BEG, [SHOULDER]),

    # ── Legs ──────────────────────────────────────────────────────
    _ex("Knebøy", C, RACK, [LE, GL], [CO], INT, [KNEE, LOWER_BACK]),
    _ex("Leg press", C, [GYM], [LE, GL], [], BEG, [KNEE]),
    _ex("Utfall", C, ANY, [LE, GL], [CO], BEG, [KNEE]),
    _ex("Bulgarsk splittknebøy", C, DUMBBELLS, [LE, GL], [CO], INT, [KNEE]),
    _ex("Rumensk markløft", C, DUMBBELLS, [LE, GL], [BA], INT, [LOWER_BACK]),
    _ex("Goblet squat", C, DUMBBELLS, [LE, GL], [CO], BEG, [KNEE]),
    _ex("Bodyweight squats", C, ANY, [LE, GL], [], BEG, [KNEE]),
    _ex("Pistol squats", C, ANY, [LE, GL], [CO], ADV, [KNEE]),
    _ex("Beinspark", I, [GYM], [LE], [], BEG, [KNEE]),
    _ex("Lårcurl", I, [GYM], [LE]),
    _ex("Tåhev", I, ANY, [LE]),

    # ── Glutes ────────────────────────────────────────────────────
    _ex("Hip thrust", C, RACK, [GL], [LE]),
    _ex("Glute bridge", I, ANY, [GL], [LE]),
    _ex("Kickbacks med strikk", I, DUMBBELLS, [GL]),

    # ── Core ──────────────────────────────────────────────────────
    _ex("Plank", I, ANY, [CO], [SH]),
    _ex("Sideplanke", I, ANY, [CO]),
    _ex("Crunches", I, ANY, [CO]),
    _ex("Dead bug", I, ANY, [CO]),
    _ex("Russian twist", I, ANY, [CO], [], BEG, [LOWER_BACK]),
    _ex("Hengende beinhev", I, RACK, [CO], [], INT),
    _ex("Ab wheel rollout", I, DUMBBELLS, [CO], [SH], ADV, [LOWER_BACK]),

    # ── Cardio ────────────────────────────────────────────────────
    _ex("Løping på tredemølle", K, [GYM], [LE], [], BEG, [KNEE]),
    _ex("Romaskin", K, [GYM], [BA, LE]),
    _ex("Sykkel", K, RACK, [LE]),
    _ex("Hoppetau", K, DUMBBELLS, [LE], [], BEG, [KNEE]),
    _ex("Jumping jacks", K, ANY, [LE]),
    _ex("Mountain climbers", K, ANY, [CO], [SH], BEG, [WRIST]),
    _ex("Burpees", K, ANY, [LE, CH, CO], [], INT, [KNEE, WRIST]),
    _ex("Kettlebell swings", K, DUMBBELLS, [GL, LE], [BA], INT, [LOWER_BACK]),
)


@lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    """Return the shared built-in catalog (constructed once)."""
    return ExerciseCatalog(BUILTIN_EXERCISES)
