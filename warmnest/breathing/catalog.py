"""
Static catalog of guided breathing exercises, keyed by slug.

Built-in exercises can be overridden (or new ones added) through the
``exercises`` section of ``config/exercises.yaml``:

    exercises:
      box-breathing:
        duration_minutes: 10
      coherent-breathing:
        name_key: coherentBreathing
        description_key: coherentBreathingDesc
        duration_minutes: 5
        cycle:
          - {state: inhale, duration: 5}
          - {state: exhale, duration: 5}
"""

from pathlib import Path
from typing import Any, Iterator, Optional, Union

from ..config.loader import ConfigLoader
from ..config.validation import ConfigValidator
from ..errors import CycleConfigurationError, UnknownExerciseError
from ..logging.config import get_logger
from .models import BreathingExercise, Cycle, InstructionStep

logger = get_logger(__name__)


_BUILTIN_EXERCISES: list[dict[str, Any]] = [
    {
        "slug": "box-breathing",
        "name_key": "boxBreathing",
        "description_key": "boxBreathingDesc",
        "duration_minutes": 5,
        "instruction_steps": [
            ("boxBreathingStep1", "person sitting comfortably"),
            ("boxBreathingStep2", "lungs inhale diagram"),
            ("boxBreathingStep3", "holding breath diagram"),
            ("boxBreathingStep4", "lungs exhale diagram"),
            ("boxBreathingStep5", "holding breath empty diagram"),
        ],
        "cycle": [
            {"state": "inhale", "duration": 4},
            {"state": "hold_after_inhale", "duration": 4},
            {"state": "exhale", "duration": 4},
            {"state": "hold_after_exhale", "duration": 4},
        ],
    },
    {
        "slug": "4-7-8-breathing",
        "name_key": "fourSevenEightBreathing",
        "description_key": "fourSevenEightBreathingDesc",
        "duration_minutes": 3,
        "instruction_steps": [
            ("fourSevenEightBreathingStep1", "person comfortable position tongue"),
            ("fourSevenEightBreathingStep2", "exhale whoosh sound"),
            ("fourSevenEightBreathingStep3", "inhale nose count four"),
            ("fourSevenEightBreathingStep4", "hold breath count seven"),
            ("fourSevenEightBreathingStep5", "exhale mouth count eight"),
        ],
        "cycle": [
            {"state": "inhale", "duration": 4},
            {"state": "hold_after_inhale", "duration": 7},
            {"state": "exhale", "duration": 8},
        ],
    },
    {
        "slug": "diaphragmatic-breathing",
        "name_key": "diaphragmaticBreathing",
        "description_key": "diaphragmaticBreathingDesc",
        "duration_minutes": 7,
        "instruction_steps": [
            ("diaphragmaticBreathingStep1", "person lying knees bent"),
            ("diaphragmaticBreathingStep2", "hands on chest belly"),
            ("diaphragmaticBreathingStep3", "inhale belly out"),
            ("diaphragmaticBreathingStep4", "exhale pursed lips belly in"),
        ],
        "cycle": [
            {"state": "inhale", "duration": 4},
            {"state": "exhale", "duration": 6},
        ],
    },
    {
        "slug": "alternate-nostril-breathing",
        "name_key": "alternateNostrilBreathing",
        "description_key": "alternateNostrilBreathingDesc",
        "duration_minutes": 5,
        "instruction_steps": [
            ("alternateNostrilBreathingStep1", "person meditative posture"),
            ("alternateNostrilBreathingStep2", "hand position nose"),
            ("alternateNostrilBreathingStep3", "inhale left nostril"),
            ("alternateNostrilBreathingStep4", "hold breath both nostrils closed"),
            ("alternateNostrilBreathingStep5", "exhale right nostril inhale right"),
            ("alternateNostrilBreathingStep6", "exhale left nostril"),
        ],
        "cycle": [
            {"state": "inhale", "duration": 4},
            {"state": "hold_after_inhale", "duration": 2},
            {"state": "exhale", "duration": 4},
        ],
    },
    {
        "slug": "pursed-lip-breathing",
        "name_key": "pursedLipBreathing",
        "description_key": "pursedLipBreathingDesc",
        "duration_minutes": 4,
        "instruction_steps": [
            ("pursedLipBreathingStep1", "person relaxed shoulders"),
            ("pursedLipBreathingStep2", "inhale nose count two"),
            ("pursedLipBreathingStep3", "pursed lips diagram"),
            ("pursedLipBreathingStep4", "exhale pursed lips count four"),
        ],
        "cycle": [
            {"state": "inhale", "duration": 2},
            {"state": "exhale", "duration": 4},
        ],
    },
]


def build_exercise(slug: str, entry: dict[str, Any]) -> BreathingExercise:
    """
    Build a BreathingExercise from a catalog mapping.

    Raises:
        CycleConfigurationError: entry fails validation or its cycle is invalid
    """
    errors = ConfigValidator.validate_exercise_params(entry)
    if errors:
        details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors)
        raise CycleConfigurationError(
            f"Invalid exercise '{slug}': {details}",
            context={"slug": slug}
        )

    if "cycle" not in entry:
        raise CycleConfigurationError(
            f"Exercise '{slug}' has no cycle",
            context={"slug": slug}
        )
    if "duration_minutes" not in entry:
        raise CycleConfigurationError(
            f"Exercise '{slug}' has no duration_minutes",
            context={"slug": slug}
        )

    try:
        cycle = Cycle.from_config(entry["cycle"])
    except CycleConfigurationError as e:
        raise CycleConfigurationError(
            f"Exercise '{slug}': {e}",
            phase_index=e.phase_index,
            value=e.value,
            context={"slug": slug}
        ) from e

    steps = [
        _build_step(slug, index, step)
        for index, step in enumerate(entry.get("instruction_steps", []))
    ]

    return BreathingExercise(
        slug=slug,
        name_key=entry.get("name_key", slug),
        description_key=entry.get("description_key", f"{slug}Desc"),
        duration_minutes=entry["duration_minutes"],
        cycle=cycle,
        instruction_steps=tuple(steps),
    )


def _build_step(slug: str, index: int, step: Any) -> InstructionStep:
    # Either {text_key, diagram_hint?} or a (text_key, diagram_hint) pair
    if isinstance(step, dict):
        text_key = step.get("text_key")
        diagram_hint = step.get("diagram_hint", "")
    elif isinstance(step, (list, tuple)) and len(step) == 2:
        text_key, diagram_hint = step
    else:
        raise CycleConfigurationError(
            f"Exercise '{slug}': instruction step {index} must be a mapping "
            f"with 'text_key' or a [text_key, diagram_hint] pair",
            value=step,
            context={"slug": slug, "step_index": index}
        )

    if not isinstance(text_key, str) or not text_key:
        raise CycleConfigurationError(
            f"Exercise '{slug}': instruction step {index} needs a non-empty 'text_key'",
            value=step,
            context={"slug": slug, "step_index": index}
        )
    if not isinstance(diagram_hint, str):
        raise CycleConfigurationError(
            f"Exercise '{slug}': instruction step {index} diagram_hint must be a string",
            value=step,
            context={"slug": slug, "step_index": index}
        )

    return InstructionStep(text_key, diagram_hint)


class ExerciseCatalog:
    """Ordered, read-only lookup of breathing exercises by slug."""

    def __init__(self, exercises: list[BreathingExercise]):
        self._exercises: dict[str, BreathingExercise] = {}
        for exercise in exercises:
            self._exercises[exercise.slug] = exercise

    @classmethod
    def builtin(cls) -> "ExerciseCatalog":
        """Catalog containing only the built-in exercises."""
        return cls([build_exercise(e["slug"], e) for e in _BUILTIN_EXERCISES])

    @classmethod
    def load(cls, config_dir: Optional[Union[str, Path]] = None) -> "ExerciseCatalog":
        """Built-in exercises merged with exercises.yaml overrides."""
        loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        overrides = loader.load_exercise_overrides()

        entries = {e["slug"]: dict(e) for e in _BUILTIN_EXERCISES}
        for slug, override in overrides.items():
            if not isinstance(override, dict):
                raise CycleConfigurationError(
                    f"Override for exercise '{slug}' must be a mapping",
                    value=override,
                    context={"slug": slug}
                )
            if slug in entries:
                entries[slug].update(override)
            else:
                entries[slug] = dict(override)

        catalog = cls([build_exercise(slug, entry) for slug, entry in entries.items()])

        logger.info(
            "Exercise catalog loaded",
            config_dir=str(loader.config_dir),
            exercise_count=len(catalog),
            overridden=sorted(overrides)
        )
        return catalog

    def get(self, slug: str) -> BreathingExercise:
        """
        Look up an exercise by slug.

        Raises:
            UnknownExerciseError: slug is not in the catalog
        """
        try:
            return self._exercises[slug]
        except KeyError:
            raise UnknownExerciseError(
                f"Unknown breathing exercise: {slug!r}",
                slug=slug,
                available=self.slugs()
            ) from None

    def exercises(self) -> list[BreathingExercise]:
        return list(self._exercises.values())

    def slugs(self) -> list[str]:
        return list(self._exercises)

    def __contains__(self, slug: object) -> bool:
        return slug in self._exercises

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[BreathingExercise]:
        return iter(self._exercises.values())
