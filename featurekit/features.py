"""Building features out of setup, assessment and teardown steps."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from featurekit.types import Labels, Level, Step, StepFunc

__all__ = [
    "FeatureStep",
    "DefaultFeature",
    "FeatureBuilder",
    "get_steps_by_level",
    "filter_steps_by_name",
    "TableEntry",
    "Table",
]


@dataclass
class FeatureStep:
    """A named step run at a given level of a feature test."""

    name: str
    level: Level
    func: StepFunc


@dataclass
class DefaultFeature:
    """A feature with a name, labels and an ordered list of steps."""

    name: str
    labels: Labels = field(default_factory=Labels)
    steps: list[Step] = field(default_factory=list)


class FeatureBuilder:
    """Builds a feature step by step; every method returns the builder."""

    def __init__(self, name: str) -> None:
        self._feature = DefaultFeature(name)

    def with_label(self, key: str, value: str) -> FeatureBuilder:
        """Add a value to the label ``key``."""
        self._feature.labels.setdefault(key, []).append(value)
        return self

    def with_step(self, name: str, level: Level, fn: StepFunc) -> FeatureBuilder:
        """Append a step at the given level."""
        self._feature.steps.append(FeatureStep(name, level, fn))
        return self

    def setup(self, fn: StepFunc) -> FeatureBuilder:
        """Add a setup step named after the feature."""
        return self.with_setup(f"{self._feature.name}-setup", fn)

    def with_setup(self, name: str, fn: StepFunc) -> FeatureBuilder:
        """Add a named setup step."""
        return self.with_step(name, Level.SETUP, fn)

    def teardown(self, fn: StepFunc) -> FeatureBuilder:
        """Add a teardown step named after the feature."""
        return self.with_teardown(f"{self._feature.name}-teardown", fn)

    def with_teardown(self, name: str, fn: StepFunc) -> FeatureBuilder:
        """Add a named teardown step."""
        return self.with_step(name, Level.TEARDOWN, fn)

    def assess(self, desc: str, fn: StepFunc) -> FeatureBuilder:
        """Add an assessment step."""
        return self.with_step(desc, Level.ASSESS, fn)

    def feature(self) -> DefaultFeature:
        """Return the feature built so far."""
        return self._feature


def get_steps_by_level(steps: Iterable[Step] | None, level: Level) -> list[Step] | None:
    """Return the steps at ``level``, in order; ``None`` when ``steps`` is ``None``."""
    if steps is None:
        return None
    return [step for step in steps if step.level == level]


def filter_steps_by_name(
    steps: Iterable[Step] | None, regex: re.Pattern[str] | str
) -> list[Step] | None:
    """Return the steps whose names match ``regex`` anywhere; ``None`` when ``steps`` is ``None``."""
    if steps is None:
        return None
    pattern = re.compile(regex)
    return [step for step in steps if pattern.search(step.name)]


@dataclass
class TableEntry:
    """One assessment in a table-driven test."""

    name: str = ""
    assessment: StepFunc | None = None


class Table(list):
    """A list of ``TableEntry`` items, each an assessment of one feature."""

    def build(self, feature_name: str = "") -> FeatureBuilder:
        """Turn the table into a feature builder.

        Entries without a name are called ``Assessment-<index>``; entries
        without an assessment are left out.
        """
        builder = FeatureBuilder(feature_name)
        for index, entry in enumerate(self):
            if entry.assessment is not None:
                builder.assess(entry.name or f"Assessment-{index}", entry.assessment)
        return builder