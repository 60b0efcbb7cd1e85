"""Core types shared by environments, features and steps."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from featurekit.flags import LabelsMap

if TYPE_CHECKING:
    from featurekit.envconf import Config

__all__ = [
    "Labels",
    "Level",
    "Step",
    "Feature",
    "StepFunc",
    "EnvFunc",
    "TestEnvFunc",
    "FeatureEnvFunc",
]

Labels = LabelsMap

# A step receives a context, the running test and the environment config,
# and returns the (possibly updated) context.
StepFunc = Callable[[Any, Any, "Config"], Any]

# Environment operations return the updated context; they raise on failure.
EnvFunc = Callable[[Any, "Config"], Any]
TestEnvFunc = Callable[[Any, "Config", Any], Any]
FeatureEnvFunc = Callable[[Any, "Config", Any, "Feature"], Any]


class Level(IntEnum):
    """The phase of a feature test a step belongs to."""

    SETUP = 0
    ASSESS = 1
    TEARDOWN = 2


@runtime_checkable
class Step(Protocol):
    """A named operation run at a given level of a feature test."""

    name: str
    level: Level
    func: StepFunc


@runtime_checkable
class Feature(Protocol):
    """A testable feature: a name, labels and its steps."""

    name: str
    labels: Labels
    steps: Sequence[Step]