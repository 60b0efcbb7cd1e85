"""Command-line flags that configure a test environment."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = ["FlagError", "LabelsMap", "EnvFlags", "FLAG_USAGE", "parse_args", "parse"]


class FlagError(ValueError):
    """Raised when command-line flags cannot be parsed or are inconsistent."""


class LabelsMap(dict):
    """Maps a label key to every value given for it."""

    def set(self, val: str) -> None:
        """Add comma-separated ``key=value`` pairs to the map."""
        for label in val.split(","):
            parts = label.split("=")
            if len(parts) != 2:
                raise FlagError(f"label format error: {label}")
            key, value = (part.strip() for part in parts)
            self.setdefault(key, []).append(value)

    def contains(self, key: str, val: str) -> bool:
        """Tell whether ``val`` is among the values recorded for ``key``."""
        return val in self.get(key, ())

    def __str__(self) -> str:
        items = " ".join(
            f"{key}:[{' '.join(values)}]" for key, values in sorted(self.items())
        )
        return f"map[{items}]"


FLAG_USAGE = {
    "feature": "Regular expression to select feature(s) to test",
    "assess": "Regular expression to select assessment(s) to run",
    "labels": "Comma-separated key=value to filter features by labels",
    "kubeconfig": "Path to a cluster kubeconfig file (optional)",
    "namespace": "A namespace value to use for testing (optional)",
    "skip-labels": "Regular expression to skip label(s) to run",
    "skip-features": "Regular expression to skip feature(s) to run",
    "skip-assessment": "Regular expression to skip assessment(s) to run",
    "parallel": "Run test features in parallel",
    "dry-run": (
        "Run Test suite in dry-run mode. This will list the tests to be "
        "executed without actually running them"
    ),
    "fail-fast": "Fail immediately and stop running untested code",
    "disable-graceful-teardown": (
        "Ignore panic recovery while running tests. This will prevent test "
        "finish steps from getting executed on panic"
    ),
    "context": "The name of the kubeconfig context to use",
}

_STRING_FLAGS = {
    "feature": "feature",
    "assess": "assess",
    "kubeconfig": "kubeconfig",
    "namespace": "namespace",
    "skip-features": "skip_features",
    "skip-assessment": "skip_assessment",
    "context": "kube_context",
}
_BOOL_FLAGS = {
    "parallel": "parallel",
    "dry-run": "dry_run",
    "fail-fast": "fail_fast",
    "disable-graceful-teardown": "disable_graceful_teardown",
}
_LABEL_FLAGS = {"labels": "labels", "skip-labels": "skip_labels"}

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


@dataclass(frozen=True)
class EnvFlags:
    """Resolved flag values for the testing framework."""

    feature: str = ""
    assess: str = ""
    labels: LabelsMap = field(default_factory=LabelsMap)
    kubeconfig: str = ""
    namespace: str = ""
    skip_labels: LabelsMap = field(default_factory=LabelsMap)
    skip_features: str = ""
    skip_assessment: str = ""
    parallel: bool = False
    dry_run: bool = False
    fail_fast: bool = False
    disable_graceful_teardown: bool = False
    kube_context: str = ""


def _parse_bool(name: str, value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise FlagError(
        f'flags parsing: invalid boolean value "{value}" for -{name}: parse error'
    )


def _flag_pairs(args: Iterable[str]):
    """Yield ``(name, value or None)`` until the first non-flag argument."""
    it = iter(args)
    for arg in it:
        if arg == "--" or arg == "-" or not arg.startswith("-"):
            return
        body = arg[2:] if arg.startswith("--") else arg[1:]
        if not body or body[0] in "-=":
            raise FlagError(f"flags parsing: bad flag syntax: {arg}")
        name, sep, value = body.partition("=")
        if name in ("h", "help"):
            raise FlagError("flags parsing: flag: help requested")
        if name in _BOOL_FLAGS:
            yield name, (value if sep else None)
        elif name in _STRING_FLAGS or name in _LABEL_FLAGS:
            if not sep:
                value = next(it, None)
                if value is None:
                    raise FlagError(f"flags parsing: flag needs an argument: -{name}")
            yield name, value
        else:
            raise FlagError(f"flags parsing: flag provided but not defined: -{name}")


def parse_args(args: Sequence[str]) -> EnvFlags:
    """Parse ``args`` in the single or double dash style and return the flag values."""
    values: dict[str, object] = {
        "labels": LabelsMap(),
        "skip_labels": LabelsMap(),
    }
    for name, value in _flag_pairs(args):
        if name in _BOOL_FLAGS:
            values[_BOOL_FLAGS[name]] = True if value is None else _parse_bool(name, value)
        elif name in _LABEL_FLAGS:
            try:
                values[_LABEL_FLAGS[name]].set(value)  # type: ignore[union-attr]
            except FlagError as exc:
                raise FlagError(
                    f'flags parsing: invalid value "{value}" for flag -{name}: {exc}'
                ) from exc
        else:
            values[_STRING_FLAGS[name]] = value

    flags = EnvFlags(**values)  # type: ignore[arg-type]
    if flags.fail_fast and flags.parallel:
        raise FlagError("--fail-fast and --parallel are mutually exclusive options")
    return flags


def parse() -> EnvFlags:
    """Parse the arguments of the running program."""
    return parse_args(sys.argv[1:])