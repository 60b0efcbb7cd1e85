"""Configuration of a test environment."""

from __future__ import annotations

import re
import secrets
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from featurekit.flags import LabelsMap, parse, parse_args

__all__ = ["Config", "new_with_kubeconfig", "new_from_flags", "random_name"]

_DEFAULT_NAME_LENGTH = 32


def _labels_from(labels: Mapping[str, Sequence[str]] | None) -> LabelsMap:
    result = LabelsMap()
    for key, values in (labels or {}).items():
        result[key] = list(values)
    return result


@dataclass
class Config:
    """Settings shared by every feature run in an environment.

    The ``with_*`` methods update the configuration in place and return it,
    so calls can be chained.
    """

    kubeconfig: str = ""
    namespace: str = ""
    assessment_regex: re.Pattern[str] | None = None
    feature_regex: re.Pattern[str] | None = None
    labels: LabelsMap = field(default_factory=LabelsMap)
    skip_feature_regex: re.Pattern[str] | None = None
    skip_labels: LabelsMap = field(default_factory=LabelsMap)
    skip_assessment_regex: re.Pattern[str] | None = None
    parallel_tests: bool = False
    dry_run: bool = False
    fail_fast: bool = False
    disable_graceful_teardown: bool = False
    kube_context: str = ""

    def with_kubeconfig_file(self, kubeconfig: str) -> Config:
        """Set the path of the kubeconfig file."""
        self.kubeconfig = kubeconfig
        return self

    def with_namespace(self, ns: str) -> Config:
        """Set the namespace of the environment."""
        self.namespace = ns
        return self

    def with_random_namespace(self) -> Config:
        """Set the namespace of the environment to a random name."""
        self.namespace = random_name("testns-", _DEFAULT_NAME_LENGTH)
        return self

    def with_assessment_regex(self, regex: str) -> Config:
        """Select assessments whose names match ``regex``."""
        self.assessment_regex = re.compile(regex)
        return self

    def with_skip_assessment_regex(self, regex: str) -> Config:
        """Skip assessments whose names match ``regex``."""
        self.skip_assessment_regex = re.compile(regex)
        return self

    def with_feature_regex(self, regex: str) -> Config:
        """Select features whose names match ``regex``."""
        self.feature_regex = re.compile(regex)
        return self

    def with_skip_feature_regex(self, regex: str) -> Config:
        """Skip features whose names match ``regex``."""
        self.skip_feature_regex = re.compile(regex)
        return self

    def with_labels(self, labels: Mapping[str, Sequence[str]]) -> Config:
        """Set the label filters that select features."""
        self.labels = _labels_from(labels)
        return self

    def with_skip_labels(self, labels: Mapping[str, Sequence[str]]) -> Config:
        """Set the label filters that skip features."""
        self.skip_labels = _labels_from(labels)
        return self

    def with_parallel_test_enabled(self) -> Config:
        """Run features in parallel."""
        self.parallel_tests = True
        return self

    def with_dry_run_mode(self) -> Config:
        """List the tests without running them."""
        self.dry_run = True
        return self

    def with_fail_fast(self) -> Config:
        """Stop testing a feature at its first failure."""
        self.fail_fast = True
        return self

    def with_disable_graceful_teardown(self) -> Config:
        """Do not run finish steps when a test crashes."""
        self.disable_graceful_teardown = True
        return self

    def with_kube_context(self, kube_context: str) -> Config:
        """Set the kubeconfig context to use."""
        self.kube_context = kube_context
        return self


def new_with_kubeconfig(kubeconfig: str) -> Config:
    """Create a configuration that uses the given kubeconfig file."""
    return Config().with_kubeconfig_file(kubeconfig)


def new_from_flags(args: Sequence[str] | None = None) -> Config:
    """Create a configuration from command-line flags.

    ``args`` defaults to the arguments of the running program. Raises
    ``FlagError`` when the flags cannot be parsed and ``re.error`` when a
    regular expression is invalid.
    """
    flags = parse() if args is None else parse_args(args)
    cfg = Config(
        kubeconfig=flags.kubeconfig,
        namespace=flags.namespace,
        labels=flags.labels,
        skip_labels=flags.skip_labels,
        parallel_tests=flags.parallel,
        dry_run=flags.dry_run,
        fail_fast=flags.fail_fast,
        disable_graceful_teardown=flags.disable_graceful_teardown,
        kube_context=flags.kube_context,
    )
    if flags.assess:
        cfg.with_assessment_regex(flags.assess)
    if flags.feature:
        cfg.with_feature_regex(flags.feature)
    if flags.skip_features:
        cfg.with_skip_feature_regex(flags.skip_features)
    if flags.skip_assessment:
        cfg.with_skip_assessment_regex(flags.skip_assessment)
    return cfg


def random_name(prefix: str, n: int = _DEFAULT_NAME_LENGTH) -> str:
    """Return a random name of length ``n`` that starts with ``prefix``.

    A length of 0 means the default length of 32. When the prefix is already
    at least ``n`` characters long it is returned unchanged.
    """
    if n == 0:
        n = _DEFAULT_NAME_LENGTH
    if len(prefix) >= n:
        return prefix
    return f"{prefix}-{secrets.token_hex(n)}"[:n]