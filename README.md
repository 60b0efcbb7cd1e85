# featurekit

Building blocks for feature-oriented end-to-end tests. A *feature* is a named
collection of steps (setups, assessments and teardowns) with labels
attached. An environment configuration holds the filters and run modes that a
test runner would use to decide which features and assessments run.

## Installation

```
pip install featurekit
```

For running the test suite:

```
pip install "featurekit[test]"
```

## Modules

- `featurekit.types`: the `Level` enum (`SETUP`, `ASSESS`, `TEARDOWN`), the
  `Step` and `Feature` protocols, and the `Labels` alias for `LabelsMap`.
- `featurekit.features`: `FeatureBuilder`, `DefaultFeature`, `FeatureStep`,
  the step filters `get_steps_by_level` and `filter_steps_by_name`, and
  table-driven features with `Table` and `TableEntry`.
- `featurekit.flags`: command-line flag parsing (`parse_args`, `parse`),
  `EnvFlags`, `LabelsMap` and `FlagError`.
- `featurekit.envconf`: the `Config` class, `new_with_kubeconfig`,
  `new_from_flags` and `random_name`.

## Defining features

A step function takes a context, the running test and the configuration, and
returns the context.

```python
from featurekit.features import FeatureBuilder

def check_greeting(ctx, t, cfg):
    assert f"Hello {ctx['name']}" == "Hello bazz"
    return ctx

feature = (
    FeatureBuilder("Hello Feature")
    .with_label("type", "simple")
    .setup(lambda ctx, t, cfg: ctx)
    .assess("test message", check_greeting)
    .teardown(lambda ctx, t, cfg: ctx)
    .feature()
)

feature.name    # "Hello Feature"
feature.labels  # {"type": ["simple"]}
feature.steps   # four FeatureStep objects, in the order they were added
```

`setup` and `teardown` name their steps `<feature>-setup` and
`<feature>-teardown`; use `with_setup` and `with_teardown` to pick names
yourself, or `with_step` to add a step at any `Level`. Calling `with_label`
again with the same key adds another value to it.

Steps can be selected by level or by name:

```python
import re
from featurekit.features import get_steps_by_level, filter_steps_by_name
from featurekit.types import Level

assessments = get_steps_by_level(feature.steps, Level.ASSESS)
adds = filter_steps_by_name(feature.steps, re.compile("add-.*"))
```

`filter_steps_by_name` accepts a compiled pattern or a string and keeps the
steps whose names match anywhere. Both filters return `None` when given
`None`.

### Table-driven features

```python
from featurekit.features import Table, TableEntry

table = Table([
    TableEntry("first", check_greeting),
    TableEntry("", check_greeting),   # named "Assessment-1"
    TableEntry("skipped"),            # no assessment: left out
])
builder = table.build("table feature")
```

## Environment configuration

The `with_*` methods of `Config` change it in place and return it, so they
chain.

```python
from featurekit.envconf import Config, new_from_flags, random_name

cfg = (
    Config()
    .with_namespace(random_name("testns-", 16))
    .with_assessment_regex("add-.*")
    .with_fail_fast()
)

cfg = new_from_flags(["--feature", "beta", "--labels", "env=dev", "--dry-run"])
cfg.feature_regex.pattern  # "beta"
cfg.labels                 # {"env": ["dev"]}
cfg.dry_run                # True
```

`new_from_flags()` without arguments reads the arguments of the running
program. `random_name(prefix, n)` returns a name of length `n` (32 when `n`
is 0) that starts with the prefix, or the prefix itself when it is already
`n` characters or longer.

## Command-line flags

`featurekit.flags.parse_args` accepts flags written with one dash or two,
with the value either as the next argument or after `=`. Parsing stops at the
first argument that is not a flag, or at `--`.

| flag | meaning |
| --- | --- |
| `--feature` | regular expression selecting features |
| `--assess` | regular expression selecting assessments |
| `--labels` | comma-separated `key=value` label filters |
| `--skip-labels` | comma-separated `key=value` labels to skip |
| `--skip-features` | regular expression of features to skip |
| `--skip-assessment` | regular expression of assessments to skip |
| `--kubeconfig` | path to a cluster kubeconfig file |
| `--namespace` | namespace to use for testing |
| `--context` | kubeconfig context name |
| `--parallel` | run features in parallel |
| `--dry-run` | list tests without running them |
| `--fail-fast` | stop at the first failure |
| `--disable-graceful-teardown` | do not run finish steps after a crash |

Boolean flags take an optional `=true` / `=false`. `FlagError` is raised for
an unknown flag, a missing value, a malformed label, a bad boolean, `-h` or
`--help`, and for `--fail-fast` combined with `--parallel`. The usage text of
each flag is in `featurekit.flags.FLAG_USAGE`.

## What this package does not do

featurekit describes features and holds configuration; it does not run them.
There is no environment or test runner that executes steps, applies the
feature, label or assessment filters, or runs features in parallel, and no
command-line program. It does not create clusters or namespaces and does not
talk to a cluster: the kubeconfig path, namespace and context are stored in
`Config` as plain values for your own code to use.