import re

import pytest

from featurekit.features import (
    DefaultFeature,
    FeatureBuilder,
    FeatureStep,
    Table,
    TableEntry,
    filter_steps_by_name,
    get_steps_by_level,
)
from featurekit.types import Level


def noop(ctx, t, cfg):
    return ctx


def test_new():
    feat = FeatureBuilder("test-feat").feature()
    assert isinstance(feat, DefaultFeature)
    assert feat.name == "test-feat"


def test_empty_feature():
    feat = FeatureBuilder("empty").feature()
    assert len(feat.labels) == 0
    assert len(feat.steps) == 0


def test_with_labels():
    feat = (
        FeatureBuilder("test")
        .with_label("a", "a")
        .with_label("a", "aa")
        .with_label("b", "b")
        .feature()
    )
    assert len(feat.labels) == 2
    assert feat.labels["a"] == ["a", "aa"]
    assert feat.labels["b"] == ["b"]
    assert feat.labels.contains("a", "aa")


def test_one_setup():
    feat = FeatureBuilder("test").setup(noop).feature()
    assert len(get_steps_by_level(feat.steps, Level.SETUP)) == 1
    assert len(feat.steps) == 1
    assert feat.steps[0].name == "test-setup"


def test_multiple_setups():
    feat = FeatureBuilder("test").setup(noop).setup(noop).feature()
    assert len(get_steps_by_level(feat.steps, Level.SETUP)) == 2
    assert len(feat.steps) == 2


def test_named_setups():
    feat = FeatureBuilder("test").with_setup("setup-test", noop).feature()
    assert get_steps_by_level(feat.steps, Level.SETUP)[0].name == "setup-test"


def test_one_teardown():
    feat = FeatureBuilder("test").teardown(noop).feature()
    teardowns = get_steps_by_level(feat.steps, Level.TEARDOWN)
    assert len(teardowns) == 1
    assert len(feat.steps) == 1
    assert teardowns[0].name == "test-teardown"


def test_multiple_teardowns():
    feat = FeatureBuilder("test").teardown(noop).teardown(noop).feature()
    assert len(get_steps_by_level(feat.steps, Level.TEARDOWN)) == 2
    assert len(feat.steps) == 2


def test_named_teardowns():
    feat = FeatureBuilder("test").with_teardown("teardown-test", noop).feature()
    assert get_steps_by_level(feat.steps, Level.TEARDOWN)[0].name == "teardown-test"


def test_single_assessment():
    feat = FeatureBuilder("test").assess("Some test", noop).feature()
    assessments = get_steps_by_level(feat.steps, Level.ASSESS)
    assert len(assessments) == 1
    assert len(feat.steps) == 1
    assert assessments[0].func is noop


def test_multiple_assessments():
    feat = (
        FeatureBuilder("test")
        .assess("some test", noop)
        .assess("some tests 2", noop)
        .feature()
    )
    assert len(get_steps_by_level(feat.steps, Level.ASSESS)) == 2
    assert len(feat.steps) == 2


def test_all_steps_keep_order():
    feat = (
        FeatureBuilder("test")
        .setup(noop)
        .assess("some tests 2", noop)
        .assess("some tests 3", noop)
        .teardown(noop)
        .feature()
    )
    assert len(feat.steps) == 4
    assert [s.level for s in feat.steps] == [
        Level.SETUP,
        Level.ASSESS,
        Level.ASSESS,
        Level.TEARDOWN,
    ]


def test_step_func_is_callable_with_context():
    feat = FeatureBuilder("f").assess("a", noop).feature()
    assert feat.steps[0].func("ctx", None, None) == "ctx"


def test_get_steps_by_level_none():
    assert get_steps_by_level(None, Level.SETUP) is None


def test_filter_steps_by_name():
    steps = [
        FeatureStep("add-bazz", Level.ASSESS, noop),
        FeatureStep("repeat-msg", Level.ASSESS, noop),
        FeatureStep("add-bat", Level.ASSESS, noop),
    ]
    result = filter_steps_by_name(steps, re.compile("add-*"))
    assert [s.name for s in result] == ["add-bazz", "add-bat"]


def test_filter_steps_by_name_unanchored_and_none():
    steps = [FeatureStep("check deployment", Level.ASSESS, noop)]
    assert [s.name for s in filter_steps_by_name(steps, "deploy")] == ["check deployment"]
    assert filter_steps_by_name(None, "x") is None


def test_table_build():
    table = Table(
        [
            TableEntry("first", noop),
            TableEntry("", noop),
            TableEntry("skipped", None),
        ]
    )
    feat = table.build("table feature").feature()
    assert feat.name == "table feature"
    assert [s.name for s in feat.steps] == ["first", "Assessment-1"]
    assert all(s.level == Level.ASSESS for s in feat.steps)


def test_table_build_without_name():
    feat = Table([TableEntry(assessment=noop)]).build().feature()
    assert feat.name == ""
    assert feat.steps[0].name == "Assessment-0"


@pytest.mark.parametrize("count", [0, 3])
def test_table_build_count(count):
    table = Table(TableEntry(f"a{i}", noop) for i in range(count))
    assert len(table.build("f").feature().steps) == count