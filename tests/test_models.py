from fractions import Fraction

import pytest


def test_node_options_defaults():
    from dagprogress.models import NodeOptions
    opts = NodeOptions()
    assert opts.weight == 1
    assert opts.exact_weight == 1


def test_node_options_exact_weight():
    from dagprogress.models import NodeOptions
    assert NodeOptions(weight=0.1).exact_weight == Fraction(1, 10)


def test_node_options_progress_flag():
    from dagprogress.models import NodeOptions
    assert NodeOptions(progress=False).weight == 0
    assert NodeOptions(progress=True).weight == 1
    assert NodeOptions(progress=False, weight=2).weight == 2


def test_node_options_rejects_negative():
    from pydantic import ValidationError
    from dagprogress.models import NodeOptions
    with pytest.raises(ValidationError):
        NodeOptions(weight=-0.5)


def test_progress_record_json_dump():
    from dagprogress.models import ProgressRecord
    record = ProgressRecord(
        value=0.5, before=0.25, own=0.25, remaining=0.5,
        raw_value=2, raw_before=1, raw_own=1, raw_remaining=2, path_total=4,
        fraction=Fraction(1, 2), own_fraction=Fraction(1, 4),
    )
    assert record.model_dump()["fraction"] == Fraction(1, 2)
    assert record.model_dump(mode="json")["fraction"] == "1/2"
    assert record.model_dump(mode="json")["own_fraction"] == "1/4"


def test_graph_definition_conversion():
    from dagprogress.models import GraphDefinition, NodeOptions, NodeSpec
    definition = GraphDefinition(name="g", nodes=[
        NodeSpec(id="a", next=["b"], weight=2),
        NodeSpec(id="b", progress=False),
        NodeSpec(id="c"),
    ])
    assert definition.adjacencies() == {"a": ["b"], "b": [], "c": []}
    assert definition.node_options() == {"a": NodeOptions(weight=2), "b": NodeOptions(weight=0)}


@pytest.mark.parametrize("weight", [float("inf"), float("nan")])
def test_node_options_rejects_non_finite(weight):
    from pydantic import ValidationError
    from dagprogress.models import NodeOptions, NodeSpec
    with pytest.raises(ValidationError):
        NodeOptions(weight=weight)
    with pytest.raises(ValidationError):
        NodeSpec(id="a", weight=weight)


def test_node_options_keeps_large_int_exact():
    from dagprogress.models import NodeOptions
    opts = NodeOptions(weight=2**53 + 1)
    assert isinstance(opts.weight, int)
    assert opts.exact_weight == 2**53 + 1
    assert isinstance(NodeOptions(weight=0.5).weight, float)


def test_node_spec_numeric_ids():
    from dagprogress.models import NodeSpec
    spec = NodeSpec(id=1, next=[2, 3])
    assert spec.id == "1"
    assert spec.next == ["2", "3"]
