from microrunn.engine import leaf, add, multiply, tanh
from microrunn.engine.graph_utils import (
    get_graph_stats,
    print_graph_summary,
    analyze_graph_complexity,
)


def test_stats_count_shared_operand_once_as_node():
    x = leaf(3.0)
    y = add(x, x)
    stats = get_graph_stats(y)
    assert stats['nodes'] == 2
    assert stats['edges'] == 2
    assert stats['max_fan_in'] == 2
    assert stats['max_fan_out'] == 2
    assert stats['operations'] == {'leaf': 1, 'add': 1}


def test_stats_single_leaf():
    stats = get_graph_stats(leaf(1.0))
    assert stats['nodes'] == 1
    assert stats['edges'] == 0
    assert stats['max_fan_out'] == 0


def test_print_graph_summary(capsys):
    a, b = leaf(2.0), leaf(-3.0)
    f = tanh(add(multiply(a, b), leaf(10.0)))
    stats = print_graph_summary(f, detailed=True)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "leaf/input" in out
    assert stats['nodes'] == 6
    assert stats['operations']['tanh'] == 1


def test_analyze_graph_complexity():
    x = leaf(1.0)
    report = analyze_graph_complexity(multiply(x, x))
    assert "Complexity level: Low" in report
    assert "mul" in report
