import io

import pytest

from pushswap.stacks import Node, Stacks, index_nodes, is_sorted


def make(values):
    out = io.StringIO()
    return Stacks(values, out), out


def lines(out):
    return out.getvalue().splitlines()


def test_index_nodes_ranks_by_value():
    values = [50, -3, 7, 12]
    nodes = [Node(v) for v in values]
    index_nodes(nodes)
    assert {n.index for n in nodes} == set(range(len(values)))
    assert [n.value for n in sorted(nodes, key=lambda n: n.index)] == sorted(values)


def test_index_nodes_skips_already_indexed():
    nodes = [Node(5, index=9), Node(1), Node(3)]
    index_nodes(nodes)
    assert nodes[0].index == 9
    assert [n.index for n in nodes[1:]] == [0, 1]


def test_index_nodes_ties_favour_top():
    nodes = [Node(4), Node(4)]
    index_nodes(nodes)
    assert nodes[0].index < nodes[1].index


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([Node(1)])
    assert is_sorted([Node(1), Node(1), Node(2)])
    assert not is_sorted([Node(2), Node(1)])


def test_sa_swaps_top_two():
    values = [3, 1, 2]
    s, out = make(values)
    assert s.sa() is True
    assert s.a_values() == [values[1], values[0], values[2]]
    assert lines(out) == ["sa"]


def test_sa_on_single_node_does_nothing():
    s, out = make([7])
    assert s.sa() is False
    assert s.a_values() == [7]
    assert out.getvalue() == ""


def test_sb_on_empty_b_does_nothing():
    s, out = make([1, 2])
    assert s.sb() is False
    assert out.getvalue() == ""


def test_ss_needs_both_stacks():
    s, out = make([1, 2, 3])
    assert s.ss() is False
    assert out.getvalue() == ""


def test_ss_swaps_both():
    values = [4, 3, 2, 1]
    s, out = make(values)
    s.pb()
    s.pb()
    b_before = [n.value for n in s.b]
    a_before = s.a_values()
    assert s.ss() is True
    assert s.a_values() == [a_before[1], a_before[0]]
    assert [n.value for n in s.b] == [b_before[1], b_before[0]]
    assert lines(out)[-3:] == ["sa", "sb", "ss"]


def test_pb_then_pa_round_trip():
    values = [5, 8, 2]
    s, out = make(values)
    assert s.pb() is True
    assert [n.value for n in s.b] == [values[0]]
    assert s.a_values() == values[1:]
    assert s.pa() is True
    assert s.a_values() == values
    assert s.b == []
    assert lines(out) == ["pb", "pa"]


def test_pa_refused_when_a_empty():
    s, out = make([])
    assert s.pa() is False
    assert s.pb() is False
    assert out.getvalue() == ""


def test_pa_with_empty_b_still_writes():
    values = [1, 2]
    s, out = make(values)
    assert s.pa() is True
    assert s.a_values() == values
    assert lines(out) == ["pa"]


def test_pp_leaves_state_unchanged():
    s, out = make([1, 2, 3, 4])
    s.pb()
    s.pb()
    a_before = s.a_values()
    b_before = [n.value for n in s.b]
    assert s.pp() is True
    assert s.a_values() == a_before
    assert [n.value for n in s.b] == b_before
    assert lines(out)[-2:] == ["pa", "pb"]


def test_ra_and_rra_are_inverse():
    values = [9, 4, 6, 1]
    s, out = make(values)
    assert s.ra() is True
    assert s.a_values() == values[1:] + values[:1]
    assert s.rra() is True
    assert s.a_values() == values
    assert lines(out) == ["ra", "rra"]


def test_full_rotation_restores_order():
    values = [3, 7, 1, 9, 2]
    s, _ = make(values)
    for _ in values:
        s.ra()
    assert s.a_values() == values


def test_rotation_of_single_node_does_nothing():
    s, out = make([1])
    assert s.ra() is False
    assert s.rra() is False
    assert out.getvalue() == ""


def test_rb_writes_its_name():
    s, out = make([1, 2, 3])
    s.pb()
    s.pb()
    b_before = [n.value for n in s.b]
    assert s.rb() is True
    assert [n.value for n in s.b] == b_before[1:] + b_before[:1]
    assert lines(out)[-1] == "rd"


def test_rrb_moves_bottom_to_top():
    s, out = make([1, 2, 3])
    s.pb()
    s.pb()
    b_before = [n.value for n in s.b]
    assert s.rrb() is True
    assert [n.value for n in s.b] == b_before[-1:] + b_before[:-1]
    assert lines(out)[-1] == "rrb"


def test_rr_and_rrr_write_all_names():
    s, out = make([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.rr()
    s.rrr()
    assert lines(out)[2:] == ["ra", "rd", "rr", "rra", "rrb", "rrr"]


def test_a_sorted():
    s, _ = make([1, 2, 3])
    assert s.a_sorted()
    s.sa()
    assert not s.a_sorted()


def test_distance_to_min():
    values = [8, 6, 2, 9]
    s, _ = make(values)
    smallest = s.min_index(-1)
    assert s.distance_to_min(smallest) == values.index(min(values))
    assert s.distance_to_min(len(values) + 5) == len(values)


def test_min_index_and_next_min():
    values = [9, 1, 5]
    s, _ = make(values)
    first = s.min_index(-1)
    assert first == 0
    second = s.min_index(first)
    by_index = {n.index: n.value for n in s.a}
    assert by_index[second] == sorted(values)[1]


def test_min_index_empty_raises():
    s, _ = make([])
    with pytest.raises(ValueError):
        s.min_index(-1)


def test_default_output_is_stdout(capsys):
    s = Stacks([2, 1])
    s.sa()
    assert capsys.readouterr().out == "sa\n"