from itertools import combinations

import pytest

from puzzledays.day23 import (
    count_t_triangles,
    largest_lan,
    main,
    parse_connections,
    password,
    solve,
)

EXAMPLE = """\
kh-tc
qp-kh
de-cg
ka-co
yn-aq
qp-ub
cg-tb
vc-aq
tb-ka
wh-tc
yn-cg
kh-ub
ta-co
de-co
tc-td
tb-wq
wh-td
ta-ka
td-qp
aq-cg
wq-ub
ub-vc
de-ta
wq-aq
wq-vc
wh-yn
ka-de
kh-ta
co-tc
wh-qp
tb-vc
td-yn
"""


def test_parse_connections_is_symmetric():
    graph = parse_connections(EXAMPLE)
    for node, neighbours in graph.items():
        for other in neighbours:
            assert node in graph[other]


def test_parse_connections_holds_every_line():
    graph = parse_connections(EXAMPLE)
    for line in EXAMPLE.splitlines():
        left, right = line.split("-")
        assert right in graph[left]


def test_parse_connections_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_connections("kh-tc\nqpkh\n")


def test_example_triangles():
    assert count_t_triangles(parse_connections(EXAMPLE)) == 7


def test_triangles_without_t_are_not_counted():
    graph = parse_connections("ab-cd\ncd-ef\nef-ab\n")
    assert count_t_triangles(graph) == 0


def test_largest_lan_is_fully_connected():
    graph = parse_connections(EXAMPLE)
    lan = largest_lan(graph)
    assert len(lan) >= 3
    for a, b in combinations(lan, 2):
        assert b in graph[a]


def test_largest_lan_is_sorted():
    lan = largest_lan(parse_connections(EXAMPLE))
    assert lan == sorted(lan)


def test_example_password():
    assert password(largest_lan(parse_connections(EXAMPLE))) == "co,de,ka,ta"


def test_largest_lan_of_empty_graph():
    assert largest_lan({}) == []


def test_password_sorts_names():
    names = ["zz", "ab", "mm"]
    assert password(names) == ",".join(sorted(names))


def test_solve_combines_results():
    graph = parse_connections(EXAMPLE)
    assert solve(EXAMPLE) == (count_t_triangles(graph), password(largest_lan(graph)))


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert "Expected file arg!" in capsys.readouterr().out


def test_main_prints_password(tmp_path, capsys):
    path = tmp_path / "network.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == password(largest_lan(parse_connections(EXAMPLE)))