"""Find triangles and the largest fully connected group in a computer network."""

import sys


def parse_connections(text):
    """Return an undirected graph mapping each computer to its neighbours."""
    graph = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        left, sep, right = line.partition("-")
        left, right = left.strip(), right.strip()
        if not sep or not left or not right:
            raise ValueError(f"malformed connection {line!r}")
        graph.setdefault(left, set()).add(right)
        graph.setdefault(right, set()).add(left)
    return graph


def count_t_triangles(graph):
    """Count sets of three connected computers where one name starts with 't'."""
    count = 0
    for a, neighbours in graph.items():
        for b in neighbours:
            if b <= a:
                continue
            for c in neighbours & graph[b]:
                if c <= b:
                    continue
                if any(name.startswith("t") for name in (a, b, c)):
                    count += 1
    return count


def largest_lan(graph):
    """Return the members of a largest group in which all computers are connected."""
    best = []

    def expand(clique, candidates, excluded):
        nonlocal best
        if not candidates and not excluded:
            if len(clique) > len(best):
                best = sorted(clique)
            return
        if len(clique) + len(candidates) <= len(best):
            return
        pivot = max(sorted(candidates | excluded), key=lambda node: len(graph[node] & candidates))
        for node in sorted(candidates - graph[pivot]):
            expand(clique | {node}, candidates & graph[node], excluded & graph[node])
            candidates = candidates - {node}
            excluded = excluded | {node}

    expand(set(), set(graph), set())
    return best


def password(lan):
    """Join the computer names alphabetically with commas."""
    return ",".join(sorted(lan))


def solve(text):
    """Return the triangle count and the password of the largest LAN."""
    graph = parse_connections(text)
    return count_t_triangles(graph), password(largest_lan(graph))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Expected file arg!")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Unable to open file: {args[0]}!")
        return 1

    try:
        task1, task2 = solve(text)
    except ValueError as err:
        print(err)
        return 1
    print(f"Answer Task 1:\n  Sum = {task1}")
    print(task2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())