"""Check print-queue updates against page ordering rules and repair broken ones."""

from dataclasses import dataclass, field

from puzzledays.day02 import _run


@dataclass
class Instructions:
    """Ordering rules as (before, after) pairs and the updates to check."""

    rules: list = field(default_factory=list)
    updates: list = field(default_factory=list)


def parse_input(text):
    """Parse ``a|b`` rule lines, a blank line, then comma-separated updates."""
    lines = iter(text.splitlines())
    rules = []
    for line in lines:
        line = line.strip()
        if not line:
            break
        before, _, after = line.partition("|")
        rules.append((int(before), int(after)))

    updates = [
        [int(page) for page in line.split(",") if page.strip()]
        for line in (raw.strip() for raw in lines)
        if line
    ]
    return Instructions(rules, updates)


def is_order_valid(order, rules):
    """True when no rule with both pages present is violated."""
    position = {}
    for index, page in enumerate(order):
        position.setdefault(page, index)
    return all(
        position[before] <= position[after]
        for before, after in rules
        if before in position and after in position
    )


def _after_or_same(x, y, rules):
    for before, after in rules:
        if before == x and after == y:
            return False
        if after == x and before == y:
            return True
    return True


def fix_order(order, rules):
    """Return the pages reordered so that they follow the rules."""
    pages = list(order)
    if len(pages) <= 1:
        return pages
    pivot = pages[-1]
    rest = pages[:-1]
    lower = [page for page in rest if not _after_or_same(page, pivot, rules)]
    upper = [page for page in reversed(rest) if _after_or_same(page, pivot, rules)]
    return fix_order(lower, rules) + [pivot] + fix_order(upper, rules)


def middle_number(order):
    """Return the middle page of an update."""
    if not order:
        raise ValueError("cannot take the middle number of an empty update")
    return order[len(order) // 2]


def solve(text):
    """Sum the middles of valid updates, and of invalid updates once fixed."""
    instructions = parse_input(text)
    valid_sum = 0
    fixed_sum = 0
    for update in instructions.updates:
        if is_order_valid(update, instructions.rules):
            valid_sum += middle_number(update)
        else:
            fixed_sum += middle_number(fix_order(update, instructions.rules))
    return valid_sum, fixed_sum


def main(argv=None):
    return _run(argv, solve)