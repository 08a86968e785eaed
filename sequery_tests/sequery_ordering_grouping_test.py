import suite
from dgen import from_schema, choice
from sequery import P, empty, from_iterable, Enumerable, OrderedEnumerable, configured, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

employee_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 20, 'max_value': 30}),
    'team': choice(['red', 'blue', 'green']),
}

pairs = P([('b', 2), ('a', 1), ('c', 2), ('d', 1), ('e', 3)])


class Counting:
    """wraps a list and records how many times it was iterated"""

    def __init__(self, items):
        self.items = items
        self.iterations = 0

    def __iter__(self):
        self.iterations += 1
        return iter(self.items)


# --- order_by ---

@test("order_by sorts ascending by key")
def test_order_by():
    result = P([3, 1, 2]).order_by(lambda x: x).to.list()
    assert_that(result == [1, 2, 3], f"unexpected order: {result}")
    assert_that(isinstance(P([1]).order_by(lambda x: x), OrderedEnumerable), "returns an ordered enumerable")


@test("order_by is stable for equal keys")
def test_order_by_stable():
    result = pairs.order_by(lambda p: p[1]).select(lambda p: p[0]).to.list()
    assert_that(result == ['a', 'd', 'b', 'c', 'e'], f"equal keys should keep source order: {result}")


@test("order_by_descending is stable for equal keys")
def test_order_by_descending_stable():
    result = pairs.order_by_descending(lambda p: p[1]).select(lambda p: p[0]).to.list()
    assert_that(result == ['e', 'b', 'c', 'a', 'd'], f"equal keys should keep source order: {result}")


@test("order_by is a non-decreasing permutation of the source")
def test_order_by_permutation():
    people = from_schema(employee_schema, seed=5).take(40)
    ordered = people.order_by(lambda p: p['age']).to.list()
    ages = [p['age'] for p in ordered]
    assert_that(ages == sorted(ages), "ages should be non-decreasing")
    assert_that(len(ordered) == people.to.count(), "sorting should keep every element")


@test("then_by adds secondary sort levels")
def test_then_by():
    result = pairs.order_by(lambda p: p[1]).then_by_descending(lambda p: p[0]).to.list()
    assert_that(result == [('d', 1), ('a', 1), ('c', 2), ('b', 2), ('e', 3)], f"unexpected order: {result}")
    result = pairs.order_by_descending(lambda p: p[1]).then_by(lambda p: p[0]).select(lambda p: p[0]).to.list()
    assert_that(result == ['e', 'b', 'c', 'a', 'd'], f"unexpected order: {result}")


@test("order_by sorts lazily and only once")
def test_order_by_sorts_once():
    calls = []
    query = P([3, 1, 2]).order_by(lambda x: calls.append(x) or x)
    assert_that(calls == [], "nothing should be sorted before iteration")
    first = query.to.list()
    second = query.to.list()
    assert_that(first == second == [1, 2, 3], "repeated iteration sees the same order")
    assert_that(len(calls) == 3, f"keys should be extracted by a single sort: {len(calls)}")


@test("order_by reads its source exactly once per sort")
def test_order_by_single_read():
    source = Counting([3, 1, 2])
    query = from_iterable(source).order_by(lambda x: x)
    assert_that(source.iterations == 0, "nothing should be read before iteration")
    assert_that(query.to.first() == 1, "smallest comes first")
    assert_that(source.iterations == 1, f"sort read the source {source.iterations} times")
    assert_that(query.then_by(lambda x: -x).to.list() == [1, 2, 3], "a new level sorts again")
    assert_that(source.iterations == 2, f"the new sort should add one read: {source.iterations}")


@test("ordering rejects a missing key selector")
def test_order_by_none():
    assert_raises(InvalidArgumentError, lambda: pairs.order_by(None), "key_selector")
    assert_raises(InvalidArgumentError, lambda: pairs.order_by_descending(None))
    assert_raises(InvalidArgumentError, lambda: pairs.order_by(lambda p: p).then_by(None))


# --- group_by ---

@test("group_by partitions by key preserving order within groups")
def test_group_by():
    groups = P(['apple', 'avocado', 'banana', 'blueberry', 'cherry']).group.group_by(lambda w: w[0])
    assert_that(set(groups) == {'a', 'b', 'c'}, f"unexpected keys: {list(groups)}")
    assert_that(groups['b'].to.list() == ['banana', 'blueberry'], "group members keep source order")
    assert_that(isinstance(groups['a'], Enumerable), "groups are enumerables")
    assert_that(groups['c'].select(str.upper).to.first() == 'CHERRY', "groups support further queries")


@test("group_by with the rescan strategy gives identical groups")
def test_group_by_rescan():
    people = from_schema(employee_schema, seed=9).take(30)
    bucket = people.group.group_by(lambda p: p['team'])
    with configured(group_by_strategy='rescan'):
        rescan = people.group.group_by(lambda p: p['team'])
    assert_that(set(bucket) == set(rescan), "both strategies find the same keys")
    for key in bucket:
        assert_that(bucket[key].to.sequence_equal(rescan[key]), f"group '{key}' should match")


@test("group_by covers every element exactly once")
def test_group_by_partition():
    people = from_schema(employee_schema, seed=3).take(25)
    groups = people.group.group_by(lambda p: p['age'] % 3)
    total = sum(group.to.count() for group in groups.values())
    assert_that(total == 25, f"groups should partition the source: {total}")


@test("group_by on empty source and missing selector")
def test_group_by_edges():
    assert_that(empty().group.group_by(lambda x: x) == {}, "empty source gives no groups")
    assert_raises(InvalidArgumentError, lambda: pairs.group.group_by(None), "key_selector")


if __name__ == "__main__":
    suite.run(title="sequery ordering and grouping test suite")
