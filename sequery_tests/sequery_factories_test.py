import suite
from sequery import (
    from_iterable, from_range, repeat, empty, P, seq, Enumerable,
    QueryConfig, get_config, configure, configured,
    OutOfRangeError, InvalidArgumentError, IllegalOperationError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- factory functions ---

@test("from_range produces consecutive integers")
def test_from_range():
    assert_that(from_range(1, 5).to.list() == [1, 2, 3, 4, 5], "range(1, 5)")
    assert_that(from_range(-2, 3).to.list() == [-2, -1, 0], "negative start")
    assert_that(from_range(7, 0).to.list() == [], "zero count")


@test("from_range validates count and overflow")
def test_from_range_bounds():
    assert_raises(OutOfRangeError, lambda: from_range(0, -1), "count")
    assert_raises(OutOfRangeError, lambda: from_range(2 ** 31 - 1, 2))
    assert_that(from_range(2 ** 31 - 1, 1).to.single() == 2 ** 31 - 1, "the maximum itself fits")
    assert_raises(OutOfRangeError, lambda: from_range(-2 ** 31 - 1, 1), "start")
    assert_that(from_range(-2 ** 31, 2).to.list() == [-2 ** 31, -2 ** 31 + 1], "the minimum itself fits")


@test("repeat produces count copies")
def test_repeat():
    assert_that(repeat("a", 3).to.list() == ["a", "a", "a"], "three copies")
    assert_that(repeat("a", 0).to.list() == [], "zero copies")
    assert_raises(OutOfRangeError, lambda: repeat("a", -1))
    query = repeat(1, 2)
    assert_that(query.to.list() == query.to.list() == [1, 1], "repeat is re-iterable")


@test("empty is a zero-length sequence")
def test_empty():
    assert_that(empty().to.list() == [], "no elements")
    assert_that(isinstance(empty(), Enumerable), "empty is an enumerable")


@test("from_iterable wraps re-iterable sources and its aliases agree")
def test_from_iterable():
    data = (1, 2, 3)
    assert_that(from_iterable(data).to.list() == [1, 2, 3], "tuple source")
    assert_that(P(data).to.list() == seq(data).to.list(), "aliases")
    assert_that(from_iterable({'a': 1}).to.list() == ['a'], "dicts iterate their keys")
    assert_raises(InvalidArgumentError, lambda: from_iterable(None), "data")


@test("materialized list round-trips the sequence")
def test_round_trip():
    query = from_range(1, 20).where(lambda x: x % 3 != 0).select(lambda x: x * 2)
    assert_that(P(query.to.list()).to.sequence_equal(query), "list should equal the sequence element for element")


# --- concrete scenarios ---

@test("concrete scenarios behave as documented")
def test_scenarios():
    assert_that(P([1, 2, 3, 4]).where(lambda x: x > 1).to.list() == [2, 3, 4], "filter")
    assert_that(P([1, 2, 2, 3, 1]).set.distinct().to.list() == [1, 2, 3], "distinct")
    assert_raises(IllegalOperationError, lambda: P([]).to.first(), "no elements")
    assert_that(P([]).to.first_or_default() is None, "no-value sentinel")
    assert_that(P([5]).to.single() == 5, "single")
    assert_raises(IllegalOperationError, lambda: P([5, 6]).to.single(), "more than one")


# --- configuration ---

@test("configuration defaults and validation")
def test_config_defaults():
    config = get_config()
    assert_that(config.ambiguous_single == 'raise', "ambiguity raises by default")
    assert_that(config.group_by_strategy == 'bucket', "single pass grouping by default")
    assert_raises(ValueError, lambda: QueryConfig(ambiguous_single='maybe'), "ambiguous_single")
    assert_raises(ValueError, lambda: QueryConfig(group_by_strategy='magic'), "group_by_strategy")


@test("configured restores the previous configuration")
def test_configured_restores():
    before = get_config()
    with configured(group_by_strategy='rescan') as active:
        assert_that(active.group_by_strategy == 'rescan', "override is active inside the block")
        assert_that(get_config() is active, "get_config sees the override")
    assert_that(get_config() == before, "previous config is restored")


@test("configure rejects unknown fields and bad values")
def test_configure_rejects():
    before = get_config()
    assert_raises(TypeError, lambda: configure(no_such_option=True))
    assert_raises(ValueError, lambda: configure(ambiguous_single='never'))
    assert_that(get_config() == before, "a failed configure leaves the config untouched")
    try:
        configure(ambiguous_single='default')
        assert_that(P([1, 2]).to.single_or_default() is None, "configure applies globally")
    finally:
        configure(ambiguous_single=before.ambiguous_single)


if __name__ == "__main__":
    suite.run(title="sequery factories and config test suite")
