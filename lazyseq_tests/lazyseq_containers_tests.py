import suite
from lazyseq import S, LazySequence, IndexedCollection, KeyedCollection, SequenceView, Pair

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


# --- indexed collection ---

@test("indexed collection behaves like a list")
def test_indexed_list_protocol():
    items = IndexedCollection([1, 2, 3])
    assert_that(len(items) == 3 and items[0] == 1 and items[-1] == 3, "length and indexing")
    assert_that(2 in items and 9 not in items, "membership")
    items[1] = 20
    del items[0]
    assert_that(items == [20, 3], f"after set and delete got {items}")
    assert_that(items.get(5) is None and items.get(5, 'x') == 'x', "get falls back to a default")
    with raises(IndexError):
        items[5]


@test("indexed collection copies its input")
def test_indexed_copies_input():
    source = [1, 2]
    items = IndexedCollection(source)
    source.append(3)
    assert_that(items.as_list() == [1, 2], "the input list is not shared")
    assert_that(IndexedCollection(lambda: iter([4, 5])) == [4, 5], "factories are drained")
    assert_that(IndexedCollection(S([6])) == [6], "sequences are drained")


@test("push, pop, shift and unshift work on both ends")
def test_indexed_ends():
    items = IndexedCollection([2, 3])
    assert_that(items.push(4, 5) is items, "push returns the collection")
    assert_that(items.unshift(0, 1) is items, "unshift returns the collection")
    assert_that(items == [0, 1, 2, 3, 4, 5], f"unexpected contents {items}")
    assert_that(items.pop() == 5, "pop removes the last element")
    assert_that(items.shift() == 0, "shift removes the first element")
    assert_that(items == [1, 2, 3, 4], f"unexpected contents {items}")
    assert_that(IndexedCollection().pop() is None and IndexedCollection().shift() is None, "empty ends")


@test("slice copies and splice mutates")
def test_slice_splice():
    items = IndexedCollection(['a', 'b', 'c', 'd'])
    assert_that(items.slice(1, 2) == ['b', 'c'], "slice with a length")
    assert_that(items.slice(2) == ['c', 'd'], "slice to the end")
    removed = items.splice(1, 2, ['x'])
    assert_that(removed == ['b', 'c'], f"splice returns removed elements, got {removed}")
    assert_that(items == ['a', 'x', 'd'], f"replacement inserted in place, got {items}")
    items.splice(1)
    assert_that(items == ['a'], "splice without a length removes the tail")


@test("combinators on an indexed collection return lazy sequences over a snapshot")
def test_indexed_delegation():
    items = IndexedCollection([3, 1, 2])
    assert_that(isinstance(items, SequenceView), "collections are sequence views")
    ordered = items.order_by_asc()
    assert_that(isinstance(ordered, LazySequence), "results are sequences, not collections")
    items.push(0)
    assert_that(ordered.to.list() == [1, 2, 3], "the sequence was taken before the push")
    assert_that(items.map(lambda x: x * 2).to.list() == [6, 2, 4, 0], "map over current storage")
    assert_that(items.count() == 4 and items.count(lambda x: x > 1) == 2, "count")
    assert_that(items.sum() == 6 and items.max() == 3 and items.first() == 3, "terminals forward")
    assert_that(items.to.list() == [3, 1, 2, 0], "to accessor forwards")


@test("as_sequence is an independent copy of the storage")
def test_as_sequence_copies():
    items = IndexedCollection([1, 2])
    seq = items.as_sequence()
    items.push(3)
    assert_that(seq.to.list() == [1, 2], "later pushes do not leak into the sequence")
    assert_that(items.to_array() == [1, 2, 3] and items.to_array() is not items, "to_array copies")


@test("a sequence built over a collection hoists its storage")
def test_sequence_over_collection():
    items = IndexedCollection([1, 2, 3])
    assert_that(LazySequence(items).filter(lambda x: x > 1).to.list() == [2, 3], "collections are valid sources")
    round_trip = S(items).to_array()
    assert_that(round_trip == items and round_trip is not items, "round trip through a sequence")


# --- keyed collection ---

@test("keyed collection behaves like a dict")
def test_keyed_dict_protocol():
    table = KeyedCollection({'a': 1, 'b': 2})
    assert_that(len(table) == 2 and table['a'] == 1, "length and lookup")
    assert_that('a' in table and table.has('b') and not table.has('z'), "membership")
    table['c'] = 3
    del table['a']
    assert_that(table == {'b': 2, 'c': 3}, f"after set and delete got {table}")
    assert_that(table.get('z', 0) == 0, "get falls back to a default")
    with raises(KeyError):
        table['z']


@test("keyed collection accepts mappings, pairs and other collections")
def test_keyed_construction():
    from_pairs = KeyedCollection([('a', 1), Pair('b', 2)])
    assert_that(from_pairs == {'a': 1, 'b': 2}, f"pairs become entries, got {from_pairs}")
    copied = KeyedCollection(from_pairs)
    copied['c'] = 3
    assert_that('c' not in from_pairs, "copy does not share storage")
    assert_that(KeyedCollection() == {}, "empty by default")


@test("keyed collection iterates as pairs in insertion order")
def test_keyed_iteration():
    table = KeyedCollection({'x': 10, 'y': 20})
    assert_that(list(table) == [Pair('x', 10), Pair('y', 20)], "iteration yields pairs")
    assert_that(table.keys() == ['x', 'y'] and table.values() == [10, 20], "keys and values")
    assert_that(table.to_array() == [10, 20], "to_array keeps the values")
    assert_that(table.flip() == {10: 'x', 20: 'y'}, "flip swaps keys and values")


@test("combinators on a keyed collection see pairs")
def test_keyed_delegation():
    table = KeyedCollection({'a': 1, 'b': 2, 'c': 3})
    big = table.filter(lambda p: p.value > 1).map('key').to.list()
    assert_that(big == ['b', 'c'], f"unexpected keys {big}")
    assert_that(table.count() == 3 and table.count(lambda p: p.value > 2) == 1, "count")
    doubled = table.to_dictionary(None, lambda p: p.value * 2)
    assert_that(doubled == {'a': 2, 'b': 4, 'c': 6}, f"pairs keep their keys, got {doubled}")


if __name__ == "__main__":
    suite.run(title="lazyseq containers test suite")
