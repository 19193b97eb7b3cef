import suite
from dgen import from_schema
from lazyseq import S, LazySequence, from_range, generate

test = suite.test
assert_that = suite.assert_that

order_schema = {
    'order_id': {'_qen_provider': 'counter', 'start': 1000},
    'customer': 'name',
    'status': {'_qen_provider': 'choice', 'from': ['open', 'shipped', 'cancelled']},
    'total': ('pyfloat', {'min_value': 1, 'max_value': 500, 'right_digits': 2}),
    'currency': {'_qen_provider': 'literal', 'value': 'EUR'},
}


def counting_source(pulled, limit=None):
    """a factory whose generator records every element it hands out"""
    def factory():
        n = 0
        while limit is None or n < limit:
            pulled.append(n)
            yield n
            n += 1
    return factory


@test("a take over an unbounded source pulls only what it needs")
def test_take_pulls_little():
    pulled = []
    result = S(counting_source(pulled)).filter(lambda x: x % 2 == 0).take(3).to.list()
    assert_that(result == [0, 2, 4], f"unexpected result {result}")
    assert_that(len(pulled) < 10, f"pulled {len(pulled)} elements for three results")


@test("building a chain pulls nothing")
def test_chain_pulls_nothing():
    pulled = []
    chain = S(counting_source(pulled)).map(lambda x: x + 1).filter().skip(2).take(5)
    assert_that(pulled == [], "no element should be pulled before a terminal call")
    assert_that(chain.first() == 3, "first of the chain")
    assert_that(len(pulled) < 10, f"first() pulled {len(pulled)} elements")


@test("short-circuiting terminals stop pulling early")
def test_terminals_short_circuit():
    pulled = []
    seq = S(counting_source(pulled))
    assert_that(seq.some(lambda x: x > 4), "some over an unbounded source")
    assert_that(len(pulled) < 10, f"some pulled {len(pulled)} elements")
    del pulled[:]
    assert_that(not seq.every(lambda x: x < 3), "every over an unbounded source")
    assert_that(len(pulled) < 10, f"every pulled {len(pulled)} elements")
    del pulled[:]
    assert_that(seq.element_at(5) == 5 and len(pulled) < 10, "element_at stops at the index")


@test("take_while and zip stop on unbounded sources")
def test_take_while_zip_unbounded():
    pulled = []
    small = S(counting_source(pulled)).take_while(lambda x: x < 4).to.list()
    assert_that(small == [0, 1, 2, 3], f"unexpected result {small}")
    labelled = S(['a', 'b']).zip(S(counting_source([]))).to.list()
    assert_that(labelled == [('a', 0), ('b', 1)], f"unexpected zip {labelled}")


@test("every walk of a cursor-backed chain re-runs the source")
def test_rewalk_reruns_source():
    pulled = []
    chain = S(counting_source(pulled, limit=4)).map(lambda x: x * 10)
    assert_that(chain.to.list() == [0, 10, 20, 30], "first walk")
    assert_that(chain.to.list() == [0, 10, 20, 30], "second walk")
    assert_that(len(pulled) == 8, f"two walks should pull twice, pulled {len(pulled)}")


@test("materialize drains once and then replays from memory")
def test_materialize_replays():
    pulled = []
    seq = S(counting_source(pulled, limit=3)).materialize()
    seq.to.list()
    seq.to.list()
    assert_that(len(pulled) == 3, f"materialized sequences should not re-pull, pulled {len(pulled)}")


@test("generate calls its function once per pulled element")
def test_generate_on_demand():
    calls = []
    def tick():
        calls.append(1)
        return len(calls)
    first_three = generate(tick).take(3).to.list()
    assert_that(first_three == [1, 2, 3], f"unexpected values {first_three}")
    assert_that(len(calls) < 10, f"generate ran {len(calls)} times")


@test("an unbounded generated stream works with filter and take")
def test_generated_stream():
    orders = from_schema(order_schema, seed=7).stream()
    assert_that(isinstance(orders, LazySequence) and not orders.is_materialized, "stream is cursor-backed")
    open_orders = orders.filter(lambda o: o['status'] == 'open').take(5).to.list()
    assert_that(len(open_orders) == 5, "five open orders found")
    assert_that(all(o['status'] == 'open' and o['currency'] == 'EUR' for o in open_orders), "filtered records")
    ids = [o['order_id'] for o in open_orders]
    assert_that(ids == sorted(ids) and ids[0] >= 1000, f"counter ids ascend from the start value, got {ids}")


@test("a seeded stream replays the same records on every walk")
def test_seeded_stream_replays():
    totals = from_schema(order_schema, seed=11).stream().map('total').take(5)
    first_walk = totals.to.list()
    second_walk = totals.to.list()
    assert_that(first_walk == second_walk, "restarting reseeds the generator")
    other = from_schema(order_schema, seed=11).stream().map('total').take(5).to.list()
    assert_that(other == first_walk, "same seed, same records")


@test("ordering an unbounded prefix works after a take")
def test_order_after_take():
    values = from_range(0, 1000).map(lambda x: (x * 37) % 101).take(6).order_by_desc().to.list()
    assert_that(values == sorted(values, reverse=True) and len(values) == 6, f"unexpected order {values}")


if __name__ == "__main__":
    suite.run(title="lazyseq laziness test suite")
