"""Hypothesis strategies for property-based testing of bag resolution."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=20)
plain_values = st.one_of(
    st.none(),
    st.booleans(),
    integers,
    texts,
    st.lists(integers, max_size=5),
)

keys = st.text(
    alphabet=st.sampled_from('abcdefghijklmnopqrstuvwxyz0123456789_'),
    min_size=1,
    max_size=12,
)

# -----------------------------------------------------------------------------
# Bag plans
# -----------------------------------------------------------------------------
# Coroutines cannot be generated directly (they would be created and never
# awaited when hypothesis shrinks), so strategies produce plans that tests
# turn into real bags.

kinds = st.sampled_from(['raw', 'immediate', 'deferred', 'failing'])

bag_plans = st.dictionaries(keys, st.tuples(kinds, plain_values), max_size=12)
