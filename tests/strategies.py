"""Hypothesis strategies for property-based testing of klaw-assert."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Scalars
# -----------------------------------------------------------------------------

integers = st.integers()
floats = st.floats(allow_nan=False)
texts = st.text(min_size=0, max_size=50)
booleans = st.booleans()

scalars = st.one_of(
    st.none(),
    booleans,
    integers,
    floats,
    texts,
    st.binary(max_size=20),
)

# -----------------------------------------------------------------------------
# Nested values (no NaN, so every value equals itself)
# -----------------------------------------------------------------------------

values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.lists(children, max_size=5).map(tuple),
        st.dictionaries(st.one_of(integers, texts), children, max_size=5),
        st.frozensets(st.one_of(integers, texts), max_size=5),
    ),
    max_leaves=20,
)

# -----------------------------------------------------------------------------
# Integers that fit a given width, for cross-width numeric checks
# -----------------------------------------------------------------------------

int32s = st.integers(min_value=-(2**31), max_value=2**31 - 1)
exact_floats = st.integers(min_value=-(2**53), max_value=2**53)
