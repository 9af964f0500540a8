"""Hypothesis strategies for property-based testing of fallible types."""

import msgspec
from hypothesis import strategies as st

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()
floats = st.floats(allow_nan=False)

# Anything Some/Ok accept: every value except the two absence markers
present_values = st.one_of(
    integers,
    texts,
    booleans,
    floats,
    st.lists(integers, max_size=5),
    st.dictionaries(texts, integers, max_size=5),
)

# Absence markers rejected by Some/Ok
missing_values = st.sampled_from([None, msgspec.UNSET])

# Anything at all, for Err payloads and defaults
any_values = st.one_of(present_values, missing_values)

# Values that are never an Option or a Result
non_wrapped = st.one_of(present_values, missing_values, st.just(object()))
