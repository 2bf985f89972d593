"""Hypothesis strategies for property-based testing of railway-result types."""

from hypothesis import strategies as st

from railway_result import Failure, Success

# Payloads
payloads = st.one_of(st.integers(), st.text(max_size=20), st.none(), st.booleans())
errors = st.one_of(st.text(max_size=20), st.integers())

# Results
successes = st.builds(Success, payloads)
failures = st.builds(Failure, errors)
results = st.one_of(successes, failures)

# Int-valued results, for transforms doing arithmetic
int_results = st.one_of(st.builds(Success, st.integers()), failures)

# Result-returning transforms over ints
int_to_results = st.sampled_from(
    [
        lambda x: Success(x + 1),
        lambda x: Success(x * 2),
        lambda x: Failure(f'rejected {x}'),
        lambda x: Success(x) if x % 2 == 0 else Failure('odd'),
    ]
)
