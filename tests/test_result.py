"""Tests for the Result type (Success and Failure) and its combinators."""

import pytest

from railway_result import (
    Failure,
    NotAResultError,
    Success,
    failure,
    flat_map,
    flat_map_error,
    is_failure,
    is_result,
    is_success,
    map,
    map_error,
    success,
    unwrap,
)


class Recorder:
    """Transform that records whether it was called."""

    def __init__(self, returns=None):
        self.calls = []
        self.returns = returns

    def __call__(self, value):
        self.calls.append(value)
        return self.returns


class TestConstructors:
    """Tests for success() and failure()."""

    def test_success_wraps_value(self):
        """success() builds a Success carrying the value."""
        assert success(42) == Success(42)
        assert success(42).value == 42

    def test_failure_wraps_value(self):
        """failure() builds a Failure carrying the payload."""
        assert failure('boom') == Failure('boom')
        assert failure('boom').error == 'boom'

    def test_none_is_accepted(self):
        """None is a valid payload on both sides."""
        assert success(None).value is None
        assert failure(None).error is None

    def test_exception_payload_is_kept(self):
        """Failure payloads can be exception instances, kept by identity."""
        exc = ValueError('bad')
        assert failure(exc).error is exc

    def test_tags(self):
        """Each variant carries a tag identifying it."""
        assert success(1).tag == 'success'
        assert failure(1).tag == 'failure'
        assert Success.tag == 'success'
        assert Failure.tag == 'failure'

    def test_tag_is_not_a_field(self):
        """The tag is a class attribute, not part of the payload."""
        assert repr(Success(1)) == 'Success(value=1)'
        assert repr(Failure('e')) == "Failure(error='e')"


class TestImmutabilityAndEquality:
    """Tests for frozen variants, equality and hashing."""

    def test_success_is_frozen(self):
        """Success instances are immutable."""
        ok = Success(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_failure_is_frozen(self):
        """Failure instances are immutable."""
        err = Failure('error')
        with pytest.raises(AttributeError):
            err.error = 'other'  # type: ignore[misc]

    def test_equality_by_payload(self):
        """Variants compare by payload."""
        assert Success(1) == Success(1)
        assert Success(1) != Success(2)
        assert Failure('e') == Failure('e')
        assert Failure('e') != Failure('f')

    def test_success_never_equals_failure(self):
        """A Success never equals a Failure with the same payload."""
        assert Success(42) != Failure(42)

    def test_hashable(self):
        """Variants with hashable payloads are hashable."""
        assert hash(Success(1)) == hash(Success(1))
        assert {Failure('e'): 'value'}[Failure('e')] == 'value'


class TestGuards:
    """Tests for is_result, is_success and is_failure."""

    def test_is_success(self):
        assert is_success(Success(1)) is True
        assert is_success(Failure(1)) is False

    def test_is_failure(self):
        assert is_failure(Failure(1)) is True
        assert is_failure(Success(1)) is False

    def test_is_result(self):
        assert is_result(Success(1))
        assert is_result(Failure(1))
        assert not is_result(1)
        assert not is_result({'tag': 'success', 'success': 1})


class TestFlatMap:
    """Tests for flat_map."""

    def test_success_returns_transform_result(self):
        """On Success, the transform's Result is returned verbatim."""
        assert flat_map(lambda x: Success(x + 1), Success(1)) == Success(2)
        assert flat_map(lambda x: Failure(f'bad {x}'), Success(1)) == Failure('bad 1')

    def test_failure_short_circuits(self):
        """On Failure, the input comes back and transform is never called."""
        transform = Recorder(returns=Success('never'))
        err = Failure('original')
        assert flat_map(transform, err) is err
        assert transform.calls == []

    def test_curried(self):
        """Omitting the Result returns a unary function."""
        step = flat_map(lambda x: Success(x * 2))
        assert callable(step)
        assert step(Success(21)) == Success(42)
        assert step(Failure('e')) == Failure('e')

    def test_transform_exception_propagates(self):
        """Exceptions from the transform are not caught."""

        def boom(_):
            raise RuntimeError('transform bug')

        with pytest.raises(RuntimeError, match='transform bug'):
            flat_map(boom, Success(1))

    def test_not_a_result_raises(self):
        """A non-Result input is a caller bug."""
        with pytest.raises(NotAResultError, match='flat_map'):
            flat_map(lambda x: Success(x), 42)

    def test_none_result_is_not_curried(self):
        """None is an explicit argument, not the curried marker."""
        with pytest.raises(TypeError):
            flat_map(lambda x: Success(x), None)


class TestFlatMapError:
    """Tests for flat_map_error."""

    def test_failure_returns_transform_result(self):
        """On Failure, the transform's Result is returned verbatim."""
        assert flat_map_error(lambda e: Failure(f'{e}!'), Failure('e')) == Failure('e!')

    def test_failure_can_recover(self):
        """A transform can turn a Failure into a Success."""
        assert flat_map_error(lambda e: Success(0), Failure('e')) == Success(0)

    def test_success_short_circuits(self):
        """On Success, the input comes back and transform is never called."""
        transform = Recorder(returns=Failure('never'))
        ok = Success(1)
        assert flat_map_error(transform, ok) is ok
        assert transform.calls == []

    def test_curried(self):
        step = flat_map_error(lambda e: Failure(e.upper()))
        assert step(Failure('e')) == Failure('E')
        assert step(Success(1)) == Success(1)


class TestMap:
    """Tests for map."""

    def test_success_transformed(self):
        assert map(str, Success(5)) == Success('5')

    def test_failure_untouched(self):
        transform = Recorder()
        assert map(transform, Failure('e')) == Failure('e')
        assert transform.calls == []

    def test_map_to_none_stays_success(self):
        """A transform returning None still yields a Success."""
        assert map(lambda _: None, Success(1)) == Success(None)

    def test_map_never_flattens(self):
        """A Result returned by the transform becomes the payload."""
        assert map(lambda x: Success(x), Success(1)) == Success(Success(1))

    def test_curried(self):
        step = map(lambda value: f'ok {value}')
        assert step(Success(1)) == Success('ok 1')
        assert step(Failure('fail')) == Failure('fail')


class TestMapError:
    """Tests for map_error."""

    def test_failure_transformed(self):
        assert map_error(lambda e: f'err {e}', Failure('fail')) == Failure('err fail')

    def test_success_untouched(self):
        transform = Recorder()
        assert map_error(transform, Success(1)) == Success(1)
        assert transform.calls == []

    def test_wraps_exception(self):
        """The classic use: wrap an error payload in a richer type."""

        class DatedError(Exception):
            pass

        result = map_error(lambda e: DatedError(str(e)), Failure(ValueError('bad')))
        assert isinstance(result.error, DatedError)
        assert str(result.error) == 'bad'

    def test_curried(self):
        step = map_error(str.upper)
        assert step(Failure('boom')) == Failure('BOOM')


class TestUnwrap:
    """Tests for unwrap."""

    def test_plain_extraction(self):
        """Without projections, unwrap returns the raw payload."""
        assert unwrap()(Success(1)) == 1
        assert unwrap()(Failure('x')) == 'x'

    def test_failure_projection(self):
        assert unwrap(failure=lambda e: f'err:{e}')(Failure('x')) == 'err:x'

    def test_failure_projection_leaves_success(self):
        assert unwrap(failure=lambda e: f'err:{e}')(Success(1)) == 1

    def test_success_projection(self):
        assert unwrap(success=lambda v: v + 1)(Success(1)) == 2

    def test_success_projection_leaves_failure(self):
        assert unwrap(success=lambda v: v + 1)(Failure('x')) == 'x'

    def test_both_projections(self):
        collapse = unwrap(success=lambda v: f'op is {v}', failure=lambda e: f'{e} is nan')
        assert collapse(Success('<')) == 'op is <'
        assert collapse(Failure('x')) == 'x is nan'

    def test_projection_returning_none_falls_back(self):
        """A projection returning None yields the raw payload instead."""
        assert unwrap(success=lambda _: None)(Success(1)) == 1
        assert unwrap(failure=lambda _: None)(Failure('x')) == 'x'

    def test_falsy_projection_is_kept(self):
        """Only None falls back; other falsy projections are returned."""
        assert unwrap(success=lambda _: 0)(Success(1)) == 0
        assert unwrap(failure=lambda _: '')(Failure('x')) == ''

    def test_not_a_result_raises(self):
        with pytest.raises(NotAResultError, match='unwrap'):
            unwrap()('plain')


class TestPipelines:
    """Tests composing curried combinators."""

    def test_left_to_right_pipeline(self):
        steps = [
            map(lambda x: x + 1),
            flat_map(lambda x: Success(x * 10) if x > 0 else Failure('not positive')),
            map_error(lambda e: f'validation: {e}'),
        ]

        def run(result):
            for step in steps:
                result = step(result)
            return result

        assert run(Success(1)) == Success(20)
        assert run(Success(-5)) == Failure('validation: not positive')
        assert run(Failure('upstream')) == Failure('validation: upstream')
