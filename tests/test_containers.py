"""Tests for sequence and mapping membership assertions."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_assert import (
    FailureError,
    MisuseError,
    RecordingReporter,
    assert_map_contain,
    assert_map_contain_key,
    assert_map_contain_value,
    assert_map_not_contain,
    assert_map_not_contain_key,
    assert_map_not_contain_value,
    assert_slice_contain,
    assert_slice_not_contain,
)
from tests.strategies import integers


@dataclass
class User:
    name: str
    age: int


class TestSliceContain:
    """Tests for assert_slice_contain and assert_slice_not_contain."""

    def test_contains(self, t: RecordingReporter) -> None:
        assert_slice_contain(t, [1, 1, 2, 3, 5, 8, 13], 8)
        assert_slice_contain(t, (1, 2), 2)
        assert_slice_contain(t, [[1], [2]], [2])
        assert_slice_contain(t, [User('ann', 3)], User('ann', 3))
        assert len(t) == 0

    def test_missing_element(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_slice_contain(t, [1, 1, 2, 3, 5, 8, 13], 12)
        assert t.messages == ['assert_slice_contain failed, slice = [1, 1, 2, 3, 5, 8, 13], elem = 12']

    def test_element_type_matters(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_slice_contain(t, [1, 2], 2.0)
        assert_slice_not_contain(t, [1, 2], 2.0)

    def test_not_contain(self, t: RecordingReporter) -> None:
        assert_slice_not_contain(t, [1, 2, 8, 9], 12)
        with pytest.raises(FailureError):
            assert_slice_not_contain(t, [1, 2, 8, 9], 8, 'ids')
        assert t.messages == ['assert_slice_not_contain failed, slice = [1, 2, 8, 9], elem = 8, ids']

    def test_empty_sequence(self, t: RecordingReporter) -> None:
        assert_slice_not_contain(t, [], None)
        with pytest.raises(FailureError):
            assert_slice_contain(t, [], None)

    @pytest.mark.parametrize('bad', ['abc', {1: 2}, {1, 2}, 5, None])
    def test_non_sequence_is_misuse(self, t: RecordingReporter, bad: object) -> None:
        with pytest.raises(MisuseError, match='assert_slice_contain called with non-sequence'):
            assert_slice_contain(t, bad, 1)
        with pytest.raises(MisuseError):
            assert_slice_not_contain(t, bad, 1)
        assert len(t) == 0

    @given(st.lists(integers), integers)
    def test_contain_and_not_contain_are_exclusive(self, seq: list[int], elem: int) -> None:
        t = RecordingReporter()
        if elem in seq:
            assert_slice_contain(t, seq, elem)
            with pytest.raises(FailureError):
                assert_slice_not_contain(t, seq, elem)
        else:
            assert_slice_not_contain(t, seq, elem)
            with pytest.raises(FailureError):
                assert_slice_contain(t, seq, elem)
        assert len(t) == 1


class TestMapContain:
    """Tests for assert_map_contain and assert_map_not_contain."""

    def test_key_with_value(self, t: RecordingReporter) -> None:
        m = {'a': [1, 2], 'b': 3}
        assert_map_contain(t, m, 'a', [1, 2])
        assert_map_contain(t, OrderedDict(m), 'b', 3)
        assert len(t) == 0

    def test_key_with_other_value(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_map_contain(t, {'a': 1}, 'a', 2)
        assert t.messages == ["assert_map_contain failed, map = {'a': 1}, key = 'a', elem = 2"]

    def test_missing_key(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_map_contain(t, {'a': 1}, 'b', 1)

    def test_value_under_other_key_does_not_count(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_map_contain(t, {'a': 1, 'b': 2}, 'a', 2)

    def test_not_contain(self, t: RecordingReporter) -> None:
        assert_map_not_contain(t, {'a': 1}, 'a', 2)
        assert_map_not_contain(t, {'a': 1}, 'b', 1)
        with pytest.raises(FailureError):
            assert_map_not_contain(t, {'a': 1}, 'a', 1)
        assert t.messages == ["assert_map_not_contain failed, map = {'a': 1}, key = 'a', elem = 1"]

    def test_keys_compare_by_type(self, t: RecordingReporter) -> None:
        with pytest.raises(FailureError):
            assert_map_contain(t, {1: 'x'}, 1.0, 'x')
        with pytest.raises(FailureError):
            assert_map_contain(t, {1: 'x'}, True, 'x')

    @pytest.mark.parametrize('bad', [[('a', 1)], 'a', None])
    def test_non_mapping_is_misuse(self, t: RecordingReporter, bad: object) -> None:
        with pytest.raises(MisuseError, match='non-mapping'):
            assert_map_contain(t, bad, 'a', 1)
        with pytest.raises(MisuseError):
            assert_map_not_contain(t, bad, 'a', 1)


class TestMapKeysAndValues:
    """Tests for the key-only and value-only mapping assertions."""

    def test_contain_key(self, t: RecordingReporter) -> None:
        assert_map_contain_key(t, {'a': None}, 'a')
        assert_map_not_contain_key(t, {'a': None}, 'b')
        with pytest.raises(FailureError):
            assert_map_contain_key(t, {'a': None}, 'b')
        with pytest.raises(FailureError):
            assert_map_not_contain_key(t, {'a': None}, 'a')
        assert t.messages == [
            "assert_map_contain_key failed, map = {'a': None}, key = 'b'",
            "assert_map_not_contain_key failed, map = {'a': None}, key = 'a'",
        ]

    def test_tuple_keys(self, t: RecordingReporter) -> None:
        assert_map_contain_key(t, {(1, 2): 'p'}, (1, 2))
        assert_map_not_contain_key(t, {(1, 2): 'p'}, (2, 1))

    def test_contain_value(self, t: RecordingReporter) -> None:
        m = {'x': User('ann', 3), 'y': User('bob', 4)}
        assert_map_contain_value(t, m, User('bob', 4))
        assert_map_not_contain_value(t, m, User('bob', 5))
        with pytest.raises(FailureError):
            assert_map_contain_value(t, {'a': 1}, 2)
        with pytest.raises(FailureError):
            assert_map_not_contain_value(t, {'a': 1}, 1)
        assert t.messages == [
            "assert_map_contain_value failed, map = {'a': 1}, elem = 2",
            "assert_map_not_contain_value failed, map = {'a': 1}, elem = 1",
        ]

    def test_non_mapping_is_misuse(self, t: RecordingReporter) -> None:
        for check in (assert_map_contain_key, assert_map_not_contain_key):
            with pytest.raises(MisuseError):
                check(t, ['a'], 'a')
        for check in (assert_map_contain_value, assert_map_not_contain_value):
            with pytest.raises(MisuseError):
                check(t, ['a'], 'a')
        assert len(t) == 0
