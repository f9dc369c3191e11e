"""Tests for the all-members predicate family."""

import functools
from collections import OrderedDict

import numpy as np
import pytest

import varcheck
from varcheck.errors import PredicateArgumentError
from varcheck.members import (
    all_contain,
    all_match,
    each,
    has_bools_only,
    has_instances_of_only,
    has_integers_only,
    has_ints_only,
    has_no_empty_values,
    has_real_numbers_only,
    has_resources_only,
    has_strict_arrays_only,
    has_subclasses_of_only,
)

DATE = r"^\d{4}-\d{2}-\d{2}$"

MEMBER_PREDICATES = [
    getattr(varcheck, name)
    for name in varcheck.__all__
    if name.startswith("has_") and name.endswith("_only")
    and name not in ("has_instances_of_only", "has_subclasses_of_only")
] + [
    varcheck.has_no_empty_values,
    functools.partial(all_contain, needle="x"),
    functools.partial(all_match, pattern=DATE),
    functools.partial(has_instances_of_only, cls=dict),
    functools.partial(has_subclasses_of_only, cls=dict),
]


class Recorder:
    """Stringable that records whether it was converted."""

    def __init__(self):
        self.converted = False

    def __str__(self):
        self.converted = True
        return "2024-03-03"


class TestFamilyProperties:
    @pytest.mark.parametrize("predicate", MEMBER_PREDICATES)
    @pytest.mark.parametrize("empty", [[], (), {}, set(), iter([])])
    def test_empty_containers_are_vacuously_true(self, predicate, empty):
        assert predicate(empty) is True

    @pytest.mark.parametrize("predicate", MEMBER_PREDICATES)
    @pytest.mark.parametrize("value", [5, None, "abc", 1.5, object()])
    def test_non_traversables_fail(self, predicate, value):
        assert predicate(value) is False

    def test_generated_names(self):
        assert has_bools_only.__name__ == "has_bools_only"
        assert "is_bool" in has_bools_only.__doc__

    def test_each_builds_predicates(self):
        has_evens_only = each(lambda member: member % 2 == 0, "has_evens_only")
        assert has_evens_only([2, 4])
        assert not has_evens_only([2, 3])


class TestAllMatch:
    def test_dates(self):
        assert all_match(["2024-01-01", "2024-02-02"], DATE) is True

    def test_short_circuits_after_failure(self):
        recorder = Recorder()
        assert all_match(["2024-01-01", "bad", recorder], DATE) is False
        assert recorder.converted is False

    def test_reaches_later_members_when_passing(self):
        recorder = Recorder()
        assert all_match(["2024-01-01", recorder], DATE) is True
        assert recorder.converted is True

    def test_delimited_patterns_are_literal(self):
        """Test that PCRE-style delimiters are part of the pattern text."""
        assert all_match(["2024-01-01"], "/^\\d{4}-\\d{2}-\\d{2}$/") is False
        assert all_match(["/2024-01-01/"], "^/\\d{4}-\\d{2}-\\d{2}/$") is True

    def test_invalid_pattern_raises_before_iteration(self):
        with pytest.raises(PredicateArgumentError):
            all_match([], "(")


class TestAllContain:
    def test_case_handling(self):
        assert all_contain(["Hello", "shell"], "ELL")
        assert not all_contain(["Hello", "shell"], "ELL", case_sensitive=True)

    def test_invalid_needle_raises_on_empty_container(self):
        with pytest.raises(PredicateArgumentError):
            all_contain([], "")


class TestNumericMembers:
    def test_integers(self):
        assert has_integers_only(["1", 2, np.int8(3)])
        assert not has_integers_only(["1", 2.0])

    def test_options_are_forwarded(self, degraded_settings, notices):
        assert not has_integers_only(["1", str(2 ** 80)], settings=degraded_settings)
        assert len(notices) == 1

    def test_ints_are_not_coerced(self):
        assert has_ints_only([1, 2])
        assert not has_ints_only([1, "2"])
        assert has_ints_only(x for x in range(3))

    def test_real_numbers(self):
        assert has_real_numbers_only([1, "2.5", 3.0])
        assert not has_real_numbers_only([1, float("nan")])

    def test_invalid_scale_raises(self):
        with pytest.raises(PredicateArgumentError):
            has_real_numbers_only([], scale=-1)


class TestContainerMembers:
    def test_no_empty_values(self):
        assert has_no_empty_values([1, "a", [0], np.array([0])])
        assert has_no_empty_values({"a": 1})
        assert not has_no_empty_values([1, ""])
        assert not has_no_empty_values([None])
        assert not has_no_empty_values([0])
        assert not has_no_empty_values([np.array([])])

    def test_strict_arrays(self):
        assert has_strict_arrays_only([[1], (2,), {0: 1}, np.zeros(2)])
        assert not has_strict_arrays_only([[1], {1: 1}])

    def test_resources(self, tmp_path):
        with open(tmp_path / "a.txt", "w", encoding="utf-8") as handle:
            assert has_resources_only([handle])
        assert not has_resources_only([handle])


class TestTypeMembers:
    def test_instances(self):
        assert has_instances_of_only([OrderedDict(), {}], dict)
        assert not has_instances_of_only([OrderedDict(), []], dict)
        assert has_instances_of_only([OrderedDict()], "collections.OrderedDict")

    def test_unknown_type_name(self):
        assert not has_instances_of_only([{}], "no.such.Type")
        assert has_instances_of_only([], "no.such.Type")

    def test_subclasses(self):
        assert has_subclasses_of_only([OrderedDict, OrderedDict()], dict)
        assert not has_subclasses_of_only([OrderedDict, dict], dict)

    def test_invalid_flag_raises(self):
        with pytest.raises(PredicateArgumentError):
            has_instances_of_only([], dict, allow_string=1)
