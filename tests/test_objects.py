"""Tests for type relationship predicates."""

import sys
from collections import OrderedDict

import pytest

from varcheck.errors import PredicateArgumentError
from varcheck.objects import is_instance_of, is_subclass_of, loaded_type, resolve_type, target_type


class TestResolveType:
    def test_builtin_and_dotted_names(self):
        assert resolve_type("dict") is dict
        assert resolve_type("collections.OrderedDict") is OrderedDict

    def test_unresolvable_names(self):
        assert resolve_type("no.such.Type") is None
        assert resolve_type("os.path.join") is None
        assert resolve_type("") is None

    def test_target_type_normalisation(self):
        assert target_type(dict) is dict
        assert target_type({}) is dict
        assert target_type("collections.OrderedDict") is OrderedDict

    @pytest.mark.parametrize("cls", [None, ""])
    def test_invalid_targets_raise(self, cls):
        with pytest.raises(PredicateArgumentError):
            target_type(cls)


class TestLoadedType:
    def test_builtin_and_loaded_names(self):
        assert loaded_type("dict") is dict
        assert loaded_type("collections.OrderedDict") is OrderedDict

    def test_unloaded_modules_are_not_imported(self, monkeypatch):
        monkeypatch.delitem(sys.modules, "this", raising=False)
        assert loaded_type("this") is None
        assert loaded_type("this.Anything") is None
        assert "this" not in sys.modules

    def test_non_type_names(self):
        assert loaded_type("len") is None
        assert loaded_type("") is None
        assert loaded_type("collections.") is None


class TestIsInstanceOf:
    def test_instances(self):
        assert is_instance_of(OrderedDict(), dict)
        assert is_instance_of({}, dict)
        assert is_instance_of([], [1])
        assert is_instance_of(OrderedDict(), "collections.OrderedDict")
        assert not is_instance_of({}, OrderedDict)

    def test_unknown_target_never_matches(self):
        assert not is_instance_of(object(), "no.such.Type")

    def test_type_names_as_values(self):
        assert is_instance_of("collections.OrderedDict", dict)
        assert not is_instance_of("collections.OrderedDict", dict, allow_string=False)

    def test_examined_strings_never_import(self, monkeypatch):
        monkeypatch.delitem(sys.modules, "this", raising=False)
        assert is_instance_of("this", str)
        assert not is_subclass_of("this", str)
        assert "this" not in sys.modules

    def test_plain_strings_are_strings(self):
        assert is_instance_of("Hello", str)
        assert is_instance_of("Hello", str, allow_string=False)

    def test_invalid_flag_raises(self):
        with pytest.raises(PredicateArgumentError):
            is_instance_of({}, dict, allow_string="no")


class TestIsSubclassOf:
    def test_strict_subclass(self):
        assert is_subclass_of(OrderedDict(), dict)
        assert not is_subclass_of({}, dict)

    def test_class_values(self):
        assert is_subclass_of(OrderedDict, dict)
        assert not is_subclass_of(dict, dict)
        assert is_subclass_of(bool, "int")

    def test_type_names_as_values(self):
        assert is_subclass_of("collections.OrderedDict", "dict")
        assert not is_subclass_of("collections.OrderedDict", dict, allow_string=False)

    def test_unknown_target_never_matches(self):
        assert not is_subclass_of(OrderedDict(), "no.such.Type")
