"""
Tests for specification and result types.
"""
import pytest

from quarrel.core.spec import (CommandlineResults, ParamKind,
                               ParameterSpecification, ParsedParameter)


class TestParamKind:
    def test_from_name(self):
        assert ParamKind.from_name("int") == ParamKind.INT
        assert ParamKind.from_name("Boolean") == ParamKind.BOOLEAN
        assert ParamKind.from_name("none") == ParamKind.EMPTY
        assert ParamKind.from_name(ParamKind.LONG) == ParamKind.LONG

    def test_from_unknown_name(self):
        with pytest.raises(ValueError):
            ParamKind.from_name("decimal")

    def test_consumes_value(self):
        assert not ParamKind.EMPTY.consumes_value
        assert not ParamKind.HELP.consumes_value
        assert ParamKind.STRING.consumes_value
        assert ParamKind.DOUBLE.consumes_value


class TestParsedParameter:
    """Typed accessors and value semantics."""

    def test_accessors(self):
        assert ParsedParameter.of_int(3).int_val == 3
        assert ParsedParameter.of_long(2 ** 40).long_val == 2 ** 40
        assert ParsedParameter.of_float(1.5).float_val == 1.5
        assert ParsedParameter.of_double(2.5).double_val == 2.5
        assert ParsedParameter.of_string("x").str_val == "x"
        assert ParsedParameter.of_boolean(False).bool_val is False

    def test_wrong_accessor_is_type_error(self):
        with pytest.raises(TypeError):
            ParsedParameter.of_int(3).str_val
        with pytest.raises(TypeError):
            ParsedParameter.of_int(3).long_val
        with pytest.raises(TypeError):
            ParsedParameter.empty().bool_val

    def test_equality_includes_kind(self):
        assert ParsedParameter.of_int(3) == ParsedParameter.of_int(3)
        assert ParsedParameter.of_int(3) != ParsedParameter.of_long(3)
        assert ParsedParameter.of_boolean(True) != ParsedParameter.of_int(1)
        assert ParsedParameter.empty() == ParsedParameter.empty()
        assert len({ParsedParameter.of_string("a"), ParsedParameter.of_string("a")}) == 1

    def test_immutable(self):
        parsed = ParsedParameter.of_int(3)
        with pytest.raises(AttributeError):
            parsed.value = 4

    def test_nan_payloads_equal(self):
        a = ParsedParameter.of_double(float("nan"))
        b = ParsedParameter.of_double(float("nan"))
        assert a == b
        assert hash(a) == hash(b)
        assert a != ParsedParameter.of_float(float("nan"))
        assert a != ParsedParameter.of_double(1.0)

    def test_repr(self):
        assert repr(ParsedParameter.of_string("a")) == "ParsedParameter(string='a')"
        assert repr(ParsedParameter.empty()) == "ParsedParameter(empty)"


class TestParameterSpecification:
    def test_defaults(self):
        spec = ParameterSpecification(["-s", "--silent"])
        assert spec.names == ("-s", "--silent")
        assert spec.canonical == "-s"
        assert spec.consumes == ParamKind.EMPTY
        assert spec.custom_validator is None
        assert spec.help_text == ""

    def test_single_name_string(self):
        assert ParameterSpecification("-v").names == ("-v",)

    def test_consumes_by_name(self):
        assert ParameterSpecification(["-i"], "int").consumes == ParamKind.INT

    def test_needs_names(self):
        with pytest.raises(ValueError):
            ParameterSpecification([])

    def test_rejects_non_string_names(self):
        with pytest.raises(ValueError):
            ParameterSpecification(["-a", 3])

    def test_rejects_non_callable_validator(self):
        with pytest.raises(ValueError):
            ParameterSpecification(["-a"], ParamKind.INT, custom_validator="nope")

    def test_immutable(self):
        spec = ParameterSpecification(["-a"])
        with pytest.raises(AttributeError):
            spec.help_text = "changed"

    def test_names_copied(self):
        names = ["-a"]
        spec = ParameterSpecification(names)
        names.append("-b")
        assert spec.names == ("-a",)


class TestCommandlineResults:
    def test_equality(self):
        a = CommandlineResults([ParsedParameter.of_string("x")], {"-v": ParsedParameter.empty()})
        b = CommandlineResults([ParsedParameter.of_string("x")], {"-v": ParsedParameter.empty()})
        assert a == b
        assert a != CommandlineResults([], {})
