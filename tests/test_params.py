import pytest

from cliutil.errors import ParameterError
from cliutil.params import Parameter, ParameterSet, ParamType, read_arguments


def test_read_arguments_splits_at_first_colon():
    assert read_arguments(["total:5", "name:a:b", "flag"]) == {"total": "5", "name": "a:b", "flag": ""}


@pytest.fixture
def params():
    ps = ParameterSet()
    ps.declare("total", "t", 10, ParamType.INTEGER, "Items")
    ps.declare("verbose", "vb", False, ParamType.BOOLEAN)
    ps.declare("names", "n", "", ParamType.ARRAY)
    ps.declare("interval", "i", "5m", ParamType.TIME_SEC)
    ps.declare("title", "", "Job", ParamType.STRING)
    return ps


def test_defaults(params):
    values = params.read([])
    assert values["total"] == 10
    assert values["verbose"] is False
    assert values["names"] == []
    assert values["interval"] == 300
    assert values["title"] == "Job"


def test_name_and_alias_both_resolve(params):
    params.read(["t:7", "interval:2h"])
    assert params.get("total") == 7
    assert params.get("t") == 7
    assert params.get("i") == 7200


def test_name_wins_over_alias(params):
    params.read(["t:1", "total:2"])
    assert params.get("total") == 2


def test_boolean_values(params):
    params.read(["verbose"])
    assert params.get("verbose") is True
    params.read(["vb:no"])
    assert params.get("verbose") is False


def test_array_values_keep_quoted_delimiters(params):
    params.read(["names:a+'b+c'+d"])
    assert params.get("names") == ["a", "b+c", "d"]


def test_string_default_is_converted():
    ps = ParameterSet()
    ps.declare("report", "r", "100", ParamType.INTEGER)
    assert ps.read([])["report"] == 100


def test_malformed_integer(params):
    with pytest.raises(ParameterError):
        params.read(["total:many"])


def test_malformed_time(params):
    with pytest.raises(ParameterError):
        params.read(["interval:5y"])


def test_undeclared_parameter(params):
    params.read(["other:1"])
    with pytest.raises(ParameterError):
        params.get("other")


def test_declare_needs_param_type():
    with pytest.raises(ParameterError):
        ParameterSet().declare("x", "", 1, "integer")


def test_declare_after_read_forces_reread(params):
    params.read([])
    assert params.read_done
    params.declare("extra", "x", 3, ParamType.INTEGER)
    assert not params.read_done
    params.read([])
    assert params.as_dict()["x"] == 3


def test_default_text():
    assert Parameter("s", "", "abc", ParamType.STRING).default_text() == '"abc"'
    assert Parameter("b", "", False, ParamType.BOOLEAN).default_text() == "false"
    assert Parameter("a", "", ["x", "y"], ParamType.ARRAY).default_text() == "x+y"
    assert Parameter("t", "", "5m", ParamType.TIME_SEC).default_text() == "5m (5 minutes 0 seconds)"
    assert Parameter("n", "", 10, ParamType.INTEGER).default_text() == "10"
