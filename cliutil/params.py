# cliutil/params.py
"""
Script parameters passed as `name:value` tokens:

    python job.py total:500 interval:5m names:"a b"+c verbose

Every parameter is declared with an explicit ParamType; raw string values
(from the command line or a string default) are converted according to it.
"""
import enum
import sys
from dataclasses import dataclass
from typing import Any

from .errors import ParameterError
from .text import explode_string, str_to_bool
from .timefmt import format_time, parse_time_sec
from .utils import vprint

ARRAY_DELIMITER = "+"


class ParamType(enum.Enum):
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    TIME_SEC = "time in seconds"  # #s/m/h/d/w


@dataclass(frozen=True)
class Parameter:
    name: str
    alias: str
    default: Any
    type: ParamType
    description: str = ""

    def convert(self, raw):
        if raw is None:
            raw = self.default
            if not isinstance(raw, str):
                # typed default, used as is
                return raw
        if self.type is ParamType.INTEGER:
            try:
                return int(raw.strip())
            except ValueError:
                raise ParameterError(f"Parameter '{self.name}' expects an integer, got {raw!r}") from None
        if self.type is ParamType.STRING:
            return raw
        if self.type is ParamType.BOOLEAN:
            # bare `name` on the command line means true
            return True if raw == "" else str_to_bool(raw)
        if self.type is ParamType.ARRAY:
            return explode_string(raw, ARRAY_DELIMITER) if raw else []
        if self.type is ParamType.TIME_SEC:
            return parse_time_sec(raw)
        raise ParameterError(f"Wrong parameter type for '{self.name}': {self.type!r}")

    def default_text(self):
        d = self.default
        if self.type is ParamType.STRING:
            return f'"{"" if d is None else d}"'
        if self.type is ParamType.BOOLEAN:
            return "true" if self.convert(None) else "false"
        if self.type is ParamType.ARRAY and isinstance(d, (list, tuple)):
            return ARRAY_DELIMITER.join(str(v) for v in d)
        if self.type is ParamType.TIME_SEC and d is not None:
            return f"{d} ({format_time(self.convert(None))})"
        return str(d)


def read_arguments(argv):
    """['name:value', 'flag'] -> {'name': 'value', 'flag': ''}; splits at the first colon."""
    args = {}
    for token in argv:
        name, _, value = token.partition(":")
        args[name] = value
    return args


class ParameterSet:
    def __init__(self):
        self._declared = {}
        self._values = {}
        self.read_done = False

    def declare(self, name, alias, default, param_type, description=""):
        if not isinstance(param_type, ParamType):
            raise ParameterError(f"Parameter '{name}' needs a ParamType, got {param_type!r}")
        self._declared[name] = Parameter(name, alias or "", default, param_type, description)
        # parameters need to be read again
        self.read_done = False

    @property
    def declared(self):
        return list(self._declared.values())

    def read(self, argv=None):
        if argv is None:
            argv = sys.argv[1:]
        args = read_arguments(argv)
        values = {}
        for name, p in self._declared.items():
            if name in args:
                raw = args.pop(name)
            elif p.alias and p.alias in args:
                raw = args.pop(p.alias)
            else:
                raw = None
            values[name] = p.convert(raw)
            if p.alias:
                values[p.alias] = values[name]
        if args:
            vprint("Ignoring undeclared arguments:", ", ".join(sorted(args)))
        self._values = values
        self.read_done = True
        return values

    def get(self, name):
        if not self.read_done:
            self.read()
        try:
            return self._values[name]
        except KeyError:
            raise ParameterError(f"Parameter '{name}' is not declared or read") from None

    def as_dict(self):
        if not self.read_done:
            self.read()
        return dict(self._values)
