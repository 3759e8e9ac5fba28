# mdcompile/extract/directive.py
"""
Parsing of the annotation comment that configures the fenced block below it:

    <!-- MdCompile: assembly=samples, import=System.Linq, wrapInClass -->
    ```csharp
    ...
    ```

Options are declared in OPTION_TABLE rather than discovered from the
BlockConfig fields, so the accepted spelling of every option lives here.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional

from ..errors import DirectiveSyntaxError
from ..models import BlockConfig

DIRECTIVE_PREFIX = "<!-- MdCompile:"
DIRECTIVE_SUFFIX = "-->"

FLAG = "flag"
STRING = "string"
LIST = "list"


@dataclass(frozen=True)
class _Option:
    field: str
    kind: str


# Keys are lower-cased; option names are matched case-insensitively.
OPTION_TABLE: Dict[str, _Option] = {
    "compile": _Option("compile", FLAG),
    "assembly": _Option("group_id", STRING),
    "import": _Option("imports", LIST),
    "wrapinnamespace": _Option("wrap_in_namespace", FLAG),
    "wrapinclass": _Option("wrap_in_class", FLAG),
    "prefix": _Option("prefix", STRING),
    "suffix": _Option("suffix", STRING),
}

_TRUE = {"true", "yes", "on", "1", "+"}
_FALSE = {"false", "no", "off", "0", "-"}

# name, name+, name-, name=value, name:value
_TOKEN_RE = re.compile(r"^(?P<name>[A-Za-z_]\w*)\s*(?:(?P<sign>[+-])|[=:](?P<value>.*))?$", re.DOTALL)


def extract_directive_body(line: str) -> Optional[str]:
    """
    Return the text between the directive markers, or None when `line` is not
    a directive. Both markers are compared case-insensitively after trimming.
    """
    trimmed = line.strip()
    lowered = trimmed.lower()
    if not lowered.startswith(DIRECTIVE_PREFIX.lower()):
        return None
    if not lowered.endswith(DIRECTIVE_SUFFIX):
        return None
    return trimmed[len(DIRECTIVE_PREFIX):len(trimmed) - len(DIRECTIVE_SUFFIX)].strip()


def parse_directive_body(body: str, *, line: Optional[str] = None) -> BlockConfig:
    """
    Parse a comma separated option list into a fresh BlockConfig.

    Raises DirectiveSyntaxError for unknown options, missing values, bad
    booleans and repeated single-valued options.
    """
    source_line = line if line is not None else body
    config = BlockConfig()
    seen = set()

    for raw_token in body.split(","):
        token = raw_token.strip()
        if not token:
            continue

        m = _TOKEN_RE.match(token)
        if not m:
            raise DirectiveSyntaxError(f"malformed option '{token}'", source_line)

        name = m.group("name")
        option = OPTION_TABLE.get(name.lower())
        if option is None:
            raise DirectiveSyntaxError(f"unknown option '{name}'", source_line)

        sign = m.group("sign")
        value = m.group("value")
        if value is not None:
            value = value.strip()

        if option.kind != LIST:
            if option.field in seen:
                raise DirectiveSyntaxError(f"option '{name}' given more than once", source_line)
            seen.add(option.field)

        if option.kind == FLAG:
            setattr(config, option.field, _parse_flag(name, sign, value, source_line))
            continue

        if sign is not None or not value:
            raise DirectiveSyntaxError(f"option '{name}' requires a value", source_line)

        if option.kind == LIST:
            getattr(config, option.field).append(value)
        else:
            setattr(config, option.field, value)

    return config


def parse_directive_line(line: str) -> Optional[BlockConfig]:
    """
    Parse a candidate annotation line. Returns None when the line carries no
    directive so the caller can fall back to defaults.
    """
    body = extract_directive_body(line)
    if body is None:
        return None
    return parse_directive_body(body, line=line)


def _parse_flag(name: str, sign: Optional[str], value: Optional[str], line: str) -> bool:
    if sign is not None:
        return sign == "+"
    if value is None:
        return True
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise DirectiveSyntaxError(f"option '{name}' expects a boolean, got '{value}'", line)
