"""Expansion of compact CLC range notation (e.g. ``Z813/817``) into explicit codes."""

import re

# Bracket characters mark abandoned or historical codes; they carry no numeric meaning here.
_BRACKETS_RE = re.compile(r"[\[\]{}]")

# Tried in order, first match wins. Each captures (prefix, start, end, suffix).
_RANGE_FORMS: tuple[tuple[re.Pattern, str], ...] = (
    # X922.3/.7
    (re.compile(r"^(.+?)\.(\d+)/\.(\d+)(.*?)$"), "."),
    # T-013/-017
    (re.compile(r"^(.+?)-(\d+)/-(\d+)(.*?)$"), "-"),
    # Z813/817
    (re.compile(r"^(.+?)(\d+)/(\d+)(.*?)$"), ""),
)


def expand_code_range(code: str) -> list[str]:
    """
    Expand one taxonomy code into the explicit codes it denotes.

    At most one numeric range is expanded. Codes without a range come back unchanged
    (minus brackets). Numbers are written as plain integers, so leading zeros of the
    written bounds are not kept. A range whose end is below its start expands to nothing.

    Examples:
        >>> expand_code_range("X922.3/.5")
        ['X922.3', 'X922.4', 'X922.5']
        >>> expand_code_range("T-013/-015")
        ['T-13', 'T-14', 'T-15']
        >>> expand_code_range("[TP312]")
        ['TP312']

    Args:
        code: Code string as written in the taxonomy

    Returns:
        Expanded codes in ascending order
    """
    code = _BRACKETS_RE.sub("", code)

    for regex, separator in _RANGE_FORMS:
        m = regex.match(code)
        if m is None:
            continue
        prefix, start, end, suffix = m.groups()
        return [f"{prefix}{separator}{i}{suffix}" for i in range(int(start), int(end) + 1)]

    return [code]
