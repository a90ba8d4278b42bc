"""Extraction of a canonical CLC code from noisy catalogue text."""

import re

# Loose check: any two capital letters, tolerates non-standard classes such as "TZ".
CLC_BASE_LOOSE = r"[A-Z]{2}\d{0,3}"
# Only the classes defined by the 5th edition.
CLC_BASE_STRICT = r"(?:[A-K]|[N-V]|X|Z)[A-Z]?\d{0,3}"


def build_clean_regex(base: str = CLC_BASE_STRICT) -> re.Pattern:
    """
    Compile the composite CLC grammar around a base-code expression.

    Group 1 captures the first simple code: base code, optional ``/NNN`` sub-range,
    optional trailing ``a`` and any number of ``.NNN``, ``-NNN``, ``=NNN``, ``+NNN``,
    ``(NNN)``, ``"NNN"`` or ``<NNN>`` facets. The rest of the grammar only exists so a
    full segment is consumed: ``{old}<new>`` abandoned/current pairs and ``:`` / ``+``
    combination mnemonics.
    """
    facet = r'(?:[.\-=+]\d{1,3}|\(\d{1,3}\)|"\d{1,3}"|<\d{1,3}>)'
    simple = rf"\[?({base}(?:/\d{{1,3}})?a?{facet}*)\]?"
    abandoned_included = rf"\{{?{simple}(?:\}}<(?:{simple})>)?"
    complete = rf"{abandoned_included}(?:[:+](?:{abandoned_included}))*"
    return re.compile(complete)


class CodeCleaner:
    """Reduce a single classification segment to its first canonical code."""

    def __init__(self, strict: bool = True):
        self.strict = strict
        self.regex = build_clean_regex(CLC_BASE_STRICT if strict else CLC_BASE_LOOSE)

    def clean(self, text: str) -> str:
        """
        Return the canonical code found in `text`, or an empty string.

        Examples:
            >>> CodeCleaner().clean(" [X-019] ")
            'X-019'
            >>> CodeCleaner().clean("K837.125.6(202)+R173:G25a")
            'K837.125.6(202)'
        """
        m = self.regex.search(text.strip())
        if m is None:
            return ""
        return m.group(1) or ""
