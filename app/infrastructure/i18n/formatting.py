"""String helpers for translated messages.

Positional formatting of translation templates and HTML entity decoding.
"""

import html
import re
from typing import Any, Sequence

from infrastructure.i18n.models import FormatError

# %[argnum$][flags][width][.precision]specifier, or any other "%" sequence
_PLACEHOLDER = re.compile(
    r"%(?:(\d+)\$)?([-+ 0]*)(\d*)(?:\.(\d+))?([bcdeEfFgGosuxX%])|%(.?)"
)

_CONVERSIONS = {"u": "d", "F": "f"}

# Every encoding of "<" and ">": named in any case with or without a
# semicolon, decimal and hexadecimal references.
_TAG_ENTITY = re.compile(
    r"&(?P<named>lt|LT|gt|GT)(?:;|(?![a-zA-Z0-9]*;))"
    r"|&#0*(?P<dec>60|62)(?![0-9]);?"
    r"|&#[xX]0*(?P<hex>3[cCeE])(?![0-9a-fA-F]);?"
)


def _to_text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def _format_value(value: Any, flags: str, width: str, precision: str, conv: str) -> str:
    if conv == "s":
        spec = f"%{flags}{width}{'.' + precision if precision else ''}s"
        return spec % _to_text(value)
    if conv == "c":
        return chr(int(value))
    if conv == "b":
        digits = format(int(value), "b")
        fill = "0" if "0" in flags and "-" not in flags else " "
        return digits.ljust(int(width or 0)) if "-" in flags else digits.rjust(int(width or 0), fill)
    if conv in ("d", "u", "o", "x", "X"):
        value = int(value)
    else:
        value = float(value)
    conv = _CONVERSIONS.get(conv, conv)
    spec = f"%{flags}{width}{'.' + precision if precision else ''}{conv}"
    return spec % value


def vsprintf(template: str, args: Sequence[Any]) -> str:
    """Format a template with positional arguments.

    Supports sequential (``%s``, ``%d``) and numbered (``%1$s``) placeholders
    and ``%%`` for a literal percent sign. Surplus arguments are ignored. Any
    other ``%`` sequence is an error.

    Args:
        template: Template string.
        args: Positional arguments.

    Returns:
        Formatted string.

    Raises:
        FormatError: If a placeholder references a missing argument, an
            argument cannot be converted or a specifier is unknown.
    """
    position = 0

    def _replace(match: "re.Match[str]") -> str:
        nonlocal position
        argnum, flags, width, precision, conv, unknown = match.groups()
        if conv is None:
            if unknown:
                raise FormatError(f"Unknown format specifier {match.group(0)!r}: {template!r}")
            raise FormatError(f"Missing format specifier at end of string: {template!r}")
        if conv == "%":
            return "%"

        if argnum:
            index = int(argnum) - 1
            if index < 0:
                raise FormatError(f"Argument number must be greater than zero: {template!r}")
        else:
            index = position
            position += 1

        if index >= len(args):
            raise FormatError(
                f"{len(args)} arguments supplied, placeholder {match.group(0)!r} "
                f"requires at least {index + 1}: {template!r}"
            )

        try:
            return _format_value(args[index], flags, width, precision or "", conv)
        except (TypeError, ValueError, OverflowError) as e:
            raise FormatError(
                f"Cannot format argument {index + 1} with {match.group(0)!r}: {e}"
            ) from e

    return _PLACEHOLDER.sub(_replace, template)


def clean(text: str) -> str:
    """Trim whitespace and decode HTML entities, including quotes.

    Args:
        text: String that may contain HTML entities.

    Returns:
        Cleaned string.
    """
    return html.unescape(text.strip())


def _encoded_bracket(match: "re.Match[str]") -> str:
    if match.group("named"):
        is_lt = match.group("named").lower() == "lt"
    elif match.group("dec"):
        is_lt = match.group("dec") == "60"
    else:
        is_lt = match.group("hex").lower() == "3c"
    return "&lt;" if is_lt else "&gt;"


def decode_entities_safe_for_html(text: str) -> str:
    """Decode all HTML entities except encodings of ``<`` and ``>``.

    Encoded tag brackets, whether named, decimal or hexadecimal, are emitted
    as ``&lt;`` and ``&gt;`` so the value cannot inject markup when embedded
    into an attribute or a script string.

    Args:
        text: String that may contain HTML entities.

    Returns:
        Decoded string with tag entities kept encoded.
    """
    parts = []
    position = 0
    for match in _TAG_ENTITY.finditer(text):
        parts.append(html.unescape(text[position:match.start()]))
        parts.append(_encoded_bracket(match))
        position = match.end()
    parts.append(html.unescape(text[position:]))
    return "".join(parts)
