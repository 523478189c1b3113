"""Template rendering with printf-style positional arguments.

Supported directives: ``%s %d %i %u %f %F %e %E %g %G %x %X %o %c %b`` with
optional flags, width and precision, explicit argument numbers (``%2$s``) and
the literal ``%%``. Directives consume arguments left to right.
"""

import re
from typing import Any, List, Sequence

from langpick.core.logging import get_module_logger
from langpick.i18n.errors import FormattingError
from langpick.i18n.models import MessageValue
from langpick.i18n.plurals import plural_index

logger = get_module_logger()

CHOICE_SEPARATOR = "|"

_DIRECTIVE = re.compile(
    r"%(?:(?P<argnum>[1-9]\d*)\$)?(?P<flags>[-+ 0#]*)(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?(?P<conversion>[bcdeEfFgGiosuxX%])"
)
_INTEGER_CONVERSIONS = "bcdiouxX"
_FLOAT_CONVERSIONS = "eEfFgG"


def count_arguments(template: str) -> int:
    """Number of arguments a template consumes."""
    expected = 0
    position = 0
    for match in _DIRECTIVE.finditer(template):
        if match.group("conversion") == "%":
            continue
        if match.group("argnum"):
            expected = max(expected, int(match.group("argnum")))
        else:
            position += 1
            expected = max(expected, position)
    return expected


def render(template: str, args: Sequence[Any]) -> str:
    """Substitute positional arguments into a template.

    Surplus arguments are ignored.

    Args:
        template: Template with printf-style directives.
        args: Values consumed by the directives, in order.

    Returns:
        Rendered string.

    Raises:
        FormattingError: If fewer arguments than directives are supplied, or
            an argument does not fit its directive.
    """
    args = list(args)
    expected = count_arguments(template)
    if len(args) < expected:
        logger.error(
            "argument_count_mismatch",
            template=template,
            expected=expected,
            received=len(args),
        )
        raise FormattingError(
            f"Template {template!r} expects {expected} arguments, got {len(args)}",
            template=template,
            expected=expected,
            received=len(args),
        )

    position = 0

    def substitute(match: "re.Match[str]") -> str:
        nonlocal position
        if match.group("conversion") == "%":
            return "%"
        if match.group("argnum"):
            index = int(match.group("argnum")) - 1
        else:
            index = position
            position += 1
        return _convert(match, args[index], template)

    return _DIRECTIVE.sub(substitute, template)


def split_choices(choices: MessageValue) -> List[str]:
    """Return the plural alternatives of a message.

    A string is split on ``|``; a list is already split and used as-is.
    """
    if isinstance(choices, str):
        return choices.split(CHOICE_SEPARATOR)
    return list(choices)


def render_plural(
    choices: MessageValue,
    quantity: int,
    locale: str,
    args: Sequence[Any],
) -> str:
    """Select the plural form for ``quantity`` and render it.

    An index beyond the available forms falls back to the first form.

    Args:
        choices: "|"-delimited string or list of plural forms.
        quantity: Number deciding the plural form.
        locale: Locale whose plural rule applies.
        args: Values substituted into the chosen form.

    Returns:
        Rendered plural form.
    """
    forms = split_choices(choices)
    index = plural_index(locale, quantity)
    form = forms[index] if index < len(forms) else forms[0]
    return render(form, args)


def _convert(match: "re.Match[str]", value: Any, template: str) -> str:
    flags = match.group("flags") or ""
    width = match.group("width") or ""
    precision = match.group("precision")
    conversion = match.group("conversion")
    precision_spec = f".{precision}" if precision is not None else ""

    try:
        if conversion in _INTEGER_CONVERSIONS and not (
            conversion == "c" and isinstance(value, str)
        ):
            value = _to_number(value, int)
        elif conversion in _FLOAT_CONVERSIONS:
            value = _to_number(value, float)

        if conversion == "b":
            digits = format(value, "b")
            return f"%{flags.replace('#', '')}{width}s" % digits
        if conversion in "iu":
            conversion = "d"
        return f"%{flags}{width}{precision_spec}{conversion}" % (value,)
    except (TypeError, ValueError, OverflowError) as e:
        raise FormattingError(
            f"Cannot format {value!r} with {match.group(0)!r} in {template!r}: {e}",
            template=template,
        ) from e


def _to_number(value: Any, kind: type) -> Any:
    if isinstance(value, str):
        text = value.strip()
        try:
            return kind(text)
        except ValueError:
            return kind(float(text))
    if kind is int:
        return int(value)
    return value
