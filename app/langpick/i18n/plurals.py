"""Plural form selection rules.

Maps a language code to a closed-form rule returning the zero-based index of
the plural form to use for a quantity. The rules follow the gettext-style
table used by the Zend Framework (2010-09-25).
"""

from typing import Callable, Dict, FrozenSet

PluralRule = Callable[[int], int]


def _mod(n: int, m: int) -> int:
    """Truncated modulo: the remainder takes the sign of ``n``."""
    return -(-n % m) if n < 0 else n % m


def _no_plural(n: int) -> int:
    return 0


def _one_other(n: int) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: int) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: int) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _lithuanian(n: int) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if _mod(n, 10) >= 2 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _slovenian(n: int) -> int:
    if _mod(n, 100) == 1:
        return 0
    if _mod(n, 100) == 2:
        return 1
    return 2 if _mod(n, 100) in (3, 4) else 3


def _macedonian(n: int) -> int:
    return 0 if _mod(n, 10) == 1 else 1


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < _mod(n, 100) < 11:
        return 1
    return 2 if 10 < _mod(n, 100) < 20 else 3


def _latvian(n: int) -> int:
    if n == 0:
        return 0
    return 1 if _mod(n, 10) == 1 and _mod(n, 100) != 11 else 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 12 or _mod(n, 100) > 14):
        return 1
    return 2


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n in (8, 11) else 3


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    return 1 if n == 0 or 0 < _mod(n, 100) < 20 else 2


def _arabic(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n <= 10:
        return 3
    if 11 <= n <= 99:
        return 4
    return 5


# (rule, number of forms it can produce, languages)
_FAMILIES = (
    (_no_plural, 1, "bo dz id ja jv ka km kn ko ms th tr vi zh"),
    (
        _one_other,
        2,
        "af az bn bg ca da de el en eo es et eu fa fi fo fur fy gl gu ha he hu "
        "is it ku lb ml mn mr nah nb ne nl nn no om or pa pap ps pt so sq sv "
        "sw ta te tk ur zu",
    ),
    (_zero_one_other, 2, "am bh fil fr gun hi ln mg nso xbr ti wa"),
    (_east_slavic, 3, "be bs hr ru sr uk"),
    (_czech, 3, "cs sk"),
    (_irish, 3, "ga"),
    (_lithuanian, 3, "lt"),
    (_slovenian, 4, "sl"),
    (_macedonian, 2, "mk"),
    (_maltese, 4, "mt"),
    (_latvian, 3, "lv"),
    (_polish, 3, "pl"),
    (_welsh, 4, "cy"),
    (_romanian, 3, "ro"),
    (_arabic, 6, "ar"),
)

PLURAL_RULES: Dict[str, PluralRule] = {
    language: rule for rule, _, languages in _FAMILIES for language in languages.split()
}

_FORM_COUNTS: Dict[str, int] = {
    language: count
    for _, count, languages in _FAMILIES
    for language in languages.split()
}

SUPPORTED_LANGUAGES: FrozenSet[str] = frozenset(PLURAL_RULES)


def plural_index(locale: str, n: int) -> int:
    """Return the plural form index for quantity ``n`` in ``locale``.

    Rules are looked up by exact language code, so a tag with a region
    subtag ("pt-BR") selects form 0 like any unknown language. Remainders
    follow the sign of ``n``, so negative quantities mostly fall through to
    the "other" form.

    Args:
        locale: Language code (e.g., "ru", "pt").
        n: Quantity being counted.

    Returns:
        Zero-based index into the plural forms of a message.
    """
    rule = PLURAL_RULES.get(locale, _no_plural)
    return rule(int(n))


def plural_forms_count(locale: str) -> int:
    """Number of distinct plural forms the locale's rule can select."""
    return _FORM_COUNTS.get(locale, 1)
