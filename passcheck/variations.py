"""Case and leetspeak variations of a single token."""

from typing import Dict, Iterable, List, Optional, Union


LEET_TABLE: Dict[str, str] = {"a": "4", "e": "3", "i": "1", "o": "0", "s": "5", "t": "7"}
_LEET_TRANSLATION = str.maketrans(LEET_TABLE)


class VariationOptions:
    def __init__(self, capitalize: bool = True, leet: bool = False) -> None:
        self.capitalize = capitalize
        self.leet = leet

    def __repr__(self) -> str:
        return f"VariationOptions(capitalize={self.capitalize}, leet={self.leet})"


DEFAULT_OPTIONS = VariationOptions()
LEET_OPTIONS = VariationOptions(leet=True)


def capitalize_first(token: str) -> str:
    return token[:1].upper() + token[1:].lower()


def leet(token: str) -> str:
    """Lowercase the token and swap every letter found in LEET_TABLE."""
    return token.lower().translate(_LEET_TRANSLATION)


def expand(
    tokens: Optional[Union[str, Iterable[str]]],
    options: VariationOptions = DEFAULT_OPTIONS,
) -> List[str]:
    """Return the unique variations of one token or of a sequence of tokens.

    A plain string is a single token; anything else is iterated as tokens.
    Per token the forms are lowercase, capitalized (unless
    ``options.capitalize`` is false), uppercase and, with ``options.leet``,
    the leet form of the lowercase string. Falsy tokens, and a falsy
    input as a whole, are skipped. The result keeps first-occurrence order.
    """
    if not tokens:
        return []
    words = [tokens] if isinstance(tokens, str) else list(tokens)
    results: Dict[str, None] = {}
    for word in words:
        if not word:
            continue
        forms = [word.lower()]
        if options.capitalize:
            forms.append(capitalize_first(word))
        forms.append(word.upper())
        if options.leet:
            forms.append(leet(word))
        for form in forms:
            results.setdefault(form, None)
    return list(results)
