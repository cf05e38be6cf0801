"""Weight allowance resolution.

Weight tokens come in three shapes:

    "53"      plain weight
    "53,5"    fractional weight (comma or dot)
    "54-2"    nominal weight minus apprentice allowance
"""

import re

_PLAIN_WEIGHT = re.compile(r"\d+(?:\.\d+)?")
_ALLOWANCE_WEIGHT = re.compile(r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)")


def parse_weight(raw: str) -> float | None:
    """Resolve a raw weight token into kilograms.

    Args:
        raw: The weight token as printed (e.g. "53,5-3,5").

    Returns:
        The carried weight, or None if the token cannot be resolved.
    """
    token = raw.strip().replace(",", ".")

    match = _ALLOWANCE_WEIGHT.fullmatch(token)
    if match:
        weight = float(match.group(1)) - float(match.group(2))
        if weight < 0:
            return None
        return round(weight, 2)

    if _PLAIN_WEIGHT.fullmatch(token):
        return float(token)

    return None


def resolve_weight(raw: str) -> float:
    """Resolve a raw weight token, falling back to 0 when unparseable.

    Callers that need to report the fallback should use parse_weight().
    """
    weight = parse_weight(raw)
    return weight if weight is not None else 0.0
