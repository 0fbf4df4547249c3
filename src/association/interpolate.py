"""Variable substitution for association values."""

import re
from typing import FrozenSet, List, Mapping, Optional, Sequence, Tuple

_VARIABLE = re.compile(r"\$\{([^}]+)\}")


def interpolate(
    value: str, variables: Mapping[str, str], _seen: Optional[FrozenSet[str]] = None
) -> str:
    """Replace ``${name}`` references in ``value`` with entries of ``variables``.

    Substituted text is expanded recursively. Unknown names and references
    that would recurse into themselves are left verbatim.
    """
    seen = _seen or frozenset()

    def _replace(match: "re.Match[str]") -> str:
        ref = match.group(1)
        if ref in seen or ref not in variables:
            return match.group(0)
        return interpolate(variables[ref], variables, seen | {ref})

    return _VARIABLE.sub(_replace, value)


def resolve_pairs(pairs: Sequence[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """Interpolate every value against the other entries of the same source."""
    variables = dict(pairs)
    return [(key, interpolate(value, variables, frozenset({key}))) for key, value in pairs]
