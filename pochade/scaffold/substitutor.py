"""Placeholder token substitution for template text."""
import re
from typing import List, Mapping

# Any ${...} sequence, known or not
ANY_TOKEN_PATTERN = re.compile(r'\$\{\s*([^}]*?)\s*\}')


def substitute(text: str, tokens: Mapping[str, str]) -> str:
    """Replace every ``${ key }`` whose key is in ``tokens``.

    Replacement happens in a single pass over ``text`` so a substituted value
    is never scanned again. Tokens with unknown keys are kept as-is.
    """
    if not tokens:
        return text

    names = "|".join(re.escape(key) for key in tokens)
    pattern = re.compile(r'\$\{\s*(' + names + r')\s*\}')
    return pattern.sub(lambda match: tokens[match.group(1)], text)


def find_orphan_tokens(text: str) -> List[str]:
    """Return the ``${...}`` sequences still present in ``text``."""
    return [match.group(0) for match in ANY_TOKEN_PATTERN.finditer(text)]
