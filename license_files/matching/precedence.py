"""Precedence table of license-file naming conventions."""

from __future__ import annotations

import re

from license_files.models.rule import PrecedenceRule

# (name, pattern, description) in precedence order.
# \w is ASCII-only: letters, digits and underscore.
_RULE_DEFINITIONS: tuple[tuple[str, str, str], ...] = (
    ("license", r"LICENSE", "LICENSE"),
    ("license-variant", r"LICENSE[\-_]\w+", "LICENSE-<word>, e.g. LICENSE-MIT"),
    ("mit-license", r"MIT-LICENSE", "MIT-LICENSE"),
    ("licence", r"LICENCE", "LICENCE"),
    ("licence-variant", r"LICENCE[\-_]\w+", "LICENCE-<word>, e.g. LICENCE-MIT"),
    ("copying", r"COPYING", "COPYING"),
    ("readme", r"README", "README"),
)

BASENAMES_PRECEDENCE: tuple[PrecedenceRule, ...] = tuple(
    PrecedenceRule(
        name=name,
        rank=rank,
        pattern=re.compile(pattern, re.ASCII),
        description=description,
    )
    for rank, (name, pattern, description) in enumerate(_RULE_DEFINITIONS)
)


def get_rule(name: str) -> PrecedenceRule:
    """Look up a precedence rule by name.

    Args:
        name: Rule name, e.g. "copying".

    Returns:
        The matching PrecedenceRule.

    Raises:
        KeyError: If no rule has that name.
    """
    for rule in BASENAMES_PRECEDENCE:
        if rule.name == name:
            return rule
    raise KeyError(name)
