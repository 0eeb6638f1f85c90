"""Matching target strings against the configured patterns."""
import re
from typing import Iterable

from gardenctl.errors import NoMatchError, PatternCompileError
from gardenctl.models import PatternMatch

# Named groups that are copied into a PatternMatch
PATTERN_KEY_GARDEN = "garden"
PATTERN_KEY_PROJECT = "project"
PATTERN_KEY_NAMESPACE = "namespace"
PATTERN_KEY_SHOOT = "shoot"

PATTERN_KEYS = (PATTERN_KEY_GARDEN, PATTERN_KEY_PROJECT, PATTERN_KEY_NAMESPACE, PATTERN_KEY_SHOOT)


def match_pattern(patterns: Iterable[str], value: str) -> PatternMatch:
    """Match value against patterns and build a PatternMatch from the first hit.

    Patterns are tried in order. An invalid pattern aborts the whole lookup
    instead of being skipped.
    """
    for pattern in patterns:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(pattern, str(e)) from e

        match = regex.search(value)
        if match is None:
            continue

        tm = PatternMatch()
        for name in regex.groupindex:
            if name in PATTERN_KEYS:
                # groups that did not take part in the match are empty
                setattr(tm, name, match.group(name) or "")
        return tm

    raise NoMatchError(value)
