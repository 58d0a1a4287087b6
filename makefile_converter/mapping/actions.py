"""Table entry types for option and command translation.

WHY: "Drop this flag" and "keep this flag" look identical once buried in
a conditional chain, and nobody can tell which behavior was intended for
a given flag. Making the choice an explicit value per entry keeps the
translation matrix auditable and testable entry by entry.

HOW: Three action kinds, each a small frozen dataclass:
  Replace(value) : emit value instead of the token (may be several tokens)
  Drop()         : emit nothing
  PassThrough()  : emit the token unchanged
PrefixRule wraps an action for compound flags (``-Ipath``, ``DEF=X``) and
substitutes the remainder after the prefix into ``{rest}``.

RULES:
- Every action carries an optional ``note`` documenting intent
- ``review=True`` marks best-guess entries whose intent is not settled;
  they are reported by ``mapping.options.entries_for_review``
- Prefix rules are case-sensitive unless ignore_case is set, because
  ``-D`` (define) and ``-d`` (debug level) differ only in case
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Replace:
    """Replace the token with value. ``{rest}`` is filled in for prefix rules."""

    value: str
    note: str = ""
    review: bool = False


@dataclass(frozen=True)
class Drop:
    """Remove the token: the target dialect has no equivalent."""

    note: str = ""
    review: bool = False


@dataclass(frozen=True)
class PassThrough:
    """Keep the token unchanged: the target dialect spells it the same way."""

    note: str = ""
    review: bool = False


Action = Union[Replace, Drop, PassThrough]


@dataclass(frozen=True)
class PrefixRule:
    """An action applied to every token that starts with prefix.

    RULES:
    - rest is the token with the prefix removed
    - trim_suffix, when set, is removed once from the end of rest
    - ignore_case compares the prefix case-insensitively
    """

    prefix: str
    action: Action
    ignore_case: bool = False
    trim_suffix: str = ""

    def matches(self, token: str) -> bool:
        if self.ignore_case:
            return token.lower().startswith(self.prefix.lower())
        return token.startswith(self.prefix)

    def remainder(self, token: str) -> str:
        rest = token[len(self.prefix):]
        if self.trim_suffix and rest.endswith(self.trim_suffix):
            rest = rest[: -len(self.trim_suffix)]
        return rest


def apply_action(action: Action, token: str, rest: Optional[str] = None) -> str:
    """Render one action for token. Returns "" for Drop.

    Args:
        action: The table entry.
        token: The input token.
        rest: Remainder after a prefix rule's prefix, if any.
    """
    if isinstance(action, Drop):
        return ""
    if isinstance(action, PassThrough):
        return token
    if rest is not None:
        return action.value.replace("{rest}", rest)
    return action.value
