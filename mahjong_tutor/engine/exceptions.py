"""Domain exceptions for game rule violations."""


class GameRuleError(Exception):
    """Base class for actions the rules do not allow in the current state."""


class IllegalCallError(GameRuleError):
    """Chi/pon/kan/ron without the required tiles or outside a call window."""


class IllegalActionError(GameRuleError):
    """A turn action (discard, riichi, tsumo, kan) that is not available."""
