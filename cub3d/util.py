"""Character classification and small string helpers for map handling."""

PLAYER_CHARS = frozenset("NSEW")
_NUL = "\0"


def is_player_char(c: str) -> bool:
    """Return True if ``c`` marks the player's start and facing (N, S, E, W)."""
    return c in PLAYER_CHARS


def is_valid_char(c: str) -> bool:
    """Return True if ``c`` may appear in a map line."""
    return c in ("0", "1", "\n") or is_player_char(c)


def is_walkable(c: str) -> bool:
    """Return True if the player can stand on a tile holding ``c``."""
    return c == "0" or is_player_char(c)


def strrncmp(s1: str, s2: str, n: int) -> int:
    """Compare the last ``n`` characters of two strings, from the end backwards.

    Returns 0 when they match, otherwise the difference between the code
    points of the first pair that differs. A string shorter than ``n`` is
    treated as padded in front with NUL characters.
    """
    for i in range(1, n + 1):
        c1 = s1[-i] if i <= len(s1) else _NUL
        c2 = s2[-i] if i <= len(s2) else _NUL
        if c1 != c2:
            return ord(c1) - ord(c2)
    return 0