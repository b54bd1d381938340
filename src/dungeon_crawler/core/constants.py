"""Game-wide constants for the dungeon crawler.

Starting stats, progression rates and presentation defaults live here so
the models and the terminal collaborator agree on them.
"""

from __future__ import annotations

# =============================================================================
# Starting Character
# =============================================================================

STARTING_HEALTH = 100
"""Health of a freshly created player."""

BASE_ATTACK = 10
"""Attack at level 1 with no weapon equipped."""

BASE_DEFENSE = 10
"""Defense at level 1 with no armor equipped."""

STARTING_SPEED = 10
"""Speed of a freshly created player."""

STARTING_LEVEL = 1

STARTING_EXPERIENCE_THRESHOLD = 100
"""Experience needed to go from level 1 to level 2."""

# =============================================================================
# Progression
# =============================================================================

LEVEL_UP_HEALTH = 10
LEVEL_UP_ATTACK = 2
LEVEL_UP_DEFENSE = 2
LEVEL_UP_SPEED = 2

THRESHOLD_GROWTH_NUMERATOR = 11
THRESHOLD_GROWTH_DENOMINATOR = 10
"""Each level multiplies the experience threshold by 11/10, truncated."""

MIN_DAMAGE = 1
"""Every hit deals at least this much damage, whatever the defense."""

# =============================================================================
# Presentation
# =============================================================================

FALLBACK_TERMINAL_SIZE = (80, 24)
"""(columns, rows) used when the terminal size cannot be detected."""

TITLE_ART = (
    r" ____  _   _ ____ _______   __",
    r"|  _ \| | | / ___|_   _\ \ / /",
    r"| |_) | | | \___ \ | |  \ V / ",
    r"|  _ <| |_| |___) || |   | |  ",
    r"|_| \_\\___/|____/ |_|   |_|  ",
)

SUBTITLE = "C R A W L E R"


__all__ = [
    # Starting character
    "STARTING_HEALTH",
    "BASE_ATTACK",
    "BASE_DEFENSE",
    "STARTING_SPEED",
    "STARTING_LEVEL",
    "STARTING_EXPERIENCE_THRESHOLD",
    # Progression
    "LEVEL_UP_HEALTH",
    "LEVEL_UP_ATTACK",
    "LEVEL_UP_DEFENSE",
    "LEVEL_UP_SPEED",
    "THRESHOLD_GROWTH_NUMERATOR",
    "THRESHOLD_GROWTH_DENOMINATOR",
    "MIN_DAMAGE",
    # Presentation
    "FALLBACK_TERMINAL_SIZE",
    "TITLE_ART",
    "SUBTITLE",
]
