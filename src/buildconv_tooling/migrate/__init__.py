"""Source tree migration between directory layouts."""

from buildconv_tooling.migrate.tree import STAGING_DIR, Move, apply_moves, plan_moves

__all__ = [
    "STAGING_DIR",
    "Move",
    "apply_moves",
    "plan_moves",
]
