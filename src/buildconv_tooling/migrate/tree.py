"""Move source folders on disk between two layouts (flat convention <-> Maven standard).

Moves go through a staging directory so that nested layouts work in both
directions (src -> src/main/java and src/main/java -> src).
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from buildconv_tooling.conventions.table import Role

log = logging.getLogger(__name__)

STAGING_DIR = ".buildconv-staging"


@dataclass(frozen=True)
class Move:
    language: str
    role: Role
    source: Path
    destination: Path

    def describe(self, rel_to: Path | None = None) -> str:
        src, dst = self.source, self.destination
        if rel_to is not None:
            src, dst = src.relative_to(rel_to), dst.relative_to(rel_to)
        return f"{self.language} {self.role.value}: {src} -> {dst}"


def _is_within(path: Path, other: Path) -> bool:
    return path == other or other in path.parents


def plan_moves(
    project_dir: Path,
    from_layout: Mapping[tuple[str, Role], str],
    to_layout: Mapping[tuple[str, Role], str],
) -> list[Move]:
    """Moves for pairs bound in both layouts whose paths differ and whose source directory exists.

    A source directory shared by several pairs (e.g. resources) is moved once.
    """
    moves: list[Move] = []
    seen: dict[Path, Path] = {}
    keys = sorted(set(from_layout) & set(to_layout), key=lambda k: (k[0], k[1].value))
    for language, role in keys:
        src = project_dir / from_layout[(language, role)]
        dst = project_dir / to_layout[(language, role)]
        if src == dst or not src.is_dir():
            continue
        if src in seen:
            if seen[src] != dst:
                log.warning(
                    "%s already planned to move to %s; not also moving it to %s",
                    src,
                    seen[src],
                    dst,
                )
            continue
        seen[src] = dst
        moves.append(Move(language, role, src, dst))
    return moves


def _blocked(move: Move, moves: list[Move]) -> bool:
    """Destination holds content that is not itself being moved away."""
    dst = move.destination
    if not dst.exists():
        return False
    if dst.is_file():
        return True
    if any(_is_within(m.source, dst) for m in moves):
        return False
    return any(dst.iterdir())


def _prune_empty_parents(path: Path, stop: Path) -> None:
    parent = path.parent
    while parent != stop and _is_within(parent, stop):
        if not parent.is_dir() or any(parent.iterdir()):
            return
        parent.rmdir()
        parent = parent.parent


def _merge_into(staged: Path, dst: Path) -> bool:
    """Move staged tree to dst, merging into an existing directory. False if any child was left behind."""
    if not dst.exists():
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(staged), str(dst))
        return True
    complete = True
    for child in sorted(staged.iterdir()):
        target = dst / child.name
        if target.exists():
            log.warning("Not overwriting %s; left in %s", target, staged)
            complete = False
            continue
        shutil.move(str(child), str(target))
    if complete:
        staged.rmdir()
    return complete


def apply_moves(moves: list[Move], project_dir: Path, *, dry_run: bool = False) -> int:
    """Perform moves (or only log them with dry_run). Returns number of moves performed (or that would be)."""
    runnable: list[Move] = []
    for m in moves:
        if _blocked(m, moves):
            log.warning("Skipping %s: destination is not empty", m.describe(project_dir))
        else:
            runnable.append(m)
    if dry_run:
        for m in runnable:
            log.info("[DRY-RUN] %s", m.describe(project_dir))
        return len(runnable)
    if not runnable:
        return 0

    staging = project_dir / STAGING_DIR
    staging.mkdir(exist_ok=True)
    staged: list[tuple[Move, Path]] = []
    # Deepest sources first so a nested source is staged before its ancestor.
    by_depth = sorted(runnable, key=lambda m: len(m.source.parts), reverse=True)
    for i, m in enumerate(by_depth):
        slot = staging / str(i)
        shutil.move(str(m.source), str(slot))
        _prune_empty_parents(m.source, project_dir)
        staged.append((m, slot))

    done = 0
    for m, slot in staged:
        if _merge_into(slot, m.destination):
            log.info("Moved %s", m.describe(project_dir))
            done += 1
        else:
            log.warning("Incomplete move %s; remaining files in %s", m.describe(project_dir), slot)
    if not any(staging.iterdir()):
        staging.rmdir()
    return done
