"""
api_serializer.guards

Purpose:
    Per-call traversal state: cycle detection (identity stack) and depth
    limiting. A TraversalState is created inside each serialize() call and
    never stored on the Serializer, so concurrent callers never share it.

Design Notes:
    - Both guards are context managers; the finally-block pops/decrements on
      every exit path, including failures raised deeper in the traversal.
    - Only by-reference values (containers, field-bearing objects) are pushed.

Author:
    Kanir Pandya

Created:
    2026-02-21
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from api_serializer.errors import CircularReference, StructureTooDeep


class CycleGuard:
    def __init__(self) -> None:
        self._active: set[int] = set()

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._active

    @property
    def size(self) -> int:
        return len(self._active)

    @contextmanager
    def enter(self, value: Any) -> Iterator[None]:
        ident = id(value)
        if ident in self._active:
            raise CircularReference(type(value).__name__)
        self._active.add(ident)
        try:
            yield
        finally:
            self._active.discard(ident)


class DepthGuard:
    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        self.depth = 0

    @contextmanager
    def descend(self) -> Iterator[int]:
        # Checked before the next level runs.
        if self.depth + 1 > self.max_depth:
            raise StructureTooDeep(self.max_depth)
        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1


@dataclass
class TraversalState:
    max_depth: int
    cycles: CycleGuard = field(default_factory=CycleGuard)
    depth_guard: DepthGuard = field(init=False)

    def __post_init__(self) -> None:
        self.depth_guard = DepthGuard(self.max_depth)

    @property
    def depth(self) -> int:
        return self.depth_guard.depth

    @contextmanager
    def container(self, value: Any) -> Iterator[None]:
        """
        Enter a by-reference container: identity check first, then depth.
        """
        with self.cycles.enter(value), self.depth_guard.descend():
            yield
