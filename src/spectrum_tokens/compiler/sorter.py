"""
Topological sorter - orders tokens so each follows its dependencies.

Depth-first over an explicit adjacency map. Each key moves through
PENDING -> VISITED -> emitted, or ends SKIPPED when a dependency is
unknown or was itself skipped.

A key is marked VISITED before its dependencies are explored. A cycle
(a -> b -> a) therefore never reaches the skip branch: the inner visit
sees the outer key as already VISITED and moves on. Every member of the
cycle is emitted once, in the order the walk reached them, which is fixed
by discovery order. No cycle diagnostic is produced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from spectrum_tokens.constants import ErrorMessages, VisitState
from spectrum_tokens.models.token import Token, TokenTable

logger = logging.getLogger(__name__)


@dataclass
class SortResult:
    """Outcome of one sort."""

    order: list[str]
    skipped: dict[str, str] = field(default_factory=dict)  # key -> offending dependency


@dataclass
class SortContext:
    """Visitation state owned by a single sort invocation."""

    graph: dict[str, list[str]]
    states: dict[str, VisitState] = field(default_factory=dict)
    order: list[str] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.states = {key: VisitState.PENDING for key in self.graph}

    def run(self) -> SortResult:
        """Visit every key in discovery order."""
        for key in self.graph:
            if self.states[key] == VisitState.PENDING:
                self.visit(key)
        self._propagate_skips()
        return SortResult(order=self.order, skipped=self.skipped)

    def visit(self, root: str) -> None:
        """
        Depth-first visit; appends each key after its dependencies.

        Walks an explicit stack of (key, remaining dependencies) frames, so
        alias chains of any length are handled.
        """
        self.states[root] = VisitState.VISITED
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(self.graph[root]))]

        while stack:
            key, deps = stack[-1]
            if self.states[key] != VisitState.SKIPPED:
                child = self._next_pending(key, deps)
                if child is not None:
                    self.states[child] = VisitState.VISITED
                    stack.append((child, iter(self.graph[child])))
                    continue

            stack.pop()
            if self.states[key] == VisitState.SKIPPED:
                if stack:
                    self._skip(stack[-1][0], key)
            else:
                self.order.append(key)

    def _next_pending(self, key: str, deps: Iterator[str]) -> str | None:
        """Advance to the next unvisited dependency, skipping key on a bad one."""
        for dep in deps:
            if dep not in self.graph or self.states[dep] == VisitState.SKIPPED:
                self._skip(key, dep)
                return None
            if self.states[dep] == VisitState.PENDING:
                return dep
        return None

    def _skip(self, key: str, dep: str) -> None:
        self.states[key] = VisitState.SKIPPED
        self.skipped[key] = dep
        logger.debug(ErrorMessages.MISSING_DEPENDENCY.format(key=key, dep=dep))

    def _propagate_skips(self) -> None:
        """
        Drop emitted keys that depend on a skipped key.

        Only reachable through cycles: a cycle member can be emitted before
        its partner is skipped further up the walk.
        """
        changed = True
        while changed:
            changed = False
            kept: list[str] = []
            for key in self.order:
                dropped_dep = next(
                    (d for d in self.graph[key] if self.states[d] == VisitState.SKIPPED),
                    None,
                )
                if dropped_dep is None:
                    kept.append(key)
                else:
                    self._skip(key, dropped_dep)
                    changed = True
            self.order = kept


def topological_sort(graph: dict[str, list[str]]) -> SortResult:
    """
    Order keys so each comes after the dependencies it could resolve.

    Args:
        graph: key -> dependency keys; iteration order is the discovery order

    Returns:
        SortResult with the emitted keys and the skipped ones
    """
    return SortContext(graph).run()


def sort_tokens(table: TokenTable) -> list[Token]:
    """Sort a token table, dropping tokens with unresolvable dependencies."""
    result = topological_sort(table.graph())
    return [table[key] for key in result.order]
