"""Register-to-name lookup from debug scope information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class LocalScope:
    """A named local living in ``register`` over ``pc_range`` (end exclusive)."""

    register: int
    name: str
    pc_range: range


def _ranges_overlap(a: range, b: range) -> bool:
    return a.start < b.stop and b.start < a.stop


class ScopeTree:
    """Interval lookup of local variable names by register and PC."""

    def __init__(self, scopes: Iterable[LocalScope] = ()):
        self._scopes = sorted(scopes, key=lambda s: (s.register, s.pc_range.start))

    def _scope_for(self, register: int, pc: int) -> LocalScope | None:
        best = None
        for scope in self._scopes:
            if scope.register == register and pc in scope.pc_range:
                if best is None or scope.pc_range.start >= best.pc_range.start:
                    best = scope
        return best

    def lookup(self, register: int, pc: int) -> str | None:
        """Name of the narrowest scope holding ``register`` at ``pc``."""
        scope = self._scope_for(register, pc)
        return scope.name if scope is not None else None

    def same_variable(self, register: int, pc_a: int, pc_b: int) -> bool:
        """Whether both PCs see the register under the same name."""
        name_a = self.lookup(register, pc_a)
        name_b = self.lookup(register, pc_b)
        return name_a is not None and name_b is not None and name_a == name_b

    def different_variable(self, register: int, pc_a: int, pc_b: int) -> bool:
        """Whether both PCs are in known scopes that do not overlap."""
        scope_a = self._scope_for(register, pc_a)
        scope_b = self._scope_for(register, pc_b)
        if scope_a is None or scope_b is None:
            return False
        return not _ranges_overlap(scope_a.pc_range, scope_b.pc_range)

    def scopes_for_register(self, register: int) -> Iterator[LocalScope]:
        """All scopes of ``register`` in order of start PC."""
        return (s for s in self._scopes if s.register == register)

    def all_scopes(self) -> tuple[LocalScope, ...]:
        """All scopes, sorted by register and start PC."""
        return tuple(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)