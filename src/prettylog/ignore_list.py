from __future__ import annotations

import copy
import logging
import threading
from typing import Hashable

_LOG = logging.getLogger(__name__)


def _clean(prefix: str | None) -> str:
    return "" if prefix is None else str(prefix).strip()


class IgnoreListStore:
    """
    Origin prefixes whose stack frames are dropped from printed traces.

    Entries live in two scopes: global (every severity) and per-severity.
    Each scope has set semantics. Blank prefixes are ignored without error,
    and removing something that was never added just returns False.

    Mutations and reads are serialized by an internal lock, so a printer can
    keep filtering traces while another thread edits its ignore list.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._global: set[str] = set()
        self._by_level: dict[Hashable, set[str]] = {}

    def add_global(self, prefix: str) -> None:
        p = _clean(prefix)
        if not p:
            return
        with self._lock:
            self._global.add(p)
        _LOG.debug("ignoring origin prefix %r for all levels", p)

    def add_for_level(self, prefix: str, level: Hashable) -> None:
        p = _clean(prefix)
        if not p:
            return
        with self._lock:
            self._by_level.setdefault(level, set()).add(p)
        _LOG.debug("ignoring origin prefix %r for level %s", p, level)

    def remove_global(self, prefix: str) -> bool:
        p = _clean(prefix)
        if not p:
            return False
        with self._lock:
            if p not in self._global:
                return False
            self._global.discard(p)
            return True

    def remove_for_level(self, prefix: str, level: Hashable) -> bool:
        p = _clean(prefix)
        if not p:
            return False
        with self._lock:
            entries = self._by_level.get(level)
            if not entries or p not in entries:
                return False
            entries.discard(p)
            return True

    def remove_everywhere(self, prefix: str) -> bool:
        """
        Drop `prefix` from the global scope and from every per-level scope.

        Returns True if it was removed from at least one of them.
        """
        p = _clean(prefix)
        if not p:
            return False
        with self._lock:
            removed = self.remove_global(p)
            for entries in self._by_level.values():
                if p in entries:
                    entries.discard(p)
                    removed = True
        if removed:
            _LOG.debug("no longer ignoring origin prefix %r", p)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._global.clear()
            self._by_level.clear()

    def contains(self, prefix: str, level: Hashable | None = None) -> bool:
        p = _clean(prefix)
        with self._lock:
            if level is None:
                return p in self._global
            return p in self._by_level.get(level, ())

    def list_all(self) -> set[str]:
        """Union of global and per-level prefixes."""
        with self._lock:
            out = set(self._global)
            for entries in self._by_level.values():
                out.update(entries)
        return out

    def snapshot(self, level: Hashable | None = None) -> tuple[str, ...]:
        """
        Prefixes that apply when filtering for `level`.

        Global entries always apply; per-level entries only when a level is given.
        """
        with self._lock:
            out = set(self._global)
            if level is not None:
                out.update(self._by_level.get(level, ()))
        return tuple(sorted(out))

    def clone(self) -> "IgnoreListStore":
        return copy.deepcopy(self)

    def __deepcopy__(self, memo: dict) -> "IgnoreListStore":
        cp = IgnoreListStore()
        with self._lock:
            cp._global = set(self._global)
            cp._by_level = {lvl: set(entries) for lvl, entries in self._by_level.items()}
        return cp

    def __len__(self) -> int:
        return len(self.list_all())

    def __repr__(self) -> str:
        with self._lock:
            n_levels = sum(len(v) for v in self._by_level.values())
            return f"IgnoreListStore(global={len(self._global)}, per_level={n_levels})"


__all__ = ["IgnoreListStore"]
