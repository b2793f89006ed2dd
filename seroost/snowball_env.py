"""Cursor-based string editing environment used by Snowball stemmers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

AmongMethod = Callable[["SnowballEnv", Any], bool]


@dataclass(frozen=True)
class Among:
    """One entry of a sorted suffix/prefix table searched by ``find_among``.

    ``substring_i`` is the index of the longest entry that is a prefix
    (or suffix, for backward search) of this one, or -1 if there is none.
    ``result`` is returned when the entry matches.  ``method``, if given,
    must also succeed for the entry to count as a match.
    """

    s: str
    substring_i: int
    result: int
    method: Optional[AmongMethod] = None


def _in_bitmap(chars: Sequence[int], ch: int, min_cp: int, max_cp: int) -> bool:
    if ch > max_cp or ch < min_cp:
        return False
    ch -= min_cp
    return bool(chars[ch >> 3] & (1 << (ch & 0x7)))


class SnowballEnv:
    """Mutable working state of a stemmer: the text plus its cursors."""

    def __init__(self, value: str) -> None:
        self.current = value
        self.cursor = 0
        self.limit = len(value)
        self.limit_backward = 0
        self.bra = 0
        self.ket = len(value)

    def __repr__(self) -> str:
        return (
            f"SnowballEnv(current={self.current!r}, cursor={self.cursor}, "
            f"limit={self.limit}, limit_backward={self.limit_backward}, "
            f"bra={self.bra}, ket={self.ket})"
        )

    def _replace_s(self, bra: int, ket: int, s: str) -> int:
        adjustment = len(s) - (ket - bra)
        self.current = self.current[:bra] + s + self.current[ket:]
        self.limit += adjustment
        if self.cursor >= ket:
            self.cursor += adjustment
        elif self.cursor > bra:
            self.cursor = bra
        return adjustment

    def eq_s(self, s: str) -> bool:
        """If ``s`` follows the cursor, move the cursor past it."""
        if self.cursor >= self.limit:
            return False
        if self.current.startswith(s, self.cursor):
            self.cursor += len(s)
            return True
        return False

    def eq_s_b(self, s: str) -> bool:
        """If ``s`` precedes the cursor, move the cursor to its start."""
        if self.cursor - self.limit_backward < len(s):
            return False
        start = self.cursor - len(s)
        if self.current[start:self.cursor] != s:
            return False
        self.cursor = start
        return True

    def slice_from(self, s: str) -> bool:
        """Replace the text between ``bra`` and ``ket`` with ``s``."""
        self._replace_s(self.bra, self.ket, s)
        return True

    def slice_del(self) -> bool:
        """Delete the text between ``bra`` and ``ket``."""
        return self.slice_from("")

    def next_char(self) -> None:
        self.cursor += 1

    def previous_char(self) -> None:
        self.cursor -= 1

    def hop(self, delta: int) -> bool:
        """Move forward ``delta`` characters without passing ``limit``."""
        target = self.cursor + delta
        if delta > 0 and target > self.limit:
            return False
        self.cursor = max(target, self.cursor)
        return True

    def hop_checked(self, delta: int) -> bool:
        return delta >= 0 and self.hop(delta)

    def hop_back(self, delta: int) -> bool:
        """Move back ``delta`` characters without passing ``limit_backward``."""
        target = self.cursor - delta
        if delta > 0 and target < self.limit_backward:
            return False
        self.cursor = min(target, self.cursor)
        return True

    def hop_back_checked(self, delta: int) -> bool:
        return delta >= 0 and self.hop_back(delta)

    def in_grouping(self, chars: Sequence[int], min_cp: int, max_cp: int) -> bool:
        """Advance over the next character if it belongs to the grouping.

        A grouping is a bitmap, least significant bit first, over the code
        points from ``min_cp`` to ``max_cp`` inclusive.
        """
        if self.cursor >= self.limit:
            return False
        if not _in_bitmap(chars, ord(self.current[self.cursor]), min_cp, max_cp):
            return False
        self.cursor += 1
        return True

    def in_grouping_b(self, chars: Sequence[int], min_cp: int, max_cp: int) -> bool:
        if self.cursor <= self.limit_backward:
            return False
        if not _in_bitmap(chars, ord(self.current[self.cursor - 1]), min_cp, max_cp):
            return False
        self.cursor -= 1
        return True

    def out_grouping(self, chars: Sequence[int], min_cp: int, max_cp: int) -> bool:
        if self.cursor >= self.limit:
            return False
        if _in_bitmap(chars, ord(self.current[self.cursor]), min_cp, max_cp):
            return False
        self.cursor += 1
        return True

    def out_grouping_b(self, chars: Sequence[int], min_cp: int, max_cp: int) -> bool:
        if self.cursor <= self.limit_backward:
            return False
        if _in_bitmap(chars, ord(self.current[self.cursor - 1]), min_cp, max_cp):
            return False
        self.cursor -= 1
        return True

    def insert(self, bra: int, ket: int, s: str) -> None:
        """Replace ``[bra, ket)`` with ``s``, shifting ``bra``/``ket`` as needed."""
        adjustment = self._replace_s(bra, ket, s)
        if bra <= self.bra:
            self.bra += adjustment
        if bra <= self.ket:
            self.ket += adjustment

    def assign_to(self) -> str:
        return self.current[:self.limit]

    def slice_to(self) -> str:
        return self.current[self.bra:self.ket]

    def find_among(self, amongs: Sequence[Among], context: Any) -> int:
        """Find the longest table entry starting at the cursor.

        Returns the entry's result and moves the cursor past it, or 0 when
        nothing matches.
        """
        i, j = 0, len(amongs)
        c, lim = self.cursor, self.limit
        common_i = common_j = 0
        first_key_inspected = False

        while True:
            k = i + ((j - i) >> 1)
            diff = 0
            common = min(common_i, common_j)
            w = amongs[k]
            for ch in w.s[common:]:
                if c + common == lim:
                    diff = -1
                    break
                diff = ord(self.current[c + common]) - ord(ch)
                if diff != 0:
                    break
                common += 1
            if diff < 0:
                j, common_j = k, common
            else:
                i, common_i = k, common
            if j - i <= 1:
                if i > 0 or j == i or first_key_inspected:
                    break
                first_key_inspected = True

        while True:
            w = amongs[i]
            if common_i >= len(w.s):
                self.cursor = c + len(w.s)
                if w.method is None:
                    return w.result
                res = w.method(self, context)
                self.cursor = c + len(w.s)
                if res:
                    return w.result
            i = w.substring_i
            if i < 0:
                return 0

    def find_among_b(self, amongs: Sequence[Among], context: Any) -> int:
        """Find the longest table entry ending at the cursor.

        Returns the entry's result and moves the cursor to its start, or 0
        when nothing matches.
        """
        i, j = 0, len(amongs)
        c, lb = self.cursor, self.limit_backward
        common_i = common_j = 0
        first_key_inspected = False

        while True:
            k = i + ((j - i) >> 1)
            diff = 0
            common = min(common_i, common_j)
            w = amongs[k]
            for ch in reversed(w.s[:max(len(w.s) - common, 0)]):
                if c - common == lb:
                    diff = -1
                    break
                diff = ord(self.current[c - common - 1]) - ord(ch)
                if diff != 0:
                    break
                common += 1
            if diff < 0:
                j, common_j = k, common
            else:
                i, common_i = k, common
            if j - i <= 1:
                if i > 0 or j == i or first_key_inspected:
                    break
                first_key_inspected = True

        while True:
            w = amongs[i]
            if common_i >= len(w.s):
                self.cursor = c - len(w.s)
                if w.method is None:
                    return w.result
                res = w.method(self, context)
                self.cursor = c - len(w.s)
                if res:
                    return w.result
            i = w.substring_i
            if i < 0:
                return 0