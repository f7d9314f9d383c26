"""Open-addressing hash map with Robin Hood probing and tombstones."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple, Union

HASHMAP_POWER = 8
HASHMAP_CHARGEFACTOR = 0.8

_MASK64 = (1 << 64) - 1
_SIZE_MAX = _MASK64


def murmur3_hash(text: Union[str, bytes]) -> int:
    """Hash a string (or bytes) to an unsigned 64-bit integer.

    Bytes are taken as signed chars and hashing stops at the first NUL byte.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = 0x811C9DC5
    for byte in data:
        if byte == 0:
            break
        if byte >= 0x80:
            byte = (byte - 0x100) & _MASK64
        value ^= byte
        value = (value * 0x5BD1E995) & _MASK64
        value ^= value >> 15
    return value


class HashStatus(enum.Enum):
    """State of a slot in the table."""

    EMPTY = 0
    TOMBSTONE = 1
    OCCUPIED = 2


@dataclass
class HashEntry:
    """One slot of the table: hashed key, value, status and probe distance."""

    key: int = 0
    value: Any = None
    status: HashStatus = HashStatus.EMPTY
    probe_distance: int = 0


def _no_free(_value: Any) -> None:
    return None


class HashMap:
    """Hash map keyed by the hash of its keys, using Robin Hood probing.

    Only the hashed key is stored, so two keys with the same hash share a slot.
    ``val_free`` is called on every value that the map drops: overwritten,
    removed, or released with its content.
    """

    def __init__(
        self,
        power: int = HASHMAP_POWER,
        charge_factor: float = HASHMAP_CHARGEFACTOR,
        val_free: Optional[Callable[[Any], None]] = None,
        hash: Callable[[Any], int] = murmur3_hash,
    ) -> None:
        if power < 0:
            raise ValueError("power must not be negative")
        self.size = 1 << power
        self.charge_factor = charge_factor
        self._val_free = val_free if val_free is not None else _no_free
        self._hash = hash
        self._table = [HashEntry() for _ in range(self.size)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Tuple[int, Any]]:
        """Yield ``(key_hash, value)`` for every occupied slot in table order."""
        seen = 0
        for entry in self._table:
            if seen >= self._count:
                break
            if entry.status is HashStatus.OCCUPIED:
                yield entry.key, entry.value
                seen += 1

    def add(self, key: Any, value: Any) -> None:
        """Hash ``key`` and store ``value`` under it; a None value is ignored."""
        self.insert(self._hash(key), value)

    def insert(self, key_hash: int, value: Any) -> bool:
        """Store ``value`` under an already hashed key.

        Returns False when nothing was stored (a None value or a failed grow).
        """
        if value is None:
            return False
        if (self._count + 1) / self.size >= self.charge_factor:
            try:
                self.resize(self.size << 1)
            except ValueError:
                return False
        key_hash &= _MASK64
        pos = key_hash & (self.size - 1)
        carried = HashEntry(key_hash, value, HashStatus.OCCUPIED, 0)
        self._place(key_hash, pos, carried)
        return True

    def _place(self, key_hash: int, pos: int, carried: HashEntry) -> None:
        mask = self.size - 1
        while True:
            slot = self._table[pos]
            if slot.status is not HashStatus.OCCUPIED:
                if slot.status is HashStatus.TOMBSTONE and slot.value is not None:
                    self._val_free(slot.value)
                self._table[pos] = carried
                self._count += 1
                return
            if slot.key == key_hash:
                self._val_free(slot.value)
                self._table[pos] = carried
                return
            if carried.probe_distance > slot.probe_distance:
                self._table[pos], carried = carried, slot
            carried.probe_distance += 1
            pos = (pos + 1) & mask

    def get(self, key: Any) -> Optional[HashEntry]:
        """Return the entry stored under ``key``, or None."""
        key_hash = self._hash(key) & _MASK64
        mask = self.size - 1
        pos = key_hash & mask
        for dist in range(self.size):
            entry = self._table[pos]
            if entry.status is HashStatus.EMPTY:
                return None
            if entry.status is not HashStatus.TOMBSTONE and entry.key == key_hash:
                return entry
            if dist > entry.probe_distance:
                return None
            pos = (pos + 1) & mask
        return None

    def remove(self, key: Any) -> None:
        """Drop the value stored under ``key``, leaving a tombstone."""
        entry = self.get(key)
        if entry is None:
            return
        entry.status = HashStatus.TOMBSTONE
        if entry.value is not None:
            self._val_free(entry.value)
            entry.value = None
            self._count -= 1

    def resize(self, new_size: int) -> None:
        """Rebuild the table with ``new_size`` slots, dropping tombstones."""
        if new_size == 0 or new_size > _SIZE_MAX // 2:
            raise ValueError(f"invalid table size: {new_size}")
        old_table = self._table
        self._table = [HashEntry() for _ in range(new_size)]
        self.size = new_size
        self._count = 0
        for entry in old_table:
            if entry.status is HashStatus.OCCUPIED:
                self.insert(entry.key, entry.value)

    def iterate(self, f: Callable[[int, Any], None]) -> None:
        """Call ``f(key_hash, value)`` for every stored value."""
        for key_hash, value in self:
            f(key_hash, value)

    def free_content(self) -> None:
        """Pass every stored value to ``val_free``."""
        for entry in self._table:
            if entry.status is HashStatus.OCCUPIED:
                self._val_free(entry.value)

    def release(self, content: bool) -> None:
        """Empty the map, handing stored values to ``val_free`` if ``content``."""
        if content:
            self.free_content()
        self._table = [HashEntry() for _ in range(self.size)]
        self._count = 0