"""
hash_index.py
=============
Fixed-size chained hash table mapping clue text to a suspect name.

The table is filled once from case_data.CLUE_SUSPECTS when a session starts
and is only read afterwards, by the explorer (live feedback when a clue is
found) and by the verdict (support counting).

Hashing is deliberately simple: the sum of the clue's character codes modulo
the bucket count. Collisions are resolved by chaining, and a new entry is
always prepended to its chain.

Duplicate keys
--------------
insert() does not check for an existing entry with the same text. Inserting
the same clue twice leaves both entries in the chain; because the newer one
sits in front, lookup() returns the newer suspect. The older mapping is
shadowed, not overwritten, and still counts towards len().
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from config import HASH_CONFIG
from models import HashBucketEntry

logger = logging.getLogger("mansion_mystery.hash_index")


class HashIndex:
    """
    Chained hash table: clue text → suspect.

    Attributes:
        bucket_count: Number of chains; fixed for the lifetime of the index.
    """

    def __init__(self, bucket_count: int = HASH_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be >= 1, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[HashBucketEntry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        bucket_count: int = HASH_CONFIG.bucket_count,
    ) -> HashIndex:
        """Build an index and insert every (clue_text, suspect) pair in order."""
        index = cls(bucket_count)
        for clue_text, suspect in pairs:
            index.insert(clue_text, suspect)
        logger.info(
            "HashIndex built — entries=%d, buckets=%d, longest chain=%d",
            len(index), index.bucket_count, max(index.chain_lengths(), default=0),
        )
        return index

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------

    def bucket_of(self, clue_text: str) -> int:
        """Return the bucket index for `clue_text`."""
        return sum(ord(ch) for ch in clue_text) % self.bucket_count

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, clue_text: str, suspect: str) -> bool:
        """
        Associate `clue_text` with `suspect`.

        The new entry is prepended to its bucket's chain, so it shadows any
        earlier entry for the same text (see module docstring).

        Returns:
            True if the entry was stored. False if allocating it failed; the
            index is left exactly as it was and the failure is logged.
        """
        bucket = self.bucket_of(clue_text)
        try:
            entry = HashBucketEntry(
                clue_text=clue_text,
                suspect=suspect,
                next=self._buckets[bucket],
            )
        except MemoryError:
            logger.error(
                "Could not allocate hash entry for clue %r → %r; association dropped.",
                clue_text, suspect,
            )
            return False

        self._buckets[bucket] = entry
        self._size += 1
        logger.debug("Indexed clue %r → %r in bucket %d", clue_text, suspect, bucket)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, clue_text: str) -> Optional[str]:
        """
        Return the suspect for `clue_text`, or None if it is not indexed.

        Scans the target chain from its head, so the most recently inserted
        matching entry wins.
        """
        entry = self._buckets[self.bucket_of(clue_text)]
        while entry is not None:
            if entry.clue_text == clue_text:
                return entry.suspect
            entry = entry.next
        return None

    def chain(self, bucket: int) -> List[Tuple[str, str]]:
        """Return the (clue_text, suspect) pairs of one bucket, head first."""
        pairs: List[Tuple[str, str]] = []
        entry = self._buckets[bucket]
        while entry is not None:
            pairs.append((entry.clue_text, entry.suspect))
            entry = entry.next
        return pairs

    def chain_lengths(self) -> List[int]:
        return [len(self.chain(b)) for b in range(self.bucket_count)]

    def suspects(self) -> List[str]:
        """Distinct suspect names reachable through lookup(), sorted."""
        names = set()
        for bucket in range(self.bucket_count):
            for clue_text, _ in self.chain(bucket):
                suspect = self.lookup(clue_text)
                if suspect is not None:
                    names.add(suspect)
        return sorted(names)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue_text: object) -> bool:
        return isinstance(clue_text, str) and self.lookup(clue_text) is not None
