from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .model import ProjectAnalysis


logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


def canonical_path(path: str) -> str:
	return os.path.realpath(os.path.abspath(path))


@dataclass
class CacheEntry:
	analysis: ProjectAnalysis
	created_at: float


class AnalysisCache:
	"""In-memory, per-process table of recent analyses keyed by project path.

	Entries are replaced wholesale and never evicted; a stale entry stays in
	the table and is simply reported as a miss. One lock guards the whole
	table. Concurrent scans of the same path are not de-duplicated, the last
	``put`` wins.
	"""

	def __init__(self, ttl: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
		self.ttl = ttl
		self._clock = clock
		self._lock = threading.Lock()
		self._entries: Dict[str, CacheEntry] = {}

	def get(self, path: str) -> Optional[ProjectAnalysis]:
		key = canonical_path(path)
		with self._lock:
			entry = self._entries.get(key)
			now = self._clock()
		if entry is None:
			logger.debug("cache miss for %s", key)
			return None
		if now - entry.created_at >= self.ttl:
			logger.debug("cache entry for %s expired", key)
			return None
		return entry.analysis.model_copy(deep=True)

	def put(self, path: str, analysis: ProjectAnalysis) -> None:
		key = canonical_path(path)
		entry = CacheEntry(analysis=analysis.model_copy(deep=True), created_at=self._clock())
		with self._lock:
			self._entries[key] = entry

	def __len__(self) -> int:
		with self._lock:
			return len(self._entries)

	def __contains__(self, path: str) -> bool:
		with self._lock:
			return canonical_path(path) in self._entries
