from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from .cache import AnalysisCache, canonical_path
from .config import Settings, get_settings
from .fs_scan import scan_project
from .model import ProjectAnalysis


logger = logging.getLogger(__name__)


class ProjectAnalyzer:
	"""Entry point used by the CLI and HTTP layers.

	``analyze`` returns ``(analysis, from_cache)`` and raises ``PathNotFound``
	or ``NotADirectory`` for a bad target. The cache is injected so that
	callers decide its lifetime.
	"""

	def __init__(self, cache: Optional[AnalysisCache] = None, settings: Optional[Settings] = None):
		self.settings = settings or get_settings()
		self.cache = cache if cache is not None else AnalysisCache(ttl=self.settings.cache_ttl_seconds)

	def analyze(self, path: str = "") -> Tuple[ProjectAnalysis, bool]:
		# Symlinked aliases of one project share a cache entry and a project_path.
		project_path = canonical_path(path or os.getcwd())

		cached = self.cache.get(project_path)
		if cached is not None:
			logger.debug("serving cached analysis for %s", project_path)
			return cached, True

		analysis = scan_project(project_path, self.settings)
		self.cache.put(project_path, analysis)
		return analysis, False
