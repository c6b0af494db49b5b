"""Analyzer package for extracting service, dependency and config facts from go-zero projects.

Modules:
- api_parse.py: HTTP service spec (.api) extraction.
- proto_parse.py: RPC service spec (.proto) extraction.
- manifest_parse.py: go.mod requirement parsing.
- model_parse.py: CREATE TABLE schema parsing.
- fs_scan.py: Project tree walk and file classification.
- cache.py: Time-bounded in-memory analysis cache.
- analyze.py: Cached analysis entry point.
- summarize.py: Deterministic textual report of an analysis.
- model.py: Data structures for analysis results.
"""

__all__ = [
	"api_parse",
	"proto_parse",
	"manifest_parse",
	"model_parse",
	"fs_scan",
	"cache",
	"analyze",
	"summarize",
	"model",
	"config",
	"errors",
]
