"""Exceptions raised by the analyzer.

Hard errors (``PathError`` subclasses) reach the caller. ``ExtractionError``
subclasses are soft while a tree is being scanned: the scanner records the
file as skipped and moves on.
"""

from __future__ import annotations


class AnalyzerError(Exception):
	pass


class PathError(AnalyzerError):
	def __init__(self, path: str, message: str):
		self.path = path
		super().__init__(f"{message}: {path}")


class PathNotFound(PathError):
	def __init__(self, path: str):
		super().__init__(path, "project path does not exist")


class NotADirectory(PathError):
	def __init__(self, path: str):
		super().__init__(path, "project path is not a directory")


class ManifestUnreadable(PathError):
	def __init__(self, path: str, cause: BaseException):
		self.cause = cause
		super().__init__(path, f"failed to read manifest ({cause})")


class ExtractionError(AnalyzerError):
	pass


class NoServiceDeclared(ExtractionError):
	def __init__(self, kind: str = "service"):
		super().__init__(f"no {kind} block declared")


class NoTableDeclared(ExtractionError):
	def __init__(self):
		super().__init__("no table name found in DDL")


class SpecUnreadable(ExtractionError):
	def __init__(self, path: str, cause: BaseException):
		self.path = path
		super().__init__(f"failed to read spec file {path}: {cause}")
