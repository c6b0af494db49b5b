from __future__ import annotations

import re
from typing import List, Optional

from .errors import ManifestUnreadable
from .model import Dependency, DependencyType, Manifest


REQUIREMENT_RE = re.compile(r"^\s*([a-zA-Z0-9\-._/]+)\s+v([0-9.\-+a-zA-Z]+)")
REQUIRE_RE = re.compile(r"^require\b")
INDIRECT_MARKER = "// indirect"

DEFAULT_FRAMEWORK_PACKAGE = "go-zero"


def _requirement(line: str) -> Optional[Dependency]:
	m = REQUIREMENT_RE.match(line)
	if m is None:
		return None
	dep_type = DependencyType.INDIRECT if INDIRECT_MARKER in line else DependencyType.DIRECT
	return Dependency(name=m.group(1), version=m.group(2), type=dep_type)


def parse_manifest(text: str, framework_package: str = DEFAULT_FRAMEWORK_PACKAGE) -> Manifest:
	"""Parse a ``go.mod`` document.

	Requirements come from ``require ( ... )`` blocks and single-line
	``require name vX`` declarations, in document order. The framework
	version is taken from the first requirement whose name contains
	``framework_package`` and is not overwritten by later ones.
	"""
	module = ""
	go_version = ""
	deps: List[Dependency] = []
	framework_version = ""
	in_require = False

	for raw in text.splitlines():
		line = raw.strip()

		if in_require:
			if line == ")":
				in_require = False
				continue
			dep = _requirement(line)
		elif REQUIRE_RE.match(line):
			rest = REQUIRE_RE.sub("", line, count=1).strip()
			if rest.startswith("("):
				# Block opener; a requirement may share its line.
				rest = rest[1:].strip()
				in_require = rest != ")"
				if not in_require or not rest:
					continue
			dep = _requirement(rest)
		elif line.startswith("module ") and not module:
			module = line[len("module "):].strip()
			continue
		elif line.startswith("go ") and not go_version:
			go_version = line[len("go "):].strip()
			continue
		else:
			continue

		if dep is None:
			continue
		deps.append(dep)
		if not framework_version and framework_package in dep.name:
			framework_version = dep.version

	return Manifest(
		module=module,
		go_version=go_version,
		dependencies=deps,
		framework_version=framework_version,
	)


def parse_manifest_file(path: str, framework_package: str = DEFAULT_FRAMEWORK_PACKAGE) -> Manifest:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise ManifestUnreadable(path, e) from e
	return parse_manifest(text, framework_package)
