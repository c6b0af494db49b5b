from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .api_parse import parse_api_file
from .config import Settings, get_settings
from .errors import ExtractionError, ManifestUnreadable, NotADirectory, PathNotFound
from .manifest_parse import parse_manifest_file
from .model import (
	ConfigFile,
	ConfigFormat,
	Manifest,
	ProjectAnalysis,
	ServiceInfo,
	ServiceKind,
	SkippedFile,
)
from .proto_parse import parse_proto_file


logger = logging.getLogger(__name__)

HTTP_SPEC_SUFFIX = ".api"
RPC_SPEC_SUFFIX = ".proto"

CONFIG_FORMATS: Dict[str, ConfigFormat] = {
	".yaml": ConfigFormat.YAML,
	".yml": ConfigFormat.YAML,
	".json": ConfigFormat.JSON,
	".toml": ConfigFormat.TOML,
}

# (name, predicate(lower-cased file name, containing dir, settings))
ConfigPredicate = Tuple[str, Callable[[str, str, Settings], bool]]

CONFIG_PREDICATES: Tuple[ConfigPredicate, ...] = (
	("name-contains-config", lambda name, _dir, _s: "config" in name),
	("name-contains-settings", lambda name, _dir, _s: "settings" in name),
	("conventional-name", lambda name, _dir, s: name in s.conventional_config_names),
	(
		"etc-directory",
		lambda _name, dirpath, s: s.etc_dir_configs and os.path.basename(dirpath) == "etc",
	),
)


def is_pruned_dir(name: str, settings: Settings) -> bool:
	return name.startswith(".") or name in settings.pruned_dirs


def match_config_predicate(filename: str, dirpath: str, settings: Settings) -> Optional[str]:
	name = filename.lower()
	for label, predicate in CONFIG_PREDICATES:
		if predicate(name, dirpath, settings):
			return label
	return None


def detect_config_format(filename: str, dirpath: str, settings: Settings) -> Optional[ConfigFormat]:
	_, ext = os.path.splitext(filename)
	fmt = CONFIG_FORMATS.get(ext.lower())
	if fmt is None:
		return None
	if match_config_predicate(filename, dirpath, settings) is None:
		return None
	return fmt


def walk_project(root: str, settings: Settings) -> Iterable[Tuple[str, str]]:
	"""Yield ``(dirpath, filename)`` for every file outside pruned subtrees."""
	# os.walk ignores unreadable directories when no onerror is given
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if not is_pruned_dir(d, settings))
		for filename in sorted(filenames):
			yield dirpath, filename


def _http_service(path: str) -> ServiceInfo:
	spec = parse_api_file(path)
	return ServiceInfo(
		name=spec.service_name,
		kind=ServiceKind.HTTP,
		path=os.path.dirname(path),
		spec_file=path,
		endpoints=spec.endpoints,
	)


def _rpc_service(path: str) -> ServiceInfo:
	spec = parse_proto_file(path)
	return ServiceInfo(
		name=spec.service_name,
		kind=ServiceKind.RPC,
		path=os.path.dirname(path),
		spec_file=path,
		rpc_methods=spec.methods,
	)


SPEC_PARSERS: Dict[str, Callable[[str], ServiceInfo]] = {
	HTTP_SPEC_SUFFIX: _http_service,
	RPC_SPEC_SUFFIX: _rpc_service,
}


def _load_manifest(root: str, settings: Settings, skipped: List[SkippedFile]) -> Manifest:
	path = os.path.join(root, settings.manifest_name)
	if not os.path.isfile(path):
		return Manifest()
	try:
		return parse_manifest_file(path, settings.framework_package)
	except ManifestUnreadable as e:
		logger.debug("skipping manifest %s: %s", path, e)
		skipped.append(SkippedFile(path=path, reason=str(e.cause)))
		return Manifest()


def scan_project(root: str, settings: Optional[Settings] = None) -> ProjectAnalysis:
	settings = settings or get_settings()
	root = os.path.abspath(root)
	if not os.path.exists(root):
		raise PathNotFound(root)
	if not os.path.isdir(root):
		raise NotADirectory(root)

	services: List[ServiceInfo] = []
	configs: List[ConfigFile] = []
	skipped: List[SkippedFile] = []

	for dirpath, filename in walk_project(root, settings):
		path = os.path.join(dirpath, filename)
		_, ext = os.path.splitext(filename)

		parser = SPEC_PARSERS.get(ext)
		if parser is not None:
			try:
				services.append(parser(path))
			except ExtractionError as e:
				logger.debug("skipping spec %s: %s", path, e)
				skipped.append(SkippedFile(path=path, reason=str(e)))
			continue

		fmt = detect_config_format(filename, dirpath, settings)
		if fmt is not None:
			configs.append(ConfigFile(path=path, format=fmt))

	manifest = _load_manifest(root, settings, skipped)
	analysis = ProjectAnalysis.build(root, services, manifest, configs, skipped)
	logger.info(
		"scanned %s: %d services, %d configs, %d dependencies, %d skipped",
		root,
		analysis.summary.total_services,
		len(configs),
		analysis.summary.total_dependencies,
		len(skipped),
	)
	return analysis
