from __future__ import annotations

import re
from typing import List

from .errors import NoServiceDeclared, SpecUnreadable
from .model import Endpoint, HTTPSpec


SERVICE_RE = re.compile(r"service\s+([a-zA-Z0-9_-]+)\s*{")
HANDLER_RE = re.compile(
	r"@handler\s+(\w+)\s+(\w+)\s+(/[^\s(]*)\s*"
	r"(?:\(([^)]+)\))?\s*"
	r"(?:returns\s*\(([^)]+)\))?"
)
TYPE_RE = re.compile(r"type\s+(\w+)\s+(?:struct\s*)?{")

API_SUFFIX = "-api"


def _service_body(text: str, body_start: int) -> str:
	# Only the first closing brace ends the block; nested braces are not tracked.
	end = text.find("}", body_start)
	if end < 0:
		return ""
	return text[body_start:end]


def _extract_endpoints(body: str) -> List[Endpoint]:
	endpoints: List[Endpoint] = []
	for m in HANDLER_RE.finditer(body):
		handler, verb, path, request, response = m.groups()
		endpoints.append(
			Endpoint(
				method=verb.upper(),
				path=path,
				handler=handler,
				request=(request or "").strip(),
				response=(response or "").strip(),
			)
		)
	return endpoints


def _extract_types(text: str) -> List[str]:
	return [m.group(1) for m in TYPE_RE.finditer(text)]


def parse_api_spec(text: str) -> HTTPSpec:
	match = SERVICE_RE.search(text)
	if match is None:
		raise NoServiceDeclared("http service")

	name = match.group(1)
	while name.endswith(API_SUFFIX):
		name = name[: -len(API_SUFFIX)]

	return HTTPSpec(
		service_name=name,
		endpoints=_extract_endpoints(_service_body(text, match.end())),
		types=_extract_types(text),
	)


def parse_api_file(path: str) -> HTTPSpec:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise SpecUnreadable(path, e) from e
	return parse_api_spec(text)
