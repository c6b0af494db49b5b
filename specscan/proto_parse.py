from __future__ import annotations

import re
from typing import List

from .errors import NoServiceDeclared, SpecUnreadable
from .model import RPCMethod, RPCSpec, StreamDirection


# Service and message names must start upper-case, as protoc style requires.
SERVICE_RE = re.compile(r"service\s+([A-Z][a-zA-Z0-9_]*)\s*{")
METHOD_RE = re.compile(
	r"rpc\s+([A-Z][a-zA-Z0-9_]*)\s*\(([^)]+)\)\s*returns\s*\(([^)]+)\)"
)
MESSAGE_RE = re.compile(r"message\s+([A-Z][a-zA-Z0-9_]*)\s*{")
STREAM_RE = re.compile(r"\bstream\b")


def _stream_direction(request: str, response: str) -> StreamDirection:
	direction = StreamDirection.NONE
	if STREAM_RE.search(request):
		direction = StreamDirection.REQUEST
	if STREAM_RE.search(response):
		if direction is StreamDirection.REQUEST:
			direction = StreamDirection.BIDIRECTIONAL
		else:
			direction = StreamDirection.RESPONSE
	return direction


def _type_name(param: str) -> str:
	return " ".join(STREAM_RE.sub(" ", param).split())


def _extract_methods(body: str) -> List[RPCMethod]:
	methods: List[RPCMethod] = []
	for m in METHOD_RE.finditer(body):
		name, request, response = m.groups()
		methods.append(
			RPCMethod(
				name=name,
				request=_type_name(request),
				response=_type_name(response),
				stream=_stream_direction(request, response),
			)
		)
	return methods


def parse_proto_spec(text: str) -> RPCSpec:
	match = SERVICE_RE.search(text)
	if match is None:
		raise NoServiceDeclared("rpc service")

	end = text.find("}", match.end())
	body = text[match.end():end] if end >= 0 else ""

	return RPCSpec(
		service_name=match.group(1),
		methods=_extract_methods(body),
		messages=[m.group(1) for m in MESSAGE_RE.finditer(text)],
	)


def parse_proto_file(path: str) -> RPCSpec:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise SpecUnreadable(path, e) from e
	return parse_proto_spec(text)
