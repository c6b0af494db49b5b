from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, model_validator


class ServiceKind(str, Enum):
	HTTP = "http-service"
	RPC = "rpc-service"


class StreamDirection(str, Enum):
	NONE = "none"
	REQUEST = "request"
	RESPONSE = "response"
	BIDIRECTIONAL = "bidirectional"


class DependencyType(str, Enum):
	DIRECT = "direct"
	INDIRECT = "indirect"


class ConfigFormat(str, Enum):
	YAML = "yaml"
	JSON = "json"
	TOML = "toml"


class Frozen(BaseModel):
	model_config = ConfigDict(frozen=True)


class Endpoint(Frozen):
	method: str
	path: str
	handler: str
	request: str = ""
	response: str = ""


class RPCMethod(Frozen):
	name: str
	request: str
	response: str
	stream: StreamDirection = StreamDirection.NONE


class HTTPSpec(Frozen):
	service_name: str
	endpoints: List[Endpoint] = []
	types: List[str] = []


class RPCSpec(Frozen):
	service_name: str
	methods: List[RPCMethod] = []
	messages: List[str] = []


class ServiceInfo(Frozen):
	name: str
	kind: ServiceKind
	path: str
	spec_file: str
	endpoints: List[Endpoint] = []
	rpc_methods: List[RPCMethod] = []

	@model_validator(mode="after")
	def _one_list_per_kind(self) -> "ServiceInfo":
		if self.kind is ServiceKind.HTTP and self.rpc_methods:
			raise ValueError("http-service cannot carry rpc_methods")
		if self.kind is ServiceKind.RPC and self.endpoints:
			raise ValueError("rpc-service cannot carry endpoints")
		return self


class Dependency(Frozen):
	name: str
	version: str
	type: DependencyType = DependencyType.DIRECT


class Manifest(Frozen):
	module: str = ""
	go_version: str = ""
	dependencies: List[Dependency] = []
	framework_version: str = ""


class ConfigFile(Frozen):
	path: str
	format: ConfigFormat


class SkippedFile(Frozen):
	path: str
	reason: str


class Summary(Frozen):
	total_services: int = 0
	api_services: int = 0
	rpc_services: int = 0
	total_endpoints: int = 0
	total_rpc_methods: int = 0
	total_dependencies: int = 0
	framework_version: str = ""

	@classmethod
	def from_lists(
		cls,
		services: List[ServiceInfo],
		dependencies: List[Dependency],
		framework_version: str = "",
	) -> "Summary":
		return cls(
			total_services=len(services),
			api_services=sum(1 for s in services if s.kind is ServiceKind.HTTP),
			rpc_services=sum(1 for s in services if s.kind is ServiceKind.RPC),
			total_endpoints=sum(len(s.endpoints) for s in services),
			total_rpc_methods=sum(len(s.rpc_methods) for s in services),
			total_dependencies=len(dependencies),
			framework_version=framework_version,
		)


class ProjectAnalysis(Frozen):
	"""Everything learned about one project tree in a single scan.

	The summary is never maintained by hand: construction fails unless it
	equals the reduction over ``services`` and ``dependencies``.
	"""

	project_path: str
	module: str = ""
	services: List[ServiceInfo] = []
	dependencies: List[Dependency] = []
	configs: List[ConfigFile] = []
	skipped: List[SkippedFile] = []
	summary: Summary = Summary()

	@model_validator(mode="after")
	def _summary_matches_lists(self) -> "ProjectAnalysis":
		expected = Summary.from_lists(
			self.services, self.dependencies, self.summary.framework_version
		)
		if self.summary != expected:
			raise ValueError("summary does not agree with services/dependencies")
		return self

	@classmethod
	def build(
		cls,
		project_path: str,
		services: List[ServiceInfo],
		manifest: Manifest,
		configs: List[ConfigFile],
		skipped: List[SkippedFile],
	) -> "ProjectAnalysis":
		return cls(
			project_path=project_path,
			module=manifest.module,
			services=services,
			dependencies=manifest.dependencies,
			configs=configs,
			skipped=skipped,
			summary=Summary.from_lists(
				services, manifest.dependencies, manifest.framework_version
			),
		)


class TableField(Frozen):
	name: str
	type: str
	clause: str = ""


class TableSchema(Frozen):
	table_name: str
	fields: List[TableField] = []
	primary_key: str = ""

	@property
	def field_names(self) -> List[str]:
		return [f.name for f in self.fields]
