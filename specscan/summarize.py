from __future__ import annotations

import os
from typing import Any, Dict, List

from .model import DependencyType, ProjectAnalysis, ServiceInfo, ServiceKind, StreamDirection


MAX_LISTED_DEPENDENCIES = 10


def summarize_service(index: int, service: ServiceInfo) -> str:
	parts: List[str] = []
	parts.append(f"{index}. {service.name or '<unnamed>'} ({service.kind.value})")
	parts.append(f"   Path: {service.path}")
	parts.append(f"   Spec: {service.spec_file}")
	if service.kind is ServiceKind.HTTP and service.endpoints:
		parts.append("   Endpoints:")
		for ep in service.endpoints:
			parts.append(f"     - {ep.method} {ep.path} ({ep.handler})")
	if service.kind is ServiceKind.RPC and service.rpc_methods:
		parts.append("   RPC Methods:")
		for m in service.rpc_methods:
			stream = "" if m.stream is StreamDirection.NONE else f" [stream: {m.stream.value}]"
			parts.append(f"     - {m.name}({m.request}) returns {m.response}{stream}")
	return "\n".join(parts)


def render_report(analysis: ProjectAnalysis, from_cache: bool = False) -> str:
	summary = analysis.summary
	sections: List[str] = []

	header = f"Project Analysis: {analysis.project_path}"
	if from_cache:
		header += "\n\n(Results from cache)"
	sections.append(header)

	lines = [
		"=== Summary ===",
		f"Total Services: {summary.total_services}",
		f"  - API Services: {summary.api_services}",
		f"  - RPC Services: {summary.rpc_services}",
		f"Total Endpoints: {summary.total_endpoints}",
		f"Total RPC Methods: {summary.total_rpc_methods}",
		f"Dependencies: {summary.total_dependencies}",
	]
	if summary.framework_version:
		lines.append(f"Framework Version: {summary.framework_version}")
	sections.append("\n".join(lines))

	if analysis.services:
		lines = ["=== Services ==="]
		for i, service in enumerate(analysis.services, start=1):
			lines.append(summarize_service(i, service))
		sections.append("\n".join(lines))

	direct = [d for d in analysis.dependencies if d.type is DependencyType.DIRECT]
	if direct:
		lines = ["=== Key Dependencies ==="]
		for dep in direct[:MAX_LISTED_DEPENDENCIES]:
			lines.append(f"  - {dep.name} {dep.version}")
		if len(direct) > MAX_LISTED_DEPENDENCIES:
			lines.append(f"  ... and {len(direct) - MAX_LISTED_DEPENDENCIES} more direct dependencies")
		sections.append("\n".join(lines))

	if analysis.configs:
		lines = ["=== Configuration Files ==="]
		for cfg in analysis.configs:
			rel = os.path.relpath(cfg.path, analysis.project_path)
			lines.append(f"  - {rel} ({cfg.format.value})")
		sections.append("\n".join(lines))

	if analysis.skipped:
		lines = ["=== Skipped Files ==="]
		for s in analysis.skipped:
			rel = os.path.relpath(s.path, analysis.project_path)
			lines.append(f"  - {rel}: {s.reason}")
		sections.append("\n".join(lines))

	return "\n\n".join(sections) + "\n"


def report_data(analysis: ProjectAnalysis, from_cache: bool = False) -> Dict[str, Any]:
	summary = analysis.summary
	return {
		"project_path": analysis.project_path,
		"total_services": summary.total_services,
		"api_services": summary.api_services,
		"rpc_services": summary.rpc_services,
		"total_endpoints": summary.total_endpoints,
		"total_rpc_methods": summary.total_rpc_methods,
		"dependencies": summary.total_dependencies,
		"framework_version": summary.framework_version,
		"skipped_files": len(analysis.skipped),
		"from_cache": from_cache,
	}
