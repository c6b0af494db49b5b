from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from specscan.analyze import ProjectAnalyzer
from specscan.config import get_settings
from specscan.errors import AnalyzerError
from specscan.model_parse import parse_table_schema
from specscan.summarize import render_report, report_data


def cmd_analyze(args: argparse.Namespace) -> int:
	analysis, from_cache = ProjectAnalyzer().analyze(args.path)
	if args.json:
		payload = {
			"analysis": analysis.model_dump(mode="json"),
			"summary": report_data(analysis, from_cache),
		}
		print(json.dumps(payload, indent=2))
	else:
		print(render_report(analysis, from_cache), end="")
	return 0


def cmd_schema(args: argparse.Namespace) -> int:
	with open(args.file, "r", encoding="utf-8") as fh:
		ddl = fh.read()
	print(json.dumps(parse_table_schema(ddl).model_dump(mode="json"), indent=2))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="specscan")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a go-zero project and print its services")
	pa.add_argument("path", nargs="?", default="", help="Project root (default: current directory)")
	pa.add_argument("--json", action="store_true", help="Print the analysis as JSON")
	pa.set_defaults(func=cmd_analyze)

	psc = sub.add_parser("schema", help="Parse a CREATE TABLE statement from a file")
	psc.add_argument("file", help="Path to a .sql file")
	psc.set_defaults(func=cmd_schema)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	level = logging.DEBUG if args.verbose else get_settings().log_level.upper()
	logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
	try:
		return args.func(args)
	except (AnalyzerError, OSError) as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1


if __name__ == "__main__":
	sys.exit(main())
