from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel

from specscan.analyze import ProjectAnalyzer
from specscan.errors import NoTableDeclared, NotADirectory, PathNotFound
from specscan.model import ProjectAnalysis, TableSchema
from specscan.model_parse import parse_table_schema
from specscan.summarize import render_report


logger = logging.getLogger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
	project_path: str = ""


class AnalyzeResponse(BaseModel):
	analysis: ProjectAnalysis
	from_cache: bool
	report: str


class SchemaRequest(BaseModel):
	ddl: str


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest, request: Request) -> AnalyzeResponse:
	analyzer: ProjectAnalyzer = request.app.state.analyzer
	try:
		analysis, from_cache = analyzer.analyze(req.project_path)
	except PathNotFound as e:
		logger.warning("analyze rejected: %s", e)
		raise HTTPException(status_code=404, detail=str(e))
	except NotADirectory as e:
		logger.warning("analyze rejected: %s", e)
		raise HTTPException(status_code=400, detail=str(e))
	return AnalyzeResponse(
		analysis=analysis,
		from_cache=from_cache,
		report=render_report(analysis, from_cache),
	)


@router.post("/schema", response_model=TableSchema)
def schema(req: SchemaRequest) -> TableSchema:
	try:
		return parse_table_schema(req.ddl)
	except NoTableDeclared as e:
		raise HTTPException(status_code=422, detail=str(e))


def create_app(analyzer: Optional[ProjectAnalyzer] = None) -> FastAPI:
	app = FastAPI(title="specscan")
	app.state.analyzer = analyzer or ProjectAnalyzer()
	app.include_router(router)
	return app


app = create_app()
