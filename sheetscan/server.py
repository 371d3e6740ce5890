"""
HTTP API for browsing the project root.

Endpoints:
- GET  /api/health
- GET  /api/project-path
- POST /api/project-path   {"path": "..."}
- GET  /api/root-accessible
- GET  /api/scan?path=&extensions=.pdf&nameStartsWith=a&latestPerSheet=true&recursive=true
- GET  /api/scan-keywords?keywords=contract,scope
- GET  /api/count-files

Scan handlers are plain ``def`` functions so FastAPI runs each request on
its thread pool and one slow share does not stall the others.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from sheetscan.config import Config, ProjectRoot
from sheetscan.scanner import KeywordScanOptions, Scanner, ScanOptions, format_timestamp
from sheetscan.scanner.scanner import is_accessible

logger = logging.getLogger(__name__)


class ProjectPathRequest(BaseModel):
    path: Optional[str] = None


class ProjectPathResponse(BaseModel):
    path: str


class HealthResponse(BaseModel):
    ok: bool
    projectPath: str
    timestamp: str


class AccessibleResponse(BaseModel):
    accessible: bool


class CountResponse(BaseModel):
    count: int


def _get_root(request: Request) -> ProjectRoot:
    return request.app.state.project_root


def create_app(config: Config | None = None) -> FastAPI:
    config = config or Config.from_env()

    app = FastAPI(title="Sheet Scan", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.project_root = ProjectRoot(config.project_root)
    app.state.scanner = Scanner()

    @app.get("/api/health", response_model=HealthResponse)
    def health(request: Request) -> HealthResponse:
        return HealthResponse(
            ok=True,
            projectPath=str(_get_root(request).get()),
            timestamp=format_timestamp(datetime.now(timezone.utc)),
        )

    @app.get("/api/project-path", response_model=ProjectPathResponse)
    def get_project_path(request: Request) -> ProjectPathResponse:
        return ProjectPathResponse(path=str(_get_root(request).get()))

    @app.post("/api/project-path", response_model=ProjectPathResponse)
    def set_project_path(body: ProjectPathRequest, request: Request) -> ProjectPathResponse:
        root = _get_root(request)
        if body.path:
            logger.info("Project root changed to %s", body.path)
        return ProjectPathResponse(path=str(root.set(body.path or "")))

    @app.get("/api/root-accessible", response_model=AccessibleResponse)
    def root_accessible(request: Request) -> AccessibleResponse:
        return AccessibleResponse(accessible=is_accessible(_get_root(request).get()))

    @app.get("/api/scan")
    def scan(
        request: Request,
        path: str = "",
        extensions: Optional[str] = None,
        name_starts_with: Optional[str] = Query(None, alias="nameStartsWith"),
        name_contains: Optional[str] = Query(None, alias="nameContains"),
        latest_per_sheet: Optional[str] = Query(None, alias="latestPerSheet"),
        recursive: Optional[str] = None,
    ) -> dict[str, Any]:
        options = ScanOptions.from_query(
            _get_root(request).get(),
            path=path,
            extensions=extensions,
            name_starts_with=name_starts_with,
            name_contains=name_contains,
            latest_per_sheet=latest_per_sheet == "true",
            recursive=recursive != "false",
        )
        return request.app.state.scanner.scan_path(options).to_dict()

    @app.get("/api/scan-keywords")
    def scan_keywords(request: Request, keywords: Optional[str] = None) -> dict[str, Any]:
        options = KeywordScanOptions.from_query(_get_root(request).get(), keywords)
        return request.app.state.scanner.scan_keywords(options).to_dict()

    @app.get("/api/count-files", response_model=CountResponse)
    def count_files(request: Request) -> CountResponse:
        return CountResponse(count=request.app.state.scanner.count_files(_get_root(request).get()))

    return app
