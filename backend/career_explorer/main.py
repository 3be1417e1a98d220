"""FastAPI application entrypoint, HTTP controllers and HTML pages.

This module defines the REST API and the browser pages of the Career Path
Explorer. Controllers are intentionally thin: they accept requests,
delegate to services, and return JSON responses (or rendered pages).

Endpoints implemented:
- GET /api/roles
- GET /api/roles/{role_id}
- GET /api/roles/{role_id}/resources
- POST /api/roles
- POST /api/resources
- GET /api
- GET /health

Pages:
- GET /
- GET /roles/{role_id}

Every JSON error has the shape `{"error": ..., "details": ...}`.
"""

import json
import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import pages, schemas, services
from .config import settings
from .database import create_db_and_tables, engine, get_session
from .services import RoleNotFoundError

API_VERSION = "1.0.0"
ERROR_RESPONSES = {code: {"model": schemas.ErrorOut} for code in (400, 404, 500)}

logger = logging.getLogger("career_explorer.api")
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

app = FastAPI(title="Career Path Explorer API", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

static_dir = Path(__file__).resolve().parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

create_db_and_tables()


def _seed_if_empty():
    with Session(engine) as session:
        seeder = services.SeedService(session)
        if seeder.is_empty():
            summary = seeder.seed(reset=False)
            logger.info("Seeded empty database on startup: %s", summary)


if settings.SEED_ON_STARTUP:
    _seed_if_empty()


def _log_line(event: str, payload: dict, exc_info: bool = False):
    log = logger.exception if exc_info else logger.info
    log("%s %s", event, json.dumps(payload, ensure_ascii=True))


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    logged = not request.url.path.startswith("/static")
    context = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "client": request.client.host if request.client else "unknown",
    }
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        _log_line("request_failed", {**context, "duration_ms": elapsed_ms}, exc_info=True)
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if logged:
        _log_line("request_done", {**context, "status_code": response.status_code, "duration_ms": elapsed_ms})
    return response


def api_error(status_code: int, error: str, details: Optional[str] = None) -> HTTPException:
    """Build an `HTTPException` whose body is `{"error", "details"}`."""
    return HTTPException(status_code=status_code, detail={"error": error, "details": details})


def _wants_html(request: Request) -> bool:
    if request.url.path.startswith("/api") or request.url.path == "/health":
        return False
    return "text/html" in request.headers.get("accept", "")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        content = exc.detail
    elif exc.status_code in (404, 405):
        # a path without a handler for this method is an unknown route
        if _wants_html(request):
            return HTMLResponse(pages.render_not_found(), status_code=404)
        return JSONResponse(status_code=404, content={
            "error": "Not Found",
            "details": f"Route {request.method} {request.url.path} does not exist",
        })
    else:
        content = {"error": str(exc.detail), "details": f"Request {request.method} {request.url.path} failed"}
    if exc.status_code >= 500:
        logger.error("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, content)
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = schemas.format_validation_errors(exc.errors())
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": details})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Error occurred: %s (method=%s path=%s query=%s)",
        exc,
        request.method,
        request.url.path,
        request.url.query,
        exc_info=exc,
    )
    details = str(exc) if settings.is_dev else None
    return JSONResponse(status_code=500, content={"error": "Internal server error", "details": details})


def _role_id_or_400(raw: str) -> int:
    try:
        return services.parse_role_id(raw)
    except ValueError as e:
        raise api_error(400, "Invalid ID format", str(e))


@app.get("/api/roles", response_model=schemas.RoleListResponse, responses=ERROR_RESPONSES)
def list_roles(db: Session = Depends(get_session)):
    """List every role as a summary (id, name, short description) ordered by id."""
    try:
        roles = services.CatalogService(db).list_roles()
        return schemas.RoleListResponse(roles=[schemas.RoleSummaryOut.model_validate(r) for r in roles])
    except SQLAlchemyError as e:
        logger.exception("Error fetching roles")
        raise api_error(500, "Failed to fetch roles", str(e))


@app.get("/api/roles/{role_id}", response_model=schemas.RoleDetailResponse, responses=ERROR_RESPONSES)
def get_role(role_id: str, db: Session = Depends(get_session)):
    """Return one role with its full text and all of its resources."""
    rid = _role_id_or_400(role_id)
    try:
        role = services.CatalogService(db).get_role(rid)
        return schemas.RoleDetailResponse(role=schemas.RoleWithResourcesOut.model_validate(role))
    except RoleNotFoundError as e:
        raise api_error(404, "Role not found", str(e))
    except SQLAlchemyError as e:
        logger.exception("Error fetching role by ID %s", rid)
        raise api_error(500, "Failed to fetch role", str(e))


@app.get("/api/roles/{role_id}/resources", response_model=schemas.ResourceListResponse, responses=ERROR_RESPONSES)
def list_role_resources(role_id: str, difficulty: Optional[str] = None, db: Session = Depends(get_session)):
    """List the resources of a role, optionally only those of one difficulty.

    `difficulty=All` (or no parameter) returns every resource.
    """
    rid = _role_id_or_400(role_id)
    try:
        level = services.parse_difficulty(difficulty)
    except ValueError as e:
        raise api_error(400, "Validation failed", str(e))
    try:
        resources = services.CatalogService(db).list_resources(rid, level)
        return schemas.ResourceListResponse(resources=[schemas.ResourceOut.model_validate(r) for r in resources])
    except RoleNotFoundError as e:
        raise api_error(404, "Role not found", str(e))
    except SQLAlchemyError as e:
        logger.exception("Error fetching resources for role %s", rid)
        raise api_error(500, "Failed to fetch resources", str(e))


@app.post("/api/roles", status_code=201, response_model=schemas.RoleResponse, responses=ERROR_RESPONSES)
def create_role(payload: schemas.RoleCreate, db: Session = Depends(get_session)):
    """Create a role. Responsibilities and skills default to empty lists."""
    try:
        role = services.CatalogService(db).create_role(payload)
        return schemas.RoleResponse(role=schemas.RoleOut.model_validate(role))
    except SQLAlchemyError as e:
        logger.exception("Error creating role")
        raise api_error(500, "Failed to create role", str(e))


@app.post("/api/resources", status_code=201, response_model=schemas.ResourceResponse, responses=ERROR_RESPONSES)
def create_resource(payload: schemas.ResourceCreate, db: Session = Depends(get_session)):
    """Create a learning resource for an existing role (404 if the role is unknown)."""
    try:
        resource = services.CatalogService(db).create_resource(payload)
        return schemas.ResourceResponse(resource=schemas.ResourceOut.model_validate(resource))
    except RoleNotFoundError as e:
        raise api_error(404, "Role not found", str(e))
    except SQLAlchemyError as e:
        logger.exception("Error creating resource")
        raise api_error(500, "Failed to create resource", str(e))


@app.get("/api")
def api_info():
    """Describe the API and list its entry points."""
    return {
        "message": "Career Path Explorer API",
        "version": API_VERSION,
        "endpoints": {
            "roles": "/api/roles",
            "resources": "/api/resources",
            "health": "/health",
        },
    }


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok", "message": "Server is running"}


@app.get("/", response_class=HTMLResponse)
def landing_page(db: Session = Depends(get_session)):
    """Landing page listing every role as a card."""
    try:
        roles = services.CatalogService(db).list_roles()
    except SQLAlchemyError:
        logger.exception("Error loading roles for landing page")
        return HTMLResponse(
            pages.render_landing([], error="Failed to load roles. Please try again later."),
            status_code=500,
        )
    return HTMLResponse(pages.render_landing(roles))


@app.get("/roles/{role_id}", response_class=HTMLResponse)
def role_detail_page(role_id: str, difficulty: Optional[str] = None, db: Session = Depends(get_session)):
    """Detail page of one role with its resources filtered by `difficulty`.

    Unknown filter values show every resource.
    """
    try:
        rid = services.parse_role_id(role_id)
    except ValueError:
        return HTMLResponse(pages.render_role_error("Invalid role ID"), status_code=400)
    selected = difficulty if difficulty in pages.FILTER_OPTIONS else "All"
    try:
        role = services.CatalogService(db).get_role(rid)
        resources = [r for r in role.resources if selected == "All" or r.difficulty == selected]
    except RoleNotFoundError:
        return HTMLResponse(pages.render_role_error("Role not found"), status_code=404)
    except SQLAlchemyError:
        logger.exception("Error loading role %s for detail page", rid)
        return HTMLResponse(
            pages.render_role_error("Failed to load role details. Please try again later."),
            status_code=500,
        )
    return HTMLResponse(pages.render_role_detail(role, resources, selected))
