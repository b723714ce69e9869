"""
REST API implementation for the Roster platform using FastAPI.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Type

from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.exceptions import RosterException, ValidationError
from ..services.base_service import DomainService
from ..services.registry import ServiceRegistry
from .schemas import (
    ClassCreate, ClassUpdate, ParentCreate, ParentUpdate, StudentCreate, StudentUpdate,
    TeacherCreate, TeacherUpdate, request_fields,
)

logger = logging.getLogger(__name__)


def error_body(exc: RosterException) -> Dict[str, Any]:
    body = {"code": exc.error_code, "message": exc.message, "name": exc.name}
    if isinstance(exc, ValidationError):
        body["errors"] = exc.errors
    return body


def install_error_handlers(app: FastAPI) -> None:
    """Map domain errors onto status codes with a ``{code, message, name}`` body."""

    @app.exception_handler(RosterException)
    async def roster_error_handler(request: Request, exc: RosterException):
        if exc.status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status, content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"path": ".".join(str(part) for part in err["loc"] if part != "body"), "reason": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=422, content=error_body(ValidationError(errors)))

    @app.exception_handler(Exception)
    async def unknown_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"code": "UNKNOWN_ERROR", "message": str(exc), "name": exc.__class__.__name__},
        )


def crud_router(service: DomainService, create_model: Type[BaseModel], update_model: Type[BaseModel]) -> APIRouter:
    """List/get/create/update/delete routes for one entity kind."""
    router = APIRouter()

    @router.get("", response_model=List[Dict[str, Any]])
    def list_entities():
        return [entity.to_dict() for entity in service.list()]

    @router.get("/{entity_id}", response_model=Dict[str, Any])
    def get_entity(entity_id: str):
        return service.find_by_id(entity_id).to_dict()

    @router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
    def create_entity(payload: create_model):
        return service.create(request_fields(payload)).to_dict()

    @router.put("/{entity_id}", response_model=Dict[str, Any])
    def update_entity(entity_id: str, payload: update_model):
        return service.update(entity_id, request_fields(payload, partial=True)).to_dict()

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(entity_id: str):
        service.remove(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


class RosterRestAPI:
    """REST API implementation for the Roster platform."""

    def __init__(self, services: ServiceRegistry, title: str = "Roster School Records API",
                 cors_origins: List[str] = None):
        self._services = services

        self.app = FastAPI(
            title=title,
            description="Classes, students, teachers and parents",
            version="1.0.0",
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or ["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        install_error_handlers(self.app)
        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""
        services = self._services

        @self.app.get("/health", response_model=Dict[str, str])
        def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        classes = crud_router(services.classes, ClassCreate, ClassUpdate)

        @classes.get("/{class_id}/teacher", response_model=Dict[str, Any])
        def get_class_teacher(class_id: str):
            return services.classes.get_teacher(class_id).to_dict()

        @classes.get("/{class_id}/students", response_model=List[Dict[str, Any]])
        def get_class_students(class_id: str):
            return [student.to_dict() for student in services.classes.get_students(class_id)]

        students = crud_router(services.students, StudentCreate, StudentUpdate)

        @students.get("/{student_id}/class", response_model=Dict[str, Any])
        def get_student_class(student_id: str):
            return services.students.get_class(student_id).to_dict()

        @students.get("/{student_id}/parents", response_model=List[Dict[str, Any]])
        def get_student_parents(student_id: str):
            return [parent.to_dict() for parent in services.students.get_parents(student_id)]

        teachers = crud_router(services.teachers, TeacherCreate, TeacherUpdate)

        @teachers.get("/{teacher_id}/classes", response_model=List[Dict[str, Any]])
        def get_teacher_classes(teacher_id: str):
            return [school_class.to_dict() for school_class in services.teachers.get_classes(teacher_id)]

        parents = crud_router(services.parents, ParentCreate, ParentUpdate)

        @parents.get("/{parent_id}/students", response_model=List[Dict[str, Any]])
        def get_parent_students(parent_id: str):
            return [student.to_dict() for student in services.parents.get_students(parent_id)]

        self.app.include_router(classes, prefix="/classes", tags=["classes"])
        self.app.include_router(students, prefix="/students", tags=["students"])
        self.app.include_router(teachers, prefix="/teachers", tags=["teachers"])
        self.app.include_router(parents, prefix="/parents", tags=["parents"])
