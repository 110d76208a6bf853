"""
Errores de la API de mascotas y sus handlers para FastAPI.

Todas las respuestas de error tienen la forma {"message": ..., "errors": [...]}
("errors" solo cuando hay detalle por campo).
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Pet data validation failed."
INVALID_ID = "Pet identifier is not a valid MongoDB ObjectId."
NOT_FOUND = "Pet was not found."


class PetApiError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = list(self.errors)
        return body


class PetValidationError(PetApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[str], message: str = VALIDATION_FAILED):
        super().__init__(message, errors)


class InvalidPetIdentifier(PetApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = INVALID_ID):
        super().__init__(message)


class PetNotFound(PetApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = NOT_FOUND):
        super().__init__(message)


async def pet_api_error_handler(request: Request, exc: PetApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        errors.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request body is not valid JSON.", "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found."
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # el detalle completo solo va al log, nunca al cliente
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PetApiError, pet_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
