import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.errors import (
    NoAutenticadoError,
    NoEncontradoError,
    PermisoDenegadoError,
    ValidacionError,
)

logger = logging.getLogger(__name__)


def _respuesta(status_code: int, msg: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "msg": msg, **extra})


def _campo(loc: tuple) -> str:
    partes = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(partes)


async def validacion_handler(request: Request, exc: ValidacionError) -> JSONResponse:
    return _respuesta(status.HTTP_400_BAD_REQUEST, str(exc), errores=exc.errores)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errores = {_campo(tuple(e["loc"])): e["msg"] for e in exc.errors()}
    return _respuesta(status.HTTP_400_BAD_REQUEST, "Datos no válidos", errores=errores)


async def no_autenticado_handler(request: Request, exc: NoAutenticadoError) -> JSONResponse:
    return _respuesta(status.HTTP_401_UNAUTHORIZED, str(exc))


async def permiso_denegado_handler(
    request: Request, exc: PermisoDenegadoError
) -> JSONResponse:
    return _respuesta(status.HTTP_403_FORBIDDEN, str(exc))


async def no_encontrado_handler(request: Request, exc: NoEncontradoError) -> JSONResponse:
    return _respuesta(status.HTTP_404_NOT_FOUND, str(exc), entidad=exc.entidad)


async def error_interno_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"❌ Error no controlado en {request.method} {request.url.path}")
    return _respuesta(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Error interno, contacte al administrador",
    )


def registrar_manejadores(app: FastAPI) -> None:
    app.add_exception_handler(ValidacionError, validacion_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NoAutenticadoError, no_autenticado_handler)
    app.add_exception_handler(PermisoDenegadoError, permiso_denegado_handler)
    app.add_exception_handler(NoEncontradoError, no_encontrado_handler)
    app.add_exception_handler(Exception, error_interno_handler)
