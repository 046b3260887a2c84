# kura_translator/api/exception_mappers.py
"""
Exception to HTTP response mapping.

Every mapper logs the full exception server-side and answers with an
ExceptionInfo body. Stack traces and raw payloads never leave the server.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from kura_translator.translation.exceptions import (
    InvalidPayloadError,
    TranslatorError,
    TranslatorNotFoundError,
)

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "An internal server error occurred"


class ExceptionInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "exceptionInfo"
    http_error_code: int = Field(..., alias="httpErrorCode")
    message: str
    error_code: Optional[str] = Field(None, alias="errorCode")


def _response(status_code: int, message: str, error_code: Optional[str]) -> JSONResponse:
    info = ExceptionInfo(http_error_code=status_code, message=message, error_code=error_code)
    return JSONResponse(status_code=status_code, content=info.model_dump(by_alias=True))


async def translator_not_found_handler(request: Request, exc: TranslatorNotFoundError) -> JSONResponse:
    logger.error(str(exc), exc_info=exc)
    return _response(404, str(exc), exc.error_code)


async def invalid_payload_handler(request: Request, exc: InvalidPayloadError) -> JSONResponse:
    logger.error(
        f"{exc} (connector={exc.raw_message.connector_name}, body={exc.raw_message.body_hex()})",
        exc_info=exc,
    )
    return _response(500, INTERNAL_SERVER_ERROR_MESSAGE, exc.error_code)


async def translator_error_handler(request: Request, exc: TranslatorError) -> JSONResponse:
    logger.error(str(exc), exc_info=exc)
    return _response(500, INTERNAL_SERVER_ERROR_MESSAGE, exc.error_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _response(500, INTERNAL_SERVER_ERROR_MESSAGE, None)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TranslatorNotFoundError, translator_not_found_handler)
    app.add_exception_handler(InvalidPayloadError, invalid_payload_handler)
    app.add_exception_handler(TranslatorError, translator_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
