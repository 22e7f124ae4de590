from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.config.di import container
from src.platform.exception.exceptions import CustomBaseError, StoreUnavailableError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

INTERNAL_ERROR_MESSAGE = 'Internal server error'


async def _report_error(request: Request, message: str, detail: str) -> None:
    await container.event_sink().emit(
        level='error',
        message=message,
        metadata={'error': detail, 'path': request.url.path, 'method': request.method},
    )


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return JSONResponse(status_code=error.status_code, content={'message': error.message})


async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    detail = exc.detail if isinstance(exc, StoreUnavailableError) else str(exc)
    Logger.base.error(f'🗄️ [STORE] {request.method} {request.url.path} failed: {detail}')
    await _report_error(request, 'Store unavailable', detail)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': INTERNAL_ERROR_MESSAGE},
    )


# Rejected input is not echoed back; it may hold values JSON cannot carry (NaN, Infinity)
def _public_errors(error: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {'loc': list(item['loc']), 'msg': item['msg'], 'type': item['type']}
        for item in error.errors()
    ]


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'message': 'Invalid request', 'errors': _public_errors(error)},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [UNHANDLED] {request.method} {request.url.path}: {type(exc).__name__}: {exc}'
    )
    await _report_error(request, 'Unhandled error', f'{type(exc).__name__}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': INTERNAL_ERROR_MESSAGE},
    )


# Exception handler mapping (most specific first)
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    StoreUnavailableError: store_unavailable_handler,
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
