import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions.base import InvalidRequestError, NotFoundError, UpstreamError
from domain.exceptions.weather import WeatherFetchError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={'error': message})


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidRequestError)
	async def invalid_request_handler(request: Request, exc: InvalidRequestError):
		logger.info(f'Rejected {request.url.path}: {exc}')
		return error_response(400, str(exc))

	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(request: Request, exc: RequestValidationError):
		logger.info(f'Validation error on {request.url.path}: {exc.errors()}')
		return error_response(400, 'Invalid request parameters.')

	@app.exception_handler(NotFoundError)
	async def not_found_handler(request: Request, exc: NotFoundError):
		return error_response(404, str(exc))

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(f'Upstream error on {request.url.path}: {exc}')
		return error_response(502, str(exc))

	@app.exception_handler(WeatherFetchError)
	async def weather_fetch_handler(request: Request, exc: WeatherFetchError):
		logger.error(f'Weather-today error: {exc}')
		return error_response(500, 'Could not fetch today weather.')

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception on {request.url.path}: {exc}', exc_info=True)
		return error_response(500, 'Internal server error.')
