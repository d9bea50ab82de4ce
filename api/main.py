import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, quote, weather
from config.logging_config import setup_logging
from config.settings import get_settings

settings = get_settings()
setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info(f'Starting {settings.APP_NAME}...')

	init_dependencies()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.CORS_ORIGINS,
	allow_methods=['GET'],
	allow_headers=['*'],
)


@app.get('/', summary='API Information')
async def root():
	return {'message': f'{settings.APP_NAME} is running.'}


app.include_router(currency.router)
app.include_router(weather.router)
app.include_router(quote.router)
register_exception_handlers(app)


if __name__ == '__main__':
	import uvicorn

	uvicorn.run('api.main:app', host=settings.HOST, port=settings.PORT, log_level='info')
