from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_weather_service
from api.schemas import ErrorResponse, WeatherTodayResponse
from application.services import WeatherService

router = APIRouter(prefix='/api', tags=['weather'])


@router.get(
	'/weather_today',
	response_model=WeatherTodayResponse,
	responses={
		400: {'model': ErrorResponse},
		404: {'model': ErrorResponse, 'description': 'City not found'},
		502: {'model': ErrorResponse},
	},
	summary="Current conditions and today's summary for a city",
)
async def weather_today(
	service: Annotated[WeatherService, Depends(get_weather_service)],
	city: Annotated[str | None, Query(description='City name, defaults to London')] = None,
) -> WeatherTodayResponse:
	weather = await service.today(city)
	return WeatherTodayResponse.model_validate(asdict(weather))
