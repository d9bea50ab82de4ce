from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_conversion_service, get_currency_service
from api.schemas import (
	ConversionQuery,
	ConversionResponse,
	ErrorResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currency',
	response_model=ConversionResponse,
	response_model_exclude_none=True,
	status_code=status.HTTP_200_OK,
	responses={
		400: {'model': ErrorResponse, 'description': 'Invalid amount, base or symbols'},
		502: {'model': ErrorResponse, 'description': 'Every rate provider failed'},
	},
	summary='Convert an amount into one or more currencies',
)
async def convert_currency(
	query: Annotated[ConversionQuery, Query()],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = await service.convert(query.amount, query.base, query.symbols)
	return ConversionResponse(
		base=result.base,
		amount=float(result.amount),
		conversions={code: float(value) for code, value in result.conversions.items()},
		source=result.source,
		cached_at=result.cached_at,
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(currencies=service.get_supported_currencies())
