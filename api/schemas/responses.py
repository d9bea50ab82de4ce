from datetime import datetime

from pydantic import BaseModel, Field


class ConversionResponse(BaseModel):
	base: str = Field(..., description='Base currency code')
	amount: float = Field(..., description='Amount that was converted')
	conversions: dict[str, float] = Field(..., description='Converted amount per target, 6 decimal places')
	source: str = Field(..., description='"cache" or the provider that served the rates')
	cached_at: datetime | None = Field(
		None, serialization_alias='cachedAt', description='When the cached rates were fetched'
	)

	model_config = {
		'json_schema_extra': {
			'example': {
				'base': 'INR',
				'amount': 100,
				'conversions': {'USD': 1.2, 'EUR': 1.1},
				'source': 'exchangerate.host',
			}
		}
	}


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = {'json_schema_extra': {'examples': [{'currencies': ['AED', 'AUD', 'BRL']}]}}


class LocationResponse(BaseModel):
	city: str
	country_code: str = Field(..., serialization_alias='countryCode')


class CurrentWeatherResponse(BaseModel):
	temp_c: int | None = Field(None, serialization_alias='tempC')
	feels_like: int | None = None
	humidity: float | None = None
	condition: str
	wmo: int | None = None


class TodayWeatherResponse(BaseModel):
	tmax: int | None = None
	tmin: int | None = None
	pop: float | None = None
	wmo: int | None = None


class WeatherTodayResponse(BaseModel):
	location: LocationResponse
	current: CurrentWeatherResponse
	today: TodayWeatherResponse


class QuoteBody(BaseModel):
	text: str
	author: str


class QuoteResponse(BaseModel):
	quote: QuoteBody


class ErrorResponse(BaseModel):
	error: str = Field(..., description='Human-readable error message')

	model_config = {'json_schema_extra': {'example': {'error': 'Base currency \'ZZZ\' not supported.'}}}
