from pydantic import BaseModel, Field


class ConversionQuery(BaseModel):
	"""Raw query parameters of the currency endpoint; normalization happens in the service layer."""

	amount: str | None = Field(None, description='Amount in base currency, defaults to 1')
	base: str | None = Field(None, description='Base currency code, defaults to INR')
	symbols: str | None = Field(None, description='Comma-separated target codes, defaults to USD,EUR')

	model_config = {
		'json_schema_extra': {'example': {'amount': '100', 'base': 'INR', 'symbols': 'USD,EUR'}}
	}
