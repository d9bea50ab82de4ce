from decimal import ROUND_HALF_UP, Decimal, localcontext

from application.services.currency_service import CurrencyService, fits_float
from application.services.rate_service import RateService
from domain.exceptions.currency import InvalidAmountError
from domain.models.currency import ConversionResult, RateTable

CONVERSION_PRECISION = Decimal('0.000001')


def convert_amount(amount: Decimal, rates: RateTable) -> dict[str, Decimal]:
	# Rates are stored unrounded; only the converted amounts are rounded
	conversions = {}
	for code, rate in rates.items():
		with localcontext() as ctx:
			# Exact product, then room for six fractional digits
			ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(rate.as_tuple().digits))
			product = amount * rate
			ctx.prec = max(ctx.prec, product.adjusted() + 7)
			conversions[code] = product.quantize(CONVERSION_PRECISION, rounding=ROUND_HALF_UP)
	return conversions


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	async def convert(
		self, amount_raw: str | None, base_raw: str | None, symbols_raw: str | None
	) -> ConversionResult:
		request = self.currency_service.normalize(amount_raw, base_raw, symbols_raw)

		lookup = await self.rate_service.get_rates(request)

		conversions = convert_amount(request.amount, lookup.rates)
		if not all(fits_float(value) for value in conversions.values()):
			raise InvalidAmountError('Amount is too large to convert.')

		return ConversionResult(
			base=request.base,
			amount=request.amount,
			conversions=conversions,
			source=lookup.source,
			cached_at=lookup.cached_at,
		)
