import logging
import math
from decimal import Decimal, InvalidOperation

from domain.exceptions.currency import InvalidAmountError, NoValidTargetsError, UnsupportedBaseError
from domain.models.currency import SUPPORTED_CURRENCIES, ConversionRequest

logger = logging.getLogger(__name__)


def fits_float(value: Decimal) -> bool:
	return math.isfinite(float(value))


class CurrencyService:
	"""Normalizes raw query input into a validated ConversionRequest."""

	def __init__(
		self,
		supported: frozenset[str] = SUPPORTED_CURRENCIES,
		default_base: str = 'INR',
		default_symbols: str = 'USD,EUR',
	):
		self.supported = supported
		self.default_base = default_base
		self.default_symbols = default_symbols

	def get_supported_currencies(self) -> list[str]:
		return sorted(self.supported)

	def validate_currency(self, code: str) -> None:
		if code not in self.supported:
			raise UnsupportedBaseError(f"Base currency '{code}' not supported.")

	def parse_amount(self, amount_raw: str | None) -> Decimal:
		if amount_raw is None or not amount_raw.strip():
			return Decimal('1')
		try:
			amount = Decimal(amount_raw.strip())
		except InvalidOperation as e:
			raise InvalidAmountError('Invalid amount. Provide a positive number.') from e
		if not amount.is_finite() or amount < 0:
			raise InvalidAmountError('Invalid amount. Provide a positive number.')
		if not fits_float(amount):
			raise InvalidAmountError('Amount is too large to convert.')
		# -0 is accepted as zero
		return amount.copy_abs()

	def parse_base(self, base_raw: str | None) -> str:
		base = (base_raw or '').strip().upper() or self.default_base
		self.validate_currency(base)
		return base

	def parse_targets(self, symbols_raw: str | None, base: str) -> tuple[str, ...]:
		symbols = (symbols_raw or '').strip() or self.default_symbols
		targets: list[str] = []
		for entry in symbols.upper().split(','):
			code = entry.strip()
			if not code or code not in self.supported or code == base or code in targets:
				continue
			targets.append(code)

		if not targets:
			raise NoValidTargetsError('No valid target currencies were provided.')
		return tuple(targets)

	def normalize(
		self, amount_raw: str | None, base_raw: str | None, symbols_raw: str | None
	) -> ConversionRequest:
		amount = self.parse_amount(amount_raw)
		base = self.parse_base(base_raw)
		targets = self.parse_targets(symbols_raw, base)
		logger.debug(f'Normalized request: {amount} {base} -> {",".join(targets)}')
		return ConversionRequest(amount=amount, base=base, targets=targets)
