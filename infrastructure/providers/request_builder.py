from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime

from domain.exceptions.exchange import InvalidDateError

FIXERIO_HOST = 'data.fixer.io/api'

_DATE_FORMATS = ('%Y/%m/%d', '%d.%m.%Y', '%d %B %Y', '%B %d, %Y', '%d %b %Y', '%b %d, %Y')


def parse_calendar_date(value: str | date) -> date:
	"""Coerce user input into a calendar date, raising InvalidDateError otherwise."""
	if isinstance(value, datetime):
		return value.date()
	if isinstance(value, date):
		return value
	if not isinstance(value, str):
		raise InvalidDateError(f'Invalid date: {value!r}')

	text = value.strip()
	try:
		return date.fromisoformat(text)
	except ValueError:
		pass
	try:
		return datetime.fromisoformat(text).date()
	except ValueError:
		pass
	for fmt in _DATE_FORMATS:
		try:
			return datetime.strptime(text, fmt).date()
		except ValueError:
			continue

	raise InvalidDateError(f'Invalid date: {value!r}')


@dataclass(frozen=True)
class ExchangeRequest:
	"""
	Immutable description of a fixer.io call.

	Every configuration method returns a new request, so a request can be
	reused as a template without one call leaking into another.
	"""

	protocol: str = 'http'
	base_currency: str = 'EUR'
	symbols: tuple[str, ...] = ()
	access_key: str | None = None
	historical_date: date | None = None
	start_date: date | None = None
	end_date: date | None = None
	as_object: bool = False
	host: str = FIXERIO_HOST

	def with_protocol(self, secure: bool) -> 'ExchangeRequest':
		return replace(self, protocol='https' if secure else 'http')

	def secure(self) -> 'ExchangeRequest':
		return self.with_protocol(True)

	def with_base(self, currency: str) -> 'ExchangeRequest':
		return replace(self, base_currency=currency)

	def with_key(self, key: str) -> 'ExchangeRequest':
		return replace(self, access_key=key)

	def with_symbols(self, *codes: str | Iterable[str]) -> 'ExchangeRequest':
		"""Accepts either with_symbols('USD', 'GBP') or with_symbols(['USD', 'GBP'])."""
		if len(codes) == 1 and codes[0] is None:
			codes = ()
		elif len(codes) == 1 and not isinstance(codes[0], str):
			codes = tuple(codes[0])
		return replace(self, symbols=tuple(codes))

	def historical(self, on: str | date) -> 'ExchangeRequest':
		return replace(self, historical_date=parse_calendar_date(on))

	def timeseries(self, start: str | date, end: str | date) -> 'ExchangeRequest':
		# No start <= end check, fixer.io answers with error 504 itself
		return replace(
			self,
			start_date=parse_calendar_date(start),
			end_date=parse_calendar_date(end),
		)

	def as_objects(self, enabled: bool = True) -> 'ExchangeRequest':
		return replace(self, as_object=enabled)

	@property
	def has_timeseries(self) -> bool:
		return self.start_date is not None and self.end_date is not None

	@property
	def endpoint(self) -> str:
		if self.historical_date:
			return self.historical_date.isoformat()
		if self.has_timeseries:
			return 'timeseries'
		return 'latest'

	def render(self) -> str:
		url = f'{self.protocol}://{self.host}/{self.endpoint}?base={self.base_currency}'

		if self.access_key:
			url += f'&access_key={self.access_key}'

		if self.symbols:
			url += f'&symbols={",".join(self.symbols)}'

		# Appended even when a historical date wins the path segment above
		if self.has_timeseries:
			url += f'&start_date={self.start_date.isoformat()}&end_date={self.end_date.isoformat()}'

		return url
