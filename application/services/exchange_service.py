import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from config.log_config import setup_logging
from config.settings import Settings, get_settings
from domain.models.exchange import Result
from infrastructure.providers import ExchangeRequest, FixerIOProvider

logger = logging.getLogger(__name__)


class ExchangeService:
	def __init__(self, provider: FixerIOProvider, settings: Settings):
		self.provider = provider
		self.settings = settings

	@classmethod
	def from_settings(cls, settings: Settings | None = None) -> 'ExchangeService':
		settings = settings or get_settings()
		setup_logging(settings.LOG_LEVEL, settings.LOG_JSON, app_name=settings.APP_NAME)
		provider = FixerIOProvider(timeout=settings.FIXERIO_TIMEOUT)
		logger.info(f'{settings.APP_NAME} ready (secure={settings.FIXERIO_SECURE}, base={settings.FIXERIO_BASE_CURRENCY})')
		return cls(provider, settings)

	def new_request(self) -> ExchangeRequest:
		request = ExchangeRequest().with_protocol(self.settings.FIXERIO_SECURE)
		request = request.with_base(self.settings.FIXERIO_BASE_CURRENCY)
		if self.settings.FIXERIO_API_KEY:
			request = request.with_key(self.settings.FIXERIO_API_KEY)
		return request

	def _prepare(self, symbols: str | Iterable[str], base: str | None) -> ExchangeRequest:
		request = self.new_request().with_symbols(symbols)
		if base:
			request = request.with_base(base)
		return request

	async def latest(self, symbols: str | Iterable[str] = (), base: str | None = None) -> dict[str, Any]:
		request = self._prepare(symbols, base)
		return await self.provider.get(request)

	async def historical(
		self, on: str | date, symbols: str | Iterable[str] = (), base: str | None = None
	) -> Result:
		request = self._prepare(symbols, base).historical(on)
		result = await self.provider.get_result(request)
		logger.info(f'Fetched {len(result.rates)} rates for {result.base} on {result.date}')
		return result

	async def timeseries(
		self,
		start: str | date,
		end: str | date,
		symbols: str | Iterable[str] = (),
		base: str | None = None,
	) -> dict[str, Any]:
		"""Rates keyed by day, each day holding a currency -> rate mapping."""
		request = self._prepare(symbols, base).timeseries(start, end)
		return await self.provider.get(request)

	async def close(self) -> None:
		await self.provider.close()
