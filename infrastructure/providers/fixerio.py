import logging
from types import SimpleNamespace
from typing import Any

import httpx

from domain.exceptions.exchange import ExchangeConnectionError, ExchangeResponseError
from domain.models.exchange import Result

from .request_builder import ExchangeRequest
from .response_parser import parse_rates, parse_result

logger = logging.getLogger(__name__)


def _log_context(request: ExchangeRequest) -> dict:
	# Never includes the access key
	return {'endpoint': request.endpoint, 'base_currency': request.base_currency}


class FixerIOProvider:
	def __init__(self, client: httpx.AsyncClient | None = None, timeout: int = 10):
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'fixerio'

	def get_url(self, request: ExchangeRequest) -> str:
		return request.render()

	async def _request(self, request: ExchangeRequest) -> str:
		url = request.render()
		context = _log_context(request)
		logger.debug(f'Fixer.io request to {request.endpoint} (base={request.base_currency})', extra=context)

		# Callers only ever see one exception type, whatever httpx raised
		try:
			response = await self._client.get(url)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			logger.error(f'Fixer.io HTTP error {e.response.status_code} on {request.endpoint}', extra=context)
			raise ExchangeConnectionError(str(e)) from e
		except httpx.HTTPError as e:
			logger.error(f'Fixer.io request failed: {e.__class__.__name__}: {e}', extra=context)
			raise ExchangeConnectionError(str(e)) from e

		return response.text

	async def get(self, request: ExchangeRequest) -> dict[str, Any] | SimpleNamespace:
		"""
		Fetch the rates for `request` as a plain mapping, or as an object when
		the request asks for one.

		Raises ExchangeConnectionError if the request fails or times out and
		ExchangeResponseError if the response is malformed or reports an error.
		"""
		body = await self._request(request)
		try:
			return parse_rates(body, as_object=request.as_object)
		except ExchangeResponseError as e:
			logger.warning(
				f'Fixer.io response rejected ({e.code}): {e.message}',
				extra={**_log_context(request), 'error_code': e.code},
			)
			raise

	async def get_as_object(self, request: ExchangeRequest) -> SimpleNamespace:
		return await self.get(request.as_objects())

	async def get_result(self, request: ExchangeRequest) -> Result:
		body = await self._request(request)
		try:
			return parse_result(body)
		except ExchangeResponseError as e:
			logger.warning(
				f'Fixer.io response rejected ({e.code}): {e.message}',
				extra={**_log_context(request), 'error_code': e.code},
			)
			raise

	async def close(self) -> None:
		await self._client.aclose()
