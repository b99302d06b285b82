import json
import logging
from types import SimpleNamespace
from typing import Any

from pydantic import ValidationError

from domain.exceptions.exchange import ExchangeResponseError
from domain.models.exchange import Result

from .error_codes import UNKNOWN_ERROR_MESSAGE, get_error_message
from .schemas import FixerPayload, FixerResultPayload

logger = logging.getLogger(__name__)

MALFORMED_MESSAGE = 'Response body is malformed.'


def _load_payload(body: str | bytes) -> FixerPayload:
	try:
		data = json.loads(body)
	except ValueError as e:
		raise ExchangeResponseError(str(e)) from e

	if not isinstance(data, dict):
		raise ExchangeResponseError(MALFORMED_MESSAGE)

	try:
		return FixerPayload.model_validate(data)
	except ValidationError as e:
		logger.debug(f'Fixer.io payload failed validation: {e}')
		raise ExchangeResponseError(MALFORMED_MESSAGE) from e


def parse_rates(body: str | bytes, as_object: bool = False) -> dict[str, Any] | SimpleNamespace:
	"""
	Interpret a response body as a bare rate mapping.

	API errors are reported with the documented message for their code,
	whatever text the server sent along with it.
	"""
	payload = _load_payload(body)

	if payload.failed:
		code = payload.error.code if payload.error and payload.error.code else 0
		raise ExchangeResponseError(get_error_message(code), code)

	if not isinstance(payload.rates, dict):
		raise ExchangeResponseError(MALFORMED_MESSAGE)

	if as_object:
		return SimpleNamespace(**payload.rates)

	return payload.rates


def parse_result(body: str | bytes) -> Result:
	"""
	Interpret a response body as a Result.

	API errors are reported with the server's own message and code.
	"""
	payload = _load_payload(body)

	if payload.failed:
		error = payload.error
		message = error.info if error and error.info else UNKNOWN_ERROR_MESSAGE
		code = error.code if error and error.code else 0
		raise ExchangeResponseError(message, code)

	try:
		fields = FixerResultPayload.model_validate(payload.model_dump(include={'base', 'date', 'rates'}))
	except ValidationError as e:
		logger.debug(f'Fixer.io payload is missing result fields: {e}')
		raise ExchangeResponseError(MALFORMED_MESSAGE) from e

	return Result(base=fields.base, date=fields.date, rates=fields.rates)
