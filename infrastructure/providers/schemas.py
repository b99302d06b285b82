import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class FixerErrorPayload(BaseModel):
	model_config = ConfigDict(extra='ignore')

	code: int | None = None
	type: str | None = None
	info: str | None = None


class FixerPayload(BaseModel):
	"""Every field fixer.io may send; which ones are required depends on the caller."""

	model_config = ConfigDict(extra='ignore')

	# Absent on payloads from before API keys; only a literal false marks a failure
	success: Any = None
	error: FixerErrorPayload | None = None
	timestamp: int | None = None
	historical: bool | None = None
	timeseries: bool | None = None
	base: str | None = None
	date: Any = None
	start_date: Any = None
	end_date: Any = None
	rates: Any = None

	@property
	def failed(self) -> bool:
		return self.success is False


class FixerResultPayload(BaseModel):
	"""Fields that must all be present to build a Result."""

	model_config = ConfigDict(extra='ignore')

	base: str
	date: datetime.date
	rates: dict[str, float]
