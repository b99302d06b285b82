from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	FIXERIO_API_KEY: str = ''
	FIXERIO_SECURE: bool = False
	FIXERIO_BASE_CURRENCY: str = 'EUR'
	FIXERIO_TIMEOUT: int = 10

	# Application
	APP_NAME: str = 'Fixer.io Exchange Client'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
