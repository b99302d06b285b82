# nosec B101


from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from application.services import ExchangeService
from config.settings import Settings
from domain.exceptions.exchange import ExchangeResponseError, InvalidDateError
from domain.models.exchange import Result
from infrastructure.providers import FixerIOProvider


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        FIXERIO_API_KEY='service_key',
        FIXERIO_SECURE=True,
        FIXERIO_BASE_CURRENCY='USD',
    )


@pytest.fixture
def mock_provider():
    return AsyncMock(spec=FixerIOProvider)


@pytest.fixture
def service(mock_provider, settings):
    return ExchangeService(mock_provider, settings)


def test_new_request_is_seeded_from_settings(service):
    request = service.new_request()

    assert request.render() == 'https://data.fixer.io/api/latest?base=USD&access_key=service_key'


def test_new_request_without_key():
    service = ExchangeService(AsyncMock(spec=FixerIOProvider), Settings(_env_file=None, FIXERIO_API_KEY=''))

    assert service.new_request().access_key is None
    assert service.new_request().render() == 'http://data.fixer.io/api/latest?base=EUR'


@pytest.mark.asyncio
async def test_latest_passes_symbols_and_base_override(service, mock_provider):
    mock_provider.get.return_value = {'GBP': 0.73}

    rates = await service.latest(['GBP'], base='EUR')

    assert rates == {'GBP': 0.73}
    request = mock_provider.get.call_args[0][0]
    assert request.base_currency == 'EUR'
    assert request.symbols == ('GBP',)
    assert request.endpoint == 'latest'


@pytest.mark.asyncio
async def test_historical_returns_result(service, mock_provider):
    expected = Result(base='USD', date=date(2021, 1, 2), rates={'EUR': 0.8})
    mock_provider.get_result.return_value = expected

    result = await service.historical('2021-01-02', symbols=('EUR',))

    assert result is expected
    request = mock_provider.get_result.call_args[0][0]
    assert request.render() == (
        'https://data.fixer.io/api/2021-01-02?base=USD&access_key=service_key&symbols=EUR'
    )


@pytest.mark.asyncio
async def test_historical_invalid_date_never_reaches_provider(service, mock_provider):
    with pytest.raises(InvalidDateError):
        await service.historical('not-a-date')

    mock_provider.get_result.assert_not_called()


@pytest.mark.asyncio
async def test_timeseries_uses_flat_path(service, mock_provider):
    mock_provider.get.return_value = {'2020-01-01': {'EUR': 0.9}}

    rates = await service.timeseries(date(2020, 1, 1), '2020-01-02')

    assert rates == {'2020-01-01': {'EUR': 0.9}}
    request = mock_provider.get.call_args[0][0]
    assert request.endpoint == 'timeseries'
    assert request.render().endswith('&start_date=2020-01-01&end_date=2020-01-02')


@pytest.mark.asyncio
async def test_provider_errors_propagate(service, mock_provider):
    mock_provider.get.side_effect = ExchangeResponseError('An invalid base currency has been entered.', 201)

    with pytest.raises(ExchangeResponseError) as exc_info:
        await service.latest()

    assert exc_info.value.code == 201


def test_from_settings_builds_provider_and_configures_logging():
    settings = Settings(_env_file=None, LOG_LEVEL='DEBUG', LOG_JSON=True, APP_NAME='Rates Job')

    with patch('application.services.exchange_service.setup_logging') as mock_setup:
        service = ExchangeService.from_settings(settings)

    assert isinstance(service.provider, FixerIOProvider)
    assert service.settings is settings
    mock_setup.assert_called_once_with('DEBUG', True, app_name='Rates Job')


@pytest.mark.asyncio
async def test_close_closes_provider(service, mock_provider):
    await service.close()

    mock_provider.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_latest_single_symbol_string_is_one_code(service, mock_provider):
    mock_provider.get.return_value = {'GBP': 0.73}

    await service.latest('GBP')

    request = mock_provider.get.call_args[0][0]
    assert request.symbols == ('GBP',)
    assert request.render().endswith('&symbols=GBP')


@pytest.mark.asyncio
async def test_historical_single_symbol_string_is_one_code(service, mock_provider):
    mock_provider.get_result.return_value = Result(base='USD', date=date(2021, 1, 2), rates={'EUR': 0.8})

    await service.historical('2021-01-02', symbols='EUR')

    request = mock_provider.get_result.call_args[0][0]
    assert request.symbols == ('EUR',)
