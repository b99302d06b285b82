from .exchange_service import ExchangeService

__all__ = ['ExchangeService']
