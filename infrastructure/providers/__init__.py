from .fixerio import FixerIOProvider
from .request_builder import ExchangeRequest

__all__ = ['ExchangeRequest', 'FixerIOProvider']
