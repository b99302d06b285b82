class ExchangeException(Exception):
    pass


class InvalidDateError(ExchangeException, ValueError):
    pass


class ExchangeConnectionError(ExchangeException):
    pass


class ExchangeResponseError(ExchangeException):
    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code
