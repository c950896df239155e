"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AdviceProviderError(DomainException):
    """Advice provider is unreachable, misconfigured, or returned an error status"""

    pass


class InvalidAdviceResponseError(DomainException):
    """Advice provider answered, but the answer does not match the expected shape"""

    pass
