"""
Exceptions raised by products and schedules
"""


class ProductError(ValueError):
    """Base class for product errors"""


class ConfigurationError(ProductError):
    """Invalid commercial or schedule parameters, raised at construction"""


class PathMismatchError(ProductError):
    """Path or payoff buffer does not match what the product declared"""
