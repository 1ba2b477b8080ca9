class RegistryError(Exception):
    """Base class for all symreg errors."""


class InvalidArgumentError(RegistryError, TypeError):
    """Raised when a name, event or callback argument has the wrong type."""


class NotRegisteredError(RegistryError, KeyError):
    """Raised by strict mapping access when a name is not registered."""


__all__ = ["RegistryError", "InvalidArgumentError", "NotRegisteredError"]
