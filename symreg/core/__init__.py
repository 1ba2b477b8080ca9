from symreg.core.registry import Registry

__all__ = ["Registry"]
