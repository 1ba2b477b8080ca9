from typing import Sequence, TypeVar, Union

K = TypeVar("K", bound=str)
V = TypeVar("V")

# A name argument is either one symbolic name or an ordered run of them.
Names = Union[str, Sequence[str]]


class _NotFoundType:
    """Type of the `NOT_FOUND` sentinel returned by `Registry.lookup`.

    There is only ever one instance. It is falsy, but compares unequal to
    every stored value, including ``None``, ``False``, ``0`` and ``""``.
    """

    _instance = None

    def __new__(cls) -> "_NotFoundType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFoundType()

__all__ = ["K", "V", "Names", "NOT_FOUND"]
