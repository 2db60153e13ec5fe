from typing import Iterable, List


class GpaCalcError(Exception):
    pass


class ValidationError(GpaCalcError):
    def __init__(self, messages: Iterable[str]) -> None:
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages))


class UnknownGrade(GpaCalcError, KeyError):
    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Unknown grade token: {token!r}")

    def __str__(self) -> str:
        return self.args[0]


class PersistenceFailure(GpaCalcError):
    pass


class IndexOutOfRange(GpaCalcError, IndexError):
    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No course at position {index!r} (store holds {size})")
