from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    day: int         # day number, e.g. 1..31
    amount: float
    category: str


# Inclusive on both ends; a reversed period matches nothing
@dataclass(frozen=True)
class DaysPeriod:
    from_: int
    to: int


@dataclass(frozen=True)
class UnknownCategory:
    category: str

    @property
    def message(self) -> str:
        return f"unknown category {self.category}"
