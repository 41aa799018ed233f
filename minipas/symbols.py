from typing import Dict, Iterator, Tuple


class SymbolTable:
    """Maps variable names to their current numeric value.

    The parser declares names into the table while reading a ``var``
    section; the interpreter reads and writes values while running. A
    table is created once per run and shared by both stages.
    """
    def __init__(self):
        self.values: Dict[str, float] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def declare(self, name: str) -> None:
        # callers check for duplicates first so they can report the token
        if name in self.values:
            raise KeyError(f'variable {name} already declared')
        self.values[name] = 0.0

    def get(self, name: str) -> float:
        return self.values[name]

    def set(self, name: str, value: float) -> None:
        self.values[name] = value

    def items(self) -> Iterator[Tuple[str, float]]:
        """Entries sorted by name."""
        for name in sorted(self.values):
            yield name, self.values[name]
