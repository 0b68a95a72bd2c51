from typing import Dict, Iterator, Optional, Tuple
from turtlec.errors import TurtleRuntimeError
from turtlec.types import ErrorVal, Number, to_number


class Environment:
    """Flat mapping from variable names to numbers.

    Looking up an unbound name raises a NameError unless a ``default``
    number was given, in which case the default is returned.
    """
    def __init__(self, values: Optional[Dict[str, Number]] = None, default: Optional[Number] = None):
        self.values: Dict[str, Number] = {}
        self.default = None if default is None else to_number(default)
        if values:
            for name, value in values.items():
                self.put(name, value)

    def get(self, name: str) -> Number:
        if name in self.values:
            return self.values[name]
        if self.default is not None:
            return self.default
        raise TurtleRuntimeError(ErrorVal('NameError', f'undefined variable {name}'))

    def put(self, name: str, value: Number):
        self.values[name] = to_number(value)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def items(self) -> Iterator[Tuple[str, Number]]:
        return iter(self.values.items())

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"
