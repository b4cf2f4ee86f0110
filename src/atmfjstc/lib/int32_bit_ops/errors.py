class Int32BitOpsError(Exception):
    """
    Base class for all exceptions raised on purpose by the 32-bit operations in this package.
    """


class InvalidBitPositionError(Int32BitOpsError, ValueError):
    position: int
    width: int

    def __init__(self, position: int, width: int):
        super().__init__(f"Bit position {position} is outside the valid range [0, {width - 1}]")

        self.position = position
        self.width = width


class NegativeInputError(Int32BitOpsError, ValueError):
    operation: str
    value: int

    def __init__(self, operation: str, value: int):
        super().__init__(f"{operation}() is only defined for non-negative values, got {value}")

        self.operation = operation
        self.value = value


class RecursionBoundExceededError(Int32BitOpsError, RuntimeError):
    operation: str
    limit: int

    def __init__(self, operation: str, limit: int):
        super().__init__(f"{operation}() exceeded its recursion bound of {limit} levels")

        self.operation = operation
        self.limit = limit
