# ==================================================
# probe_harness/errors.py
# ==================================================


class HashtableError(Exception):
    pass


class TableFull(HashtableError, RuntimeError):
    def __init__(self, capacity: int):
        super().__init__(f"table is full (capacity {capacity})")
        self.capacity = capacity


class GeneratorExhausted(HashtableError):
    def __init__(self, input_name: str, collected: int, wanted: int):
        super().__init__(f"{input_name} ran out after {collected} of {wanted} keys")
        self.input_name = input_name
        self.collected  = collected
        self.wanted     = wanted


class UsageError(HashtableError, ValueError):
    pass
