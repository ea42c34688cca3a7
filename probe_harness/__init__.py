from .errors     import GeneratorExhausted, HashtableError, TableFull, UsageError
from .generators import RandomDates, RandomNumbers, WordList, build_generator
from .primes     import is_prime, twin_prime
from .probing    import ProbeStrategy, double_hashing, hash_code, linear_probing
from .slot       import Slot
from .table      import HashTable

__all__ = [
    "HashTable", "Slot", "ProbeStrategy", "linear_probing", "double_hashing",
    "hash_code", "is_prime", "twin_prime", "RandomNumbers", "RandomDates",
    "WordList", "build_generator", "TableFull", "GeneratorExhausted",
    "HashtableError", "UsageError",
]
