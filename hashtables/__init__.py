from hashtables.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, configure_logging
from hashtables.hash_map import HashMap
from hashtables.hash_set import HashSet
from hashtables.missing import MISSING

__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_LOAD_FACTOR",
    "HashMap",
    "HashSet",
    "MISSING",
    "configure_logging",
]
