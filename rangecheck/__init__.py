from loguru import logger

from .errors import TypeMismatch
from .factories import (
    at_least,
    at_most,
    between,
    greater_than,
    in_range,
    in_range_dual,
    less_than,
)
from .predicate import Comparable, DualPredicate, Predicate
from .range import InRange, InRangeDual
from .util import DEFAULT_END_INCLUSIVE, DEFAULT_START_INCLUSIVE

# Library logging stays silent until the application opts in with
# logger.enable("rangecheck")
logger.disable(__name__)

__all__ = [
    "InRange",
    "InRangeDual",
    "Predicate",
    "DualPredicate",
    "Comparable",
    "TypeMismatch",
    "in_range",
    "in_range_dual",
    "between",
    "at_least",
    "greater_than",
    "at_most",
    "less_than",
    "DEFAULT_START_INCLUSIVE",
    "DEFAULT_END_INCLUSIVE",
]
