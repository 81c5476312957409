from .semigroup import Semigroup, NotASemigroup, append, combine_all
from .errors import Errors
from .validated import (
    Validated,
    Valid,
    Invalid,
    ValidationFailure,
    valid,
    invalid,
    fmap,
    ap,
    lift_and_map,
    apply_next,
    map2,
)
from .curry import curry, lift_a
from .collection import sequence, traverse, partition
from .validators import attempt, validator, ensure
from .logger import ConsoleLogger, get_logger
