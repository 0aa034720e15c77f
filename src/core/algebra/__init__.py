"""
Core algebra modules

Ring / EuclideanRing capability, экземпляры для числовых видов,
capability lookup и operator sugar.
"""

# Configuration
from src.core.algebra.config import (
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_DECIMAL_ROUNDING,
    RingConfig,
)

# Ring capability
from src.core.algebra.ring import (
    FractionalRing,
    IntegralRing,
    Ring,
    ieee_divide,
)

# Euclidean ring capability и экземпляры
from src.core.algebra.euclidean_ring import (
    BIG_DECIMAL_RING,
    BIG_INT_RING,
    DOUBLE_RING,
    FLOAT_RING,
    INT_RING,
    LONG_RING,
    RATIONAL_RING,
    SAFE_LONG_RING,
    BigDecimalIsEuclideanRing,
    BigIntIsEuclideanRing,
    DoubleIsEuclideanRing,
    EuclideanRing,
    FloatIsEuclideanRing,
    IntIsEuclideanRing,
    LongIsEuclideanRing,
    RationalIsEuclideanRing,
    SafeLongIsEuclideanRing,
    big_decimal_ring,
    ieee_fmod,
    truncated_divmod,
)

# Complex / Gaussian
from src.core.algebra.complex_rings import (
    ComplexIsEuclideanRing,
    GaussianIsEuclideanRing,
    complex_ring,
    gaussian_ring,
)

# Number
from src.core.algebra.number_ring import (
    NUMBER_RING,
    NumberIsEuclideanRing,
    promote,
)

# Capability lookup
from src.core.algebra.registry import (
    RingNotFoundError,
    register_ring,
    ring_for,
    ring_of,
)

# Operator sugar
from src.core.algebra.ops import EuclideanRingOps, ops

__all__ = [
    # Configuration
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_DECIMAL_ROUNDING",
    "RingConfig",
    # Ring
    "FractionalRing",
    "IntegralRing",
    "Ring",
    "ieee_divide",
    # Euclidean ring — Types
    "EuclideanRing",
    "BigDecimalIsEuclideanRing",
    "BigIntIsEuclideanRing",
    "DoubleIsEuclideanRing",
    "FloatIsEuclideanRing",
    "IntIsEuclideanRing",
    "LongIsEuclideanRing",
    "RationalIsEuclideanRing",
    "SafeLongIsEuclideanRing",
    # Euclidean ring — Instances
    "BIG_DECIMAL_RING",
    "BIG_INT_RING",
    "DOUBLE_RING",
    "FLOAT_RING",
    "INT_RING",
    "LONG_RING",
    "RATIONAL_RING",
    "SAFE_LONG_RING",
    # Euclidean ring — Functions
    "big_decimal_ring",
    "ieee_fmod",
    "truncated_divmod",
    # Complex / Gaussian
    "ComplexIsEuclideanRing",
    "GaussianIsEuclideanRing",
    "complex_ring",
    "gaussian_ring",
    # Number
    "NUMBER_RING",
    "NumberIsEuclideanRing",
    "promote",
    # Lookup
    "RingNotFoundError",
    "register_ring",
    "ring_for",
    "ring_of",
    # Sugar
    "EuclideanRingOps",
    "ops",
]
