"""Calculator implementations and registry exports."""
from .base import (
    REGISTRY,
    Calculator,
    CalculatorNotAvailable,
    FingerprintError,
    RawInfo,
    get_calculator,
    read_pcm,
    register,
)
from .chromaprint_calculator import ChromaprintCalculator
from .fpcalc_calculator import FpcalcCalculator

__all__ = [
    "Calculator",
    "CalculatorNotAvailable",
    "FingerprintError",
    "RawInfo",
    "REGISTRY",
    "get_calculator",
    "read_pcm",
    "register",
    "ChromaprintCalculator",
    "FpcalcCalculator",
]
