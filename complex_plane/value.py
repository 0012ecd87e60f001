"""Immutable complex value type with polar construction and lattice predicates."""

from typing import Tuple, Union
from dataclasses import dataclass
import numpy as np


# Absolute tolerance for "is approximately an integer" checks
TOLERANCE = 1e-6

_SQRT3 = float(np.sqrt(3.0))

Number = Union[int, float, complex, "Complex"]


# ============================================================================
# IEEE helpers
# ============================================================================

def _ieee(fn, *args) -> float:
    """Evaluate a numpy ufunc on float64 scalars without raising or warning.

    Division by zero, log of zero, overflow and trig of infinity produce
    inf/NaN exactly as IEEE 754 prescribes.
    """
    with np.errstate(all='ignore'):
        return float(fn(*(np.float64(arg) for arg in args)))


def _div(x: float, y: float) -> float:
    return _ieee(np.divide, x, y)


def _power(x: float, y: float) -> float:
    return _ieee(np.power, x, y)


def _log(x: float) -> float:
    return _ieee(np.log, x)


def is_approximately_integer(x: float, tolerance: float = TOLERANCE) -> bool:
    """Check whether x lies within tolerance of its floor or of its ceiling.

    The floor and ceiling are tested separately, which is slightly looser
    than comparing against round(x).

    Args:
        x: Real value to classify
        tolerance: Absolute tolerance (default: TOLERANCE)

    Returns:
        True if x is approximately an integer
    """
    floor = _ieee(np.floor, x)
    ceil = _ieee(np.ceil, x)
    return abs(x - floor) <= tolerance or abs(x - ceil) <= tolerance


# ============================================================================
# Complex value
# ============================================================================

@dataclass(frozen=True, eq=False)
class Complex:
    """Immutable complex number re + im*i.

    Every operation returns a new value. Equality is exact on both
    components; integer classification is tolerance based.
    """
    re: float
    im: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 're', float(self.re))
        object.__setattr__(self, 'im', float(self.im))

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "Complex":
        """Build magnitude * (cos(phase) + i*sin(phase))."""
        return cls(magnitude * _ieee(np.cos, phase), magnitude * _ieee(np.sin, phase))

    @classmethod
    def from_complex(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def magnitude(self) -> float:
        """Euclidean norm computed with hypot to avoid overflow."""
        return _ieee(np.hypot, self.re, self.im)

    abs = magnitude

    def __abs__(self) -> float:
        return self.magnitude()

    def phase(self) -> float:
        """Principal argument atan2(im, re) in (-pi, pi]."""
        return _ieee(np.arctan2, self.im, self.re)

    def phase_degrees(self) -> float:
        return self.phase() * 180.0 / np.pi

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.re) and np.isfinite(self.im))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, b: "Complex") -> "Complex":
        return Complex(self.re + b.re, self.im + b.im)

    def minus(self, b: "Complex") -> "Complex":
        return Complex(self.re - b.re, self.im - b.im)

    def times(self, b: "Complex") -> "Complex":
        # (ac - bd) + (ad + bc)i
        real = self.re * b.re - self.im * b.im
        imag = self.re * b.im + self.im * b.re
        return Complex(real, imag)

    def scale(self, alpha: float) -> "Complex":
        return Complex(alpha * self.re, alpha * self.im)

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def reciprocal(self) -> "Complex":
        """Return 1/self as conj(self) / |self|^2.

        Zero is not guarded: the result holds NaN components.
        """
        scale = self.re * self.re + self.im * self.im
        return Complex(_div(self.re, scale), _div(-self.im, scale))

    def divides(self, b: "Complex") -> "Complex":
        return self.times(b.reciprocal())

    def pow(self, b: "Complex") -> "Complex":
        """Raise self to a complex power using the principal phase of self.

        Computed as the product of four factors:
            f1 = e^(-b.im * phase(a))
            f2 = |a|^(b.re)
            f3 = unit value at phase ln(|a|^(b.im))
            f4 = unit value at phase b.re * phase(a)

        Args:
            b: Complex exponent

        Returns:
            self ** b on the principal branch
        """
        abs_a = self.magnitude()
        phase_a = self.phase()
        f1 = Complex(_power(np.e, -1 * b.im * phase_a))
        f2 = Complex(_power(abs_a, b.re))
        f3 = Complex.from_polar(1, _log(_power(abs_a, b.im)))
        f4 = Complex.from_polar(1, b.re * phase_a)
        return f1.times(f2).times(f3).times(f4)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.plus(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.plus(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.minus(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.minus(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.times(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.times(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.divides(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.divides(self)

    def __pow__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.pow(other)

    def __rpow__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.pow(self)

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    # ------------------------------------------------------------------
    # Lattice classification
    # ------------------------------------------------------------------

    def eisenstein_coordinates(self) -> Tuple[float, float]:
        """Return (c, b) such that self = c + b*OMEGA."""
        b = self.im * 2.0 / _SQRT3
        c = self.re + (b / 2.0)
        return c, b

    def is_gaussian_integer(self) -> bool:
        return is_approximately_integer(self.re) and is_approximately_integer(self.im)

    def is_eisenstein_integer(self) -> bool:
        c, b = self.eisenstein_coordinates()
        return is_approximately_integer(c) and is_approximately_integer(b)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.im == 0:
            return f"{self.re}"
        if self.re == 0:
            return f"{self.im}i"
        if self.im < 0:
            return f"{self.re} - {-self.im}i"
        return f"{self.re} + {self.im}i"

    def to_eisenstein_string(self) -> str:
        """Render as c + bw in the basis 1, OMEGA."""
        c, b = self.eisenstein_coordinates()
        if b >= 0:
            return f"{c} + {b}w"
        return f"{c} - {-b}w"


def _coerce(x):
    if isinstance(x, Complex):
        return x
    if isinstance(x, (int, float, np.integer, np.floating)):
        return Complex(x)
    if isinstance(x, (complex, np.complexfloating)):
        return Complex.from_complex(x)
    return None


def as_complex(x: Number) -> Complex:
    """Coerce a real, builtin complex or Complex value to Complex.

    Args:
        x: Value to convert

    Returns:
        Complex value

    Raises:
        TypeError: If x is not numeric
    """
    result = _coerce(x)
    if result is None:
        raise TypeError(f"Cannot interpret {type(x).__name__} as a complex value")
    return result


# Named constants
ONE = Complex(1, 0)
NEGATIVE_ONE = Complex(-1, 0)
I = Complex(0, 1)
E = Complex(np.e)
PI = Complex(np.pi)
OMEGA = Complex(-1.0 / 2.0, _SQRT3 / 2)
TWO = Complex(2, 0)
