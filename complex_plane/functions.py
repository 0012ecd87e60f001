"""Elementary and transcendental functions of a complex variable.

Every function is composed from the complex exponential, the principal
logarithm, Complex.pow and the four arithmetic operations. Square roots are
taken as pow(., 0.5) so all functions share the principal branch of pow.
Poles and branch points are not guarded: they yield inf/NaN components.
"""

from typing import Callable, Dict

from .value import Complex, Number, as_complex, _log, ONE, NEGATIVE_ONE, I, E, PI, TWO

HALF = Complex(0.5)


def exp(a: Number) -> Complex:
    """Complex exponential, computed as E ** a."""
    return E.pow(as_complex(a))


def ln(a: Number) -> Complex:
    """Principal logarithm ln|a| + i*phase(a).

    ln(0) has a real part of -inf.
    """
    a = as_complex(a)
    return Complex(_log(a.magnitude())).plus(Complex(a.phase()).times(I))


# ============================================================================
# Trigonometric
# ============================================================================

def sin(a: Number) -> Complex:
    """Complex sine (exp(ia) - exp(-ia)) / 2i."""
    a = as_complex(a)
    return exp(a.times(I)).minus(exp(a.times(NEGATIVE_ONE).times(I))).divides(I.times(TWO))


def cos(a: Number) -> Complex:
    """Complex cosine (exp(ia) + exp(-ia)) / 2."""
    a = as_complex(a)
    return exp(a.times(I)).plus(exp(a.times(NEGATIVE_ONE).times(I))).divides(TWO)


def tan(a: Number) -> Complex:
    return sin(a).divides(cos(a))


def csc(a: Number) -> Complex:
    return ONE.divides(sin(a))


def sec(a: Number) -> Complex:
    return ONE.divides(cos(a))


def cot(a: Number) -> Complex:
    return ONE.divides(tan(a))


# ============================================================================
# Inverse trigonometric
# ============================================================================

def arcsin(a: Number) -> Complex:
    """Principal arcsine -i * ln(ia + sqrt(1 - a^2))."""
    a = as_complex(a)
    root = ONE.minus(a.pow(TWO)).pow(HALF)
    return I.times(NEGATIVE_ONE).times(ln(root.plus(I.times(a))))


def arccos(a: Number) -> Complex:
    """Principal arccosine pi/2 - arcsin(a)."""
    return PI.divides(TWO).minus(arcsin(a))


def arctan(a: Number) -> Complex:
    """Principal arctangent (i/2) * ln((1 - ia) / (1 + ia))."""
    a = as_complex(a)
    ratio = ONE.minus(I.times(a)).divides(ONE.plus(I.times(a)))
    return I.divides(TWO).times(ln(ratio))


def arccsc(a: Number) -> Complex:
    return arcsin(ONE.divides(as_complex(a)))


def arcsec(a: Number) -> Complex:
    return arccos(ONE.divides(as_complex(a)))


def arccot(a: Number) -> Complex:
    return arctan(ONE.divides(as_complex(a)))


# ============================================================================
# Hyperbolic
# ============================================================================

def sinh(a: Number) -> Complex:
    a = as_complex(a)
    return exp(a).minus(exp(a.times(NEGATIVE_ONE))).divides(TWO)


def cosh(a: Number) -> Complex:
    a = as_complex(a)
    return exp(a).plus(exp(a.times(NEGATIVE_ONE))).divides(TWO)


def tanh(a: Number) -> Complex:
    return sinh(a).divides(cosh(a))


def csch(a: Number) -> Complex:
    return ONE.divides(sinh(a))


def sech(a: Number) -> Complex:
    return ONE.divides(cosh(a))


def coth(a: Number) -> Complex:
    return ONE.divides(tanh(a))


# ============================================================================
# Inverse hyperbolic
# ============================================================================

def arcsinh(a: Number) -> Complex:
    """Principal inverse sinh ln(a + sqrt(a^2 + 1))."""
    a = as_complex(a)
    return ln(a.pow(TWO).plus(ONE).pow(HALF).plus(a))


def arccosh(a: Number) -> Complex:
    """Principal inverse cosh ln(a + sqrt(a^2 - 1))."""
    a = as_complex(a)
    return ln(a.pow(TWO).minus(ONE).pow(HALF).plus(a))


def arctanh(a: Number) -> Complex:
    """Principal inverse tanh (1/2) * ln((1 + a) / (1 - a))."""
    a = as_complex(a)
    return HALF.times(ln(a.plus(ONE).divides(ONE.minus(a))))


def arccsch(a: Number) -> Complex:
    return arcsinh(ONE.divides(as_complex(a)))


def arcsech(a: Number) -> Complex:
    return arccosh(ONE.divides(as_complex(a)))


def arccoth(a: Number) -> Complex:
    return arctanh(ONE.divides(as_complex(a)))


# Function registry for lookup by name
FUNCTIONS: Dict[str, Callable[[Number], Complex]] = {
    'exp': exp,
    'ln': ln,
    'sin': sin,
    'cos': cos,
    'tan': tan,
    'csc': csc,
    'sec': sec,
    'cot': cot,
    'arcsin': arcsin,
    'arccos': arccos,
    'arctan': arctan,
    'arccsc': arccsc,
    'arcsec': arcsec,
    'arccot': arccot,
    'sinh': sinh,
    'cosh': cosh,
    'tanh': tanh,
    'csch': csch,
    'sech': sech,
    'coth': coth,
    'arcsinh': arcsinh,
    'arccosh': arccosh,
    'arctanh': arctanh,
    'arccsch': arccsch,
    'arcsech': arcsech,
    'arccoth': arccoth,
}


def get_function(name: str) -> Callable[[Number], Complex]:
    """Get a complex function by name.

    Args:
        name: Name of the function

    Returns:
        Function mapping a complex value to a Complex

    Raises:
        ValueError: If function name not found
    """
    if name not in FUNCTIONS:
        raise ValueError(f"Unknown function: {name}. Available: {list(FUNCTIONS.keys())}")
    return FUNCTIONS[name]
