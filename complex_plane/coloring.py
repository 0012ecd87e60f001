"""Domain coloring: map a complex value to an RGB triple from its magnitude and phase."""

from typing import Callable, Tuple
import jax
import jax.numpy as jnp
from jax import Array
import numpy as np

from .value import Number, as_complex


# Float32 flushes tiny imaginary parts to -0.0 and flips their hue
jax.config.update("jax_enable_x64", True)

RGB = Tuple[float, float, float]

# Receives (row, col, rgb) for each rendered pixel
ColorSink = Callable[[int, int, RGB], None]

# Base of the lightness curve l = 1 - LIGHTNESS_BASE ** |a|
LIGHTNESS_BASE = 0.5


def _sextant(hprime: float, c: float, x: float) -> RGB:
    if 0 <= hprime <= 1:
        return c, x, 0.0
    elif 1 <= hprime <= 2:
        return x, c, 0.0
    elif 2 <= hprime <= 3:
        return 0.0, c, x
    elif 3 <= hprime <= 4:
        return 0.0, x, c
    elif 4 <= hprime <= 5:
        return x, 0.0, c
    elif 5 <= hprime <= 6:
        return c, 0.0, x
    # Negative phases are not wrapped into [0, 360)
    return 0.0, 0.0, 0.0


def domain_color(a: Number) -> RGB:
    """Compute the domain-coloring color of a complex value.

    Hue comes from the phase in degrees, lightness from the magnitude:
    l = 1 - 0.5^|a| with saturation fixed at 1. The phase is used as
    returned by atan2, so values with a negative phase map to (m, m, m).

    Args:
        a: Complex value

    Returns:
        (r, g, b) with each channel clipped to [0, 1]
    """
    a = as_complex(a)
    h = a.phase_degrees()
    hprime = h / 60
    with np.errstate(all='ignore'):
        light = float(1 - np.power(LIGHTNESS_BASE, a.magnitude()))
        c = 1 - abs(2 * light - 1)
        x = c * (1 - abs(float(np.fmod(hprime, 2)) - 1))

    r1, g1, b1 = _sextant(hprime, c, x)
    m = light - c / 2
    return tuple(float(np.clip(channel + m, 0.0, 1.0)) for channel in (r1, g1, b1))


def domain_color_grid(z: Array) -> Array:
    """Vectorized domain coloring over a complex array.

    Applies the same formula as domain_color element-wise, including the
    first-match-wins sextant selection and (m, m, m) for negative phases.
    Computed in float64, so it agrees with domain_color to rounding.

    Args:
        z: Complex array of any shape

    Returns:
        Float array of shape z.shape + (3,)
    """
    z = jnp.asarray(z, dtype=jnp.complex128)
    h = jnp.degrees(jnp.angle(z))
    light = 1 - jnp.power(LIGHTNESS_BASE, jnp.abs(z))
    c = 1 - jnp.abs(2 * light - 1)
    hprime = h / 60
    x = c * (1 - jnp.abs(jnp.fmod(hprime, 2) - 1))
    zero = jnp.zeros_like(c)

    conditions = [(k <= hprime) & (hprime <= k + 1) for k in range(6)]
    r1 = jnp.select(conditions, [c, x, zero, zero, x, c], default=zero)
    g1 = jnp.select(conditions, [x, c, c, x, zero, zero], default=zero)
    b1 = jnp.select(conditions, [zero, zero, x, c, c, x], default=zero)

    m = light - c / 2
    rgb = jnp.stack([r1 + m, g1 + m, b1 + m], axis=-1)
    return jnp.clip(rgb, 0.0, 1.0)
