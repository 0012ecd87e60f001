"""Complex Plane: an immutable complex value type, transcendental functions and domain coloring."""

from .value import (
    Complex,
    as_complex,
    is_approximately_integer,
    TOLERANCE,
    ONE,
    NEGATIVE_ONE,
    I,
    E,
    PI,
    OMEGA,
    TWO
)

from .functions import (
    exp, ln,
    sin, cos, tan, csc, sec, cot,
    arcsin, arccos, arctan, arccsc, arcsec, arccot,
    sinh, cosh, tanh, csch, sech, coth,
    arcsinh, arccosh, arctanh, arccsch, arcsech, arccoth,
    get_function,
    FUNCTIONS
)

from .coloring import (
    domain_color,
    domain_color_grid,
    ColorSink
)

from .analysis import (
    sample_grid,
    compute_identity_residual,
    check_identities,
    IdentityResidual,
    IDENTITIES
)

from .visualization import (
    render_domain_coloring,
    domain_coloring_image,
    plot_domain_coloring,
    plot_function_gallery,
    PlotConfig
)

__version__ = "0.1.0"
__author__ = "Complex Plane Team"
__description__ = "Immutable complex numbers with a transcendental function library and domain coloring"
