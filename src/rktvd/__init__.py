from . import butcher_tableau
from . import butcher_tableaux
from . import errors
from . import integrand
from . import runge_kutta_integrator
from . import runge_kutta_scheme


def __getattr__(attr):
    if attr == "odes":
        import rktvd.odes as odes

        return odes
    raise AttributeError(f"module {__name__!r} has no attribute {attr!r}")


__all__ = [
    "butcher_tableau",
    "butcher_tableaux",
    "errors",
    "integrand",
    "runge_kutta_integrator",
    "runge_kutta_scheme",
]
