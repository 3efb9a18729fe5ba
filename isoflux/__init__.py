"""
Numerical fluxes for the 2D isothermal Euler equations.  This provides
primitive and conserved variable states and the HLLE approximate
Riemann solver, for use at the interfaces of a finite-volume code,
along with an exact Riemann solver to compare against.
"""

from ._version import version

__version__ = version


from .state import Conserved, Direction, Primitive
from .riemann_hlle import hlle_wavespeeds, riemann_hlle
from .riemann_exact import RiemannProblem
