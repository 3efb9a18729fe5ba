"""The HLLE approximate Riemann solver for the isothermal Euler
equations.  Given primitive states on either side of an interface,
the numerical flux through it is:

`F = riemann_hlle(q_l, q_r, Direction.X, cs2)`

The fan is bracketed by the outer acoustic speeds of both states
(Einfeldt's estimate), always including zero.  No checks are done on
the input: a non-positive density or a vanishing bracket produces
non-finite fluxes.
"""

import numpy as np


def hlle_wavespeeds(left, right, direction, sound_speed_squared):
    """the bounding signal speeds used by the HLLE flux

    Parameters
    ----------
    left : Primitive
        state to the left of the interface
    right : Primitive
        state to the right of the interface
    direction : Direction
        the interface normal
    sound_speed_squared : float
        c_s^2 for the isothermal gas

    Returns
    -------
    am : float
        the leftmost speed, always <= 0
    ap : float
        the rightmost speed, always >= 0
    """

    alm, alp = left.outer_wavespeeds(direction, sound_speed_squared)
    arm, arp = right.outer_wavespeeds(direction, sound_speed_squared)

    ap = np.maximum(np.maximum(alp, arp), 0.0)
    am = np.minimum(np.minimum(alm, arm), 0.0)

    return am, ap


def riemann_hlle(left, right, direction, sound_speed_squared):
    """compute the HLLE flux through an interface

    Parameters
    ----------
    left : Primitive
        state to the left of the interface
    right : Primitive
        state to the right of the interface
    direction : Direction
        the interface normal
    sound_speed_squared : float
        c_s^2 for the isothermal gas

    Returns
    -------
    Conserved
        the flux of the conserved variables
    """

    ul = left.to_conserved()
    ur = right.to_conserved()
    fl = left.flux_vector(direction, sound_speed_squared)
    fr = right.flux_vector(direction, sound_speed_squared)

    am, ap = hlle_wavespeeds(left, right, direction, sound_speed_squared)

    return (fl * ap - fr * am - (ul - ur) * ap * am) / (ap - am)
