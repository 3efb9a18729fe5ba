"""Primitive and conserved variable states for the 2D isothermal
Euler equations.

The isothermal equation of state closes the system with a single
constant, the sound speed squared, so a state is fully described by a
density and two velocity (or momentum) components:

`q = Primitive(rho, vx, vy)`

`U = q.to_conserved()`

The fields can be floats or numpy arrays of a common shape -- all of
the algebra below is element-wise.
"""

import enum

import numpy as np


class Direction(enum.Enum):
    """the coordinate axis normal to an interface"""

    X = 0
    Y = 1

    def dot(self, other):
        """1.0 if the two axes are the same, 0.0 otherwise"""
        return 1.0 if self is other else 0.0

    @property
    def transverse(self):
        """the axis parallel to the interface"""
        return Direction.Y if self is Direction.X else Direction.X


class _Triple:
    """common vector-space operations for a 3-component state"""

    # let numpy scalars defer to our __rmul__
    __array_ufunc__ = None

    def __init__(self, a0, a1, a2):
        self._v = (a0, a1, a2)

    @classmethod
    def from_array(cls, a):
        """create a state from a length-3 sequence (or an array whose
        leading dimension is 3)

        Parameters
        ----------
        a : array_like
            the components, in order.

        Returns
        -------
        the new state
        """
        return cls(a[0], a[1], a[2])

    def to_array(self):
        """return the components as a numpy array

        Returns
        -------
        ndarray
            shape (3,) for scalar fields, (3, ...) for array fields
        """
        return np.array(self._v)

    def __iter__(self):
        return iter(self._v)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self._v, other._v)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self._v, other._v)))

    def __mul__(self, scale):
        if isinstance(scale, _Triple):
            return NotImplemented
        return type(self)(*(a * scale for a in self._v))

    __rmul__ = __mul__

    def __truediv__(self, scale):
        if isinstance(scale, _Triple):
            return NotImplemented
        # IEEE semantics: a zero divisor gives inf / nan, not an exception
        return type(self)(*(np.true_divide(a, scale) for a in self._v))


class Primitive(_Triple):
    """a primitive variable state

    Parameters
    ----------
    rho : float
        density
    vx : float
        velocity in the x direction
    vy : float
        velocity in the y direction
    """

    def __init__(self, rho=1.0, vx=0.0, vy=0.0):
        super().__init__(rho, vx, vy)

    def __str__(self):
        return f"rho: {self.density}; vx: {self.velocity_x}; vy: {self.velocity_y}"

    @property
    def density(self):
        return self._v[0]

    @property
    def velocity_x(self):
        return self._v[1]

    @property
    def velocity_y(self):
        return self._v[2]

    @property
    def momentum_x(self):
        return self.density * self.velocity_x

    @property
    def momentum_y(self):
        return self.density * self.velocity_y

    def velocity(self, direction):
        """the velocity component along `direction`"""

        if direction is Direction.X:
            return self.velocity_x
        if direction is Direction.Y:
            return self.velocity_y
        raise ValueError("invalid direction")

    def pressure(self, sound_speed_squared):
        """isothermal pressure, p = rho c_s^2"""
        return self.density * sound_speed_squared

    def to_conserved(self):
        """convert to the conserved variables

        Returns
        -------
        Conserved
        """
        return Conserved(self.density, self.momentum_x, self.momentum_y)

    def with_normal(self, rho, vn, direction):
        """return a new state with the density and the velocity along
        `direction` replaced, keeping the transverse velocity

        Parameters
        ----------
        rho : float
            the new density
        vn : float
            the new velocity component along `direction`
        direction : Direction
            the normal direction

        Returns
        -------
        Primitive
        """

        if direction is Direction.X:
            return Primitive(rho, vn, self.velocity_y)
        if direction is Direction.Y:
            return Primitive(rho, self.velocity_x, vn)
        raise ValueError("invalid direction")

    def outer_wavespeeds(self, direction, sound_speed_squared):
        """the slowest and fastest characteristic speeds normal to the
        interface

        Parameters
        ----------
        direction : Direction
            the interface normal
        sound_speed_squared : float
            c_s^2 for the isothermal gas

        Returns
        -------
        tuple
            (vn - c_s, vn + c_s)
        """

        cs = np.sqrt(sound_speed_squared)
        vn = self.velocity(direction)
        return vn - cs, vn + cs

    def flux_vector(self, direction, sound_speed_squared):
        """the physical flux of the conserved variables through an
        interface normal to `direction`

        Parameters
        ----------
        direction : Direction
            the interface normal
        sound_speed_squared : float
            c_s^2 for the isothermal gas

        Returns
        -------
        Conserved
        """

        pg = self.pressure(sound_speed_squared)
        vn = self.velocity(direction)

        # advection plus pressure acting only on the normal momentum
        advective = self.to_conserved() * vn
        pressure = Conserved(0.0,
                             pg * direction.dot(Direction.X),
                             pg * direction.dot(Direction.Y))
        return advective + pressure


class Conserved(_Triple):
    """a conserved variable state

    Parameters
    ----------
    rho : float
        density
    px : float
        x-momentum density
    py : float
        y-momentum density
    """

    def __init__(self, rho=1.0, px=0.0, py=0.0):
        super().__init__(rho, px, py)

    def __str__(self):
        return f"rho: {self.density}; px: {self.momentum_x}; py: {self.momentum_y}"

    @property
    def density(self):
        return self._v[0]

    @property
    def momentum_x(self):
        return self._v[1]

    @property
    def momentum_y(self):
        return self._v[2]

    def to_primitive(self):
        """convert to the primitive variables.  A zero density gives
        non-finite velocities.

        Returns
        -------
        Primitive
        """
        return Primitive(self.density,
                         np.true_divide(self.momentum_x, self.density),
                         np.true_divide(self.momentum_y, self.density))
