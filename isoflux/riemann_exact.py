"""An exact Riemann solver for the isothermal Euler equations.  This
serves as a reference (Godunov) flux to compare the HLLE flux against.
The left and right states are Primitive objects.  We create a
RiemannProblem object with the left and right state:

`rp = RiemannProblem(left_state, right_state, sound_speed_squared=1.0)`

Next we solve for the star state:

`rp.find_star_state()`

Finally, we sample the solution to find the interface state, which
is returned as a Primitive object:

`q_int = rp.sample_solution()`

For an isothermal gas the pressure is just c_s^2 rho, so the wave
curves are parameterized by the density instead of the pressure.
"""

import numpy as np
import matplotlib.pyplot as plt
from scipy import optimize

from isoflux.state import Direction, Primitive


class RiemannProblem:
    """ a class to define an isothermal Riemann problem.  It takes a
        left and right state.

    Parameters
    ----------
    left_state : Primitive
        primitive variable state to the left of the interface.
    right_state : Primitive
        primitive variable state to the right of the interface.
    direction : Direction
        the interface normal.
    sound_speed_squared : float
        c_s^2 for the isothermal gas.
    """

    def __init__(self, left_state, right_state, *,
                 direction=Direction.X, sound_speed_squared=1.0):
        self.left = left_state
        self.right = right_state
        self.direction = direction
        self.sound_speed_squared = sound_speed_squared
        self.cs = np.sqrt(sound_speed_squared)

        self.ustar = None
        self.rhostar = None

    def __str__(self):
        return f"rhostar = {self.rhostar}, ustar = {self.ustar}"

    def u_hugoniot(self, rho, side):
        """define the wave curve, u(rho), giving the normal velocity
        that can be connected to one of the states.

        Parameters
        ----------
        rho : float
            density
        side : str
            "left" or "right" to indicate which state to use.

        Returns
        -------
        float
            the normal velocity on the wave curve for the input density
        """

        if side == "left":
            state = self.left
            s = 1.0
        elif side == "right":
            state = self.right
            s = -1.0
        else:
            raise ValueError("invalid side")

        rho_s = state.density
        u_s = state.velocity(self.direction)

        if rho < rho_s:
            # rarefaction
            u = u_s - s * self.cs * np.log(rho / rho_s)
        else:
            # shock
            u = u_s - s * self.cs * (rho - rho_s) / np.sqrt(rho * rho_s)

        return u

    def find_star_state(self, rho_min=1.e-6, rho_max=1.e6):
        """ root find the wave curves to find ustar, rhostar.

        Parameters
        ----------
        rho_min : float, optional
            minimum possible density.
        rho_max : float, optional
            maximum possible density.
        """

        try:
            self.rhostar = optimize.brentq(
                lambda rho: self.u_hugoniot(rho, "left") - self.u_hugoniot(rho, "right"),
                rho_min, rho_max)
        except ValueError:
            print("unable to solve for the star region")
            print(f"left state = {self.left}")
            print(f"right state = {self.right}")
            raise

        self.ustar = self.u_hugoniot(self.rhostar, "left")

    def shock_solution(self, sgn, state):
        """return the interface solution considering a shock.

        Parameters
        ----------
        sgn : float
            a sign, -1 or +1, indicating whether it is "+" or "-" in the
            shock expression (this depends on left or right jump).
        state : Primitive
            the Riemann state on the non-star side of the shock.

        Returns
        -------
        Primitive
            the state at the interface.
        """

        u_s = state.velocity(self.direction)

        # the mass flux through an isothermal shock is c_s sqrt(rho rho*)
        S = u_s + sgn * self.cs * np.sqrt(self.rhostar / state.density)

        # are we to the left or right of the shock?
        if (self.ustar < 0 and S < 0) or (self.ustar > 0 and S > 0):
            # R/L region
            solution = state
        else:
            # * region
            solution = state.with_normal(self.rhostar, self.ustar, self.direction)

        return solution

    def rarefaction_solution(self, sgn, state):
        """return the interface solution considering a rarefaction wave.

        Parameters
        ----------
        sgn : float
            a sign, -1 or +1, indicating whether it is "+" or "-" in the
            rarefaction expression (this depends on left or right jump).
        state : Primitive
            the Riemann state on the non-star side of the rarefaction.

        Returns
        -------
        Primitive
            the state at the interface.
        """

        u_s = state.velocity(self.direction)

        # find the speed of the head and tail of the rarefaction fan
        lambda_head = u_s + sgn * self.cs
        lambda_tail = self.ustar + sgn * self.cs

        if sgn * lambda_head < 0:
            # R/L region
            solution = state

        elif sgn * lambda_tail > 0:
            # * region
            solution = state.with_normal(self.rhostar, self.ustar, self.direction)

        else:
            # we are in the fan -- the characteristic u + sgn c_s is 0
            u = -sgn * self.cs
            rho = state.density * np.exp(-sgn * (u_s + sgn * self.cs) / self.cs)
            solution = state.with_normal(rho, u, self.direction)

        return solution

    def sample_solution(self):
        """given the star state (ustar, rhostar), find the state on the interface"""

        if self.ustar < 0:
            # we are in the R* or R region
            state = self.right
            sgn = 1.0
        else:
            # we are in the L* or L region
            state = self.left
            sgn = -1.0

        # is the non-contact wave a shock or rarefaction?
        if self.rhostar > state.density:
            # compression! we are a shock
            solution = self.shock_solution(sgn, state)

        else:
            # rarefaction
            solution = self.rarefaction_solution(sgn, state)

        return solution

    def flux(self):
        """the Godunov flux through the interface

        Returns
        -------
        Conserved
        """

        q_int = self.sample_solution()
        return q_int.flux_vector(self.direction, self.sound_speed_squared)


def plot_hugoniot(riemann_problem, rho_min=0.01, rho_max=1.5, N=500):
    """ plot the wave curves in the density-velocity plane.

    Parameters
    ----------
    riemann_problem : RiemannProblem
        the Riemann problem object.
    rho_min : float
        the minimum density to plot.
    rho_max : float
        the maximum density to plot.
    N : int
        number of points to use in the plot.

    Returns
    -------
    matplotlib.pyplot.Figure
    """

    fig = plt.figure()
    ax = fig.add_subplot(111)

    rho = np.linspace(rho_min, rho_max, num=N)
    u_left = np.array([riemann_problem.u_hugoniot(r, "left") for r in rho])
    u_right = np.array([riemann_problem.u_hugoniot(r, "right") for r in rho])

    du = 0.025*(max(np.max(u_left), np.max(u_right)) -
                min(np.min(u_left), np.min(u_right)))

    for side, state, u_curve, color in [("left", riemann_problem.left, u_left, "C0"),
                                        ("right", riemann_problem.right, u_right, "C1")]:

        # shock for rho > rho_s; rarefaction otherwise
        ish = np.where(rho > state.density)
        ir = np.where(rho < state.density)

        u_s = state.velocity(riemann_problem.direction)

        ax.plot(rho[ish], u_curve[ish], c=color, ls="-", lw=2)
        ax.plot(rho[ir], u_curve[ir], c=color, ls=":", lw=2)
        ax.scatter([state.density], [u_s], marker="x", c=color, s=40)

        ax.text(state.density, u_s + du, side,
                horizontalalignment="center", color=color)

    ax.set_xlim(rho_min, rho_max)

    ax.set_xlabel(r"$\rho$", fontsize="large")
    ax.set_ylabel(r"$u$", fontsize="large")

    return fig


if __name__ == "__main__":

    q_l = Primitive(1.0, 0.0, 0.0)
    q_r = Primitive(0.125, 0.0, 0.0)

    rp = RiemannProblem(q_l, q_r, sound_speed_squared=1.0)

    rp.find_star_state()
    q_int = rp.sample_solution()
    print(q_int)
