import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from pytest import approx

from isoflux import Direction, Primitive, RiemannProblem
from isoflux.riemann_exact import plot_hugoniot


class TestRiemannExact:

    @classmethod
    def setup_class(cls):
        """ this is run once for each class before any tests """

    @classmethod
    def teardown_class(cls):
        """ this is run once for each class after all tests """

    def setup_method(self):
        """ this is run before each test """

        q_l = Primitive(1.0, 0.0, 0.0)
        q_r = Primitive(0.125, 0.0, 0.0)

        self.rp = RiemannProblem(q_l, q_r, sound_speed_squared=1.0)

    def teardown_method(self):
        """ this is run after each test """

    def test_density_jump(self):

        self.rp.find_star_state()

        assert 0.125 < self.rp.rhostar < 1.0

        assert self.rp.u_hugoniot(self.rp.rhostar, "left") == \
            approx(self.rp.u_hugoniot(self.rp.rhostar, "right"), rel=1.e-10)

        # the tail of the left rarefaction moves to the right, so the
        # interface sits in the fan, where u - c_s = 0
        assert self.rp.ustar > 1.0

        qint = self.rp.sample_solution()

        assert qint.density == approx(np.exp(-1.0), rel=1.e-14)
        assert qint.velocity_x == 1.0
        assert qint.velocity_y == 0.0

        F = self.rp.flux()
        assert F.density == approx(np.exp(-1.0), rel=1.e-14)
        assert F.momentum_x == approx(2.0 * np.exp(-1.0), rel=1.e-14)
        assert F.momentum_y == 0.0

    def test_star_region(self):

        q_l = Primitive(1.0, 0.0, 0.2)
        q_r = Primitive(0.8, 0.0, -0.3)

        rp = RiemannProblem(q_l, q_r, direction=Direction.X, sound_speed_squared=1.0)
        rp.find_star_state()

        assert 0.0 < rp.ustar < 1.0

        qint = rp.sample_solution()

        assert qint.density == rp.rhostar
        assert qint.velocity_x == rp.ustar
        assert qint.velocity_y == 0.2

    def test_invalid_side(self):

        with pytest.raises(ValueError):
            self.rp.u_hugoniot(1.0, "middle")

    def test_transverse_direction(self):

        q_l = Primitive(1.0, 0.3, 0.0)
        q_r = Primitive(0.8, -0.2, 0.0)

        rp = RiemannProblem(q_l, q_r, direction=Direction.Y, sound_speed_squared=1.0)
        rp.find_star_state()

        qint = rp.sample_solution()

        # the contact moves to +y, so the left transverse velocity is upwind
        assert rp.ustar > 0.0
        assert qint.velocity_x == 0.3
        assert qint.velocity_y == rp.ustar

    def test_no_solution(self):

        rp = RiemannProblem(Primitive(1.0, 0.0, 0.0), Primitive(1.0, 0.0, 0.0))

        with pytest.raises(ValueError):
            rp.find_star_state(rho_min=2.0, rho_max=3.0)

    def test_plot_hugoniot(self):

        fig = plot_hugoniot(self.rp, rho_min=0.05, rho_max=1.2, N=50)
        ax = fig.axes[0]

        assert ax.get_xlim() == (0.05, 1.2)
        assert len(ax.lines) == 4
