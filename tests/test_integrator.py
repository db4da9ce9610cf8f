"""Tests for the total cross section grid integrator."""

import logging

import pytest
from numpy.testing import assert_allclose

from dfr_xsec.core.constants import MUON_MASS, PION_MASS, SMALL_NUM
from dfr_xsec.core.kinematics import Interaction, Kinematics
from dfr_xsec.xsec.integrator import GridIntegrator, Range1D, total_xsec


class ConstantModel:
    """d2sigma/dxdy = 1 everywhere."""

    def xsec(self, interaction, kps):
        return 1.0


class BilinearModel:
    """d2sigma/dxdy = x y."""

    def xsec(self, interaction, kps):
        return interaction.x * interaction.y


class ExplodingModel:
    """Fails if it is ever evaluated."""

    def xsec(self, interaction, kps):
        raise AssertionError("model must not be evaluated")


def _template(E, **kwargs):
    return Interaction(energy=E, kine=Kinematics(), assume_free_nucleon=True, **kwargs)


class TestKinematicLimits:
    """Tests for integration ranges and grid layout."""

    def test_limits(self):
        """x and y ranges follow the pion and lepton masses."""
        x, y = GridIntegrator().kinematic_limits(5.0)
        assert x == Range1D(SMALL_NUM, 1.0 - SMALL_NUM)
        assert_allclose(y.min, PION_MASS / 5.0 + SMALL_NUM)
        assert_allclose(y.max, 1.0 - MUON_MASS / 5.0 - SMALL_NUM)
        assert not y.is_empty

    def test_closed_below_threshold(self):
        """Below threshold the y range is empty."""
        _, y = GridIntegrator().kinematic_limits(0.2)
        assert y.is_empty

    def test_grid_cell_centres(self):
        """Cell centres lie half a cell inside the limits."""
        integrator = GridIntegrator(nx=4, ny=5)
        x_centers, y_centers, dx, dy = integrator.grid(5.0)
        x, y = integrator.kinematic_limits(5.0)

        assert len(x_centers) == 4
        assert len(y_centers) == 5
        assert_allclose(x_centers[0], x.min + 0.5 * dx)
        assert_allclose(y_centers[-1], y.max - 0.5 * dy)

    @pytest.mark.parametrize("kwargs", [{"nx": 0}, {"ny": -3}, {"n_workers": 0}, {"small_num": -1.0}])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            GridIntegrator(**kwargs)

    def test_auto_workers(self):
        """n_workers = -1 uses one worker per row, capped at 32."""
        assert GridIntegrator(nx=8, n_workers=-1).n_workers == 8
        assert GridIntegrator(nx=300, n_workers=-1).n_workers == 32


class TestIntegrate:
    """Tests for GridIntegrator.integrate()."""

    def test_constant_integrand(self):
        """Integrating 1 gives the area of the rectangle."""
        integrator = GridIntegrator(nx=20, ny=10)
        x, y = integrator.kinematic_limits(5.0)
        result = integrator.integrate(ConstantModel(), _template(5.0))
        assert_allclose(result, x.width * y.width, rtol=1e-12)

    def test_bilinear_integrand_exact(self):
        """The midpoint rule is exact for x y."""
        integrator = GridIntegrator(nx=7, ny=9)
        x, y = integrator.kinematic_limits(3.0)
        expected = 0.25 * (x.max ** 2 - x.min ** 2) * (y.max ** 2 - y.min ** 2)
        result = integrator.integrate(BilinearModel(), _template(3.0))
        assert_allclose(result, expected, rtol=1e-12)

    def test_below_threshold_is_exact_zero(self):
        """A closed y range returns 0.0 without evaluating the model."""
        result = GridIntegrator().integrate(ExplodingModel(), _template(0.2))
        assert result == 0.0

    def test_diffractive_total_positive(self, model, small_integrator):
        """The diffractive total at 5 GeV is finite and positive."""
        assert small_integrator.integrate(model, _template(5.0)) > 0.0

    def test_model_integral_method(self, model, small_integrator):
        """The model exposes its total through integral()."""
        assert model.integral(_template(5.0), small_integrator) == small_integrator.integrate(
            model, _template(5.0)
        )

    def test_deterministic(self, model):
        """Repeated integration gives bitwise identical results."""
        integrator = GridIntegrator(nx=12, ny=12)
        assert integrator.integrate(model, _template(5.0)) == integrator.integrate(model, _template(5.0))

    def test_parallel_matches_serial(self, model):
        """Worker processes reproduce the serial sum exactly."""
        serial = GridIntegrator(nx=8, ny=8, n_workers=1).integrate(model, _template(5.0))
        parallel = GridIntegrator(nx=8, ny=8, n_workers=2).integrate(model, _template(5.0))
        assert parallel == serial

    def test_template_untouched(self, model, small_integrator):
        """The caller's context is not modified."""
        template = _template(5.0)
        small_integrator.integrate(model, template)
        assert template.x is None
        assert template.y is None

    def test_logs_total(self, model, small_integrator, caplog):
        """The total is reported in 1E-38 cm^2."""
        with caplog.at_level(logging.INFO, logger="dfr_xsec.xsec.integrator"):
            small_integrator.integrate(model, _template(5.0))
        assert "xsec (E = 5.0 GeV)" in caplog.text
        assert "1E-38 * cm2" in caplog.text


class TestTotalXSec:
    """Tests for total_xsec()."""

    def test_free_nucleon(self, model, small_integrator):
        """Without a target total_xsec integrates on a free nucleon."""
        assert total_xsec(model, 5.0, integrator=small_integrator) == small_integrator.integrate(
            model, _template(5.0)
        )

    def test_nuclear_target(self, model, argon_target):
        """A nuclear target scales the total by the struck nucleon count."""
        integrator = GridIntegrator(nx=10, ny=10)
        free = total_xsec(model, 5.0, integrator=integrator)
        nuclear = total_xsec(model, 5.0, integrator=integrator, target=argon_target, assume_free_nucleon=False)
        assert_allclose(nuclear, 22 * free, rtol=1e-12)

    def test_beyond_table_energy(self, model):
        """Neutrino energies giving pions above the last table node integrate."""
        assert total_xsec(model, 1500.0, integrator=GridIntegrator(nx=5, ny=5)) > 0.0

    def test_grows_above_threshold(self, model, small_integrator):
        """The total is zero below threshold and opens up above it."""
        assert total_xsec(model, 0.2, integrator=small_integrator) == 0.0
        assert total_xsec(model, 2.0, integrator=small_integrator) > 0.0
