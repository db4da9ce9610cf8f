"""Tests for phase space Jacobians."""

import itertools

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dfr_xsec.config.enums import KinePhaseSpace
from dfr_xsec.core.constants import NUCLEON_MASS
from dfr_xsec.core.invariants import InvariantViolationError
from dfr_xsec.core.kinematics import Interaction, Kinematics
from dfr_xsec.core.phase_space import is_transformable, jacobian, supported_phase_spaces


TWO_D = [ps for ps in KinePhaseSpace if not ps.keeps_t]
THREE_D = [ps for ps in KinePhaseSpace if ps.keeps_t]


@pytest.fixture
def interaction():
    return Interaction(
        energy=8.0, kine=Kinematics(x=0.25, y=0.6, t=0.1), assume_free_nucleon=True
    )


def _x_y_from_w_q2(W, Q2, E, M=NUCLEON_MASS):
    """Inverse map {W,Q2} -> {x,y} at fixed E."""
    y = (W ** 2 - M ** 2 + Q2) / (2 * M * E)
    x = Q2 / (2 * M * E * y)
    return x, y


class TestJacobianTable:
    """Tests for individual transformations."""

    def test_all_tags_supported(self):
        """Every phase space tag has a transformation entry."""
        assert set(supported_phase_spaces()) == set(KinePhaseSpace)

    def test_identity(self, interaction):
        """Identical phase spaces need no transformation."""
        for ps in KinePhaseSpace:
            assert jacobian(interaction, ps, ps) == 1.0

    def test_xy_to_logx_logy(self, interaction):
        """d(x,y)/d(lnx,lny) = x y."""
        assert_allclose(
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.LOGX_LOGY_FE),
            0.25 * 0.6,
        )

    def test_xy_to_q2y(self, interaction):
        """d(x,y)/d(Q2,y) = 1 / (2 M E y)."""
        assert_allclose(
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.Q2Y_FE),
            1.0 / (2 * NUCLEON_MASS * 8.0 * 0.6),
        )

    def test_xy_to_xq2(self, interaction):
        """d(x,y)/d(x,Q2) = 1 / (2 M E x)."""
        assert_allclose(
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.XQ2_FE),
            1.0 / (2 * NUCLEON_MASS * 8.0 * 0.25),
        )

    def test_xy_to_wq2_matches_finite_differences(self, interaction):
        """The {W,Q2} entry agrees with a numerical determinant of the inverse map."""
        E = interaction.energy
        W = interaction.W()
        Q2 = interaction.Q2()
        h = 1e-6

        dx_dW = (_x_y_from_w_q2(W + h, Q2, E)[0] - _x_y_from_w_q2(W - h, Q2, E)[0]) / (2 * h)
        dy_dW = (_x_y_from_w_q2(W + h, Q2, E)[1] - _x_y_from_w_q2(W - h, Q2, E)[1]) / (2 * h)
        dx_dQ2 = (_x_y_from_w_q2(W, Q2 + h, E)[0] - _x_y_from_w_q2(W, Q2 - h, E)[0]) / (2 * h)
        dy_dQ2 = (_x_y_from_w_q2(W, Q2 + h, E)[1] - _x_y_from_w_q2(W, Q2 - h, E)[1]) / (2 * h)
        numerical = abs(dx_dW * dy_dQ2 - dx_dQ2 * dy_dW)

        analytic = jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.WQ2_FE)
        assert_allclose(analytic, numerical, rtol=1e-5)

    def test_t_is_not_transformed(self, interaction):
        """3D entries equal their 2D counterparts."""
        assert_allclose(
            jacobian(interaction, KinePhaseSpace.XYT_FE, KinePhaseSpace.Q2YT_FE),
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.Q2Y_FE),
        )
        assert_allclose(
            jacobian(interaction, KinePhaseSpace.XYT_FE, KinePhaseSpace.LOGX_LOGY_T_FE),
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.LOGX_LOGY_FE),
        )


class TestJacobianComposition:
    """Tests for consistency between transformations."""

    @pytest.mark.parametrize("family", [TWO_D, THREE_D], ids=["2D", "3D"])
    def test_positive_and_inverse(self, interaction, family):
        """J(A->B) > 0 and J(A->B) J(B->A) = 1 for all pairs."""
        for a, b in itertools.product(family, repeat=2):
            forward = jacobian(interaction, a, b)
            backward = jacobian(interaction, b, a)
            assert forward > 0
            assert_allclose(forward * backward, 1.0, rtol=1e-12)

    def test_chain_rule(self, interaction):
        """J(A->C) = J(A->B) J(B->C)."""
        for a, b, c in itertools.permutations(TWO_D, 3):
            assert_allclose(
                jacobian(interaction, a, c),
                jacobian(interaction, a, b) * jacobian(interaction, b, c),
                rtol=1e-12,
            )

    def test_cross_family_undefined(self, interaction):
        """Transformations between 2D and 3D phase spaces are undefined."""
        assert not is_transformable(KinePhaseSpace.XY_FE, KinePhaseSpace.XYT_FE)
        with pytest.raises(ValueError, match="Can not compute Jacobian"):
            jacobian(interaction, KinePhaseSpace.XY_FE, KinePhaseSpace.Q2YT_FE)

    def test_non_positive_jacobian_is_a_defect(self):
        """Unphysical coordinates surface as an invariant violation."""
        bad = Interaction(energy=8.0, kine=Kinematics(x=-0.25, y=0.6), assume_free_nucleon=True)
        with pytest.raises(InvariantViolationError, match="Jacobian"):
            jacobian(bad, KinePhaseSpace.XY_FE, KinePhaseSpace.LOGX_LOGY_FE)

    def test_does_not_mutate_context(self, interaction):
        """Computing a Jacobian leaves the context unchanged."""
        before = (interaction.energy, interaction.x, interaction.y, interaction.t)
        for ps in TWO_D:
            jacobian(interaction, KinePhaseSpace.XY_FE, ps)
        assert (interaction.energy, interaction.x, interaction.y, interaction.t) == before
        assert np.isfinite(interaction.Q2())
