"""Jacobians between kinematic phase spaces at fixed neutrino energy.

Convention: a differential cross section in phase space `from_ps` is
converted to `to_ps` with

    d^n sigma / d(to_ps) = J * d^n sigma / d(from_ps),   J = |d(from_ps)/d(to_ps)|

Each tag has one entry in _BASE_DETERMINANTS giving |d(base)/d(tag)|, where
base is {x,y}|E or {x,y,t}|E. The Jacobian between two tags of the same family
is the ratio of their entries. t is never transformed, so the 3D entries
equal their 2D counterparts.
"""

from typing import Callable, Dict

from dfr_xsec.config.enums import KinePhaseSpace
from dfr_xsec.core.constants import NUCLEON_MASS
from dfr_xsec.core.invariants import check_jacobian
from dfr_xsec.core.kinematics import Interaction


def _unit(interaction: Interaction, M: float) -> float:
    return 1.0


def _logx_logy(interaction: Interaction, M: float) -> float:
    # x = e^u, y = e^v
    return interaction.x * interaction.y


def _q2_y(interaction: Interaction, M: float) -> float:
    # x = Q2 / (2 M E y)
    return 1.0 / (2.0 * M * interaction.energy * interaction.y)


def _x_q2(interaction: Interaction, M: float) -> float:
    # y = Q2 / (2 M E x)
    return 1.0 / (2.0 * M * interaction.energy * interaction.x)


def _w_q2(interaction: Interaction, M: float) -> float:
    # Q2 = 2 M E x y,  W^2 = M^2 + 2 M E y - Q2
    E = interaction.energy
    return interaction.W(M) / (2.0 * M ** 2 * E ** 2 * interaction.y)


_BASE_DETERMINANTS: Dict[KinePhaseSpace, Callable[[Interaction, float], float]] = {
    KinePhaseSpace.XY_FE: _unit,
    KinePhaseSpace.LOGX_LOGY_FE: _logx_logy,
    KinePhaseSpace.Q2Y_FE: _q2_y,
    KinePhaseSpace.XQ2_FE: _x_q2,
    KinePhaseSpace.WQ2_FE: _w_q2,
    KinePhaseSpace.XYT_FE: _unit,
    KinePhaseSpace.LOGX_LOGY_T_FE: _logx_logy,
    KinePhaseSpace.Q2YT_FE: _q2_y,
}


def supported_phase_spaces() -> list[KinePhaseSpace]:
    """List the phase spaces with a defined transformation."""
    return list(_BASE_DETERMINANTS.keys())


def is_transformable(from_ps: KinePhaseSpace, to_ps: KinePhaseSpace) -> bool:
    """True if a Jacobian between the two phase spaces is defined."""
    return (
        from_ps in _BASE_DETERMINANTS
        and to_ps in _BASE_DETERMINANTS
        and from_ps.base is to_ps.base
    )


def jacobian(
    interaction: Interaction,
    from_ps: KinePhaseSpace,
    to_ps: KinePhaseSpace,
    m_nucleon: float = NUCLEON_MASS,
) -> float:
    """Compute the Jacobian for the transformation from_ps -> to_ps.

    Args:
        interaction: Kinematic context supplying E, x and y
        from_ps: Phase space the cross section is given in
        to_ps: Phase space the cross section is requested in
        m_nucleon: Nucleon mass [GeV]

    Returns:
        J = |d(from_ps)/d(to_ps)| > 0

    Raises:
        ValueError: If no transformation between the phase spaces is defined
        InvariantViolationError: If the computed Jacobian is not positive
    """
    if from_ps is to_ps:
        return 1.0

    if not is_transformable(from_ps, to_ps):
        raise ValueError(
            f"Can not compute Jacobian for transforming: {from_ps.value} --> {to_ps.value}"
        )

    d_from = _BASE_DETERMINANTS[from_ps](interaction, m_nucleon)
    d_to = _BASE_DETERMINANTS[to_ps](interaction, m_nucleon)
    check_jacobian(d_from, f"for {from_ps.base.value} --> {from_ps.value}")

    return check_jacobian(d_to / d_from, f"for {from_ps.value} --> {to_ps.value}")
