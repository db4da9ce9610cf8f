"""
Enumerations for dfr_xsec

This module defines the closed tag sets used throughout the cross section code:
reaction classes, struck-nucleon species and kinematic phase spaces.

Import Policy:
    from dfr_xsec.config.enums import ProcessType, HitNucleon, KinePhaseSpace

DO NOT use: from dfr_xsec.config.enums import *
"""

from enum import Enum


class ProcessType(Enum):
    """Reaction class of an interaction.

    Options:
        DIFFRACTIVE: Diffractive pion production off a free or bound nucleon
        COHERENT: Coherent pion production off the whole nucleus
        QUASI_ELASTIC: Quasi-elastic scattering
        RESONANT: Resonance production
        DEEP_INELASTIC: Deep inelastic scattering

    Note:
        A cross section model accepts exactly one of these; there is no
        partial matching between classes.
    """
    DIFFRACTIVE = "diffractive"
    COHERENT = "coherent"
    QUASI_ELASTIC = "quasi_elastic"
    RESONANT = "resonant"
    DEEP_INELASTIC = "deep_inelastic"


class HitNucleon(Enum):
    """Species of the struck nucleon (PDG codes)."""
    PROTON = 2212
    NEUTRON = 2112


class KinePhaseSpace(Enum):
    """Kinematic phase spaces at fixed incoming energy.

    Options:
        XY_FE: {x, y}|E, native phase space of the diffractive model
        LOGX_LOGY_FE: {ln x, ln y}|E
        Q2Y_FE: {Q2, y}|E
        XQ2_FE: {x, Q2}|E
        WQ2_FE: {W, Q2}|E
        XYT_FE: {x, y, t}|E, native phase space when t is kept
        LOGX_LOGY_T_FE: {ln x, ln y, t}|E
        Q2YT_FE: {Q2, y, t}|E

    Note:
        Transformations are only defined between phase spaces of the same
        dimension. See dfr_xsec.core.phase_space for the Jacobian table.
    """
    XY_FE = "<{x,y}|E>"
    LOGX_LOGY_FE = "<{lnx,lny}|E>"
    Q2Y_FE = "<{Q2,y}|E>"
    XQ2_FE = "<{x,Q2}|E>"
    WQ2_FE = "<{W,Q2}|E>"
    XYT_FE = "<{x,y,t}|E>"
    LOGX_LOGY_T_FE = "<{lnx,lny,t}|E>"
    Q2YT_FE = "<{Q2,y,t}|E>"

    @property
    def keeps_t(self) -> bool:
        """True for the phase spaces that include the momentum transfer t."""
        return self in (
            KinePhaseSpace.XYT_FE,
            KinePhaseSpace.LOGX_LOGY_T_FE,
            KinePhaseSpace.Q2YT_FE,
        )

    @property
    def base(self) -> "KinePhaseSpace":
        """Base phase space of this tag's family."""
        return KinePhaseSpace.XYT_FE if self.keeps_t else KinePhaseSpace.XY_FE
