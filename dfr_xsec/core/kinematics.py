"""Kinematic context of a single interaction.

An Interaction bundles the incoming neutrino energy, the kinematic
coordinates, the reaction class and the target composition. Instances are
immutable; integration code derives per-sample copies through
Interaction.with_kinematics().
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Optional

from dfr_xsec.config.enums import HitNucleon, ProcessType
from dfr_xsec.core.constants import NUCLEON_MASS


@dataclass(frozen=True)
class Kinematics:
    """Kinematic coordinates of an interaction.

    Attributes:
        x: Bjorken x
        y: Inelasticity y
        t: Momentum transfer to the nucleon |t| [GeV^2], if tracked

    A coordinate set to None is absent and fails the kinematic gate.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    t: Optional[float] = None


@dataclass(frozen=True)
class Target:
    """Target nucleus and struck nucleon.

    Attributes:
        Z: Number of protons
        N: Number of neutrons
        hit_nucleon: Species of the struck nucleon
    """

    Z: int
    N: int
    hit_nucleon: Optional[HitNucleon] = None

    def __post_init__(self):
        """Validate target composition."""
        if self.Z < 0 or self.N < 0:
            raise ValueError(f"Nucleon counts must be non-negative: Z={self.Z}, N={self.N}")

    @property
    def A(self) -> int:
        """Mass number."""
        return self.Z + self.N

    @property
    def n_scattering_centers(self) -> int:
        """Number of nucleons of the struck species."""
        if self.hit_nucleon is HitNucleon.PROTON:
            return self.Z
        if self.hit_nucleon is HitNucleon.NEUTRON:
            return self.N
        raise ValueError(f"Struck nucleon is not set for target Z={self.Z}, N={self.N}")


def free_nucleon(hit_nucleon: HitNucleon = HitNucleon.PROTON) -> Target:
    """Create a single free nucleon target."""
    if hit_nucleon is HitNucleon.PROTON:
        return Target(Z=1, N=0, hit_nucleon=hit_nucleon)
    return Target(Z=0, N=1, hit_nucleon=hit_nucleon)


@dataclass(frozen=True)
class Interaction:
    """Immutable description of one neutrino interaction.

    Attributes:
        energy: Neutrino energy in the struck nucleon rest frame [GeV]
        kine: Kinematic coordinates
        process: Reaction class
        target: Target composition
        assume_free_nucleon: Return the free nucleon cross section even for a
            nuclear target
        skip_process_check: Bypass the process gate
        skip_kinematic_check: Bypass the kinematic gate
    """

    energy: float
    kine: Kinematics = field(default_factory=Kinematics)
    process: ProcessType = ProcessType.DIFFRACTIVE
    target: Target = field(default_factory=free_nucleon)
    assume_free_nucleon: bool = False
    skip_process_check: bool = False
    skip_kinematic_check: bool = False

    def __post_init__(self):
        """Validate energy and target."""
        if not self.energy > 0:
            raise ValueError(f"Neutrino energy must be positive: E={self.energy}")

        if not self.assume_free_nucleon:
            if self.target.A < 1:
                raise ValueError(
                    f"Target must contain at least one nucleon: Z={self.target.Z}, N={self.target.N}"
                )
            if self.target.hit_nucleon is None:
                raise ValueError("Struck nucleon must be set unless assume_free_nucleon is True")

    def with_kinematics(self, **coordinates) -> "Interaction":
        """Return a copy with some kinematic coordinates replaced.

        Example:
            >>> sample = interaction.with_kinematics(x=0.3, y=0.4)
        """
        kine = dataclasses.replace(self.kine, **coordinates)
        return dataclasses.replace(self, kine=kine)

    @property
    def x(self) -> Optional[float]:
        return self.kine.x

    @property
    def y(self) -> Optional[float]:
        return self.kine.y

    @property
    def t(self) -> Optional[float]:
        return self.kine.t

    @property
    def pion_energy(self) -> float:
        """Energy transferred to the pion, Epi = y E [GeV]."""
        return self.kine.y * self.energy

    def Q2(self, m_nucleon: float = NUCLEON_MASS) -> float:
        """Momentum transfer Q2 = 2 x y M E [GeV^2]."""
        return 2.0 * self.kine.x * self.kine.y * m_nucleon * self.energy

    def W(self, m_nucleon: float = NUCLEON_MASS) -> float:
        """Hadronic invariant mass, W^2 = M^2 + 2 M E y (1 - x) [GeV]."""
        W2 = m_nucleon ** 2 + 2.0 * m_nucleon * self.energy * self.kine.y * (1.0 - self.kine.x)
        return math.sqrt(max(W2, 0.0))
