"""Pytest configuration and shared fixtures for dfr_xsec tests."""

import pytest

from dfr_xsec.config.enums import HitNucleon, ProcessType
from dfr_xsec.config.yaml_loader import reload_defaults
from dfr_xsec.core.constants import DEFAULT_CONSTANTS
from dfr_xsec.core.kinematics import Interaction, Kinematics, Target, free_nucleon
from dfr_xsec.core.lut import create_pion_nucleon_lut
from dfr_xsec.xsec.diffractive import DiffractivePionXSec
from dfr_xsec.xsec.integrator import GridIntegrator


GLOBAL_PARAMS = {"DFR-Ma": 1.0, "DFR-Beta": 7.0}


@pytest.fixture
def global_params():
    """Global parameter list independent of defaults.yaml."""
    return dict(GLOBAL_PARAMS)


@pytest.fixture
def model(global_params):
    """Diffractive model with explicit global parameters."""
    return DiffractivePionXSec(global_config=global_params)


@pytest.fixture
def lut():
    """Default pion-nucleon cross section table."""
    return create_pion_nucleon_lut()


@pytest.fixture
def constants():
    """Default physics constants."""
    return DEFAULT_CONSTANTS


@pytest.fixture
def free_interaction():
    """Diffractive interaction on a free proton at E = 5 GeV."""
    return Interaction(
        energy=5.0,
        kine=Kinematics(x=0.3, y=0.4),
        process=ProcessType.DIFFRACTIVE,
        target=free_nucleon(HitNucleon.PROTON),
        assume_free_nucleon=True,
    )


@pytest.fixture
def argon_target():
    """Ar40 with a struck neutron."""
    return Target(Z=18, N=22, hit_nucleon=HitNucleon.NEUTRON)


@pytest.fixture
def small_integrator():
    """Coarse grid integrator for fast tests."""
    return GridIntegrator(nx=30, ny=30)


@pytest.fixture
def restore_defaults(monkeypatch):
    """Reload defaults.yaml after a test changes its location."""
    yield monkeypatch
    monkeypatch.undo()
    reload_defaults()
