"""
Shared fixtures for product tests

Paths are built straight from a product's dataline so that every
snapshot carries exactly the declared observations.
"""
import pytest

from products import (
    ContingentBond,
    European,
    Europeans,
    Snapshot,
    UpAndOutCall,
)


def build_path(product, spots, discount=0.99, libor=0.03, numeraire=1.0):
    """One snapshot per timeline date, spots[i] used for every forward on date i"""
    path = []
    for spot, requirement in zip(spots, product.dataline):
        path.append(Snapshot(
            forwards=[spot] * len(requirement.forward_maturities),
            discounts=[discount] * len(requirement.discount_maturities),
            libors=[libor] * len(requirement.rate_definitions),
            numeraire=numeraire if requirement.numeraire else None,
        ))
    return path


@pytest.fixture
def path_for():
    return build_path


@pytest.fixture
def european():
    return European(strike=100.0, exercise_date=1.0)


@pytest.fixture
def uoc():
    return UpAndOutCall(strike=100.0, barrier=120.0, maturity=1.0,
                        monitor_freq=0.25, smooth=0.01)


@pytest.fixture
def europeans():
    return Europeans({2.0: [90.0, 110.0], 1.0: [100.0]})


@pytest.fixture
def contingent_bond():
    return ContingentBond(maturity=1.0, cpn=0.02, pay_freq=0.25, smooth=0.01)


@pytest.fixture(params=["european", "uoc", "europeans", "contingent_bond"])
def product(request):
    """Each product of the family in turn"""
    return request.getfixturevalue(request.param)
