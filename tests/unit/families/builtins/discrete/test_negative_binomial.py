"""
Tests for Negative-Binomial Distribution Family

This module tests the Negative-Binomial family (failures before the r-th
success, real r) against scipy.stats.nbinom.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import nbinom

from pysatl_discrete.distributions import DiscreteInterval
from pysatl_discrete.families.configuration import configure_families_register
from pysatl_discrete.types import FamilyName

from .base import BaseDistributionTest


class TestNegativeBinomialFamily(BaseDistributionTest):
    """Test suite for Negative-Binomial distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.nb_family = registry.get(FamilyName.NEGATIVE_BINOMIAL)
        self.nb_dist_example = self.nb_family(r=7.8, p=0.4)

    def test_family_properties(self):
        dist = self.nb_dist_example
        assert dist.family_name == FamilyName.NEGATIVE_BINOMIAL
        assert dist.parameters == {"r": 7.8, "p": 0.4}
        assert dist.support == DiscreteInterval(min_k=0)

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="r > 0"):
            self.nb_family(r=-1.0, p=0.4)
        with pytest.raises(ValueError, match="0 < p <= 1"):
            self.nb_family(r=1.0, p=0.0)

    @pytest.mark.parametrize("r, p", [(7.8, 0.4), (3, 0.4), (0.5, 0.9), (1, 0.25)])
    def test_agrees_with_scipy(self, r, p):
        dist = self.nb_family(r=r, p=p)
        reference = nbinom(r, p)
        points = np.arange(-3, 80)

        self.assert_arrays_almost_equal(
            self.evaluate(dist.probability_mass, points), reference.pmf(points)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.left_inclusive_probability, points), reference.cdf(points)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.right_exclusive_probability, points), reference.sf(points)
        )

    def test_single_success_is_geometric(self):
        registry = configure_families_register()
        geometric = registry.get(FamilyName.GEOMETRIC)(p=0.25)
        dist = self.nb_family(r=1, p=0.25)
        points = np.arange(0, 40)
        self.assert_arrays_almost_equal(
            self.evaluate(dist.probability_mass, points),
            self.evaluate(geometric.probability_mass, points),
        )
        assert dist.mean == pytest.approx(geometric.mean)

    def test_moments(self):
        mean, var, skew, kurt = nbinom(7.8, 0.4).stats(moments="mvsk")
        dist = self.nb_dist_example
        assert dist.mean == pytest.approx(float(mean))
        assert dist.variance == pytest.approx(float(var))
        assert dist.skewness == pytest.approx(float(skew))
        assert dist.excess_kurtosis == pytest.approx(float(kurt))

    @pytest.mark.parametrize("p", [0.01, 0.2, 0.5, 0.8, 0.999])
    def test_quantile_agrees_with_scipy(self, p):
        assert self.nb_dist_example.inverse_left_probability(p) == int(nbinom(7.8, 0.4).ppf(p))

    def test_certain_success(self):
        dist = self.nb_family(r=2.5, p=1.0)
        assert dist.probability_mass(0) == pytest.approx(1.0)
        assert dist.probability_mass(1) == 0.0
        assert dist.left_inclusive_probability(0) == pytest.approx(1.0)
        assert dist.mean == 0.0
        assert dist.inverse_left_probability(0.5) == 0
