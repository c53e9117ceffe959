#!/usr/bin/env python3
"""
Basic usage of PySATL Stats.

This example shows how to:
1. Describe a numeric dataset with Statistics
2. Query probabilities and moments of the discrete distributions
3. Update distribution parameters and handle invalid values

Run it from an environment where the package is installed (``pip install -e .``).
"""

import sys


def example_descriptive_statistics():
    """
    Population and sample statistics of a small dataset.
    """
    from pysatl_stats import EmptyDatasetError, Statistics

    print("=" * 70)
    print("EXAMPLE: Descriptive statistics")
    print("=" * 70)

    stats = Statistics([1, 2, 3, 4, 5])
    print(f"\nValues:             {stats.get_values()}")
    print(f"Mean:               {stats.mean():.4f}")
    print(f"Median:             {stats.median():.4f}")
    print(f"Mode:               {stats.mode()}")
    print(f"Amplitude:          {stats.amplitude()}")
    print(f"Population std:     {stats.standard_deviation():.4f}")

    stats.set_population_data(False)
    print(f"Sample std:         {stats.standard_deviation():.4f}")
    print(f"Coeff. of variation {stats.coefficient_of_variation():.4f}")

    try:
        Statistics().median()
    except EmptyDatasetError as exc:
        print(f"\nEmpty dataset:      {exc}")


def example_discrete_distributions():
    """
    Probabilities, cumulative probabilities and moments.
    """
    from pysatl_stats import Binomial, DiscreteUniform, Geometric, ParametricFamilyDistribution

    print("\n" + "=" * 70)
    print("EXAMPLE: Discrete distributions")
    print("=" * 70)

    coin = Binomial(10, 0.5)
    print(f"\nP(5 heads in 10 tosses) = {coin.get_probability(5):.8f}")

    distributions: list[ParametricFamilyDistribution] = [
        coin,
        Geometric(0.25),
        DiscreteUniform(1, 6),
    ]
    for distr in distributions:
        print(f"\n{distr!r}")
        print(f"  P(X = 3)  = {distr.get_probability(3):.6f}")
        print(f"  P(X <= 3) = {distr.cdf(3):.6f}")
        print(f"  mean      = {distr.mean():.4f}")
        print(f"  variance  = {distr.variance():.4f}")


def example_parameter_updates():
    """
    Setters validate before replacing the parameters.
    """
    from pysatl_stats import Binomial, DomainError

    print("\n" + "=" * 70)
    print("EXAMPLE: Parameter updates")
    print("=" * 70)

    binomial = Binomial(10, 0.5)
    binomial.set_number_of_trials(20).set_probability_of_success(0.1)
    print(f"\nUpdated:  {binomial!r}")

    try:
        binomial.set_probability_of_success(1.5)
    except DomainError as exc:
        print(f"Rejected: {exc.constraint}")
    print(f"Kept:     {binomial!r}")


def main():
    example_descriptive_statistics()
    example_discrete_distributions()
    example_parameter_updates()
    return 0


if __name__ == "__main__":
    sys.exit(main())
