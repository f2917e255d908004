"""
PURPOSE: Probabilistic distribution samplers for the legs of an airport trip.

RESPONSIBILITIES:
- Sample travel and bag-drop times from a lognormal distribution
- Sample security waits from an ex-Gaussian (Gaussian + exponential) distribution
- Fit both families from the summaries a traveler or airport profile provides
- Single responsibility: only sampling and fitting, no aggregation
"""

import numpy as np
from scipy.stats import expon

from airport_timing.monte_carlo.config import EX_GAUSSIAN_TAIL_FRACTION


def resolve_rng(random_state=None):
    """
    Return a numpy Generator for the given seed or generator.

    Args:
        random_state: None (fresh entropy), an int seed, or an existing
            numpy.random.Generator which is returned unchanged.

    Returns:
        numpy.random.Generator
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def _standard_normal(rng, size):
    """Box-Muller transform from two uniform draws."""
    # rng.random() is in [0, 1); flip it to (0, 1] so log(u1) is always defined
    u1 = 1.0 - rng.random(size)
    u2 = rng.random(size)
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


def _scalar_or_array(values, size):
    if size is None:
        return float(values)
    return values


class TravelTimeSampler:
    """Samples right-skewed positive durations (travel, bag drop)."""

    @staticmethod
    def fit_from_min_max(min_minutes, max_minutes):
        """
        Fit lognormal parameters from a reported min/max range.

        The range is treated as roughly +/-1.5 standard deviations of the
        underlying normal in log-space.

        Args:
            min_minutes: Fastest plausible duration
            max_minutes: Slowest plausible duration

        Returns:
            tuple: (mu, sigma) of the underlying normal

        Raises:
            ValueError: if either bound is non-positive or min >= max
        """
        if min_minutes <= 0 or max_minutes <= 0:
            raise ValueError(
                f"min and max must be positive for a lognormal fit, got min={min_minutes}, max={max_minutes}"
            )
        if min_minutes >= max_minutes:
            raise ValueError(
                f"min must be less than max, got min={min_minutes}, max={max_minutes}"
            )

        log_min = np.log(min_minutes)
        log_max = np.log(max_minutes)

        mu = (log_min + log_max) / 2
        sigma = (log_max - log_min) / 3  # 3 = 2 * 1.5
        return float(mu), float(sigma)

    @staticmethod
    def sample(mu, sigma, size=None, rng=None):
        """
        Sample from a lognormal distribution (log-space parametrization).

        Args:
            mu: Mean of the underlying normal
            sigma: Standard deviation of the underlying normal
            size: None for a single float, int for an array
            rng: numpy Generator

        Returns:
            float or numpy array of samples
        """
        if not np.isfinite(mu) or not np.isfinite(sigma):
            raise ValueError(f"mu and sigma must be finite, got mu={mu}, sigma={sigma}")
        if sigma < 0:
            raise ValueError(f"sigma must be non-negative, got {sigma}")

        rng = resolve_rng(rng)
        z = _standard_normal(rng, size)
        return _scalar_or_array(np.exp(mu + sigma * z), size)


class SecurityWaitSampler:
    """Samples queue waits with a heavier right tail than travel times."""

    @staticmethod
    def fit_from_moments(mean, std, tail_fraction=EX_GAUSSIAN_TAIL_FRACTION):
        """
        Moment-matching heuristic for ex-Gaussian parameters.

        The exponential tail is assumed to carry a fixed fraction of the
        reported standard deviation; the Gaussian part takes the rest.

        Args:
            mean: Mean wait in minutes
            std: Standard deviation of the wait in minutes
            tail_fraction: Share of std assigned to the exponential tail

        Returns:
            tuple: (mu, sigma, lam) for the Gaussian mean/std and exponential rate

        Raises:
            ValueError: if std is not positive or the inputs are not finite
        """
        if not np.isfinite(mean) or not np.isfinite(std):
            raise ValueError(f"mean and std must be finite, got mean={mean}, std={std}")
        if std <= 0:
            raise ValueError(f"std must be positive, got {std}")

        exp_std = tail_fraction * std
        lam = 1.0 / exp_std
        mu = mean - 1.0 / lam
        # Clamp keeps the radicand non-negative when std is small relative to the tail
        sigma = np.sqrt(max(0.0, std**2 - 1.0 / lam**2))
        return float(mu), float(sigma), float(lam)

    @staticmethod
    def sample(mu, sigma, lam, size=None, rng=None):
        """
        Sample Gaussian(mu, sigma) + Exponential(rate=lam), floored at zero.

        The floor only bites for degenerate parameterizations where the
        Gaussian part has a lot of mass below zero.

        Args:
            mu: Mean of the Gaussian part
            sigma: Standard deviation of the Gaussian part
            lam: Rate of the exponential part
            size: None for a single float, int for an array
            rng: numpy Generator

        Returns:
            float or numpy array of non-negative samples
        """
        if sigma < 0:
            raise ValueError(f"sigma must be non-negative, got {sigma}")
        if lam <= 0 or not np.isfinite(lam):
            raise ValueError(f"lam must be positive and finite, got {lam}")

        rng = resolve_rng(rng)
        gaussian = mu + sigma * _standard_normal(rng, size)
        tail = expon.rvs(scale=1.0 / lam, size=size, random_state=rng)
        return _scalar_or_array(np.maximum(0.0, gaussian + tail), size)


# Module-level convenience functions for direct import
def fit_lognormal_from_min_max(min_val, max_val):
    """Module-level wrapper for lognormal fitting from a min/max range."""
    return TravelTimeSampler.fit_from_min_max(min_val, max_val)


def sample_lognormal(mu, sigma, size=None, random_state=None):
    """Module-level wrapper for lognormal sampling (log-space parametrization)."""
    return TravelTimeSampler.sample(mu, sigma, size=size, rng=resolve_rng(random_state))


def fit_ex_gaussian(mean, std):
    """Module-level wrapper for ex-Gaussian moment matching."""
    return SecurityWaitSampler.fit_from_moments(mean, std)


def sample_ex_gaussian(mu, sigma, lam, size=None, random_state=None):
    """Module-level wrapper for ex-Gaussian sampling."""
    return SecurityWaitSampler.sample(mu, sigma, lam, size=size, rng=resolve_rng(random_state))
