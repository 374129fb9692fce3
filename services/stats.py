import math

# --- Acklam's rational approximation coefficients for the normal quantile ---
_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

# Break-points between the tail and central regions
P_LOW = 0.02425
P_HIGH = 1 - P_LOW

# Largest argument math.exp takes without overflowing, with headroom
MAX_EXP_ARG = 700


def normal_cdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * math.erfc(-x / math.sqrt(2))


def _tail(q: float) -> float:
    c, d = _C, _D
    return (((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]) / \
        ((((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1)


def normal_ppf(p: float) -> float:
    """
    Inverse of the standard normal CDF (the z-score with P(Z <= z) = p).

    Acklam's approximation (relative error ~1.15e-9) followed by one Halley
    refinement step, which brings it close to full double precision.
    Raises ValueError when p is not strictly between 0 and 1.
    """
    if not (0 < p < 1):
        raise ValueError(f"probability must be strictly between 0 and 1, got {p}")

    if p < P_LOW:
        x = _tail(math.sqrt(-2 * math.log(p)))
    elif p <= P_HIGH:
        q = p - 0.5
        r = q * q
        a, b = _A, _B
        x = (((((a[0] * r + a[1]) * r + a[2]) * r + a[3]) * r + a[4]) * r + a[5]) * q / \
            (((((b[0] * r + b[1]) * r + b[2]) * r + b[3]) * r + b[4]) * r + 1)
    else:
        x = -_tail(math.sqrt(-2 * math.log1p(-p)))

    # Halley step; exp(x*x/2) overflows past |x| ~ 37.6, where the raw approximation is kept
    if x * x / 2 > MAX_EXP_ARG:
        return x
    e = normal_cdf(x) - p
    u = e * math.sqrt(2 * math.pi) * math.exp(x * x / 2)
    return x - u / (1 + x * u / 2)


def two_tailed_probability(significance_level: float) -> float:
    """Cumulative probability at the upper critical value, e.g. 95 -> 0.975."""
    return 1 - (1 - significance_level / 100) / 2


def two_tailed_z(significance_level: float) -> float:
    """Critical z for a two-tailed test at a significance level given in percent (e.g. 95)."""
    return normal_ppf(two_tailed_probability(significance_level))
