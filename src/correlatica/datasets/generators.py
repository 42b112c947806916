"""
Synthetic dataset generators.

Functions
---------
generate_linear(target_correlation, sign=1, random_state=None)
    Generate a noisy linear dataset whose Pearson correlation is steered by
    a target magnitude and a sign.

Notes
-----
The generator is a teaching aid, not a statistical model: the slope grows
with the target and the noise shrinks with it, so higher targets give
visibly tighter clouds. The constants keep the points roughly inside the
``[0, 20]`` plotting domain and live in the ``generator`` section of the
settings config.
"""

import logging
import uuid
from numbers import Number
from typing import List

import numpy as np

from correlatica._utils import read_config, validate_in_range, validate_sign
from correlatica.types import Point

logger = logging.getLogger(__name__)


def generate_linear(
    target_correlation: Number,
    sign: int = 1,
    random_state: int | np.random.Generator | None = None,
) -> List[Point]:
    """
    Generate a noisy linear dataset with a targeted correlation.

    For ``i = 1..20``:

    - ``x = i``
    - ``slope = sign * target_correlation``
    - ``noise = 1.7 - 1.5 * target_correlation``
    - ``y = slope * x + U(-0.5, 0.5) * noise * 10 + 10``

    Parameters
    ----------
    target_correlation : Number
        Desired magnitude of r, within ``[0, 1]``.
    sign : {1, -1}, default=1
        Direction of the relationship.
    random_state : int, numpy.random.Generator or None, default=None
        Seed or generator for the uniform noise. If None, the noise is
        non-deterministic.

    Returns
    -------
    list[Point]
        Twenty points ordered by x. Every call stamps a new random token
        into the ids (``'{token}-{index}'``), so ids never repeat across
        generations.

    Raises
    ------
    ValueError
        If `target_correlation` lies outside ``[0, 1]`` or `sign` is not
        ``+1`` or ``-1``.

    Examples
    --------
    >>> from correlatica.datasets import generate_linear
    >>> from correlatica.interactions import compute_correlation
    >>> points = generate_linear(1.0, sign=-1, random_state=0)
    >>> [p.x for p in points[:3]]
    [1.0, 2.0, 3.0]
    >>> compute_correlation(points) < -0.9
    True
    """
    errors = read_config("messages")["errors"]
    validate_in_range(
        target_correlation,
        0,
        1,
        err_msg=errors["value_out_of_range_f"].format(
            "target_correlation", 0, 1, target_correlation
        ),
    )
    validate_sign(sign, err_msg=errors["unsupported_sign_f"].format(sign))
    params = read_config("settings")["generator"]

    rng = np.random.default_rng(random_state)
    x = np.arange(1, params["size"] + 1, dtype=np.float64)
    slope = sign * target_correlation
    noise = params["noise_base"] - params["noise_scale"] * target_correlation
    jitter = rng.uniform(-0.5, 0.5, size=x.size)
    y = slope * x + jitter * noise * params["noise_amplitude"] + params["y_offset"]

    token = uuid.uuid4().hex[:12]
    logger.debug(
        "Generated linear dataset '%s' (target=%s, sign=%+d, noise=%.3f).",
        token,
        target_correlation,
        sign,
        noise,
    )
    return [
        Point(id=f"{token}-{i}", x=float(xi), y=float(yi))
        for i, (xi, yi) in enumerate(zip(x, y))
    ]
