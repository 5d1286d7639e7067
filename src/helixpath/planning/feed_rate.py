"""
Depth-compensated feed rate for helical cuts on a rotary axis.

The controller interpolates X (mm) and A (degrees) together, so the
programmed F word is a combined rate in "mm + degrees" per minute. To keep
the resultant surface velocity at the nominal cutting feed rate, the
programmed rate is scaled by the ratio of the programmed path length to the
physical helix length at the current cut diameter:

    scale(d) = sqrt((L^2 + 360^2 N^2) / (L^2 + N^2 pi^2 d^2))

As the cut goes deeper the diameter shrinks, the physical path gets shorter
and the programmed rate has to rise.
"""

import math

from helixpath.planning.models import CuttingParameters, Shape

# 360 degrees per turn, squared.
DEGREES_PER_TURN_SQUARED = 129600.0


def feed_rate_scale(length: float, number_of_turns: float, cut_diameter: float) -> float:
    """
    Ratio of programmed path length to physical helix length.

    Args:
        length: Helix length along X (mm)
        number_of_turns: Helix turns
        cut_diameter: Effective stock diameter at the current depth (mm)

    Returns:
        Dimensionless scale factor applied to the cutting feed rate
    """
    l2 = length * length
    n2 = number_of_turns * number_of_turns
    return math.sqrt(
        (l2 + DEGREES_PER_TURN_SQUARED * n2)
        / (l2 + n2 * math.pi * math.pi * cut_diameter * cut_diameter)
    )


def compensated_feed_rate(
    shape: Shape, parameters: CuttingParameters, cut_diameter: float
) -> float:
    """Programmed feed rate for a traversal at the given cut diameter."""
    return parameters.cut_feed_rate * feed_rate_scale(
        shape.length, shape.number_of_turns, cut_diameter
    )
