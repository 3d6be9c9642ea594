"""Complex arithmetic on plane vectors.

Points are represented as Python ``complex`` values ``x + iy``. Addition,
subtraction, scaling and complex multiplication use the builtin operators;
this module adds the vector products, the 90 degree rotations, division in
the ``a * conj(b) / |b|^2`` form and the logarithm/arctangent with the branch
choice the edge integrals rely on.

All functions are pure and stateless.
"""

import math


def inner(a: complex, b: complex) -> float:
    """Euclidean dot product of two vectors."""
    return a.real * b.real + a.imag * b.imag


def area(a: complex, b: complex) -> float:
    """Signed parallelogram area ``a.y * b.x - a.x * b.y``.

    Positive when b is clockwise from a.
    """
    return a.imag * b.real - a.real * b.imag


def dist_squared(a: complex, b: complex) -> float:
    """Squared distance between two points."""
    dx = a.real - b.real
    dy = a.imag - b.imag
    return dx * dx + dy * dy


def dist(a: complex, b: complex) -> float:
    """Distance between two points."""
    return math.hypot(a.real - b.real, a.imag - b.imag)


def modulus(a: complex) -> float:
    """Length of a vector."""
    return math.sqrt(a.real * a.real + a.imag * a.imag)


def conj(a: complex) -> complex:
    """Complex conjugate (reflection across the x axis)."""
    return complex(a.real, -a.imag)


def rotate_left(a: complex) -> complex:
    """Rotate 90 degrees counter-clockwise, i.e. multiply by i."""
    return complex(-a.imag, a.real)


def rotate_right(a: complex) -> complex:
    """Rotate 90 degrees clockwise, i.e. multiply by -i."""
    return complex(a.imag, -a.real)


def cdiv(a: complex, b: complex) -> complex:
    """Complex division ``a * conj(b) / |b|^2``.

    Raises:
        ZeroDivisionError: If b is zero
    """
    denom = inner(b, b)
    return complex(
        (a.real * b.real + a.imag * b.imag) / denom,
        (a.imag * b.real - a.real * b.imag) / denom,
    )


def principal_log(a: complex) -> complex:
    """Complex logarithm with the argument taken in [0, 2*pi).

    The argument is picked by quadrant:

    - x > 0, y >= 0: atan(y/x)
    - x = 0, y > 0: pi/2
    - x = 0, y < 0: 3*pi/2
    - x > 0, y < 0: atan(y/x) + 2*pi
    - x < 0: atan(y/x) + pi

    Raises:
        ValueError: If a is zero
    """
    x, y = a.real, a.imag
    r = math.log(x * x + y * y) / 2
    theta = 0.0
    if x == 0 and y > 0:
        theta = math.pi / 2
    elif x == 0 and y < 0:
        theta = 3 * math.pi / 2
    elif x > 0 and y >= 0:
        theta = math.atan(y / x)
    elif x > 0 and y < 0:
        theta = math.atan(y / x) + 2 * math.pi
    elif x < 0:
        theta = math.atan(y / x) + math.pi
    return complex(r, theta)


def principal_atan(a: complex) -> complex:
    """Complex arctangent ``-i/2 * log((1 + ia) / (1 - ia))``.

    Uses :func:`principal_log`, so the result inherits its [0, 2*pi) branch.
    """
    ia = rotate_left(a)
    return rotate_right(principal_log(cdiv(1 + ia, 1 - ia))) / 2
