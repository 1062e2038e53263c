"""Deterministic value noise used for terrain generation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

MAX_PRIME_INDEX = 10

_PRIMES: tuple[tuple[int, int, int], ...] = (
    (995615039, 600173719, 701464987),
    (831731269, 162318869, 136250887),
    (826362836, 946737083, 245679977),
    (362489573, 795918041, 350777237),
    (457025711, 880830799, 909678923),
    (787070341, 177340217, 593320781),
    (405493717, 291031019, 391950901),
    (458904767, 676625681, 424452397),
    (531736441, 939683957, 810651871),
    (997169939, 842027887, 423882827),
)

_MASK32 = 0xFFFFFFFF


@dataclass
class PerlinNoise:
    """Octave value noise with cosine interpolation and 32-bit integer hashing."""

    num_x: int = 100
    num_y: int = 100
    num_octaves: int = 7
    persistence: float = 0.7
    prime_index: int = 0
    primes: tuple[tuple[int, int, int], ...] = field(default=_PRIMES)

    def noise(self, i: int, x: int, y: int) -> float:
        """Hash a lattice point to a value in (-1, 1]."""
        n = (x + y * 57) & _MASK32
        n = ((n << 13) ^ n) & _MASK32
        a, b, c = self.primes[i]
        t = (n * (n * n * a + b) + c) & 0x7FFFFFFF
        return 1.0 - t / 1073741824.0

    def smoothed_noise(self, i: int, x: int, y: int) -> float:
        corners = (
            self.noise(i, x - 1, y - 1)
            + self.noise(i, x + 1, y - 1)
            + self.noise(i, x - 1, y + 1)
            + self.noise(i, x + 1, y + 1)
        ) / 16
        sides = (
            self.noise(i, x - 1, y)
            + self.noise(i, x + 1, y)
            + self.noise(i, x, y - 1)
            + self.noise(i, x, y + 1)
        ) / 8
        center = self.noise(i, x, y) / 4
        return corners + sides + center

    def interpolate(self, a: float, b: float, x: float) -> float:
        """Cosine interpolation between a and b."""
        f = (1 - math.cos(x * 3.1415927)) * 0.5
        return a * (1 - f) + b * f

    def interpolated_noise(self, i: int, x: float, y: float) -> float:
        ix = int(x)
        fx = x - ix
        iy = int(y)
        fy = y - iy
        v1 = self.smoothed_noise(i, ix, iy)
        v2 = self.smoothed_noise(i, ix + 1, iy)
        v3 = self.smoothed_noise(i, ix, iy + 1)
        v4 = self.smoothed_noise(i, ix + 1, iy + 1)
        i1 = self.interpolate(v1, v2, fx)
        i2 = self.interpolate(v3, v4, fx)
        return self.interpolate(i1, i2, fy)

    def value_noise_2d(self, x: float, y: float) -> float:
        """Sum of octaves of interpolated noise at (x, y)."""
        total = 0.0
        frequency = 2.0**self.num_octaves
        amplitude = 1.0
        for octave in range(self.num_octaves):
            frequency /= 2
            amplitude *= self.persistence
            total += (
                self.interpolated_noise(
                    (self.prime_index + octave) % MAX_PRIME_INDEX,
                    x / frequency,
                    y / frequency,
                )
                * amplitude
            )
        return total / frequency