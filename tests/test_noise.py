import pytest

from evolasm.noise import PerlinNoise


def test_noise_at_origin_uses_third_prime():
    pn = PerlinNoise()
    assert pn.noise(0, 0, 0) == pytest.approx(1.0 - 701464987 / 1073741824.0)


@pytest.mark.parametrize("i", range(10))
@pytest.mark.parametrize("x,y", [(0, 0), (5, 7), (-3, 12), (127, 127), (40000, 90000)])
def test_noise_range(i, x, y):
    value = PerlinNoise().noise(i, x, y)
    assert -1.0 < value <= 1.0


def test_noise_depends_on_combined_coordinate():
    pn = PerlinNoise()
    assert pn.noise(3, 1, 0) == pn.noise(3, -56, 1)


def test_interpolate_endpoints():
    pn = PerlinNoise()
    assert pn.interpolate(2.0, 5.0, 0.0) == 2.0
    assert pn.interpolate(2.0, 5.0, 1.0) == pytest.approx(5.0)
    mid = pn.interpolate(2.0, 5.0, 0.5)
    assert 2.0 < mid < 5.0


def test_interpolated_noise_on_lattice_matches_smoothed():
    pn = PerlinNoise()
    assert pn.interpolated_noise(1, 4.0, 9.0) == pytest.approx(pn.smoothed_noise(1, 4, 9))


def test_smoothed_noise_bounded():
    pn = PerlinNoise()
    for x in range(-5, 5):
        assert -1.0 <= pn.smoothed_noise(2, x, x * 3) <= 1.0


def test_value_noise_deterministic_and_bounded():
    a = PerlinNoise()
    b = PerlinNoise()
    for x, y in [(0, 0), (10, 20), (127, 3)]:
        assert a.value_noise_2d(x, y) == b.value_noise_2d(x, y)
        assert abs(a.value_noise_2d(x, y)) < 2.5


def test_value_noise_depends_on_prime_index():
    base = PerlinNoise()
    shifted = PerlinNoise(prime_index=3)
    samples = [(x, y) for x in range(0, 64, 8) for y in range(0, 64, 8)]
    assert any(base.value_noise_2d(x, y) != shifted.value_noise_2d(x, y) for x, y in samples)