import pytest

from ftpp.perlin_noise import PerlinNoise2D


@pytest.fixture(scope="module")
def noise():
    return PerlinNoise2D()


@pytest.mark.parametrize("x, y", [(0, 0), (3, 7), (-4, 12), (255, 256)])
def test_zero_on_lattice_points(noise, x, y):
    assert noise.sample(float(x), float(y)) == 0.0


def test_deterministic_across_instances(noise):
    other = PerlinNoise2D()
    points = [(0.3, 0.7), (12.25, 3.5), (-1.75, 8.125)]
    assert [noise.sample(x, y) for x, y in points] == [other.sample(x, y) for x, y in points]


def test_bounded(noise):
    values = [noise.sample(i * 0.37, j * 0.53) for i in range(30) for j in range(30)]
    assert all(-2.0 <= v <= 2.0 for v in values)


def test_varies(noise):
    values = {noise.sample(i * 0.37, j * 0.53) for i in range(10) for j in range(10)}
    assert len(values) > 10


def test_periodic_in_x_and_y(noise):
    assert noise.sample(0.5, 0.25) == noise.sample(256.5, 0.25)
    assert noise.sample(0.5, 0.25) == noise.sample(0.5, 256.25)


def test_negative_coordinates_wrap(noise):
    assert noise.sample(-0.5, 0.25) == noise.sample(255.5, 0.25)


def test_continuous(noise):
    assert abs(noise.sample(10.3, 4.6) - noise.sample(10.3 + 1e-7, 4.6)) < 1e-5