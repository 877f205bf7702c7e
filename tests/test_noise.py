import numpy as np

from hexworld.noise import NoiseField, NoiseLayers, perlin


def test_perlin_range_and_lattice_points():
    xs = np.linspace(-50.0, 50.0, 401)
    zs = np.linspace(13.0, -37.0, 401)
    values = perlin(xs[:, None], zs[None, :])
    assert values.shape == (401, 401)
    assert values.min() >= 0.0 and values.max() <= 1.0
    # Coherent but not constant
    assert values.std() > 0.05
    assert float(perlin(3.0, -7.0)) == 0.5


def test_perlin_is_smooth():
    a = float(perlin(10.3, 4.7))
    b = float(perlin(10.3001, 4.7))
    assert abs(a - b) < 1e-3


def test_field_sample_matches_vectorised_sample():
    field = NoiseField(offset=1234, scale=0.075)
    xs = [0.0, 2.0, -3.5, 17.25]
    zs = [0.0, 1.7, 8.0, -4.0]
    many = field.sample_many(xs, zs)
    for i, (x, z) in enumerate(zip(xs, zs)):
        assert field.sample(x, z) == float(many[i])


def test_layers_are_seeded_and_decorrelated():
    a = NoiseLayers.from_rng(np.random.default_rng(7), 0.075, 0.06)
    b = NoiseLayers.from_rng(np.random.default_rng(7), 0.075, 0.06)
    c = NoiseLayers.from_rng(np.random.default_rng(8), 0.075, 0.06)
    assert a == b
    assert a.offsets != c.offsets
    assert len(set(a.offsets)) == 3
    assert a.trees.scale == a.tree_details.scale == 0.06
    assert a.terrain.scale == 0.075
    assert all(0 <= o < 10_000_000 for o in a.offsets)
