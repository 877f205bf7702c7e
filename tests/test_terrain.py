import logging

import numpy as np
import pytest

from hexworld.hexgrid import cube_to_world
from hexworld.noise import NoiseLayers
from hexworld.settings import MapConfig
from hexworld.terrain import Decoration, Terrain, TerrainClassifier, elevation_to_terrain


class ConstField:
    def __init__(self, value):
        self.value = value

    def sample(self, x, z):
        return self.value


def classifier(terrain=0.5, trees=0.0, details=0.0, config=None, seed=0):
    layers = NoiseLayers(ConstField(terrain), ConstField(trees), ConstField(details))
    return TerrainClassifier(config or MapConfig(), layers, np.random.default_rng(seed))


def classify(clf, cube):
    return clf.classify(cube, cube_to_world(cube, clf.config.tile_size))


def test_thresholds_are_strict():
    cfg = MapConfig()
    assert elevation_to_terrain(0.29, cfg) is Terrain.WATER
    assert elevation_to_terrain(0.30, cfg) is Terrain.SAND
    assert elevation_to_terrain(0.35, cfg) is Terrain.GRASS
    assert elevation_to_terrain(0.69, cfg) is Terrain.GRASS
    assert elevation_to_terrain(0.70, cfg) is Terrain.ROCK


@pytest.mark.parametrize("cube", [(0, 0, 0), (1, -1, 0), (3, 0, -3), (-2, 3, -1)])
def test_base_plateau_is_flat_and_bare(cube):
    # Noise that would otherwise give water and trees is ignored
    c = classify(classifier(terrain=0.1, trees=0.5, details=0.9), cube)
    assert c.terrain is Terrain.GRASS
    assert c.height == pytest.approx(1.375)
    assert c.walkable
    assert c.decoration == Decoration.NONE


def test_transition_blends_towards_noise():
    clf = classifier(terrain=0.85)
    heights = [classify(clf, (d, 0, -d)).height for d in range(3, 10)]
    # Rises linearly over the transition rings, then stays at the raw value
    assert heights[0] == pytest.approx(1.375)
    assert classify(clf, (4, 0, -4)).elevation == pytest.approx(0.35 + 0.5 * 0.2)
    assert classify(clf, (8, 0, -8)).elevation == pytest.approx(0.85)
    assert heights == sorted(heights)
    assert heights[-2] == pytest.approx(1 + 0.55 * 7.5)
    assert heights[-1] == pytest.approx(1 + 0.55 * 7.5)


def test_categories_outside_base():
    far = (10, -5, -5)
    water = classify(classifier(terrain=0.2), far)
    assert water.terrain is Terrain.WATER
    assert water.height == 1.0
    assert not water.walkable

    sand = classify(classifier(terrain=0.32), far)
    assert sand.terrain is Terrain.SAND
    assert sand.height == pytest.approx(1 + 0.02 * 7.5)
    assert sand.walkable

    rock = classify(classifier(terrain=0.8), far)
    assert rock.terrain is Terrain.ROCK
    assert rock.height == pytest.approx(4.75)
    assert rock.walkable


def test_vegetation_band():
    far = (10, -5, -5)
    bare = classify(classifier(terrain=0.5, trees=0.56), far)
    assert bare.decoration == Decoration.NONE and bare.walkable

    trees = classify(classifier(terrain=0.5, trees=0.5, details=0.9), far)
    assert trees.decoration.kind == "default"
    assert trees.decoration.variant is None
    assert 0 <= trees.decoration.yaw < 360
    assert not trees.walkable

    detail = classify(classifier(terrain=0.5, trees=0.545, details=0.6), far)
    assert detail.decoration.kind == "detail"
    assert detail.decoration.variant in range(len(MapConfig().tree_details))
    assert not detail.walkable

    # Edge of the band but low detail noise: default vegetation
    edge = classify(classifier(terrain=0.5, trees=0.545, details=0.4), far)
    assert edge.decoration.kind == "default"


def test_vegetation_only_on_grass():
    far = (10, -5, -5)
    for terrain in (0.2, 0.32, 0.8):
        c = classify(classifier(terrain=terrain, trees=0.5, details=0.9), far)
        assert c.decoration == Decoration.NONE


def test_empty_detail_set_falls_back_to_default(caplog):
    cfg = MapConfig(tree_details=())
    with caplog.at_level(logging.WARNING):
        c = classify(classifier(terrain=0.5, trees=0.545, details=0.6, config=cfg), (10, -5, -5))
    assert c.decoration.kind == "default"
    assert "Trying to sample an empty list" in caplog.text
