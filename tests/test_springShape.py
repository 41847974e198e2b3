import numpy as np

from util.springShape import springPoints


def test_endpoints_and_leads():
    points = springPoints([0, 0], [200, 0])
    assert len(points) == 50 + 3
    assert np.allclose(points[0], [0, 0])
    assert np.allclose(points[-1], [200, 0])
    # straight leads of 50px at both ends
    assert np.allclose(points[1], [50, 0])
    assert np.allclose(points[-2], [150, 0], atol=1e-9)


def test_coil_stays_within_amplitude():
    points = springPoints([0, 0], [0, 300], amplitude=10)
    coil = points[1:-1]
    # spring along y, the coil swings in x
    assert np.max(np.abs(coil[:, 0])) <= 10 + 1e-9
    assert np.max(np.abs(coil[:, 0])) > 9
    assert np.all(np.diff(coil[:, 1]) > 0)


def test_wave_count():
    points = springPoints([0, 0], [400, 0], waves=5, steps=1000)
    offsets = points[1:-1, 1]
    # one crest per wave
    assert np.sum(np.isclose(offsets, 10)) == 5
    assert np.sum(np.isclose(offsets, -10)) == 5


def test_coincident_endpoints():
    points = springPoints([10, 10], [10, 10])
    assert len(points) == 2
    assert np.all(np.isfinite(points))
