import pytest

from data.Parameters import OPTIONS, SimulationParameters, getDefault, getLabel, getRange


def test_defaults():
    params = SimulationParameters()
    assert params.get('gravity') == 9.81
    assert params.get('mass1') == 2
    assert params.get('length2') == 200
    assert params.get('stiffness1') == 10
    assert params.get('damping2') == 0.01
    assert params.get('simSpeed') == 0.2


def test_ten_options_in_slider_order():
    assert list(OPTIONS) == ['gravity', 'mass1', 'mass2', 'length1', 'length2',
        'stiffness1', 'stiffness2', 'damping1', 'damping2', 'simSpeed']
    assert getLabel('simSpeed') == 'Simulation speed'
    assert getRange('damping1') == (0.001, 0.5)


def test_defaults_inside_range():
    for name in OPTIONS:
        low, high = getRange(name)
        assert low <= getDefault(name) <= high


def test_set_and_clamp():
    params = SimulationParameters()
    params.set('stiffness2', 15)
    assert params.get('stiffness2') == 15
    params.set('mass1', 50)
    assert params.get('mass1') == 10
    params.set('damping1', 0)
    assert params.get('damping1') == 0.001


def test_keyword_construction():
    params = SimulationParameters(gravity=0, simSpeed=0.1)
    assert params.get('gravity') == 0
    assert params['simSpeed'] == 0.1


def test_unknown_name():
    params = SimulationParameters()
    with pytest.raises(KeyError):
        params.get('friction')
    with pytest.raises(KeyError):
        params.set('friction', 1)


def test_reset_defaults():
    params = SimulationParameters(gravity=1, length1=300)
    params.resetDefaults()
    assert params.get('gravity') == 9.81
    assert params.get('length1') == 200


def test_snapshot_is_a_copy():
    params = SimulationParameters()
    snap = params.snapshot()
    params.set('gravity', 3)
    assert snap['gravity'] == 9.81
    assert len(snap) == 10


def test_gravity_vector():
    params = SimulationParameters(gravity=4)
    g = params.getGravity()
    assert list(g) == [0, 4]
