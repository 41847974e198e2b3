from collections import OrderedDict

from data.Force import gravity

# name: (label, min, max, default)
# Slider order in the panel follows this table.
OPTIONS = OrderedDict([
    ('gravity',    ('Gravity', 0, 20, 9.81)),
    ('mass1',      ('Mass 1', 1, 10, 2)),
    ('mass2',      ('Mass 2', 1, 10, 2)),
    ('length1',    ('Length 1', 100, 300, 200)),
    ('length2',    ('Length 2', 100, 300, 200)),
    ('stiffness1', ('Stiffness 1', 1, 20, 10)),
    ('stiffness2', ('Stiffness 2', 1, 20, 10)),
    ('damping1',   ('Damping 1', 0.001, 0.5, 0.01)),
    ('damping2',   ('Damping 2', 0.001, 0.5, 0.01)),
    ('simSpeed',   ('Simulation speed', 0, 0.5, 0.2)),
])

def getLabel(name):
    return OPTIONS[name][0]

def getRange(name):
    _, low, high, _ = OPTIONS[name]
    return low, high

def getDefault(name):
    return OPTIONS[name][3]


class SimulationParameters:
    '''
    User adjustable values, sampled by the solver on every tick.
    Written by the slider panel and the command line.
    '''
    def __init__(self, **values):
        self.values = OrderedDict((name, float(getDefault(name))) for name in OPTIONS)
        for name, value in values.items():
            self.set(name, value)

    def get(self, name):
        return self.values[name]

    def set(self, name, value):
        if name not in self.values:
            raise KeyError(name)
        low, high = getRange(name)
        self.values[name] = min(max(float(value), low), high)

    def resetDefaults(self):
        for name in OPTIONS:
            self.values[name] = float(getDefault(name))

    def snapshot(self):
        return dict(self.values)

    def getGravity(self):
        return gravity(self.values['gravity'])

    def __getitem__(self, name):
        return self.get(name)
