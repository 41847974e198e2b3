import numpy as np

WAVES = 5 # sine periods along the coil
AMPLITUDE = 10
LEAD = 50 # straight part at both ends
STEPS = 50

def springPoints(start, end, waves=WAVES, amplitude=AMPLITUDE, offset=LEAD, steps=STEPS):
    '''
    Polyline of a spring drawn from `start` to `end`:
    start, [coil points], end

    The leads keep their length, the coil in between stretches.
    '''
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)

    diff = end - start
    d = np.sqrt(sum(diff*diff))
    if d == 0:
        return np.array([start, end])

    direction = diff / d
    perpendicular = np.array([-direction[1], direction[0]])

    coilStart = start + direction * offset
    coilEnd = end - direction * offset

    t = np.arange(steps + 1) / steps
    sine = np.sin(t * (waves * 2 * np.pi)) * amplitude
    coil = coilStart + np.outer(t, coilEnd - coilStart) + np.outer(sine, perpendicular)

    return np.vstack((start, coil, end))
