import numpy as np

LOG_LENGTH = 600 # ticks kept for the graph menu

class Body:
    def __init__(self, initialPosition):
        self.position = np.array(initialPosition, dtype=float)
        self.velocity = np.zeros(2)
        assert(self.position.shape == (2,))

    def getState(self):
        return np.concatenate((self.position, self.velocity))

    def setState(self, state):
        assert(len(state) == 4)
        self.position = np.array(state[:2], dtype=float)
        self.velocity = np.array(state[2:], dtype=float)


class BodyChain:
    '''
    origin -- spring 1 -- body1 -- spring 2 -- body2

    Holds the only persistent simulation state. A restart builds a new
    chain instead of rewinding this one.
    '''
    def __init__(self, body1, body2):
        self.origin = np.zeros(2)
        self.body1 = body1
        self.body2 = body2
        self.timeElapsed = 0

        self.positionLog = []
        self.energyLog = []

    def getBodies(self):
        return [self.body1, self.body2]

    def addTime(self, dt):
        self.timeElapsed += dt

    def getState(self):
        return np.concatenate((self.body1.getState(), self.body2.getState()))

    def setState(self, state):
        assert(len(state) == 8)
        self.body1.setState(state[:4])
        self.body2.setState(state[4:])

    def record(self, energy):
        self.positionLog.append((self.body1.position.copy(), self.body2.position.copy()))
        self.energyLog.append(energy)
        if len(self.positionLog) > LOG_LENGTH:
            self.positionLog.pop(0)
            self.energyLog.pop(0)
