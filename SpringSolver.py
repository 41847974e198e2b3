import numpy as np

from data.Body import Body, BodyChain
from data.Force import hookesForce, springEnergy

def initialize(length1, length2):
    # Both springs start at rest length, laid out along +x
    body1 = Body(initialPosition=[length1, 0])
    body2 = Body(initialPosition=[length1 + length2, 0])
    return BodyChain(body1, body2)

def accelerations(chain, params):
    b1, b2 = chain.getBodies()
    l1, l2 = params.get('length1'), params.get('length2')
    k1, k2 = params.get('stiffness1'), params.get('stiffness2')
    d1, d2 = params.get('damping1'), params.get('damping2')

    # origin -> body1
    f1 = hookesForce(b1.position, chain.origin, b1.velocity, l1, k1, d1)
    # body2 -> body1, damped with body1's own coefficient
    f2 = hookesForce(b1.position, b2.position, b1.velocity, l2, k2, d1)
    # body1 -> body2
    f3 = hookesForce(b2.position, b1.position, b2.velocity, l2, k2, d2)

    g = params.getGravity()
    a1 = (f1 + f2) / params.get('mass1') + g
    a2 = f3 / params.get('mass2') + g
    return a1, a2

def step(chain, params):
    dt = params.get('simSpeed')

    # every force is evaluated before any body moves
    a1, a2 = accelerations(chain, params)

    for body, a in zip(chain.getBodies(), (a1, a2)):
        body.velocity += a * dt
        body.position += body.velocity * dt # uses the updated velocity

    chain.addTime(dt)

def energy(chain, params):
    b1, b2 = chain.getBodies()
    m1, m2 = params.get('mass1'), params.get('mass2')
    g = params.get('gravity')

    kinetic = 0.5 * m1 * sum(b1.velocity*b1.velocity) + 0.5 * m2 * sum(b2.velocity*b2.velocity)
    elastic = springEnergy(b1.position, chain.origin, params.get('length1'), params.get('stiffness1')) \
        + springEnergy(b2.position, b1.position, params.get('length2'), params.get('stiffness2'))
    potential = -(m1 * g * b1.position[1] + m2 * g * b2.position[1]) # y points down

    return kinetic + elastic + potential


class SpringSolver:
    def __init__(self, params):
        self.chain = None
        self.reset(params)

    def simulate(self, params):
        step(self.chain, params)
        self.chain.record(self.getEnergy(params))

    def reset(self, params):
        self.chain = initialize(params.get('length1'), params.get('length2'))

    def getEnergy(self, params):
        return energy(self.chain, params)

    def getTimeElapsed(self):
        return self.chain.timeElapsed

    # ---------------------------------------------------------------------

    def getBodyPositions(self): # canvas
        return [self.chain.origin.copy()] + [b.position.copy() for b in self.chain.getBodies()]

    def getSpringPairPositions(self):
        origin, p1, p2 = self.getBodyPositions()
        return [(origin, p1), (p1, p2)]

    def getPositionLog(self):
        if len(self.chain.positionLog) == 0:
            return np.zeros((0, 2, 2))
        return np.array(self.chain.positionLog)

    def getEnergyLog(self):
        return np.array(self.chain.energyLog, dtype=float)
