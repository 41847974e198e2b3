import numpy as np

def gravity(g):
    # screen coordinates, y grows downwards
    return np.array([0, g], dtype=float)

def hookesForce(selfPos, otherPos, velocity, restLength, stiffness, damping):
    '''
    Damped spring force acting on `self`, from a spring between `self` and `other`.
    Positive extension (compressed spring) pushes `self` away from `other`.
    '''
    diff = np.asarray(selfPos, dtype=float) - np.asarray(otherPos, dtype=float)

    currentLength = np.sqrt(sum(diff*diff))
    x = restLength - currentLength

    if currentLength > 0:
        spring = diff / currentLength * (stiffness * x)
    else: # no direction to push along
        spring = np.zeros(2)

    return spring - np.asarray(velocity, dtype=float) * damping

def springEnergy(selfPos, otherPos, restLength, stiffness):
    diff = np.asarray(selfPos, dtype=float) - np.asarray(otherPos, dtype=float)
    x = restLength - np.sqrt(sum(diff*diff))
    return 0.5 * stiffness * x * x
