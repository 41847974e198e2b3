from render.RendererInterface import RendererInterface
from render.drawPrimitives import *

import SpringSolver

BODY_RADIUS = 25

class SpringRenderer(RendererInterface):
    def __init__(self, params, frametime=1/60):
        super().__init__(frametime)
        self.params = params # shared with the slider panel
        self.solver = SpringSolver.SpringSolver(params)
        self.COLOR = (255,255,255)

    def render(self, options):
        color = self.COLOR
        for p1,p2 in self.solver.getSpringPairPositions():
            if options.get('springDrawing', True):
                drawSpring(color, p1, p2)
            else:
                drawLine(color, p1, p2)

        for pp in self.solver.getBodyPositions():
            drawCircle(color, pp, scale=BODY_RADIUS, fill=options.get('fillBodies', False))

    def update(self):
        self.solver.simulate(self.params)
        return self.solver.getTimeElapsed()

    def reset(self):
        self.solver.reset(self.params)
        print('Restart: length1 = %g, length2 = %g'%(self.params.get('length1'), self.params.get('length2')))

    def getPositionLog(self):
        return self.solver.getPositionLog()

    def getEnergyLog(self):
        return self.solver.getEnergyLog()

    def getEnergy(self):
        return self.solver.getEnergy(self.params)
