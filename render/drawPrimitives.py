# Requirement: wxPython version '4.1.0 gtk3 (phoenix) wxWidgets 3.1.4'
# 2D drawing in pixel units, orthographic projection set up by CanvasBase

from OpenGL.GL import *
import numpy as np

from util.springShape import springPoints

#Circle
radius = 1
CIRCLE_SIZE = 40
unit = 2*np.pi / CIRCLE_SIZE
circleVertices = []
for i in range(CIRCLE_SIZE):
    circleVertices.append([radius * np.cos(unit * i), radius * np.sin(unit * i)])
circleVertices = np.array(circleVertices, np.float32)

def drawCircle(color, center, scale=1, fill=False):
    global circleVertices

    r,g,b = color
    glColor3ub(r,g,b)
    glPushMatrix()
    x,y = center
    glTranslatef(x,y,0)
    glScalef(scale, scale, 1)

    glEnableClientState(GL_VERTEX_ARRAY)
    glVertexPointer(2, GL_FLOAT, 0, circleVertices.tobytes())
    glDrawArrays(GL_POLYGON if fill else GL_LINE_LOOP, 0, CIRCLE_SIZE)
    glDisableClientState(GL_VERTEX_ARRAY)
    glPopMatrix()

def drawLine(color:tuple, startPoint:tuple, endPoint:tuple):
    glBegin(GL_LINES)
    r,g,b = color
    glColor3ub(r,g,b)
    glVertex2fv(startPoint)
    glVertex2fv(endPoint)
    glEnd()

def drawPolyline(color:tuple, points):
    r,g,b = color
    glColor3ub(r,g,b)
    glBegin(GL_LINE_STRIP)
    for p in points:
        glVertex2fv(p)
    glEnd()

def drawSpring(color, startPoint, endPoint):
    drawPolyline(color, springPoints(startPoint, endPoint))
