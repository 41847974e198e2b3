import wx
import wx.glcanvas as glcanvas

from OpenGL.GL import *

CANVAS_SIZE = (1000, 1000)
TIME_FORMAT = 'Time: %.1f'

class CanvasBase(glcanvas.GLCanvas):
    def __init__(self, parent):
        attribList = (glcanvas.WX_GL_RGBA,
            glcanvas.WX_GL_DOUBLEBUFFER,
            glcanvas.WX_GL_DEPTH_SIZE, 24)
        glcanvas.GLCanvas.__init__(self, parent,  attribList=attribList)
        self.init = False
        self.context = glcanvas.GLContext(self)

        self.SetMinSize(CANVAS_SIZE)
        self.isPlaying = False
        self.options = {
            'springDrawing':True,
            'fillBodies':False,
        }

        # --- Renderers ---
        self.renderers = []

        self.timeLabel = None # static txt copy from panel

        self.size = None

        # --- BINDINGS ---

        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)

        self.timer = wx.Timer(self, id=1)
        self.Bind(wx.EVT_TIMER, self.OnTimer)

        self.Bind(wx.EVT_SIZE, self.OnSize)
        self.Bind(wx.EVT_PAINT, self.OnPaint)
        self.Bind(wx.EVT_KEY_DOWN, self.OnKeyDown)

    def InitGL(self):
        # pixel units, origin at the center, y down like the screen
        if self.size is None:
            self.size = self.GetClientSize()
        w, h = self.size
        w = max(w, 1)
        h = max(h, 1)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(-w/2, w/2, h/2, -h/2, -1, 1)

        glDisable(GL_DEPTH_TEST)
        glDisable(GL_LIGHTING)
        glClearColor(0, 0, 0, 1)


    def OnTimer(self, event):
        for renderer in self.renderers:
            elapsed = renderer.update()

        if self.timeLabel is not None and self.renderers:
            self.timeLabel.SetLabel(TIME_FORMAT%elapsed)

        self.Refresh(False)


    def addRenderer(self, r):
        self.renderers.append(r)


    def renderAll(self):
        for r in self.renderers:
            r.render(self.options)


    def getFrameTime(self):
        return self.renderers[0].FRAMETIME

    def getRenderer(self):
        return self.renderers[0]

    def playReset(self):
        for r in self.renderers:
            r.reset()

        # a fresh chain starts at zero, even while paused
        if self.timeLabel is not None:
            self.timeLabel.SetLabel(TIME_FORMAT%0)

        self.Refresh(False)


    def stopTimer(self):
        self.isPlaying = False
        self.timer.Stop()
        print('Paused')

    def startTimer(self):
        self.isPlaying = True
        interval = round(self.getFrameTime() * 1000)

        self.timer.Start(interval)
        print('Playing, %d ms per frame'%interval)
        self.Refresh(False)
        self.SetFocus() # panel -> canvas


    def OnPaint(self, event):
        #dc = wx.PaintDC(self)
        self.SetCurrent(self.context)
        if not self.init:
            self.InitGL()
            self.init = True
        self.OnDraw()

    def OnDraw(self):
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        self.renderAll()

        self.SwapBuffers()


    def OnKeyDown(self, evt):
        key = evt.GetKeyCode()
        if key == wx.WXK_SPACE:
            if self.isPlaying:
                self.stopTimer()
            else:
                self.startTimer()
        elif key == ord('R'):
            self.playReset()
        evt.Skip()

    def setOptions(self, key, value):
        if self.options.get(key) is not None:
            self.options[key] = value
        self.Refresh(False)

    def setTimeLabel(self, timeLabel):
        self.timeLabel = timeLabel

    def OnSize(self, event):
        wx.CallAfter(self.DoSetViewport)
        event.Skip()


    def DoSetViewport(self):
        size = self.size = self.GetClientSize()
        self.SetCurrent(self.context)
        glViewport(0, 0, size.width, size.height)
        self.InitGL()
