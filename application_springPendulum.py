import wx

try:
    from OpenGL.GL import *
    haveOpenGL = True
except ImportError:
    haveOpenGL = False

from render.CanvasPanel import CanvasPanel
from render.SpringRenderer import SpringRenderer

from util.commandLine import buildParser, parametersFromArguments

import sys

FRAMETIME = 1/60

class RunApp(wx.App):
    def __init__(self, args):
        wx.App.__init__(self)

        frame = wx.Frame(None, -1, "Double Spring Pendulum", size=(1400,1100))
        frame.CreateStatusBar()

        # --- Menu Bar ---
        menubar = wx.MenuBar()
        fileMenu = wx.Menu()

        exitItem = fileMenu.Append(wx.ID_EXIT, 'Quit')
        self.Bind(wx.EVT_MENU, self.OnExitApp, exitItem)

        menubar.Append(fileMenu, '&File')

        graphMenu = wx.Menu()
        positionGraphItem = graphMenu.Append(wx.ID_ANY, 'Show position graph')
        self.Bind(wx.EVT_MENU, self.OnPositionGraph, positionGraphItem)
        energyGraphItem = graphMenu.Append(wx.ID_ANY, 'Show energy graph')
        self.Bind(wx.EVT_MENU, self.OnEnergyGraph, energyGraphItem)
        menubar.Append(graphMenu, '&Graph')

        # --- Show frame ---
        frame.SetMenuBar(menubar)
        frame.Centre()
        frame.Show(True)
        frame.Bind(wx.EVT_CLOSE, self.OnCloseFrame)

        params = parametersFromArguments(args)
        self.window = CanvasPanel(frame, params)
        self.frame = frame

        self.window.appendRenderer('spring pendulum', SpringRenderer(params, FRAMETIME))

        if not args.paused:
            self.window.canvas.startTimer()


    def OnExitApp(self, evt):
        self.frame.Close(True)

    def OnCloseFrame(self, evt):
        self.window.canvas.stopTimer()
        evt.Skip()

    def OnPositionGraph(self, evt):
        import matplotlib.pyplot as plt

        log = self.window.getRenderer().getPositionLog()
        if len(log) == 0:
            wx.MessageDialog(self.frame, "Nothing to plot yet!").ShowModal()
            return

        fig, (ax, ay) = plt.subplots(2, 1, sharex=True, figsize=(10,8))
        for i in range(2):
            ax.plot(log[:, i, 0], label='Body %d'%(i+1))
            ay.plot(log[:, i, 1], label='Body %d'%(i+1))
        ax.set_ylabel('x (px)')
        ay.set_ylabel('y (px)')
        ay.set_xlabel('tick')
        ax.legend()
        plt.margins(x=0.0)
        plt.show()

    def OnEnergyGraph(self, evt):
        import matplotlib.pyplot as plt

        renderer = self.window.getRenderer()
        print('Current energy: %g'%renderer.getEnergy())

        energies = renderer.getEnergyLog()
        if len(energies) == 0:
            wx.MessageDialog(self.frame, "Nothing to plot yet!").ShowModal()
            return

        fig = plt.figure(figsize=(10,5))
        plt.margins(x=0.0)
        plt.plot(energies)
        plt.xlabel('tick')
        plt.ylabel('total energy')
        plt.show()



#----------------------------------------------------------------------

def main(argv=None):
    parser = buildParser()
    args = parser.parse_args(argv)

    if not haveOpenGL:
        wx.MessageBox('This sample requires the PyOpenGL package.', 'Sorry')
    else:
        app = RunApp(args)
        app.MainLoop()

if __name__ == '__main__':
    main(sys.argv[1:])
