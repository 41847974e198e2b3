import wx
import wx.lib.scrolledpanel as scrolledpanel
from render.CanvasBase import CanvasBase

from data.Parameters import OPTIONS, getLabel, getRange

SLIDER_RESOLUTION = 1000 # wx sliders are integer, 0.001 steps

class CanvasPanel(wx.Panel):
    def __init__(self, parent, params):
        wx.Panel.__init__(self, parent, -1)

        self.params = params
        self.sliders = {} # option name -> (slider, label)

        box = wx.BoxSizer(wx.VERTICAL)

        # Canvas
        topBox = wx.BoxSizer(wx.HORIZONTAL)

        canvas = CanvasBase(self)
        self.canvas = canvas
        panelWidth = max(parent.GetSize().GetWidth() - canvas.GetMinSize().GetWidth(), 300)
        panelHeight = canvas.GetMinSize().GetHeight()
        topBox.Add(canvas, 0, wx.EXPAND|wx.ALL)


        # Options
        optionBox = wx.BoxSizer(wx.VERTICAL)

        scrolledPanel = scrolledpanel.ScrolledPanel(self, wx.ID_ANY,\
                size=(panelWidth, panelHeight))
        self.scrolledPanel = scrolledPanel
        scrolledPanel.SetupScrolling()
        scrolledPanel.SetSizer(optionBox)

        self.addResetAndDefaultButtons(optionBox)
        self.addParameterSliders(optionBox)
        self.addRenderMethodRadioBoxes(optionBox)
        self.addRenderOptionCheckBoxes(optionBox)

        optionBox.AddSpacer(20)
        timeLabel = wx.StaticText(scrolledPanel, label='')
        optionBox.Add(timeLabel, 0, wx.ALIGN_CENTER)

        topBox.Add(scrolledPanel)
        box.Add(topBox, 0)
        box.AddSpacer(20)

        # Player
        buttonBox = wx.BoxSizer(wx.HORIZONTAL)
        self.addPlayerButtons(buttonBox)
        box.Add(buttonBox, 0, wx.CENTER)

        # Show
        box.SetSizeHints(self)
        self.SetSizer(box)

        self.canvas.setTimeLabel(timeLabel)

    def getRenderer(self):
        return self.canvas.getRenderer()

    def OnRadioBox(self, evt):
        rb = evt.GetEventObject()
        selection = rb.GetStringSelection()

        if selection == 'Coil':
            self.canvas.setOptions('springDrawing', True)
        elif selection == 'Line':
            self.canvas.setOptions('springDrawing', False)

        self.canvas.SetFocus()

    def OnButton(self, evt):
        bId = evt.GetId()
        if bId == 0: # Pause
            self.canvas.stopTimer()
        elif bId == 1: # Play
            self.canvas.startTimer()
        elif bId == 2: # Restart
            self.canvas.playReset()
        elif bId == 3: # Default settings
            self.params.resetDefaults()
            self.updateSliders()
            print('Restored default settings')

        self.canvas.SetFocus()
        self.canvas.Refresh(False)

    def OnRenderCheckBox(self, evt):
        obj = evt.GetEventObject()
        self.canvas.setOptions('fillBodies', obj.GetValue())
        self.canvas.SetFocus()

    def OnParameterSliderChanged(self, evt):
        slider = evt.GetEventObject()
        name = slider.GetName()

        self.params.set(name, evt.GetPosition() / SLIDER_RESOLUTION)
        self.updateLabel(name)

        self.canvas.SetFocus()

    def updateLabel(self, name):
        _, label = self.sliders[name]
        label.SetLabel('%s (%g)'%(getLabel(name), self.params.get(name)))

    def updateSliders(self):
        for name, (slider, _) in self.sliders.items():
            slider.SetValue(round(self.params.get(name) * SLIDER_RESOLUTION))
            self.updateLabel(name)

    def appendRenderer(self, name, renderer):
        self.Layout() # Refresh

        self.canvas.addRenderer(renderer)
        print('Added a renderer: %s'%name)


    # -------------------------------------------------------------------------------

    def addPlayerButtons(self, buttonBox):
        buttonPlay = wx.Button(self, 1, 'Play') # id and name
        buttonPause = wx.Button(self, 0, 'Pause')

        buttonBox.Add(buttonPlay, 0)
        buttonBox.AddSpacer(10)
        buttonBox.Add(buttonPause, 0)

        self.Bind(wx.EVT_BUTTON, self.OnButton, buttonPlay)
        self.Bind(wx.EVT_BUTTON, self.OnButton, buttonPause)

    def addResetAndDefaultButtons(self, optionBox):
        _parent = self.scrolledPanel
        buttonRestart = wx.Button(_parent, 2, 'Restart')
        buttonDefault = wx.Button(_parent, 3, 'Default settings')

        buttonBox = wx.BoxSizer(wx.HORIZONTAL)
        buttonBox.Add(buttonRestart, 0)
        buttonBox.AddSpacer(10)
        buttonBox.Add(buttonDefault, 0)

        optionBox.AddSpacer(20)
        optionBox.Add(buttonBox, 0, wx.ALIGN_CENTER)

        self.Bind(wx.EVT_BUTTON, self.OnButton, buttonRestart)
        self.Bind(wx.EVT_BUTTON, self.OnButton, buttonDefault)

    def addParameterSliders(self, optionBox):
        _parent = self.scrolledPanel
        width = _parent.GetSize().GetWidth() - 20

        box = wx.StaticBoxSizer(wx.VERTICAL, _parent)
        box.Add(wx.StaticText(_parent, id=wx.ID_ANY, label="Parameters:", size=(width, -1)))
        box.AddSpacer(10)

        for name in OPTIONS:
            low, high = getRange(name)
            label = wx.StaticText(_parent, wx.ID_ANY, label='', size=(width, -1))
            slider = wx.Slider(_parent, value=round(self.params.get(name) * SLIDER_RESOLUTION),\
                minValue=round(low * SLIDER_RESOLUTION), maxValue=round(high * SLIDER_RESOLUTION),\
                style=wx.SL_HORIZONTAL, name=name)
            self.Bind(wx.EVT_SCROLL, self.OnParameterSliderChanged, slider)

            box.Add(label, 0)
            box.Add(slider, 0, wx.EXPAND|wx.ALL)
            self.sliders[name] = (slider, label)
            self.updateLabel(name)

        optionBox.AddSpacer(20)
        optionBox.Add(box, 0, wx.ALIGN_CENTER)

    def addRenderMethodRadioBoxes(self, optionBox):
        _parent = self.scrolledPanel
        width = _parent.GetSize().GetWidth() - 20
        renderMethodBox = wx.RadioBox(_parent, wx.ID_ANY, majorDimension=2, size=(width, -1),\
            label="Draw springs as:", style=wx.RA_SPECIFY_ROWS, choices=['Coil', 'Line'])
        renderMethodBox.Bind(wx.EVT_RADIOBOX, self.OnRadioBox)
        renderMethodBox.SetSelection(0)
        self.canvas.setOptions('springDrawing', True)
        optionBox.AddSpacer(20)
        optionBox.Add(renderMethodBox, 0, wx.ALIGN_CENTER)

    def addRenderOptionCheckBoxes(self, optionBox):
        _parent = self.scrolledPanel
        checkBoxFill = wx.CheckBox(_parent, id=4, label='Fill bodies.')
        self.Bind(wx.EVT_CHECKBOX, self.OnRenderCheckBox, checkBoxFill)

        optionBox.AddSpacer(20)
        optionBox.Add(checkBoxFill, 0)
