from abc import *

class RendererInterface(metaclass=ABCMeta):
    def __init__(self, frametime):
        # Need to initiate this constant
        self.FRAMETIME = frametime

    @abstractmethod
    def render(self, options): # Draw
        return
    @abstractmethod
    def update(self): # Timer
        return
    @abstractmethod
    def reset(self):
        return
