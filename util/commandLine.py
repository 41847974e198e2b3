import argparse

from data.Parameters import OPTIONS, SimulationParameters

def buildParser():
    parser = argparse.ArgumentParser(description='Double spring pendulum')
    for name, (label, low, high, default) in OPTIONS.items():
        parser.add_argument('--' + name, type=float, required=False,\
            help='%s, %g to %g (default %g)'%(label, low, high, default))
    parser.add_argument('--paused', action='store_true', help='Start with the timer stopped')
    return parser

def parametersFromArguments(args):
    params = SimulationParameters()
    for name in OPTIONS:
        value = getattr(args, name, None)
        if value is None:
            continue
        params.set(name, value)
        if params.get(name) != value:
            print('%s clamped to %g'%(name, params.get(name)))
        else:
            print('Set %s = %g'%(name, value))
    return params
