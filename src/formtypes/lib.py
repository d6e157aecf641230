# -*- coding: utf-8 -*-

from .error import ConfigError
from .util import optionNames

import logging
log = logging.getLogger(__name__)


# Some kind of 'clonable' object -
# we reinitialize child objects with inherited kwargs merged with new ones.
# This allows us to alter just a few options of a TypeManager, Condition or
# CalcItem without setters.
# * the setParameters functions of the whole mro are inspected, every
#   argument name found there is an option. Subclasses pass **kwargs on to
#   the setParameters of their base.
# * positional arguments are assigned to option names in that order
# * a class attribute named like an option overrides the option's default
class Parameterized:
    __kwargs__ = {}

    def __init__( self, *args, **kwargs ):
        parent = kwargs.pop( '_parent', None )
        names = self.__getParameterNames__()

        if args:
            if len(args) > len(names):
                raise ConfigError('%s takes at most %i positional options' % (self.__class__.__name__, len(names)))
            for (name, value) in zip( names, args ):
                if name in kwargs:
                    raise ConfigError('%s: multiple values for option %s' % (self.__class__.__name__, name))
                kwargs[ name ] = value

        if parent is not None:
            newkwargs = dict(parent.__kwargs__ )
            newkwargs.update(kwargs)
            kwargs = newkwargs
        else:
            for key in names:
                if hasattr(self.__class__,key)\
                and not key in kwargs:
                    kwargs[key] = getattr(self.__class__, key)

        unknown = [ key for key in kwargs if key not in names ]
        if unknown:
            raise ConfigError('%s: unknown options %s' % (self.__class__.__name__, ', '.join(sorted(unknown))))

        if hasattr( self, 'setParameters' ):
            self.setParameters( **kwargs )

        self.__kwargs__ = kwargs

    def __call__( self, *args, **kwargs):
        kwargs['_parent'] = self
        return self.__class__( *args, **kwargs )

    @property
    def options( self ):
        return dict( self.__kwargs__ )

    @classmethod
    def __getParameterNames__( cls ):
        if not '__parameterNames__' in cls.__dict__:
            names = tuple(optionNames( cls ))
            log.debug('options of %s: %s' % (cls.__name__, names))
            setattr\
                ( cls,'__parameterNames__'
                , names
                )
        return cls.__parameterNames__


def oneOf( name, value, choices ):
    if value not in choices:
        raise ConfigError('%s must be one of %s (got %r)' % (name, ', '.join(map(repr,choices)), value))
    return value
