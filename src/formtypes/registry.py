from .error import ConfigError
from .typemanager.core import TypeManager

import logging
log = logging.getLogger(__name__)


class Registry( object ):
    """
    Maps names to factories, optionally with preset options::

        typeManagers.define( 'Integer.Positive', Integer, allowNegatives=False )
        typeManagers.create( 'Integer.Positive', fillLeadZeros=3 )
    """

    def __init__( self, kind ):
        self.kind = kind
        self._factories = {}

    def define( self, name, factory, **defaults ):
        if name in self._factories:
            raise ConfigError('%s "%s" is already defined' % (self.kind, name))
        self._factories[ name ] = ( factory, defaults )

    def create( self, name, **options ):
        try:
            (factory, defaults) = self._factories[ name ]
        except KeyError:
            raise ConfigError('Unknown %s "%s"' % (self.kind, name))

        kwargs = dict( defaults )
        kwargs.update( options )
        log.debug('create %s %s %r' % (self.kind, name, kwargs))
        return factory( **kwargs )

    def names( self ):
        return sorted( self._factories )

    def __contains__( self, name ):
        return name in self._factories


typeManagers = Registry('TypeManager')
conditions = Registry('Condition')
calcItems = Registry('CalcItem')

def define( name, factory, **defaults ):
    typeManagers.define( name, factory, **defaults )

def create( name, **options ):
    return typeManagers.create( name, **options )

def checkAsTypeManager( value ):
    if value is None or isinstance( value, TypeManager ):
        return value
    if isinstance( value, str ):
        return create( value )
    raise ConfigError('Expected a TypeManager or its name, got %r' % (value,))
