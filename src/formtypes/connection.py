from .lib import Parameterized
from .error import InputError, ConfigError
from .registry import checkAsTypeManager, create

import datetime
import logging
log = logging.getLogger(__name__)


class Connection( Parameterized ):
    """
    The source of a value for Conditions and CalcItems.

    getTextValue() returns what the user typed. Typed values are offered for
    the type names typeSupported() agrees to, "index" and "indices" are the
    selected positions of list-like sources.
    """

    def setParameters( self, label=None, typeManager=None ):
        self.label = label
        self.typeManager = checkAsTypeManager( typeManager )

    def getTextValue( self ):
        raise NotImplementedError('%s.getTextValue' % self.__class__.__name__)

    def isNullValue( self, override=False ):
        return self.getTextValue() == ''

    def typeSupported( self, typeName ):
        return False

    def getTypedValue( self, typeName=None ):
        raise ConfigError('%s does not offer typed values' % self.__class__.__name__)

    def isValidValue( self, typeName ):
        return self.typeSupported( typeName )

    def textLength( self ):
        return len( self.getTextValue() )

    def isEditable( self ):
        return True

    def getLabel( self ):
        return self.label

    def getTypeManager( self ):
        return self.typeManager

    def collectConnections( self, connections ):
        if not any( conn is self for conn in connections ):
            connections.append( self )
        return connections


def storageTypeOf( value ):
    if isinstance( value, bool ):
        return 'boolean'
    if isinstance( value, int ):
        return 'integer'
    if isinstance( value, float ):
        return 'float'
    if isinstance( value, datetime.datetime ):
        return 'datetime'
    if isinstance( value, datetime.date ):
        return 'date'
    if isinstance( value, datetime.time ):
        return 'time'
    if isinstance( value, datetime.timedelta ):
        return 'duration'
    if isinstance( value, str ):
        return 'string'
    return None


class Value( Connection ):
    """ holds a python value, its type decides the TypeManager """

    def setParameters( self, value=None, nullValue=None, supportedTypeName=None, label='Value', **kwargs ):
        Connection.setParameters( self, label=label, **kwargs )
        self.value = value
        self.nullValue = nullValue
        self.supportedTypeName = supportedTypeName or storageTypeOf( value )

    def getTextValue( self ):
        if self.value is None:
            return ''
        typeManager = self.getTypeManager()
        if typeManager is not None:
            try:
                return typeManager.toString( self.value )
            except InputError as e:
                log.debug('cannot format %r: %s' % (self.value, e.key))
        return str( self.value )

    def isNullValue( self, override=False ):
        if isinstance( self.value, bool ):
            return override and self.value is False
        return self.value is None or self.value == '' or self.value == self.nullValue

    def typeSupported( self, typeName ):
        if typeName == self.supportedTypeName:
            return True
        return typeName == 'float' and self.supportedTypeName == 'integer'

    def getTypedValue( self, typeName=None ):
        if typeName is not None and not self.typeSupported( typeName ):
            raise ConfigError('Value %r is not of type %s' % (self.value, typeName))
        if self.isNullValue():
            return None
        if typeName == 'float':
            return float( self.value )
        return self.value

    def getTypeManager( self ):
        if self.typeManager is not None:
            return self.typeManager
        if self.supportedTypeName is None:
            return None
        return create( self.supportedTypeName )


class Field( Connection ):
    """
    An in memory form field. index is the selected position of a single
    choice list (-1 for none), indices the selected positions of a
    multiple choice list.
    """

    def setParameters( self, id=None, text='', editable=True, trim=True, index=None, indices=None, label='Field', **kwargs ):
        Connection.setParameters( self, label=label, **kwargs )
        if not isinstance( text, str ):
            raise ConfigError('Field text must be a string, got %r' % (text,))
        self.id = id
        self.text = text
        self.editable = editable
        self.trim = trim
        self.index = index
        self.indices = indices

    def getTextValue( self ):
        return self.text.strip() if self.trim else self.text

    def isNullValue( self, override=False ):
        if self.indices is not None:
            return not self.indices
        if self.index is not None:
            return self.index == -1
        return self.getTextValue() == ''

    def typeSupported( self, typeName ):
        if typeName == 'index':
            return self.index is not None
        if typeName == 'indices':
            return self.indices is not None
        return False

    def getTypedValue( self, typeName=None ):
        if typeName == 'index' and self.index is not None:
            return self.index
        if typeName == 'indices' and self.indices is not None:
            return list( self.indices )
        raise ConfigError('Field %s does not offer %s' % (self.id, typeName))

    def isEditable( self ):
        return self.editable
