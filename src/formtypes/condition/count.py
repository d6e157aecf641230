from .core import OneOrMoreConnections, BaseCounter, SUCCESS, FAILED, CANNOT_EVALUATE
from ..error import ConfigError
from ..lib import oneOf

import re
import logging
log = logging.getLogger(__name__)

_word = re.compile(r'(\b|^)(\w+?)(\b|$)')


class Required( OneOrMoreConnections ):
    """
    With one connection it has to have a value. With moreConnections the
    number of connections with a value has to fit mode:

    * All: every connection
    * OneOrMore: at least one
    * AllOrNone: every connection or none
    * One: exactly one
    * Range: between minimum and maximum
    """

    MODES = ('All', 'OneOrMore', 'AllOrNone', 'One', 'Range')
    allMustBeEditable = False

    def setParameters( self, mode='OneOrMore', minimum=0, maximum=999, **kwargs ):
        OneOrMoreConnections.setParameters( self, **kwargs )
        self.mode = oneOf( 'mode', mode, self.MODES )
        self.minimum = minimum
        self.maximum = maximum

    def _evaluateRule( self ):
        if not self.moreConnections:
            if not self.connection.isEditable():
                return CANNOT_EVALUATE
            return FAILED if self.connection.isNullValue( True ) else SUCCESS

        connections = self._cleanupConnections( self.getConnections() )
        if not connections:
            return CANNOT_EVALUATE

        total = len( connections )
        count = len([ connection for connection in connections if not connection.isNullValue( True ) ])
        self.count = count

        if self.mode == 'All':
            success = count == total
        elif self.mode == 'OneOrMore':
            success = count >= 1
        elif self.mode == 'AllOrNone':
            success = count == 0 or count == total
        elif self.mode == 'One':
            success = count == 1
        else:
            success = self.minimum <= count <= self.maximum
        return SUCCESS if success else FAILED


class CharacterCount( BaseCounter ):

    def _connCount( self, connection ):
        return len( self._textValue( connection ) )


class WordCount( BaseCounter ):

    def _connCount( self, connection ):
        text = self._textValue( connection ).replace( "'", '' )
        return len( _word.findall( text ) )


class CountSelections( BaseCounter ):

    def _connCount( self, connection ):
        if not connection.typeSupported('indices'):
            raise ConfigError('CountSelections requires connections with multiple selections')
        return len( connection.getTypedValue('indices') )


class DuplicateEntry( OneOrMoreConnections ):
    """
    FAILED when two connections hold the same text, which are kept as
    errconn1 and errconn2.
    """

    def setParameters( self, caseIns=True, ignoreUnassigned=True, **kwargs ):
        OneOrMoreConnections.setParameters( self, **kwargs )
        self.caseIns = caseIns
        self.ignoreUnassigned = ignoreUnassigned

    def _evaluateRule( self ):
        self.errconn1 = self.errconn2 = None
        seen = {}
        for connection in self._cleanupConnections( self.getConnections() ):
            if self.ignoreUnassigned and connection.isNullValue():
                continue
            text = self._textValue( connection )
            if self.caseIns:
                text = text.upper()
            if text in seen:
                self.errconn1 = seen[ text ]
                self.errconn2 = connection
                return FAILED
            seen[ text ] = connection
        return SUCCESS
