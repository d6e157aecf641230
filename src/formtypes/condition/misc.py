from .core import Condition, OneConnection, SUCCESS, FAILED, CANNOT_EVALUATE
from ..error import ConfigError

from functools import cached_property

import re
import logging
log = logging.getLogger(__name__)


class RegExp( OneConnection ):

    def setParameters( self, expression=None, caseIns=True, multiline=False, ignoreBlankText=True, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.expression = expression
        self.caseIns = caseIns
        self.multiline = multiline
        self.ignoreBlankText = ignoreBlankText

    def canEvaluate( self ):
        return bool( self.expression ) and OneConnection.canEvaluate( self )

    @cached_property
    def _regExp( self ):
        flags = 0
        if self.caseIns:
            flags |= re.IGNORECASE
        if self.multiline:
            flags |= re.MULTILINE
        try:
            return re.compile( self.expression, flags )
        except re.error as e:
            raise ConfigError('Bad expression %r: %s' % (self.expression, e))

    def _evaluateRule( self ):
        text = self._textValue( self.connection )
        if not text:
            return CANNOT_EVALUATE if self.ignoreBlankText else FAILED
        return SUCCESS if self._regExp.search( text ) else FAILED


class SelectedIndex( OneConnection ):
    """
    index is a position or a list of positions and [low, high] ranges.
    For multiple selections one selected position has to match, -1 in
    index accepts an empty selection.
    """

    def setParameters( self, index=None, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        if index is not None and not isinstance( index, (int, list, tuple) ):
            raise ConfigError('index must be an int or a list, got %r' % (index,))
        self.index = index

    def canEvaluate( self ):
        return self.index is not None and OneConnection.canEvaluate( self )

    def _matches( self, position ):
        if isinstance( self.index, int ):
            return position == self.index
        for item in self.index:
            if isinstance( item, (list, tuple) ):
                (low, high) = item
                if low <= position <= high:
                    return True
            elif position == item:
                return True
        return False

    def _evaluateRule( self ):
        connection = self.connection
        if connection.typeSupported('indices'):
            selected = connection.getTypedValue('indices')
            if not selected:
                return SUCCESS if self._matches( -1 ) else FAILED
            return SUCCESS if any( self._matches( position ) for position in selected ) else FAILED
        if connection.typeSupported('index'):
            return SUCCESS if self._matches( connection.getTypedValue('index') ) else FAILED
        raise ConfigError('SelectedIndex requires a connection with an index')


class RequiredIndex( OneConnection ):
    """ something other than unassignedIndex (and -1) has to be selected """

    def setParameters( self, unassignedIndex=0, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.unassignedIndex = unassignedIndex

    def _evaluateRule( self ):
        if not self.connection.typeSupported('index'):
            raise ConfigError('RequiredIndex requires a connection with an index')
        index = self.connection.getTypedValue('index')
        if index == -1 or index == self.unassignedIndex:
            return FAILED
        return SUCCESS


class UserFunction( Condition ):
    """ fnc(condition) returns SUCCESS, FAILED or CANNOT_EVALUATE """

    def setParameters( self, fnc=None, autoDisable=False, **kwargs ):
        Condition.setParameters( self, autoDisable=autoDisable, **kwargs )
        if fnc is not None and not callable( fnc ):
            raise ConfigError('fnc must be callable, got %r' % (fnc,))
        self.fnc = fnc

    def canEvaluate( self ):
        return self.fnc is not None and Condition.canEvaluate( self )

    def _evaluateRule( self ):
        result = self.fnc( self )
        if result not in (SUCCESS, FAILED, CANNOT_EVALUATE):
            raise ConfigError('fnc returned %r' % (result,))
        return result
