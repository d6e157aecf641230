from .core import TypeManager, messages
from ..error import InputError, ConfigError

from functools import cached_property

import re
import logging
log = logging.getLogger(__name__)


@messages\
    ( format='"%(value)s" is neither true nor false'
    )
class Boolean( TypeManager ):
    """
    Text is matched against reFalse and reTrue, numbers against numFalse and
    numTrue (numTrue=True accepts any number not in numFalse).
    """

    dataType = 'boolean'
    nativeType = 'boolean'
    nativeTypes = (bool,)

    def setParameters\
        ( self
        , reFalse=r'^(false)|(0)$'
        , reTrue=r'^(true)|(1)$'
        , numFalse=(0,)
        , numTrue=(1,)
        , falseStr='false'
        , trueStr='true'
        , emptyStrFalse=True
        , **kwargs
        ):
        TypeManager.setParameters( self, **kwargs )
        if numTrue is not True and not isinstance( numTrue, (list, tuple) ):
            raise ConfigError('numTrue must be a list of numbers or True, got %r' % (numTrue,))
        if not isinstance( numFalse, (list, tuple) ):
            raise ConfigError('numFalse must be a list of numbers, got %r' % (numFalse,))
        self.reFalse = reFalse
        self.reTrue = reTrue
        self.numFalse = numFalse
        self.numTrue = numTrue
        self.falseStr = falseStr
        self.trueStr = trueStr
        self.emptyStrFalse = emptyStrFalse

    def _neutralOptions( self ):
        return dict( falseStr='false', trueStr='true', reFalse=r'^false$', reTrue=r'^true$' )

    @cached_property
    def _falseRE( self ):
        return re.compile( self.reFalse, re.IGNORECASE )

    @cached_property
    def _trueRE( self ):
        return re.compile( self.reTrue, re.IGNORECASE )

    def _isNative( self, value ):
        return isinstance( value, (bool, int, float) )

    def _nullValue( self ):
        return False if self.emptyStrFalse else None

    def _isNull( self, text ):
        return text.strip() == ''

    def _stringToNative( self, text ):
        text = text.strip()
        if self._falseRE.search( text ):
            return False
        if self._trueRE.search( text ):
            return True
        raise InputError( text, self, 'format' )

    def _reviewValue( self, value ):
        if isinstance( value, bool ):
            return value
        if value in self.numFalse:
            return False
        if self.numTrue is True or value in self.numTrue:
            return True
        raise InputError( value, self, 'format' )

    def _nativeToString( self, value ):
        return self.trueStr if value else self.falseStr

    def toNumber( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        if value is None:
            return None
        return 1 if self._reviewValue( value ) else 0

    def isValidChar( self, char ):
        TypeManager.isValidChar( self, char )
        return False
