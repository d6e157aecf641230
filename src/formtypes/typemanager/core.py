from ..lib import Parameterized
from ..error import InputError, ConfigError
from ..culture import getCulture, NEUTRAL

from decimal import Decimal, ROUND_HALF_UP, ROUND_HALF_EVEN, ROUND_DOWN, ROUND_CEILING, ROUND_UP
from functools import cached_property

import re
import logging
log = logging.getLogger(__name__)

#### Rounding

POINT5      = 0
CURRENCY    = 1
TRUNCATE    = 2
CEILING     = 3
NEXTWHOLE   = 4

ROUND_MODES = (POINT5, CURRENCY, TRUNCATE, CEILING, NEXTWHOLE)

_rounding =\
    { POINT5:       ROUND_HALF_UP
    , CURRENCY:     ROUND_HALF_EVEN
    , TRUNCATE:     ROUND_DOWN
    , CEILING:      ROUND_CEILING
    , NEXTWHOLE:    ROUND_UP
    }

def toDecimal( value ):
    if isinstance( value, int ):
        return Decimal( value )
    return Decimal( repr( value ) )

def floatToString( value ):
    """ fixed notation, python switches to exponents below 1e-4 """
    if isinstance( value, int ):
        return str( value )
    return format( toDecimal( value ), 'f' )

def numDecPlaces( value ):
    text = floatToString( value )
    if '.' not in text:
        return 0
    return len( text.split('.',1)[1].rstrip('0') )

def roundNumber( value, roundMode=POINT5, maxDecimalPlaces=None ):
    """
    Rounds value to maxDecimalPlaces using one of the ROUND_MODES.

    None or a negative maxDecimalPlaces leaves the value untouched, as does a
    value that already has few enough decimal places. A roundMode of None
    means the value is not allowed to have that many decimal places.
    """
    if maxDecimalPlaces is None or maxDecimalPlaces < 0:
        return value
    if numDecPlaces( value ) <= maxDecimalPlaces:
        return value
    if roundMode is None:
        raise InputError( value, None, 'decimalPlaces', max=maxDecimalPlaces )

    rounding = _rounding.get( roundMode, None )
    if rounding is None:
        raise ConfigError('Unknown roundMode %r' % (roundMode,))

    result = toDecimal( value ).quantize\
        ( Decimal(1).scaleb( -maxDecimalPlaces )
        , rounding=rounding
        )
    return float( result )


#### Basic stuff

def messages( **_messages ):
    def decorate( klass ):
        klassMessages = dict(getattr(klass,'__messages__', {} ))
        klassMessages.update( _messages )

        setattr( klass, '__messages__', klassMessages )
        return klass

    return decorate

def charClass( chars ):
    """ a compiled regex matching exactly one of chars """
    return re.compile( '^[%s]$' % ''.join( re.escape(char) for char in chars ) )


@messages\
    ( fail='Invalid %(type)s'
    , format='"%(value)s" is not a valid %(type)s'
    , null='Cannot compare an empty value'
    , decimalPlaces='Too many decimal places (at most %(max)s)'
    )
class TypeManager( Parameterized ):
    """
    Converts between text, culture neutral text and the native value of one
    data type::

        >>> Integer().toValue('1,234')
        1234
        >>> Integer().toString(-1234)
        '-1,234'

    Options are given as keyword arguments, calling a TypeManager returns a
    copy with some options replaced::

        positive = Integer( allowNegatives=False )
        padded = positive( fillLeadZeros=4 )
    """

    dataType = None
    storageType = None
    nativeType = None

    def setParameters( self, culture=None ):
        self.culture = getCulture( culture )

    @property
    def isNeutral( self ):
        return self.culture is NEUTRAL

    def __repr__( self ):
        return '%s(%s)' % \
            ( self.__class__.__name__
            , ', '.join( '%s=%r' % item for item in sorted(self.__kwargs__.items()) )
            )

    def dataTypeName( self ):
        return self.dataType

    def storageTypeName( self ):
        return self.storageType or self.dataTypeName()

    def nativeTypeName( self ):
        return self.nativeType

    def friendlyName( self ):
        return self.dataTypeName()

    #### conversion

    def toValue( self, text ):
        if text is None:
            return self._nullValue()
        if isinstance( text, str ):
            if self._isNull( text ):
                return self._nullValue()
            return self._reviewValue( self._stringToNative( text ) )
        if self._isNative( text ):
            return self._reviewValue( text )

        raise ConfigError('%s cannot convert values of type %s' % (self.__class__.__name__, type(text).__name__))

    def toString( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        if self._isNullValue( value ):
            return ''
        if not self._isNative( value ):
            raise ConfigError('%s cannot format values of type %s' % (self.__class__.__name__, type(value).__name__))
        return self._nativeToString( self._reviewValue( value ) )

    @cached_property
    def neutral( self ):
        """ a copy working with the culture neutral format """
        return self( culture=NEUTRAL, **self._neutralOptions() )

    def _neutralOptions( self ):
        return {}

    def toValueNeutral( self, text ):
        return self.neutral.toValue( text )

    def toStringNeutral( self, value ):
        return self.neutral.toString( value )

    def toValueFromConnection( self, connection ):
        storageType = self.storageTypeName()
        if connection.typeSupported( storageType ):
            value = connection.getTypedValue( storageType )
            if value is None:
                return None
            return self._reviewValue( value )
        return self.toValue( connection.getTextValue() )

    def isValid( self, text, cannotEval=False ):
        if text is None or text == '':
            return cannotEval
        try:
            return not self._isNullValue( self.toValue( text ) )
        except InputError as e:
            log.debug('%s rejected %r: %s' % (self.__class__.__name__, text, e.key))
            return False

    def compare( self, value1, value2 ):
        value1 = self.toValue( value1 )
        value2 = self.toValue( value2 )
        if self._isNullValue( value1 ) or self._isNullValue( value2 ):
            raise InputError( None, self, 'null' )
        return self._compare( value1, value2 )

    def isValidChar( self, char ):
        if not isinstance( char, str ) or len(char) != 1:
            raise ConfigError('isValidChar requires a single character, got %r' % (char,))
        regex = self._validCharRE
        return regex is None or regex.match( char ) is not None

    def toNumber( self, value ):
        return None

    #### hooks

    @cached_property
    def _validCharRE( self ):
        chars = self._validChars()
        if chars is None:
            return None
        return charClass( chars )

    def _validChars( self ):
        return None

    def _isNull( self, text ):
        return text == ''

    def _nullValue( self ):
        return None

    def _isNullValue( self, value ):
        return value is None

    def _isNative( self, value ):
        return isinstance( value, self.nativeTypes )

    nativeTypes = ()

    def _stringToNative( self, text ):
        raise NotImplementedError('%s._stringToNative' % self.__class__.__name__)

    def _nativeToString( self, value ):
        raise NotImplementedError('%s._nativeToString' % self.__class__.__name__)

    def _reviewValue( self, value ):
        return value

    def _compare( self, value1, value2 ):
        return (value1 > value2) - (value1 < value2)
