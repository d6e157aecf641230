from .core import TypeManager, messages, roundNumber, numDecPlaces, floatToString, toDecimal, POINT5, ROUND_MODES
from ..error import InputError
from ..lib import oneOf

from functools import cached_property

import math
import re
import logging
log = logging.getLogger(__name__)

_neutralInteger = re.compile(r'^-?\d+$')
_neutralFloat = re.compile(r'^-?\d+(\.\d+)?$')
_floatDigits = re.compile(r'^(\d+(\.\d*)?|\.\d+)$')
_integerDigits = re.compile(r'^\d+$')


@messages\
    ( notANumber='Not a number'
    , negative='Negative numbers are not allowed'
    , groupSep='Thousands separators are not allowed'
    , symbol='The symbol is not allowed'
    )
class BaseNumber( TypeManager ):
    """
    Shared parsing and formatting of the numeric managers.

    Text is normalized in this order: the sign format is checked, group
    separators are checked, the symbol is stripped, the sign is split off
    and finally the group separators are removed and the culture's decimal
    separator becomes a period.
    """

    nativeTypes = (int, float)
    _symbolChar = None

    def setParameters( self, allowNegatives=True, showGroupSep=True, allowGroupSep=True, strictSymbols=False, **kwargs ):
        TypeManager.setParameters( self, **kwargs )
        self.allowNegatives = allowNegatives
        self.showGroupSep = showGroupSep
        self.allowGroupSep = allowGroupSep
        self.strictSymbols = strictSymbols

    def _isNative( self, value ):
        return isinstance( value, self.nativeTypes ) and not isinstance( value, bool )

    def _nf( self, rule ):
        return self.culture.numberFormat( rule )

    def _negPattern( self ):
        return self._nf('negPattern')

    def _posPattern( self ):
        return 'n'

    def _symbol( self ):
        return None

    def toNumber( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        return value

    def _reviewValue( self, value ):
        if math.isnan( value ) or math.isinf( value ):
            raise InputError( value, self, 'notANumber' )
        if value < 0 and not self.allowNegatives:
            raise InputError( value, self, 'negative' )
        return value

    #### parsing

    def _checkNegSymbol( self, text ):
        if ('(' in text or ')' in text) and '(' not in self._negPattern():
            raise InputError( text, self, 'format' )

    def _stripSymbol( self, text ):
        return text

    def _acceptPeriod( self ):
        return False

    def _splitNegative( self, text ):
        negSymbol = self._nf('negSymbol')
        text = text.strip()
        if '(' in self._negPattern() and text.startswith('(') and text.endswith(')'):
            return True, text[1:-1].strip()
        if text.startswith( negSymbol ):
            return True, text[len(negSymbol):].strip()
        if text.endswith( negSymbol ):
            return True, text[:-len(negSymbol)].strip()
        return False, text

    def _parseText( self, text ):
        """ returns the sign and the digits, with a period as decimal separator """
        text = text.strip()
        groupSep = self._nf('groupSep')
        decimalSep = self._nf('decimalSep')

        self._checkNegSymbol( text )
        if groupSep and groupSep in text and not self.allowGroupSep:
            raise InputError( text, self, 'groupSep' )
        if self.strictSymbols and not self._strictRE.match( text ):
            raise InputError( text, self, 'format' )

        original = text
        text = self._stripSymbol( text )
        if self._acceptPeriod() and decimalSep != '.' and groupSep != '.':
            text = text.replace( '.', decimalSep )

        negative, text = self._splitNegative( text )
        if groupSep:
            text = text.replace( groupSep, '' )
        if decimalSep != '.':
            if '.' in text:
                raise InputError( original, self, 'format' )
            text = text.replace( decimalSep, '.' )

        return negative, text

    @cached_property
    def _strictRE( self ):
        return re.compile\
            ( '^(?:%s|%s)$' % \
                ( self._strictPattern( self._posPattern() )
                , self._strictPattern( self._negPattern() )
                )
            )

    def _strictPattern( self, pattern ):
        digits = set('0123456789')
        digits.update( self._nf('groupSep') )
        digits.update( self._nf('decimalSep') )
        if self._acceptPeriod():
            digits.add('.')
        numberRE = '[%s]+' % ''.join( re.escape(char) for char in sorted(digits) )
        symbol = self._symbol()

        result = []
        for char in pattern:
            if char == 'n':
                result.append( numberRE )
            elif char == self._symbolChar:
                if symbol:
                    result.append( '(?:%s)?' % re.escape(symbol) )
            elif char == ' ':
                result.append( ' ?' )
            elif char == '-':
                result.append( re.escape( self._nf('negSymbol') ) )
            else:
                result.append( re.escape( char ) )
        return ''.join( result )

    #### formatting

    def _applyGroupSep( self, digits ):
        groupSep = self._nf('groupSep')
        sizes = self._nf('groupSizes')
        if not self.showGroupSep or not groupSep or not sizes:
            return digits

        groups = []
        pos = 0
        size = sizes[0]
        while digits:
            if not size or len(digits) <= size:
                groups.insert( 0, digits )
                break
            groups.insert( 0, digits[-size:] )
            digits = digits[:-size]
            if pos < len(sizes) - 1:
                pos += 1
                size = sizes[pos]

        return groupSep.join( groups )

    def _showSymbol( self ):
        return False

    def _applyPattern( self, pattern, number ):
        symbol = self._symbol()
        tokens = ['n', '-']
        if self._symbolChar:
            if symbol and self._showSymbol():
                tokens.append( re.escape( self._symbolChar ) )
            else:
                pattern = re.sub( r'\s?%s\s?' % re.escape(self._symbolChar), '', pattern )

        def replace( match ):
            token = match.group()
            if token == 'n':
                return number
            if token == '-':
                return self._nf('negSymbol')
            return symbol

        return re.sub( '|'.join( tokens ), replace, pattern )

    def _formatNumber( self, value, digits ):
        pattern = self._negPattern() if value < 0 else self._posPattern()
        return self._applyPattern( pattern, digits )

    #### input filtering

    def _validChars( self ):
        chars = set('0123456789')
        if self.allowGroupSep:
            chars.update( self._nf('groupSep') )
        if self.allowNegatives:
            chars.update( self._nf('negSymbol') )
            if '(' in self._negPattern():
                chars.update( '()' )
        symbol = self._symbol()
        if symbol and self._allowSymbol():
            chars.update( symbol )
            if ' ' in self._posPattern() + self._negPattern():
                chars.add( ' ' )
        return chars

    def _allowSymbol( self ):
        return False


@messages\
    ( decimal='Decimal values are not allowed'
    , range='The value must be between %(min)s and %(max)s'
    )
class Integer( BaseNumber ):

    dataType = 'integer'
    nativeType = 'integer'

    MINIMUM = -2147483648
    MAXIMUM = 2147483647

    def setParameters( self, fillLeadZeros=0, **kwargs ):
        BaseNumber.setParameters( self, **kwargs )
        self.fillLeadZeros = fillLeadZeros

    def _neutralOptions( self ):
        return dict( showGroupSep=False, fillLeadZeros=0 )

    def _stringToNative( self, text ):
        if self.isNeutral:
            text = text.strip()
            if not _neutralInteger.match( text ):
                raise InputError( text, self, 'format' )
            return int( text )

        negative, digits = self._parseText( text )
        if '.' in digits:
            raise InputError( text, self, 'decimal' )
        if not _integerDigits.match( digits ):
            raise InputError( text, self, 'format' )

        value = int( digits )
        return -value if negative else value

    def _reviewValue( self, value ):
        value = BaseNumber._reviewValue( self, value )
        if isinstance( value, float ):
            if not value.is_integer():
                raise InputError( value, self, 'decimal' )
            value = int( value )
        if value < self.MINIMUM or value > self.MAXIMUM:
            raise InputError( value, self, 'range', min=self.MINIMUM, max=self.MAXIMUM )
        return value

    def _nativeToString( self, value ):
        digits = str( abs(value) )
        if self.fillLeadZeros:
            digits = digits.zfill( self.fillLeadZeros )
        else:
            digits = self._applyGroupSep( digits )
        return self._formatNumber( value, digits )


class BaseFloat( BaseNumber ):

    def setParameters( self, maxDecimalPlaces=None, trailingZeroDecimalPlaces=1, roundMode=None, acceptPeriodAsDecSep=False, **kwargs ):
        BaseNumber.setParameters( self, **kwargs )
        if roundMode is not None:
            oneOf( 'roundMode', roundMode, ROUND_MODES )
        self.maxDecimalPlaces = maxDecimalPlaces
        self.trailingZeroDecimalPlaces = trailingZeroDecimalPlaces
        self.roundMode = roundMode
        self.acceptPeriodAsDecSep = acceptPeriodAsDecSep

    def _neutralOptions( self ):
        return dict( showGroupSep=False, trailingZeroDecimalPlaces=1, maxDecimalPlaces=None, roundMode=None )

    def _acceptPeriod( self ):
        return self.acceptPeriodAsDecSep

    def _maxDecimalPlaces( self ):
        return self.maxDecimalPlaces

    def _trailingZeros( self, value ):
        tz = self.trailingZeroDecimalPlaces
        return 1 if tz is None else tz

    def _reviewValue( self, value ):
        return float( BaseNumber._reviewValue( self, value ) )

    def _stringToNative( self, text ):
        if self.isNeutral:
            text = text.strip()
            if not _neutralFloat.match( text ):
                raise InputError( text, self, 'format' )
            return float( text )

        negative, digits = self._parseText( text )
        if not _floatDigits.match( digits ):
            raise InputError( text, self, 'format' )

        value = float( digits )
        if negative:
            value = -value
        return self._applyMaxDecimalPlaces( value )

    def _applyMaxDecimalPlaces( self, value ):
        maxDecimalPlaces = self._maxDecimalPlaces()
        if self.roundMode is None:
            if maxDecimalPlaces is not None and maxDecimalPlaces >= 0 \
            and numDecPlaces( value ) > maxDecimalPlaces:
                raise InputError( value, self, 'decimalPlaces', max=maxDecimalPlaces )
            return value
        return roundNumber( value, self.roundMode, maxDecimalPlaces )

    def _displayValue( self, value ):
        """ the number shown, rounded for display """
        if self.isNeutral:
            return value
        roundMode = POINT5 if self.roundMode is None else self.roundMode
        return roundNumber( value, roundMode, self._maxDecimalPlaces() )

    def _nativeToString( self, value ):
        value = self._displayValue( value )
        (intPart, _, fraction) = floatToString( abs(value) ).partition('.')
        fraction = fraction.rstrip('0')

        trailingZeros = self._trailingZeros( value )
        if len(fraction) < trailingZeros:
            fraction = fraction.ljust( trailingZeros, '0' )

        digits = self._applyGroupSep( intPart )
        if fraction:
            digits += self._nf('decimalSep') + fraction
        return self._formatNumber( value, digits )

    def _validChars( self ):
        chars = BaseNumber._validChars( self )
        chars.update( self._nf('decimalSep') )
        if self.acceptPeriodAsDecSep:
            chars.add('.')
        return chars


class Float( BaseFloat ):

    dataType = 'float'
    nativeType = 'float'


class Currency( BaseFloat ):
    """
    Decimal places and trailing zeros follow the culture's currency decimals
    unless given explicitly or useDecimalDigits is False.
    """

    dataType = 'currency'
    storageType = 'float'
    nativeType = 'float'
    _symbolChar = '$'

    def setParameters( self, trailingZeroDecimalPlaces=None, showCurrencySymbol=True, allowCurrencySymbol=True, useDecimalDigits=True, hideDecimalWhenZero=False, **kwargs ):
        BaseFloat.setParameters( self, trailingZeroDecimalPlaces=trailingZeroDecimalPlaces, **kwargs )
        self.showCurrencySymbol = showCurrencySymbol
        self.allowCurrencySymbol = allowCurrencySymbol
        self.useDecimalDigits = useDecimalDigits
        self.hideDecimalWhenZero = hideDecimalWhenZero

    def _neutralOptions( self ):
        return dict\
            ( showGroupSep=False
            , trailingZeroDecimalPlaces=1
            , maxDecimalPlaces=None
            , roundMode=None
            , showCurrencySymbol=False
            , hideDecimalWhenZero=False
            , useDecimalDigits=False
            )

    def _nf( self, rule ):
        return self.culture.currencyFormat( rule )

    def _negPattern( self ):
        return self._nf('negPattern')

    def _posPattern( self ):
        return self._nf('posPattern')

    def _symbol( self ):
        return self._nf('symbol')

    def _showSymbol( self ):
        return self.showCurrencySymbol

    def _allowSymbol( self ):
        return self.allowCurrencySymbol

    def _stripSymbol( self, text ):
        symbol = self._symbol()
        if symbol and symbol in text:
            if not self.allowCurrencySymbol:
                raise InputError( text, self, 'symbol' )
            text = text.replace( symbol, '' )
        return text

    def _maxDecimalPlaces( self ):
        if self.maxDecimalPlaces is not None:
            return self.maxDecimalPlaces
        if self.useDecimalDigits:
            return self._nf('decimals')
        return None

    def _trailingZeros( self, value ):
        if self.hideDecimalWhenZero and float(value).is_integer():
            return 0
        if self.trailingZeroDecimalPlaces is not None:
            return self.trailingZeroDecimalPlaces
        if self.useDecimalDigits:
            return self._nf('decimals')
        return 1


class Percent( BaseFloat ):
    """
    With oneEqualsOneHundred, 1.0 is shown as 100%. Scaling is done in
    decimal arithmetic so round trips never pick up binary fractions.
    """

    dataType = 'percent'
    storageType = 'float'
    nativeType = 'float'
    _symbolChar = '%'

    def setParameters( self, trailingZeroDecimalPlaces=None, showPercentSymbol=True, allowPercentSymbol=True, oneEqualsOneHundred=True, **kwargs ):
        BaseFloat.setParameters( self, trailingZeroDecimalPlaces=trailingZeroDecimalPlaces, **kwargs )
        self.showPercentSymbol = showPercentSymbol
        self.allowPercentSymbol = allowPercentSymbol
        self.oneEqualsOneHundred = oneEqualsOneHundred

    def _neutralOptions( self ):
        return dict\
            ( showGroupSep=False
            , trailingZeroDecimalPlaces=1
            , maxDecimalPlaces=None
            , roundMode=None
            , showPercentSymbol=False
            , oneEqualsOneHundred=False
            )

    def _nf( self, rule ):
        return self.culture.percentFormat( rule )

    def _negPattern( self ):
        return self._nf('negPattern')

    def _posPattern( self ):
        return self._nf('posPattern')

    def _symbol( self ):
        return self._nf('symbol')

    def _showSymbol( self ):
        return self.showPercentSymbol

    def _allowSymbol( self ):
        return self.allowPercentSymbol

    def _stripSymbol( self, text ):
        symbol = self._symbol()
        if symbol and symbol in text:
            if not self.allowPercentSymbol:
                raise InputError( text, self, 'symbol' )
            text = text.replace( symbol, '' )
        return text

    def _trailingZeros( self, value ):
        if self.maxDecimalPlaces == 0 and not self.isNeutral:
            return 0
        if self.trailingZeroDecimalPlaces is not None:
            return self.trailingZeroDecimalPlaces
        return self._nf('decimals')

    def _stringToNative( self, text ):
        value = BaseFloat._stringToNative( self, text )
        if self.oneEqualsOneHundred:
            value = float( toDecimal( value ) / 100 )
        return value

    def _displayValue( self, value ):
        if self.oneEqualsOneHundred:
            value = float( toDecimal( value ) * 100 )
        return BaseFloat._displayValue( self, value )
