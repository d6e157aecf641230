from .core import TypeManager, messages
from ..error import InputError, ConfigError

from functools import cached_property

import re
import logging
log = logging.getLogger(__name__)


class BaseString( TypeManager ):
    """ text stays text, the empty string is the null value """

    dataType = 'string'
    nativeType = 'string'
    nativeTypes = (str,)

    def setParameters( self, caseIns=False, **kwargs ):
        TypeManager.setParameters( self, **kwargs )
        self.caseIns = caseIns

    def toValue( self, text ):
        if text is None:
            return ''
        if not isinstance( text, str ):
            raise ConfigError('%s requires a string, got %s' % (self.__class__.__name__, type(text).__name__))
        return self._reviewValue( text )

    def _nullValue( self ):
        return ''

    def _isNullValue( self, value ):
        return value is None or value == ''

    def _stringToNative( self, text ):
        return text

    def _nativeToString( self, value ):
        return value

    def _compare( self, value1, value2 ):
        if self.caseIns:
            value1 = value1.lower()
            value2 = value2.lower()
        return TypeManager._compare( self, value1, value2 )


class String( BaseString ):
    pass


@messages\
    ( pattern='"%(value)s" is not a valid %(type)s'
    )
class BaseStrongPatternString( BaseString ):
    """
    Text has to match one regular expression, built by _buildPattern or
    given as altREPattern.
    """

    _flags = 0

    def setParameters( self, altREPattern=None, **kwargs ):
        BaseString.setParameters( self, **kwargs )
        self.altREPattern = altREPattern

    @cached_property
    def _regExp( self ):
        pattern = self.altREPattern or self._buildPattern()
        log.debug('%s uses %r' % (self.__class__.__name__, pattern))
        return re.compile( pattern, self._flags )

    def _buildPattern( self ):
        raise NotImplementedError('%s._buildPattern' % self.__class__.__name__)

    def _reviewValue( self, text ):
        if text == '':
            return text
        if self._regExp.match( text ) is None:
            raise InputError( text, self, 'pattern' )
        return text


class EmailAddress( BaseStrongPatternString ):

    dataType = 'emailaddress'
    storageType = 'string'
    _flags = re.IGNORECASE

    ADDRESS = r"([\w\.!#\$%\-+.'_]+@[A-Za-z0-9\-]+(\.[A-Za-z0-9\-]{2,})+)"

    def setParameters( self, multiple=False, delimiterRE=';[ ]?', **kwargs ):
        BaseStrongPatternString.setParameters( self, **kwargs )
        self.multiple = multiple
        self.delimiterRE = delimiterRE

    def friendlyName( self ):
        return 'email address'

    def _buildPattern( self ):
        if self.multiple:
            return '^%s(%s%s)*$' % (self.ADDRESS, self.delimiterRE, self.ADDRESS)
        return '^%s$' % self.ADDRESS


class Url( BaseStrongPatternString ):

    dataType = 'url'
    storageType = 'string'
    _flags = re.IGNORECASE

    DOMAIN = r'[a-zA-Z0-9\-\.]+'
    FILE_PATH = r"(?:/[a-zA-Z0-9_/%\$#~][a-zA-Z0-9\-\._\'/\+%\$#~]+[A-Za-z0-9])*"
    PORT = r'(?:\:\d+)?'

    _ipFirst = r'(25[0-5]|2[0-4][0-9]|[0-1]{1}[0-9]{2}|0?[1-9]{1}[0-9]{1}|0{0,2}[1-9])'
    _ipMiddle = r'(25[0-5]|2[0-4][0-9]|[0-1]{1}[0-9]{2}|0?[1-9]{1}[0-9]{1}|0{0,2}[1-9]|0)'
    _ipLast = r'(25[0-5]|2[0-4][0-9]|[0-1]{1}[0-9]{2}|0?[1-9]{1}[0-9]{1}|0{0,2}[0-9])'
    IP = r'%s\.%s\.%s\.%s' % (_ipFirst, _ipMiddle, _ipMiddle, _ipLast)

    def setParameters\
        ( self
        , uriScheme='http|https'
        , domainExt='aero|biz|com|coop|edu|gov|info|int|mil|museum|name|net|org|travel|jobs|mobi|pro|co'
        , supportsIP=False
        , supportsPort=False
        , supportsPath=True
        , requireUriScheme=True
        , **kwargs
        ):
        BaseStrongPatternString.setParameters( self, **kwargs )
        self.uriScheme = uriScheme
        self.domainExt = domainExt
        self.supportsIP = supportsIP
        self.supportsPort = supportsPort
        self.supportsPath = supportsPath
        self.requireUriScheme = requireUriScheme

    def friendlyName( self ):
        return 'url'

    def _buildPattern( self ):
        pattern = r'^((?:%s)\://)' % self.uriScheme
        if not self.requireUriScheme:
            pattern += '?'

        domainExt = self.domainExt or '[a-zA-Z]{2,3}'
        domain = r'%s(?:\.[a-z]{2})?\.(?:%s)(?:\.[a-z]{2})?' % (self.DOMAIN, domainExt)
        if self.supportsIP:
            pattern += '((%s)|(%s))' % (domain, self.IP)
        else:
            pattern += domain

        if self.supportsPort:
            pattern += self.PORT
        if self.supportsPath:
            pattern += '/?(%s)?' % self.FILE_PATH
        else:
            pattern += '/?'
        return pattern + '$'


@messages\
    ( digits='Not enough digits'
    , char='Illegal character'
    , brand='Unsupported card brand'
    , luhn='Invalid card number'
    )
class CreditCardNumber( BaseString ):
    """
    Checks the length and prefix against brands, a list of
    (length, prefix pattern) pairs, then the Luhn checksum. The number is
    returned without the separator characters.
    """

    dataType = 'creditcardnumber'
    storageType = 'string'

    BRANDS =\
        [ (16, '5[1-5]')            # Mastercard
        , (13, '4')                 # Visa
        , (16, '4')
        , (15, '3[47]')             # American Express
        , (14, '30[0-35]|36|38')    # Diners Club
        , (16, '6011')              # Discover
        ]

    def setParameters( self, brands=BRANDS, allowSeps='', **kwargs ):
        BaseString.setParameters( self, **kwargs )
        if brands is not None and not isinstance( brands, (list, tuple) ):
            raise ConfigError('brands must be a list or None, got %r' % (brands,))
        if not isinstance( allowSeps, str ) or len(allowSeps) > 1:
            raise ConfigError('allowSeps must be a single character or "", got %r' % (allowSeps,))
        self.brands = brands
        self.allowSeps = allowSeps

    def friendlyName( self ):
        return 'credit card number'

    def _reviewValue( self, text ):
        if text == '':
            return text
        if self.allowSeps:
            text = text.replace( self.allowSeps, '' )

        if len(text) < 10:
            raise InputError( text, self, 'digits' )
        if not text.isdigit():
            raise InputError( text, self, 'char' )

        if self.brands is not None:
            for (length, prefix) in self.brands:
                if length == len(text) and re.match( '^(%s)' % prefix, text ):
                    break
            else:
                raise InputError( text, self, 'brand' )

        if not luhn( text ):
            raise InputError( text, self, 'luhn' )
        return text

    def _validChars( self ):
        return set('0123456789' + self.allowSeps)


class AllBrandsCreditCardNumber( CreditCardNumber ):
    brands = None


def luhn( digits ):
    """ True when the digit string passes the Luhn checksum """
    total = 0
    for (pos, digit) in enumerate( reversed( digits ) ):
        digit = int( digit )
        if pos % 2:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0
