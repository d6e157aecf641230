from .core import TypeManager, messages
from .times import TimeOfDay
from ..error import InputError
from ..lib import oneOf

from functools import cached_property

import calendar
import datetime
import re
import logging
log = logging.getLogger(__name__)

_dateTokens = re.compile(r"'[^']*'|\"[^\"]*\"|yyyy|yy|MMMM|MMM|MM|M|dd|d|/")

# DayMonth values live in this year so Feb 29 always exists
LEAP_YEAR = 2012

DIGITS = '0123456789'


@messages\
    ( day='Invalid day'
    , month='Invalid month'
    , year='Invalid year'
    )
class BaseDate( TypeManager ):
    """
    Dates are parsed and formatted through the culture's date patterns.

    The pattern tokens are yyyy, yy, MMMM (month name), MMM (abbreviated
    month name), MM, M, dd and d. "/" stands for the culture's short date
    separator and quoted text is copied as is.
    """

    nativeTypes = (datetime.date,)

    DATE_FORMATS = (0, 1, 2, 10, 20, 100)

    # dateFormat -> name of the culture's pattern
    _patternNames =\
        { 0: 'shortDatePattern'
        , 1: 'shortDatePatternMN'
        , 2: 'shortDatePatternMN'
        , 10: 'abbrDatePattern'
        , 20: 'longDatePattern'
        }
    _neutralPattern = "yyyy'-'MM'-'dd"

    def setParameters( self, dateFormat=0, twoDigitYear=True, **kwargs ):
        TypeManager.setParameters( self, **kwargs )
        self.dateFormat = oneOf( 'dateFormat', dateFormat, self.DATE_FORMATS )
        self.twoDigitYear = twoDigitYear

    def _neutralOptions( self ):
        return dict( dateFormat=100, twoDigitYear=False )

    def _dtf( self, rule ):
        return self.culture.dateTimeFormat( rule )

    def _datePattern( self ):
        if self.dateFormat == 100:
            return self._neutralPattern
        return self._dtf( self._patternNames[ self.dateFormat ] )

    def _isNative( self, value ):
        return isinstance( value, datetime.date )

    def _reviewValue( self, value ):
        if isinstance( value, datetime.datetime ):
            value = value.date()
        return value

    def _compare( self, value1, value2 ):
        return TypeManager._compare( self, self.toNumber(value1), self.toNumber(value2) )

    def toNumber( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        if value is None:
            return None
        return self._reviewValue( value ).toordinal()

    #### formatting

    def _nativeToString( self, value ):
        return self._formatDate( value, self._datePattern() )

    def _formatDate( self, value, pattern ):
        def replace( match ):
            token = match.group()
            if token[0] in '\'"':
                return token[1:-1]
            if token == '/':
                return self._dtf('shortDateSep')
            if token == 'yyyy':
                return '%04d' % value.year
            if token == 'yy':
                return '%02d' % (value.year % 100)
            if token == 'MMMM':
                return self._dtf('months')[ value.month-1 ]
            if token == 'MMM':
                name = self._dtf('monthsAbbr')[ value.month-1 ]
                return name.upper() if self.dateFormat == 2 else name
            if token == 'MM':
                return '%02d' % value.month
            if token == 'M':
                return str( value.month )
            if token == 'dd':
                return '%02d' % value.day
            return str( value.day )

        return _dateTokens.sub( replace, pattern )

    #### parsing

    def _literalRE( self, text ):
        result = []
        for char in text:
            if char == ' ':
                result.append( r'\s*' )
            elif char == ',':
                result.append( ',?' )
            else:
                result.append( re.escape( char ) )
        return ''.join( result )

    @cached_property
    def _parseRE( self ):
        pattern = self._datePattern()
        parts = []
        pos = 0
        for match in _dateTokens.finditer( pattern ):
            parts.append( self._literalRE( pattern[ pos:match.start() ] ) )
            token = match.group()
            if token[0] in '\'"':
                parts.append( self._literalRE( token[1:-1] ) )
            elif token == '/':
                parts.append( re.escape( self._dtf('shortDateSep') ) )
            elif token[0] == 'y':
                parts.append( r'(?P<y>\d{4}|\d{2})' if self.twoDigitYear else r'(?P<y>\d{4})' )
            elif token in ('MMMM', 'MMM'):
                parts.append( r'(?P<M>[^\W\d_]+)\.?' )
            elif token[0] == 'M':
                parts.append( r'(?P<M>\d{1,2})' )
            else:
                parts.append( r'(?P<d>\d{1,2})' )
            pos = match.end()
        parts.append( self._literalRE( pattern[pos:] ) )

        regex = '^%s$' % ''.join( parts )
        log.debug('date pattern %r parses with %r' % (pattern, regex))
        return re.compile( regex, re.IGNORECASE )

    def _stringToNative( self, text ):
        match = self._parseRE.match( text.strip() )
        if match is None:
            raise InputError( text, self, 'format' )

        parts = match.groupdict()
        year = self._parseYear( text, parts.get('y', None) )
        month = self._parseMonth( text, parts.get('M', None) )
        day = self._parseDay( text, parts.get('d', None) )
        return self._makeDate( text, year, month, day )

    def _parseYear( self, text, year ):
        if year is None:
            raise InputError( text, self, 'year' )
        value = int( year )
        if len( year ) <= 2:
            yearMax = self._dtf('twoDigitYearMax')
            value += yearMax - yearMax % 100
            if value > yearMax:
                value -= 100
        return value

    def _parseMonth( self, text, month ):
        if month is None:
            raise InputError( text, self, 'month' )
        if month.isdigit():
            return int( month )

        name = month.lower()
        for names in (self._dtf('months'), self._dtf('monthsAbbr')):
            for (index, candidate) in enumerate( names ):
                if candidate and candidate.lower() == name:
                    return index + 1
        raise InputError( text, self, 'month' )

    def _parseDay( self, text, day ):
        if day is None:
            raise InputError( text, self, 'day' )
        return int( day )

    def _makeDate( self, text, year, month, day ):
        if month < 1 or month > 12:
            raise InputError( text, self, 'month' )
        if year < 1 or year > 9999:
            raise InputError( text, self, 'year' )
        if day < 1 or day > calendar.monthrange( year, month )[1]:
            raise InputError( text, self, 'day' )
        return datetime.date( year, month, day )

    #### input filtering

    def _validChars( self ):
        pattern = self._datePattern()
        chars = set( DIGITS )
        chars.update( self._dtf('shortDateSep') )
        for literal in _dateTokens.split( pattern ):
            chars.update( literal.strip('\'"') )
        if 'MMM' in pattern:
            for name in self._dtf('months') + self._dtf('monthsAbbr'):
                chars.update( name.lower() )
                chars.update( name.upper() )
        return chars


class Date( BaseDate ):

    dataType = 'date'
    nativeType = 'date'


class DayMonth( BaseDate ):
    """ a month and a day, the year is always LEAP_YEAR """

    dataType = 'daymonth'
    storageType = 'date'
    nativeType = 'date'

    _patternNames =\
        { 0: 'shortMonthDayPattern'
        , 1: 'shortMonthDayPatternMN'
        , 2: 'shortMonthDayPatternMN'
        , 10: 'abbrMonthDayPattern'
        , 20: 'longMonthDayPattern'
        }
    _neutralPattern = "MM'-'dd"

    def _parseYear( self, text, year ):
        return LEAP_YEAR

    def _reviewValue( self, value ):
        value = BaseDate._reviewValue( self, value )
        return datetime.date( LEAP_YEAR, value.month, value.day )


class MonthYear( BaseDate ):
    """ a month of a year, the day is always 1 """

    dataType = 'monthyear'
    storageType = 'date'
    nativeType = 'date'

    _patternNames =\
        { 0: 'shortMonthYearPattern'
        , 1: 'shortMonthYearPatternMN'
        , 2: 'shortMonthYearPatternMN'
        , 10: 'abbrMonthYearPattern'
        , 20: 'longMonthYearPattern'
        }
    _neutralPattern = "yyyy'-'MM"

    def _parseDay( self, text, day ):
        return 1

    def _reviewValue( self, value ):
        value = BaseDate._reviewValue( self, value )
        return datetime.date( value.year, value.month, 1 )

    def toNumber( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        if value is None:
            return None
        return value.year * 12 + value.month - 1


@messages\
    ( timeRequired='A time is required'
    )
class DateTime( TypeManager ):
    """
    A date followed by a time of day, each part handled by an embedded Date
    and TimeOfDay manager built from dateOptions and timeOptions.
    """

    dataType = 'datetime'
    nativeType = 'datetime'

    def setParameters( self, dateOptions=None, timeOptions=None, timeRequired=True, **kwargs ):
        TypeManager.setParameters( self, **kwargs )
        self.dateOptions = dict( dateOptions or {} )
        self.timeOptions = dict( timeOptions or {} )
        self.timeRequired = timeRequired

        # fail early on bad options
        self.dateManager
        self.timeManager

    def _neutralOptions( self ):
        return dict\
            ( dateOptions=dict( self.dateOptions, dateFormat=100, twoDigitYear=False )
            , timeOptions=dict( self.timeOptions, timeFormat=100 )
            )

    @cached_property
    def dateManager( self ):
        return Date( culture=self.culture, **self.dateOptions )

    @cached_property
    def timeManager( self ):
        return TimeOfDay( **dict( self.timeOptions, culture=self.culture, valueAsNumber=False ) )

    def _isNative( self, value ):
        return isinstance( value, datetime.date )

    def _reviewValue( self, value ):
        if not isinstance( value, datetime.datetime ):
            value = datetime.datetime.combine( value, datetime.time() )
        return value.replace( microsecond=0 )

    def _compare( self, value1, value2 ):
        return TypeManager._compare( self, self.toNumber(value1), self.toNumber(value2) )

    def toNumber( self, value ):
        """ days since 0001-01-01 including the time as fraction """
        if isinstance( value, str ):
            value = self.toValue( value )
        if value is None:
            return None
        value = self._reviewValue( value )
        seconds = value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1000000.0
        return value.toordinal() + seconds / 86400.0

    def _stringToNative( self, text ):
        text = text.strip()
        timeSep = self.culture.dateTimeFormat('timeSep')
        split = re.search( r'\s+(?=\d{1,4}\s*%s)' % re.escape(timeSep), text )
        if split is None:
            datePart, timePart = text, ''
        else:
            datePart, timePart = text[ :split.start() ], text[ split.end(): ]

        date = self.dateManager.toValue( datePart )
        if date is None:
            raise InputError( text, self, 'format' )

        if timePart:
            time = self.timeManager.toValue( timePart )
        elif self.timeRequired:
            raise InputError( text, self, 'timeRequired' )
        else:
            time = datetime.time()

        return datetime.datetime.combine( date, time )

    def _nativeToString( self, value ):
        return '%s %s' % \
            ( self.dateManager.toString( value.date() )
            , self.timeManager.toString( value.time() )
            )

    def _validChars( self ):
        chars = self.dateManager._validChars()
        chars.update( self.timeManager._validChars() )
        chars.add(' ')
        return chars
