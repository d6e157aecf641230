from .core import TypeManager, messages
from ..error import InputError, ConfigError
from ..lib import oneOf

from functools import cached_property

import datetime
import re
import logging
log = logging.getLogger(__name__)

_timeTokens = re.compile(r"'[^']*'|\"[^\"]*\"|HHHH|HH|H|hh|h|mm|m|ss|s|tt|:")

_hourTokens = ('HHHH', 'HH', 'H', 'hh', 'h')


@messages\
    ( hours='Invalid hours'
    , minutes='Invalid minutes'
    , seconds='Invalid seconds'
    , negative='Negative times are not allowed'
    , designator='Hours must be between 1 and 12 when AM or PM is given'
    )
class BaseTime( TypeManager ):
    """
    Times are held either as native objects or, with valueAsNumber, as a
    number of timeOneEqualsSeconds units (3600 means the number counts hours).

    Pattern tokens: H (24 hours, HHHH pads to 4 digits), h (12 hours for a
    time of day), mm, m, ss, s, tt (AM/PM designator). ":" stands for the
    culture's time separator.
    """

    TIME_FORMATS = (0, 1, 2, 100, 101)
    _patternNames =\
        { 0: 'longTimePattern'
        , 1: 'shortTimePattern'
        , 2: 'longTimePattern'
        }
    _neutralPatterns =\
        { 100: 'H:mm:ss'
        , 101: 'H:mm'
        }
    _hasDesignator = False

    def setParameters( self, timeFormat=0, timeOneEqualsSeconds=1, valueAsNumber=False, parseStrict=False, parseTimeRequires='h', **kwargs ):
        TypeManager.setParameters( self, **kwargs )
        if isinstance( timeOneEqualsSeconds, bool ) \
        or not isinstance( timeOneEqualsSeconds, (int, float) ) \
        or timeOneEqualsSeconds <= 0:
            raise ConfigError('timeOneEqualsSeconds must be a positive number, got %r' % (timeOneEqualsSeconds,))
        self.timeFormat = oneOf( 'timeFormat', timeFormat, self.TIME_FORMATS )
        self.timeOneEqualsSeconds = timeOneEqualsSeconds
        self.valueAsNumber = valueAsNumber
        self.parseStrict = parseStrict
        self.parseTimeRequires = oneOf( 'parseTimeRequires', parseTimeRequires, ('h', 'm', 's') )

    def _neutralOptions( self ):
        return dict( timeFormat=100, parseStrict=False )

    def _dtf( self, rule ):
        return self.culture.dateTimeFormat( rule )

    def _timePattern( self ):
        if self.timeFormat in self._neutralPatterns:
            return self._neutralPatterns[ self.timeFormat ]
        return self._dtf( self._patternNames[ self.timeFormat ] )

    def _isNative( self, value ):
        if isinstance( value, bool ):
            return False
        return isinstance( value, (int, float) + self.nativeTypes )

    #### seconds

    def _toSeconds( self, value ):
        if isinstance( value, (int, float) ):
            return value * self.timeOneEqualsSeconds
        return self._nativeToSeconds( value )

    def _fromSeconds( self, seconds ):
        if self.valueAsNumber:
            value = seconds / self.timeOneEqualsSeconds
            if float( value ).is_integer():
                return int( value )
            return value
        return self._secondsToNative( seconds )

    def _reviewValue( self, value ):
        seconds = self._toSeconds( value )
        if seconds < 0:
            raise InputError( value, self, 'negative' )
        # the patterns stop at seconds
        seconds = int( round( seconds, 6 ) )
        self._checkRange( value, seconds )
        return self._fromSeconds( seconds )

    def _checkRange( self, value, seconds ):
        pass

    def toNumber( self, value ):
        if isinstance( value, str ):
            value = self.toValue( value )
        if value is None:
            return None
        value = self._toSeconds( value ) / self.timeOneEqualsSeconds
        return int( value ) if float( value ).is_integer() else value

    def _compare( self, value1, value2 ):
        return TypeManager._compare( self, self._toSeconds(value1), self._toSeconds(value2) )

    #### formatting

    def _nativeToString( self, value ):
        total = int( self._toSeconds( value ) )
        (hours, rest) = divmod( total, 3600 )
        (minutes, seconds) = divmod( rest, 60 )

        pattern = self._timePattern()
        if self.timeFormat % 10 == 2 and seconds == 0:
            pattern = re.sub( r':s+', '', pattern )

        def replace( match ):
            token = match.group()
            if token[0] in '\'"':
                return token[1:-1]
            if token == ':':
                return self._dtf('timeSep')
            if token == 'tt':
                return self._dtf('pm') if hours > 11 else self._dtf('am')
            if token[0] == 'h' and self._hasDesignator:
                return '%0*d' % (len(token), hours % 12 or 12)
            if token in _hourTokens:
                return '%0*d' % (len(token), hours)
            if token[0] == 'm':
                return '%0*d' % (len(token), minutes)
            return '%0*d' % (len(token), seconds)

        return _timeTokens.sub( replace, pattern ).strip()

    #### parsing

    @cached_property
    def _parseRE( self ):
        sep = re.escape( self._dtf('timeSep') )
        minutes = r'(?:\s*%s\s*(\d{1,2}))' % sep
        seconds = r'(?:\s*%s\s*(\d{1,2}))' % sep
        if self.parseTimeRequires == 'h':
            minutes += '?'
        if self.parseTimeRequires != 's':
            seconds += '?'
        return re.compile( r'^(\d+)%s%s$' % (minutes, seconds) )

    @cached_property
    def _strictRE( self ):
        """ the time pattern as regex, only seconds stay optional """
        pattern = self._timePattern()
        tokens = [ match.group() for match in re.finditer( r"'[^']*'|\"[^\"]*\"|HHHH|HH|H|hh|h|mm|m|ss|s|tt|:|.", pattern ) ]

        parts = []
        pos = 0
        while pos < len(tokens):
            token = tokens[pos]
            if token == ':' and pos+1 < len(tokens) and tokens[pos+1][0] == 's':
                part = r'%s\d{1,2}' % re.escape( self._dtf('timeSep') )
                if self.parseTimeRequires != 's':
                    part = '(?:%s)?' % part
                parts.append( part )
                pos += 2
                continue
            if token[0] in '\'"':
                parts.append( re.escape( token[1:-1] ) )
            elif token == 'HHHH':
                parts.append( r'\d+' )
            elif token in _hourTokens or token[0] in 'ms':
                parts.append( r'\d{1,2}' )
            elif token == ':':
                parts.append( re.escape( self._dtf('timeSep') ) )
            elif token == 'tt':
                designators = [ re.escape(d) for d in (self._dtf('am'), self._dtf('pm')) if d ]
                if designators:
                    parts.append( '(?:%s)' % '|'.join( designators ) )
            elif token == ' ':
                parts.append( r'\s*' )
            else:
                parts.append( re.escape( token ) )
            pos += 1

        return re.compile( '^%s$' % ''.join( parts ), re.IGNORECASE )

    def _splitDesignator( self, text ):
        if not self._hasDesignator:
            return None, text
        for (name, designator) in (('pm', self._dtf('pm')), ('am', self._dtf('am'))):
            if designator and designator.lower() in text:
                return name, text.replace( designator.lower(), '' ).strip()
        return None, text

    def _stringToNative( self, text ):
        original = text.strip()
        if self.parseStrict and not self._strictRE.match( original ):
            raise InputError( text, self, 'format' )

        (designator, text) = self._splitDesignator( original.lower() )
        match = self._parseRE.match( text )
        if match is None:
            raise InputError( original, self, 'format' )

        hours = int( match.group(1) )
        minutes = int( match.group(2) or 0 )
        seconds = int( match.group(3) or 0 )

        if designator is not None:
            if self.parseStrict and (hours > 12 or hours == 0):
                raise InputError( original, self, 'designator' )
            if designator == 'pm' and hours < 12:
                hours += 12
            elif designator == 'am' and hours == 12:
                hours = 0

        if minutes > 59:
            raise InputError( original, self, 'minutes' )
        if seconds > 59:
            raise InputError( original, self, 'seconds' )
        self._checkHours( original, hours )

        return self._fromSeconds( hours * 3600 + minutes * 60 + seconds )

    def _checkHours( self, text, hours ):
        pass

    #### input filtering

    def _validChars( self ):
        chars = set('0123456789')
        chars.update( self._dtf('timeSep') )
        if self._hasDesignator:
            for designator in (self._dtf('am'), self._dtf('pm')):
                chars.update( designator.lower() )
                chars.update( designator.upper() )
            chars.add(' ')
        return chars


@messages\
    ( range='A time of day must be less than 24 hours'
    )
class TimeOfDay( BaseTime ):

    dataType = 'timeofday'
    storageType = 'time'
    nativeType = 'time'
    nativeTypes = (datetime.time,)

    _hasDesignator = True

    def _nativeToSeconds( self, value ):
        return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1000000.0

    def _secondsToNative( self, seconds ):
        whole = int( seconds )
        (hours, rest) = divmod( whole, 3600 )
        (minutes, secs) = divmod( rest, 60 )
        return datetime.time( hours, minutes, secs, int( (seconds - whole) * 1000000 ) )

    def _checkRange( self, value, seconds ):
        if seconds >= 86400:
            raise InputError( value, self, 'range' )

    def _checkHours( self, text, hours ):
        if hours > 23:
            raise InputError( text, self, 'hours' )


@messages\
    ( maxHours='Durations are limited to %(max)s hours'
    )
class Duration( BaseTime ):
    """ elapsed time, hours are limited by maxHours instead of the clock """

    dataType = 'duration'
    storageType = 'duration'
    nativeType = 'timedelta'
    nativeTypes = (datetime.timedelta,)

    TIME_FORMATS = (10, 11, 12, 100, 101)
    _patternNames =\
        { 10: 'longDurationPattern'
        , 11: 'shortDurationPattern'
        , 12: 'longDurationPattern'
        }
    _neutralPatterns =\
        { 100: 'HHHH:mm:ss'
        , 101: 'HHHH:mm'
        }

    def setParameters( self, timeFormat=10, maxHours=9999, **kwargs ):
        BaseTime.setParameters( self, timeFormat=timeFormat, **kwargs )
        self.maxHours = maxHours

    def _nativeToSeconds( self, value ):
        return value.total_seconds()

    def _secondsToNative( self, seconds ):
        return datetime.timedelta( seconds=seconds )

    def _checkRange( self, value, seconds ):
        if int( seconds // 3600 ) > self.maxHours:
            raise InputError( value, self, 'maxHours', max=self.maxHours )
