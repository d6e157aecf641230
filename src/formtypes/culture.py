from .error import ConfigError

import logging
log = logging.getLogger(__name__)

# en-US. "n" is the number, "$" the currency symbol and "%" the percent symbol.
NUMBER =\
    { 'negPattern': '-n'
    , 'decimals': 2
    , 'groupSep': ','
    , 'decimalSep': '.'
    , 'groupSizes': [3]
    , 'negSymbol': '-'
    }

CURRENCY =\
    { 'negPattern': '($n)'
    , 'posPattern': '$n'
    , 'symbol': '$'
    , 'decimals': 2
    }

PERCENT =\
    { 'negPattern': '-n%'
    , 'posPattern': 'n%'
    , 'symbol': '%'
    , 'decimals': 2
    }

DATETIME =\
    { 'shortDateSep': '/'
    , 'timeSep': ':'
    , 'firstDay': 0
    , 'days': ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']
    , 'daysAbbr': ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']
    , 'daysShort': ['Su', 'Mo', 'Tu', 'We', 'Th', 'Fr', 'Sa']
    , 'months':\
        [ 'January', 'February', 'March', 'April', 'May', 'June', 'July'
        , 'August', 'September', 'October', 'November', 'December', ''
        ]
    , 'monthsAbbr':\
        [ 'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep'
        , 'Oct', 'Nov', 'Dec', ''
        ]
    , 'am': 'AM'
    , 'pm': 'PM'
    , 'twoDigitYearMax': 2029
    , 'shortDatePattern': 'M/d/yyyy'
    , 'shortDatePatternMN': 'MMM/d/yyyy'
    , 'abbrDatePattern': 'MMM dd, yyyy'
    , 'longDatePattern': 'MMMM dd, yyyy'
    , 'shortTimePattern': 'h:mm tt'
    , 'longTimePattern': 'h:mm:ss tt'
    , 'shortDurationPattern': 'h:mm'
    , 'longDurationPattern': 'h:mm:ss'
    , 'shortMonthDayPattern': 'M/dd'
    , 'shortMonthDayPatternMN': 'MMM/dd'
    , 'abbrMonthDayPattern': 'MMM dd'
    , 'longMonthDayPattern': 'MMMM dd'
    , 'shortMonthYearPattern': 'M/yyyy'
    , 'shortMonthYearPatternMN': 'MMM/yyyy'
    , 'abbrMonthYearPattern': 'MMM yyyy'
    , 'longMonthYearPattern': 'MMMM yyyy'
    }


class CultureInfo( object ):
    """
    Formatting rules of one culture.

    Every table starts from the en-US values above, the constructor
    arguments are merged over them::

        german = CultureInfo\\
            ( 'de-DE'
            , number={'decimalSep': ',', 'groupSep': '.'}
            , currency={'posPattern': 'n $', 'negPattern': '-n $', 'symbol': '€'}
            )
    """

    def __init__( self, name='en-US', number=None, currency=None, percent=None, dateTime=None ):
        self.name = name
        self._number = dict( NUMBER, **(number or {}) )
        self._currency = dict( CURRENCY, **(currency or {}) )
        self._percent = dict( PERCENT, **(percent or {}) )
        self._dateTime = dict( DATETIME, **(dateTime or {}) )

    def __repr__( self ):
        return 'CultureInfo(%r)' % self.name

    def numberFormat( self, rule ):
        try:
            return self._number[ rule ]
        except KeyError:
            raise ConfigError('Unknown number format rule "%s"' % rule)

    def currencyFormat( self, rule ):
        if rule in self._currency:
            return self._currency[ rule ]
        return self.numberFormat( rule )

    def percentFormat( self, rule ):
        if rule in self._percent:
            return self._percent[ rule ]
        return self.numberFormat( rule )

    def dateTimeFormat( self, rule ):
        try:
            return self._dateTime[ rule ]
        except KeyError:
            raise ConfigError('Unknown date time format rule "%s"' % rule)


DEFAULT = CultureInfo()

# used for the culture neutral format, never for display
NEUTRAL = CultureInfo\
    ( 'neutral'
    , number={'groupSep': '', 'decimalSep': '.', 'negPattern': '-n', 'negSymbol': '-'}
    , currency={'negPattern': '-n', 'posPattern': 'n', 'symbol': ''}
    , percent={'negPattern': '-n', 'posPattern': 'n', 'symbol': ''}
    , dateTime={'shortDateSep': '-', 'timeSep': ':', 'am': '', 'pm': ''}
    )

_cultures = { DEFAULT.name: DEFAULT, NEUTRAL.name: NEUTRAL }

def registerCulture( culture ):
    if not isinstance( culture, CultureInfo ):
        raise ConfigError('registerCulture requires a CultureInfo, got %r' % (culture,))
    _cultures[ culture.name ] = culture
    return culture

def getCulture( culture=None ):
    if culture is None:
        return DEFAULT
    if isinstance( culture, CultureInfo ):
        return culture
    try:
        found = _cultures[ culture ]
    except (KeyError, TypeError):
        raise ConfigError('Unknown culture %r' % (culture,))
    log.debug('culture %s resolved' % culture)
    return found
