"""
The names TypeManagers are created by, see formtypes.registry.create.

Lowercase names are storage types, Connections ask for them.
"""
from ..registry import define

from .number import Integer, Float, Currency, Percent
from .dates import Date, DayMonth, MonthYear, DateTime
from .times import TimeOfDay, Duration
from .text import String, EmailAddress, Url, CreditCardNumber, AllBrandsCreditCardNumber
from .region import PhoneNumber, PostalCode
from .boolean import Boolean

define( 'Integer', Integer )
define( 'Integer.Positive', Integer, allowNegatives=False )
define( 'Float', Float )
define( 'Float.Positive', Float, allowNegatives=False )
define( 'Currency', Currency )
define( 'Currency.Positive', Currency, allowNegatives=False )
define( 'Percent', Percent )
define( 'Percent.Positive', Percent, allowNegatives=False )
define( 'Percent.Integer', Percent, maxDecimalPlaces=0 )

define( 'Date', Date )
define( 'Date.Short', Date, dateFormat=0 )
define( 'Date.Abbrev', Date, dateFormat=10 )
define( 'Date.Long', Date, dateFormat=20 )
define( 'DayMonth', DayMonth )
define( 'MonthYear', MonthYear )
define( 'DateTime', DateTime )
define( 'TimeOfDay', TimeOfDay )
define( 'TimeOfDay.HHMM', TimeOfDay, timeFormat=1 )
define( 'Duration', Duration )
define( 'Duration.HHMM', Duration, timeFormat=11 )

define( 'String', String )
define( 'String.caseins', String, caseIns=True )
define( 'EmailAddress', EmailAddress )
define( 'EmailAddress.Multiple', EmailAddress, multiple=True )
define( 'Url', Url )
define( 'Url.FTP', Url, uriScheme='ftp' )
define( 'CreditCardNumber', CreditCardNumber )
define( 'CreditCardNumber.AllBrands', AllBrandsCreditCardNumber )

define( 'PhoneNumber', PhoneNumber )
define( 'PostalCode', PostalCode )
for name in ('NorthAmerica', 'UnitedStates', 'Canada', 'UnitedKingdom', 'France', 'Japan', 'Germany', 'China'):
    define( 'PhoneNumber.%s' % name, PhoneNumber, region=name )
    define( 'PostalCode.%s' % name, PostalCode, region=name )
define( 'PhoneNumber.NorthAmerica.CountryCode', PhoneNumber, region='NorthAmerica|CountryCode' )

define( 'Boolean', Boolean )

define( 'integer', Integer )
define( 'float', Float )
define( 'date', Date )
define( 'datetime', DateTime )
define( 'time', TimeOfDay )
define( 'duration', Duration )
define( 'boolean', Boolean )
define( 'string', String )
