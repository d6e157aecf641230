from .core import TypeManager, messages, roundNumber, numDecPlaces, floatToString,\
    POINT5, CURRENCY, TRUNCATE, CEILING, NEXTWHOLE, ROUND_MODES
from .number import BaseNumber, Integer, BaseFloat, Float, Currency, Percent
from .times import BaseTime, TimeOfDay, Duration
from .dates import BaseDate, Date, DayMonth, MonthYear, DateTime, LEAP_YEAR
from .text import BaseString, String, BaseStrongPatternString, EmailAddress, Url, CreditCardNumber, AllBrandsCreditCardNumber, luhn
from .region import BaseRegionString, PhoneNumber, PostalCode, applyNumberMask, PHONE_REGIONS, POSTAL_REGIONS
from .boolean import Boolean
