import datetime

import pytest

from formtypes import InputError, ConfigError, TimeOfDay, Duration


class TestTimeOfDay:

    def test_review_range( self, errorKey ):
        assert errorKey( TimeOfDay()._reviewValue, 86400 ) == 'range'
        assert TimeOfDay()._reviewValue( 86399 ) == datetime.time( 23, 59, 59 )

    def test_parse( self ):
        manager = TimeOfDay()
        assert manager.toValue('1:30 PM') == datetime.time( 13, 30 )
        assert manager.toValue('1:30pm') == datetime.time( 13, 30 )
        assert manager.toValue('12:00 AM') == datetime.time( 0, 0 )
        assert manager.toValue('12:15 PM') == datetime.time( 12, 15 )
        assert manager.toValue('23:59:59') == datetime.time( 23, 59, 59 )
        assert manager.toValue('7') == datetime.time( 7, 0 )

    def test_invalid_parts( self, errorKey ):
        assert errorKey( TimeOfDay().toValue, '24:00' ) == 'hours'
        assert errorKey( TimeOfDay().toValue, '1:75' ) == 'minutes'
        assert errorKey( TimeOfDay().toValue, '1:15:60' ) == 'seconds'
        assert errorKey( TimeOfDay().toValue, 'noon' ) == 'format'

    def test_parse_requires( self, errorKey ):
        assert errorKey( TimeOfDay( parseTimeRequires='m' ).toValue, '7' ) == 'format'
        assert TimeOfDay( parseTimeRequires='m' ).toValue('7:05') == datetime.time( 7, 5 )
        assert errorKey( TimeOfDay( parseTimeRequires='s' ).toValue, '7:05' ) == 'format'

    def test_strict( self, errorKey ):
        strict = TimeOfDay( parseStrict=True )
        assert strict.toValue('1:00 PM') == datetime.time( 13, 0 )
        assert errorKey( strict.toValue, '13:00 PM' ) == 'designator'
        assert errorKey( strict.toValue, '1:00' ) == 'format'

    def test_format( self ):
        assert TimeOfDay().toString( datetime.time( 0, 5 ) ) == '12:05:00 AM'
        assert TimeOfDay().toString( datetime.time( 13, 0, 30 ) ) == '1:00:30 PM'
        assert TimeOfDay( timeFormat=1 ).toString( datetime.time( 13, 0, 30 ) ) == '1:00 PM'
        assert TimeOfDay( timeFormat=2 ).toString( datetime.time( 13, 0 ) ) == '1:00 PM'
        assert TimeOfDay( timeFormat=2 ).toString( datetime.time( 13, 0, 5 ) ) == '1:00:05 PM'

    def test_neutral( self ):
        assert TimeOfDay().toStringNeutral( datetime.time( 9, 5 ) ) == '9:05:00'
        assert TimeOfDay().toValueNeutral('9:05:00') == datetime.time( 9, 5 )
        assert TimeOfDay().toValueNeutral('21:05') == datetime.time( 21, 5 )

    def test_fractions_of_a_second( self ):
        value = datetime.time( 23, 59, 59, 600000 )
        assert TimeOfDay().toValue( value ) == datetime.time( 23, 59, 59 )
        assert TimeOfDay().toString( value ) == '11:59:59 PM'
        assert TimeOfDay().toStringNeutral( value ) == '23:59:59'
        assert TimeOfDay().toValueNeutral( TimeOfDay().toStringNeutral( value ) ) == datetime.time( 23, 59, 59 )

    def test_value_as_number( self ):
        manager = TimeOfDay( valueAsNumber=True )
        assert manager.toValue('1:30 PM') == 48600
        assert manager.toString( 48600 ) == '1:30:00 PM'
        hours = TimeOfDay( valueAsNumber=True, timeOneEqualsSeconds=3600 )
        assert hours.toValue('13:30') == 13.5
        assert hours.toNumber('13:30') == 13.5

    def test_compare( self ):
        assert TimeOfDay().compare( '1:00 PM', '12:59' ) == 1
        assert TimeOfDay().compare( datetime.time( 8 ), '8:00 AM' ) == 0

    def test_bad_options( self ):
        with pytest.raises( ConfigError ):
            TimeOfDay( timeOneEqualsSeconds=0 )
        with pytest.raises( ConfigError ):
            TimeOfDay( timeFormat=10 )
        with pytest.raises( ConfigError ):
            TimeOfDay( parseTimeRequires='x' )

    def test_valid_chars( self ):
        assert TimeOfDay().isValidChar(':')
        assert TimeOfDay().isValidChar('p')
        assert not TimeOfDay().isValidChar('x')
        assert not Duration().isValidChar('p')

    def test_culture( self, german ):
        manager = TimeOfDay( culture=german )
        assert manager.toString( datetime.time( 13, 5 ) ) == '13:05:00'
        assert manager.toValue('13:05') == datetime.time( 13, 5 )


class TestDuration:

    def test_hours_beyond_a_day( self ):
        assert Duration().toValue('27:30') == datetime.timedelta( hours=27, minutes=30 )
        assert Duration().toString( datetime.timedelta( hours=27, minutes=30 ) ) == '27:30:00'

    def test_max_hours( self, errorKey ):
        assert errorKey( Duration( maxHours=10 ).toValue, '11:00' ) == 'maxHours'
        assert Duration( maxHours=10 ).toValue('10:59') == datetime.timedelta( hours=10, minutes=59 )

    def test_negative( self, errorKey ):
        assert errorKey( Duration().toValue, datetime.timedelta( seconds=-1 ) ) == 'negative'

    def test_neutral( self ):
        assert Duration().toStringNeutral( datetime.timedelta( hours=2 ) ) == '0002:00:00'
        assert Duration().toValueNeutral('0002:00:00') == datetime.timedelta( hours=2 )

    def test_hours_beyond_four_digits( self, errorKey ):
        manager = Duration( maxHours=20000 )
        value = datetime.timedelta( hours=10000 )
        assert manager.toStringNeutral( value ) == '10000:00:00'
        assert manager.toValueNeutral('10000:00:00') == value
        assert manager.toValue('10000:00') == value
        assert Duration( maxHours=20000, timeFormat=100, parseStrict=True ).toValue('10000:00:00') == value
        assert errorKey( manager.toValue, '20001:00' ) == 'maxHours'

    def test_value_as_number( self ):
        manager = Duration( valueAsNumber=True, timeOneEqualsSeconds=3600 )
        assert manager.toValue('1:30') == 1.5
        assert manager.toString( 1.5 ) == '1:30:00'

    def test_formats( self ):
        assert Duration( timeFormat=11 ).toString( datetime.timedelta( minutes=90 ) ) == '1:30'
        with pytest.raises( ConfigError ):
            Duration( timeFormat=0 )
