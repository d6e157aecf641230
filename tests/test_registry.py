import datetime

import pytest

from formtypes import\
    ( InputError, ConfigError, CultureInfo, registerCulture, getCulture, DEFAULT, NEUTRAL
    , Integer, Float, create, define, checkAsTypeManager, typeManagers, conditions, calcItems
    , Value, Field
    )


class TestRegistry:

    def test_create( self, errorKey ):
        assert errorKey( create('Integer.Positive').toValue, '-1' ) == 'negative'
        assert create( 'Integer.Positive', fillLeadZeros=3 ).toString( 7 ) == '007'
        assert isinstance( create('Float'), Float )

    def test_unknown( self ):
        with pytest.raises( ConfigError ):
            create('Bogus')

    def test_duplicate( self ):
        with pytest.raises( ConfigError ):
            define( 'Integer', Integer )

    def test_define( self ):
        define( 'Integer.Padded', Integer, fillLeadZeros=5 )
        assert 'Integer.Padded' in typeManagers
        assert create('Integer.Padded').toString( 42 ) == '00042'

    def test_namespaces( self ):
        assert 'Range' in conditions
        assert 'Range' not in typeManagers
        assert 'Avg' in calcItems
        assert 'Integer' in typeManagers.names()

    def test_check( self ):
        assert checkAsTypeManager( None ) is None
        assert isinstance( checkAsTypeManager('Float'), Float )
        manager = Integer()
        assert checkAsTypeManager( manager ) is manager
        with pytest.raises( ConfigError ):
            checkAsTypeManager( 5 )


class TestOptions:

    def test_clone( self ):
        positive = Integer( allowNegatives=False )
        padded = positive( fillLeadZeros=3 )
        assert padded.options['allowNegatives'] is False
        assert padded.options['fillLeadZeros'] == 3
        assert 'fillLeadZeros' not in positive.options

    def test_positional( self ):
        assert Integer( 3 ).fillLeadZeros == 3
        with pytest.raises( ConfigError ):
            Integer( 3, fillLeadZeros=4 )

    def test_unknown_option( self ):
        with pytest.raises( ConfigError ):
            Integer( bogus=1 )

    def test_names( self ):
        assert Integer().dataTypeName() == 'integer'
        assert create('Currency').storageTypeName() == 'float'
        assert create('EmailAddress').friendlyName() == 'email address'
        assert create('Duration').nativeTypeName() == 'timedelta'
        assert create('TimeOfDay').storageTypeName() == 'time'


class TestCulture:

    def test_lookup( self ):
        assert getCulture() is DEFAULT
        assert getCulture('en-US') is DEFAULT
        assert getCulture( NEUTRAL ) is NEUTRAL
        with pytest.raises( ConfigError ):
            getCulture('xx-XX')

    def test_register( self ):
        culture = registerCulture( CultureInfo( 'en-GB', dateTime={'shortDatePattern': 'dd/MM/yyyy'} ) )
        assert getCulture('en-GB') is culture
        assert create( 'Date', culture='en-GB' ).toValue('05/03/2012') == datetime.date( 2012, 3, 5 )
        with pytest.raises( ConfigError ):
            registerCulture('en-GB')

    def test_rules( self ):
        assert DEFAULT.currencyFormat('groupSep') == ','
        assert DEFAULT.percentFormat('symbol') == '%'
        with pytest.raises( ConfigError ):
            DEFAULT.numberFormat('bogus')
        with pytest.raises( ConfigError ):
            DEFAULT.dateTimeFormat('bogus')


class TestConnections:

    def test_value( self ):
        value = Value( 5 )
        assert value.getTextValue() == '5'
        assert value.typeSupported('integer')
        assert value.typeSupported('float')
        assert value.getTypedValue('float') == 5.0
        assert value.getTypeManager().dataTypeName() == 'integer'
        with pytest.raises( ConfigError ):
            value.getTypedValue('date')

    def test_value_null( self ):
        assert Value( None ).isNullValue()
        assert Value( '' ).isNullValue()
        assert Value( 0, nullValue=0 ).isNullValue()
        assert not Value( False ).isNullValue()
        assert Value( False ).isNullValue( True )
        assert Value( None ).getTextValue() == ''

    def test_value_text( self ):
        assert Value( 1234.5 ).getTextValue() == '1,234.5'
        assert Value( datetime.date( 2012, 3, 5 ) ).getTextValue() == '3/5/2012'

    def test_field( self ):
        field = Field( id='name', text='  Joe  ' )
        assert field.getTextValue() == 'Joe'
        assert field.textLength() == 3
        assert Field( text=' x ', trim=False ).getTextValue() == ' x '
        assert not field.typeSupported('index')
        with pytest.raises( ConfigError ):
            field.getTypedValue('index')
        with pytest.raises( ConfigError ):
            Field( text=5 )

    def test_field_selection( self ):
        assert Field( index=-1 ).isNullValue()
        assert not Field( index=2 ).isNullValue()
        assert Field( indices=[] ).isNullValue()
        assert Field( indices=[1, 2] ).getTypedValue('indices') == [1, 2]

    def test_field_type_manager( self ):
        field = Field( text='3/5/2012', typeManager='Date' )
        assert create('Date').toValueFromConnection( field ) == datetime.date( 2012, 3, 5 )
        assert field.getTypeManager().dataTypeName() == 'date'


def test_input_error():
    with pytest.raises( InputError ) as info:
        Integer().toValue('x')
    error = info.value
    assert error.key == 'format'
    assert error.value == 'x'
    assert str( error ) == '"x" is not a valid integer'
