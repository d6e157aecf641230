import pytest

from formtypes import CultureInfo, InputError, Field, Value
from formtypes.condition import Range


@pytest.fixture
def errorKey():
    """ calls function(*args) and returns the key of the InputError it raises """
    def check( function, *args ):
        with pytest.raises( InputError ) as info:
            function( *args )
        return info.value.key
    return check


@pytest.fixture
def german():
    return CultureInfo\
        ( 'de-DE'
        , number={'decimalSep': ',', 'groupSep': '.'}
        , currency={'posPattern': 'n $', 'negPattern': '-n $', 'symbol': '€'}
        , dateTime=\
            { 'shortDateSep': '.'
            , 'shortDatePattern': 'dd/MM/yyyy'
            , 'longTimePattern': 'HH:mm:ss'
            , 'am': ''
            , 'pm': ''
            }
        )


@pytest.fixture
def succeeding():
    return Range( connection=Value( 5 ), minimum=1, maximum=10 )


@pytest.fixture
def failing():
    return Range( connection=Value( 11 ), minimum=1, maximum=10 )


@pytest.fixture
def undecided():
    return Range( connection=Value( None ), minimum=1, maximum=10 )


@pytest.fixture
def fields():
    return [ Field( id='first', text='abc' ), Field( id='second', text='' ), Field( id='third', text='ABC' ) ]
