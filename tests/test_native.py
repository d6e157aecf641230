import datetime

import pytest

from formtypes import InputError, ConfigError, Date, convert


@convert( amount='Integer', when=Date() )
def book( amount, when=None ):
    return amount, when


class Ledger:

    @convert( amount='Currency' )
    def add( self, amount ):
        return amount


def test_converts_arguments():
    assert book( '1,234', when='3/5/2012' ) == (1234, datetime.date( 2012, 3, 5 ))
    assert book( amount='7' ) == (7, None)
    assert book( '7', '3/5/2012' ) == (7, datetime.date( 2012, 3, 5 ))


def test_methods():
    assert Ledger().add('$12.50') == 12.5


def test_error_names_argument():
    with pytest.raises( InputError ) as info:
        book('x')
    assert info.value.argument == 'amount'
    assert info.value.key == 'format'


def test_on_error():
    @convert( onError=lambda error: error.key, number='Integer' )
    def square( number ):
        return number * number

    assert square('3') == 9
    assert square('1.5') == 'decimal'


def test_include_exclude():
    @convert( include=['a'], a='Integer', b='Integer' )
    def pair( a, b ):
        return a, b

    @convert( exclude=['a'], a='Integer', b='Integer' )
    def other( a, b ):
        return a, b

    assert pair( '1', '2' ) == (1, '2')
    assert other( '1', '2' ) == ('1', 2)

    with pytest.raises( ConfigError ):
        convert( include=['a'], exclude=['b'], a='Integer' )( pair )


def test_unknown_argument():
    with pytest.raises( ConfigError ):
        @convert( x='Integer' )
        def nothing( a ):
            return a


def test_keyword_catchall():
    @convert( extra='Integer' )
    def loose( a, **kwargs ):
        return kwargs

    assert loose( 1, extra='5' ) == {'extra': 5}
