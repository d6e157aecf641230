import math

import pytest

from formtypes import ConfigError, Field, Value
from formtypes.condition import Range
from formtypes.typemanager import CURRENCY
from formtypes.calcitem import\
    ( Number, NaN, Null, Element, Group, Conditional
    , Avg, Min, Max, Abs, Round, Fix, UserFunction
    , toCalcItem, toCalcItems
    )


class TestFunctions:

    def test_avg( self ):
        assert math.isnan( Avg( parms=[] ).evaluate() )
        assert Avg( parms=[2, 4, 6] ).evaluate() == 4

    def test_min_max( self ):
        assert Min( parms=[3, 1, 2] ).evaluate() == 1
        assert Max( parms=[3, 1, 2] ).evaluate() == 3
        assert math.isnan( Min( parms=[] ).evaluate() )

    def test_abs( self ):
        assert Abs( parms=-5 ).evaluate() == 5
        assert math.isnan( Abs( parms=[] ).evaluate() )

    def test_round( self ):
        assert Round( parms=2.5 ).evaluate() == 3.0
        assert Round( parms=2.567, maxDecimalPlaces=2 ).evaluate() == 2.57
        assert Round( parms=2.5, roundMode=CURRENCY ).evaluate() == 2.0
        with pytest.raises( ConfigError ):
            Round( roundMode=12 )

    def test_fix( self ):
        assert Fix( parms=[None], valueWhenNull=7 ).evaluate() == 7
        assert Fix( parms=[math.nan], valueWhenInvalid=0 ).evaluate() == 0
        assert math.isnan( Fix( parms=[math.nan] ).evaluate() )

    def test_null_parms( self ):
        assert Avg( parms=[2, None, 4] ).evaluate() == 2
        assert Avg( parms=[2, None, 4], valueWhenNull=None ).evaluate() is None

    def test_user_function( self ):
        assert UserFunction( func=sum, parms=[1, 2, 3] ).evaluate() == 6
        assert not UserFunction( parms=[1] ).canEvaluate()
        with pytest.raises( ConfigError ):
            UserFunction( func=5 )


class TestGroup:

    def test_left_to_right( self ):
        assert Group( items=[1, '+', 2, '*', 3] ).evaluate() == 9
        assert Group( items=[10, '-', 4, '/', 2] ).evaluate() == 3

    def test_no_binary_fractions( self ):
        assert Group( items=[0.1, 0.2] ).evaluate() == 0.3
        assert Group( items=[1.1, '*', 3] ).evaluate() == 3.3
        assert Group( items=[0.3, '-', 0.1] ).evaluate() == 0.2

    def test_division_by_zero( self ):
        assert math.isnan( Group( items=[1, '/', 0] ).evaluate() )
        assert Group( items=[1, '/', 0], valueWhenInvalid=-1 ).evaluate() == -1

    def test_empty( self ):
        assert Group( items=[] ).evaluate() == 0
        assert Group( items=[], valueWhenEmpty=None ).evaluate() is None

    def test_null_and_nan( self ):
        assert Group( items=[5, None] ).evaluate() == 5
        assert math.isnan( Group( items=[5, math.nan] ).evaluate() )

    def test_stop_processing( self ):
        assert Group( items=[ Number( 1 ), Number( 2, stopProcessing=True ), Number( 4 ) ] ).evaluate() == 3

    def test_disabled_items_are_skipped( self ):
        assert Group( items=[ 1, Number( 2, enabled=False ), 4 ] ).evaluate() == 5

    def test_nested( self ):
        assert Group( items=[ 2, '*', [1, '+', 2] ] ).evaluate() == 6

    def test_fields( self ):
        assert Group( items=[ Field( text='2' ), '+', Field( text='3' ) ] ).evaluate() == 5.0

    def test_collect_connections( self ):
        first = Field( text='1' )
        second = Field( text='2' )
        assert Group( items=[ first, Avg( parms=[ second, first ] ) ] ).collectConnections( [] ) == [ first, second ]


class TestElement:

    def test_conversion( self ):
        assert Element( connection=Field( text='1,234' ), typeManager='Integer' ).evaluate() == 1234
        assert Element( connection=Value( 7 ) ).evaluate() == 7
        assert Element( connection=Field( text='10%' ), typeManager='Percent' ).evaluate() == 0.1

    def test_invalid( self ):
        assert math.isnan( Element( connection=Field( text='abc' ) ).evaluate() )
        assert Element( connection=Field( text='abc' ), valueWhenInvalid=0 ).evaluate() == 0

    def test_null( self ):
        assert Element( connection=Field( text='' ) ).evaluate() is None
        assert Element( connection=Field( text='' ), valueWhenNull=0 ).evaluate() == 0

    def test_dates_count_days( self ):
        element = Element( connection=Field( text='1/2/0001' ), typeManager='Date' )
        assert element.evaluate() == 2

    def test_needs_a_connection( self ):
        assert not Element().canEvaluate()
        with pytest.raises( ConfigError ):
            Element( connection='x' )


class TestConditional:

    def test_branches( self ):
        rule = Range( connection=Value( 5 ), minimum=1, maximum=10 )
        assert Conditional( condition=rule, success=100, failed=50 ).evaluate() == 100
        assert Conditional( condition=rule( connection=Value( 11 ) ), success=100, failed=50 ).evaluate() == 50
        assert Conditional( condition=rule( connection=Value( 11 ) ), success=100 ).evaluate() == 0

    def test_cannot_evaluate( self ):
        rule = Range( connection=Value( None ), minimum=1, maximum=10 )
        item = Conditional( condition=rule, success=100, failed=50 )
        assert math.isnan( item.evaluate() )
        assert item( cannotEvalMode='zero' ).evaluate() == 0
        assert item( cannotEvalMode='failed' ).evaluate() == 50
        assert item( cannotEvalMode='success' ).evaluate() == 100
        with pytest.raises( ConfigError ):
            item( cannotEvalMode='ignore' )

    def test_condition_description( self ):
        item = Conditional\
            ( condition={'class': 'Required', 'connection': Field( text='x' )}
            , success=1
            , failed=2
            )
        assert item.evaluate() == 1


class TestConversion:

    def test_items( self ):
        assert isinstance( toCalcItem( None ), Null )
        assert isinstance( toCalcItem( math.nan ), NaN )
        assert isinstance( toCalcItem( 3 ), Number )
        assert isinstance( toCalcItem( [1, 2] ), Group )
        assert isinstance( toCalcItem( Field( text='1' ) ), Element )
        assert isinstance( toCalcItem('Null'), Null )

    def test_bad_items( self ):
        with pytest.raises( ConfigError ):
            toCalcItem( True )
        with pytest.raises( ConfigError ):
            toCalcItem('Bogus')
        with pytest.raises( ConfigError ):
            toCalcItem( object() )

    def test_operators( self ):
        items = toCalcItems( [1, '-', 2] )
        assert [ item.operator for item in items ] == [ '+', '-' ]
        with pytest.raises( ConfigError ):
            toCalcItems( [1, '+'] )
        with pytest.raises( ConfigError ):
            Number( 1, operator='%' )
