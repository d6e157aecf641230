from .lib import Parameterized, oneOf
from .error import InputError, ConfigError
from .registry import checkAsTypeManager, create, calcItems as registry
from .connection import Connection
from .condition import toCondition, SUCCESS, CANNOT_EVALUATE
from .typemanager.core import roundNumber, numDecPlaces, POINT5, ROUND_MODES

import math
import logging
log = logging.getLogger(__name__)

OPERATORS = ('+', '-', '*', '/')

def isNaN( value ):
    return isinstance( value, float ) and math.isnan( value )

def toCalcItem( value ):
    """
    None becomes Null, numbers become Number (or NaN), lists become a Group,
    Connections become an Element and strings name a registered CalcItem.
    """
    if value is None:
        return Null()
    if isinstance( value, CalcItem ):
        return value
    if isinstance( value, bool ):
        raise ConfigError('Booleans are not CalcItems')
    if isinstance( value, (int, float) ):
        return NaN() if isNaN( value ) else Number( value )
    if isinstance( value, (list, tuple) ):
        return Group( items=value )
    if isinstance( value, Connection ):
        return Element( connection=value )
    if isinstance( value, str ):
        return registry.create( value )
    raise ConfigError('%r cannot be used as CalcItem' % (value,))

def toCalcItems( values ):
    """ like toCalcItem for each value, an operator string sets the next item's operator """
    if values is None:
        return []
    if not isinstance( values, (list, tuple) ):
        values = [ values ]

    items = []
    operator = None
    for value in values:
        if isinstance( value, str ) and value in OPERATORS:
            operator = value
            continue
        item = toCalcItem( value )
        if operator is not None:
            item = item( operator=operator )
            operator = None
        items.append( item )

    if operator is not None:
        raise ConfigError('Operator %s without a following item' % operator)
    return items


class CalcItem( Parameterized ):
    """
    A node of a calculation. evaluate() returns a number, NaN when the
    calculation failed or None when there was nothing to calculate.
    """

    def setParameters( self, enabled=True, operator='+', stopProcessing=False ):
        self.enabled = enabled
        self.operator = oneOf( 'operator', operator, OPERATORS )
        self.stopProcessing = stopProcessing

    def canEvaluate( self ):
        return self.enabled

    def evaluate( self ):
        raise NotImplementedError('%s.evaluate' % self.__class__.__name__)

    def collectConnections( self, connections ):
        return connections

    def _replace( self, item, default ):
        """ evaluates a replacement item, default when it is missing or cannot evaluate """
        if item is None or not item.canEvaluate():
            return default
        return item.evaluate()


class Number( CalcItem ):

    def setParameters( self, number=0, **kwargs ):
        CalcItem.setParameters( self, **kwargs )
        if isinstance( number, bool ) or not isinstance( number, (int, float) ):
            raise ConfigError('number must be a number, got %r' % (number,))
        self.number = number

    def evaluate( self ):
        return self.number


class NaN( CalcItem ):

    def evaluate( self ):
        return math.nan


class Null( CalcItem ):

    def evaluate( self ):
        return None


class Element( CalcItem ):
    """
    The number of a Connection, converted by typeManager (by default the
    Connection's own, else Float) and its toNumber.
    """

    def setParameters( self, connection=None, typeManager=None, valueWhenNull=None, valueWhenInvalid=math.nan, **kwargs ):
        CalcItem.setParameters( self, **kwargs )
        if connection is not None and not isinstance( connection, Connection ):
            raise ConfigError('connection must be a Connection, got %r' % (connection,))
        self.connection = connection
        self.typeManager = checkAsTypeManager( typeManager )
        self.valueWhenNull = None if valueWhenNull is None else toCalcItem( valueWhenNull )
        self.valueWhenInvalid = toCalcItem( valueWhenInvalid )

    def canEvaluate( self ):
        return self.connection is not None and CalcItem.canEvaluate( self )

    def getTypeManager( self ):
        return self.typeManager or self.connection.getTypeManager() or create('Float')

    def evaluate( self ):
        if self.connection.isNullValue():
            return self._replace( self.valueWhenNull, None )

        typeManager = self.getTypeManager()
        try:
            value = typeManager.toValueFromConnection( self.connection )
        except InputError as e:
            log.debug('element %r is invalid: %s' % (self.connection.getTextValue(), e.key))
            return self._replace( self.valueWhenInvalid, math.nan )

        if typeManager._isNullValue( value ):
            return self._replace( self.valueWhenNull, None )
        number = typeManager.toNumber( value )
        if number is None:
            return self._replace( self.valueWhenInvalid, math.nan )
        return number

    def collectConnections( self, connections ):
        if self.connection is not None:
            self.connection.collectConnections( connections )
        return connections


class Group( CalcItem ):
    """
    Combines its items left to right with each item's operator. Sums keep
    the larger decimal count of both operands, products the sum of both, so
    binary fractions do not show up. Division by zero is NaN.
    """

    def setParameters( self, items=None, valueWhenEmpty=0, valueWhenInvalid=math.nan, valueWhenNull=0, **kwargs ):
        CalcItem.setParameters( self, **kwargs )
        self.items = toCalcItems( items )
        self.valueWhenEmpty = None if valueWhenEmpty is None else toCalcItem( valueWhenEmpty )
        self.valueWhenInvalid = toCalcItem( valueWhenInvalid )
        self.valueWhenNull = None if valueWhenNull is None else toCalcItem( valueWhenNull )

    def evaluate( self ):
        total = None
        for item in self.items:
            if not item.canEvaluate():
                continue
            value = item.evaluate()
            if value is None:
                value = self._replace( self.valueWhenNull, None )
                if value is None:
                    continue
            if isNaN( value ):
                return self._replace( self.valueWhenInvalid, math.nan )

            if total is None:
                total = value
            else:
                total = combine( item.operator, total, value )
                if isNaN( total ):
                    return self._replace( self.valueWhenInvalid, math.nan )

            if item.stopProcessing:
                break

        if total is None:
            return self._replace( self.valueWhenEmpty, None )
        return total

    def collectConnections( self, connections ):
        for item in self.items:
            item.collectConnections( connections )
        return connections


def combine( operator, total, value ):
    if operator == '+':
        return roundNumber( total + value, POINT5, max( numDecPlaces(total), numDecPlaces(value) ) )
    if operator == '-':
        return roundNumber( total - value, POINT5, max( numDecPlaces(total), numDecPlaces(value) ) )
    if operator == '*':
        return roundNumber( total * value, POINT5, numDecPlaces(total) + numDecPlaces(value) )
    if value == 0:
        return math.nan
    return total / value


class Conditional( CalcItem ):
    """
    success when condition succeeds, else failed. cannotEvalMode decides
    what happens when the condition cannot evaluate: "error" gives NaN,
    "zero" gives 0, "success" and "failed" pick that item.
    """

    MODES = ('error', 'zero', 'success', 'failed')

    def setParameters( self, condition=None, success=None, failed=None, cannotEvalMode='error', **kwargs ):
        CalcItem.setParameters( self, **kwargs )
        self.condition = None if condition is None else toCondition( condition )
        self.success = None if success is None else toCalcItem( success )
        self.failed = Group() if failed is None else toCalcItem( failed )
        self.cannotEvalMode = oneOf( 'cannotEvalMode', cannotEvalMode, self.MODES )

    def canEvaluate( self ):
        return self.condition is not None and self.success is not None and CalcItem.canEvaluate( self )

    def evaluate( self ):
        result = self.condition.evaluate() if self.condition.canEvaluate() else CANNOT_EVALUATE
        if result == CANNOT_EVALUATE:
            if self.cannotEvalMode == 'error':
                return math.nan
            if self.cannotEvalMode == 'zero':
                return 0
            result = SUCCESS if self.cannotEvalMode == 'success' else None

        item = self.success if result == SUCCESS else self.failed
        if not item.canEvaluate():
            return None
        return item.evaluate()

    def collectConnections( self, connections ):
        if self.condition is not None:
            self.condition.collectConnections( connections )
        for item in (self.success, self.failed):
            if item is not None:
                item.collectConnections( connections )
        return connections


#### functions

class BaseFunction( CalcItem ):
    """
    Evaluates parms and passes the numbers to _calc. NaN parms are replaced
    by valueWhenInvalid and null parms by valueWhenNull. A replacement that
    is still NaN or null ends the function with that value.
    """

    _numParms = 0

    def setParameters( self, parms=None, valueWhenInvalid=math.nan, valueWhenNull=0, **kwargs ):
        CalcItem.setParameters( self, **kwargs )
        self.parms = toCalcItems( parms )
        self.valueWhenInvalid = None if valueWhenInvalid is None else toCalcItem( valueWhenInvalid )
        self.valueWhenNull = None if valueWhenNull is None else toCalcItem( valueWhenNull )

    def evaluate( self ):
        values = []
        for parm in self.parms:
            if not parm.canEvaluate():
                continue
            value = parm.evaluate()
            replacement = None
            if isNaN( value ):
                replacement = self.valueWhenInvalid
            elif value is None:
                replacement = self.valueWhenNull

            if value is None or isNaN( value ):
                value = self._replace( replacement, value )
                if value is None or isNaN( value ) or parm.stopProcessing:
                    return value
            values.append( value )

        if self._numParms and len(values) < self._numParms:
            return math.nan
        return self._calc( values )

    def _calc( self, values ):
        raise NotImplementedError('%s._calc' % self.__class__.__name__)

    def collectConnections( self, connections ):
        for parm in self.parms:
            parm.collectConnections( connections )
        return connections


class Avg( BaseFunction ):

    def _calc( self, values ):
        if not values:
            return math.nan
        return sum( values ) / float( len(values) )


class Min( BaseFunction ):

    def _calc( self, values ):
        return min( values ) if values else math.nan


class Max( BaseFunction ):

    def _calc( self, values ):
        return max( values ) if values else math.nan


class Abs( BaseFunction ):

    _numParms = 1

    def _calc( self, values ):
        return abs( values[0] )


class Round( BaseFunction ):

    _numParms = 1

    def setParameters( self, roundMode=POINT5, maxDecimalPlaces=0, **kwargs ):
        BaseFunction.setParameters( self, **kwargs )
        self.roundMode = oneOf( 'roundMode', roundMode, ROUND_MODES )
        self.maxDecimalPlaces = maxDecimalPlaces

    def _calc( self, values ):
        return roundNumber( values[0], self.roundMode, self.maxDecimalPlaces )


class Fix( BaseFunction ):
    """ its parm, with null and NaN replaced """

    _numParms = 1

    def _calc( self, values ):
        return values[0]


class UserFunction( BaseFunction ):
    """ func(values) gets the numbers of all parms """

    def setParameters( self, func=None, **kwargs ):
        BaseFunction.setParameters( self, **kwargs )
        if func is not None and not callable( func ):
            raise ConfigError('func must be callable, got %r' % (func,))
        self.func = func

    def canEvaluate( self ):
        return self.func is not None and BaseFunction.canEvaluate( self )

    def _calc( self, values ):
        return self.func( values )


for _item in (Number, NaN, Null, Element, Group, Conditional, Avg, Min, Max, Abs, Round, Fix, UserFunction):
    registry.define( _item.__name__, _item )
