from .core import OneConnection, TwoConnections, checkOperator, compareWith, SUCCESS, FAILED, CANNOT_EVALUATE
from ..error import InputError

import logging
log = logging.getLogger(__name__)


class Range( OneConnection ):
    """
    minimum and maximum are given in the neutral format of the TypeManager
    (or as native values). With lessThanMax the value has to stay below
    maximum.
    """

    def setParameters( self, minimum=None, maximum=None, lessThanMax=False, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.minimum = minimum
        self.maximum = maximum
        self.lessThanMax = lessThanMax

    def canEvaluate( self ):
        if self.minimum is None and self.maximum is None:
            return False
        return OneConnection.canEvaluate( self )

    def _evaluateRule( self ):
        if self.connection.isNullValue():
            return CANNOT_EVALUATE

        typeManager = self.getTypeManager()
        minimum = self._neutralValue( typeManager, self.minimum, 'minimum' )
        maximum = self._neutralValue( typeManager, self.maximum, 'maximum' )

        value = self._connectionValue( typeManager, self.connection )
        if value is None:
            return CANNOT_EVALUATE

        if minimum is not None and typeManager.compare( value, minimum ) < 0:
            return FAILED
        if maximum is not None:
            result = typeManager.compare( value, maximum )
            if result > 0 or (self.lessThanMax and result == 0):
                return FAILED
        return SUCCESS


class CompareToValue( OneConnection ):

    def setParameters( self, valueToCompare=None, operator='=', **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.valueToCompare = valueToCompare
        self.operator = checkOperator( operator )

    def canEvaluate( self ):
        return self.valueToCompare is not None and OneConnection.canEvaluate( self )

    def _evaluateRule( self ):
        if self.connection.isNullValue():
            return CANNOT_EVALUATE

        typeManager = self.getTypeManager()
        other = self._neutralValue( typeManager, self.valueToCompare, 'valueToCompare' )
        value = self._connectionValue( typeManager, self.connection )
        if value is None:
            return CANNOT_EVALUATE
        return compareWith( self.operator, typeManager.compare( value, other ) )


class CompareTwoElements( TwoConnections ):

    def setParameters( self, operator='=', **kwargs ):
        TwoConnections.setParameters( self, **kwargs )
        self.operator = checkOperator( operator )

    def _values( self ):
        if self.connection.isNullValue() or self.connection2.isNullValue():
            return None
        typeManager = self.getTypeManager()
        value1 = self._connectionValue( typeManager, self.connection )
        value2 = self._connectionValue( typeManager, self.connection2 )
        if value1 is None or value2 is None:
            return None
        return (typeManager, value1, value2)

    def _evaluateRule( self ):
        values = self._values()
        if values is None:
            return CANNOT_EVALUATE
        (typeManager, value1, value2) = values
        return compareWith( self.operator, typeManager.compare( value1, value2 ) )


class Difference( CompareTwoElements ):
    """ compares the distance of both values (by toNumber) to differenceValue """

    def setParameters( self, differenceValue=1, operator='<=', **kwargs ):
        CompareTwoElements.setParameters( self, operator=operator, **kwargs )
        self.differenceValue = differenceValue

    def _evaluateRule( self ):
        values = self._values()
        if values is None:
            return CANNOT_EVALUATE
        (typeManager, value1, value2) = values

        number1 = typeManager.toNumber( value1 )
        number2 = typeManager.toNumber( value2 )
        if number1 is None or number2 is None:
            return CANNOT_EVALUATE

        difference = abs( number1 - number2 )
        return compareWith\
            ( self.operator
            , (difference > self.differenceValue) - (difference < self.differenceValue)
            )


class DataTypeCheck( OneConnection ):
    """ SUCCESS when the text converts with the TypeManager """

    def _evaluateRule( self ):
        if self.connection.isNullValue():
            return CANNOT_EVALUATE
        try:
            self.getTypeManager().toValueFromConnection( self.connection )
        except InputError as e:
            log.debug('%r does not convert: %s' % (self.connection.getTextValue(), e.key))
            return FAILED
        return SUCCESS
