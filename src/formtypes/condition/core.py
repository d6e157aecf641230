from ..lib import Parameterized, oneOf
from ..error import InputError, ConfigError
from ..registry import checkAsTypeManager, create, conditions as registry
from ..connection import Connection

from functools import cached_property

import logging
log = logging.getLogger(__name__)

SUCCESS = 1
FAILED = 0
CANNOT_EVALUATE = -1

OPERATORS =\
    { '=': lambda result: result == 0
    , '<>': lambda result: result != 0
    , '<': lambda result: result < 0
    , '>': lambda result: result > 0
    , '<=': lambda result: result <= 0
    , '>=': lambda result: result >= 0
    }

def checkOperator( operator ):
    return oneOf( 'operator', operator, tuple(OPERATORS) )

def compareWith( operator, result ):
    """ applies operator to a compare() result """
    return SUCCESS if OPERATORS[ operator ]( result ) else FAILED

def toCondition( value ):
    """ a Condition, or a dict naming its class under "class" """
    if isinstance( value, Condition ):
        return value
    if isinstance( value, dict ):
        options = dict( value )
        try:
            className = options.pop('class')
        except KeyError:
            raise ConfigError('Condition description without "class": %r' % (value,))
        return registry.create( className, **options )
    raise ConfigError('Expected a Condition, got %r' % (value,))

def checkConnection( name, connection ):
    if connection is not None and not isinstance( connection, Connection ):
        raise ConfigError('%s must be a Connection, got %r' % (name, connection))
    return connection


class Condition( Parameterized ):
    """
    A rule evaluating to SUCCESS, FAILED or CANNOT_EVALUATE.

    Conditions combine with &, | and ~::

        rule = Range( connection=age, minimum=18 ) & ~Required( connection=guardian )

    InputErrors of the TypeManager never leave evaluate(), they turn into
    FAILED or CANNOT_EVALUATE. ConfigErrors always do.
    """

    lastEvaluateResult = None

    def setParameters( self, enabled=True, not_=False, autoDisable=True, typeManager=None, trim=True ):
        self.enabled = enabled
        self.not_ = not_
        self.autoDisable = autoDisable
        self.typeManager = checkAsTypeManager( typeManager )
        self.trim = trim

    def __and__( self, other ):
        return BooleanLogic( operator='AND', conditions=[ self, other ] )

    def __or__( self, other ):
        return BooleanLogic( operator='OR', conditions=[ self, other ] )

    def __invert__( self ):
        return self( not_=not self.not_ )

    def canEvaluate( self ):
        if not self.enabled:
            return False
        if self.autoDisable:
            return self._editable( self.collectConnections( [] ) )
        return True

    def _editable( self, connections ):
        return all( connection.isEditable() for connection in connections )

    def evaluate( self ):
        if not self.canEvaluate():
            result = CANNOT_EVALUATE
        else:
            result = self._evaluateRule()
            if self.not_ and result != CANNOT_EVALUATE:
                result = FAILED if result == SUCCESS else SUCCESS

        self.lastEvaluateResult = result
        return result

    def isValid( self ):
        return self.evaluate() != FAILED

    def _evaluateRule( self ):
        raise NotImplementedError('%s._evaluateRule' % self.__class__.__name__)

    def collectConnections( self, connections ):
        return connections

    def getTypeManager( self ):
        if self.typeManager is None:
            return self._defaultTypeManager
        return self.typeManager

    @cached_property
    def _defaultTypeManager( self ):
        for connection in self.collectConnections( [] ):
            typeManager = connection.getTypeManager()
            if typeManager is not None:
                return typeManager
        return create('Integer')

    def _textValue( self, connection ):
        text = connection.getTextValue()
        return text.strip() if self.trim else text

    def _neutralValue( self, typeManager, value, name ):
        """ converts a configured bound, bad bounds are programming errors """
        if value is None:
            return None
        try:
            if isinstance( value, str ):
                return typeManager.toValueNeutral( value )
            return typeManager.toValue( value )
        except InputError as e:
            raise ConfigError('%s %r cannot be converted by %r: %s' % (name, value, typeManager, e))

    def _connectionValue( self, typeManager, connection ):
        """ the typed value, None when it is missing or cannot be converted """
        try:
            value = typeManager.toValueFromConnection( connection )
        except InputError as e:
            log.debug('%s: %r cannot be converted (%s)' % (self.__class__.__name__, connection.getTextValue(), e.key))
            return None
        if typeManager._isNullValue( value ):
            return None
        return value


class OneConnection( Condition ):

    def setParameters( self, connection=None, **kwargs ):
        Condition.setParameters( self, **kwargs )
        self.connection = checkConnection( 'connection', connection )

    def canEvaluate( self ):
        return self.connection is not None and Condition.canEvaluate( self )

    def collectConnections( self, connections ):
        if self.connection is not None:
            self.connection.collectConnections( connections )
        return connections


class TwoConnections( OneConnection ):

    def setParameters( self, connection2=None, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.connection2 = checkConnection( 'connection2', connection2 )

    def canEvaluate( self ):
        return self.connection2 is not None and OneConnection.canEvaluate( self )

    def collectConnections( self, connections ):
        OneConnection.collectConnections( self, connections )
        if self.connection2 is not None:
            self.connection2.collectConnections( connections )
        return connections


class OneOrMoreConnections( OneConnection ):
    """
    connection plus moreConnections. With ignoreNotEditable, connections
    that are not editable are left out before evaluating.
    """

    allMustBeEditable = True

    def setParameters( self, moreConnections=None, ignoreNotEditable=True, **kwargs ):
        OneConnection.setParameters( self, **kwargs )
        self.moreConnections = [ checkConnection( 'moreConnections', connection ) for connection in (moreConnections or []) ]
        self.ignoreNotEditable = ignoreNotEditable

    def getConnections( self ):
        connections = []
        if self.connection is not None:
            connections.append( self.connection )
        connections.extend( self.moreConnections )
        return connections

    def canEvaluate( self ):
        if not self.enabled or not self.getConnections():
            return False
        if self.autoDisable:
            return self._editable( self.getConnections() )
        return True

    def _editable( self, connections ):
        if self.allMustBeEditable:
            return Condition._editable( self, connections )
        return any( connection.isEditable() for connection in connections )

    def _cleanupConnections( self, connections ):
        if self.ignoreNotEditable:
            return [ connection for connection in connections if connection.isEditable() ]
        return connections

    def collectConnections( self, connections ):
        for connection in self.getConnections():
            connection.collectConnections( connections )
        return connections


class BaseCounter( OneOrMoreConnections ):
    """ counts something over all connections, minimum and maximum are inclusive """

    def setParameters( self, minimum=None, maximum=None, **kwargs ):
        OneOrMoreConnections.setParameters( self, **kwargs )
        self.minimum = minimum
        self.maximum = maximum

    def canEvaluate( self ):
        if self.minimum is None and self.maximum is None:
            return False
        return OneOrMoreConnections.canEvaluate( self )

    def _evaluateRule( self ):
        connections = self._cleanupConnections( self.getConnections() )
        if not connections:
            return CANNOT_EVALUATE

        count = sum( self._connCount( connection ) for connection in connections )
        self.count = count
        if self.minimum is not None and count < self.minimum:
            return FAILED
        if self.maximum is not None and count > self.maximum:
            return FAILED
        return SUCCESS

    def _connCount( self, connection ):
        raise NotImplementedError('%s._connCount' % self.__class__.__name__)


class BooleanLogic( Condition ):
    """
    Combines child conditions with AND or OR. Children that cannot evaluate
    are skipped, when all are skipped the result is CANNOT_EVALUATE.
    """

    def setParameters( self, operator='OR', conditions=None, **kwargs ):
        Condition.setParameters( self, **kwargs )
        self.operator = oneOf( 'operator', operator, ('OR', 'AND') )
        self.conditions = [ toCondition( condition ) for condition in (conditions or []) ]

    def __and__( self, other ):
        if self.operator == 'AND' and not self.not_:
            return self( conditions=self.conditions + [ other ] )
        return Condition.__and__( self, other )

    def __or__( self, other ):
        if self.operator == 'OR' and not self.not_:
            return self( conditions=self.conditions + [ other ] )
        return Condition.__or__( self, other )

    def canEvaluate( self ):
        return self.enabled and bool( self.conditions )

    def _evaluateRule( self ):
        evaluated = False
        for condition in self.conditions:
            if not condition.canEvaluate():
                continue
            result = condition.evaluate()
            if result == CANNOT_EVALUATE:
                continue
            evaluated = True
            if self.operator == 'AND' and result == FAILED:
                return FAILED
            if self.operator == 'OR' and result == SUCCESS:
                return SUCCESS

        if not evaluated:
            return CANNOT_EVALUATE
        return SUCCESS if self.operator == 'AND' else FAILED

    def collectConnections( self, connections ):
        for condition in self.conditions:
            condition.collectConnections( connections )
        return connections
