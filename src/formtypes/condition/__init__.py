from .core import Condition, OneConnection, TwoConnections, OneOrMoreConnections, BaseCounter, BooleanLogic,\
    toCondition, compareWith, OPERATORS, SUCCESS, FAILED, CANNOT_EVALUATE
from .compare import Range, CompareToValue, CompareTwoElements, Difference, DataTypeCheck
from .count import Required, CharacterCount, WordCount, CountSelections, DuplicateEntry
from .misc import RegExp, SelectedIndex, RequiredIndex, UserFunction
from ..registry import conditions as _registry

for _condition in\
    ( Range, CompareToValue, CompareTwoElements, Difference, DataTypeCheck
    , Required, CharacterCount, WordCount, CountSelections, DuplicateEntry
    , RegExp, SelectedIndex, RequiredIndex, UserFunction, BooleanLogic
    ):
    _registry.define( _condition.__name__, _condition )


def evaluate( spec ):
    """ evaluates a Condition or its dict description once """
    return toCondition( spec ).evaluate()

def isValid( spec ):
    return toCondition( spec ).isValid()
