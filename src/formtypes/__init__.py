from .error import InputError, ConfigError
from .culture import CultureInfo, registerCulture, getCulture, DEFAULT, NEUTRAL
from .typemanager import *
from .typemanager import aliases as __aliases__
from .registry import define, create, checkAsTypeManager, typeManagers, conditions, calcItems
from .connection import Connection, Value, Field
from . import condition
from . import calcitem
from .adapter.native import convert

__version__ = '0.1.0'
