from functools import wraps

from ..error import InputError, ConfigError
from ..registry import checkAsTypeManager
from ..util import argSpec, argumentNames, bindArguments

import logging

log = logging.getLogger(__name__)

def convertDecorator( managers, method, include, exclude, onError ):

    if include and exclude:
        raise ConfigError("'include' and 'exclude' cannot be used at the same time")

    spec = argSpec( method )
    names = argumentNames( method, skipSelf=False )

    managers = dict\
        ( ( name, checkAsTypeManager( manager ) )
            for (name, manager) in managers.items()
        )

    if spec.varkw is None:
        unknown = set( managers ) - set( names ) - set( spec.kwonlyargs )
        if unknown:
            raise ConfigError('%s has no arguments %s' % (method.__name__, ', '.join(sorted(unknown))))

    skip = ()
    if exclude:
        skip = exclude
    if include:
        skip = set(managers) - set(include)

    @wraps(method)
    def __wrap( *fargs, **fkwargs):

        (fkwargs, positional, rest) = bindArguments( method, fargs, fkwargs )

        for (name, manager) in managers.items():
            if name in skip or name not in fkwargs:
                continue
            try:
                fkwargs[ name ] = manager.toValue( fkwargs[ name ] )
            except InputError as e:
                e.argument = name
                if onError is not None:
                    return onError( e )
                raise

        resultArgs = [ fkwargs.pop(key) for key in positional ] + rest
        return method( *resultArgs, **fkwargs )

    return __wrap

def convert( include=None, exclude=None, onError=None, **managers ):
    """
    Converts arguments with TypeManagers (instances or registered names)
    before the call::

        @convert( amount='Currency', due='Date' )
        def pay( amount, due ):
            ...

        pay( '$1,200.00', '3/1/2012' )
    """
    def __createDecorator( method ):
        return convertDecorator( managers, method, include, exclude, onError )
    return __createDecorator
