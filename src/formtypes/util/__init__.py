import inspect

def argSpec( function ):
    function = getattr( function, '__func__', function )
    spec = getattr( function, '__argspec__', None )
    if spec is None:
        function.__argspec__ = spec = inspect.getfullargspec( function )
    return spec

def argumentNames( function, skipSelf=True ):
    names = argSpec( function ).args
    if skipSelf and names[:1] == ['self']:
        return names[1:]
    return names

def optionNames( klass ):
    """
    The options of a Parameterized class: the setParameters arguments of
    every class in the mro, most derived class first.
    """
    names = []
    for base in klass.__mro__:
        setParameters = base.__dict__.get( 'setParameters', None )
        if setParameters is None:
            continue
        for name in argumentNames( setParameters ):
            if name not in names:
                names.append( name )
    return names

def bindArguments( function, args, kwargs ):
    """
    Moves the positional arguments of a call to function into a copy of
    kwargs. Returns that copy, the names that were given positionally and
    the positional arguments left over for *args.
    """
    names = argumentNames( function, skipSelf=False )
    bound = dict( kwargs )
    for (name, value) in zip( names, args ):
        if name in bound:
            raise TypeError('%s() got multiple values for argument %s' % (function.__name__, name))
        bound[ name ] = value
    positional = names[ :len(args) ]
    return bound, positional, list( args[ len(positional): ] )
