
__messages__ =\
    { 'fail': 'Invalid value'
    , 'decimalPlaces': 'Too many decimal places'
    }

class InputError(Exception):
    """
    Raised for user supplied text or values that cannot be converted.

    Conditions and CalcItems catch it, it never signals a programming fault.
    """

    def __init__(self, value, _manager=None, _key='fail', **kwargs):
        Exception.__init__(self, value, _key)
        self.manager = _manager
        self.value = value
        self.data = {'key': _key, 'extra': kwargs}

    @property
    def key(self):
        return self.data['key']

    @key.setter
    def key(self, value):
        self.data['key'] = value

    @property
    def extra(self):
        return self.data['extra']

    @property
    def message(self):
        messages = getattr( self.manager, '__messages__', __messages__ )
        return messages.get( self.key, None )

    def __repr__(self):
        return 'InputError(%r, %s)' % (self.value, self.key)

    def __str__(self):
        message = self.message
        if message is None:
            return self.__repr__()

        extra = dict( self.extra )
        extra.setdefault( 'value', self.value )
        if self.manager is not None:
            extra.setdefault( 'type', self.manager.friendlyName() )
        try:
            return message % extra
        except (KeyError, TypeError, ValueError):
            return message


class ConfigError(Exception):
    """ Programmer misconfiguration, never caught by the evaluation engines """
