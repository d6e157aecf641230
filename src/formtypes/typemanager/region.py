from .core import messages
from .text import BaseString
from ..error import InputError, ConfigError

from functools import cached_property

import re
import logging
log = logging.getLogger(__name__)


def applyNumberMask( text, mask, forward=True, unused='' ):
    """
    Fills each "#" of mask with the next digit of text, other characters of
    text are skipped. Without forward both are walked from the right. Missing
    digits become unused, digits left over are kept::

        >>> applyNumberMask( '2125551234', '#(###) ###-####', False )
        '(212) 555-1234'
    """
    if not forward:
        return applyNumberMask( text[::-1], mask[::-1], True, unused )[::-1]

    digits = iter([ char for char in text if '0' <= char <= '9' ])
    result = []
    for char in mask:
        if char == '#':
            char = next( digits, unused )
        result.append( char )
    result.extend( digits )
    return ''.join( result )

def digitsOnly( text ):
    return ''.join( char for char in text if '0' <= char <= '9' )

def maskedDigits( node, text ):
    return applyNumberMask( digitsOnly( text ), node['formatMask'], False, '' )

def neutralDigits( node, text ):
    return digitsOnly( text )


@messages\
    ( region='"%(value)s" is not a valid %(type)s'
    )
class BaseRegionString( BaseString ):
    """
    Validates against the patterns of one or more regions of regionsData.

    regionsData maps a region name to a node or to the name of another
    region (an alias). region is a pipe delimited list of names, empty
    means the table's "defaultName". A node holds:

    * pattern: the regular expression
    * validChar: regular expression for a single typed character
    * caseIns: match the pattern case insensitive
    * toNeutral(node, text), toFormat(node, text): optional conversions
      to the neutral and to the display format
    * formatMask: mask used by toFormat, see applyNumberMask
    """

    regionsData = None

    def setParameters( self, region='', regionsData=None, **kwargs ):
        BaseString.setParameters( self, **kwargs )
        if not isinstance( regionsData, dict ):
            raise ConfigError('%s requires a regionsData table' % self.__class__.__name__)
        self.region = region
        self.regionsData = regionsData

        # unknown regions fail early
        self._regionNodes

    @cached_property
    def _regionNodes( self ):
        nodes = []
        self._selectRegionNodes( self.region or self.regionsData['defaultName'], nodes, 0 )
        log.debug('%s region %r resolved to %s' % (self.__class__.__name__, self.region, [ node.get('name') for node in nodes ]))
        return nodes

    def _selectRegionNodes( self, names, nodes, depth ):
        if depth > 10:
            raise ConfigError('Region aliases of %r are nested too deep' % (names,))
        for name in names.split('|'):
            name = name.strip()
            try:
                node = self.regionsData[ name ]
            except KeyError:
                raise ConfigError('Unknown region "%s"' % name)

            if isinstance( node, str ):
                self._selectRegionNodes( node, nodes, depth+1 )
            elif not any( node is known for known in nodes ):
                nodes.append( node )

    def _nodePattern( self, node ):
        return node['pattern']

    @cached_property
    def _regionPatterns( self ):
        return [
            ( node
            , re.compile( self._nodePattern( node ), re.IGNORECASE if node.get('caseIns', False) else 0 )
            ) for node in self._regionNodes ]

    def _getRegionNode( self, text ):
        if not text:
            return self._regionNodes[0]
        for (node, regex) in self._regionPatterns:
            if regex.search( text ):
                return node
        return None

    def _reviewValue( self, text ):
        if text == '':
            return text
        if self._getRegionNode( text ) is None:
            raise InputError( text, self, 'region' )
        return text

    def _nativeToString( self, text ):
        node = self._getRegionNode( text )
        if node.get('toFormat', None) is not None:
            return node['toFormat']( node, text )
        return text

    def _toNeutral( self, text ):
        node = self._getRegionNode( text )
        if node is not None and node.get('toNeutral', None) is not None:
            return node['toNeutral']( node, text )
        return text

    def toValueNeutral( self, text ):
        return self._toNeutral( self.toValue( text ) )

    def toStringNeutral( self, value ):
        return self._toNeutral( self.toValue( value ) )

    @cached_property
    def _validCharRE( self ):
        patterns = []
        for node in self._regionNodes:
            if not node.get('validChar', None):
                return None
            patterns.append( node['validChar'] )
        return re.compile( '^(?:%s)$' % '|'.join( patterns ) )


PHONE_REGIONS =\
    { 'defaultName': 'Any'
    , 'Any':\
        { 'name': 'Any'
        , 'pattern': r'(^\+?\d([\-\.]?\d){6,19}$)'
        , 'validChar': r'[0-9\+\-\.]'
        }
    , 'CountryCode':\
        { 'name': 'CountryCode'
        , 'pattern': r'(^\+(?:\d ?){6,14}\d$)'
        , 'validChar': r'[0-9\+ ]'
        }
    , 'NorthAmerica':\
        { 'name': 'NorthAmerica'
        # 1(###) ###-####, formatting characters and the lead 1 are optional
        , 'pattern': r'(^([1])?[ ]?((\([2-9]\d{2}\))|([2-9]\d{2}))?[ ]?\d{3}[ \-]?\d{4}$)'
        , 'validChar': r'[0-9\+\- \(\)]'
        , 'toNeutral': neutralDigits
        , 'toFormat': maskedDigits
        , 'formatMask': '#(###) ###-####'
        }
    , 'UnitedStates': 'NorthAmerica'
    , 'Canada': 'NorthAmerica'
    , 'France':\
        { 'name': 'France'
        , 'pattern': r'(^(0( \d|\d ))?\d\d \d\d(\d \d| \d\d )\d\d$)'
        , 'validChar': r'[0-9 ]'
        }
    , 'Japan':\
        { 'name': 'Japan'
        , 'pattern': r'(^(0\d{1,4}-|\(0\d{1,4}\) ?)?\d{1,4}-\d{4}$)'
        , 'validChar': r'[0-9\- \(\)]'
        }
    , 'Germany':\
        { 'name': 'Germany'
        , 'pattern': r'(^((\(0\d\d\) |(\(0\d{3}\) )?\d )?\d\d \d\d \d\d|\(0\d{4}\) \d \d\d-\d\d?)$)'
        , 'validChar': r'[0-9\- \(\)]'
        }
    , 'China':\
        { 'name': 'China'
        , 'pattern': r'(^(\(\d{3}\)|\d{3}-)?\d{8}$)'
        , 'validChar': r'[0-9\- \(\)]'
        }
    , 'UnitedKingdom':\
        { 'name': 'UnitedKingdom'
        , 'pattern': r'(^(((\+44\s?\d{4}|\(?0\d{4}\)?)\s?\d{3}\s?\d{3})|((\+44\s?\d{3}|\(?0\d{3}\)?)\s?\d{3}\s?\d{4})|((\+44\s?\d{2}|\(?0\d{2}\)?)\s?\d{4}\s?\d{4}))$)'
        , 'validChar': r'[0-9\+ \(\)]'
        }
    }


POSTAL_REGIONS =\
    { 'defaultName': 'UnitedStates|Canada'
    , 'UnitedStates':\
        { 'name': 'UnitedStates'
        , 'pattern': r'(^(\d{5}-\d{4}|\d{5})$)'
        , 'validChar': r'[0-9\-]'
        }
    , 'Canada':\
        { 'name': 'Canada'
        , 'pattern': r'(^[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z][ ]?\d[ABCEGHJ-NPRSTV-Z]\d$)'
        , 'caseIns': True
        , 'validChar': r'[0-9A-Za-z ]'
        }
    , 'NorthAmerica': 'UnitedStates|Canada'
    , 'UnitedKingdom':\
        { 'name': 'UnitedKingdom'
        , 'pattern': r'(^(GIR 0AA|[A-PR-UWYZ]([0-9][0-9A-HJKPS-UW]?|[A-HK-Y][0-9][0-9ABEHMNPRV-Y]?) [0-9][ABD-HJLNP-UW-Z]{2})$)'
        , 'validChar': r'[0-9A-Z ]'
        }
    , 'France':\
        { 'name': 'France'
        , 'pattern': r'(^\d{5}$)'
        , 'validChar': r'[0-9]'
        }
    , 'Japan':\
        { 'name': 'Japan'
        , 'pattern': r'(^\d{3}(-(\d{4}|\d{2}))?$)'
        , 'validChar': r'[0-9\-]'
        }
    , 'Germany':\
        { 'name': 'Germany'
        , 'pattern': r'(^\d{5}$)'
        , 'validChar': r'[0-9\-D]'
        }
    , 'China':\
        { 'name': 'China'
        , 'pattern': r'(^\d{6}$)'
        , 'validChar': r'[0-9]'
        }
    }


class PhoneNumber( BaseRegionString ):
    """ with supportsExt an extension like " #123" may follow the number """

    dataType = 'phonenumber'
    storageType = 'string'
    regionsData = PHONE_REGIONS

    EXTENSION = r'(\s?\#\d{1,10})?'

    def setParameters( self, supportsExt=False, **kwargs ):
        self.supportsExt = supportsExt
        BaseRegionString.setParameters( self, **kwargs )

    def friendlyName( self ):
        return 'phone number'

    def _nodePattern( self, node ):
        pattern = node['pattern']
        if self.supportsExt:
            pattern = pattern.replace( '$)', '%s$)' % node.get('extensionRE', self.EXTENSION) )
        return pattern


class PostalCode( BaseRegionString ):

    dataType = 'postalcode'
    storageType = 'string'
    regionsData = POSTAL_REGIONS

    def friendlyName( self ):
        return 'postal code'
