import pytest

from formtypes import InputError, ConfigError, String, EmailAddress, Url, CreditCardNumber, Boolean, create
from formtypes.typemanager import luhn


class TestString:

    def test_values( self ):
        assert String().toValue('abc') == 'abc'
        assert String().toValue('') == ''
        assert String().toValue( None ) == ''
        assert String().toString('abc') == 'abc'

    def test_only_text( self ):
        with pytest.raises( ConfigError ):
            String().toValue( 12 )

    def test_compare( self ):
        assert String().compare( 'a', 'B' ) == 1
        assert String( caseIns=True ).compare( 'a', 'B' ) == -1
        assert create('String.caseins').compare( 'abc', 'ABC' ) == 0
        with pytest.raises( InputError ):
            String().compare( '', 'a' )


class TestEmailAddress:

    def test_single( self, errorKey ):
        assert EmailAddress().toValue('a@b.com') == 'a@b.com'
        assert EmailAddress().toValue("o'hara.x@mail.example.org") == "o'hara.x@mail.example.org"
        assert errorKey( EmailAddress().toValue, 'not an email' ) == 'pattern'
        assert errorKey( EmailAddress().toValue, 'a@b.com; c@d.org' ) == 'pattern'

    def test_multiple( self, errorKey ):
        manager = EmailAddress( multiple=True )
        assert manager.toValue('a@b.com; c@d.org') == 'a@b.com; c@d.org'
        assert manager.toValue('a@b.com;c@d.org') == 'a@b.com;c@d.org'
        assert errorKey( manager.toValue, 'a@b.com, c@d.org' ) == 'pattern'

    def test_delimiter( self ):
        assert EmailAddress( multiple=True, delimiterRE=',[ ]?' ).toValue('a@b.com, c@d.org') == 'a@b.com, c@d.org'

    def test_alternative_pattern( self, errorKey ):
        manager = EmailAddress( altREPattern=r'^\w+@example\.com$' )
        assert manager.toValue('joe@example.com') == 'joe@example.com'
        assert errorKey( manager.toValue, 'joe@b.com' ) == 'pattern'

    def test_message( self ):
        with pytest.raises( InputError ) as info:
            EmailAddress().toValue('nope')
        assert str( info.value ) == '"nope" is not a valid email address'


class TestUrl:

    def test_default( self, errorKey ):
        assert Url().toValue('http://www.example.com/path/file.html') == 'http://www.example.com/path/file.html'
        assert Url().toValue('https://example.org') == 'https://example.org'
        assert errorKey( Url().toValue, 'www.example.com' ) == 'pattern'
        assert errorKey( Url().toValue, 'ftp://files.example.com' ) == 'pattern'

    def test_options( self, errorKey ):
        assert Url( requireUriScheme=False ).toValue('www.example.com') == 'www.example.com'
        assert create('Url.FTP').toValue('ftp://files.example.com') == 'ftp://files.example.com'
        assert errorKey( Url().toValue, 'http://example.com:8080' ) == 'pattern'
        assert Url( supportsPort=True ).toValue('http://example.com:8080') == 'http://example.com:8080'
        assert errorKey( Url( supportsPath=False ).toValue, 'http://example.com/a/b' ) == 'pattern'

    def test_ip( self, errorKey ):
        assert errorKey( Url().toValue, 'http://192.168.1.1' ) == 'pattern'
        assert Url( supportsIP=True ).toValue('http://192.168.1.1') == 'http://192.168.1.1'


class TestCreditCardNumber:

    def test_luhn( self, errorKey ):
        assert luhn('4111111111111111')
        assert not luhn('4111111111111112')
        assert CreditCardNumber().toValue('4111111111111111') == '4111111111111111'
        assert errorKey( CreditCardNumber().toValue, '4111111111111112' ) == 'luhn'

    def test_separators( self, errorKey ):
        assert CreditCardNumber( allowSeps=' ' ).toValue('4111 1111 1111 1111') == '4111111111111111'
        assert errorKey( CreditCardNumber().toValue, '4111 1111 1111 1111' ) == 'char'
        with pytest.raises( ConfigError ):
            CreditCardNumber( allowSeps='--' )

    def test_brands( self, errorKey ):
        assert errorKey( CreditCardNumber().toValue, '123' ) == 'digits'
        assert errorKey( CreditCardNumber().toValue, '0000000000' ) == 'brand'
        assert create('CreditCardNumber.AllBrands').toValue('0000000000') == '0000000000'
        assert create('CreditCardNumber.AllBrands').brands is None

    def test_valid_chars( self ):
        assert CreditCardNumber().isValidChar('4')
        assert not CreditCardNumber().isValidChar('-')
        assert CreditCardNumber( allowSeps='-' ).isValidChar('-')


class TestBoolean:

    def test_text( self, errorKey ):
        manager = Boolean()
        assert manager.toValue('true') is True
        assert manager.toValue('FALSE') is False
        assert manager.toValue('1') is True
        assert manager.toValue('0') is False
        assert errorKey( manager.toValue, 'maybe' ) == 'format'

    def test_empty( self ):
        assert Boolean().toValue('') is False
        assert Boolean( emptyStrFalse=False ).toValue('') is None

    def test_numbers( self, errorKey ):
        assert Boolean().toValue( 1 ) is True
        assert Boolean().toValue( 0.0 ) is False
        assert errorKey( Boolean().toValue, 5 ) == 'format'
        assert Boolean( numTrue=True ).toValue( 5 ) is True
        with pytest.raises( ConfigError ):
            Boolean( numTrue=5 )

    def test_format( self ):
        assert Boolean().toString( True ) == 'true'
        assert Boolean().toString( False ) == 'false'
        yesNo = Boolean( trueStr='yes', falseStr='no', reTrue='^yes$', reFalse='^no$' )
        assert yesNo.toString( False ) == 'no'
        assert yesNo.toValue('Yes') is True
        assert yesNo.toStringNeutral( False ) == 'false'
        assert yesNo.toValueNeutral('true') is True

    def test_number_and_chars( self ):
        assert Boolean().toNumber( True ) == 1
        assert Boolean().toNumber('false') == 0
        assert not Boolean().isValidChar('t')
        with pytest.raises( ConfigError ):
            Boolean().isValidChar('')
