import pytest

from .account_number	import (
    key_variant, account_bytes, encode_account_number, decode_account_number, account_number_network,
    extract_public_key, validate_account_number, verify,
)
from .api		import Account
from .dependency_test	import ACCOUNTS, ACCOUNT_TESTNET, ACCOUNT_LIVENET
from .encoding		import to_base58, from_base58, checksum
from .errors		import (
    AccountError, InvalidAccountNumberEncodingError, InvalidChecksumError, InvalidSignatureError, WrongNetworkError,
)
from .types		import Network


def test_key_variant():
    assert key_variant( Network.Livenet ) == 0x11
    assert key_variant( 'testnet' ) == 0x13
    assert key_variant( 'livenet', algorithm=2 ) == 0x21


@pytest.mark.parametrize( "known", ACCOUNTS )
def test_account_number( known ):
    acct			= Account.from_seed( known['seed'], network=known['network'] )
    network,algorithm,public_key = decode_account_number( known['number'] )
    assert network is Network( known['network'] )
    assert algorithm == 1
    assert public_key == acct.auth_key.public_key
    assert account_number_network( known['number'] ) is network
    assert encode_account_number( public_key, network ) == known['number']
    assert from_base58( known['number'] )[:33] == account_bytes( public_key, network )

    assert extract_public_key( known['number'], network=network ) == public_key
    validate_account_number( f" {known['number']} ", network=network )

    other			= Network.Livenet if network is Network.Testnet else Network.Testnet
    with pytest.raises( WrongNetworkError ):
        extract_public_key( known['number'], network=other )
    with pytest.raises( WrongNetworkError ):
        validate_account_number( known['number'], network=other )


@pytest.mark.parametrize( "known", [ ACCOUNT_TESTNET, ACCOUNT_LIVENET ] )
def test_account_number_bit_flips( known ):
    data			= from_base58( known['number'] )
    for i in range( len( data ) * 8 ):
        flipped			= bytearray( data )
        flipped[i // 8]	       ^= 0x80 >> i % 8
        with pytest.raises( InvalidChecksumError ):
            decode_account_number( to_base58( bytes( flipped )))


def test_account_number_invalid():
    for bad in ( "", "   ", "0OIl", "eMCcmw1SKoohNUf3LeioTFKaYNYfp2bzFYpjm3EddwxBSWYVCb0" ):
        with pytest.raises( InvalidAccountNumberEncodingError ):
            decode_account_number( bad )

    # Correctly checksummed, but of the wrong length
    short			= b'\x13' + bytes( 10 )
    with pytest.raises( InvalidAccountNumberEncodingError ):
        decode_account_number( to_base58( short + checksum( short )))
    long			= b'\x13' + bytes( 33 )
    with pytest.raises( InvalidAccountNumberEncodingError ):
        validate_account_number( to_base58( long + checksum( long )), network='testnet' )

    with pytest.raises( ValueError ):
        account_bytes( bytes( 31 ), 'livenet' )


def test_verify():
    acct			= Account.from_seed( ACCOUNT_TESTNET['seed'], network='testnet' )
    message			= b'Transfer bitmark 1234'
    signature			= acct.sign( message )
    verify( acct.account_number, message, signature, network='testnet' )

    with pytest.raises( InvalidSignatureError ):
        verify( acct.account_number, message + b'5', signature, network='testnet' )

    other			= Account.from_seed( ACCOUNT_LIVENET['seed'] )
    with pytest.raises( InvalidSignatureError ):
        verify( other.account_number, message, signature )
    with pytest.raises( WrongNetworkError ):
        verify( acct.account_number, message, signature )

    # All failures are AccountErrors
    with pytest.raises( AccountError ):
        verify( "", message, signature )
