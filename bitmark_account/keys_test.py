import hashlib

import nacl.bindings
import pytest

from .dependency_test	import ACCOUNT_TESTNET, ACCOUNT_TESTNET_V1
from .errors		import InvalidSeedError, InvalidSeedLengthError, InvalidSignatureError
from .keys		import AuthKey, EncrKey, derive_keys, seed_core_v1_entropy, seed_core_v2_entropy, verify_signature
from .seed		import decode_seed
from .types		import SeedVersion


def test_auth_key():
    auth			= AuthKey( bytes( range( 32 )))
    assert auth.algorithm == 1
    assert len( auth.public_key ) == 32
    assert auth.private_key == bytes( range( 32 )) + auth.public_key

    signature			= auth.sign( b'hello' )
    assert len( signature ) == 64
    assert signature == AuthKey( bytes( range( 32 ))).sign( b'hello' )  # Ed25519 is deterministic
    auth.verify( b'hello', signature )
    verify_signature( auth.public_key, b'hello', signature )

    with pytest.raises( InvalidSignatureError ):
        auth.verify( b'hellO', signature )
    with pytest.raises( InvalidSignatureError ):
        auth.verify( b'hello', signature[:-1] + bytes([ signature[-1] ^ 1 ]))
    with pytest.raises( InvalidSignatureError ):
        auth.verify( b'hello', signature[:32] )
    with pytest.raises( InvalidSignatureError ):
        AuthKey( b'\x01' * 32 ).verify( b'hello', signature )

    with pytest.raises( ValueError ):
        AuthKey( bytes( 31 ))


def test_encr_key():
    encr			= EncrKey( b'\x07' * 32 )
    assert encr.private_key == b'\x07' * 32
    assert encr.public_key == nacl.bindings.crypto_scalarmult_base( b'\x07' * 32 )
    with pytest.raises( ValueError ):
        EncrKey( bytes( 33 ))


def test_seed_core_v2_entropy():
    _,_,core			= decode_seed( ACCOUNT_TESTNET['seed'], network='testnet' )
    auth,encr			= seed_core_v2_entropy( core )
    output			= hashlib.shake_256( core * 4 ).digest( 64 )
    assert auth == output[:32] and encr == output[32:]

    # More keys may be squeezed out; the first ones are unchanged
    keys			= seed_core_v2_entropy( core, key_count=3, key_size=16 )
    assert keys == [ output[:16], output[16:32], hashlib.shake_256( core * 4 ).digest( 48 )[32:] ]

    with pytest.raises( InvalidSeedError ):
        seed_core_v2_entropy( core[:-1] + bytes([ core[-1] | 0x01 ]))
    with pytest.raises( InvalidSeedLengthError ):
        seed_core_v2_entropy( core[:-1] )
    with pytest.raises( ValueError ):
        seed_core_v2_entropy( core, key_count=0 )


def test_seed_core_v1_entropy():
    _,_,core			= decode_seed( ACCOUNT_TESTNET_V1['seed'], network='testnet' )
    auth,encr			= seed_core_v1_entropy( core )
    assert len( auth ) == len( encr ) == 32
    assert auth != encr
    assert ( auth, encr ) == seed_core_v1_entropy( core )

    with pytest.raises( InvalidSeedLengthError ):
        seed_core_v1_entropy( core[:17] )


def test_derive_keys():
    _,_,core			= decode_seed( ACCOUNT_TESTNET['seed'], network='testnet' )
    auth,encr			= derive_keys( core, SeedVersion.V2 )
    auth_again,encr_again	= derive_keys( core, SeedVersion.V2 )
    assert auth.public_key == auth_again.public_key
    assert encr.public_key == encr_again.public_key
    assert auth.private_key[:32] == seed_core_v2_entropy( core )[0]
    assert encr.private_key == seed_core_v2_entropy( core )[1]
