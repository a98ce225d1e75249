import hashlib

import pytest

from .dependency_test	import ACCOUNT_TESTNET, ACCOUNT_LIVENET, ACCOUNT_TESTNET_V1, ACCOUNT_LIVENET_V1
from .dictionary	import Dictionary
from .errors		import (
    InvalidRecoveryPhraseError, InvalidRecoveryPhraseChecksumError, InvalidWordError, InvalidChecksumError,
)
from .phrase		import produce_phrase, recover_phrase, words_of
from .seed		import decode_seed
from .types		import PhraseFormat


def core_of( known ):
    _,_,core			= decode_seed( known['seed'], network=known['network'] )
    return core


def test_words_of():
    assert words_of( "  Name\tgaze\n APART  " ) == [ "name", "gaze", "apart" ]
    assert words_of( [ "Name", " gaze", "" ] ) == [ "name", "gaze" ]


@pytest.mark.parametrize( "known", [ ACCOUNT_TESTNET, ACCOUNT_LIVENET ] )
def test_phrase_v2( known ):
    core			= core_of( known )
    assert len( core ) == 17 and core[-1] & 0x0F == 0

    assert " ".join( produce_phrase( core, PhraseFormat.W12 )) == known['english_12']
    assert " ".join( produce_phrase( core, PhraseFormat.W12, language='chinese_traditional' )) == known['chinese_12']
    assert recover_phrase( known['english_12'] ) == ( PhraseFormat.W12, core )
    assert recover_phrase( known['chinese_12'], language='zh-TW' ) == ( PhraseFormat.W12, core )

    # The 13-word phrase begins w/ the 12-word phrase, and recovers the same core
    thirteen			= produce_phrase( core, PhraseFormat.W13 )
    assert len( thirteen ) == 13
    assert " ".join( thirteen[:12] ) == known['english_12']
    assert recover_phrase( thirteen ) == ( PhraseFormat.W13, core )
    if 'english' in known:
        assert " ".join( thirteen ) == known['english']

    chinese			= produce_phrase( core, PhraseFormat.W13, language='chinese_traditional' )
    assert " ".join( chinese[:12] ) == known['chinese_12']
    assert recover_phrase( chinese, language='chinese_traditional' ) == ( PhraseFormat.W13, core )


@pytest.mark.parametrize( "known", [ ACCOUNT_TESTNET_V1, ACCOUNT_LIVENET_V1 ] )
def test_phrase_v1( known ):
    core			= core_of( known )
    prefix			= b'\x01' if known['network'] == 'testnet' else b'\x00'
    assert " ".join( produce_phrase( prefix + core, PhraseFormat.W24 )) == known['english']
    assert recover_phrase( known['english'] ) == ( PhraseFormat.W24, prefix + core )
    assert recover_phrase( known['english'].upper() ) == ( PhraseFormat.W24, prefix + core )


def test_phrase_thirteen_checksum():
    english			= Dictionary.of( 'english' )
    words			= ACCOUNT_TESTNET['english'].split()
    last			= english.index( words[-1] )
    # The low 7 bits of the 13th word are check bits; altering any one must be detected
    for bit in range( 7 ):
        altered			= words[:-1] + [ english.word( last ^ 1 << bit ) ]
        with pytest.raises( InvalidRecoveryPhraseChecksumError ):
            recover_phrase( altered )
    with pytest.raises( InvalidChecksumError ):
        recover_phrase( words[:-1] + [ english.word( last ^ 1 ) ] )

    # The check bits are the top 7 bits of the SHA-256 of the core
    core			= core_of( ACCOUNT_TESTNET )
    assert last & 0x7F == hashlib.sha256( core ).digest()[0] >> 1


def test_phrase_invalid():
    words			= ACCOUNT_TESTNET['english_12'].split()
    for count in ( 0, 1, 11, 14, 23, 25 ):
        with pytest.raises( InvalidRecoveryPhraseError ):
            recover_phrase( ( words * 3 )[:count] )

    with pytest.raises( InvalidWordError ) as exc:
        recover_phrase( words[:5] + [ "bitmark" ] + words[6:] )
    assert exc.value.index == 5 and exc.value.word == "bitmark"
    assert "6th" in str( exc.value )
    # An InvalidWordError is an InvalidRecoveryPhraseError
    with pytest.raises( InvalidRecoveryPhraseError ):
        recover_phrase( words[:-1] + [ "bitmark" ] )

    # The words must be from the specified language
    with pytest.raises( InvalidWordError ):
        recover_phrase( ACCOUNT_TESTNET['chinese_12'] )
    with pytest.raises( InvalidWordError ):
        recover_phrase( words, language='chinese_traditional' )


def test_produce_invalid():
    core			= core_of( ACCOUNT_TESTNET )
    with pytest.raises( ValueError ):
        produce_phrase( core[:-1], PhraseFormat.W13 )
    with pytest.raises( ValueError ):
        produce_phrase( core[:-1] + b'\x01', PhraseFormat.W12 )
    with pytest.raises( ValueError ):
        produce_phrase( core, PhraseFormat.W24 )
