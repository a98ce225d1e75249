import contextlib

import nacl.secret

from mnemonic		import Mnemonic

from .defaults		import SEED_NONCE, AUTH_SEED_COUNT, KEY_SIZE, WORD_COUNT

#
# Known Accounts, w/ their Seeds, Recovery Phrases (english, chinese_traditional) and Account Numbers
#
ACCOUNT_TESTNET			= dict(
    seed	= "9J87CAsHdFdoEu6N1unZk3sqhVBkVL8Z8",
    english	= "name gaze apart lamp lift zone believe steak session laptop crowd hill argue",
    english_12	= "name gaze apart lamp lift zone believe steak session laptop crowd hill",
    chinese_12	= "箱 阻 起 歸 徹 矮 問 栽 瓜 鼓 支 樂",
    number	= "eMCcmw1SKoohNUf3LeioTFKaYNYfp2bzFYpjm3EddwxBSWYVCb",
    network	= 'testnet',
    version	= 'v2',
)

ACCOUNT_LIVENET			= dict(
    seed	= "9J87GaPq7FR9Uacdi3FUoWpP6LbEpo1Ax",
    english_12	= "surprise mesh walk inject height join sound minor margin over jewel venue",
    chinese_12	= "薯 托 劍 景 擔 額 牢 痛 亦 軟 凱 誼",
    number	= "aiKFA9dKkNHPys3nSZrLTPusoocPqXSFp5EexsgQ1hbYUrJVne",
    network	= 'livenet',
    version	= 'v2',
)

ACCOUNT_TESTNET_V1		= dict(
    seed	= "5XEECt18HGBGNET1PpxLhy5CsCLG9jnmM6Q8QGF4U2yGb1DABXZsVeD",
    english	= "accident syrup inquiry you clutch liquid fame upset joke glow best school repeat birth library combine access camera organ trial crazy jeans lizard science",
    number	= "ec6yMcJATX6gjNwvqp8rbc4jNEasoUgbfBBGGyV5NvoJ54NXva",
    network	= 'testnet',
    version	= 'v1',
)

ACCOUNT_LIVENET_V1		= dict(
    seed	= "5XEECqWqA47qWg86DR5HJ29HhbVqwigHUAhgiBMqFSBycbiwnbY639s",
    english	= "ability panel leave spike mixture token voice certain today market grief crater cruise smart camera palm wheat rib swamp labor bid rifle piano glass",
    number	= "bDnC8nCaupb1AQtNjBoLVrGmobdALpBewkyYRG7kk2euMG93Bf",
    network	= 'livenet',
    version	= 'v1',
)

ACCOUNT_TESTNET_V1_CHINESE	= dict(
    chinese	= "為 廠 磨 燕 華 已 忍 罵 稍 桌 搜 事 伴 爐 調 拜 輝 荒 巡 只 僚 空 之 填",
    number	= "fBHRe9f7g3vQgpyq8NGar3QVMfCSPNfDeKPYF5Maef6gCYKsP4",
    network	= 'testnet',
    version	= 'v1',
)

ACCOUNTS			= ( ACCOUNT_TESTNET, ACCOUNT_LIVENET, ACCOUNT_TESTNET_V1, ACCOUNT_LIVENET_V1 )


class substitute( contextlib.ContextDecorator ):
    """Replace the secure random source during testing, to get determinism in new Accounts."""
    def __init__( self, thing, attribute, value ):
        self.thing		= thing
        self.attribute		= attribute
        self.value		= value
        self.saved		= None

    def __enter__( self ):
        self.saved		= getattr( self.thing, self.attribute )
        setattr( self.thing, self.attribute, self.value )

    def __exit__( self, *exc ):
        setattr( self.thing, self.attribute, self.saved )


def nonrandom_bytes( n ):
    return b'\0' * n


def ones_bytes( n ):
    return b'\xff' * n


def test_mnemonic_wordlists():
    """The Recovery Phrase dictionaries are the standard BIP-39 lists shipped with python-mnemonic."""
    english			= Mnemonic( "english" ).wordlist
    assert len( english ) == WORD_COUNT
    assert english[0] == "abandon" and english[-1] == "zoo"
    chinese			= Mnemonic( "chinese_traditional" ).wordlist
    assert len( chinese ) == WORD_COUNT
    assert chinese[0] == "的"


def test_secretbox_seal():
    """Sealing a 16-byte counter yields the 16-byte authenticator followed by the 16-byte ciphertext."""
    box				= nacl.secret.SecretBox( b'\x01' * KEY_SIZE )
    sealed			= box.encrypt( AUTH_SEED_COUNT, SEED_NONCE )
    assert sealed.nonce == SEED_NONCE
    assert len( sealed.ciphertext ) == KEY_SIZE
    assert box.decrypt( sealed.ciphertext, SEED_NONCE ) == AUTH_SEED_COUNT
