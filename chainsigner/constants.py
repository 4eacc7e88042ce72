"""Constants for chainsigner."""

from substrateinterface import KeypairType

__all__ = [
    "DEV_PHRASE",
    "DEFAULT_SS58_FORMAT",
    "DEFAULT_HD_COUNT",
    "DEFAULT_HD_INITIAL_INDEX",
    "KEYPAIR_TYPE",
    "MNEMONIC_LANGUAGE",
    "RAW_SEED_LENGTH",
    "PAYLOAD_HASH_THRESHOLD",
    "SR25519_SIGNATURE_LENGTH",
    "SR25519_SIGNATURE_TYPE",
    "SUPPORTED_PAYLOAD_VERSIONS",
]

# Substrate development phrase; "//Alice" expands to DEV_PHRASE + "//Alice"
DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"

# Generic Substrate address prefix
DEFAULT_SS58_FORMAT = 42

# HD account expansion defaults
DEFAULT_HD_INITIAL_INDEX = 0
DEFAULT_HD_COUNT = 20

# Key scheme of every pair in the keyring
KEYPAIR_TYPE = KeypairType.SR25519
MNEMONIC_LANGUAGE = "en"

# A 0x-hex phrase is used directly as the mini secret
RAW_SEED_LENGTH = 32

# Encoded payloads longer than this are hashed before signing
PAYLOAD_HASH_THRESHOLD = 256

# MultiSignature enum index for Sr25519
SR25519_SIGNATURE_LENGTH = 64
SR25519_SIGNATURE_TYPE = 0x01

SUPPORTED_PAYLOAD_VERSIONS = (4,)
