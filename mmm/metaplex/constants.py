"""Metaplex Token Metadata program constants."""

# PDA seeds
METADATA_PREFIX = b"metadata"
EDITION_SUFFIX = b"edition"

# Account `Key` discriminant (first byte of every Token Metadata account)
KEY_EDITION_V1 = 1
KEY_MASTER_EDITION_V1 = 2
KEY_METADATA_V1 = 4
KEY_MASTER_EDITION_V2 = 6

# Master edition versions accepted for a tradeable NFT
VALID_MASTER_EDITION_KEYS = frozenset({KEY_MASTER_EDITION_V1, KEY_MASTER_EDITION_V2})

# Fixed part of the Metadata layout:
# [0:1]    key (u8)
# [1:33]   update_authority (Pubkey)
# [33:65]  mint (Pubkey)
# [65:..]  name, symbol, uri (u32 len + utf-8), seller_fee_basis_points (u16),
#          creators Option<Vec<Creator>>, primary_sale_happened, is_mutable,
#          then optional edition_nonce, token_standard, collection
METADATA_HEADER_SIZE = 65
CREATOR_SIZE = 34  # address (32) + verified (u8) + share (u8)
