# 64-bit values need at most ceil(64 / 7) bytes
VARINT_MAX_BYTES = 10

COLLECTION_MAX_DEPTH = 32
