import hashlib


def sha3(hex_str: str):
    byte_str = bytes.fromhex(hex_str)

    hasher = hashlib.sha3_256()
    hasher.update(byte_str)

    hashed_bytes = hasher.digest()

    return hashed_bytes.hex()


def selector(signature: str) -> bytes:
    # First four bytes of the SHA3-256 digest of the function signature
    return bytes.fromhex(sha3(signature.encode().hex()))[:4]
