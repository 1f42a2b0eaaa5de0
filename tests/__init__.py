import hashlib


class CountingRandom:
    """Deterministic stand-in for ``os.urandom``.

    Successive calls return successive blocks of a SHA-256 counter stream.
    """

    def __init__(self, seed=b"pysrp"):
        self.seed = seed
        self.counter = 0
        self.calls = []

    def __call__(self, count):
        self.calls.append(count)
        result = b""
        while len(result) < count:
            block = self.counter.to_bytes(8, byteorder="big")
            result += hashlib.sha256(self.seed + block).digest()
            self.counter += 1
        return result[:count]


USERNAME = "alice"
PASSWORD = "password123"
SALT = bytes.fromhex("BEB25379D1A8581EB5A727673A2441EE")
