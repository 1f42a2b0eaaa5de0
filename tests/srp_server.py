# Server side SRP used as the peer in tests

import hmac
import os

from pysrp.const import SRP_VARIANTS
from pysrp.util import bytes_to_long, long_to_bytes


# b    Secret ephemeral values (long)
# A    Public ephemeral values (long)
# Ab   Public ephemeral values (bytes)
# B    Public ephemeral values (long)
# Bb   Public ephemeral values (bytes)
# I    Username (bytes)
# s    Salt (bytes)
# v    Password verifier (long)


class Server:
    def __init__(self, ctx, variant, u, s, v, b=None):
        self.hashfunc = ctx.hashfunc
        self.N = ctx.N
        self.Nb = long_to_bytes(self.N)
        self.g = ctx.g
        self.gb = long_to_bytes(self.g)
        self.variant = variant
        self.s = s
        self.I = u.encode("utf-8") if isinstance(u, str) else u  # noqa: E741
        self.v = bytes_to_long(v)
        self.k = self._get_k()
        self.b = b or bytes_to_long(os.urandom(32))
        self.B = (self.k * self.v + pow(self.g, self.b, self.N)) % self.N
        self.Bb = long_to_bytes(self.B)

        self.Ab = None
        self.A = None
        self.u = None
        self.S = None
        self.K = None
        self.M = None
        self.HAMK = None

    def _digest(self, data):
        return self.hashfunc(data).digest()

    def _padN(self, bytestr):
        return bytestr.rjust(len(self.Nb), b"\x00")

    def _get_k(self):
        return bytes_to_long(self._digest(self.Nb + self._padN(self.gb)))

    def _get_u(self):
        if self.variant == SRP_VARIANTS.NIMBUS:
            return bytes_to_long(self._digest(self._padN(self.Ab) + self._padN(self.Bb)))
        return bytes_to_long(self._digest(self.Ab + self.Bb))

    def _get_M(self):
        Sb = long_to_bytes(self.S)
        if self.variant == SRP_VARIANTS.NIMBUS:
            return self._digest(self.Ab + self.Bb + Sb)
        hN = self._digest(self.Nb)
        hG = self._digest(self.gb)
        hGroup = bytes(hN[i] ^ hG[i] for i in range(0, len(hN)))
        hU = self._digest(self.I)
        return self._digest(hGroup + hU + self.s + self.Ab + self.Bb + self.K)

    def set_A(self, bytes_A):
        self.A = bytes_to_long(bytes_A)
        if self.A % self.N == 0:
            raise ValueError("Client public key is zero modulo N")
        self.Ab = bytes_A
        self.u = self._get_u()
        Avu = self.A * pow(self.v, self.u, self.N)
        self.S = pow(Avu, self.b, self.N)
        self.K = self._digest(long_to_bytes(self.S))
        self.M = self._get_M()
        self.HAMK = self._digest(self.Ab + self.M + self.K)

    def get_challenge(self):
        return (self.s, self.Bb)

    def verify(self, M):
        return self.HAMK if hmac.compare_digest(self.M, M) else None

    def get_session_key(self):
        return self.K
