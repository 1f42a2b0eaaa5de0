# SRP-6a derivation functions

# All functions are pure and deterministic; both peers must reach the same
# values independently.
#
# A    Public ephemeral value of the client (bytes unless noted)
# B    Public ephemeral value of the server
# a    Secret ephemeral value of the client (long)
# g    A generator modulo N (long)
# I    Username (str or bytes)
# k    Multiplier parameter (long)
# K    Session key (bytes)
# M    Client proof (bytes)
# N    Large safe prime (long)
# p    Cleartext password (str or bytes)
# S    Premaster secret (long)
# s    Salt (bytes)
# u    Random scrambling parameter (long)
# v    Password verifier (long)
# x    Private key derived from the password (long)

from .const import SRP_VARIANTS
from .params import SRPContext
from .util import bytes_to_long, long_to_bytes, minimal_hex, to_bytes


def digest(ctx: SRPContext, *parts: bytes) -> bytes:
    """Hash the concatenation of ``parts`` with the context's hash function."""
    hash_obj = ctx.hashfunc()
    for part in parts:
        hash_obj.update(part)
    return hash_obj.digest()


def _hexdigest_int16(ctx: SRPContext, *parts: bytes) -> int:
    hash_obj = ctx.hashfunc()
    for part in parts:
        hash_obj.update(part)
    return int(hash_obj.hexdigest(), 16)


def pad(data: bytes, length: int) -> bytes:
    """Left-pad ``data`` with zero bytes up to ``length``.

    :raises ValueError: if ``data`` is already longer than ``length``.
    """
    if len(data) > length:
        raise ValueError("Negative padding not possible")
    return data.rjust(length, b"\x00")


def calculate_k(ctx: SRPContext) -> int:
    """k = H(N | PAD(g))"""
    return bytes_to_long(digest(ctx, ctx.N_bytes, pad(ctx.g_bytes, ctx.pad_length)))


def calculate_u_nimbus(ctx: SRPContext, A: bytes, B: bytes) -> int:
    """u = H(PAD(A) | PAD(B))"""
    size = ctx.pad_length
    return bytes_to_long(digest(ctx, pad(A, size), pad(B, size)))


def calculate_u_thinbus(ctx: SRPContext, A: bytes, B: bytes) -> int:
    """u = H(A | B)"""
    return bytes_to_long(digest(ctx, A, B))


def calculate_x_nimbus(ctx: SRPContext, salt: bytes, password) -> int:
    """x = H(s | H(p)), read back from the hex digest."""
    return _hexdigest_int16(ctx, salt, digest(ctx, to_bytes(password)))


def calculate_x_thinbus(ctx: SRPContext, salt: bytes, username, password) -> int:
    """x = H(HEX(s) | HEX(H(I | ":" | p))) % N

    The hex strings are upper case and skip leading zero bytes, which is
    what the thinbus JavaScript peers produce.
    """
    inner = digest(ctx, to_bytes(username) + b":" + to_bytes(password))
    text = (minimal_hex(salt) + minimal_hex(inner)).upper()
    return bytes_to_long(digest(ctx, text.encode("utf-8"))) % ctx.N


def calculate_v(ctx: SRPContext, x: int) -> int:
    """v = g^x % N"""
    return pow(ctx.g, x, ctx.N)


def calculate_A(ctx: SRPContext, a: int) -> int:
    """A = g^a % N"""
    return pow(ctx.g, a, ctx.N)


def calculate_premaster_secret(ctx: SRPContext, B: int, a: int, u: int, x: int) -> int:
    """S = (B - k * g^x) ^ (a + u * x) % N

    ``B - k * v`` may be negative, so ``N`` is added first. ``k * v % N`` is
    always below ``N`` so the sum stays non-negative.
    """
    N = ctx.N
    kv = calculate_k(ctx) * calculate_v(ctx, x) % N
    return pow(B + N - kv, a + u * x, N)


def calculate_session_key(ctx: SRPContext, S: int) -> bytes:
    """K = H(S)"""
    return digest(ctx, long_to_bytes(S))


def calculate_M_nimbus(ctx: SRPContext, A: bytes, B: bytes, S: bytes) -> bytes:
    """M = H(A | B | S)"""
    return digest(ctx, A, B, S)


def calculate_M_thinbus(
    ctx: SRPContext, username, salt: bytes, A: bytes, B: bytes, K: bytes
) -> bytes:
    """M = H(H(N) XOR H(g) | H(I) | s | A | B | K)"""
    hN = digest(ctx, ctx.N_bytes)
    hG = digest(ctx, ctx.g_bytes)
    hGroup = bytes(hN[i] ^ hG[i] for i in range(0, len(hN)))
    hU = digest(ctx, to_bytes(username))
    return digest(ctx, hGroup, hU, salt, A, B, K)


def calculate_HAMK(ctx: SRPContext, A: bytes, M: bytes, K: bytes) -> bytes:
    """HAMK = H(A | M | K)"""
    return digest(ctx, A, M, K)


class NimbusFormulas:
    """Formulas of the nimbus (primary) variant."""

    variant = SRP_VARIANTS.NIMBUS

    def __init__(self, ctx: SRPContext) -> None:
        self.ctx = ctx

    def compute_u(self, A: bytes, B: bytes) -> int:
        return calculate_u_nimbus(self.ctx, A, B)

    def compute_x(self, salt: bytes, username, password) -> int:
        # nimbus does not bind the username into x
        return calculate_x_nimbus(self.ctx, salt, password)

    def compute_M(self, username, salt, A: bytes, B: bytes, S: bytes, K: bytes) -> bytes:
        return calculate_M_nimbus(self.ctx, A, B, S)


class ThinbusFormulas:
    """Formulas of the thinbus (alternate) variant."""

    variant = SRP_VARIANTS.THINBUS

    def __init__(self, ctx: SRPContext) -> None:
        self.ctx = ctx

    def compute_u(self, A: bytes, B: bytes) -> int:
        return calculate_u_thinbus(self.ctx, A, B)

    def compute_x(self, salt: bytes, username, password) -> int:
        return calculate_x_thinbus(self.ctx, salt, username, password)

    def compute_M(self, username, salt, A: bytes, B: bytes, S: bytes, K: bytes) -> bytes:
        return calculate_M_thinbus(self.ctx, username, salt, A, B, K)


FORMULAS = {
    SRP_VARIANTS.NIMBUS: NimbusFormulas,
    SRP_VARIANTS.THINBUS: ThinbusFormulas,
}


def get_formulas(ctx: SRPContext, variant):
    """Return the formula set for ``variant``, bound to ``ctx``.

    :raises ValueError: for an unknown variant.
    """
    try:
        formulas_cls = FORMULAS[variant]
    except (KeyError, TypeError):
        raise ValueError(
            "Unsupported SRP variant %r, expected one of %s"
            % (variant, sorted(FORMULAS))
        ) from None
    return formulas_cls(ctx)
