"""Creation of the salted verification key a server stores for a user.

Only the salt and the verifier need to be kept by the server, never the
plain-text password. The verifier must still be kept private, since it can
be used to brute-force the password.
"""
import logging
from typing import Tuple

from .const import (
    DEFAULT_ALGORITHM,
    DEFAULT_GROUP,
    DEFAULT_VARIANT,
)
from .params import get_srp_context
from .srp import calculate_v, get_formulas
from .util import long_to_bytes, random_bytes as os_random_bytes, to_long

logger = logging.getLogger(__name__)


def _get_salt(salt, random_bytes, salt_len):
    if salt is None:
        return random_bytes(salt_len)
    return bytes(salt)


def create_salted_verification_key(
    username,
    password,
    salt=None,
    group=DEFAULT_GROUP,
    algorithm=DEFAULT_ALGORITHM,
    variant=DEFAULT_VARIANT,
    random_bytes=os_random_bytes,
) -> Tuple[bytes, bytes]:
    """Create the salt and verifier for a user's password.

    :param username: The user's username.
    :type username: str

    :param password: The user's password.
    :type password: str

    :param salt: Optional salt. When given, it should be at least 16 random
        bytes. By default 16 bytes are drawn from ``random_bytes``.
    :type salt: bytes

    :param group: Bit size of the group, must match the server.
    :type group: int

    :param algorithm: Hash algorithm name, must match the server.
    :type algorithm: str

    :param variant: ``"nimbus"`` or ``"thinbus"``, selects how ``x`` is derived.
    :type variant: str

    :param random_bytes: Source of secure random bytes.
    :type random_bytes: callable

    :return: The salt (s) and the serialized verifier (v).
    :rtype: tuple
    """
    ctx = get_srp_context(group, algorithm)
    formulas = get_formulas(ctx, variant)
    salt = _get_salt(salt, random_bytes, ctx.salt_len)
    x = formulas.compute_x(salt, username, password)
    logger.debug("Creating %s verification key for %r", variant, username)
    return salt, long_to_bytes(calculate_v(ctx, x))


def create_verification_key_from_x(
    x,
    salt=None,
    group=DEFAULT_GROUP,
    random_bytes=os_random_bytes,
) -> Tuple[bytes, bytes]:
    """Create the salt and verifier from a precomputed ``x``.

    Useful when ``x`` was derived by a slower, caller controlled key
    derivation function rather than by the variant formulas.

    :param x: The precomputed private key, as ``int`` or big-endian ``bytes``.
    :type x: int or bytes

    :return: The salt (s) and the serialized verifier (v).
    :rtype: tuple
    """
    # The hash algorithm does not take part in v = g^x % N.
    ctx = get_srp_context(group)
    salt = _get_salt(salt, random_bytes, ctx.salt_len)
    logger.debug("Creating verification key from a precomputed x")
    return salt, long_to_bytes(calculate_v(ctx, to_long(x)))
