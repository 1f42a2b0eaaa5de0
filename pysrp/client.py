"""This module implements the client side of an SRP-6a authentication.

The ClientSession is the party that starts the authentication and must
prove possession of the correct password. The exchange with the server is:

1. client sends ``(username, A)`` (``start_authentication``)
2. server sends ``(salt, B)`` (``process_challenge`` returns ``M``)
3. client sends ``M``
4. server sends ``HAMK`` (``verify_session``)

A new ClientSession must be created for every attempt.
"""
import logging
from typing import NamedTuple, Optional, Tuple

from cryptography.hazmat.primitives import constant_time

from .const import (
    DEFAULT_ALGORITHM,
    DEFAULT_GROUP,
    DEFAULT_VARIANT,
    SESSION_STATES,
)
from .params import get_srp_context
from .srp import (
    calculate_A,
    calculate_HAMK,
    calculate_premaster_secret,
    calculate_session_key,
    get_formulas,
)
from .util import bytes_to_long, long_to_bytes, random_bytes as os_random_bytes, to_long

logger = logging.getLogger(__name__)


class AuthenticationFailure(Exception):
    """Base class of all errors that abort an authentication session."""


class InvalidPublicKey(AuthenticationFailure):
    """The server's public key is zero modulo N."""


class MissingChallenge(AuthenticationFailure):
    """The server's proof was given before the challenge was processed."""


class KeyProofMismatch(AuthenticationFailure):
    """The server's proof does not match the expected one."""


class InvalidSessionState(AuthenticationFailure):
    """The session cannot accept this message in its current state."""


class _Challenge(NamedTuple):
    session_key: bytes
    expected_proof: bytes


class ClientSession:
    """An SRP-6a client authentication session.

    The session key (K) becomes available only after the server proved that
    it derived the same key.
    """

    def __init__(
        self,
        username,
        password=None,
        *,
        group=DEFAULT_GROUP,
        algorithm=DEFAULT_ALGORITHM,
        variant=DEFAULT_VARIANT,
        private_key=None,
        precomputed_x=None,
        random_bytes=os_random_bytes,
    ):
        """Initialize the session and its ephemeral key pair.

        :param username: The user's username (I).
        :type username: str

        :param password: The user's password (p). May be omitted when
            ``precomputed_x`` is given.
        :type password: str

        :param group: Bit size of the group, must match the server and the
            stored verifier.
        :type group: int

        :param algorithm: Hash algorithm name, must match the server and the
            stored verifier.
        :type algorithm: str

        :param variant: ``"nimbus"`` or ``"thinbus"``, must match the server.
        :type variant: str

        :param private_key: Custom private key (a), only meant for tests.
            It MUST NOT be reused between sessions. By default a fresh key
            of ``DEFAULT_SECRET_LEN`` bytes is drawn from ``random_bytes``.
        :type private_key: bytes or int

        :param precomputed_x: Use this x instead of deriving it from the
            password.
        :type precomputed_x: bytes or int

        :param random_bytes: Source of secure random bytes.
        :type random_bytes: callable
        """
        if password is None and precomputed_x is None:
            raise ValueError("Either password or precomputed_x is required")

        self.ctx = get_srp_context(group, algorithm)
        self._formulas = get_formulas(self.ctx, variant)
        self.username = username
        self._password = password
        self._precomputed_x = (
            None if precomputed_x is None else to_long(precomputed_x)
        )

        if private_key is None:
            private_key = random_bytes(self.ctx.secret_len)
        self._a = to_long(private_key)
        self._A = calculate_A(self.ctx, self._a)
        self._Ab = long_to_bytes(self._A)

        self.state = SESSION_STATES.CREATED
        self._challenge: Optional[_Challenge] = None

    def __repr__(self):
        """Return a human readable view of the session, without secrets."""
        return (
            f"<ClientSession username={self.username!r} "
            f"variant={self.variant} state={self.state}>"
        )

    @property
    def variant(self) -> str:
        return self._formulas.variant

    @property
    def public_key(self) -> bytes:
        """The client's public key (A)."""
        return self._Ab

    @property
    def private_key(self) -> bytes:
        """The client's private key (a)."""
        return long_to_bytes(self._a)

    @property
    def authenticated(self) -> bool:
        """Whether the server proved that it derived the same session key."""
        return self.state == SESSION_STATES.VERIFIED

    @property
    def session_key(self) -> Optional[bytes]:
        """The session key (K), or ``None`` until the session is verified."""
        if not self.authenticated:
            return None
        return self._challenge.session_key

    def start_authentication(self) -> Tuple[str, bytes]:
        """Return the username (I) and public key (A) to send to the server.

        This does not change the state of the session.
        """
        logger.debug("%s: Authentication [1/3]", self.username)
        return self.username, self._Ab

    def _fail(self, exc: Exception) -> Exception:
        self.state = SESSION_STATES.FAILED
        self._challenge = None
        logger.warning("%s: Authentication failed: %s", self.username, exc)
        return exc

    def process_challenge(self, salt: bytes, server_public_key: bytes) -> bytes:
        """Process the server's challenge and return the client's proof (M).

        :param salt: The user's salt (s).
        :type salt: bytes

        :param server_public_key: The server's public key (B).
        :type server_public_key: bytes

        :raises InvalidPublicKey: if ``B % N`` is zero.
        :raises InvalidSessionState: if a challenge was already processed or
            the session failed.

        Any error moves the session to the failed state.
        """
        if self.state != SESSION_STATES.CREATED:
            raise self._fail(
                InvalidSessionState(
                    "Cannot process a challenge in state %s" % self.state
                )
            )
        logger.debug("%s: Authentication [2/3]", self.username)

        ctx = self.ctx
        try:
            salt = bytes(salt)
            server_public_key = bytes(server_public_key)
            B = bytes_to_long(server_public_key)
            if B % ctx.N == 0:
                raise InvalidPublicKey("Server public key is zero modulo N")

            u = self._formulas.compute_u(self._Ab, server_public_key)
            if self._precomputed_x is not None:
                x = self._precomputed_x
            else:
                x = self._formulas.compute_x(salt, self.username, self._password)
            S = calculate_premaster_secret(ctx, B, self._a, u, x)
            K = calculate_session_key(ctx, S)
            M = self._formulas.compute_M(
                self.username,
                salt,
                self._Ab,
                long_to_bytes(B),
                long_to_bytes(S),
                K,
            )
        except Exception as exc:
            raise self._fail(exc)

        self._challenge = _Challenge(K, calculate_HAMK(ctx, self._Ab, M, K))
        self.state = SESSION_STATES.CHALLENGED
        return M

    def verify_session(self, server_proof: bytes) -> None:
        """Verify the server's proof (HAMK) of the session key.

        After this succeeds ``session_key`` is available.

        :raises MissingChallenge: if no challenge was processed yet.
        :raises KeyProofMismatch: if the proof does not match ours.
        :raises InvalidSessionState: if the session is already verified or
            failed.
        """
        if self._challenge is None:
            if self.state == SESSION_STATES.FAILED:
                raise InvalidSessionState("The session has failed")
            raise self._fail(MissingChallenge("No challenge was processed"))
        if self.state != SESSION_STATES.CHALLENGED:
            raise self._fail(
                InvalidSessionState(
                    "Cannot verify the session in state %s" % self.state
                )
            )
        logger.debug("%s: Authentication [3/3]", self.username)

        try:
            server_proof = bytes(server_proof)
        except (TypeError, ValueError) as exc:
            raise self._fail(exc)
        if not constant_time.bytes_eq(server_proof, self._challenge.expected_proof):
            raise self._fail(KeyProofMismatch("Server key proof does not match"))

        self.state = SESSION_STATES.VERIFIED
        logger.debug("%s: Authenticated", self.username)
