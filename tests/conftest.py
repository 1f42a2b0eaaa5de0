"""Test fixtures and helpers."""

import pytest

from pysrp.const import SRP_HASHES, SRP_VARIANTS
from pysrp.params import get_srp_context
from pysrp.verifier import create_salted_verification_key

from . import PASSWORD, SALT, USERNAME, CountingRandom
from .srp_server import Server


@pytest.fixture
def counting_random():
    return CountingRandom()


@pytest.fixture
def make_server():
    """Return a factory for a reference server holding a fresh verifier."""

    def _make_server(
        group=2048,
        algorithm=SRP_HASHES.SHA1,
        variant=SRP_VARIANTS.NIMBUS,
        username=USERNAME,
        password=PASSWORD,
        salt=SALT,
        b=None,
    ):
        salt, verifier = create_salted_verification_key(
            username,
            password,
            salt=salt,
            group=group,
            algorithm=algorithm,
            variant=variant,
        )
        ctx = get_srp_context(group, algorithm)
        return Server(ctx, variant, username, salt, verifier, b=b)

    return _make_server
