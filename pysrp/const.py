"""This module contains constants used by other modules."""
MAJOR_VERSION = 1
MINOR_VERSION = 0
PATCH_VERSION = 0
__short_version__ = f"{MAJOR_VERSION}.{MINOR_VERSION}"
__version__ = f"{__short_version__}.{PATCH_VERSION}"
REQUIRED_PYTHON_VER = (3, 7)


# ### Protocol variants ###
class SRP_VARIANTS:
    NIMBUS = "nimbus"
    THINBUS = "thinbus"

    PRIMARY = NIMBUS
    ALTERNATE = THINBUS


# ### Hash algorithms ###
class SRP_HASHES:
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"


# ### Client session states ###
class SESSION_STATES:
    CREATED = "created"
    CHALLENGED = "challenged"
    VERIFIED = "verified"
    FAILED = "failed"


# ### Defaults ###
DEFAULT_GROUP = 2048
DEFAULT_ALGORITHM = SRP_HASHES.SHA1
DEFAULT_VARIANT = SRP_VARIANTS.NIMBUS
DEFAULT_SALT_LEN = 16  # bytes
DEFAULT_SECRET_LEN = 32  # bytes, length of the private exponent
