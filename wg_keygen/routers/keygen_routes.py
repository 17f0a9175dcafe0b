import logging

from fastapi import APIRouter, HTTPException, status

from ..config.settings import settings
from ..exceptions import EntropyUnavailable, WireGuardKeyError
from ..schemas import (
    DerivePublicKeyRequest,
    ErrorDetail,
    KeyPairResponse,
    PrivateKeyResponse,
    PublicKeyResponse,
    ValidatePublicKeyRequest,
    ValidatePublicKeyResponse,
    VerifyKeyPairRequest,
    VerifyKeyPairResponse,
)
from ..utils.crypto_utils import (
    derive_public_key,
    generate_private_key,
    generate_wireguard_keypair,
    validate_public_key,
    verify_keypair,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wireguard", tags=["WireGuard Keys"])

def _key_error(e: WireGuardKeyError) -> HTTPException:
    """Translate a key error into the HTTP error returned to the client."""
    if isinstance(e, EntropyUnavailable):
        logger.error(f"Key generation failed: {e}")
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        logger.info(f"Rejected key input ({e.code}): {e}")
        status_code = status.HTTP_400_BAD_REQUEST

    return HTTPException(
        status_code=status_code,
        detail=ErrorDetail(code=e.code, message=str(e)).model_dump()
    )

@router.post("/keypair", response_model=KeyPairResponse, response_model_exclude_none=True)
def create_keypair():
    """Generate a new WireGuard key pair."""
    try:
        keypair = generate_wireguard_keypair()
    except WireGuardKeyError as e:
        raise _key_error(e)

    if not settings.expose_private_keys:
        return KeyPairResponse(public_key=keypair.public_key)

    return KeyPairResponse(
        private_key=keypair.private_key,
        public_key=keypair.public_key
    )

@router.post("/private-key", response_model=PrivateKeyResponse)
def create_private_key():
    """Generate a new WireGuard private key."""
    if not settings.expose_private_keys:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Private key generation is disabled on this server"
        )

    try:
        private_key = generate_private_key()
    except WireGuardKeyError as e:
        raise _key_error(e)

    return PrivateKeyResponse(private_key=private_key)

@router.post("/public-key", response_model=PublicKeyResponse)
def get_public_key(request: DerivePublicKeyRequest):
    """Derive the public key for a base64 encoded private key."""
    try:
        public_key = derive_public_key(request.private_key)
    except WireGuardKeyError as e:
        raise _key_error(e)

    return PublicKeyResponse(public_key=public_key)

@router.post("/validate-public-key", response_model=ValidatePublicKeyResponse)
def check_public_key(request: ValidatePublicKeyRequest):
    """Check whether a string is a well-formed WireGuard public key."""
    return ValidatePublicKeyResponse(
        public_key=request.public_key,
        valid=validate_public_key(request.public_key)
    )

@router.post("/verify-keypair", response_model=VerifyKeyPairResponse)
def check_keypair(request: VerifyKeyPairRequest):
    """Check that a public key belongs to a private key."""
    return VerifyKeyPairResponse(
        valid=verify_keypair(request.private_key, request.public_key)
    )
