from pydantic import BaseModel, Field
from typing import Optional

# Key pair schemas
class KeyPairResponse(BaseModel):
    private_key: Optional[str] = None  # Omitted when private keys are not exposed
    public_key: str

class PrivateKeyResponse(BaseModel):
    private_key: str

# Derivation schemas
class DerivePublicKeyRequest(BaseModel):
    private_key: str = Field(..., description="Base64 encoded 32-byte private key")

class PublicKeyResponse(BaseModel):
    public_key: str

# Validation schemas
class ValidatePublicKeyRequest(BaseModel):
    public_key: str

class ValidatePublicKeyResponse(BaseModel):
    public_key: str
    valid: bool

class VerifyKeyPairRequest(BaseModel):
    private_key: str
    public_key: str

class VerifyKeyPairResponse(BaseModel):
    valid: bool

# Standard API response schemas
class ErrorDetail(BaseModel):
    code: str
    message: str

class HealthResponse(BaseModel):
    status: str
    message: str
