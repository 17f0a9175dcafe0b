from fastapi import FastAPI
from .config.settings import settings
from .routers import keygen_routes
from .schemas import HealthResponse
from .utils.crypto_utils import generate_wireguard_keypair
from .exceptions import WireGuardKeyError
import logging

# Set up logging
logging.basicConfig(level=settings.log_level_value)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    description="Generate and validate WireGuard-compatible Curve25519 key pairs",
    version=settings.api_version,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc"  # ReDoc
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"{settings.api_title} {settings.api_version} started")
    if not settings.expose_private_keys:
        logger.info("Private keys will not be returned by the API")

# Include routers
app.include_router(keygen_routes.router)

@app.get("/")
def root():
    return {"message": "WireGuard keygen API is running!"}

@app.get("/health", response_model=HealthResponse)
def health_check():
    try:
        # Exercise the random source and the curve primitive
        generate_wireguard_keypair()
        return HealthResponse(status="healthy", message="Key generation is operational")
    except WireGuardKeyError as e:
        logger.error(f"Health check failed: {e}")
        return HealthResponse(status="unhealthy", message=f"Key generation failed: {str(e)}")
