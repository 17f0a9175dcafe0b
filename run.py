import uvicorn

from wg_keygen.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "wg_keygen.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower()
    )
