from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from spro_fees.core.config import settings
from spro_fees.core.logging_config import setup_logging
from spro_fees.services.adapters import spro_service
from spro_fees.app.api.v1 import fees

# Setup logging
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting SPRO Fees API")
    yield
    logger.info("Shutting down SPRO Fees API")
    await spro_service.close()

app = FastAPI(
    title="SPRO Fees API",
    description="Daily fees and revenue for SmarDex P2P lending",
    version="0.1.0",
    lifespan=lifespan
)

# Routes
app.include_router(fees.router, prefix="/api/v1", tags=["fees"])

@app.get("/")
async def root():
    return {
        "status": "operational",
        "service": "SPRO Fees API",
        "version": "0.1.0"
    }

@app.get("/health")
async def health():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)
