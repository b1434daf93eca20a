import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from xcm_guard.api.routes import transfers
from xcm_guard.config import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="XCM Guard API", version=settings.PROJECT_VERSION)

app.include_router(transfers.router)

# Allow frontend usage (optional)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Set specific domains in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
