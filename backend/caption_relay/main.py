import logging
from dotenv import load_dotenv

# Load environment variables before importing other modules
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import get_settings
from .routes import transcript_routes, list_routes

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Caption Relay API",
    description="Relays YouTube timedtext captions as JSON: timed transcript lines and available caption languages",
    version="1.0.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    }
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcript_routes.router, tags=["transcript"])
app.include_router(list_routes.router, tags=["list"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to Caption Relay API",
        "version": "1.0.0",
        "docs": "/docs"
    }
