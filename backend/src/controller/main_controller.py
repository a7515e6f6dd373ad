"""FastAPI application bootstrap and routing setup."""

import os
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from termcolor import colored
from fastapi.middleware.cors import CORSMiddleware
from src.utility.logger import AppLogger
from src.handlers.error_handler import MapExceptions as me
from src.controller.prompt_controller import router as prompt_router
from src.controller.size_controller import router as size_router

load_dotenv()

AppLogger.from_env()

app = FastAPI(title="Image Prompt Backend", version="0.1.0")
me.register_exception_handlers(app)
logger = AppLogger.get_logger(__name__)

mode = os.getenv("RUN_MODE", "actual")
logger.info(colored(f"Running in {mode} mode", "yellow"))

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(prompt_router)
app.include_router(size_router)


@app.get("/", tags=["Health"])
def root():
    """Health probe indicating API wiring and logger setup succeeded."""
    return {"status": "ok", "message": "Setup Successful", "mode": mode}


@app.get("/health", tags=["Health"])
def health_check():
    """Secondary health endpoint used by deployments and monitoring probes."""
    return {"status": "ok", "message": "FastAPI server running!", "mode": mode}


if __name__ == "__main__":
    # from backend/: python -m src.controller.main_controller
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
