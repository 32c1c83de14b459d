"""
Call Log Analyzer - Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from call_analyzer.core.config import settings
from call_analyzer.core.logging import setup_logging
from call_analyzer.api.v1.router import api_router

setup_logging()

app = FastAPI(
    title=settings.APP_NAME,
    description="Parses pasted call logs and summarizes them",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(api_router, prefix="/api/v1")


@app.get("/healthz")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("call_analyzer.main:app", host="0.0.0.0", port=8000, reload=settings.ENVIRONMENT == "development")
