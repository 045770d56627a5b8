"""
FastAPI application for the Mirae reflection chat.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

# Configure logging to show INFO from mirae modules
logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
logging.getLogger("mirae").setLevel(logging.INFO)
from fastapi.middleware.cors import CORSMiddleware

from .routes import router

app = FastAPI(
    title="Mirae Reflection Chat",
    description="Course reflection companion with a live model and a scripted fallback",
    version="0.1.0",
)

# CORS for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(router)


@app.get("/")
async def root():
    return {"message": "Mirae Reflection Chat API", "docs": "/docs"}
