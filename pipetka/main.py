"""PipetkaOnline — FastAPI application entry point."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import brand, contrast, convert, export, extract, harmony, names, simulate
from .services import color_names

LOG_LEVEL = os.environ.get("PIPETKA_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "PIPETKA_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the color-name dictionary before serving
    count = len(color_names.get_css_color_names())
    logger.info(f"Color-name dictionary ready ({count} entries)")
    logger.info(f"CORS origins: {CORS_ORIGINS}")

    yield


app = FastAPI(
    title="PipetkaOnline",
    description="Color tools: conversion, contrast, naming, palettes, harmony and color-blindness simulation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(convert.router)
app.include_router(contrast.router)
app.include_router(names.router)
app.include_router(harmony.router)
app.include_router(extract.router)
app.include_router(brand.router)
app.include_router(simulate.router)
app.include_router(export.router)


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "color_names": len(color_names.get_css_color_names()),
    }


@app.get("/")
async def root() -> dict:
    return {"message": "PipetkaOnline API", "docs": "/docs"}
