#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Chessboard Image Analyzer - FastAPI server turning board images into PGN/FEN."""

from dotenv import load_dotenv
load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from chess_pgn import config
from chess_pgn.errors import LinkConstructionError, MANUAL_COPY_HINT
from chess_pgn.lichess import AnalysisLink, build_analysis_link
from chess_reader import (
    AnalysisResult,
    JsonFileStore,
    ProviderConfig,
    PROVIDERS,
    analyze_chess_image,
    configured_providers,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.FileHandler("backend.log", mode='w', encoding='utf-8'),
        logging.StreamHandler()
    ]
)
log = logging.getLogger(__name__)

app = FastAPI(title="Chessboard Image Analyzer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

settings_store = JsonFileStore(config.CONFIG_STORE_PATH)


class AnalyzeResponse(BaseModel):
    result: AnalysisResult
    link: Optional[AnalysisLink] = None
    hint: Optional[str] = None


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(
    file: UploadFile = File(...),
    provider: str = Form(""),
    api_key: str = Form(""),
):
    """Read the position from an uploaded chessboard image."""
    log.info(f"Received image '{file.filename}' ({file.content_type}) provider='{provider or 'auto'}'")

    provider_config = None
    if api_key:
        provider_config = ProviderConfig(provider=provider or "openai", api_key=api_key)

    content = await file.read()
    log.info(f"Image size: {len(content):,} bytes")

    result = await analyze_chess_image(
        content,
        provider_config,
        store=settings_store,
        preferred=provider or None,
    )
    if not result.success:
        log.warning(f"Analysis failed ({result.error_kind}): {result.error}")
        return AnalyzeResponse(result=result)

    try:
        link = build_analysis_link(result.pgn)
    except LinkConstructionError as e:
        log.warning(f"Could not build analysis link: {e}")
        return AnalyzeResponse(result=result, hint=MANUAL_COPY_HINT)

    return AnalyzeResponse(result=result, link=link)


@app.post("/link", response_model=AnalysisLink)
async def link_endpoint(pgn: str = Form("")):
    """Build the analysis-site link for a PGN."""
    try:
        return build_analysis_link(pgn)
    except LinkConstructionError as e:
        raise HTTPException(status_code=422, detail={"error": str(e), "hint": MANUAL_COPY_HINT})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "providers": sorted(PROVIDERS),
        "configured_providers": configured_providers(),
        "analysis_site": config.ANALYSIS_SITE_URL,
    }


@app.get("/")
async def root():
    """API info endpoint."""
    return {
        "message": "Chessboard Image Analyzer API",
        "endpoints": {
            "/analyze": "POST - Upload a chessboard image, get PGN/FEN and an analysis link",
            "/link": "POST - Build an analysis link for a PGN",
            "/health": "GET - Check service health",
            "/docs": "GET - API documentation"
        },
        "usage": "Upload a chessboard screenshot or photo to /analyze"
    }


if __name__ == "__main__":
    import os
    import uvicorn

    logging.getLogger("watchfiles.main").setLevel(logging.WARNING)

    is_development = os.getenv("DEVELOPMENT", "false").lower() == "true"

    if is_development:
        log.info("Starting Chessboard Image Analyzer server with auto-reload...")
    else:
        log.info("Starting Chessboard Image Analyzer server (production mode)...")

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=is_development,
        reload_dirs=[".", "chess_pgn", "chess_reader", "chess_scripts"] if is_development else None
    )
