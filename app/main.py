import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.config import settings
from app.models.schemas import AnalysisRequest, RiskOverviewResponse
from app.services.github_scanner import GitHubScanner
from app.services.journey_analyzer import JourneyAnalyzerService
from app.services.service_errors import ServiceError
from app.utils.logging_utils import configure_logging

API_VERSION = "1.0.0"

configure_logging()
logger = logging.getLogger("journey-analyzer")

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

app = FastAPI(title="Journey Analyzer API", version=API_VERSION)
app.state.limiter = limiter
allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(
    RateLimitExceeded,
    lambda request, exc: JSONResponse(status_code=429, content={"detail": {"message": "Rate limit exceeded", "code": "rate_limited"}}),
)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(RequestValidationError)
async def invalid_input_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "message": "githubUrl and userJourneys are required; each journey needs name, description and steps",
                "code": "invalid_input",
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


github_scanner = GitHubScanner()
journey_analyzer = JourneyAnalyzerService(github_scanner)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.get("/")
def root() -> Dict[str, Any]:
    return {
        "name": "Journey Analyzer API",
        "version": API_VERSION,
        "description": "User Journey Risk Analysis API - Analyzes user journeys based on GitHub repositories",
        "endpoints": {
            "health": "GET /health",
            "analyze": "POST /api/journey-analyzer/analyze",
            "analyzerHealth": "GET /api/journey-analyzer/health",
        },
    }


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "service": "journey-analyzer-api", "version": API_VERSION, "timestamp": _now()}


@app.get("/api/journey-analyzer/health")
def analyzer_health() -> Dict[str, str]:
    return {"status": "ok", "service": "journey-analyzer", "timestamp": _now()}


@app.post("/api/journey-analyzer/analyze", response_model=RiskOverviewResponse)
@limiter.limit(settings.rate_limit)
def analyze_journeys(request: Request, payload: AnalysisRequest) -> RiskOverviewResponse:
    logger.info(
        "Analyze journeys request",
        extra={"repo": payload.githubUrl, "journeys": len(payload.userJourneys)},
    )

    try:
        return journey_analyzer.analyze(payload)
    except ServiceError as exc:
        logger.warning("Repository acquisition failed", extra={"error": exc.message, "code": exc.code})
        raise HTTPException(status_code=exc.status_code, detail=exc.to_detail()) from exc
    except Exception as exc:
        logger.exception("Journey analysis failed", extra={"repo": payload.githubUrl})
        raise HTTPException(
            status_code=500,
            detail={"message": f"Analysis failed: {exc}", "code": "analysis_failed"},
        ) from exc
