import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from hackathon_scorer.config import get_settings
from hackathon_scorer.api import gallery, rubric, score, session
from hackathon_scorer.custom_logging import configure_logging
from hackathon_scorer.utils.response import create_response

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Scrapes a hackathon gallery, extracts a weighted rubric from a PDF and ranks projects with Gemini.
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content=create_response(False, "Request invalid", None, {"detail": jsonable_errors(exc)})
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_response(False, exc.detail, None, None)
    )

def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw exception objects pydantic attaches"""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]

app.include_router(gallery.router, tags=["Gallery"], prefix="/api")
app.include_router(rubric.router, tags=["Rubric"], prefix="/api")
app.include_router(score.router, tags=["Score"], prefix="/api")
app.include_router(session.router, tags=["Session"], prefix="/api")

@app.get("/")
async def root():
    return {"message": "Hackathon Scorer Server running..."}

@app.get("/health", tags=["Health"])
async def health_check():
    """Health Check Endpoint"""
    logging.debug("Health check")
    return {
        "status": "healthy",
        "services": {
            "api": "up",
            "gemini": "configured" if settings.gemini_api_key else "missing-key"
        },
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hackathon_scorer.main:app", host="0.0.0.0", port=8000)
