from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import config
from schemas import AnalysisOut, HealthOut, TextAnalysisIn
from parsers.upload import is_allowed_file, placeholder_resume_text
from matching.analyzer import analyze_resume

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

TOO_SHORT = f"Please provide more content (at least {config.MIN_TEXT_LENGTH} characters each)"
INVALID_FILE_TYPE = "Invalid file type. Only PDF, DOC, DOCX, and TXT files are allowed."
FILE_ACK_MESSAGE = "File uploaded successfully. Using text analysis for demonstration."


app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
router = APIRouter(prefix="/api")


# -------------------------------------------------------------------
# Error envelope: {"success": false, "error": "..."}
# -------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@router.post("/analyze/text", response_model=AnalysisOut, response_model_exclude_none=True)
def analyze_text(payload: TextAnalysisIn):
    resume_text, job_description = payload.resume_text, payload.job_description
    if not resume_text or not job_description:
        raise HTTPException(status_code=400, detail="Resume text and job description are required")
    if len(resume_text) < config.MIN_TEXT_LENGTH or len(job_description) < config.MIN_TEXT_LENGTH:
        raise HTTPException(status_code=400, detail=TOO_SHORT)

    logger.info("Analyzing text input")
    try:
        analysis = analyze_resume(resume_text, job_description)
    except Exception as e:
        logger.error(f"Text analysis error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to analyze resume: {e}")
    return AnalysisOut(analysis=analysis)


@router.post("/analyze/file", response_model=AnalysisOut)
async def analyze_file(
    resume: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
):
    if resume is None:
        raise HTTPException(status_code=400, detail="Resume file and job description are required")
    try:
        if not resume.filename or not job_description:
            raise HTTPException(status_code=400, detail="Resume file and job description are required")
        if len(job_description) < config.MIN_TEXT_LENGTH:
            raise HTTPException(status_code=400, detail=TOO_SHORT)
        if not is_allowed_file(resume.filename):
            raise HTTPException(status_code=400, detail=INVALID_FILE_TYPE)

        # Only the size is checked; the bytes are never stored or parsed.
        # One byte past the limit is enough to tell the file is too large.
        size = len(await resume.read(config.MAX_UPLOAD_BYTES + 1))
        if size > config.MAX_UPLOAD_BYTES:
            raise HTTPException(
                status_code=413, detail=f"File too large. Maximum size is {config.MAX_UPLOAD_MB}MB."
            )

        logger.info(f"Processing file: {resume.filename} ({size} bytes)")
        try:
            analysis = analyze_resume(placeholder_resume_text(resume.filename), job_description)
        except Exception as e:
            logger.error(f"File analysis error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to analyze file: {e}")
    finally:
        await resume.close()
    return AnalysisOut(analysis=analysis, message=FILE_ACK_MESSAGE)


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(
        status="OK",
        message=f"{config.APP_NAME} API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=config.APP_VERSION,
    )


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"{config.APP_NAME} listening on port {config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
