"""
FastAPI Main Application - X-ray Test Case Generator
"""
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel

from .config import settings
from .agents.generators import select_generator
from .agents.remote_generation_agent import RemoteGenerationAgent
from .exporters import EXPORT_FORMATS, ExportOptions, export_filename, export_test_cases
from .knowledge.examples import EXAMPLE_PROMPTS, QUICK_ADDITIONS
from .models import Priority, UserType
from .utils.helpers import filter_test_cases, priority_stats


logger = logging.getLogger("xray_testgen.api")

app = FastAPI(
    title=settings.APP_NAME,
    description="Generates manual test cases from a screenshot and a description",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Session storage (in-memory, lost on restart)
sessions = {}


# Request Models
class SuggestionRequest(BaseModel):
    description: str = ""


def _get_session(session_id: str) -> dict:
    if session_id not in sessions:
        raise HTTPException(status_code=404, detail="Session not found")
    return sessions[session_id]


async def _read_upload(file: Optional[UploadFile]) -> Optional[bytes]:
    if file is None or not file.filename:
        return None

    extension = Path(file.filename).suffix.lower()
    if extension not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{extension}'. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}"
        )

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Uploaded file exceeds the size limit")
    return content


# API Endpoints
@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "docs": "/docs"}


@app.post("/api/generate")
async def generate_test_cases(
    description: str = Form(""),
    file: Optional[UploadFile] = File(None),
    use_ai: Optional[bool] = Form(None),
    user_type: Optional[str] = Form(None)
):
    """
    Generate test cases from a screenshot and description.
    Creates a new session holding the result.
    """
    if user_type and user_type.lower() not in (UserType.USER.value, UserType.ADMIN.value):
        raise HTTPException(status_code=400, detail="user_type must be 'user' or 'admin'")

    image = await _read_upload(file)
    file_name = file.filename if file is not None else None

    generator = select_generator(use_ai)
    result = await generator.generate(
        description,
        file_name=file_name,
        image=image,
        user_type=user_type
    )

    session_id = str(uuid.uuid4())[:8]
    sessions[session_id] = {
        "id": session_id,
        "created_at": datetime.now().isoformat(),
        "description": description,
        "file_name": file_name,
        "generator": generator.kind,
        "result": result,
    }
    logger.info(
        f"Session {session_id}: {len(result.test_cases)} test cases "
        f"({'AI' if result.ai_generated else 'rule-based'})"
    )

    response = result.to_response()
    response.update({
        "sessionId": session_id,
        "totalTestCases": len(result.test_cases),
        "priorityStats": priority_stats(result.test_cases),
    })
    return response


@app.get("/api/session/{session_id}")
async def get_session(session_id: str):
    session = _get_session(session_id)
    return {
        "id": session["id"],
        "created_at": session["created_at"],
        "description": session["description"],
        "file_name": session["file_name"],
        "generator": session["generator"],
        "result": session["result"].to_response(),
    }


@app.get("/api/session/{session_id}/test-cases")
async def list_test_cases(session_id: str, search: str = "", priority: str = "all"):
    """
    Search and filter a session's test cases.
    """
    if priority != "all" and priority not in [p.value for p in Priority]:
        raise HTTPException(status_code=400, detail=f"Unknown priority '{priority}'")

    test_cases = _get_session(session_id)["result"].test_cases
    matches = filter_test_cases(test_cases, search=search, priority=priority)
    return {
        "total": len(test_cases),
        "count": len(matches),
        "priorityStats": priority_stats(test_cases),
        "testCases": [tc.to_export_dict() for tc in matches],
    }


@app.get("/api/session/{session_id}/export/{fmt}")
async def export_session(
    session_id: str,
    fmt: str,
    include_steps: bool = True,
    include_expected_results: bool = True,
    include_test_data: bool = True,
    include_preconditions: bool = True
):
    """
    Download a session's test cases as JSON, CSV or Gherkin.
    """
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown export format '{fmt}'. Available: {', '.join(EXPORT_FORMATS)}"
        )

    session = _get_session(session_id)
    options = ExportOptions(
        include_steps=include_steps,
        include_expected_results=include_expected_results,
        include_test_data=include_test_data,
        include_preconditions=include_preconditions,
    )
    content = export_test_cases(fmt, session["result"].test_cases, options)
    return Response(
        content=content,
        media_type=EXPORT_FORMATS[fmt].media_type,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(fmt)}"'},
    )


@app.post("/api/suggestions")
async def smart_suggestions(request: SuggestionRequest):
    return await RemoteGenerationAgent().get_smart_suggestions(request.description)


@app.post("/api/session/{session_id}/evaluate")
async def evaluate_session(session_id: str):
    session = _get_session(session_id)
    return await RemoteGenerationAgent().evaluate_test_quality(session["result"].test_cases)


@app.get("/api/ai-status")
async def ai_status():
    status = RemoteGenerationAgent().check_availability()
    status["enabled"] = settings.USE_AI
    return status


@app.get("/api/examples")
async def examples():
    return {"examples": EXAMPLE_PROMPTS, "quickAdditions": QUICK_ADDITIONS}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
