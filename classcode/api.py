"""
All API endpoints for the question code service
Teacher-facing listing/management and student-facing lookup/submission

Every endpoint is async and calls the registry without awaiting, so
registry operations never interleave.
"""
from fastapi import APIRouter, HTTPException, Depends
from typing import List, Optional

from classcode.core.errors import (
    RegistryError,
    ValidationError,
    DuplicateCodeError,
    NotFoundError,
    ExhaustedError,
)
from classcode.core.models import (
    QuestionCreateRequest,
    CodeRequest,
    CodeResponse,
    ResponseSubmitRequest,
    QuestionSummary,
    QuestionDetail,
    StudentQuestion,
    ResponseData,
)
from classcode.core.registry import QuestionRegistry, normalize_code
from classcode.core.storage import get_registry

router = APIRouter(prefix="/api")

INVALID_CODE_MESSAGE = "Invalid code. Please check with your teacher."

STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    DuplicateCodeError: 409,
    ExhaustedError: 503,
}


def to_http_error(error: RegistryError) -> HTTPException:
    """Translate a registry error into an HTTPException with a structured detail"""
    status_code = STATUS_CODES.get(type(error), 400)
    return HTTPException(
        status_code=status_code,
        detail={"error": error.code, "message": error.message},
    )


def invalid_code_error() -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={"error": "INVALID_CODE", "message": INVALID_CODE_MESSAGE},
    )


# ============================================================================
# Teacher Endpoints
# ============================================================================

@router.get("/questions", tags=["teacher"], response_model=List[QuestionSummary])
async def list_questions(registry: QuestionRegistry = Depends(get_registry)):
    """List every question with its response count, oldest first"""
    return [QuestionSummary.from_question(q) for q in registry.list_questions()]


@router.post("/questions", tags=["teacher"], response_model=QuestionSummary, status_code=201)
async def create_question(
    request: QuestionCreateRequest,
    registry: QuestionRegistry = Depends(get_registry),
):
    """Publish a question under a code"""
    try:
        question = registry.create_question(request.id, request.text)
    except RegistryError as e:
        raise to_http_error(e)
    return QuestionSummary.from_question(question)


@router.post("/codes", tags=["teacher"], response_model=CodeResponse)
async def generate_code(
    request: Optional[CodeRequest] = None,
    registry: QuestionRegistry = Depends(get_registry),
):
    """
    Suggest an unused code.

    The code is not reserved; publish it with POST /api/questions.
    """
    length = request.length if request is not None else None
    try:
        code = registry.generate_unique_code(length=length)
    except RegistryError as e:
        raise to_http_error(e)
    return CodeResponse(code=code)


@router.get("/questions/{question_id}/responses", tags=["teacher"], response_model=QuestionDetail)
async def get_question_responses(
    question_id: str,
    registry: QuestionRegistry = Depends(get_registry),
):
    """A question's text and every response submitted to it"""
    try:
        question = registry.find_question(question_id)
    except NotFoundError as e:
        raise to_http_error(e)
    return QuestionDetail.from_question(question)


@router.delete("/questions/{question_id}", tags=["teacher"])
async def delete_question(
    question_id: str,
    registry: QuestionRegistry = Depends(get_registry),
):
    """Delete a question and all of its responses"""
    try:
        registry.delete_question(question_id)
    except NotFoundError as e:
        raise to_http_error(e)
    return {"success": True, "message": f"Question {normalize_code(question_id)} deleted"}


# ============================================================================
# Student Endpoints
# ============================================================================

@router.get("/questions/{question_id}", tags=["student"], response_model=StudentQuestion)
async def get_question(
    question_id: str,
    registry: QuestionRegistry = Depends(get_registry),
):
    """Look up a question by the code a student typed in"""
    try:
        question = registry.find_question(question_id)
    except NotFoundError:
        raise invalid_code_error()
    return StudentQuestion(id=question.id, text=question.text)


@router.post(
    "/questions/{question_id}/responses",
    tags=["student"],
    response_model=ResponseData,
    status_code=201,
)
async def submit_response(
    question_id: str,
    request: ResponseSubmitRequest,
    registry: QuestionRegistry = Depends(get_registry),
):
    """Submit a student's answer to a question"""
    try:
        response = registry.submit_response(question_id, request.student_name, request.answer_text)
    except NotFoundError:
        raise invalid_code_error()
    except RegistryError as e:
        raise to_http_error(e)
    return ResponseData.from_response(normalize_code(question_id), response)
