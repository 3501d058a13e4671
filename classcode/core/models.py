"""
Pydantic data models for request/response validation
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from classcode.core.registry import Question, Response


class QuestionCreateRequest(BaseModel):
    """Request model for publishing a question"""
    # Blank/missing values are left for the registry to reject
    id: str = ""
    text: str = ""


class CodeRequest(BaseModel):
    """Request model for generating a fresh code"""
    length: Optional[int] = None


class CodeResponse(BaseModel):
    code: str


class ResponseSubmitRequest(BaseModel):
    """Request model for submitting a student's answer"""
    student_name: str = ""
    answer_text: str = ""


class QuestionSummary(BaseModel):
    """One row of the teacher's question listing"""
    id: str
    text: str
    response_count: int
    created_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionSummary":
        return cls(
            id=question.id,
            text=question.text,
            response_count=question.response_count,
            created_at=question.created_at,
        )


class StudentQuestion(BaseModel):
    """What a student sees after entering a valid code"""
    id: str
    text: str


class ResponseData(BaseModel):
    """A stored response as shown to the teacher"""
    question_id: str
    student_name: str
    answer_text: str
    submitted_at: datetime

    @classmethod
    def from_response(cls, question_id: str, response: Response) -> "ResponseData":
        return cls(
            question_id=question_id,
            student_name=response.student_name,
            answer_text=response.answer_text,
            submitted_at=response.submitted_at,
        )


class QuestionDetail(QuestionSummary):
    """Teacher's detail view: the question plus every response"""
    responses: List[ResponseData]

    @classmethod
    def from_question(cls, question: Question) -> "QuestionDetail":
        return cls(
            id=question.id,
            text=question.text,
            response_count=question.response_count,
            created_at=question.created_at,
            responses=[ResponseData.from_response(question.id, r) for r in question.responses],
        )
