"""
In-memory question registry

Owns every Question and its Responses and is the only mutation path for
them. A registry is an ordinary object: the application builds one at
startup and hands it to whatever needs it, tests build their own.
"""
import logging
import secrets
import string
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from classcode.core.errors import (
    DuplicateCodeError,
    ExhaustedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_CODE_LENGTH = 6
DEFAULT_ALPHABET = string.ascii_uppercase + string.digits
DEFAULT_MAX_ATTEMPTS = 1000
MAX_CODE_LENGTH = 32


class Response(BaseModel):
    """One student's answer to a question"""
    model_config = ConfigDict(frozen=True)

    student_name: str
    answer_text: str
    submitted_at: datetime


class Question(BaseModel):
    """A published question and the responses collected for it"""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    created_at: datetime
    responses: Tuple[Response, ...] = ()

    @property
    def response_count(self) -> int:
        return len(self.responses)


def normalize_code(question_id: Optional[str]) -> str:
    """Codes are matched case-insensitively and without surrounding whitespace"""
    return (question_id or "").strip().upper()


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class QuestionRegistry:
    """Collection of questions keyed by normalized code, in insertion order"""

    def __init__(
        self,
        code_length: int = DEFAULT_CODE_LENGTH,
        alphabet: str = DEFAULT_ALPHABET,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        max_code_length: int = MAX_CODE_LENGTH,
        rng=None,
    ):
        self.code_length = code_length
        self.alphabet = alphabet
        self.max_attempts = max_attempts
        self.max_code_length = max_code_length
        # anything with a .choice(seq) method; secrets by default
        self._rng = rng or secrets
        self._questions: Dict[str, Question] = {}

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, question_id) -> bool:
        return normalize_code(question_id) in self._questions

    def create_question(self, question_id: str, text: str) -> Question:
        """
        Publish a new question under `question_id`.

        The code is trimmed and uppercased, the text trimmed. Raises
        ValidationError if either ends up empty and DuplicateCodeError if
        the normalized code is already taken.
        """
        code = normalize_code(question_id)
        text = _clean(text)
        if not code or not text:
            logger.warning("Rejected question: empty code or text")
            raise ValidationError("Please enter both a code and a question.")
        if code in self._questions:
            logger.warning(f"Rejected question: duplicate code {code}")
            raise DuplicateCodeError(code)

        question = Question(id=code, text=text, created_at=datetime.now())
        self._questions[code] = question
        logger.info(f"Created question {code}")
        return question

    def generate_unique_code(
        self,
        length: Optional[int] = None,
        alphabet: Optional[str] = None,
    ) -> str:
        """
        Draw random codes until one is not already in use.

        Nothing is reserved: the caller still has to create_question() with
        the returned code. Raises ExhaustedError after max_attempts misses,
        or right away when every code of this shape is taken.
        """
        length = self.code_length if length is None else length
        alphabet = self.alphabet if alphabet is None else alphabet
        if length < 1 or length > self.max_code_length:
            raise ValidationError(f"Code length must be between 1 and {self.max_code_length}.")

        # whitespace would be stripped away by normalize_code on create
        symbols = "".join(dict.fromkeys(ch for ch in alphabet.upper() if not ch.isspace()))
        if not symbols:
            raise ValidationError("Code alphabet must not be empty.")
        taken = sum(
            1 for code in self._questions
            if len(code) == length and all(ch in symbols for ch in code)
        )
        if taken >= len(symbols) ** length:
            logger.warning(f"No free codes of length {length} left")
            raise ExhaustedError(f"All codes of length {length} are already in use.")

        for _ in range(self.max_attempts):
            code = "".join(self._rng.choice(symbols) for _ in range(length))
            if code not in self._questions:
                return code

        logger.warning(f"Gave up generating a code after {self.max_attempts} attempts")
        raise ExhaustedError(f"Could not generate a unique code after {self.max_attempts} attempts.")

    def find_question(self, question_id: str) -> Question:
        code = normalize_code(question_id)
        question = self._questions.get(code)
        if question is None:
            raise NotFoundError(code)
        return question

    def delete_question(self, question_id: str) -> None:
        """Remove a question together with all of its responses"""
        code = normalize_code(question_id)
        if code not in self._questions:
            logger.warning(f"Delete of unknown question {code}")
            raise NotFoundError(code)
        removed = self._questions.pop(code)
        logger.info(f"Deleted question {code} ({removed.response_count} responses)")

    def submit_response(self, question_id: str, student_name: str, answer_text: str) -> Response:
        """
        Record a student's answer.

        The question must exist (NotFoundError); name and answer must be
        non-empty after trimming (ValidationError).
        """
        question = self.find_question(question_id)
        student_name = _clean(student_name)
        answer_text = _clean(answer_text)
        if not student_name or not answer_text:
            logger.warning(f"Rejected response to {question.id}: empty name or answer")
            raise ValidationError("Please enter both your name and answer.")

        response = Response(
            student_name=student_name,
            answer_text=answer_text,
            submitted_at=datetime.now(),
        )
        self._questions[question.id] = question.model_copy(
            update={"responses": question.responses + (response,)}
        )
        logger.info(f"Response from {student_name} recorded for {question.id}")
        return response

    def list_questions(self) -> List[Question]:
        return list(self._questions.values())
