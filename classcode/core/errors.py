"""
Error types raised by the question registry
"""


class RegistryError(Exception):
    """Base class for all registry errors"""
    code = "REGISTRY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """A required field was empty after trimming, or an argument was unusable"""
    code = "VALIDATION_ERROR"


class DuplicateCodeError(RegistryError):
    """A question with the same (normalized) code already exists"""
    code = "DUPLICATE_CODE"

    def __init__(self, question_id: str):
        super().__init__(f"This code already exists. Please use a different code. ({question_id})")
        self.question_id = question_id


class NotFoundError(RegistryError):
    """No question is registered under the given code"""
    code = "NOT_FOUND"

    def __init__(self, question_id: str):
        super().__init__(f"Question not found: {question_id}")
        self.question_id = question_id


class ExhaustedError(RegistryError):
    """Code generation gave up without finding a free code"""
    code = "CODE_SPACE_EXHAUSTED"
