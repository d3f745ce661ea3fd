class QuizError(Exception):
    """Base class for rejected quiz operations."""
    status_code = 400
    code = "quiz_error"

    def __init__(self, message=None):
        super().__init__(message or self.__doc__)
        self.message = message or self.__doc__

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class QuizNotFound(QuizError):
    """Quiz not found"""
    status_code = 404
    code = "not_found"


class NotEnrolled(QuizError):
    """Student is not enrolled in the course for this quiz"""
    status_code = 403
    code = "not_enrolled"


class NoQuestions(QuizError):
    """Quiz has no questions"""
    status_code = 409
    code = "no_questions"


class MaxAttemptsExceeded(QuizError):
    """No attempts left"""
    status_code = 403
    code = "max_attempts_exceeded"


class AttemptConflict(QuizError):
    """Quiz attempt could not be recorded, please try again"""
    status_code = 409
    code = "attempt_conflict"


class StaleAttempt(Exception):
    """An open attempt was completed by another request first."""
