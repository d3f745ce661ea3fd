from datetime import datetime
from models import db
from models.quiz_attempts import QuizAttempt
from models.quiz_attempts_answers import QuizAttemptAnswer
from classes.exceptions import MaxAttemptsExceeded, StaleAttempt


class AttemptLedger:
    """Attempt rows of (student, quiz) pairs.

    Completed attempts are never modified. The single open attempt of a
    pair is completed in place with a compare-and-swap update. Every
    completion takes the next attempt_number, so completions that raced
    past the limit check on the same count fail with IntegrityError.
    """

    @staticmethod
    def count_attempts(student_id, quiz_id):
        return QuizAttempt.query.filter_by(student_id=student_id, quiz_id=quiz_id, completed=True).count()

    @staticmethod
    def find_open_attempt(student_id, quiz_id):
        return QuizAttempt.query.filter_by(student_id=student_id, quiz_id=quiz_id, completed=False).first()

    @staticmethod
    def get_attempts(quiz_id, student_id=None):
        query = QuizAttempt.query.filter_by(quiz_id=quiz_id)
        if student_id is not None:
            query = query.filter_by(student_id=student_id)
        return query.order_by(QuizAttempt.started_at, QuizAttempt.id).all()

    @staticmethod
    def latest_completed(student_id, quiz_id):
        return (
            QuizAttempt.query
            .filter_by(student_id=student_id, quiz_id=quiz_id, completed=True)
            .order_by(QuizAttempt.completed_at.desc(), QuizAttempt.id.desc())
            .first()
        )

    @staticmethod
    def attempts_left(quiz, used):
        if quiz.max_attempts is None:
            return None
        return max(0, quiz.max_attempts - used)

    @staticmethod
    def check_limit(quiz, open_attempt, used):
        """Completing an open attempt adds no row, so it is exempt from the limit."""
        if open_attempt is None and quiz.max_attempts is not None and used >= quiz.max_attempts:
            raise MaxAttemptsExceeded(
                f"Maximum attempts ({quiz.max_attempts}) reached for quiz {quiz.id}"
            )

    @staticmethod
    def record_completed(student_id, quiz_id, summary, attempt_number):
        now = datetime.utcnow()
        attempt = QuizAttempt(
            student_id=student_id,
            quiz_id=quiz_id,
            score=summary.score,
            max_score=summary.max_score,
            completed=True,
            attempt_number=attempt_number,
            started_at=now,
            completed_at=now,
        )
        attempt.answers = AttemptLedger._answer_rows(summary)
        db.session.add(attempt)
        db.session.flush()
        return attempt

    @staticmethod
    def complete_open(attempt, summary, attempt_number):
        updated = (
            QuizAttempt.query
            .filter_by(id=attempt.id, completed=False)
            .update(
                {
                    "score": summary.score,
                    "max_score": summary.max_score,
                    "completed": True,
                    "open_slot": None,
                    "attempt_number": attempt_number,
                    "completed_at": datetime.utcnow(),
                },
                synchronize_session=False,
            )
        )
        if updated != 1:
            raise StaleAttempt(f"Attempt {attempt.id} is no longer open")

        db.session.refresh(attempt)
        attempt.answers = AttemptLedger._answer_rows(summary)
        db.session.flush()
        return attempt

    @staticmethod
    def _answer_rows(summary):
        return [
            QuizAttemptAnswer(
                question_id=result.question_id,
                submitted_answer=result.submitted_answer,
                is_correct=result.correct,
                points_awarded=result.points_awarded,
            )
            for result in summary.results
        ]
