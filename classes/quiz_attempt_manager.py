from flask import current_app
from sqlalchemy.exc import IntegrityError, OperationalError
from models import db
from models.quizzes import Quiz
from classes.attempt_ledger import AttemptLedger
from classes.enrolment_manager import EnrolmentManager
from classes.exceptions import AttemptConflict, QuizError, StaleAttempt
from classes.question_bank import QuestionBank
from classes.scoring_engine import ScoringEngine
from classes.validators import validate_answers


class QuizAttemptManager:
    @staticmethod
    def submit(student_id, quiz_id, answers):
        """Grade a submission and record it as a completed attempt.

        Raises QuizNotFound, NotEnrolled, NoQuestions or MaxAttemptsExceeded
        before anything is written. A storage conflict (a duplicate
        attempt_number, a lost compare-and-swap, a lock timeout or deadlock)
        is retried QUIZ_SUBMIT_RETRIES times, then surfaces as AttemptConflict.
        """
        answers = validate_answers(answers)
        retries = current_app.config.get("QUIZ_SUBMIT_RETRIES", 1)

        for try_number in range(retries + 1):
            try:
                attempt = QuizAttemptManager._submit_once(student_id, quiz_id, answers)
                db.session.commit()
            except QuizError as e:
                db.session.rollback()
                current_app.logger.info(
                    "Rejected submission of student %s for quiz %s: %s", student_id, quiz_id, e.code
                )
                raise
            except (IntegrityError, OperationalError, StaleAttempt) as e:
                db.session.rollback()
                if try_number >= retries:
                    current_app.logger.error(
                        "Giving up on submission of student %s for quiz %s: %s", student_id, quiz_id, e
                    )
                    raise AttemptConflict() from e
                current_app.logger.warning(
                    "Conflict recording submission of student %s for quiz %s, retrying", student_id, quiz_id
                )
                continue

            current_app.logger.info(
                "Student %s completed attempt %s of quiz %s: %s/%s",
                student_id, attempt.id, quiz_id, attempt.score, attempt.max_score,
            )
            return attempt

    @staticmethod
    def _submit_once(student_id, quiz_id, answers):
        EnrolmentManager.authorize(student_id, quiz_id)
        questions = QuestionBank.load_questions(quiz_id)
        quiz = db.session.get(Quiz, quiz_id)

        open_attempt = AttemptLedger.find_open_attempt(student_id, quiz_id)
        used = AttemptLedger.count_attempts(student_id, quiz_id)
        AttemptLedger.check_limit(quiz, open_attempt, used)

        summary = ScoringEngine.score(questions, answers)

        if open_attempt is not None:
            return AttemptLedger.complete_open(open_attempt, summary, used + 1)
        return AttemptLedger.record_completed(student_id, quiz_id, summary, used + 1)


def submit_quiz_attempt(student_id, quiz_id, answers):
    return QuizAttemptManager.submit(student_id, quiz_id, answers)
