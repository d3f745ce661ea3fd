from flask import Blueprint, jsonify, g, request, current_app
from utils.utils import login_required, role_required

from models.users import db
from models.quizzes import Quiz
from classes.attempt_ledger import AttemptLedger
from classes.enrolment_manager import EnrolmentManager
from classes.exceptions import QuizError
from classes.quiz_attempt_manager import submit_quiz_attempt

# Students' blueprint
student_bp = Blueprint("student", __name__)


@student_bp.errorhandler(QuizError)
def handle_quiz_error(error):
    return jsonify(error.to_dict()), error.status_code


@student_bp.errorhandler(ValueError)
def handle_bad_input(error):
    return jsonify({"error": str(error)}), 400


#Fetch quiz details
@student_bp.route("/quiz/<int:quiz_id>/details", methods=["GET"])
@login_required
@role_required("student")
def get_quiz_details(quiz_id):
    student_id = g.user.get("user_id")
    EnrolmentManager.authorize(student_id, quiz_id)

    quiz = db.session.get(Quiz, quiz_id)
    used = AttemptLedger.count_attempts(student_id, quiz_id)
    open_attempt = AttemptLedger.find_open_attempt(student_id, quiz_id)

    return jsonify({
        **quiz.to_dict(),
        "attempts_used": used,
        "attempts_left": AttemptLedger.attempts_left(quiz, used),
        "has_open_attempt": open_attempt is not None,
    }), 200


# Submit a quiz attempt
@student_bp.route("/quiz/<int:quiz_id>/submit", methods=["POST"])
@login_required
@role_required("student")
def submit_quiz(quiz_id):
    """Grades the quiz and records the completed attempt."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    student_id = g.user.get("user_id")

    if "answers" not in data:
        current_app.logger.warning("Submission for quiz %s from student %s has no answers", quiz_id, student_id)

    attempt = submit_quiz_attempt(student_id, quiz_id, data.get("answers", {}))
    quiz = attempt.quiz
    used = AttemptLedger.count_attempts(student_id, quiz_id)

    return jsonify({
        "attempt": attempt.to_dict(include_answers=True),
        "attempts_used": used,
        "attempts_left": AttemptLedger.attempts_left(quiz, used),
    }), 200


#Get quiz results
@student_bp.route("/quiz/<int:quiz_id>/results", methods=["GET"])
@login_required
@role_required("student")
def get_quiz_results(quiz_id):
    student_id = g.user.get("user_id")
    EnrolmentManager.authorize(student_id, quiz_id)

    attempt = AttemptLedger.latest_completed(student_id, quiz_id)
    if not attempt:
        return jsonify({"error": "No attempts found"}), 404

    used = AttemptLedger.count_attempts(student_id, quiz_id)
    return jsonify({
        "attempt": attempt.to_dict(include_answers=True),
        "attempts_used": used,
        "attempts_left": AttemptLedger.attempts_left(attempt.quiz, used),
    }), 200


#List own attempts
@student_bp.route("/quiz/<int:quiz_id>/attempts", methods=["GET"])
@login_required
@role_required("student")
def get_my_attempts(quiz_id):
    student_id = g.user.get("user_id")
    EnrolmentManager.authorize(student_id, quiz_id)
    attempts = AttemptLedger.get_attempts(quiz_id, student_id=student_id)
    return jsonify({"attempts": [a.to_dict() for a in attempts]}), 200
