from flask import Blueprint, jsonify, g, request, current_app
from utils.helpers import sanitize_text
from utils.utils import login_required, role_required

from models.users import db
from models.course_lessons import Lesson
from models.quizzes import Quiz
from models.quiz_questions import QuizQuestion
from classes.attempt_ledger import AttemptLedger
from classes.exceptions import QuizError, QuizNotFound
from classes.validators import validate_positive_int, validate_question, validate_length

# Lecturers' blueprint
lecturer_bp = Blueprint("lecturer", __name__)


@lecturer_bp.errorhandler(QuizError)
def handle_quiz_error(error):
    return jsonify(error.to_dict()), error.status_code


@lecturer_bp.errorhandler(ValueError)
def handle_bad_input(error):
    return jsonify({"error": str(error)}), 400


def get_quiz_or_404(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        raise QuizNotFound(f"Quiz {quiz_id} not found")
    return quiz


#CREATE a New Quiz
# --------------------------------------------------------------------------------
@lecturer_bp.route("/lessons/<int:lesson_id>/quizzes", methods=["POST"])
@login_required
@role_required("teacher", "admin")
def create_quiz(lesson_id):
    lesson = db.session.get(Lesson, lesson_id)
    if not lesson:
        return jsonify({"error": "Lesson not found"}), 404

    data = request.get_json(silent=True) or {}

    title = sanitize_text(data.get("title"))
    if not title:
        return jsonify({"error": "Title is required"}), 400
    validate_length("title", title, 255)

    new_quiz = Quiz(
        lesson_id=lesson.id,
        title=title,
        description=sanitize_text(data.get("description")) or None,
        time_limit=validate_positive_int("time_limit", data.get("time_limit")),
        max_attempts=validate_positive_int("max_attempts", data.get("max_attempts")),
    )

    db.session.add(new_quiz)
    db.session.commit()
    current_app.logger.info("User %s created quiz %s in lesson %s", g.user.get("user_id"), new_quiz.id, lesson.id)

    return jsonify({"message": "Quiz created successfully", "quiz": new_quiz.to_dict(include_answers=True)}), 201


#ADD a Question to a Quiz
# --------------------------------------------------------------------------------
@lecturer_bp.route("/quizzes/<int:quiz_id>/questions", methods=["POST"])
@login_required
@role_required("teacher", "admin")
def add_question(quiz_id):
    quiz = get_quiz_or_404(quiz_id)
    data = request.get_json(silent=True) or {}

    question_text = sanitize_text(data.get("question_text"))
    if not question_text:
        return jsonify({"error": "question_text is required"}), 400

    fields = validate_question(data)
    order_index = data.get("order_index")
    if order_index is None:
        order_index = QuizQuestion.get_next_order(quiz.id)
    else:
        validate_positive_int("order_index", order_index)

    question = QuizQuestion(quiz_id=quiz.id, question_text=question_text, order_index=order_index, **fields)
    db.session.add(question)
    db.session.commit()

    return jsonify({"message": "Question added successfully", "question": question.to_dict(include_answer=True)}), 201


#Fetch one single quiz
# --------------------------------------------------------------------------------
@lecturer_bp.route("/quizzes/<int:quiz_id>", methods=["GET"])
@login_required
@role_required("teacher", "admin")
def get_quiz(quiz_id):
    quiz = get_quiz_or_404(quiz_id)
    return jsonify(quiz.to_dict(include_answers=True)), 200


#Fetch all attempts of a quiz
# --------------------------------------------------------------------------------
@lecturer_bp.route("/quizzes/<int:quiz_id>/attempts", methods=["GET"])
@login_required
@role_required("teacher", "admin")
def get_quiz_attempts(quiz_id):
    get_quiz_or_404(quiz_id)

    student_id = request.args.get("student_id", type=int)
    attempts = AttemptLedger.get_attempts(quiz_id, student_id=student_id)
    return jsonify({"attempts": [a.to_dict(include_answers=True) for a in attempts]}), 200
