import pytest

from app import create_app
from models import db, User, Course, Lesson, Enrolment, Quiz, QuizQuestion, QuizAttempt
from utils.tokens import get_jwt_token


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class Factory:
    """Builds persisted rows with sensible defaults."""

    def __init__(self):
        self._seq = 0

    def _next(self):
        self._seq += 1
        return self._seq

    def _save(self, obj):
        db.session.add(obj)
        db.session.commit()
        return obj

    def user(self, role="student", **kwargs):
        n = self._next()
        kwargs.setdefault("username", f"{role}{n}")
        kwargs.setdefault("email", f"{role}{n}@example.com")
        kwargs.setdefault("full_name", f"{role.title()} {n}")
        kwargs.setdefault("password_hash", "not-a-real-hash")
        return self._save(User(role=role, **kwargs))

    def student(self, **kwargs):
        return self.user("student", **kwargs)

    def teacher(self, **kwargs):
        return self.user("teacher", **kwargs)

    def course(self, teacher=None, **kwargs):
        teacher = teacher or self.teacher()
        kwargs.setdefault("title", f"Course {self._next()}")
        return self._save(Course(teacher_id=teacher.id, **kwargs))

    def lesson(self, course=None, **kwargs):
        course = course or self.course()
        kwargs.setdefault("title", f"Lesson {self._next()}")
        return self._save(Lesson(course_id=course.id, **kwargs))

    def quiz(self, lesson=None, **kwargs):
        lesson = lesson or self.lesson()
        kwargs.setdefault("title", f"Quiz {self._next()}")
        return self._save(Quiz(lesson_id=lesson.id, **kwargs))

    def question(self, quiz, correct_answer, points=1, question_type="short_answer", **kwargs):
        kwargs.setdefault("question_text", f"Question {self._next()}")
        kwargs.setdefault("order_index", QuizQuestion.get_next_order(quiz.id))
        return self._save(QuizQuestion(
            quiz_id=quiz.id,
            correct_answer=correct_answer,
            points=points,
            question_type=question_type,
            **kwargs,
        ))

    def enrol(self, student, course, is_active=True):
        return self._save(Enrolment(student_id=student.id, course_id=course.id, is_active=is_active))

    def open_attempt(self, student, quiz):
        return self._save(QuizAttempt(
            student_id=student.id,
            quiz_id=quiz.id,
            max_score=0,
            completed=False,
        ))

    def completed_attempt(self, student, quiz, score=0, max_score=0):
        done = QuizAttempt.query.filter_by(student_id=student.id, quiz_id=quiz.id, completed=True).count()
        return self._save(QuizAttempt(
            student_id=student.id,
            quiz_id=quiz.id,
            score=score,
            max_score=max_score,
            completed=True,
            attempt_number=done + 1,
        ))


@pytest.fixture
def factory(app):
    return Factory()


@pytest.fixture
def three_question_quiz(factory):
    """A 30 point quiz: "4" (10), "true" (5), "Paris" (15)."""
    quiz = factory.quiz()
    questions = [
        factory.question(quiz, "4", points=10, question_type="multiple_choice", options=["3", "4", "5"]),
        factory.question(quiz, "true", points=5, question_type="true_false", options=["true", "false"]),
        factory.question(quiz, "Paris", points=15),
    ]
    return quiz, questions


@pytest.fixture
def enrolled_student(factory, three_question_quiz):
    quiz, _ = three_question_quiz
    student = factory.student()
    factory.enrol(student, quiz.lesson.course)
    return student


@pytest.fixture
def login(client):
    """Authenticate the test client as the given user."""
    def _login(user):
        token = get_jwt_token({"user_id": user.id, "username_or_email": user.username, "role": user.role})
        client.set_cookie("access_token", token)
        return client
    return _login
