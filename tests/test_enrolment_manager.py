import pytest

from classes.enrolment_manager import EnrolmentManager
from classes.exceptions import NotEnrolled, QuizNotFound
from models import Enrolment


def test_enroll_student_creates_active_enrolment(factory):
    student = factory.student()
    course = factory.course()

    enrolment = EnrolmentManager.enroll_student(course.id, student.id)

    assert enrolment.is_active
    assert enrolment.course_id == course.id


def test_enroll_student_twice_fails(factory):
    student = factory.student()
    course = factory.course()
    EnrolmentManager.enroll_student(course.id, student.id)

    with pytest.raises(ValueError, match="already enrolled"):
        EnrolmentManager.enroll_student(course.id, student.id)


def test_enroll_requires_student_role(factory):
    teacher = factory.teacher()
    course = factory.course()

    with pytest.raises(ValueError, match="not a student"):
        EnrolmentManager.enroll_student(course.id, teacher.id)


def test_enroll_requires_existing_course(factory):
    student = factory.student()

    with pytest.raises(ValueError, match="Course not found"):
        EnrolmentManager.enroll_student(12345, student.id)


def test_unenroll_then_reenroll_reuses_the_row(factory):
    student = factory.student()
    course = factory.course()
    first = EnrolmentManager.enroll_student(course.id, student.id)

    assert EnrolmentManager.unenroll_student(course.id, student.id) is True
    assert EnrolmentManager.unenroll_student(course.id, student.id) is False

    again = EnrolmentManager.enroll_student(course.id, student.id)
    assert again.id == first.id
    assert again.is_active
    assert Enrolment.query.count() == 1


def test_authorize_returns_enrolment(factory, three_question_quiz, enrolled_student):
    quiz, _ = three_question_quiz

    enrolment = EnrolmentManager.authorize(enrolled_student.id, quiz.id)

    assert enrolment.student_id == enrolled_student.id
    assert enrolment.course_id == quiz.lesson.course_id


def test_authorize_unknown_quiz(factory):
    student = factory.student()

    with pytest.raises(QuizNotFound):
        EnrolmentManager.authorize(student.id, 999)


def test_authorize_student_of_another_course(factory, three_question_quiz):
    quiz, _ = three_question_quiz
    student = factory.student()
    factory.enrol(student, factory.course())

    with pytest.raises(NotEnrolled):
        EnrolmentManager.authorize(student.id, quiz.id)


def test_authorize_unknown_student(three_question_quiz):
    quiz, _ = three_question_quiz

    with pytest.raises(NotEnrolled):
        EnrolmentManager.authorize(4242, quiz.id)


def test_authorize_inactive_enrolment(factory, three_question_quiz):
    quiz, _ = three_question_quiz
    student = factory.student()
    factory.enrol(student, quiz.lesson.course, is_active=False)

    with pytest.raises(NotEnrolled):
        EnrolmentManager.authorize(student.id, quiz.id)


def test_enrolment_to_dict(factory):
    student = factory.student()
    course = factory.course()

    data = EnrolmentManager.enroll_student(course.id, student.id).to_dict()

    assert data["student_id"] == student.id
    assert data["course_id"] == course.id
    assert data["is_active"] is True
    assert data["completed_at"] is None
