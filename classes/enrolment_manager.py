from models import db
from models.users import User
from models.courses import Course
from models.course_lessons import Lesson
from models.quizzes import Quiz
from models.enrolments import Enrolment
from classes.exceptions import QuizNotFound, NotEnrolled


class EnrolmentManager:
    @staticmethod
    def enroll_student(course_id, student_id):
        """Enrol a student, reactivating a previous enrolment if one exists."""
        student = db.session.get(User, student_id)
        if not student:
            raise ValueError("Student not found")
        if not student.is_student:
            raise ValueError("User is not a student")

        course = db.session.get(Course, course_id)
        if not course:
            raise ValueError("Course not found")

        enrolment = Enrolment.query.filter_by(course_id=course_id, student_id=student_id).first()
        if enrolment and enrolment.is_active:
            raise ValueError("Student is already enrolled in this course")

        if enrolment:
            enrolment.is_active = True
            enrolment.enrolled_at = db.func.now()
        else:
            enrolment = Enrolment(course_id=course_id, student_id=student_id)
            db.session.add(enrolment)
        db.session.commit()
        return enrolment

    @staticmethod
    def unenroll_student(course_id, student_id):
        enrolment = Enrolment.query.filter_by(course_id=course_id, student_id=student_id, is_active=True).first()
        if not enrolment:
            return False
        enrolment.is_active = False
        db.session.commit()
        return True

    @staticmethod
    def resolve_course_id(quiz_id):
        """Walk quiz -> lesson -> course, raising QuizNotFound on any missing link."""
        row = (
            db.session.query(Course.id)
            .join(Lesson, Lesson.course_id == Course.id)
            .join(Quiz, Quiz.lesson_id == Lesson.id)
            .filter(Quiz.id == quiz_id)
            .first()
        )
        if row is None:
            raise QuizNotFound(f"Quiz {quiz_id} not found")
        return row[0]

    @staticmethod
    def authorize(student_id, quiz_id):
        """Return the active enrolment binding the student to the quiz's course."""
        course_id = EnrolmentManager.resolve_course_id(quiz_id)

        enrolment = Enrolment.query.filter_by(student_id=student_id, course_id=course_id, is_active=True).first()
        if enrolment is None:
            raise NotEnrolled(f"Student {student_id} is not enrolled in the course for quiz {quiz_id}")
        return enrolment
