from models import db
from utils.helpers import format_datetime

class Quiz(db.Model):
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    lesson_id = db.Column(db.Integer, db.ForeignKey("course_lessons.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    time_limit = db.Column(db.Integer, nullable=True)  # minutes, advisory only
    max_attempts = db.Column(db.Integer, nullable=True)  # None means unlimited
    created_at = db.Column(db.DateTime, default=db.func.now(), nullable=False)

    lesson = db.relationship("Lesson", back_populates="quizzes")
    questions = db.relationship(
        "QuizQuestion",
        back_populates="quiz",
        order_by="QuizQuestion.order_index",
        cascade="all, delete-orphan",
    )

    @property
    def total_questions(self):
        """Dynamically count total questions without storing in the database"""
        return len(self.questions)

    def __repr__(self):
        return f"<Quiz {self.title}>"

    def to_dict(self, include_answers=False):
        return {
            "id": self.id,
            "lesson_id": self.lesson_id,
            "title": self.title,
            "description": self.description,
            "time_limit": self.time_limit,
            "max_attempts": self.max_attempts,
            "total_questions": self.total_questions,
            "created_at": format_datetime(self.created_at),
            "questions": [q.to_dict(include_answer=include_answers) for q in self.questions],
        }
