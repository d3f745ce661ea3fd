from datetime import datetime
from models import db
from utils.helpers import format_datetime

class QuizAttempt(db.Model):
    __tablename__ = "quiz_attempts"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False)
    score = db.Column(db.Integer, nullable=True)
    max_score = db.Column(db.Integer, nullable=False, default=0)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    # True while open, NULL once completed. NULLs never collide in the
    # unique constraint below, so only open rows are limited to one per pair.
    open_slot = db.Column(db.Boolean, nullable=True)
    # Ordinal among the pair's completed attempts, set when the attempt completes.
    # Two requests that passed the limit check on the same count collide here.
    attempt_number = db.Column(db.Integer, nullable=True)
    started_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    completed_at = db.Column(db.DateTime, nullable=True)

    quiz = db.relationship("Quiz", backref=db.backref("attempts", lazy=True))
    student = db.relationship("User", backref=db.backref("quiz_attempts", lazy=True))
    answers = db.relationship(
        "QuizAttemptAnswer",
        back_populates="attempt",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="QuizAttemptAnswer.id",
    )

    __table_args__ = (
        db.UniqueConstraint("student_id", "quiz_id", "open_slot", name="unique_open_attempt"),
        db.UniqueConstraint("student_id", "quiz_id", "attempt_number", name="unique_attempt_number"),
        db.CheckConstraint("score IS NULL OR (score >= 0 AND score <= max_score)", name="check_score_range"),
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("completed", False)
        kwargs["open_slot"] = None if kwargs["completed"] else True
        super().__init__(**kwargs)

    def to_dict(self, include_answers=False):
        data = {
            "id": self.id,
            "student_id": self.student_id,
            "quiz_id": self.quiz_id,
            "score": self.score,
            "max_score": self.max_score,
            "attempt_number": self.attempt_number,
            "completed": self.completed,
            "started_at": format_datetime(self.started_at),
            "completed_at": format_datetime(self.completed_at),
        }
        if include_answers:
            data["answers"] = [answer.to_dict() for answer in self.answers]
        return data
