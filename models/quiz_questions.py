from models import db

QUESTION_TYPES = ("multiple_choice", "true_false", "short_answer")


class QuizQuestion(db.Model):
    __tablename__ = "quiz_questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False)
    question_text = db.Column(db.Text, nullable=False)
    question_type = db.Column(db.Enum(*QUESTION_TYPES, name="question_type"), nullable=False)
    # Presentation only, answers are graded against correct_answer
    options = db.Column(db.JSON, nullable=True)
    correct_answer = db.Column(db.Text, nullable=False)
    points = db.Column(db.Integer, nullable=False, default=1)
    order_index = db.Column(db.Integer, nullable=False, default=1)

    quiz = db.relationship("Quiz", back_populates="questions")

    __table_args__ = (
        db.CheckConstraint("points >= 0", name="check_points_non_negative"),
    )

    @staticmethod
    def get_next_order(quiz_id):
        last_question = QuizQuestion.query.filter_by(quiz_id=quiz_id).order_by(QuizQuestion.order_index.desc()).first()
        return (last_question.order_index + 1) if last_question else 1

    def to_dict(self, include_answer=False):
        data = {
            "id": self.id,
            "quiz_id": self.quiz_id,
            "question_text": self.question_text,
            "question_type": self.question_type,
            "options": self.options,
            "points": self.points,
            "order_index": self.order_index,
        }
        if include_answer:
            data["correct_answer"] = self.correct_answer
        return data
