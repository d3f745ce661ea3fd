from models.quiz_questions import QuizQuestion
from classes.exceptions import NoQuestions


class QuestionBank:
    @staticmethod
    def load_questions(quiz_id):
        """Ordered questions of a quiz. An empty quiz cannot be attempted."""
        questions = (
            QuizQuestion.query
            .filter_by(quiz_id=quiz_id)
            .order_by(QuizQuestion.order_index, QuizQuestion.id)
            .all()
        )
        if not questions:
            raise NoQuestions(f"No questions found for quiz {quiz_id}")
        return questions
