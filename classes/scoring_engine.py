from collections import namedtuple

QuestionResult = namedtuple("QuestionResult", ["question_id", "submitted_answer", "correct", "points_awarded"])
ScoreSummary = namedtuple("ScoreSummary", ["score", "max_score", "results"])


def normalize_answer(value):
    return value.strip().lower()


class ScoringEngine:
    """Grades answers by trimmed, case-insensitive equality.

    Every question type is graded the same way; the type only changes
    how a question is presented.
    """

    @staticmethod
    def evaluate(question, submitted_answer):
        """Return (correct, points_awarded). A missing answer scores zero."""
        if submitted_answer is None:
            return False, 0
        correct = normalize_answer(submitted_answer) == normalize_answer(question.correct_answer)
        return correct, (question.points if correct else 0)

    @staticmethod
    def score(questions, answers):
        """Grade every question against an answer map keyed by str(question.id)."""
        results = []
        score = 0
        max_score = 0
        for question in questions:
            submitted = answers.get(str(question.id))
            correct, points = ScoringEngine.evaluate(question, submitted)
            results.append(QuestionResult(question.id, submitted, correct, points))
            score += points
            max_score += question.points
        return ScoreSummary(score, max_score, results)
