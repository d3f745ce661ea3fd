from models.quiz_questions import QUESTION_TYPES

TRUE_FALSE_ANSWERS = ("true", "false")


def validate_length(field_name, value, max_length):
    if len(value) > max_length:
        raise ValueError(f"{field_name} must be {max_length} characters or fewer.")

def validate_positive_int(field_name, value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{field_name} must be a positive integer.")
    return value

def validate_answers(answers):
    """Normalize a submitted answer map to {question_id (str): answer (str)}.

    Keys may be ints or numeric strings. A null answer is dropped, which
    grades the question the same as an omitted one.
    """
    if answers is None:
        return {}
    if not isinstance(answers, dict):
        raise ValueError("Answers must be an object mapping question ids to answers.")

    normalized = {}
    for key, value in answers.items():
        key = str(key).strip()
        if not key.isdigit():
            raise ValueError(f"Invalid question id: {key!r}.")
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"Answer for question {key} must be a string.")
        normalized[key] = value
    return normalized

def validate_question(data):
    """Check the shape of a new quiz question and return its cleaned fields."""
    if not isinstance(data, dict):
        raise ValueError("Question must be an object.")

    question_type = data.get("question_type")
    if question_type not in QUESTION_TYPES:
        raise ValueError(f"question_type must be one of {', '.join(QUESTION_TYPES)}.")

    correct_answer = data.get("correct_answer")
    if not isinstance(correct_answer, str) or not correct_answer.strip():
        raise ValueError("correct_answer is required.")

    points = data.get("points", 1)
    if isinstance(points, bool) or not isinstance(points, int) or points < 0:
        raise ValueError("points must be a whole number of at least 0.")

    options = data.get("options")
    if question_type == "multiple_choice":
        if not isinstance(options, list) or not options or not all(isinstance(o, str) for o in options):
            raise ValueError("'options' must be a non-empty list of strings.")
        if correct_answer not in options:
            raise ValueError("The 'correct_answer' must be one of the options.")
    elif question_type == "true_false":
        if correct_answer.strip().lower() not in TRUE_FALSE_ANSWERS:
            raise ValueError("The 'correct_answer' of a true/false question must be 'true' or 'false'.")
        options = ["true", "false"]
    else:
        options = None

    return {
        "question_type": question_type,
        "correct_answer": correct_answer,
        "points": points,
        "options": options,
    }
