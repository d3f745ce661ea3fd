import pytest

from classes.validators import validate_answers, validate_question, validate_positive_int


def test_validate_answers_normalizes_keys_to_strings():
    assert validate_answers({1: "a", "2": "b"}) == {"1": "a", "2": "b"}


def test_validate_answers_drops_null_answers():
    assert validate_answers({"1": None, "2": "b"}) == {"2": "b"}


def test_validate_answers_accepts_missing_map():
    assert validate_answers(None) == {}


@pytest.mark.parametrize("answers", [["a"], "a", 3])
def test_validate_answers_rejects_non_objects(answers):
    with pytest.raises(ValueError):
        validate_answers(answers)


def test_validate_answers_rejects_non_numeric_keys():
    with pytest.raises(ValueError, match="Invalid question id"):
        validate_answers({"q1": "4"})


def test_validate_answers_rejects_non_string_values():
    with pytest.raises(ValueError, match="must be a string"):
        validate_answers({"1": 4})


def test_validate_question_multiple_choice():
    fields = validate_question({
        "question_type": "multiple_choice",
        "correct_answer": "4",
        "options": ["3", "4"],
        "points": 10,
    })
    assert fields == {"question_type": "multiple_choice", "correct_answer": "4", "points": 10, "options": ["3", "4"]}


def test_validate_question_multiple_choice_answer_must_be_an_option():
    with pytest.raises(ValueError, match="one of the options"):
        validate_question({"question_type": "multiple_choice", "correct_answer": "9", "options": ["3", "4"]})


def test_validate_question_true_false_sets_options():
    fields = validate_question({"question_type": "true_false", "correct_answer": "False"})
    assert fields["options"] == ["true", "false"]
    assert fields["points"] == 1


def test_validate_question_true_false_rejects_other_answers():
    with pytest.raises(ValueError):
        validate_question({"question_type": "true_false", "correct_answer": "maybe"})


def test_validate_question_short_answer_drops_options():
    fields = validate_question({"question_type": "short_answer", "correct_answer": "Paris", "options": ["x"]})
    assert fields["options"] is None


@pytest.mark.parametrize("points", [-1, 1.5, "3", True])
def test_validate_question_points_must_be_non_negative_whole_numbers(points):
    with pytest.raises(ValueError, match="points"):
        validate_question({"question_type": "short_answer", "correct_answer": "a", "points": points})


def test_validate_question_rejects_unknown_type():
    with pytest.raises(ValueError, match="question_type"):
        validate_question({"question_type": "essay", "correct_answer": "a"})


def test_validate_positive_int():
    assert validate_positive_int("max_attempts", None) is None
    assert validate_positive_int("max_attempts", 3) == 3
    with pytest.raises(ValueError):
        validate_positive_int("max_attempts", 0)
