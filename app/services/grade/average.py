"""Derived grade values. Averages are computed on read and never stored."""


def average_score(activity_score: int, quiz_score: int, exam_score: int) -> float:
    """Mean of the three scores, rounded to two decimals."""
    return round((activity_score + quiz_score + exam_score) / 3, 2)


def format_average(activity_score: int, quiz_score: int, exam_score: int) -> str:
    """Mean of the three scores as text with exactly two decimals (e.g. ``"80.00"``)."""
    return f"{(activity_score + quiz_score + exam_score) / 3:.2f}"
