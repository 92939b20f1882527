import random

import pytest

from difficulty_app import DifficultyResult, IssueRecord, calculate_difficulty
from difficulty_app.core.scoring import discussion_score, length_score, score_to_level


def test_empty_record():
    result = calculate_difficulty(IssueRecord())
    assert result == DifficultyResult(level="easy", score=20, explanation="Easy: low discussion, concise scope")


def test_beginner_issue():
    record = IssueRecord.build(labels=["good first issue"], comment_count=1, body_length=100)
    result = calculate_difficulty(record)
    assert result.score == 7
    assert result.level == "easy"
    assert result.explanation == "Easy: beginner-friendly labels, low discussion, concise scope"


def test_security_issue():
    record = IssueRecord.build(labels=["security"], comment_count=25, body_length=3000)
    result = calculate_difficulty(record)
    assert result.score == 93
    assert result.level == "hard"
    assert result.explanation == "Hard: complex labels, active discussion, detailed requirements"


def test_mid_range_issue_has_no_phrases():
    record = IssueRecord.build(labels=[], comment_count=5, body_length=1000)
    result = calculate_difficulty(record)
    assert result.score == 47
    assert result.level == "medium"
    assert result.explanation == "Medium difficulty"


def test_missing_fields_default_to_zero():
    assert calculate_difficulty(None) == calculate_difficulty(IssueRecord())
    assert calculate_difficulty({}) == calculate_difficulty(IssueRecord())
    assert calculate_difficulty(IssueRecord.build(None, None, None)) == calculate_difficulty(IssueRecord())


def test_malformed_fields_do_not_raise():
    record = IssueRecord(labels=None, comment_count=None, body_length=-5)  # type: ignore[arg-type]
    assert calculate_difficulty(record).score == 20
    result = calculate_difficulty({"labels": 42, "comment_count": "many", "body_length": float("nan")})
    assert result.score == 20


def _random_records(n=300, seed=7):
    rng = random.Random(seed)
    pool = ["bug", "docs", "security", "good first issue", "performance", "ui", "help wanted"]
    for _ in range(n):
        yield IssueRecord.build(
            labels=rng.sample(pool, rng.randint(0, 3)),
            comment_count=rng.randint(0, 40),
            body_length=rng.randint(0, 8000),
        )


def test_deterministic():
    for record in _random_records(50):
        assert calculate_difficulty(record) == calculate_difficulty(record)


def test_score_range_and_level_consistency():
    for record in _random_records():
        result = calculate_difficulty(record)
        assert 0 <= result.score <= 100
        assert isinstance(result.score, int)
        assert result.level == score_to_level(result.score)
        assert result.explanation


def test_more_comments_never_lower_score():
    scores = [
        calculate_difficulty(IssueRecord.build(labels=["bug"], comment_count=c, body_length=800)).score
        for c in range(0, 40)
    ]
    assert all(a <= b for a, b in zip(scores, scores[1:]))
    subs = [discussion_score(c) for c in range(0, 40)]
    assert all(a <= b for a, b in zip(subs, subs[1:]))


def test_longer_body_never_lowers_score():
    scores = [
        calculate_difficulty(IssueRecord.build(comment_count=4, body_length=n)).score for n in range(0, 6000, 50)
    ]
    assert all(a <= b for a, b in zip(scores, scores[1:]))
    subs = [length_score(n) for n in range(0, 6000, 50)]
    assert all(a <= b for a, b in zip(subs, subs[1:]))


def test_easy_label_wins_over_hard_label():
    both = calculate_difficulty(IssueRecord.build(labels=["security", "good first issue"]))
    easy = calculate_difficulty(IssueRecord.build(labels=["good first issue"]))
    assert both == easy
    assert both.explanation.startswith("Easy: beginner-friendly labels")


@pytest.mark.parametrize(
    "record,expected",
    [
        (IssueRecord.build(labels=["hard"], comment_count=30, body_length=10), "Hard: complex labels, active discussion, concise scope"),
        (IssueRecord.build(labels=["easy"], comment_count=5, body_length=5000), "Medium: beginner-friendly labels, detailed requirements"),
        (IssueRecord.build(comment_count=12, body_length=900), "Medium: active discussion"),
    ],
)
def test_explanation_phrase_order(record, expected):
    assert calculate_difficulty(record).explanation == expected


def test_result_as_dict():
    result = calculate_difficulty(IssueRecord())
    assert result.as_dict() == {"level": "easy", "score": 20, "explanation": "Easy: low discussion, concise scope"}


def test_huge_counts_reach_capped_tail():
    result = calculate_difficulty(IssueRecord(comment_count=10**400))
    assert discussion_score(10**400) == 100
    assert result.score == 50
    assert result.level == "medium"
    assert result.explanation == "Medium: active discussion, concise scope"

    result = calculate_difficulty(IssueRecord.build(body_length=10**400))
    assert length_score(10**400) == 100
    assert result.score == 50
    assert result.explanation == "Medium: low discussion, detailed requirements"
