import pytest

from app.agents.risk_engine import RiskEngine


@pytest.mark.parametrize(
    "value, complexity, expected",
    [
        ("high", "low", "medium"),
        ("high", "medium", "high"),
        ("high", "high", "critical"),
        ("medium", "low", "low"),
        ("medium", "medium", "medium"),
        ("medium", "high", "high"),
        ("low", "low", "low"),
        ("low", "medium", "low"),
        ("low", "high", "medium"),
    ],
)
def test_combine_follows_risk_matrix(value, complexity, expected):
    assert RiskEngine().combine(value, complexity) == expected


def test_reasoning_prefixes_upper_case_risk():
    reasoning = RiskEngine().reasoning("high", "high", "critical")

    assert reasoning == (
        "CRITICAL RISK: This journey has high business value and directly impacts revenue or critical operations. "
        "The high code complexity means changes are risky and bugs are more likely."
    )


def test_reasoning_for_low_value_low_complexity():
    reasoning = RiskEngine().reasoning("low", "low", "low")

    assert reasoning.startswith("LOW RISK: This journey has low business value")
    assert reasoning.endswith("The low complexity makes this journey relatively safe to modify.")
