from typing import Dict

from app.models.schemas import BusinessValue, Complexity, RiskLevel

RISK_MATRIX: Dict[str, Dict[str, str]] = {
    "high": {"low": "medium", "medium": "high", "high": "critical"},
    "medium": {"low": "low", "medium": "medium", "high": "high"},
    "low": {"low": "low", "medium": "low", "high": "medium"},
}


class RiskEngine:
    value_impact = {
        "high": "This journey has high business value and directly impacts revenue or critical operations.",
        "medium": "This journey has moderate business value and supports important user functions.",
        "low": "This journey has low business value and involves non-critical features.",
    }

    complexity_impact = {
        "high": "The high code complexity means changes are risky and bugs are more likely.",
        "medium": "The moderate complexity requires careful testing when making changes.",
        "low": "The low complexity makes this journey relatively safe to modify.",
    }

    def combine(self, value: BusinessValue, complexity: Complexity) -> RiskLevel:
        return RISK_MATRIX[value][complexity]

    def reasoning(self, value: BusinessValue, complexity: Complexity, risk: RiskLevel) -> str:
        return f"{risk.upper()} RISK: {self.value_impact[value]} {self.complexity_impact[complexity]}"
