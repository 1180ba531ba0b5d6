import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

BusinessValue = Literal["low", "medium", "high"]
Complexity = Literal["low", "medium", "high"]
RiskLevel = Literal["low", "medium", "high", "critical"]

GITHUB_URL_PATTERN = re.compile(r"github\.com/[^/]+/[^/]+")


class UserJourney(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    steps: List[str] = Field(min_length=1)

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("steps")
    @classmethod
    def _steps_not_blank(cls, steps: List[str]) -> List[str]:
        for idx, step in enumerate(steps):
            if not step.strip():
                raise ValueError(f"step {idx + 1} must not be blank")
        return steps


class AnalysisRequest(BaseModel):
    githubUrl: str
    userJourneys: List[UserJourney] = Field(min_length=1)
    githubToken: Optional[str] = Field(default=None, min_length=1)

    @field_validator("githubUrl")
    @classmethod
    def _github_url(cls, value: str) -> str:
        if not GITHUB_URL_PATTERN.search(value):
            raise ValueError("must be a GitHub repository URL like https://github.com/<owner>/<repo>")
        return value


class CodebaseFile(BaseModel):
    path: str
    content: str
    size: int = Field(ge=0)


class ScanResult(BaseModel):
    repository_name: str
    checkout_name: str
    files: List[CodebaseFile]


class JourneyComplexityAnalysis(BaseModel):
    filesInvolved: List[str] = Field(max_length=20)
    dependencies: List[str]
    linesOfCode: int = Field(ge=0)
    cyclomaticComplexity: int = Field(ge=0)
    complexity: Complexity


class JourneyRiskAnalysis(BaseModel):
    journey: UserJourney
    businessValue: BusinessValue
    complexity: Complexity
    riskLevel: RiskLevel
    complexityAnalysis: JourneyComplexityAnalysis
    reasoning: str


class AnalysisSummary(BaseModel):
    totalJourneys: int
    highRisk: int
    mediumRisk: int
    lowRisk: int


class RiskOverviewResponse(BaseModel):
    githubUrl: str
    repositoryName: str
    analysisTimestamp: str
    journeyRisks: List[JourneyRiskAnalysis]
    summary: AnalysisSummary
