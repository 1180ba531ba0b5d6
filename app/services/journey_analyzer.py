import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from app.agents.business_value import BusinessValueAnalyzer
from app.agents.risk_engine import RiskEngine
from app.models.schemas import (
    AnalysisRequest,
    AnalysisSummary,
    CodebaseFile,
    JourneyRiskAnalysis,
    RiskOverviewResponse,
    UserJourney,
)
from app.services.complexity_analyzer import ComplexityAnalyzer
from app.services.file_matcher import FileRelevanceMatcher
from app.services.github_scanner import GitHubScanner
from app.services.keyword_extractor import extract_keywords, journey_text

logger = logging.getLogger(__name__)


def build_summary(journey_risks: List[JourneyRiskAnalysis]) -> AnalysisSummary:
    levels = [j.riskLevel for j in journey_risks]
    return AnalysisSummary(
        totalJourneys=len(levels),
        highRisk=sum(1 for level in levels if level in ("critical", "high")),
        mediumRisk=levels.count("medium"),
        lowRisk=levels.count("low"),
    )


class JourneyAnalyzerService:
    """Runs every journey through value classification, code linking and risk combination."""

    def __init__(self, scanner: Optional[GitHubScanner] = None) -> None:
        self.scanner = scanner or GitHubScanner()
        self.business_value_analyzer = BusinessValueAnalyzer()
        self.file_matcher = FileRelevanceMatcher()
        self.complexity_analyzer = ComplexityAnalyzer()
        self.risk_engine = RiskEngine()

    def analyze_journey(self, journey: UserJourney, files: List[CodebaseFile]) -> JourneyRiskAnalysis:
        business_value = self.business_value_analyzer.analyze(journey)
        value_reasoning = self.business_value_analyzer.reasoning(journey, business_value)

        keywords = extract_keywords(journey_text(journey))
        matched = self.file_matcher.match(keywords, files)
        complexity_analysis = self.complexity_analyzer.estimate(matched)

        risk_level = self.risk_engine.combine(business_value, complexity_analysis.complexity)
        risk_reasoning = self.risk_engine.reasoning(business_value, complexity_analysis.complexity, risk_level)

        reasoning = (
            f"{value_reasoning}\n{risk_reasoning}\n\n"
            f"Complexity Details: {len(complexity_analysis.filesInvolved)} files involved, "
            f"{complexity_analysis.linesOfCode} lines of code, "
            f"{len(complexity_analysis.dependencies)} dependencies, "
            f"cyclomatic complexity of {complexity_analysis.cyclomaticComplexity}."
        )
        return JourneyRiskAnalysis(
            journey=journey,
            businessValue=business_value,
            complexity=complexity_analysis.complexity,
            riskLevel=risk_level,
            complexityAnalysis=complexity_analysis,
            reasoning=reasoning,
        )

    def run(
        self, files: List[CodebaseFile], journeys: List[UserJourney]
    ) -> Tuple[List[JourneyRiskAnalysis], AnalysisSummary]:
        if files is None or journeys is None:
            raise ValueError("files and journeys are required")

        journey_risks = []
        for journey in journeys:
            result = self.analyze_journey(journey, files)
            logger.info(
                "Analyzed journey",
                extra={
                    "journey": journey.name,
                    "business_value": result.businessValue,
                    "complexity": result.complexity,
                    "risk": result.riskLevel,
                    "files": len(result.complexityAnalysis.filesInvolved),
                },
            )
            journey_risks.append(result)
        return journey_risks, build_summary(journey_risks)

    def analyze(self, request: AnalysisRequest) -> RiskOverviewResponse:
        logger.info(
            "Starting journey analysis",
            extra={"repo": request.githubUrl, "journeys": len(request.userJourneys)},
        )
        scan = self.scanner.scan_repository(request.githubUrl, request.githubToken)
        try:
            journey_risks, summary = self.run(scan.files, request.userJourneys)
        finally:
            self.scanner.cleanup(scan.checkout_name)

        return RiskOverviewResponse(
            githubUrl=request.githubUrl,
            repositoryName=scan.repository_name,
            analysisTimestamp=datetime.now(timezone.utc).isoformat(),
            journeyRisks=journey_risks,
            summary=summary,
        )
