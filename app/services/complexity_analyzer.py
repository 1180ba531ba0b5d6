"""Text-level complexity heuristics over the files linked to a journey.

None of this parses code. Line counts, import capture and decision point
tallies are regex scans that work the same way for any language, and the
resulting numbers are only meant as a directional signal.
"""

import re
from typing import List, Set, Tuple

from app.models.schemas import CodebaseFile, Complexity, JourneyComplexityAnalysis

COMMENT_PREFIXES = ("//", "/*", "*")

IMPORT_PATTERNS = [
    re.compile(r"import\s+.*from\s+['\"]([^'\"]+)['\"]"),
    re.compile(r"require\(['\"]([^'\"]+)['\"]\)"),
    re.compile(r"@import\s+['\"]([^'\"]+)['\"]"),
    re.compile(r"import\s+['\"]([^'\"]+)['\"]"),
]

DECISION_POINT_PATTERNS = [
    re.compile(r"\bif\s*\("),
    re.compile(r"\bfor\s*\("),
    re.compile(r"\bwhile\s*\("),
    re.compile(r"\bcase\s+"),
    re.compile(r"\?.*:"),
    re.compile(r"&&|\|\|"),
    re.compile(r"\bcatch\s*\("),
]

# Highest first: exceeding the first limit is worth 3 points, the second 2, the third 1.
FILE_COUNT_THRESHOLDS: Tuple[int, int, int] = (15, 8, 3)
LINES_OF_CODE_THRESHOLDS: Tuple[int, int, int] = (2000, 1000, 500)
DEPENDENCY_THRESHOLDS: Tuple[int, int, int] = (20, 10, 5)
CYCLOMATIC_THRESHOLDS: Tuple[int, int, int] = (100, 50, 20)

HIGH_COMPLEXITY_SCORE = 8
MEDIUM_COMPLEXITY_SCORE = 4


def count_lines_of_code(content: str) -> int:
    count = 0
    for line in content.split("\n"):
        stripped = line.strip().lstrip("\ufeff").lstrip()
        if stripped and not stripped.startswith(COMMENT_PREFIXES):
            count += 1
    return count


def find_dependencies(content: str) -> Set[str]:
    found: Set[str] = set()
    for pattern in IMPORT_PATTERNS:
        found.update(match for match in pattern.findall(content) if match)
    return found


def count_decision_points(content: str) -> int:
    return sum(len(pattern.findall(content)) for pattern in DECISION_POINT_PATTERNS)


def threshold_points(value: int, thresholds: Tuple[int, int, int]) -> int:
    for idx, limit in enumerate(thresholds):
        if value > limit:
            return len(thresholds) - idx
    return 0


def determine_complexity(
    file_count: int,
    lines_of_code: int,
    dependency_count: int,
    cyclomatic_complexity: int,
) -> Complexity:
    score = (
        threshold_points(file_count, FILE_COUNT_THRESHOLDS)
        + threshold_points(lines_of_code, LINES_OF_CODE_THRESHOLDS)
        + threshold_points(dependency_count, DEPENDENCY_THRESHOLDS)
        + threshold_points(cyclomatic_complexity, CYCLOMATIC_THRESHOLDS)
    )
    if score >= HIGH_COMPLEXITY_SCORE:
        return "high"
    if score >= MEDIUM_COMPLEXITY_SCORE:
        return "medium"
    return "low"


class ComplexityAnalyzer:
    def estimate(self, matched_files: List[CodebaseFile]) -> JourneyComplexityAnalysis:
        lines_of_code = 0
        dependencies: Set[str] = set()
        cyclomatic = 0
        for f in matched_files:
            lines_of_code += count_lines_of_code(f.content)
            dependencies.update(find_dependencies(f.content))
            cyclomatic += count_decision_points(f.content)

        return JourneyComplexityAnalysis(
            filesInvolved=[f.path for f in matched_files],
            dependencies=sorted(dependencies),
            linesOfCode=lines_of_code,
            cyclomaticComplexity=cyclomatic,
            complexity=determine_complexity(len(matched_files), lines_of_code, len(dependencies), cyclomatic),
        )
