import re
from typing import Iterable, List

from app.models.schemas import CodebaseFile

MAX_MATCHED_FILES = 20
PATH_MATCH_POINTS = 5


class FileRelevanceMatcher:
    """Bag-of-words linking of journey keywords to repository files."""

    def score(self, keywords: Iterable[str], file: CodebaseFile) -> int:
        lower_path = file.path.lower()
        total = 0
        for keyword in keywords:
            if keyword in lower_path:
                total += PATH_MATCH_POINTS
            total += len(re.findall(rf"\b{re.escape(keyword)}\b", file.content, re.IGNORECASE | re.ASCII))
        return total

    def match(self, keywords: Iterable[str], files: List[CodebaseFile]) -> List[CodebaseFile]:
        keywords = list(keywords)
        scored = [(self.score(keywords, f), f) for f in files]
        relevant = [item for item in scored if item[0] > 0]
        # sorted() is stable, so equal scores keep repository order
        relevant = sorted(relevant, key=lambda item: item[0], reverse=True)
        return [f for _, f in relevant[:MAX_MATCHED_FILES]]
