from typing import List, Tuple

from app.models.schemas import BusinessValue, UserJourney
from app.services.keyword_extractor import journey_text

HIGH_VALUE_KEYWORDS: Tuple[str, ...] = (
    "payment", "checkout", "purchase", "transaction", "revenue",
    "subscription", "billing", "order", "sale", "critical",
    "security", "authentication", "login", "signup", "register",
    "onboarding", "conversion", "core", "essential", "critical path",
)

MEDIUM_VALUE_KEYWORDS: Tuple[str, ...] = (
    "search", "filter", "browse", "view", "display", "list",
    "notification", "settings", "profile", "edit", "update",
    "share", "export", "report", "dashboard", "analytics",
)

LOW_VALUE_KEYWORDS: Tuple[str, ...] = (
    "help", "documentation", "tutorial", "tooltip", "faq",
    "about", "contact", "footer", "header", "navigation",
    "theme", "preference", "cosmetic", "ui enhancement",
)


class BusinessValueAnalyzer:
    """Keyword-based business value tiering for user journeys.

    Terms are matched as substrings of the lower-cased journey text, so
    "order" also hits "reorder". The first tier with any hit wins, in the
    order high, medium, low; a journey with no hit at all is medium.
    """

    keywords_by_value = {
        "high": HIGH_VALUE_KEYWORDS,
        "medium": MEDIUM_VALUE_KEYWORDS,
        "low": LOW_VALUE_KEYWORDS,
    }

    def matched_keywords(self, journey: UserJourney, value: BusinessValue) -> List[str]:
        text = journey_text(journey).lower()
        return [keyword for keyword in self.keywords_by_value[value] if keyword in text]

    def analyze(self, journey: UserJourney) -> BusinessValue:
        for value in ("high", "medium", "low"):
            if self.matched_keywords(journey, value):
                return value
        return "medium"

    def reasoning(self, journey: UserJourney, value: BusinessValue) -> str:
        matched = ", ".join(self.matched_keywords(journey, value))
        if value == "high":
            return f"High business value: Journey involves critical business functions ({matched})"
        if value == "medium":
            if matched:
                return f"Medium business value: Journey involves important user functions ({matched})"
            return "Medium business value: Standard user journey without critical business impact"
        return f"Low business value: Journey involves non-critical functions ({matched})"
