"""
Main readability analyzer: the entry point for raw or HTML documents.
"""

import logging
import re
from typing import Union

from bs4 import BeautifulSoup

from wordwise.models.readability import ReadabilityAssessment, ReadabilityMetrics, TargetLevel
from .assessment import assess_readability
from .metrics import calculate_readability_metrics

logger = logging.getLogger(__name__)

BLOCK_TAGS = ["p", "div", "li", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"]


class ReadabilityAnalyzer:
    """Readability entry point for callers holding raw or HTML documents."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def clean_html_content(self, html_content: str) -> str:
        """
        Convert editor HTML into plain text for analysis.

        Block elements become blank-line separated paragraphs and <br> becomes
        a newline so paragraph counting still works on the result.
        """
        try:
            soup = BeautifulSoup(html_content, "html.parser")

            for element in soup(["script", "style"]):
                element.decompose()

            for br in soup.find_all("br"):
                br.replace_with("\n")

            for block in soup.find_all(BLOCK_TAGS):
                block.append("\n\n")

            text = soup.get_text()

            # Collapse horizontal whitespace and excess blank lines
            text = re.sub(r"[ \t\xa0]+", " ", text)
            text = re.sub(r" *\n *", "\n", text)
            text = re.sub(r"\n{3,}", "\n\n", text)
            text = text.strip()

            self.logger.debug(f"Cleaned HTML content: {len(text)} characters")
            return text

        except Exception as e:
            self.logger.warning(f"Error cleaning HTML content, falling back to tag stripping: {e}")
            return re.sub(r"<[^>]+>", " ", html_content).strip()

    def _prepare(self, text: str, is_html: bool) -> str:
        return self.clean_html_content(text) if is_html else text

    def analyze_text(
        self,
        text: str,
        target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
        is_html: bool = False,
    ) -> ReadabilityMetrics:
        """
        Perform complete readability analysis on text.

        Args:
            text: Input text (HTML or plain text)
            target_level: Audience the text is judged against
            is_html: Whether the input is HTML that needs cleaning

        Returns:
            ReadabilityMetrics object with all computed scores
        """
        metrics = calculate_readability_metrics(self._prepare(text, is_html), target_level)

        if metrics.word_count == 0:
            self.logger.warning("No words found in text")
        else:
            self.logger.info(
                f"Readability analysis completed: {metrics.word_count} words, "
                f"Flesch: {metrics.flesch_reading_ease:.1f}, grade {metrics.recommended_grade_level}"
            )
        return metrics

    def assess_text(
        self,
        text: str,
        target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
        is_html: bool = False,
    ) -> ReadabilityAssessment:
        """Analyze text and generate feedback (see ``assess_readability``)."""
        return assess_readability(self._prepare(text, is_html), target_level)


# Global analyzer instance
analyzer = ReadabilityAnalyzer()


def analyze_text(
    text: str,
    target_level: Union[TargetLevel, str] = TargetLevel.HIGH_SCHOOL,
    is_html: bool = False,
) -> ReadabilityMetrics:
    """Convenience function for text analysis."""
    return analyzer.analyze_text(text, target_level, is_html)
