"""
Optimization suggestions keyed by finding description
"""
import json
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import List, Optional, Tuple

from greenforge.analyzer.code_analyzer import CodeAnalyzer
from greenforge.models.finding import AnalysisResult, Description, Finding


@dataclass(frozen=True)
class Suggestion:
    """A remediation hint for one finding"""
    title: str
    description: str
    location: str
    impact: str
    before_example: str
    after_example: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SuggestionTemplate:
    title: str
    description: str
    before_example: str
    after_example: str


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: Tuple[Suggestion, ...] = ()

    def to_dict(self):
        return {'suggestions': [s.to_dict() for s in self.suggestions]}

    def to_json(self, indent=None):
        return json.dumps(self.to_dict(), indent=indent)


TEMPLATES = MappingProxyType({
    Description.NESTED_LOOPS: SuggestionTemplate(
        title="Use divide-and-conquer algorithm",
        description="Replace nested loops with a more efficient algorithm like divide-and-conquer",
        before_example=(
            "for (int i = 0; i < n; i++) {\n"
            "  for (int j = 0; j < n; j++) {\n"
            "    for (int k = 0; k < n; k++) {\n"
            "      // O(n^3) complexity\n"
            "    }\n"
            "  }\n"
            "}"
        ),
        after_example=(
            "// Use divide-and-conquer or dynamic programming\n"
            "// Example: Merge sort, Quick sort, or matrix multiplication algorithms"
        ),
    ),
    Description.STRING_CONCAT_IN_LOOP: SuggestionTemplate(
        title="Use a string builder for string concatenation",
        description="Replace string concatenation with a builder or join to avoid creating intermediate string objects",
        before_example=(
            "String result = \"\";\n"
            "for (int i = 0; i < n; i++) {\n"
            "  result += \"item\" + i;\n"
            "}"
        ),
        after_example=(
            "StringBuilder result = new StringBuilder();\n"
            "for (int i = 0; i < n; i++) {\n"
            "  result.append(\"item\").append(i);\n"
            "}\n"
            "String finalResult = result.toString();"
        ),
    ),
    Description.REPEATED_CALL: SuggestionTemplate(
        title="Cache method call results",
        description="Store the result of expensive method calls in a variable to avoid repeated computation",
        before_example=(
            "for (int i = 0; i < n; i++) {\n"
            "  process(expensiveCalculation());\n"
            "  validate(expensiveCalculation());\n"
            "}"
        ),
        after_example=(
            "for (int i = 0; i < n; i++) {\n"
            "  String result = expensiveCalculation();\n"
            "  process(result);\n"
            "  validate(result);\n"
            "}"
        ),
    ),
})


class OptimizationSuggester:
    """Turn findings into human-readable optimization suggestions"""

    def __init__(self, analyzer: Optional[CodeAnalyzer] = None):
        self._analyzer = analyzer

    @property
    def analyzer(self):
        if self._analyzer is None:
            self._analyzer = CodeAnalyzer()
        return self._analyzer

    def suggest(self, path, language=None) -> SuggestionResult:
        """Analyze `path` and suggest fixes for what was found"""
        return self.suggest_result(self.analyzer.analyze(path, language))

    def suggest_result(self, analysis: AnalysisResult) -> SuggestionResult:
        suggestions = []
        for finding in analysis.findings:
            suggestions.extend(self.suggestions_for(finding))
        return SuggestionResult(tuple(suggestions))

    @staticmethod
    def suggestions_for(finding: Finding) -> List[Suggestion]:
        """Suggestions for one finding; descriptions without a template get none"""
        template = TEMPLATES.get(finding.description)
        if template is None:
            return []

        return [Suggestion(
            title=template.title,
            description=template.description,
            location=finding.location,
            impact=finding.severity.value,
            before_example=template.before_example,
            after_example=template.after_example
        )]
