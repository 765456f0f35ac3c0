"""
Findings reported by the pattern matchers and the per-run result set
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Tuple


class Severity(Enum):
    """How much a finding is expected to cost at runtime"""
    HIGH = 'HIGH'
    MEDIUM = 'MEDIUM'
    LOW = 'LOW'


class Description(Enum):
    """Closed set of inefficiency classes the engine reports"""
    NESTED_LOOPS = 'NestedLoops'
    STRING_CONCAT_IN_LOOP = 'StringConcatInLoop'
    REPEATED_CALL = 'RepeatedCall'


# Fixed description -> severity mapping; findings never carry their own severity
SEVERITY_BY_DESCRIPTION = MappingProxyType({
    Description.NESTED_LOOPS: Severity.HIGH,
    Description.STRING_CONCAT_IN_LOOP: Severity.MEDIUM,
    Description.REPEATED_CALL: Severity.MEDIUM,
})

TITLES = MappingProxyType({
    Description.NESTED_LOOPS: 'Deep nested loops detected',
    Description.STRING_CONCAT_IN_LOOP: 'String concatenation in loop',
    Description.REPEATED_CALL: 'Repeated method call detected',
})


@dataclass(frozen=True)
class Finding:
    """One reported inefficiency occurrence"""
    description: Description
    file: str
    line: int
    details: str
    column: int = 0

    @property
    def severity(self) -> Severity:
        return SEVERITY_BY_DESCRIPTION[self.description]

    @property
    def title(self) -> str:
        return TITLES[self.description]

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"

    def to_dict(self):
        return {
            'description': self.description.value,
            'title': self.title,
            'location': self.location,
            'file': self.file,
            'line': self.line,
            'column': self.column,
            'severity': self.severity.value,
            'details': self.details,
        }

    def __str__(self):
        return f"{self.title} at {self.location} ({self.severity.value}): {self.details}"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Findings of one analysis run

    Findings keep discovery order: file, then routine, then matcher.
    `files_skipped` lists files that could not be read or parsed; they are
    never counted in `files_analyzed`.
    """
    findings: Tuple[Finding, ...] = ()
    files_analyzed: int = 0
    files_skipped: Tuple[str, ...] = ()

    @classmethod
    def merge(cls, results: Iterable['AnalysisResult']) -> 'AnalysisResult':
        """
        Concatenate partial results in the order given

        Args:
            results: Per-file or per-worker AnalysisResult objects

        Returns:
            A single AnalysisResult
        """
        findings = []
        files_analyzed = 0
        files_skipped = []
        for result in results:
            findings.extend(result.findings)
            files_analyzed += result.files_analyzed
            files_skipped.extend(result.files_skipped)
        return cls(tuple(findings), files_analyzed, tuple(files_skipped))

    def by_description(self, description: Description) -> Tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.description is description)

    def to_dict(self):
        return {
            'files_analyzed': self.files_analyzed,
            'files_skipped': list(self.files_skipped),
            'issue_count': len(self.findings),
            'issues': [f.to_dict() for f in self.findings],
        }
