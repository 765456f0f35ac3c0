"""
Energy and CO2 estimate derived from analysis findings
"""
import json
import logging
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Optional

from greenforge.analyzer.code_analyzer import CodeAnalyzer
from greenforge.config import ForgeConfig
from greenforge.models.finding import (
    AnalysisResult,
    Description,
    Severity,
    SEVERITY_BY_DESCRIPTION,
)

log = logging.getLogger(__name__)

# CPU time multiplier applied once per finding
SEVERITY_MULTIPLIERS = MappingProxyType({
    Severity.HIGH: 1.5,
    Severity.MEDIUM: 1.2,
    Severity.LOW: 1.1,
})

# Fraction of energy an optimization of each finding is expected to save
SAVINGS_BY_DESCRIPTION = MappingProxyType({
    Description.NESTED_LOOPS: 0.4,
    Description.STRING_CONCAT_IN_LOOP: 0.2,
    Description.REPEATED_CALL: 0.3,
})


@dataclass(frozen=True)
class EstimateResult:
    """Carbon footprint estimate"""
    estimated_cpu_time_ms: float
    estimated_energy_wh: float
    estimated_co2_grams: float
    potential_savings: float
    potential_co2_reduction: float
    savings_percentage: float

    def to_dict(self):
        return asdict(self)

    def to_json(self, indent=None):
        return json.dumps(self.to_dict(), indent=indent)


class CarbonEstimator:
    """Estimate runtime energy use and potential savings from findings"""

    def __init__(self, config: Optional[ForgeConfig] = None, analyzer: Optional[CodeAnalyzer] = None):
        self.config = config or ForgeConfig()
        self._analyzer = analyzer

    @property
    def analyzer(self):
        if self._analyzer is None:
            self._analyzer = CodeAnalyzer(config=self.config)
        return self._analyzer

    def estimate(self, path, language=None) -> EstimateResult:
        """Analyze `path` and estimate its footprint"""
        return self.estimate_result(self.analyzer.analyze(path, language))

    def estimate_result(self, analysis: AnalysisResult) -> EstimateResult:
        """
        Estimate the footprint of an existing AnalysisResult

        Args:
            analysis: Result of CodeAnalyzer.analyze

        Returns:
            EstimateResult
        """
        cpu_time_ms = self.calculate_cpu_time(analysis)

        energy_wh = (cpu_time_ms / 1000.0) * self.config.cpu_power_watts / 1000.0 * 3600
        co2_grams = energy_wh * self.config.co2_kg_per_kwh * 1000

        savings = self.calculate_potential_savings(analysis)
        co2_reduction = savings * self.config.co2_kg_per_kwh * 1000
        savings_percentage = (savings / energy_wh) * 100 if energy_wh > 0 else 0.0

        log.debug(
            "Estimate: %.2f ms, %.4f Wh, %.6f g CO2 (%d issues)",
            cpu_time_ms, energy_wh, co2_grams, len(analysis.findings)
        )

        return EstimateResult(
            estimated_cpu_time_ms=cpu_time_ms,
            estimated_energy_wh=energy_wh,
            estimated_co2_grams=co2_grams,
            potential_savings=savings,
            potential_co2_reduction=co2_reduction,
            savings_percentage=savings_percentage
        )

    def calculate_cpu_time(self, analysis: AnalysisResult) -> float:
        """Baseline CPU time per file, compounded by each finding's severity"""
        cpu_time = analysis.files_analyzed * self.config.base_cpu_time_ms
        for finding in analysis.findings:
            severity = SEVERITY_BY_DESCRIPTION.get(finding.description)
            cpu_time *= SEVERITY_MULTIPLIERS.get(severity, 1.0)
        return cpu_time

    @staticmethod
    def calculate_potential_savings(analysis: AnalysisResult) -> float:
        return sum(SAVINGS_BY_DESCRIPTION.get(f.description, 0.0) for f in analysis.findings)
