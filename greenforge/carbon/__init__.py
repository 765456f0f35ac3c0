"""
Carbon footprint estimation
"""
from .carbon_estimator import CarbonEstimator, EstimateResult

__all__ = ['CarbonEstimator', 'EstimateResult']
