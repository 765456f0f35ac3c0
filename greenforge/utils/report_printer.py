"""
Report printing utilities for analysis, estimate and suggestion results
"""
from collections import Counter


class ReportPrinter:
    """Print text reports for the command line"""

    @staticmethod
    def print_analysis(result, path, language=None):
        """Print findings of an analysis run"""
        print(f"🔍 Analysis Results for {path}")
        print(f"Language: {language or 'auto'}")
        print(f"Files analyzed: {result.files_analyzed}")
        if result.files_skipped:
            print(f"Files skipped: {len(result.files_skipped)}")
        print(f"Issues found: {len(result.findings)}")
        print()

        if not result.findings:
            print("✅ No inefficiencies detected!")
            return

        print("⚠️  Inefficiencies found:")
        for finding in result.findings:
            print(f"  • {finding.title}")
            print(f"    Location: {finding.location}")
            print(f"    Severity: {finding.severity.value}")
            print(f"    Details: {finding.details}")
            print()

        ReportPrinter.print_summary(result)

    @staticmethod
    def print_summary(result):
        """Print issue counts per severity and per description"""
        by_severity = Counter(f.severity.value for f in result.findings)
        by_title = Counter(f.title for f in result.findings)

        print("="*70)
        print("SUMMARY")
        print("="*70)
        for severity in ('HIGH', 'MEDIUM', 'LOW'):
            if by_severity[severity]:
                print(f"  {severity:6}: {by_severity[severity]}")
        print()
        for title, count in by_title.most_common():
            print(f"  {title}: {count}")

    @staticmethod
    def print_estimate(estimate, path, language=None):
        """Print a carbon footprint estimate"""
        print(f"🌱 Carbon Footprint Estimate for {path}")
        print(f"Language: {language or 'auto'}")
        print()
        print("📊 Current Estimate:")
        print(f"  • CPU Time: {estimate.estimated_cpu_time_ms:.2f} ms")
        print(f"  • Energy Usage: {estimate.estimated_energy_wh:.4f} Wh")
        print(f"  • CO₂ Emissions: {estimate.estimated_co2_grams:.6f} g CO₂")
        print()

        if estimate.potential_savings > 0:
            print("💚 Potential Savings (with optimizations):")
            print(f"  • Energy Savings: {estimate.potential_savings:.4f} Wh")
            print(f"  • CO₂ Reduction: {estimate.potential_co2_reduction:.6f} g CO₂")
            print(f"  • Percentage: {estimate.savings_percentage:.1f}%")

    @staticmethod
    def print_suggestions(result, path, language=None):
        """Print optimization suggestions with before/after examples"""
        print(f"💡 Optimization Suggestions for {path}")
        print(f"Language: {language or 'auto'}")
        print(f"Suggestions found: {len(result.suggestions)}")
        print()

        if not result.suggestions:
            print("✅ No optimization suggestions available!")
            return

        for suggestion in result.suggestions:
            print(f"🔧 {suggestion.title}")
            print(f"   Description: {suggestion.description}")
            print(f"   Location: {suggestion.location}")
            print(f"   Impact: {suggestion.impact}")
            print("   Example:")
            print(f"     Before: {suggestion.before_example}")
            print(f"     After:  {suggestion.after_example}")
            print()
