#!/usr/bin/env python3
# scripts/score_resume.py
"""
Score a tailored resume against the ideal profile generated for a job

Usage:
    python scripts/score_resume.py --resume data/variants/acme.json --ideal data/ideal/acme.json
    python scripts/score_resume.py --resume data/variants/acme.json --ideal data/ideal/acme.json --master data/master.yaml
    python scripts/score_resume.py --resume data/variants/acme.json --ideal data/ideal/acme.json --output reports/acme_score.json
"""

import argparse
import json
import logging
import sys
import yaml
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tailor.config import get_config, TailorConfig
from tailor.logging_setup import setup_logging
from tailor.loader import load_resume, load_candidate, load_ideal_profile
from tailor.ats.scorer import ATSScorer
from tailor.ats.models import ScoreResult, ScoreBand

logger = logging.getLogger(__name__)

BAND_COLORS = {
    ScoreBand.STRONG: '\033[92m',   # Green
    ScoreBand.FAIR: '\033[93m',     # Yellow
    ScoreBand.WEAK: '\033[33m',     # Orange-ish
    ScoreBand.POOR: '\033[91m',     # Red
}
RESET_COLOR = '\033[0m'


def _bar(score: int) -> str:
    return '█' * (score // 10)


def print_score_summary(result: ScoreResult, config: TailorConfig):
    """Print composite and component scores"""
    width = config.report_width
    color = BAND_COLORS[result.band]

    print("\n" + "=" * width)
    print(f"{'ATS MATCH SCORE':^{width}}")
    print("=" * width)
    print()
    print(f"Composite: {color}{result.composite}/100{RESET_COLOR} ({result.band.value.upper()})")
    if result.max_achievable is not None:
        print(f"Max achievable with master profile: {result.max_achievable}/100")
    print()
    print("Component Breakdown:")
    print(f"  Keywords:    {result.keyword_score:3d}/100  {_bar(result.keyword_score)}")
    print(f"  Measurable:  {result.measurable_results_score:3d}/100  {_bar(result.measurable_results_score)}")
    print(f"  Structure:   {result.structure_score:3d}/100  {_bar(result.structure_score)}")
    print()


def print_keyword_gaps(result: ScoreResult, config: TailorConfig):
    """Print missing keywords, most important first"""
    missing = sorted(
        result.keyword.missing,
        key=lambda m: -m.importance.weight
    )
    if not missing:
        return

    print("=" * config.report_width)
    print("MISSING KEYWORDS")
    print("=" * config.report_width)
    print()

    for miss in missing[:config.max_missing_keywords_shown]:
        note = "  (in master profile)" if miss.in_master_resume else ""
        print(f"  [{miss.importance.value}] {miss.keyword} ({miss.category.value}){note}")

    hidden = len(missing) - config.max_missing_keywords_shown
    if hidden > 0:
        print(f"  ... and {hidden} more")
    print()


def print_structure_details(result: ScoreResult, config: TailorConfig):
    """Print the structure sub-scores"""
    structure = result.structure

    print("=" * config.report_width)
    print("STRUCTURE")
    print("=" * config.report_width)
    print()
    print(f"  Section order: {structure.section_order_score:3d}  "
          f"current: {', '.join(s.value for s in structure.current_order) or '-'}")
    print(f"  {'':18}ideal:   {', '.join(s.value for s in structure.ideal_order) or '-'}")
    print(f"  Completeness:  {structure.completeness_score:3d}  "
          f"missing: {', '.join(s.value for s in structure.missing_sections) or 'none'}")
    low, high = structure.summary_ideal_range
    print(f"  Summary:       {structure.summary_score:3d}  "
          f"{structure.summary_word_count} words (ideal {low}-{high})")
    print(f"  Bullet count:  {structure.bullet_count_score:3d}")
    for detail in structure.bullet_count_details:
        print(f"  {'':18}{detail.company or '(unnamed)'}: {detail.current}/{detail.ideal}")
    print(f"  Page length:   {structure.page_length_score:3d}  "
          f"~{structure.estimated_pages} page(s), ideal {structure.ideal_pages}")
    print()


def print_bullet_assessments(result: ScoreResult, config: TailorConfig):
    """Print which bullets carry a metric"""
    measurable = result.measurable_results

    print("=" * config.report_width)
    print(f"MEASURABLE RESULTS ({measurable.bullets_with_metrics}/{measurable.ideal_count} target)")
    print("=" * config.report_width)
    print()
    for assessment in measurable.bullet_assessments:
        mark = '✓' if assessment.has_metric else '·'
        print(f"  {mark} {assessment.text}")
    if measurable.summary_has_metric:
        print("  ✓ (summary)")
    print()


def save_report(result: ScoreResult, output_file: str):
    """Save the full result as JSON"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    print(f"\n✓ Detailed report saved to: {output_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Score a tailored resume against an ideal job profile'
    )

    parser.add_argument(
        '--resume',
        required=True,
        help='Path to resume variant (.json or .yaml)'
    )

    parser.add_argument(
        '--ideal',
        required=True,
        help='Path to ideal profile (.json or .yaml)'
    )

    parser.add_argument(
        '--master',
        help='Path to master profile, enables the max achievable score'
    )

    parser.add_argument(
        '--output',
        help='Output file for detailed JSON report'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON instead of a formatted summary'
    )

    parser.add_argument(
        '--config',
        help='Path to config file (default: $TAILOR_CONFIG or config/tailor.yaml)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config(args.config)
        setup_logging('DEBUG' if args.verbose else config.log_level, config.log_format)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        setup_logging()
        logger.error(f"ERROR: invalid configuration: {e}")
        return 1

    try:
        logger.info(f"Loading resume: {args.resume}")
        resume = load_resume(args.resume)

        logger.info(f"Loading ideal profile: {args.ideal}")
        ideal = load_ideal_profile(args.ideal)

        master = None
        if args.master:
            logger.info(f"Loading master profile: {args.master}")
            master = load_candidate(args.master)
    except (OSError, ValueError) as e:
        logger.error(f"ERROR: {e}")
        return 1

    result = ATSScorer().score_all(resume, ideal, master)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_score_summary(result, config)
        print_keyword_gaps(result, config)
        print_structure_details(result, config)
        if config.show_bullet_assessments:
            print_bullet_assessments(result, config)

    if args.output:
        save_report(result, args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
