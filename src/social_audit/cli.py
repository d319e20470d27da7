"""Command-line interface for the social sharing audit."""

import argparse
import asyncio
import json
import sys

from social_audit.browser_config import BrowserConfig
from social_audit.config import Config
from social_audit.logging_config import setup_logging
from social_audit.social_analyzer import priority_counts, weighted_score
from social_audit.tool import audit_url


def print_results(url: str, results):
    """Print scored results in a formatted way.

    Args:
        url: The audited URL
        results: Sequence of ScoredResult objects
    """
    print(f"\n{'=' * 60}")
    print(f"Social Sharing Audit for: {url}")
    print(f"{'=' * 60}")
    print(f"\n📊 Overall Score: {weighted_score(results):.2f}")

    for result in results:
        print(f"\n{result.title}: {result.score:.2f} (weight {result.weight})")
        for key, value in result.table[1:]:
            print(f"  {key}: {value}")
        for rec in sorted(result.recommendations, key=lambda r: r.priority.rank):
            print(f"  [{rec.priority.value}] {rec.message}")

    print(f"\n{'=' * 60}\n")


def build_report(url: str, results) -> dict:
    """Assemble the JSON report for one page."""
    return {
        "url": url,
        "score": weighted_score(results),
        "priorities": priority_counts(results),
        "results": [result.to_dict() for result in results],
    }


def audit_command(args):
    """Audit a single URL."""
    browser_config = BrowserConfig(
        browser_type=args.browser,
        timeout=args.timeout,
        headless=not args.headed,
        user_agent=args.user_agent,
    )

    results = asyncio.run(audit_url(args.url, browser_config))

    if args.output == "json":
        output = json.dumps(build_report(args.url, results), indent=2)
        if args.output_file:
            with open(args.output_file, "w") as f:
                f.write(output)
            print(f"Results written to {args.output_file}")
        else:
            print(output)
    else:
        print_results(args.url, results)


def main(argv=None):
    """Main CLI entry point."""
    config = Config.from_env()

    parser = argparse.ArgumentParser(
        description="Social Audit - Check Open Graph and Twitter Card tags of a page"
    )
    parser.add_argument("url", help="URL to audit")
    parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    parser.add_argument(
        "--browser",
        choices=["chromium", "firefox", "webkit"],
        default=config.browser_type,
        help="Browser engine used to render the page",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=config.timeout,
        help="Page load timeout in milliseconds (default: 30000)",
    )
    parser.add_argument(
        "--user-agent",
        default=config.user_agent,
        help="User agent used when loading the page",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.log_level.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=config.log_file,
        help="Write logs to file in addition to console",
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        audit_command(args)
    except Exception as e:
        print(f"\n❌ Failed to audit {args.url}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
