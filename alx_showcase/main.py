"""Command line entry point for the ALX Showcase classifier."""

import sys
import json
import logging
import argparse
from typing import Any, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from .core.config import load_weights
from .core.classifier import RepositoryClassifier
from .core.detector import DetectedProject, classify_all, detect_projects
from .core.metadata import GitHubRepository

_repositories_adapter = TypeAdapter(List[GitHubRepository])

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Classify GitHub repositories as ALX curriculum projects."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file with one GitHub repository object or a list of them (default: stdin)"
    )
    parser.add_argument(
        "--weights",
        "-w",
        help="YAML file with scoring weight overrides",
        default=None
    )
    parser.add_argument(
        "--only-matches",
        "-m",
        action="store_true",
        help="Only report repositories detected as curriculum projects"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )
    return parser.parse_args(argv)

def load_repositories(source: str) -> List[GitHubRepository]:
    """Read and validate repository payloads from a file path or ``-``."""
    if source == "-":
        data: Any = json.load(sys.stdin)
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    return _repositories_adapter.validate_python(data)

def format_table(projects: List[DetectedProject]) -> str:
    """Render classifications as a fixed-width text table."""
    header = f"{'REPOSITORY':<40} {'MATCH':<6} {'CONF':>5} {'CATEGORY':<13} {'DIFFICULTY':<12} TECHNOLOGIES"
    lines = [header, "-" * len(header)]
    for project in projects:
        result = project.result
        lines.append(
            f"{project.repository.name[:40]:<40} "
            f"{'yes' if result.is_match else 'no':<6} "
            f"{result.confidence:>5.2f} "
            f"{result.category.value:<13} "
            f"{result.suggested_difficulty.value:<12} "
            f"{', '.join(result.suggested_technologies)}"
        )
    return "\n".join(lines)

def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        classifier = RepositoryClassifier(load_weights(args.weights))
        repositories = load_repositories(args.input)
    except ValidationError as e:
        print(f"Error: invalid repository data:\n{e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if args.only_matches:
        projects = detect_projects(repositories, classifier)
    else:
        projects = classify_all(repositories, classifier)

    if args.json:
        output = [
            {"name": project.repository.name, **project.result.to_dict()}
            for project in projects
        ]
        print(json.dumps(output, indent=2))
    else:
        print(format_table(projects))

if __name__ == "__main__":
    main()
