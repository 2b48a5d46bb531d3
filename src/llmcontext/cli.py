# src/llmcontext/cli.py
import sys
import argparse
import os
from pathlib import Path

from llmcontext.config import DEFAULT_OUTPUT_FILE, DEFAULT_ROOT_DIR, DEFAULT_TITLE, READ_ERROR_POLICIES
from llmcontext.core.aggregator import DocumentAggregator
from llmcontext.core.scanner import parse_extensions
from llmcontext.errors import AggregatorError, FilesystemError
from llmcontext.models import AggregationResult

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="docs-llm-context",
        description="Concatenate every documentation page into a single LLM-friendly context file."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=DEFAULT_ROOT_DIR, help=f"Documentation root directory (default: {DEFAULT_ROOT_DIR})")
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_OUTPUT_FILE, help=f"Output file (default: {DEFAULT_OUTPUT_FILE})")
    parser.add_argument("-e", "--extensions", type=str, default=".md", help="Comma-separated file extensions or '*' for all (default: .md)")
    parser.add_argument("-t", "--title", type=str, default=DEFAULT_TITLE, help="Title used in the generated header")
    parser.add_argument("--ignore-file", type=str, default=None, help="Gitignore-style ignore file (default: <root>/.llmignore if present; otherwise nothing is ignored)")
    parser.add_argument("-x", "--exclude", action="append", default=[], metavar="PATTERN", help="Extra ignore pattern; may be repeated")
    parser.add_argument("--on-read-error", choices=READ_ERROR_POLICIES, default="abort", help="Abort the run or skip documents that cannot be decoded (default: abort)")
    parser.add_argument("--exact-tokens", action="store_true", help="Also count tokens exactly with tiktoken")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress per-file progress lines")
    return parser

def display_path(path: Path) -> str:
    """Path relative to the working directory when possible."""
    try:
        return os.path.relpath(path)
    except ValueError:
        # Different drive on Windows
        return str(path)

def print_summary(result: AggregationResult):
    stats = result.stats
    print("\nLLM context file generated successfully!")
    print("\nStatistics:")
    print(f"  - Output file: {display_path(result.output_path)}")
    print(f"  - Documents: {stats.document_count}")
    if result.skipped:
        print(f"  - Skipped: {len(result.skipped)}")
    print(f"  - File size: {stats.size_kb:.2f} KB")
    print(f"  - Word count: {stats.word_count:,}")
    print(f"  - Estimated tokens: {stats.estimated_tokens:,}")
    if stats.exact_tokens is not None:
        print(f"  - Exact tokens (cl100k_base): {stats.exact_tokens:,}")

def main():
    try:
        parser = create_arg_parser()
        args = parser.parse_args()

        root_dir = Path(args.root_dir)
        output_file = Path(args.output)

        ignore_file = None
        if args.ignore_file:
            ignore_file = Path(args.ignore_file)
            if not ignore_file.is_file():
                raise FilesystemError("Ignore file not found", ignore_file)

        extensions = parse_extensions(args.extensions)
        if not extensions:
            parser.error("--extensions must name at least one extension or '*'")

        aggregator = DocumentAggregator(
            root_dir,
            output_file,
            extensions=extensions,
            title=args.title,
            ignore_file=ignore_file,
            exclude=args.exclude,
            on_read_error=args.on_read_error,
            exact_tokens=args.exact_tokens,
            verbose=not args.quiet,
        )
        result = aggregator.run()
        print_summary(result)

    except AggregatorError as e:
        print(f"Error generating LLM context: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(130)

if __name__ == "__main__":
    main()
