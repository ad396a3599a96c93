#!/usr/bin/env python3
"""
Generate a conventional commit message for the staged changes and copy it
to the clipboard:
- Context (optional, free text passed to the model)
- Exclude (optional, files to leave out of the diff)
- Model tier (fast, standard or advanced)
- --git: copy a ready-to-run `git commit -m "..."` command instead of the raw message
"""

import argparse
import logging
import sys
from pathlib import Path

from rcommit.clipboard.domain.value_objects import ClipboardPayload
from rcommit.clipboard.repositories.implementations import PyperclipClipboardRepositoryImpl
from rcommit.clipboard.services.output_service import OutputService
from rcommit.commit_message.domain.value_objects import (
    DEFAULT_CONTEXT,
    CommitMessageInput,
    ModelTier,
)
from rcommit.commit_message.repositories.factory import create_completion_backend
from rcommit.commit_message.services.commit_message_service import CommitMessageService
from rcommit.errors import ClipboardError, CompletionError, GitError
from rcommit.git.domain.value_objects import StagedDiffRequest
from rcommit.git.repositories.implementations import GitRepositoryImpl
from rcommit.git.services.git_service import GitService
from rcommit.logging_utils import configure_logging

__version__ = "0.1.0"

DEFAULT_MODEL_TIER = ModelTier.STANDARD

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments, exiting with usage text on bad input."""
    parser = argparse.ArgumentParser(
        prog="rcommit",
        description="Use AI to write commit messages for your staged changes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--context",
        "-c",
        type=str,
        default=DEFAULT_CONTEXT,
        help=f"Sets a custom context for the changes (default: {DEFAULT_CONTEXT!r})",
    )
    parser.add_argument(
        "--exclude",
        "-e",
        type=str,
        nargs="+",
        action="extend",
        default=[],
        metavar="FILE",
        help="List of files to exclude from the git diff (exact file names)",
    )
    parser.add_argument(
        "--model",
        "-m",
        type=str,
        choices=[tier.value for tier in ModelTier],
        default=DEFAULT_MODEL_TIER.value,
        help=f"Model tier to use (default: {DEFAULT_MODEL_TIER.value})",
    )
    parser.add_argument(
        "--git",
        "-g",
        action="store_true",
        help='Copy the message as a `git commit -m "..."` command',
    )
    parser.add_argument(
        "--repo-path",
        "-C",
        type=Path,
        default=Path("."),
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--print-only",
        "-p",
        action="store_true",
        help="Print the result without touching the clipboard",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main function to collect the staged diff, generate a message and copy it."""
    args = parse_args(argv)
    configure_logging(verbosity=args.verbose)

    model_tier = ModelTier(args.model)

    try:
        completion_backend = create_completion_backend()
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        print(
            "  Hint: Set OPENAI_API_KEY (or LLM_PROVIDER and ANTHROPIC_API_KEY) "
            "in .env file or environment",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        print("📝 Collecting staged changes...")
        git_service = GitService(GitRepositoryImpl())
        staged_diff = git_service.collect_staged_diff(
            StagedDiffRequest(repo_path=args.repo_path, excludes=tuple(args.exclude))
        )
        print(f"   {len(staged_diff.files)} file(s) included")

        print(f"🤖 Generating commit message ({model_tier.value} model)...")
        commit_message_service = CommitMessageService(completion_backend)
        message = commit_message_service.generate(
            CommitMessageInput(context=args.context, diff=staged_diff),
            model_tier,
        )

        if args.print_only:
            payload = ClipboardPayload.from_commit_message(message, args.git)
        else:
            output_service = OutputService(PyperclipClipboardRepositoryImpl())
            payload = output_service.publish(message, args.git)

    except GitError as e:
        print(f"✗ Failed to collect staged changes: {e}", file=sys.stderr)
        sys.exit(1)
    except CompletionError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)
    except ClipboardError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)

    print("=" * 80)
    print(payload.text)
    print("=" * 80)
    if not args.print_only:
        print("✓ Copied to clipboard!")
    sys.exit(0)


if __name__ == "__main__":
    main()
