# gh_repo_info/main.py
#
# Usage: python -m gh_repo_info.main rust-lang rust [--blocking] [--json] [-v]
import argparse
import asyncio
import logging
import sys

from gh_repo_info import blocking, client
from gh_repo_info.core.errors import GhRepoInfoError
from gh_repo_info.core.logger import setup_logging
from gh_repo_info.core.models import RepoInfo

log = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gh-repo-info",
        description="Get GitHub repository information given an owner and repo.",
    )
    parser.add_argument("owner")
    parser.add_argument("repo")
    parser.add_argument(
        "--blocking", action="store_true", help="use the blocking client instead of asyncio"
    )
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def format_repo(repo: RepoInfo) -> str:
    lines = [
        f"{repo.full_name} ({repo.url})",
        f"  owner:          {repo.owner.name} [{repo.owner.kind.value}] {repo.owner.url}",
        f"  stars:          {repo.stargazers_count}",
        f"  subscribers:    {repo.subscribers_count}",
        f"  forks:          {repo.forks_count}",
        f"  open issues:    {repo.open_issues_count}",
        f"  fork:           {repo.is_fork}",
        f"  archived:       {repo.is_archived}",
        f"  default branch: {repo.default_branch}",
    ]
    if repo.homepage:
        lines.append(f"  homepage:       {repo.homepage}")
    if repo.description:
        lines.append(f"  description:    {repo.description}")
    if repo.license:
        lines.append(f"  license:        {repo.license.name or repo.license.key}")
    if repo.language:
        lines.append(f"  language:       {repo.language}")
    if repo.topics:
        lines.append(f"  topics:         {', '.join(repo.topics)}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.blocking:
            repo = blocking.get(args.owner, args.repo)
        else:
            repo = asyncio.run(client.get(args.owner, args.repo))
    except GhRepoInfoError as e:
        log.debug("Lookup of %s/%s failed", args.owner, args.repo, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(repo.model_dump_json(indent=2) if args.json else format_repo(repo))
    return 0


if __name__ == "__main__":
    sys.exit(main())
