"""
Push/pull helper script templates (bash and PowerShell)
"""
from typing import List


def shell_single_quote(text: str) -> str:
    """Quote for bash: 'it'"'"'s'"""
    return "'" + text.replace("'", "'\"'\"'") + "'"


def ps_single_quote(text: str) -> str:
    """Quote for PowerShell: 'it''s'"""
    return "'" + text.replace("'", "''") + "'"


def _sh_header(branch: str, remotes: List[str]) -> List[str]:
    return [
        f"BRANCH={shell_single_quote(branch)}",
        "REMOTES=(" + " ".join(shell_single_quote(r) for r in remotes) + ")",
        "",
    ]


def _ps_header(branch: str, remotes: List[str]) -> List[str]:
    return [
        f"$Branch = {ps_single_quote(branch)}",
        "$Remotes = @(" + ", ".join(ps_single_quote(r) for r in remotes) + ")",
        "",
    ]


def _sh_remote_loop(action: str) -> List[str]:
    return [
        'for remote in "${REMOTES[@]}"; do',
        '  if [[ -n "$BRANCH" ]]; then',
        f'    git {action} "$remote" "$BRANCH"',
        "  else",
        f'    git {action} "$remote"',
        "  fi",
        "done",
    ]


def _ps_remote_loop(action: str) -> List[str]:
    return [
        "foreach ($remote in $Remotes) {",
        "  if ([string]::IsNullOrWhiteSpace($Branch)) {",
        f"    git {action} $remote",
        "  } else {",
        f"    git {action} $remote $Branch",
        "  }",
        "}",
    ]


def render_push_sh(commit_msg: str, branch: str, remotes: List[str]) -> str:
    """bash script: stage everything, commit if needed, push to each remote"""
    lines = [
        "#!/usr/bin/env bash",
        "set -euo pipefail",
        "",
        f"COMMIT_MSG={shell_single_quote(commit_msg)}",
        *_sh_header(branch, remotes),
        "git add .",
        "if git diff --cached --quiet; then",
        '  echo "Nothing to commit. Skipping commit."',
        "else",
        '  git commit -m "$COMMIT_MSG"',
        "fi",
        "",
        *_sh_remote_loop("push"),
    ]
    return "\n".join(lines) + "\n"


def render_pull_sh(branch: str, remotes: List[str]) -> str:
    """bash script: pull from each remote"""
    lines = [
        "#!/usr/bin/env bash",
        "set -euo pipefail",
        "",
        *_sh_header(branch, remotes),
        *_sh_remote_loop("pull"),
    ]
    return "\n".join(lines) + "\n"


def render_push_ps1(commit_msg: str, branch: str, remotes: List[str]) -> str:
    """PowerShell script: stage everything, commit if needed, push to each remote"""
    lines = [
        '$ErrorActionPreference = "Stop"',
        f"$CommitMessage = {ps_single_quote(commit_msg)}",
        *_ps_header(branch, remotes),
        "git add .",
        "git diff --cached --quiet",
        "if ($LASTEXITCODE -eq 0) {",
        '  Write-Host "Nothing to commit. Skipping commit."',
        "} else {",
        "  git commit -m $CommitMessage",
        "}",
        "",
        *_ps_remote_loop("push"),
    ]
    return "\n".join(lines) + "\n"


def render_pull_ps1(branch: str, remotes: List[str]) -> str:
    """PowerShell script: pull from each remote"""
    lines = [
        '$ErrorActionPreference = "Stop"',
        *_ps_header(branch, remotes),
        *_ps_remote_loop("pull"),
    ]
    return "\n".join(lines) + "\n"
