"""
Shell completion scripts (zsh, bash, fish)
"""
from enum import Enum

import typer

from ...core.constants import APP_NAME, DEFAULT_HOST_ALIAS
from ...core.logging import get_stdout_console

stdout_console = get_stdout_console()

ROOT_COMMANDS = (
    "generate create repo doctor make remake init clone push pull add "
    "completion -gc -pp -v --version help"
)


class Shell(str, Enum):
    zsh = "zsh"
    bash = "bash"
    fish = "fish"


_ZSH_REPO_FLAGS = (
    "'--private[Create a private repository]' '--public[Create a public repository]' "
    "'--desc[Description]:description:' '--default-branch[Default branch]:branch:' "
    "'--clone[Clone right away]'"
)

_ZSH_TEMPLATE = """#compdef __APP__

___APP__() {
  local -a commands
  commands=(
    'generate:Generate settings'
    'create:Create resources'
    'repo:Repository commands'
    'doctor:Check the environment'
    'make:Generate push/pull scripts or make repo'
    'remake:Regenerate push/pull scripts'
    'init:Configure the SSH alias __ALIAS__'
    'clone:Clone owner/repo over SSH'
    'push:Run push.sh/push.ps1'
    'pull:Run pull.sh/pull.ps1'
    'add:Add the __ALIAS__ remote'
    'completion:Generate shell completion'
    '-gc:Shorthand for generate config'
    '-pp:Shorthand for make --push --pull'
    '-v:Show version'
    '--version:Show version'
    'help:Help'
  )

  local -a root_flags
  root_flags=(
    '-h[Help]'
    '--help[Help]'
  )

  local curcontext="$curcontext" state line
  _arguments -C \\
    $root_flags \\
    '1:command:->cmds' \\
    '*::argument:->args'

  case "$state" in
    cmds)
      _describe 'commands' commands
      ;;
    args)
      case "$line[1]" in
        init)
          _arguments '--default[Default SSH settings]' '--custom[Custom SSH settings]' '--host[SSH HostName]:host:' '--port[SSH port]:port:' '--user[SSH user]:user:'
          ;;
        completion)
          _values 'shell' zsh bash fish
          ;;
        generate)
          _values 'subcommand' config
          ;;
        create)
          case "$line[2]" in
            repo)
              _arguments __REPO_FLAGS__
              ;;
            *)
              _values 'subcommand' repo
              ;;
          esac
          ;;
        repo)
          case "$line[2]" in
            create)
              _arguments __REPO_FLAGS__
              ;;
            *)
              _values 'subcommand' create
              ;;
          esac
          ;;
        make)
          _arguments '1:subcommand/option:(repo --push --pull -pp)' '*::argument:->makeargs'
          case "$line[2]" in
            repo)
              _arguments __REPO_FLAGS__
              ;;
          esac
          ;;
        remake)
          _arguments '--push[Generate the push script]' '--pull[Generate the pull script]' '-pp[Both push and pull]'
          ;;
        clone|add)
          _message 'owner/repo'
          ;;
      esac
      ;;
  esac
}

___APP__ "$@"
"""

_BASH_TEMPLATE = """___APP___complete() {
  local cur prev words cword
  cur="${COMP_WORDS[COMP_CWORD]}"
  prev=""
  if [[ $COMP_CWORD -gt 0 ]]; then
    prev="${COMP_WORDS[COMP_CWORD-1]}"
  fi
  words=("${COMP_WORDS[@]}")
  cword=$COMP_CWORD

  local root_cmds="__ROOT__"
  local opts="-h --help"
  local repo_opts="--private --public --desc --default-branch --clone -h --help"

  if [[ $cword -eq 1 ]]; then
    COMPREPLY=( $(compgen -W "$root_cmds $opts" -- "$cur") )
    return
  fi

  case "${words[1]}" in
    init)
      COMPREPLY=( $(compgen -W "--default --custom --host --port --user -h --help" -- "$cur") )
      ;;
    completion)
      COMPREPLY=( $(compgen -W "zsh bash fish" -- "$cur") )
      ;;
    generate)
      COMPREPLY=( $(compgen -W "config -h --help" -- "$cur") )
      ;;
    create)
      if [[ $cword -eq 2 ]]; then
        COMPREPLY=( $(compgen -W "repo -h --help" -- "$cur") )
      else
        COMPREPLY=( $(compgen -W "$repo_opts" -- "$cur") )
      fi
      ;;
    repo)
      if [[ $cword -eq 2 ]]; then
        COMPREPLY=( $(compgen -W "create -h --help" -- "$cur") )
      else
        COMPREPLY=( $(compgen -W "$repo_opts" -- "$cur") )
      fi
      ;;
    make)
      if [[ $cword -eq 2 ]]; then
        COMPREPLY=( $(compgen -W "repo --push --pull -pp -h --help" -- "$cur") )
      elif [[ "${words[2]}" == "repo" ]]; then
        COMPREPLY=( $(compgen -W "$repo_opts" -- "$cur") )
      else
        COMPREPLY=( $(compgen -W "--push --pull -pp -h --help" -- "$cur") )
      fi
      ;;
    remake)
      COMPREPLY=( $(compgen -W "--push --pull -pp -h --help" -- "$cur") )
      ;;
    clone|add)
      COMPREPLY=()
      ;;
  esac
}

complete -F ___APP___complete __APP__
"""


def _fish_script() -> str:
    lines = [
        f"complete -c {APP_NAME} -f",
        f'complete -c {APP_NAME} -n "__fish_use_subcommand" -a "{ROOT_COMMANDS}"',
    ]
    for command, values in (
        ("completion", "zsh bash fish"),
        ("generate", "config"),
        ("create", "repo"),
        ("repo", "create"),
        ("make", "repo"),
    ):
        lines.append(f'complete -c {APP_NAME} -n "__fish_seen_subcommand_from {command}" -a "{values}"')

    for first, second in (("create", "repo"), ("repo", "create"), ("make", "repo")):
        condition = f"__fish_seen_subcommand_from {first}; and __fish_seen_subcommand_from {second}"
        for flag in ("private", "public", "desc -r", "default-branch -r", "clone"):
            lines.append(f'complete -c {APP_NAME} -n "{condition}" -l {flag}')

    for flag in ("-l push", "-l pull", "-o pp"):
        lines.append(f'complete -c {APP_NAME} -n "__fish_seen_subcommand_from make remake" {flag}')
    for flag in ("default", "custom", "host -r", "port -r", "user -r"):
        lines.append(f'complete -c {APP_NAME} -n "__fish_seen_subcommand_from init" -l {flag}')

    return "\n".join(lines) + "\n"


def completion_script(shell: Shell) -> str:
    """Render the completion script for the given shell"""
    if shell == Shell.zsh:
        return (
            _ZSH_TEMPLATE.replace("__REPO_FLAGS__", _ZSH_REPO_FLAGS)
            .replace("__ALIAS__", DEFAULT_HOST_ALIAS)
            .replace("__APP__", APP_NAME)
        )
    if shell == Shell.bash:
        return _BASH_TEMPLATE.replace("__ROOT__", ROOT_COMMANDS).replace("__APP__", APP_NAME)
    return _fish_script()


def register_completion_command(app: typer.Typer) -> None:
    """Register the completion command"""
    app.command(name="completion")(completion_run)


def completion_run(
    shell: Shell = typer.Argument(..., case_sensitive=False, help="Target shell: zsh, bash or fish"),
):
    """
    Print a shell completion script

    Examples:
        gitcrn completion zsh > ~/.zsh/completions/_gitcrn
        gitcrn completion bash > ~/.local/share/bash-completion/completions/gitcrn
        gitcrn completion fish > ~/.config/fish/completions/gitcrn.fish
    """
    stdout_console.out(completion_script(shell), end="", highlight=False)
