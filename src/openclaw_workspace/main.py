"""Application entry point — CLI dispatcher.

Commands:
  1. `openclaw-workspace init [DIR] [--no-templates]` — seed or reconcile a
     workspace and print its onboarding state.
  2. `openclaw-workspace files [DIR] [--session KEY]` — list the bootstrap
     documents a session would receive.
  3. `openclaw-workspace status [DIR]` — read-only classification report.

DIR defaults to the configured workspace (OPENCLAW_HOME / OPENCLAW_PROFILE).
Pass -v anywhere for debug logging.
"""

import json
import logging
import sys

USAGE = """\
Usage:
  openclaw-workspace init [DIR] [--no-templates] [-v]
  openclaw-workspace files [DIR] [--session KEY] [-v]
  openclaw-workspace status [DIR] [-v]
"""

_COMMANDS = ("init", "files", "status")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    logging.getLogger("openclaw_workspace").setLevel(
        logging.DEBUG if verbose else logging.INFO
    )


def _parse_args(args: list[str]) -> tuple[list[str], dict[str, str | bool]]:
    """Split args into positionals and options. Raises ValueError on bad input."""
    positionals: list[str] = []
    options: dict[str, str | bool] = {}
    it = iter(args)
    for arg in it:
        if arg in ("-v", "--verbose"):
            options["verbose"] = True
        elif arg == "--no-templates":
            options["no_templates"] = True
        elif arg == "--session":
            value = next(it, None)
            if value is None:
                raise ValueError("--session requires a value")
            options["session"] = value
        elif arg.startswith("--session="):
            options["session"] = arg.split("=", 1)[1]
        elif arg.startswith("-"):
            raise ValueError(f"Unknown option: {arg}")
        else:
            positionals.append(arg)
    if len(positionals) > 1:
        raise ValueError(f"Unexpected argument: {positionals[1]}")
    return positionals, options


def _cmd_init(settings, no_templates: bool) -> None:
    from .workspace.manager import WorkspaceManager

    result = WorkspaceManager(settings.workspace_dir).ensure(
        ensure_bootstrap_files=not no_templates
    )
    print(f"Workspace: {result.workspace_dir}")
    print(f"Detected:  {result.maturity.value}")
    for path in result.created:
        print(f"  created {path.name}")
    print(json.dumps(result.state.to_dict(), indent=2))


def _cmd_files(settings, session: str | None) -> None:
    from .workspace.loader import load_bootstrap_files
    from .workspace.session import filter_bootstrap_files_for_session

    files = load_bootstrap_files(settings.workspace_dir)
    if session:
        files = filter_bootstrap_files_for_session(files, session)
    for f in files:
        marker = "missing" if f.missing else f"{len(f.content)} chars"
        print(f"{f.name}\t{marker}")


def _cmd_status(settings) -> None:
    from .workspace.detect import classify_workspace, find_prior_use_evidence
    from .workspace.state import load_state

    workspace_dir = settings.workspace_dir
    if not workspace_dir.is_dir():
        print(f"Workspace: {workspace_dir} (does not exist)")
        return
    state = load_state(workspace_dir)
    maturity = classify_workspace(workspace_dir, state)
    print(f"Workspace: {workspace_dir}")
    print(f"Status:    {maturity.value}")
    evidence = find_prior_use_evidence(workspace_dir)
    if evidence:
        print(f"Evidence:  {', '.join(evidence)}")
    if state is not None:
        print(json.dumps(state.to_dict(), indent=2))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2 or sys.argv[1] not in _COMMANDS:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    command = sys.argv[1]
    try:
        positionals, options = _parse_args(sys.argv[2:])
    except ValueError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    _configure_logging(bool(options.get("verbose")))

    from .settings import load_settings

    settings = load_settings(workspace_dir=positionals[0] if positionals else None)

    try:
        if command == "init":
            _cmd_init(settings, bool(options.get("no_templates")))
        elif command == "files":
            session = options.get("session")
            _cmd_files(settings, session if isinstance(session, str) else None)
        else:
            _cmd_status(settings)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
