"""
CinePrompt Command Line Interface
Create AI video prompts and share links via cineprompt.io.

Usage:
    cineprompt build '{"mode":"single","fields":{...}}'   share link from state JSON
    cineprompt build --file state.json                    share link from JSON file
    cat state.json | cineprompt build                     share link from stdin
    cineprompt auth <api-key>                             save API key locally
    cineprompt fields [name]                              list fields / values
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from pydantic import ValidationError as PydanticValidationError

from cineprompt import __version__
from cineprompt.adapters.credential_store import get_credential_store, resolve_api_key
from cineprompt.core.config import get_settings
from cineprompt.core.errors import (
    AuthenticationError,
    CinePromptException,
    EmptyPromptError,
    ErrorCode,
    ErrorResponse,
    SuccessResponse,
    ValidationError,
)
from cineprompt.core.logging import configure_logging, get_correlation_id, get_logger, start_invocation
from cineprompt.features.fields.catalog import describe_field, get_field_values, is_free_text, list_field_names
from cineprompt.features.prompts.prompt_builder import build_prompt_text
from cineprompt.features.prompts.schemas import PromptState
from cineprompt.features.share.handlers import create_share_link

logger = get_logger(__name__)

NO_API_KEY_MESSAGE = (
    "No API key. Set one with:\n"
    "  cineprompt auth <your-api-key>\n"
    "  --api-key <key>\n"
    "  CINEPROMPT_API_KEY=<key>\n"
    "\n"
    "Get your key at cineprompt.io → Settings → API Access (Pro required)"
)

NO_STATE_MESSAGE = (
    "No state JSON provided. Use:\n"
    "  cineprompt build '{\"mode\":\"single\",\"fields\":{...}}'\n"
    "  cineprompt build --file state.json\n"
    "  cat state.json | cineprompt build"
)

AUTH_USAGE_MESSAGE = (
    "Usage: cineprompt auth <api-key>\n"
    "Get your API key at cineprompt.io → Settings → API Access"
)

EPILOG = """Examples:
  cineprompt auth cp_abc123
  cineprompt build '{"mode":"single","complexity":"complex","fields":{"media_type":["cinematic"],"env_time":"golden hour"}}'
  cat shot.json | cineprompt build

Get your API key: cineprompt.io → Settings → API Access (Pro required)
Docs: cineprompt.io/guides"""


def _print_json(model) -> None:
    print(model.model_dump_json(indent=2))


# --- State input ---

def _parse_state_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            message=f"Invalid state JSON ({source}): {e}",
            details={"source": source}
        )


def read_state_input(
    state_arg: Optional[str],
    file_path: Optional[str],
    stdin: Optional[TextIO] = None,
) -> Any:
    """
    Read raw state JSON from --file, the inline argument, or piped stdin.

    Raises:
        ValidationError: If no state is supplied, the file is missing or the JSON is malformed
    """
    if file_path:
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ValidationError(
                message=f"State file not found: {path}",
                details={"path": str(path)}
            )
        return _parse_state_json(text, source=str(path))

    if state_arg:
        return _parse_state_json(state_arg, source="argument")

    stream = stdin if stdin is not None else sys.stdin
    if stream is not None and not stream.isatty():
        text = stream.read().strip()
        if text:
            return _parse_state_json(text, source="stdin")

    raise ValidationError(message=NO_STATE_MESSAGE)


def validate_state(raw_state: Any) -> PromptState:
    """Check the state has a "fields" object and apply mode/complexity defaults."""
    if not isinstance(raw_state, dict) or not isinstance(raw_state.get("fields"), dict):
        raise ValidationError(message='state JSON must have a "fields" object.')
    try:
        return PromptState.model_validate(raw_state)
    except PydanticValidationError as e:
        raise ValidationError(
            message=f"Invalid state: {e.errors()[0].get('msg', str(e))}",
            details={"errors": e.errors(include_url=False, include_context=False)}
        )


# --- Commands ---

def cmd_build(args: argparse.Namespace) -> int:
    api_key = None
    if not args.dry_run:
        api_key = resolve_api_key(args.api_key)
        if not api_key:
            raise AuthenticationError(message=NO_API_KEY_MESSAGE)

    state = validate_state(read_state_input(args.state, args.file))

    prompt_text = build_prompt_text(state)
    logger.debug(
        "prompt_text_composed",
        prompt_length=len(prompt_text),
        field_count=len(state.fields),
        dry_run=args.dry_run
    )
    if not prompt_text:
        raise EmptyPromptError()

    if args.dry_run:
        if args.json:
            _print_json(SuccessResponse(data={"prompt_text": prompt_text}))
        else:
            print(prompt_text)
        return 0

    share_link = create_share_link(
        api_key,
        state.model_dump(),
        prompt_text,
        mode=state.mode,
        correlation_id=get_correlation_id(),
    )

    if args.json:
        _print_json(SuccessResponse(data={
            "url": share_link.url,
            "short_code": share_link.short_code,
            "prompt_text": prompt_text,
        }))
    else:
        print(f"🎬 {share_link.url}")
    return 0


def cmd_auth(args: argparse.Namespace) -> int:
    settings = get_settings()
    key = args.api_key_value
    if not key or not key.startswith(settings.api_key_prefix):
        raise ValidationError(message=AUTH_USAGE_MESSAGE)

    store = get_credential_store()
    store.save_api_key(key)
    print(f"✓ API key saved to {store.path}")
    return 0


def cmd_fields(args: argparse.Namespace) -> int:
    if args.name:
        entry = get_field_values(args.name)
        if args.json:
            _print_json(SuccessResponse(data={"field": args.name, "values": entry}))
        elif isinstance(entry, list) and not is_free_text(entry):
            for value in entry:
                print(f"  {value}")
        else:
            print(json.dumps(entry, indent=2, ensure_ascii=False))
        return 0

    names = list_field_names()
    if args.json:
        summary: Dict[str, str] = {name: describe_field(name) for name in names}
        _print_json(SuccessResponse(data={"fields": summary}))
        return 0

    print(f"{len(names)} fields available:\n")
    for name in names:
        print(f"  {name} {describe_field(name)}")
    print('\nRun "cineprompt fields <name>" to see values for a field.')
    return 0


# --- Parser ---

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print machine-readable JSON envelopes")
    common.add_argument("--verbose", action="store_true", help="Log debug events to stderr")

    parser = argparse.ArgumentParser(
        prog="cineprompt",
        description=f"cineprompt v{__version__} — AI video prompt builder",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-v", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    build = subparsers.add_parser("build", parents=[common], help="Create a share link from state JSON")
    build.add_argument("state", nargs="?", help="Inline state JSON")
    build.add_argument("--file", type=str, help="Read state JSON from a file")
    build.add_argument("--api-key", type=str, help="Use this API key (or set CINEPROMPT_API_KEY)")
    build.add_argument("--dry-run", action="store_true", help="Print the prompt text without creating a share link")
    build.set_defaults(handler=cmd_build)

    auth = subparsers.add_parser("auth", parents=[common], help="Save your API key locally")
    auth.add_argument("api_key_value", nargs="?", metavar="api-key", help="Key issued at cineprompt.io")
    auth.set_defaults(handler=cmd_auth)

    fields = subparsers.add_parser("fields", parents=[common], help="List field names or values for one field")
    fields.add_argument("name", nargs="?", help="Field to show values for")
    fields.set_defaults(handler=cmd_fields)

    return parser


def _report_error(error: ErrorResponse, as_json: bool) -> None:
    if as_json:
        print(error.model_dump_json(indent=2))
    else:
        print(f"Error: {error.message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.verbose else None)
    start_invocation(args.command)
    settings = get_settings()
    logger.info("cli_command_started", environment=settings.environment)

    try:
        return args.handler(args)
    except CinePromptException as exc:
        logger.info(
            "cli_command_failed",
            code=exc.code,
            message=exc.message,
            details=exc.details
        )
        _report_error(exc.to_response(), args.json)
        return exc.exit_code
    except Exception as exc:
        logger.exception("unhandled_exception", error=str(exc))
        _report_error(
            ErrorResponse(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
                details={"error": str(exc)} if settings.debug else None
            ),
            args.json,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
