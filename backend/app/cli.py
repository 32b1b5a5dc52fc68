"""
Business Profile Validation — command-line tool.

Usage: profile-validator <command> [options]
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from app.core.config import settings
from app.core.constants import PolicyName
from app.validation.errors import ValidationEngineError


# ═══════════════════════════════════════════════════════════
#  Console output
# ═══════════════════════════════════════════════════════════

class ColorFormatter(logging.Formatter):
    """Console formatter with ANSI colors and level symbols."""

    COLORS = {
        "INFO": "\033[96m",        # Cyan
        "SUCCESS": "\033[92m",     # Green
        "WARNING": "\033[93m",     # Yellow
        "ERROR": "\033[91m",       # Red
        "CRITICAL": "\033[91m\033[1m",  # Bold Red
        "DEBUG": "\033[94m",       # Blue
        "HEADER": "\033[95m",      # Magenta
        "BOLD": "\033[1m",
        "RESET": "\033[0m",
    }

    SYMBOLS = {
        "INFO": "→",
        "SUCCESS": "✓",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "☠",
        "DEBUG": "•",
        "STEP": "▶",
    }

    MARKERS = ("SUCCESS", "WARNING", "ERROR", "STEP")

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.platform != "win32"

    def _colorize(self, text: str, color_name: str) -> str:
        if not self.use_colors:
            return text
        color = self.COLORS.get(color_name, "")
        return f"{color}{text}{self.COLORS['RESET']}" if color else text

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()

        symbol, color = self.SYMBOLS.get(record.levelname, ""), record.levelname
        for marker in self.MARKERS:
            tag = f"[{marker}] "
            if msg.startswith(tag):
                msg = msg[len(tag):]
                symbol = self.SYMBOLS[marker]
                color = "INFO" if marker == "STEP" else marker
                break

        if symbol and not msg.startswith(("===", " ")):
            msg = f"{symbol} {msg}"

        if msg.startswith("==="):
            return self._colorize(msg, "HEADER")
        return self._colorize(msg, color)


logger = logging.getLogger("profile_validator.cli")


def _setup_console() -> None:
    """Attach a single coloured stderr handler to the CLI logger."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter(use_colors=sys.stderr.isatty()))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


# ═══════════════════════════════════════════════════════════
#  Commands
# ═══════════════════════════════════════════════════════════

def _option(opts: List[str], name: str) -> Optional[str]:
    prefix = f"--{name}="
    for o in opts:
        if o.startswith(prefix):
            return o[len(prefix):]
    return None


def _headers(opts: List[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for o in opts:
        if o.startswith("--header="):
            name, sep, value = o[len("--header="):].partition("=")
            if not sep or not name:
                raise ValueError(f"Header must look like NAME=VALUE, got '{o}'")
            headers[name] = value
    return headers


def serve(opts: List[str]) -> int:
    """Run the API under uvicorn."""
    import uvicorn

    port = int(_option(opts, "port") or settings.PORT)
    host = _option(opts, "host") or settings.HOST
    logger.info(f"[STEP] Serving on {host}:{port} (env={settings.APP_ENV})")
    uvicorn.run("app.main:app", host=host, port=port, log_config=None)
    return 0


def check(opts: List[str]) -> int:
    """Validate a JSON document from disk against one policy."""
    from app.api.schemas.validation import verdict_to_body
    from app.core.logging import setup_logging
    from app.validation.service import build_services

    files = [o for o in opts if not o.startswith("--")]
    if len(files) != 1:
        logger.error("[ERROR] check needs exactly one FILE argument")
        return 2

    policy = _option(opts, "policy") or PolicyName.USER
    path = Path(files[0])
    try:
        document: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(f"[ERROR] Cannot read {path}: {exc}")
        return 2

    setup_logging("WARNING", json_output=settings.LOG_JSON)
    services = build_services(settings)
    if policy not in services:
        logger.error(f"[ERROR] Unknown policy '{policy}' (choose from {', '.join(sorted(services))})")
        return 2

    verdict = services[policy].check(document, _headers(opts))
    print(json.dumps(verdict_to_body(verdict), indent=2))

    if verdict.ok:
        logger.info(f"[SUCCESS] {path} is valid")
        return 0
    for error in verdict.errors:
        logger.warning(f"  {error}")
    logger.error(f"[ERROR] {path} failed validation ({len(verdict.errors)} errors)")
    return 1


def rules(opts: List[str]) -> int:
    """Print the active rule table for one policy."""
    from app.core.logging import setup_logging
    from app.validation.service import build_services

    setup_logging("WARNING", json_output=settings.LOG_JSON)
    policy = _option(opts, "policy") or PolicyName.USER
    services = build_services(settings)
    if policy not in services:
        logger.error(f"[ERROR] Unknown policy '{policy}'")
        return 2

    service = services[policy]
    logger.info(f"=== Rules for '{policy}' ===")
    for ident in service.policy.identifiers:
        print(f"required  {ident.key:<10} {ident.source}:{ident.field}")
    for rule in service.validator.rules:
        print(f"{rule.check or 'custom':<9} {rule.path:<45} {rule.message}")
    return 0


# ═══════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════

USAGE = """
Business Profile Validation
══════════════════════════════════════════════════

Usage: profile-validator <command> [options]

Commands:
    serve           Run the HTTP API (--port=N, --host=H; defaults from PORT/HOST)
    check FILE      Validate a JSON document offline
                      --policy=user|user_product   (default: user)
                      --header=NAME=VALUE          (repeatable)
    rules           Show the active rule table (--policy=...)

Examples:
    profile-validator serve --port=8080
    profile-validator check profile.json
    profile-validator check profile.json --policy=user_product --header=productId=p-1
"""

COMMANDS = {
    "serve": serve,
    "check": check,
    "rules": rules,
}


def main(argv: Optional[List[str]] = None) -> None:
    _setup_console()
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    command, opts = args[0], args[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        logger.error(f"Unknown command: {command}")
        print(USAGE)
        sys.exit(2)

    try:
        sys.exit(handler(opts))
    except (ValidationEngineError, ValueError) as exc:
        logger.error(f"Operation failed: {exc}")
        sys.exit(2)


if __name__ == "__main__":
    main()
