import argparse
import logging
import sys

from financial.config import settings
from financial.logging import configure_logging

log = logging.getLogger("financial.cli")


def cmd_init_db(args):
    from financial.main import _create_tables

    settings.CREATE_TABLES = True
    _create_tables()
    log.info("schema ready at %s", settings.DATABASE_URL)
    return 0


def cmd_serve(args):
    import uvicorn

    uvicorn.run(
        "financial.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="financial", description="Finance tracker backend")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("init-db", help="Create the database schema")
    p.set_defaults(func=cmd_init_db)

    p = sub.add_parser("serve", help="Run the API with uvicorn")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true")
    p.set_defaults(func=cmd_serve)
    return ap


def main(argv=None) -> int:
    configure_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
