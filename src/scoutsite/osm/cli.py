"""
osm-report - print one OSM report as JSON.

Handy for checking credentials and seeing what the upstream returns
before wiring a page to it.

    osm-report programme-summary --section 1 --term 1
    osm-report badge-cloud --section 1 --term 1 --section-type scouts --mock
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from .config import load_config_from_env
from .errors import OSMApiError
from .factory import AnyOSMClient, create_client


def setup_logging(log_level: str) -> logging.Logger:
    logger = logging.getLogger("scoutsite")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stdout is reserved for the report itself
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.setLevel(logger.level)
    logger.addHandler(ch)

    return logger


def _require(args: argparse.Namespace, *names: str) -> None:
    missing = [f"--{n.replace('_', '-')}" for n in names if not getattr(args, n)]
    if missing:
        raise SystemExit(f"{args.report} requires {', '.join(missing)}")


REPORTS: Dict[str, Callable[[AnyOSMClient, argparse.Namespace], Any]] = {}


def _report(name: str, *required: str):
    def register(fn: Callable[[AnyOSMClient, argparse.Namespace], Any]):
        def run(client: AnyOSMClient, args: argparse.Namespace) -> Any:
            _require(args, *required)
            return fn(client, args)

        REPORTS[name] = run
        return fn

    return register


@_report("startup")
def _startup(client, args):
    return client.get_startup_data()


@_report("members", "section", "term")
def _members(client, args):
    return client.get_member_list(sectionid=args.section, termid=args.term)


@_report("member", "section", "scout", "term")
def _member(client, args):
    return client.get_individual_member(
        sectionid=args.section, scoutid=args.scout, termid=args.term
    )


@_report("patrols", "section", "term")
def _patrols(client, args):
    return client.get_patrols(sectionid=args.section, termid=args.term)


@_report("census", "section", "term")
def _census(client, args):
    return client.get_census_details(sectionid=args.section, termid=args.term)


@_report("flexi-records", "section")
def _flexi(client, args):
    return client.get_flexi_records(sectionid=args.section)


@_report("transfers", "section", "mode")
def _transfers(client, args):
    return client.get_member_transfers(mode=args.mode, section_id=args.section)


@_report("deletable-members", "section")
def _deletable(client, args):
    return client.get_deletable_members(args.section)


@_report("programme-summary", "section", "term")
def _programme_summary(client, args):
    return client.get_programme_summary(sectionid=args.section, termid=args.term)


@_report("badge-cloud", "section", "term", "section_type")
def _badge_cloud(client, args):
    return client.get_badge_tag_cloud(
        sectionid=args.section, termid=args.term, section=args.section_type
    )


@_report("risk-categories", "section")
def _risk(client, args):
    return client.get_risk_assessment_categories(args.section)


@_report("programme-detail", "section", "term", "evening")
def _programme_detail(client, args):
    return client.get_programme_detail(
        sectionid=args.section, termid=args.term, eveningid=args.evening
    )


@_report("attachments", "section", "record", "evening")
def _attachments(client, args):
    return client.get_programme_attachments(
        section_id=args.section, id=args.record, evening_id=args.evening
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="osm-report", description="Fetch one OSM report as JSON.")
    p.add_argument("report", choices=sorted(REPORTS))
    p.add_argument("--section", help="Section id")
    p.add_argument("--term", help="Term id")
    p.add_argument("--scout", help="Scout id (member report)")
    p.add_argument("--evening", help="Evening id (programme detail / attachments)")
    p.add_argument("--record", help="Record id (attachments)")
    p.add_argument("--mode", help="Transfer mode (transfers report)")
    p.add_argument(
        "--section-type",
        choices=["squirrels", "beavers", "cubs", "scouts", "explorers"],
        help="Section type (badge-cloud report)",
    )
    p.add_argument("--mock", action="store_true", help="Use canned data, no network")
    p.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ERROR")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        env = dict(os.environ)
        if args.mock:
            env["USE_MOCK_DATA"] = "true"
        config = load_config_from_env(env)
        if args.mock:
            # No point sleeping in a one-shot command
            config = dataclasses.replace(config, mock_delay=0.0)

        client = create_client(config)
        try:
            result = REPORTS[args.report](client, args)
            rate_limit = client.get_rate_limit_info()
        finally:
            client.close()
    except OSMApiError as e:
        logger.error(f"{e.kind.value}: {e.message}")
        return 1

    if isinstance(result, BaseModel):
        result = result.model_dump(mode="json")
    print(json.dumps(result, indent=2, ensure_ascii=False))

    if rate_limit is not None:
        logger.info(
            f"Rate limit: {rate_limit.remaining}/{rate_limit.limit} remaining, "
            f"resets {rate_limit.reset or 'unknown'}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
