#!/usr/bin/env python
"""
Link federal parks to their crowd-sourced (Wikidata) counterparts.

Reads FederalPark and CrowdPark nodes from Neo4j, links them by name and
location similarity, and upserts (:FederalPark)-[:SAME_AS]->(:CrowdPark)
relationships.

Usage:
    python scripts/link_parks.py                       # Dry run
    python scripts/link_parks.py --execute             # Persist links
    python scripts/link_parks.py --threshold 0.7 --max-distance-km 50 --execute
"""

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from park_graph.cli import (
    add_execute_argument,
    add_linking_arguments,
    get_driver_and_database,
    print_dry_run_header,
    print_execute_header,
    setup_logging,
    verify_neo4j_connection,
)
from park_graph.constants import SAMPLE_MATCHES_SHOWN, UNMATCHED_PARKS_SHOWN
from park_graph.logging import add_json_run_log, log_run_complete
from park_graph.neo4j import create_park_constraints
from park_linking.entity_resolution import (
    LinkingConfig,
    explain_link,
    link_records,
    summarize_links,
)
from park_linking.entity_resolution.report import format_explanation
from park_linking.graph import (
    LinkPersistenceError,
    Neo4jLinkPersister,
    fetch_crowd_parks,
    fetch_federal_parks,
)


def main():
    parser = argparse.ArgumentParser(
        description="Link federal parks to crowd-sourced parks by name and location"
    )
    add_execute_argument(parser)
    add_linking_arguments(parser)
    parser.add_argument(
        "--json-log-dir",
        type=Path,
        default=None,
        help="Also write a JSON-lines run log to this directory",
    )
    args = parser.parse_args()

    logger = setup_logging("link_parks", execute=args.execute)
    if args.json_log_dir:
        log_file = add_json_run_log(logger, args.json_log_dir, "link_parks")
        logger.info(f"JSON run log: {log_file}")

    # Flags override PARK_LINK_* settings
    try:
        config = LinkingConfig.from_env().with_overrides(
            threshold=args.threshold, max_distance_km=args.max_distance_km
        )
        config.validate()
    except ValueError as e:
        logger.error(f"Invalid linking configuration: {e}")
        sys.exit(2)

    title = "Park Linking"
    if args.execute:
        print_execute_header(title, logger)
    else:
        print_dry_run_header(title, logger)

    driver, database = get_driver_and_database(logger)

    try:
        if not verify_neo4j_connection(driver, database, logger):
            sys.exit(1)

        logger.info("Fetching parks from Neo4j...")
        federal_parks = fetch_federal_parks(driver, database=database)
        crowd_parks = fetch_crowd_parks(driver, database=database)
        logger.info(f"  Federal parks: {len(federal_parks):,}")
        logger.info(f"  Crowd parks:   {len(crowd_parks):,}")

        if not federal_parks or not crowd_parks:
            logger.warning("No parks to link. Load both park sources first.")
            return

        logger.info(
            f"Linking parks (threshold={config.threshold}, "
            f"max_distance_km={config.max_distance_km})..."
        )
        start = time.time()

        with tqdm(total=len(federal_parks), desc="Linking parks", unit="park") as bar:

            def on_progress(progress):
                bar.set_postfix(matched=progress.matched, park=progress.current_name[:30])
                bar.update(1)

            links = link_records(
                federal_parks,
                crowd_parks,
                threshold=config.threshold,
                on_progress=on_progress,
                max_distance_km=config.max_distance_km,
                weights=config.weights,
            )

        summary = summarize_links(federal_parks, crowd_parks, links, time.time() - start)
        logger.info(f"✓ Found {summary.linked:,} matches")

        if links:
            federal_by_id = {p.id: p for p in federal_parks}
            crowd_by_id = {p.id: p for p in crowd_parks}
            logger.info("Sample matches:")
            for link in links[:SAMPLE_MATCHES_SHOWN]:
                explanation = explain_link(
                    link, federal_by_id[link.source_a_id], crowd_by_id[link.source_b_id]
                )
                logger.info(format_explanation(explanation))

        if summary.unmatched:
            logger.info(f"⚠ {len(summary.unmatched)} federal parks without a match:")
            for park in summary.unmatched[:UNMATCHED_PARKS_SHOWN]:
                logger.info(f"  - {park.name}")
            if len(summary.unmatched) > UNMATCHED_PARKS_SHOWN:
                logger.info(f"  ... and {len(summary.unmatched) - UNMATCHED_PARKS_SHOWN} more")

        if not args.execute:
            logger.info("DRY RUN - no links saved. Use --execute to persist them.")
        else:
            create_park_constraints(driver, database=database, logger=logger)
            logger.info("Saving links to Neo4j...")
            try:
                result = Neo4jLinkPersister(driver, database=database).persist(links)
            except LinkPersistenceError as e:
                logger.error(f"✗ Linking failed: {e}")
                sys.exit(1)
            logger.info(f"  Links written: {result.inserted:,}")

        logger.info("=" * 70)
        logger.info("Linking Summary:")
        logger.info(f"  Federal parks processed: {summary.federal_parks:,}")
        logger.info(f"  Crowd parks available:   {summary.crowd_parks:,}")
        logger.info(f"  Links found:             {summary.linked:,}")
        logger.info(f"  Match rate:              {summary.match_rate * 100:.1f}%")
        logger.info(f"  Duration:                {summary.duration_s:.2f}s")
        logger.info("=" * 70)
        log_run_complete(
            logger,
            summary.to_dict(),
            script="link_parks",
            database=database,
            threshold=config.threshold,
            max_distance_km=config.max_distance_km,
        )

    finally:
        driver.close()


if __name__ == "__main__":
    main()
