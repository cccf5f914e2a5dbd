#!/usr/bin/env python
"""
Report on SAME_AS links between federal and crowd-sourced parks.

Usage:
    python scripts/check_park_links.py
    python scripts/check_park_links.py --limit 20
"""

import argparse
import sys

from park_graph.cli import get_driver_and_database, setup_logging, verify_neo4j_connection
from park_linking.graph import count_park_links, sample_park_links


def main():
    parser = argparse.ArgumentParser(description="Check park links in Neo4j")
    parser.add_argument("--limit", type=int, default=5, help="Number of sample links to show")
    args = parser.parse_args()

    logger = setup_logging("check_park_links")
    driver, database = get_driver_and_database(logger)

    try:
        if not verify_neo4j_connection(driver, database, logger):
            sys.exit(1)

        total = count_park_links(driver, database=database)
        logger.info(f"Total park links: {total:,}")

        if total == 0:
            logger.info("No park links yet. Run: python scripts/link_parks.py --execute")
            return

        logger.info("Sample links:")
        for link in sample_park_links(driver, limit=args.limit, database=database):
            logger.info(
                f"  - {link['federal_name']} ↔ {link['crowd_label']} "
                f"({link['external_id']}, {link['confidence_score'] * 100:.1f}%)"
            )
    finally:
        driver.close()


if __name__ == "__main__":
    main()
